#!/usr/bin/env python3
"""
Basic usage examples for the Stable Summation Library.

This script demonstrates compensated summation, input coercion and the
variance routines built on them.
"""

import numpy as np
import torch

import sys
sys.path.append('..')

from stablesum import (
    stable_sum,
    naive_sum,
    variance,
    stable_sum_dim,
    variance_dim,
    configure_logging,
    ParseError,
    EmptyInputError
)


def demonstrate_precision_loss():
    """Show how naive summation loses precision."""
    print("=" * 60)
    print("DEMONSTRATION: Precision Loss in Naive Summation")
    print("=" * 60)

    data = [1e16, 1.0, -1e16]

    print(f"Test data: {data}")
    print("Expected result: 1.0")
    print()
    print(f"Naive sum result:  {naive_sum(data)}")
    print(f"Stable sum result: {stable_sum(data)}")
    print()


def demonstrate_coercion():
    """Numeric strings are accepted, garbage is not."""
    print("=" * 60)
    print("DEMONSTRATION: Input Coercion")
    print("=" * 60)

    print(f"stable_sum(['1.5', ' 2.5 ']) = {stable_sum(['1.5', ' 2.5 '])}")
    print(f"stable_sum(['1', 'nan'])     = {stable_sum(['1', 'nan'])}")

    try:
        stable_sum(["1", "a", "3"])
    except ParseError as e:
        print(f"ParseError: {e}")
    print()


def demonstrate_variance():
    """Population variance, including data with a large offset."""
    print("=" * 60)
    print("DEMONSTRATION: Population Variance")
    print("=" * 60)

    print(f"variance([1..6])       = {variance([1, 2, 3, 4, 5, 6])}")
    print(f"variance(1e9 + [1..6]) = {variance(1e9 + np.arange(1, 7))}")

    try:
        variance([])
    except EmptyInputError as e:
        print(f"EmptyInputError: {e}")
    print()


def demonstrate_tensor_reductions():
    """Column-wise compensated reductions on tensors."""
    print("=" * 60)
    print("DEMONSTRATION: Tensor Reductions")
    print("=" * 60)

    data = torch.tensor([
        [1e16, 1.0],
        [1.0, 2.0],
        [-1e16, 3.0],
    ], dtype=torch.float64)

    print(f"torch.sum(dim=0):      {torch.sum(data, dim=0).tolist()}")
    print(f"stable_sum_dim(dim=0): {stable_sum_dim(data, dim=0).tolist()}")
    print(f"variance_dim(dim=0):   {variance_dim(data, dim=0).tolist()}")
    print()


def main():
    """Run all demonstrations."""
    configure_logging()

    print("STABLE SUMMATION LIBRARY - BASIC USAGE EXAMPLES")
    print("=" * 60)
    print()

    demonstrate_precision_loss()
    demonstrate_coercion()
    demonstrate_variance()
    demonstrate_tensor_reductions()

    print("=" * 60)
    print("All demonstrations completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
