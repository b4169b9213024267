"""
Core Kahan-Babuska summation kernels.

This module contains the single-step update and the linear scans built on it,
for plain Python floats and element-wise for PyTorch tensors. Input coercion
happens in :mod:`stablesum.coercion`; everything here assumes numeric input.
"""

from typing import Optional, Sequence, Tuple, Union

import numpy as np
import torch

from .config import get_settings


def babuska_add(total: float, value: float, correction: float = 0.0) -> Tuple[float, float]:
    """
    Single-step Kahan-Babuska addition.

    The rounding error of ``total + value`` is recovered from whichever
    operand has the larger magnitude and added to the running correction.

    Args:
        total: Running sum
        value: Value to add
        correction: Current correction term

    Returns:
        Tuple of (new_total, new_correction)
    """
    transition = total + value
    if abs(total) >= abs(value):
        correction += (total - transition) + value
    else:
        correction += (value - transition) + total
    return transition, correction


def babuska_sum(values: Sequence[float]) -> float:
    """
    Compensated sum of a sequence of floats, scanned left to right.

    Args:
        values: Already-coerced floats

    Returns:
        ``total + correction`` after the scan; 0.0 for empty input
    """
    if len(values) == 0:
        return 0.0

    total = values[0]
    correction = 0.0

    for i in range(1, len(values)):
        total, correction = babuska_add(total, values[i], correction)

    return total + correction


def babuska_add_tensor(total: torch.Tensor, value: torch.Tensor,
                       correction: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Element-wise Kahan-Babuska step for tensors.

    Same update as :func:`babuska_add`, with the magnitude branch chosen
    per element.
    """
    transition = total + value
    correction = correction + torch.where(
        total.abs() >= value.abs(),
        (total - transition) + value,
        (value - transition) + total,
    )
    return transition, correction


def stable_sum_dim(tensor: Union[torch.Tensor, np.ndarray], dim: int = 0,
                   dtype: Optional[torch.dtype] = None) -> torch.Tensor:
    """
    Compensated reduction of a tensor along one dimension.

    Slices are added in index order, so the result matches running
    :func:`babuska_sum` over each fibre independently.

    Args:
        tensor: Input tensor or array
        dim: Dimension to reduce
        dtype: Accumulator dtype (default: configured tensor dtype)

    Returns:
        Tensor with ``dim`` removed
    """
    if dtype is None:
        dtype = get_settings().tensor_dtype
    x = torch.as_tensor(tensor).to(dtype).movedim(dim, 0)

    if x.shape[0] == 0:
        return torch.zeros(x.shape[1:], dtype=dtype, device=x.device)

    total = x[0].clone()
    correction = torch.zeros_like(total)

    for i in range(1, x.shape[0]):
        total, correction = babuska_add_tensor(total, x[i], correction)

    return total + correction


def compensated_dot_product(a: Union[torch.Tensor, np.ndarray, Sequence[float]],
                            b: Union[torch.Tensor, np.ndarray, Sequence[float]]) -> float:
    """
    Compute a dot product with compensated accumulation of the products.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Dot product as a float

    Raises:
        ValueError: If the shapes differ
    """
    a = torch.as_tensor(a, dtype=torch.float64)
    b = torch.as_tensor(b, dtype=torch.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vectors must have same shape: {tuple(a.shape)} vs {tuple(b.shape)}")

    products = (a * b).flatten().tolist()
    return babuska_sum(products)
