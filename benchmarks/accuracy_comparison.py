#!/usr/bin/env python3
"""
Accuracy comparison benchmarks for stable summation.

This script measures the error of naive, NumPy and compensated summation
against an exact rational reference across challenging test cases.
"""

import time
from fractions import Fraction
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd
import sys
sys.path.append('..')

from stablesum import naive_sum, stable_sum, variance


class AccuracyBenchmark:
    """
    Accuracy benchmark suite for summation algorithms.
    """

    def __init__(self):
        self.algorithms = {
            'naive': naive_sum,
            'numpy': lambda x: float(np.sum(x)),
            'stable': stable_sum,
        }

    def generate_test_case(self, case_type: str, size: int) -> np.ndarray:
        """
        Generate float64 test data of the given kind.

        Args:
            case_type: Type of test case
            size: Array size

        Returns:
            Test array
        """
        rng = np.random.default_rng(42)

        if case_type == 'alternating_large_small':
            # [1e16, 1, -1e16, 1e16, 1, -1e16, ...]
            pattern = np.array([1e16, 1.0, -1e16])
            data = np.resize(pattern, size)

        elif case_type == 'harmonic_series':
            data = 1.0 / np.arange(1, size + 1, dtype=np.float64)

        elif case_type == 'pathological_cancellation':
            # Pattern: [1, -1+eps, 1, -1+eps, ...]
            epsilon = np.finfo(np.float64).eps * 10
            data = np.zeros(size)
            data[::2] = 1.0
            data[1::2] = -1.0 + epsilon

        elif case_type == 'ill_conditioned':
            exponents = rng.uniform(-10, 10, size)
            signs = rng.choice([-1.0, 1.0], size)
            data = signs * 10.0 ** exponents

        elif case_type == 'random_normal':
            data = rng.normal(0, 1, size)

        else:
            raise ValueError(f"Unknown test case type: {case_type}")

        return data

    @staticmethod
    def exact_sum(data: np.ndarray) -> Fraction:
        total = Fraction(0)
        for v in data.tolist():
            total += Fraction(v)
        return total

    def run_single_benchmark(self, case_type: str, size: int) -> Dict:
        """
        Run every algorithm on one test case.

        Returns:
            Dictionary with per-algorithm absolute errors and timings
        """
        data = self.generate_test_case(case_type, size)
        exact = self.exact_sum(data)

        row = {'case_type': case_type, 'size': size, 'exact': float(exact)}
        for name, func in self.algorithms.items():
            start = time.perf_counter()
            result = func(data)
            row[f'{name}_time'] = time.perf_counter() - start
            row[f'{name}_abs_error'] = float(abs(Fraction(result) - exact))

        return row

    def run_comprehensive_benchmark(self, sizes: Tuple[int, ...] = (100, 1000, 10000)) -> pd.DataFrame:
        case_types = [
            'alternating_large_small',
            'harmonic_series',
            'pathological_cancellation',
            'ill_conditioned',
            'random_normal',
        ]

        rows: List[Dict] = []
        for case_type in case_types:
            for size in sizes:
                rows.append(self.run_single_benchmark(case_type, size))

        return pd.DataFrame(rows)

    def analyze_results(self, df: pd.DataFrame):
        """Print a summary of median errors per case."""
        error_cols = [f'{name}_abs_error' for name in self.algorithms]
        summary = df.groupby('case_type')[error_cols].median()

        print("\nMedian absolute error by test case:")
        print(summary.to_string(float_format=lambda v: f"{v:.3e}"))

        wins = (df['stable_abs_error'] <= df['naive_abs_error']).mean() * 100
        print(f"\nStable error <= naive error in {wins:.0f}% of cases")


def main():
    """Run the complete accuracy benchmark suite."""
    print("STABLE SUMMATION LIBRARY - ACCURACY BENCHMARK")
    print("=" * 60)

    benchmark = AccuracyBenchmark()
    results_df = benchmark.run_comprehensive_benchmark()

    results_df.to_csv('accuracy_benchmark_results.csv', index=False)
    print(f"\nResults saved to accuracy_benchmark_results.csv")

    benchmark.analyze_results(results_df)

    shifted = 1e9 + np.arange(1, 7, dtype=np.float64)
    print(f"\nvariance of 1e9 + [1..6]: {variance(shifted)} (exact 2.9166...)")

    print("\n" + "=" * 60)
    print("Accuracy benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
