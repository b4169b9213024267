#!/usr/bin/env python3
"""
Pytest configuration and fixtures for stable summation tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
import torch
from fractions import Fraction
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stablesum import config as stablesum_config


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep cached settings from leaking between tests."""
    monkeypatch.delenv("STABLESUM_TENSOR_DTYPE", raising=False)
    monkeypatch.delenv("STABLESUM_LOG_LEVEL", raising=False)
    stablesum_config.reload_settings()
    yield
    stablesum_config._settings = None


@pytest.fixture
def simple_data():
    """Simple test data for basic functionality tests."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def cancellation_triples():
    """Repeated [big, 1, -big] triples whose naive sum loses every 1."""
    return [1e16, 1.0, -1e16] * 1000


@pytest.fixture
def ill_conditioned_data():
    """Ill-conditioned data spanning many orders of magnitude."""
    rng = np.random.default_rng(42)
    n = 1000

    exponents = rng.uniform(-10, 10, n)
    signs = rng.choice([-1.0, 1.0], n)
    return (signs * 10.0 ** exponents).tolist()


@pytest.fixture
def harmonic_series_data():
    """Harmonic series data for accuracy testing."""
    n = 1000
    return (1.0 / np.arange(1, n + 1)).tolist()


@pytest.fixture(params=[torch.float32, torch.float64])
def torch_dtype(request):
    """Parameterized fixture for accumulator dtypes."""
    return request.param


class AccuracyChecker:
    """Utility class for checking numerical accuracy."""

    @staticmethod
    def exact_sum(values) -> Fraction:
        """Exact rational sum of the binary values."""
        total = Fraction(0)
        for v in values:
            total += Fraction(float(v))
        return total

    @staticmethod
    def abs_error(computed: float, values) -> Fraction:
        """Absolute error of a float result against the exact sum."""
        return abs(Fraction(computed) - AccuracyChecker.exact_sum(values))

    @staticmethod
    def naive_error_bound(values) -> float:
        """Classical bound (n - 1) * eps * sum(|x|) for left-to-right addition."""
        eps = np.finfo(np.float64).eps
        magnitude = float(sum(Fraction(abs(float(v))) for v in values))
        return (len(values) - 1) * eps * magnitude


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Mark long-running tests as slow."""
    for item in items:
        if "large" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)
