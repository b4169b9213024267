"""
Test suite for the Stable Summation Library.

Test Structure:
- test_core.py: Tests for the summation kernels in stablesum.core
- test_algorithms.py: Tests for stable_sum, mean and variance
- test_coercion.py: Tests for input coercion and error types
- test_config.py: Tests for settings and logging setup
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=stablesum

    # Run only fast tests
    pytest -m "not slow"
"""

__version__ = "1.0.0"
