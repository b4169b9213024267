"""
Stable Summation Library

Numerically stable aggregate statistics over sequences of real numbers,
built on Kahan-Babuska compensated summation.

This library provides:
- Compensated summation of numbers and numeric strings
- Mean, sum of nth-power deviations and population variance
- Order-preserving compensated reductions over PyTorch tensors
"""

import logging

from .errors import StableSumError, ParseError, EmptyInputError
from .config import Settings, get_settings, reload_settings, configure_logging
from .coercion import coerce_number, coerce_values
from .core import (
    babuska_add,
    babuska_sum,
    babuska_add_tensor,
    stable_sum_dim,
    compensated_dot_product
)
from .algorithms import (
    stable_sum,
    naive_sum,
    mean,
    sum_nth_power_deviations,
    variance,
    variance_dim
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "Stable Summation Contributors"

__all__ = [
    "StableSumError",
    "ParseError",
    "EmptyInputError",
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    "coerce_number",
    "coerce_values",
    "babuska_add",
    "babuska_sum",
    "babuska_add_tensor",
    "stable_sum_dim",
    "compensated_dot_product",
    "stable_sum",
    "naive_sum",
    "mean",
    "sum_nth_power_deviations",
    "variance",
    "variance_dim"
]
