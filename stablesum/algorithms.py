"""
High-level summation and moment algorithms.

This module provides the public entry points: compensated summation of
arbitrary numeric input, and the mean and population variance built on it.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Union

import numpy as np
import torch

from .coercion import coerce_values
from .config import get_settings
from .core import babuska_sum, stable_sum_dim
from .errors import EmptyInputError

logger = logging.getLogger(__name__)

Values = Union[Iterable[Any], np.ndarray, torch.Tensor]


def _int_power(base: float, n: int) -> float:
    """Repeated multiplication; overflows to inf where ``**`` would raise."""
    result = 1.0
    for _ in range(n):
        result *= base
    return result


def stable_sum(values: Values) -> float:
    """
    Compute sum using Kahan-Babuska compensated summation.

    Args:
        values: Numbers or numeric strings, in summation order

    Returns:
        Compensated sum; 0.0 for empty input. NaN elements propagate
        into a NaN result instead of raising.

    Raises:
        ParseError: If any element cannot be coerced to a number
    """
    result = babuska_sum(coerce_values(values))
    if math.isnan(result):
        logger.debug("stable_sum produced NaN")
    return result


def naive_sum(values: Values) -> float:
    """Plain left-to-right float summation, for accuracy comparisons."""
    total = 0.0
    for value in coerce_values(values):
        total += value
    return total


def mean(values: Values) -> float:
    """
    Compute the arithmetic mean using compensated summation.

    Raises:
        EmptyInputError: If ``values`` is empty
        ParseError: If any element cannot be coerced to a number
    """
    parsed = coerce_values(values)
    if len(parsed) == 0:
        raise EmptyInputError("mean")
    return babuska_sum(parsed) / len(parsed)


def sum_nth_power_deviations(values: Values, n: int,
                             mean_value: Optional[float] = None) -> float:
    """
    Sum of ``(x - mean) ** n`` over the input, reduced with compensated summation.

    Args:
        values: Data points
        n: Non-negative integer power
        mean_value: Reference value; the mean of ``values`` when omitted

    Returns:
        Compensated sum of the power deviations

    Raises:
        ValueError: If ``n`` is not a non-negative integer
        EmptyInputError: If ``values`` is empty
        ParseError: If any element cannot be coerced to a number
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"Power must be a non-negative integer, got {n!r}")

    parsed = coerce_values(values)
    if len(parsed) == 0:
        raise EmptyInputError("sum_nth_power_deviations")

    if mean_value is None:
        mean_value = babuska_sum(parsed) / len(parsed)

    deviations: List[float] = [_int_power(x - mean_value, n) for x in parsed]
    return babuska_sum(deviations)


def variance(values: Values) -> float:
    """
    Compute the population variance using compensated summation.

    This divides by N, not N - 1; it is not the sample variance.

    Args:
        values: One or more data points

    Returns:
        Mean of squared deviations from the mean; 0.0 when all values
        are identical

    Raises:
        EmptyInputError: If ``values`` is empty
        ParseError: If any element cannot be coerced to a number
    """
    parsed = coerce_values(values)
    if len(parsed) == 0:
        raise EmptyInputError("variance")

    return sum_nth_power_deviations(parsed, 2) / len(parsed)


def variance_dim(tensor: Union[torch.Tensor, np.ndarray], dim: int = 0,
                 dtype: Optional[torch.dtype] = None) -> torch.Tensor:
    """
    Population variance of a tensor along one dimension.

    Both the mean and the sum of squared deviations are reduced with
    :func:`stable_sum_dim`.

    Args:
        tensor: Input tensor or array
        dim: Dimension to reduce
        dtype: Accumulator dtype (default: configured tensor dtype)

    Returns:
        Tensor with ``dim`` removed

    Raises:
        EmptyInputError: If the tensor is empty along ``dim``
    """
    if dtype is None:
        dtype = get_settings().tensor_dtype
    x = torch.as_tensor(tensor).to(dtype)

    n = x.shape[dim]
    if n == 0:
        raise EmptyInputError("variance_dim")

    centre = stable_sum_dim(x, dim, dtype) / n
    deviations = (x - centre.unsqueeze(dim)) ** 2
    return stable_sum_dim(deviations, dim, dtype) / n
