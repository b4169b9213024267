"""
Input coercion for the summation and moment routines.

Every public routine funnels its input through :func:`coerce_values` before
doing any arithmetic, so the algorithms only ever see Python floats.
"""

import logging
import math
from typing import Any, Iterable, List, Optional

import numpy as np
import torch

from .errors import ParseError

logger = logging.getLogger(__name__)


def coerce_number(value: Any, index: Optional[int] = None) -> float:
    """
    Convert a single element to a float.

    Strings go through Python's float parser, so surrounding whitespace,
    exponent notation, ``inf`` and ``nan`` are accepted. Booleans and None
    are rejected even though ``float()`` would take some of them. Numbers too
    large for a double, such as huge ints, become signed infinity.

    Args:
        value: Element to convert
        index: Position of the element, used in the error message

    Returns:
        The element as a float (possibly NaN or infinite)

    Raises:
        ParseError: If the element has no numeric interpretation
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        raise ParseError(value, index)

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError) as e:
        logger.debug("Cannot coerce %r at index %s: %s", value, index, e)
        raise ParseError(value, index) from e


def coerce_values(values: Iterable[Any]) -> List[float]:
    """
    Eagerly coerce a whole input sequence to a list of floats.

    Args:
        values: List, tuple, iterable, NumPy array or PyTorch tensor

    Returns:
        New list of floats in input order; the input is not modified

    Raises:
        ParseError: On the first element that cannot be coerced, or if
            ``values`` is a single string rather than a sequence
    """
    if isinstance(values, (str, bytes)):
        raise ParseError(values)

    if isinstance(values, torch.Tensor):
        if not (values.is_complex() or values.dtype == torch.bool):
            return values.detach().cpu().double().flatten().tolist()
        values = values.detach().cpu().flatten().tolist()
    elif isinstance(values, np.ndarray):
        if np.issubdtype(values.dtype, np.integer) or np.issubdtype(values.dtype, np.floating):
            return values.astype(np.float64).ravel().tolist()
        values = values.ravel().tolist()

    return [coerce_number(v, i) for i, v in enumerate(values)]
