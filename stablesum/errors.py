"""
Exception types raised by the stable summation library.

Both errors derive from ValueError so callers already guarding numeric
input with ``except ValueError`` keep working.
"""

from typing import Any, Optional


class StableSumError(ValueError):
    """Base class for errors raised by stablesum."""


class ParseError(StableSumError):
    """
    An input element could not be coerced to a number.

    Attributes:
        value: The offending element
        index: Position of the element in the input, if known
    """

    def __init__(self, value: Any, index: Optional[int] = None):
        self.value = value
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Element{where} is not a number or parsable to a number: {value!r}"
        )


class EmptyInputError(StableSumError):
    """A statistic that needs at least one data point got none."""

    def __init__(self, operation: str = "operation"):
        self.operation = operation
        super().__init__(f"{operation} requires at least one data point")
