"""Range-checked numeric values."""

from bounded_value.bounds import (
    Bounds,
    INT8,
    INT16,
    INT32,
    PERCENT,
    TINY,
    UINT8,
    UINT16,
    UNIT,
)
from bounded_value.errors import RangeError, RangeMismatchError, RangeViolationError
from bounded_value.value import BoundedValue, bounded

__all__ = [
    "Bounds",
    "BoundedValue",
    "bounded",
    "RangeError",
    "RangeMismatchError",
    "RangeViolationError",
    "INT8",
    "INT16",
    "INT32",
    "PERCENT",
    "TINY",
    "UINT8",
    "UINT16",
    "UNIT",
]

__version__ = "0.1.0"
