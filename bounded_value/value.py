"""
Range-checked numeric values.

A BoundedValue carries its payload together with the inclusive bounds
the payload must stay within.  The bounds are checked when the value is
built and again after every arithmetic operation:

  1. Binary operations first require both operands to carry the same
     bounds (RangeMismatchError otherwise).
  2. The payload's own operator computes the raw result.  Overflow,
     NaN and ZeroDivisionError behave exactly as for the bare payload.
  3. The raw result is re-validated against the shared bounds
     (RangeViolationError otherwise).  Nothing is ever clamped.

Equality and ordering are two separate relations.  ``==`` compares the
payload and both bounds, while ``<`` and friends compare payloads only,
so ``a <= b and a >= b`` does not imply ``a == b``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from bounded_value.bounds import Bounds
from bounded_value.errors import RangeMismatchError, RangeViolationError
from bounded_value.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BoundedValue(Generic[T]):
    """A payload that is guaranteed to satisfy ``lower <= value <= upper``."""

    value: T
    lower: T
    upper: T

    def __post_init__(self) -> None:
        if self.value < self.lower or self.value > self.upper:
            logger.debug(
                "rejected %r outside [%r, %r]", self.value, self.lower, self.upper
            )
            raise RangeViolationError(self.value, self.lower, self.upper)

    # -- accessors ----------------------------------------------------------

    def into_raw(self) -> T:
        """Yield the payload."""
        return self.value

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.lower, self.upper)

    def with_bounds(self, lower: T | Bounds, upper: T | None = None) -> BoundedValue[T]:
        """Re-validate the payload against a new pair of bounds.

        Accepts either ``with_bounds(lo, hi)`` or ``with_bounds(Bounds(...))``.
        """
        if isinstance(lower, Bounds):
            if upper is not None:
                raise TypeError("with_bounds() takes a Bounds or a lower/upper pair")
            lower, upper = lower
        elif upper is None:
            raise TypeError("with_bounds() missing upper bound")
        return BoundedValue(self.value, lower, upper)

    # -- arithmetic ---------------------------------------------------------

    def _combine(self, other: BoundedValue[T], op: Callable[[Any, Any], Any]) -> BoundedValue[T]:
        if self.lower != other.lower or self.upper != other.upper:
            logger.debug("mismatched bounds %s and %s", self.bounds, other.bounds)
            raise RangeMismatchError(self.bounds, other.bounds)
        return BoundedValue(op(self.value, other.value), self.lower, self.upper)

    def add(self, other: BoundedValue[T]) -> BoundedValue[T]:
        return self._combine(other, operator.add)

    def sub(self, other: BoundedValue[T]) -> BoundedValue[T]:
        return self._combine(other, operator.sub)

    def mul(self, other: BoundedValue[T]) -> BoundedValue[T]:
        return self._combine(other, operator.mul)

    def div(self, other: BoundedValue[T]) -> BoundedValue[T]:
        """True division; ``int / int`` yields a float payload, as in Python.

        This is not truncating integer division: ``7 / 2`` is 3.5, not 3.
        """
        return self._combine(other, operator.truediv)

    def floordiv(self, other: BoundedValue[T]) -> BoundedValue[T]:
        """Floor division with the payload's ``//``.

        Rounds toward negative infinity for ints and floats, so ``-7 // 2``
        is -4, where truncating division would give -3.
        """
        return self._combine(other, operator.floordiv)

    def negate(self) -> BoundedValue[T]:
        """Negate the payload, keeping the bounds unchanged.

        The bounds are NOT mirrored: ``BoundedValue(1, 0, 1).negate()``
        raises because -1 is below 0.  Use symmetric bounds when negation
        must always succeed.
        """
        return BoundedValue(-self.value, self.lower, self.upper)

    def __add__(self, other: object) -> BoundedValue[T]:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> BoundedValue[T]:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> BoundedValue[T]:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> BoundedValue[T]:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.div(other)

    def __floordiv__(self, other: object) -> BoundedValue[T]:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.floordiv(other)

    def __neg__(self) -> BoundedValue[T]:
        return self.negate()

    # -- ordering (payload only) --------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value >= other.value

    # -- formatting (bounds are never shown) --------------------------------

    def __repr__(self) -> str:
        return repr(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


def bounded(value: T, bounds: Bounds | tuple[T, T]) -> BoundedValue[T]:
    """Build a BoundedValue from a payload and a ``Bounds`` or ``(lo, hi)`` pair.

    >>> bounded(1, (0, 10))
    1
    """
    lower, upper = bounds
    return BoundedValue(value, lower, upper)
