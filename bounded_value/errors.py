"""Errors raised when a bounded value would leave its bounds.

Every error here signals a programming mistake at the call site.
Nothing in the package catches them, retries, or clamps the payload.
"""

from __future__ import annotations

from typing import Any

from bounded_value.bounds import Bounds


class RangeError(ValueError):
    """Base class for every bounds-related failure."""


class RangeViolationError(RangeError):
    """A payload fell outside its inclusive bounds."""

    def __init__(self, value: Any, lower: Any, upper: Any):
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{value} is outside bounds [{lower}, {upper}]")

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.lower, self.upper)


class RangeMismatchError(RangeError):
    """Two operands of a binary operation carry different bounds."""

    def __init__(self, left: Bounds, right: Bounds):
        self.left = left
        self.right = right
        super().__init__(f"ranges are unequal: {left} vs {right}")
