"""
Bounds layer for bounded values.

A Bounds is the inclusive interval [lo, hi] a payload must stay within.
Both ends belong to the interval; there are no exclusive bounds.

Bounds deliberately accept lo > hi.  Such an interval contains nothing,
so any attempt to build a value inside it is rejected at construction
time rather than here.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Iterator


@dataclass(frozen=True)
class Bounds:
    """An inclusive interval [lo, hi] over any ordered numeric type."""

    lo: Any
    hi: Any

    def __iter__(self) -> Iterator[Any]:
        # Allows ``lo, hi = bounds``
        yield self.lo
        yield self.hi

    def __str__(self) -> str:
        return f"[{self.lo}, {self.hi}]"

    @property
    def is_integral(self) -> bool:
        return isinstance(self.lo, Integral) and isinstance(self.hi, Integral)

    @property
    def width(self) -> int:
        """Total number of representable integers (0 when empty)."""
        if not self.is_integral:
            raise TypeError(f"width is only defined for integer bounds, not {self}")
        return max(0, self.hi - self.lo + 1)

    def contains(self, value: Any) -> bool:
        return not (value < self.lo or value > self.hi)

    def values(self) -> range:
        """Every integer in the interval, in order."""
        if not self.is_integral:
            raise TypeError(f"cannot enumerate non-integer bounds {self}")
        return range(self.lo, self.hi + 1)


# ---------------------------------------------------------------------------
# Common bounds presets
# ---------------------------------------------------------------------------

INT8 = Bounds(lo=-128, hi=127)
INT16 = Bounds(lo=-32_768, hi=32_767)
INT32 = Bounds(lo=-(2**31), hi=2**31 - 1)
UINT8 = Bounds(lo=0, hi=255)
UINT16 = Bounds(lo=0, hi=65_535)
PERCENT = Bounds(lo=0, hi=100)
UNIT = Bounds(lo=0.0, hi=1.0)

# Small bounds useful for exhaustive verification
TINY = Bounds(lo=-8, hi=7)
