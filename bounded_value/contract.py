"""
Contract layer for bounded values.

A Contract defines the laws every BoundedValue must obey over a given
pair of bounds.  It is purely declarative - it says WHAT must be true,
not HOW; the verifier decides which payloads to feed it.

Each law is a named property with:
  - a human-readable description
  - the number of payloads it needs (drawn from the bounds)
  - a predicate ``predicate(bounds, *payloads) -> bool``
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Callable

from bounded_value.bounds import Bounds
from bounded_value.errors import RangeMismatchError, RangeViolationError
from bounded_value.value import BoundedValue


# ---------------------------------------------------------------------------
# Core contract primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Property:
    """A single verifiable law of BoundedValue."""

    name: str
    description: str
    arity: int          # how many payloads the predicate needs
    predicate: Callable[..., bool]

    def check(self, bounds: Bounds, *payloads: Any) -> bool:
        """Evaluate the law for the given bounds and payloads."""
        return self.predicate(bounds, *payloads)


@dataclass
class Contract:
    """An ordered collection of properties that together form a contract."""

    name: str
    properties: list[Property] = field(default_factory=list)

    def add(self, prop: Property) -> None:
        self.properties.append(prop)

    def extend(self, other: Contract) -> None:
        self.properties.extend(other.properties)

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)


# ---------------------------------------------------------------------------
# Predicate helpers
# ---------------------------------------------------------------------------

def _raises(exc: type[BaseException], fn: Callable[[], Any]) -> bool:
    try:
        fn()
    except exc:
        return True
    return False


def _step(x: Any) -> Any:
    """A positive step that changes ``x`` in its own arithmetic."""
    if isinstance(x, Integral):
        return 1
    return max(1, abs(x))


def _above(x: Any) -> Any:
    """A payload strictly above ``x``; the next float for floats."""
    if isinstance(x, float):
        return math.nextafter(x, math.inf)
    return x + _step(x)


def _below(x: Any) -> Any:
    """A payload strictly below ``x``; the previous float for floats."""
    if isinstance(x, float):
        return math.nextafter(x, -math.inf)
    return x - _step(x)


def _widened(bounds: Bounds) -> Bounds:
    """Bounds strictly wider on the upper side, for mismatch checks."""
    return Bounds(bounds.lo, _above(bounds.hi))


def _all_or_nothing(op: Callable[[Any, Any], Any]) -> Callable[..., bool]:
    """Law: an operation succeeds iff the raw result stays in bounds."""

    def predicate(bounds: Bounds, a: Any, b: Any) -> bool:
        lo, hi = bounds
        raw = op(a, b)
        if not bounds.contains(raw):
            return _raises(
                RangeViolationError,
                lambda: op(BoundedValue(a, lo, hi), BoundedValue(b, lo, hi)),
            )
        result = op(BoundedValue(a, lo, hi), BoundedValue(b, lo, hi))
        return result.value == raw and result.bounds == bounds

    return predicate


# ---------------------------------------------------------------------------
# Contract builders
# ---------------------------------------------------------------------------

def construction_contract() -> Contract:
    """Laws for building and re-ranging values."""
    contract = Contract(name="construction")

    contract.add(Property(
        name="accepts_in_range",
        description="new(v, lo, hi).into_raw() == v for lo <= v <= hi",
        arity=1,
        predicate=lambda bounds, v: BoundedValue(v, *bounds).into_raw() == v,
    ))

    contract.add(Property(
        name="rejects_below",
        description="a payload just below lo raises a range violation",
        arity=0,
        predicate=lambda bounds: _raises(
            RangeViolationError, lambda: BoundedValue(_below(bounds.lo), *bounds)
        ),
    ))

    contract.add(Property(
        name="rejects_above",
        description="a payload just above hi raises a range violation",
        arity=0,
        predicate=lambda bounds: _raises(
            RangeViolationError, lambda: BoundedValue(_above(bounds.hi), *bounds)
        ),
    ))

    contract.add(Property(
        name="rerange_idempotent",
        description="with_bounds(b) on a value already in b keeps it unchanged",
        arity=1,
        predicate=lambda bounds, v: (
            BoundedValue(v, *bounds).with_bounds(bounds) == BoundedValue(v, *bounds)
        ),
    ))

    contract.add(Property(
        name="rerange_round_trip",
        description="with_bounds(wider).with_bounds(original) == original",
        arity=1,
        predicate=lambda bounds, v: (
            BoundedValue(v, *bounds)
            .with_bounds(_widened(bounds))
            .with_bounds(bounds) == BoundedValue(v, *bounds)
        ),
    ))

    return contract


def arithmetic_contract() -> Contract:
    """Laws for the binary operators and negation."""
    contract = Contract(name="arithmetic")

    for name, op in [
        ("add", operator.add),
        ("sub", operator.sub),
        ("mul", operator.mul),
        ("div", operator.truediv),
        ("floordiv", operator.floordiv),
    ]:
        contract.add(Property(
            name=f"{name}_all_or_nothing",
            description=f"{name} succeeds with unchanged bounds iff the raw result is in bounds",
            arity=2,
            predicate=_all_or_nothing(op),
        ))

    contract.add(Property(
        name="mismatch_rejected",
        description="operands with different bounds always raise a range mismatch",
        arity=2,
        predicate=lambda bounds, a, b: _raises(
            RangeMismatchError,
            lambda: BoundedValue(a, *bounds) + BoundedValue(b, *_widened(bounds)),
        ),
    ))

    contract.add(Property(
        name="negate_keeps_bounds",
        description="-v is validated against the original, unmirrored bounds",
        arity=1,
        predicate=lambda bounds, v: (
            (-BoundedValue(v, *bounds)).bounds == bounds
            if bounds.contains(-v)
            else _raises(RangeViolationError, lambda: -BoundedValue(v, *bounds))
        ),
    ))

    return contract


def relation_contract() -> Contract:
    """Laws for ordering and equality, which are defined independently."""
    contract = Contract(name="relations")

    contract.add(Property(
        name="ordering_ignores_bounds",
        description="a < b compares payloads only, even across different bounds",
        arity=2,
        predicate=lambda bounds, a, b: (
            (BoundedValue(a, *bounds) < BoundedValue(b, *_widened(bounds))) == (a < b)
        ),
    ))

    contract.add(Property(
        name="equality_structural",
        description="a == b requires equal payloads and equal bounds",
        arity=2,
        predicate=lambda bounds, a, b: (
            (BoundedValue(a, *bounds) == BoundedValue(b, *bounds)) == (a == b)
            and BoundedValue(a, *bounds) != BoundedValue(a, *_widened(bounds))
        ),
    ))

    return contract


def full_contract() -> Contract:
    """Every law of BoundedValue."""
    contract = Contract(name="bounded_value")
    for part in (construction_contract(), arithmetic_contract(), relation_contract()):
        contract.extend(part)
    return contract
