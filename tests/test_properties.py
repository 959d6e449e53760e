"""Property-based tests using Hypothesis.

These tests check the laws of BoundedValue for *all* payloads within
bounds, with bounds that are themselves generated.  They complement the
per-operation tests by exploring the input space broadly.
"""
from __future__ import annotations

import operator

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st
from hypothesis.strategies import integers

from bounded_value import (
    BoundedValue,
    Bounds,
    INT8,
    RangeMismatchError,
    RangeViolationError,
)

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

bounded = integers(min_value=INT8.lo, max_value=INT8.hi)


@st.composite
def bounds_and_payload(draw, payloads=st.integers(min_value=-1_000, max_value=1_000)):
    """Draw (lo, hi, v) with lo <= v <= hi."""
    a, b, c = sorted(draw(payloads) for _ in range(3))
    return a, c, b


OPS = [operator.add, operator.sub, operator.mul, operator.truediv, operator.floordiv]


# ===================================================================
# CONSTRUCTION
# ===================================================================

class TestConstructionProperties:

    @given(triple=bounds_and_payload())
    def test_in_range_round_trips(self, triple):
        lo, hi, v = triple
        assert BoundedValue(v, lo, hi).into_raw() == v

    @given(
        triple=bounds_and_payload(
            payloads=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
        )
    )
    def test_float_in_range_round_trips(self, triple):
        lo, hi, v = triple
        assert BoundedValue(v, lo, hi).into_raw() == v

    @given(v=integers(), lo=integers(), hi=integers())
    def test_out_of_range_rejected(self, v, lo, hi):
        assume(v < lo or v > hi)
        with pytest.raises(RangeViolationError):
            BoundedValue(v, lo, hi)


# ===================================================================
# RE-RANGING
# ===================================================================

class TestRerangeProperties:

    @given(triple=bounds_and_payload())
    def test_idempotent(self, triple):
        lo, hi, v = triple
        value = BoundedValue(v, lo, hi)
        assert value.with_bounds(lo, hi) == value

    @given(triple=bounds_and_payload(), extra=integers(min_value=0, max_value=100))
    def test_round_trip(self, triple, extra):
        lo, hi, v = triple
        value = BoundedValue(v, lo, hi)
        assert value.with_bounds(lo - extra, hi + extra).with_bounds(lo, hi) == value


# ===================================================================
# ARITHMETIC
# ===================================================================

class TestArithmeticProperties:

    @given(a=bounded, b=bounded, op=st.sampled_from(OPS))
    @settings(max_examples=500)
    def test_all_or_nothing(self, a, b, op):
        """Success iff the raw result is in bounds; bounds are preserved."""
        assume(not (op in (operator.truediv, operator.floordiv) and b == 0))
        raw = op(a, b)
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = BoundedValue(b, INT8.lo, INT8.hi)
        if INT8.contains(raw):
            result = op(x, y)
            assert result.value == raw
            assert result.bounds == INT8
        else:
            with pytest.raises(RangeViolationError):
                op(x, y)

    @given(a=bounded, b=bounded, shift=integers(min_value=1, max_value=10),
           op=st.sampled_from(OPS))
    def test_mismatch_always_rejected(self, a, b, shift, op):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = BoundedValue(b, INT8.lo, INT8.hi + shift)
        with pytest.raises(RangeMismatchError):
            op(x, y)

    @given(a=bounded)
    def test_add_zero_identity(self, a):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        zero = BoundedValue(0, INT8.lo, INT8.hi)
        assert x + zero == x

    @given(a=bounded, b=bounded)
    def test_add_commutative_when_in_range(self, a, b):
        assume(INT8.contains(a + b))
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = BoundedValue(b, INT8.lo, INT8.hi)
        assert x + y == y + x


# ===================================================================
# NEGATION
# ===================================================================

class TestNegationProperties:

    @given(a=bounded)
    def test_negation_against_unchanged_bounds(self, a):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        if INT8.contains(-a):
            assert (-x).value == -a
            assert (-x).bounds == INT8
        else:
            # Only -128 has no positive counterpart in INT8
            assert a == INT8.lo
            with pytest.raises(RangeViolationError):
                -x

    @given(a=integers(min_value=-50, max_value=50))
    def test_symmetric_bounds_always_negate(self, a):
        x = BoundedValue(a, -50, 50)
        assert -(-x) == x


# ===================================================================
# RELATIONS
# ===================================================================

class TestRelationProperties:

    @given(a=bounded, b=bounded, shift=integers(min_value=0, max_value=10))
    def test_ordering_ignores_bounds(self, a, b, shift):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = BoundedValue(b, INT8.lo - shift, INT8.hi + shift)
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x > y) == (a > b)
        assert (x >= y) == (a >= b)

    @given(a=bounded, b=bounded)
    def test_equality_same_bounds_matches_payload(self, a, b):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = BoundedValue(b, INT8.lo, INT8.hi)
        assert (x == y) == (a == b)

    @given(a=bounded, shift=integers(min_value=1, max_value=10))
    def test_equality_requires_same_bounds(self, a, shift):
        x = BoundedValue(a, INT8.lo, INT8.hi)
        y = x.with_bounds(Bounds(INT8.lo, INT8.hi + shift))
        assert x != y
        assert not x < y and not y < x
