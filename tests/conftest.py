"""Shared fixtures for bounded value tests."""

from __future__ import annotations

import pytest

from bounded_value import BoundedValue, Bounds


@pytest.fixture
def unit() -> Bounds:
    return Bounds(lo=0, hi=1)


@pytest.fixture
def symmetric() -> Bounds:
    return Bounds(lo=-10, hi=10)


@pytest.fixture
def one(unit) -> BoundedValue:
    """The payload 1 inside [0, 1]."""
    return BoundedValue(1, unit.lo, unit.hi)


@pytest.fixture
def zero(unit) -> BoundedValue:
    """The payload 0 inside [0, 1]."""
    return BoundedValue(0, unit.lo, unit.hi)
