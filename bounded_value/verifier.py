"""
Contract verifier.

The verifier feeds payloads drawn from a pair of bounds into every law
of a Contract and records the outcome.

Flow:
  1. Caller asks for a report on some Bounds.
  2. The verifier picks the payloads: every combination for small
     integer bounds, edge values plus seeded random samples otherwise.
  3. Each law is checked until it passes for every payload or the
     first counterexample is found.
  4. ``verify`` returns the report; ``check`` raises VerificationError
     instead of returning a failing one.
"""

from __future__ import annotations

import decimal
import itertools
import random
from dataclasses import dataclass, field

from bounded_value.bounds import Bounds
from bounded_value.contract import Contract, Property, full_contract
from bounded_value.errors import RangeError
from bounded_value.log import get_logger

logger = get_logger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one property."""

    property_name: str
    passed: bool
    counterexample: tuple | None = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.property_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying an entire contract."""

    contract_name: str
    bounds: Bounds
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[VerificationResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        lines = [f"--- {self.contract_name} over {self.bounds} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when BoundedValue breaks one of its laws."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# The verifier
# ---------------------------------------------------------------------------

class ContractVerifier:
    """
    Checks a Contract over a pair of bounds.

    For small integer bounds the verifier is *exhaustive* - it checks
    every payload combination.  Larger or non-integer bounds fall back
    to a reproducible sample (the hypothesis tests cover the rest).
    """

    EXHAUSTIVE_THRESHOLD = 256  # max width for brute-force check
    SAMPLE_COUNT = 2_000
    SEED = 0

    @classmethod
    def verify(cls, bounds: Bounds, contract: Contract | None = None) -> VerificationReport:
        """Check every law of ``contract`` (all laws by default) over ``bounds``."""
        if contract is None:
            contract = full_contract()

        report = VerificationReport(contract_name=contract.name, bounds=bounds)
        for prop in contract:
            report.results.append(cls._verify_property(prop, bounds))

        if report.passed:
            logger.info("%s verified over %s", contract.name, bounds)
        else:
            logger.warning("verification failed:\n%s", report.summary())
        return report

    @classmethod
    def check(cls, bounds: Bounds, contract: Contract | None = None) -> VerificationReport:
        """Like ``verify`` but raise VerificationError on any failure."""
        report = cls.verify(bounds, contract)
        if not report.passed:
            raise VerificationError(report)
        return report

    # -- internal ---------------------------------------------------------

    @classmethod
    def _is_exhaustive(cls, bounds: Bounds) -> bool:
        return bounds.is_integral and bounds.width <= cls.EXHAUSTIVE_THRESHOLD

    @classmethod
    def _verify_property(cls, prop: Property, bounds: Bounds) -> VerificationResult:
        if cls._is_exhaustive(bounds):
            combos = itertools.product(bounds.values(), repeat=prop.arity)
        else:
            combos = _generate_samples(bounds, prop.arity, cls.SAMPLE_COUNT, cls.SEED)

        tests_run = 0
        for combo in combos:
            tests_run += 1
            try:
                holds = prop.check(bounds, *combo)
            except (ZeroDivisionError, OverflowError, decimal.InvalidOperation):
                # The payload's own arithmetic failing (x / 0, Decimal 0 / 0,
                # an oversized Decimal quotient) is not a law violation
                continue
            except RangeError:
                # A law that did not expect the value to be rejected
                holds = False
            if not holds:
                return VerificationResult(
                    property_name=prop.name,
                    passed=False,
                    counterexample=combo,
                    tests_run=tests_run,
                )

        return VerificationResult(
            property_name=prop.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _payload_type(bounds: Bounds) -> type:
    """The numeric type both bounds share once combined (int + Decimal -> Decimal)."""
    return type(bounds.hi - bounds.lo)


def _edge_values(bounds: Bounds) -> list:
    lo, hi = bounds
    if bounds.is_integral:
        candidates = [lo, lo + 1, -1, 0, 1, hi - 1, hi]
    else:
        # Built in the payload's own type so Decimal never meets float
        one = _payload_type(bounds)(1)
        candidates = [lo, -one, -one / 2, one - one, one / 2, one, hi, (lo + hi) / 2]
    edges: list = []
    for v in candidates:
        if bounds.contains(v) and v not in edges:
            edges.append(v)
    return edges


def _generate_samples(
    bounds: Bounds, arity: int, count: int, seed: int
) -> list[tuple]:
    """Generate edge-case + seeded random samples for property checking."""
    if bounds.lo > bounds.hi:
        # Empty bounds: only laws that need no payload can run
        return [()] if arity == 0 else []

    rng = random.Random(seed)
    samples: list[tuple] = list(itertools.product(_edge_values(bounds), repeat=arity))
    if arity == 0:
        return samples

    lo, hi = bounds
    kind = _payload_type(bounds)
    if bounds.is_integral:
        draw = lambda: rng.randint(lo, hi)
    elif kind is float:
        draw = lambda: rng.uniform(lo, hi)
    else:
        # Decimal, Fraction, ...: scale in the payload's own arithmetic
        draw = lambda: lo + (hi - lo) * kind(rng.random())

    while len(samples) < count:
        samples.append(tuple(draw() for _ in range(arity)))
    return samples
