from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from ctest.context import SuiteContext, count_fail, count_pass


@dataclass
class SuiteSummary:
    """Snapshot of a live suite context's counts."""

    passed: int
    failed: int
    total: int
    pass_rate: float
    all_passed: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(ctx: SuiteContext) -> SuiteSummary:
    """Summarize ctx without changing it. An empty run has a 0.0 pass rate."""
    passed = count_pass(ctx)
    failed = count_fail(ctx)
    total = passed + failed
    pass_rate = (passed / total * 100) if total > 0 else 0.0

    return SuiteSummary(
        passed=passed,
        failed=failed,
        total=total,
        pass_rate=round(pass_rate, 2),
        all_passed=failed == 0,
    )
