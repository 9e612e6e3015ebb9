"""
Reduce a batch of updates to the sum of middle pages of compliant ones.

``sum_middle_of_compliant`` is the bare reduction.  ``summarize_updates``
produces the same sum alongside per-update verdicts for reporting.

Every compliant update must have odd length; an even-length compliant
update raises ``PreconditionViolation`` and aborts the whole batch.
Non-compliant updates are never measured.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from pageorder.errors import PreconditionViolation
from pageorder.rules.store import ConstraintStore
from pageorder.rules.validator import UpdateCheckResult, UpdateValidator, is_compliant

logger = logging.getLogger(__name__)


def middle_element(update: Sequence[int]) -> int:
    """Return the page at index ``len(update) // 2``.

    Raises:
        PreconditionViolation: If the update has even length (or is empty).
    """
    if len(update) % 2 != 1:
        raise PreconditionViolation(
            f"Update {list(update)} has even length {len(update)}; "
            f"middle page is undefined",
            update=tuple(update),
        )
    return update[len(update) // 2]


def sum_middle_of_compliant(
    updates: Iterable[Sequence[int]],
    store: ConstraintStore,
) -> int:
    """Sum the middle page of every update that satisfies ``store``."""
    return sum(middle_element(u) for u in updates if is_compliant(u, store))


class BatchValidationResult(BaseModel):
    """Aggregated verdicts for a batch of updates."""

    model_config = ConfigDict(extra="forbid")

    total_checked: int = Field(..., description="Number of updates checked")
    compliant_count: int = Field(..., description="Number of compliant updates")
    violations: int = Field(0, description="Number of non-compliant updates")
    middle_sum: int = Field(
        0, description="Sum of middle pages of compliant updates"
    )
    results: list[UpdateCheckResult] = Field(
        default_factory=list, description="Per-update verdicts, in input order"
    )

    @property
    def passed(self) -> bool:
        return self.violations == 0


def summarize_updates(
    updates: Iterable[Sequence[int]],
    store: ConstraintStore,
) -> BatchValidationResult:
    """Check every update and total the middle pages of the compliant ones."""
    validator = UpdateValidator(store)
    results: list[UpdateCheckResult] = []
    middle_sum = 0

    for update in updates:
        check = validator.check(update)
        results.append(check)
        if check.compliant:
            middle_sum += middle_element(check.update)

    compliant_count = sum(1 for r in results if r.compliant)
    violations = len(results) - compliant_count

    if violations:
        logger.info(
            "Ordering check: %d/%d updates compliant, %d violation(s)",
            compliant_count,
            len(results),
            violations,
        )
    else:
        logger.debug("Ordering check: all %d updates compliant", len(results))

    return BatchValidationResult(
        total_checked=len(results),
        compliant_count=compliant_count,
        violations=violations,
        middle_sum=middle_sum,
        results=results,
    )
