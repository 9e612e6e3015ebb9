"""
Page ordering validator for print updates.

An update is compliant when, for every page in it, each page that a rule
requires to come later and that is also present in the update really
does appear somewhere after it.  Rules naming a page absent from the
update do not apply.

``is_compliant`` answers the yes/no question.  ``UpdateValidator`` wraps
the same check and reports which rule broke first, following the
structured result pattern used for the rule contracts.

Usage::

    from pageorder.rules.store import ConstraintStore
    from pageorder.rules.validator import UpdateValidator, is_compliant

    store = spec.build_store()
    is_compliant((75, 47, 61, 53, 29), store)  # True

    result = UpdateValidator(store).check((75, 97, 47, 61, 53))
    if not result.compliant:
        print(result.violation.message)
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from pageorder.rules.store import ConstraintStore
from pageorder.rules.traversal import iter_with_following

logger = logging.getLogger(__name__)


class _Violation(NamedTuple):
    position: int
    before: int
    after: int


def _first_violation(update: Sequence[int], store: ConstraintStore) -> Optional[_Violation]:
    """Scan left to right and return the first broken rule, if any."""
    present = set(update)
    for position, (page, following) in enumerate(iter_with_following(update)):
        for required in store.lookup(page):
            if required not in following and required in present:
                return _Violation(position, page, required)
    return None


def is_compliant(update: Sequence[int], store: ConstraintStore) -> bool:
    """Return True if ``update`` satisfies every rule that applies to it."""
    return _first_violation(update, store) is None


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class RuleViolation(BaseModel):
    """The first ordering rule an update breaks."""

    model_config = ConfigDict(extra="forbid")

    before: int = Field(..., description="Page the rule requires first")
    after: int = Field(..., description="Page the rule requires later")
    before_position: int = Field(
        ..., description="Index in the update of the 'before' page being checked"
    )
    after_position: int = Field(
        ..., description="Index of the first occurrence of the 'after' page"
    )
    message: str = Field("", description="Human-readable explanation")


class UpdateCheckResult(BaseModel):
    """Verdict for a single update."""

    model_config = ConfigDict(extra="forbid")

    update: tuple[int, ...] = Field(..., description="The update that was checked")
    compliant: bool = Field(..., description="Whether every applicable rule holds")
    violation: Optional[RuleViolation] = Field(
        None, description="First violated rule (None when compliant)"
    )


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class UpdateValidator:
    """Checks updates against a shared, read-only ``ConstraintStore``.

    Args:
        store: The constraint store to validate against.
    """

    def __init__(self, store: ConstraintStore) -> None:
        self._store = store

    @property
    def store(self) -> ConstraintStore:
        return self._store

    def is_compliant(self, update: Sequence[int]) -> bool:
        return is_compliant(update, self._store)

    def check(self, update: Sequence[int]) -> UpdateCheckResult:
        """Check one update and describe the first violation found."""
        update = tuple(update)
        found = _first_violation(update, self._store)
        if found is None:
            return UpdateCheckResult(update=update, compliant=True)

        after_position = update.index(found.after)
        message = (
            f"Ordering violated: page {found.before} (position {found.position}) "
            f"must precede page {found.after} (position {after_position})"
        )
        logger.debug("Update %s: %s", list(update), message)
        return UpdateCheckResult(
            update=update,
            compliant=False,
            violation=RuleViolation(
                before=found.before,
                after=found.after,
                before_position=found.position,
                after_position=after_position,
                message=message,
            ),
        )
