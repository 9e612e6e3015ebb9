"""
Read-only lookup of which pages must follow a given page.

The store is built once from a rule list and then shared by every
validation.  It has no mutating API after ``build``, so concurrent
readers need no locking.

Usage::

    from pageorder.rules.store import ConstraintStore
    from pageorder.rules.schema import OrderingRule

    store = ConstraintStore.build([OrderingRule(before=47, after=53)])
    store.lookup(47)  # (53,)
    store.lookup(99)  # ()
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from pageorder.rules.schema import OrderingRule

logger = logging.getLogger(__name__)


class ConstraintStore:
    """Mapping of page -> pages that must appear after it.

    Requirement lists keep rule input order and keep duplicates; neither
    affects verdicts since validation only tests membership.
    """

    __slots__ = ("_required_after", "_rule_count")

    def __init__(
        self,
        required_after: Mapping[int, tuple[int, ...]] | None = None,
        rule_count: int = 0,
    ) -> None:
        self._required_after: dict[int, tuple[int, ...]] = dict(required_after or {})
        self._rule_count = rule_count

    @classmethod
    def build(cls, rules: Iterable[OrderingRule]) -> "ConstraintStore":
        """Build a store from rules, appending each ``after`` under its ``before``."""
        grouped: dict[int, list[int]] = {}
        count = 0
        for rule in rules:
            grouped.setdefault(rule.before, []).append(rule.after)
            count += 1

        store = cls(
            {before: tuple(after) for before, after in grouped.items()},
            rule_count=count,
        )
        logger.debug(
            "Built constraint store: rules=%d, constrained_pages=%d",
            count,
            len(store),
        )
        return store

    def lookup(self, page: int) -> tuple[int, ...]:
        """Pages that must follow ``page``; empty when it has no rules."""
        return self._required_after.get(page, ())

    def elements(self) -> list[int]:
        """Pages that have at least one rule, in first-seen order."""
        return list(self._required_after)

    @property
    def rule_count(self) -> int:
        """Number of rules absorbed, duplicates included."""
        return self._rule_count

    def __contains__(self, page: object) -> bool:
        return page in self._required_after

    def __len__(self) -> int:
        return len(self._required_after)

    def __iter__(self) -> Iterator[int]:
        return iter(self._required_after)

    def __repr__(self) -> str:
        return f"ConstraintStore(pages={len(self)}, rules={self._rule_count})"
