"""
Pydantic v2 models for page ordering rules and rule contract YAML.

An ``OrderingRule`` declares that one page (before) must be printed
ahead of another (after) whenever an update contains both.  Rules only
bind pages that co-occur; an update missing either page ignores the rule.

All models use ``extra="forbid"`` to reject unknown keys at parse time.

Usage::

    from pageorder.rules.schema import RuleSetSpec
    import yaml

    with open("manual.rules.yaml") as fh:
        raw = yaml.safe_load(fh)
    spec = RuleSetSpec.model_validate(raw)
    store = spec.build_store()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

if TYPE_CHECKING:
    from pageorder.rules.store import ConstraintStore


# ---------------------------------------------------------------------------
# Rule model
# ---------------------------------------------------------------------------


class OrderingRule(BaseModel):
    """A single ``before|after`` page ordering rule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    before: NonNegativeInt = Field(..., description="Page that must come first")
    after: NonNegativeInt = Field(..., description="Page that must come later")

    def __str__(self) -> str:
        return f"{self.before}|{self.after}"


# ---------------------------------------------------------------------------
# Top-level contract
# ---------------------------------------------------------------------------


class RuleSetSpec(BaseModel):
    """
    Root model for a page ordering rule contract YAML file.

    Declares the ordering rules shared by every update validated
    against it.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(
        ..., min_length=1, description="Contract schema version (e.g. 0.1.0)"
    )
    contract_type: Literal["page_ordering"] = Field(
        ..., description="Must be 'page_ordering'"
    )
    ruleset_id: str = Field(
        ..., min_length=1, description="Identifier of this rule set"
    )
    rules: list[OrderingRule] = Field(
        default_factory=list, description="Ordered list of ordering rules"
    )
    description: Optional[str] = Field(
        None, description="Human-readable description of this rule set"
    )

    def build_store(self) -> "ConstraintStore":
        """Build the lookup structure for these rules."""
        from pageorder.rules.store import ConstraintStore

        return ConstraintStore.build(self.rules)
