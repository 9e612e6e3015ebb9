"""
Page ordering rules: store, validator and middle-page aggregation.

Public API::

    from pageorder.rules import (
        # Schema models
        OrderingRule,
        RuleSetSpec,
        # Lookup
        ConstraintStore,
        iter_with_following,
        # Validator
        is_compliant,
        UpdateValidator,
        UpdateCheckResult,
        RuleViolation,
        # Aggregation
        middle_element,
        sum_middle_of_compliant,
        summarize_updates,
        BatchValidationResult,
        # Loader
        RuleSetLoader,
        # OTel helpers
        emit_batch_result,
        emit_update_violation,
    )
"""

from pageorder.rules.aggregator import (
    BatchValidationResult,
    middle_element,
    sum_middle_of_compliant,
    summarize_updates,
)
from pageorder.rules.loader import RuleSetLoader
from pageorder.rules.otel import emit_batch_result, emit_update_violation
from pageorder.rules.schema import OrderingRule, RuleSetSpec
from pageorder.rules.store import ConstraintStore
from pageorder.rules.traversal import iter_with_following
from pageorder.rules.validator import (
    RuleViolation,
    UpdateCheckResult,
    UpdateValidator,
    is_compliant,
)

__all__ = [
    # Schema
    "OrderingRule",
    "RuleSetSpec",
    # Lookup
    "ConstraintStore",
    "iter_with_following",
    # Validator
    "is_compliant",
    "UpdateValidator",
    "UpdateCheckResult",
    "RuleViolation",
    # Aggregation
    "middle_element",
    "sum_middle_of_compliant",
    "summarize_updates",
    "BatchValidationResult",
    # Loader
    "RuleSetLoader",
    # OTel
    "emit_batch_result",
    "emit_update_violation",
]
