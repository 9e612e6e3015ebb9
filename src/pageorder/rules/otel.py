"""
OTel span event emission helpers for page ordering validation.

Events are added to the current span only when it is recording, so
these helpers are no-ops outside a traced context.

Usage::

    from pageorder.rules.otel import emit_batch_result, emit_update_violation

    emit_batch_result(batch)
    for check in batch.results:
        if not check.compliant:
            emit_update_violation(check)
"""

from __future__ import annotations

import logging

from opentelemetry import trace as otel_trace

from pageorder.rules.aggregator import BatchValidationResult
from pageorder.rules.validator import UpdateCheckResult

logger = logging.getLogger(__name__)


def _add_span_event(name: str, attributes: dict[str, str | int | float | bool]) -> None:
    """Add an event to the current OTel span if it is recording."""
    span = otel_trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name=name, attributes=attributes)


def emit_batch_result(result: BatchValidationResult) -> None:
    """Emit a span event summarising a batch.

    Event name: ``page.ordering.complete``
    """
    attrs: dict[str, str | int | float | bool] = {
        "ordering.passed": result.passed,
        "ordering.total_checked": result.total_checked,
        "ordering.compliant": result.compliant_count,
        "ordering.violations": result.violations,
        "ordering.middle_sum": result.middle_sum,
    }

    logger.debug(
        "Ordering batch complete: %d/%d compliant, middle sum %d",
        result.compliant_count,
        result.total_checked,
        result.middle_sum,
    )

    _add_span_event("page.ordering.complete", attrs)


def emit_update_violation(check: UpdateCheckResult) -> None:
    """Emit a span event for a single non-compliant update.

    Event name: ``page.ordering.violation``

    Only call this for checks where ``compliant is False``.
    """
    attrs: dict[str, str | int | float | bool] = {
        "ordering.update": ",".join(str(p) for p in check.update),
    }
    if check.violation is not None:
        attrs["ordering.before"] = check.violation.before
        attrs["ordering.after"] = check.violation.after
        attrs["ordering.before_position"] = check.violation.before_position
        attrs["ordering.after_position"] = check.violation.after_position
        attrs["ordering.message"] = check.violation.message

    logger.warning(
        "Ordering violation in update %s: %s",
        list(check.update),
        check.violation.message if check.violation else "",
    )

    _add_span_event("page.ordering.violation", attrs)
