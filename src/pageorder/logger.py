"""
Logging setup and structured validation events.

``configure_logging`` wires the ``pageorder`` logger hierarchy to stderr,
either as plain text for a console or as one JSON object per line for
log shippers.

``ValidationLogger`` writes JSON event lines to the ``pageorder.events``
logger, which prints them on stderr so stdout stays free for command
output. Only verdict-level events are logged:

- update.checked
- update.violation
- batch.completed

Usage:
    from pageorder.logger import ValidationLogger

    events = ValidationLogger(run_id="input.txt")
    events.log_update_checked(index=0, update=(75, 47, 61), compliant=True)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence


class _CurrentStderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


_events_logger = logging.getLogger("pageorder.events")
_events_logger.setLevel(logging.INFO)
_events_logger.propagate = False

if not _events_logger.handlers:
    handler = _CurrentStderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _events_logger.addHandler(handler)


class JsonFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "warning", fmt: str = "text") -> logging.Logger:
    """
    Configure the root ``pageorder`` logger.

    Replaces any handler previously installed by this function, so it is
    safe to call more than once (e.g. once per CLI invocation).

    Args:
        level: debug, info, warning or error
        fmt: "json" or "text"

    Returns:
        The configured ``pageorder`` logger.
    """
    root = logging.getLogger("pageorder")
    root.setLevel(getattr(logging, level.upper()))

    for existing in list(root.handlers):
        if getattr(existing, "_pageorder_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._pageorder_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root


class ValidationLogger:
    """
    Structured logger for validation events.

    Each entry carries the service name, a run identifier (usually the
    input file) and any extra labels, so runs can be filtered apart.
    """

    def __init__(
        self,
        run_id: str,
        service_name: str = "pageorder",
        extra_labels: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize validation logger.

        Args:
            run_id: Identifier of this validation run
            service_name: Service name for log attribution
            extra_labels: Additional labels for filtering
        """
        self.run_id = run_id
        self.service_name = service_name
        self.extra_labels = extra_labels or {}
        self._logger = _events_logger

    def _emit(self, event: str, level: str = "info", **fields: Any) -> None:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "event": event,
            "service": self.service_name,
            "run_id": self.run_id,
        }
        entry.update(fields)
        if self.extra_labels:
            entry["labels"] = self.extra_labels

        log_line = json.dumps(entry, default=str)

        if level == "warn":
            self._logger.warning(log_line)
        else:
            self._logger.info(log_line)

    def log_update_checked(
        self,
        index: int,
        update: Sequence[int],
        compliant: bool,
    ) -> None:
        """Log the verdict for one update."""
        self._emit(
            "update.checked",
            update_index=index,
            update=list(update),
            update_length=len(update),
            compliant=compliant,
        )

    def log_violation(
        self,
        index: int,
        before: int,
        after: int,
        message: str,
    ) -> None:
        """Log the first rule an update breaks."""
        self._emit(
            "update.violation",
            level="warn",
            update_index=index,
            rule_before=before,
            rule_after=after,
            message=message,
        )

    def log_batch_completed(
        self,
        total_checked: int,
        compliant_count: int,
        middle_sum: int,
    ) -> None:
        """Log the summary of a whole batch."""
        self._emit(
            "batch.completed",
            total_checked=total_checked,
            compliant_count=compliant_count,
            violations=total_checked - compliant_count,
            middle_sum=middle_sum,
        )
