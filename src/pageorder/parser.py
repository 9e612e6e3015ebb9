"""
Parser for the puzzle text format.

The input is a block of ordering rules, a blank line, then a block of
updates::

    47|53
    97|13

    75,47,61,53,29
    97,61,53,29,13

The first line of the rule block that does not contain the rule
separator also starts the update block, so an update-only file needs
no leading blank line.  Separators come from ``PageOrderConfig``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pageorder.config import get_config
from pageorder.errors import InputFormatError
from pageorder.rules.schema import OrderingRule

logger = logging.getLogger(__name__)


@dataclass
class PuzzleInput:
    """Parsed rules and updates, in input order."""

    rules: list[OrderingRule] = field(default_factory=list)
    updates: list[tuple[int, ...]] = field(default_factory=list)


def _parse_page(token: str, line_number: Optional[int], line: str) -> int:
    token = token.strip()
    # plain ASCII decimals only
    if not (token.isascii() and token.isdigit()):
        raise InputFormatError(
            f"invalid page number {token!r} (expected a non-negative decimal)",
            line_number=line_number,
            line=line,
        )
    return int(token)


def parse_rule_line(
    line: str,
    separator: Optional[str] = None,
    line_number: Optional[int] = None,
) -> OrderingRule:
    """Parse ``before|after`` into an ``OrderingRule``."""
    separator = separator or get_config().rule_separator
    parts = line.strip().split(separator)
    if len(parts) != 2:
        raise InputFormatError(
            f"expected 'before{separator}after', got {line.strip()!r}",
            line_number=line_number,
            line=line,
        )
    before, after = (_parse_page(p, line_number, line) for p in parts)
    return OrderingRule(before=before, after=after)


def parse_update_line(
    line: str,
    separator: Optional[str] = None,
    line_number: Optional[int] = None,
) -> tuple[int, ...]:
    """Parse ``a,b,c`` into a tuple of pages."""
    separator = separator or get_config().update_separator
    stripped = line.strip()
    if not stripped:
        raise InputFormatError("empty update", line_number=line_number, line=line)
    return tuple(_parse_page(p, line_number, line) for p in stripped.split(separator))


def parse_puzzle(text: str) -> PuzzleInput:
    """Parse a whole puzzle document.

    Raises:
        InputFormatError: On the first malformed line.
    """
    config = get_config()
    puzzle = PuzzleInput()
    in_rules = True

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if in_rules:
            if not stripped:
                in_rules = False
                continue
            if config.rule_separator in stripped:
                puzzle.rules.append(
                    parse_rule_line(stripped, config.rule_separator, line_number)
                )
                continue
            in_rules = False

        if not stripped:
            continue
        puzzle.updates.append(
            parse_update_line(stripped, config.update_separator, line_number)
        )

    logger.debug(
        "Parsed puzzle: rules=%d, updates=%d", len(puzzle.rules), len(puzzle.updates)
    )
    return puzzle


def load_puzzle(path: Path) -> PuzzleInput:
    """Read and parse a puzzle file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return parse_puzzle(path.read_text(encoding="utf-8"))
