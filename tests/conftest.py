"""
Pytest configuration and fixtures for pageorder tests.
"""

from __future__ import annotations

import logging
import os
import textwrap
from typing import Generator

import pytest

from pageorder.config import reset_config
from pageorder.rules.loader import RuleSetLoader
from pageorder.rules.schema import OrderingRule
from pageorder.rules.store import ConstraintStore


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop PAGEORDER_* variables and the config singleton around each test."""
    for key in list(os.environ):
        if key.startswith("PAGEORDER_"):
            monkeypatch.delenv(key)
    reset_config()
    RuleSetLoader.clear_cache()

    yield

    reset_config()
    RuleSetLoader.clear_cache()


# ============================================================================
# Puzzle Fixtures
# ============================================================================


EXAMPLE_RULES = [
    (47, 53), (97, 13), (97, 61), (97, 47), (75, 29), (61, 13), (75, 53),
    (29, 13), (97, 29), (53, 29), (61, 53), (97, 53), (61, 29), (47, 13),
    (75, 47), (97, 75), (47, 61), (75, 61), (47, 29), (75, 13), (53, 13),
]

EXAMPLE_UPDATES = [
    (75, 47, 61, 53, 29),
    (97, 61, 53, 29, 13),
    (75, 29, 13),
    (75, 97, 47, 61, 53),
    (61, 13, 29),
    (97, 13, 75, 29, 47),
]

EXAMPLE_TEXT = "\n".join(f"{b}|{a}" for b, a in EXAMPLE_RULES) + "\n\n" + "\n".join(
    ",".join(str(p) for p in u) for u in EXAMPLE_UPDATES
) + "\n"


@pytest.fixture
def example_rules() -> list[OrderingRule]:
    return [OrderingRule(before=b, after=a) for b, a in EXAMPLE_RULES]


@pytest.fixture
def example_updates() -> list[tuple[int, ...]]:
    return list(EXAMPLE_UPDATES)


@pytest.fixture
def example_store(example_rules) -> ConstraintStore:
    return ConstraintStore.build(example_rules)


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_TEXT


@pytest.fixture
def example_file(tmp_path, example_text):
    path = tmp_path / "input.txt"
    path.write_text(example_text)
    return path


@pytest.fixture
def rules_yaml() -> str:
    return textwrap.dedent("""\
        schema_version: "0.1.0"
        contract_type: page_ordering
        ruleset_id: example
        rules:
          - {before: 1, after: 2}
          - {before: 2, after: 3}
    """)


@pytest.fixture(autouse=True)
def reset_logging_handlers() -> Generator[None, None, None]:
    """Remove handlers installed by configure_logging during a test."""
    yield
    root = logging.getLogger("pageorder")
    for handler in list(root.handlers):
        if getattr(handler, "_pageorder_handler", False):
            root.removeHandler(handler)
