"""pageorder CLI - Update validation commands."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from opentelemetry import trace
from pydantic import ValidationError

from pageorder.config import get_config
from pageorder.errors import PageOrderError
from pageorder.logger import ValidationLogger
from pageorder.parser import PuzzleInput, load_puzzle
from pageorder.rules.aggregator import summarize_updates, sum_middle_of_compliant
from pageorder.rules.loader import RuleSetLoader
from pageorder.rules.otel import emit_batch_result, emit_update_violation
from pageorder.rules.store import ConstraintStore

logger = logging.getLogger(__name__)
tracer = trace.get_tracer("pageorder.cli")


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(2)


def _load_inputs(input_path: str, rules_path: Optional[str]) -> tuple[ConstraintStore, PuzzleInput]:
    """Parse the puzzle and build the store, contract rules first."""
    try:
        puzzle = load_puzzle(Path(input_path))
        rules = []
        if rules_path:
            spec = RuleSetLoader().load(Path(rules_path))
            logger.info("Using rule contract %s (%d rules)", spec.ruleset_id, len(spec.rules))
            rules.extend(spec.rules)
        rules.extend(puzzle.rules)
    except (PageOrderError, FileNotFoundError, TypeError, ValidationError, yaml.YAMLError) as exc:
        _fail(str(exc))

    return ConstraintStore.build(rules), puzzle


_input_argument = click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False))
_rules_option = click.option(
    "--rules",
    "-r",
    "rules_path",
    type=click.Path(dir_okay=False),
    help="YAML rule contract; rules in INPUT are added after it",
)


@click.command("sum")
@_input_argument
@_rules_option
def sum_cmd(input_path: str, rules_path: Optional[str]):
    """Sum the middle page of every correctly-ordered update.

    Example:
        pageorder sum input.txt
    """
    store, puzzle = _load_inputs(input_path, rules_path)

    with tracer.start_as_current_span("pageorder.sum"):
        try:
            total = sum_middle_of_compliant(puzzle.updates, store)
        except PageOrderError as exc:
            _fail(str(exc))

    click.echo(f"Sum of correctly-ordered middle numbers: {total}")


@click.command()
@_input_argument
@_rules_option
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text")
@click.option("--fail-on-violation", is_flag=True, help="Exit with status 1 if any update is out of order")
@click.option("--events", is_flag=True, help="Also write structured JSON event lines to stderr")
def check(
    input_path: str,
    rules_path: Optional[str],
    output: str,
    fail_on_violation: bool,
    events: bool,
):
    """Check every update and report its verdict.

    Example:
        pageorder check input.txt --output json --fail-on-violation
    """
    config = get_config()
    store, puzzle = _load_inputs(input_path, rules_path)

    with tracer.start_as_current_span("pageorder.check") as span:
        span.set_attribute("pageorder.input", input_path)
        try:
            result = summarize_updates(puzzle.updates, store)
        except PageOrderError as exc:
            _fail(str(exc))

        if config.emit_span_events:
            for item in result.results:
                if not item.compliant:
                    emit_update_violation(item)
            emit_batch_result(result)

    if events:
        event_log = ValidationLogger(run_id=input_path, service_name=config.service_name)
        for index, item in enumerate(result.results):
            event_log.log_update_checked(index, item.update, item.compliant)
            if item.violation is not None:
                event_log.log_violation(
                    index,
                    item.violation.before,
                    item.violation.after,
                    item.violation.message,
                )
        event_log.log_batch_completed(
            result.total_checked, result.compliant_count, result.middle_sum
        )

    if output == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        for index, item in enumerate(result.results):
            pages = ",".join(str(p) for p in item.update)
            if item.compliant:
                click.echo(f"[{index}] OK    {pages}")
            else:
                click.echo(f"[{index}] FAIL  {pages}  ({item.violation.message})")
        click.echo("")
        click.echo(
            f"{result.compliant_count}/{result.total_checked} updates correctly ordered"
        )
        click.echo(f"Sum of correctly-ordered middle numbers: {result.middle_sum}")

    if fail_on_violation and not result.passed:
        sys.exit(1)
