"""Tests for the pageorder sum/check commands."""

import json

import pytest
from click.testing import CliRunner

from pageorder.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def contract_file(tmp_path):
    path = tmp_path / "manual.rules.yaml"
    path.write_text(
        'schema_version: "0.1.0"\n'
        "contract_type: page_ordering\n"
        "ruleset_id: manual\n"
        "rules:\n"
        "  - {before: 1, after: 2}\n"
    )
    return path


class TestSum:
    def test_example(self, runner, example_file):
        result = runner.invoke(main, ["sum", str(example_file)])
        assert result.exit_code == 0
        assert "Sum of correctly-ordered middle numbers: 143" in result.output

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(main, ["sum", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_malformed_input(self, runner, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_text("1|x\n\n1,2,3\n")
        result = runner.invoke(main, ["sum", str(bad)])
        assert result.exit_code == 2
        assert "line 1" in result.output

    def test_even_length_compliant_update(self, runner, tmp_path):
        bad = tmp_path / "even.txt"
        bad.write_text("1|2\n\n1,2\n")
        result = runner.invoke(main, ["sum", str(bad)])
        assert result.exit_code == 2
        assert "even length" in result.output

    def test_rules_from_contract(self, runner, tmp_path, contract_file):
        updates = tmp_path / "updates.txt"
        updates.write_text("\n1,5,2\n2,7,1\n")
        result = runner.invoke(main, ["sum", str(updates), "--rules", str(contract_file)])
        assert result.exit_code == 0
        assert result.output.strip().endswith(": 5")

    def test_bad_contract(self, runner, tmp_path, example_file):
        contract = tmp_path / "bad.yaml"
        contract.write_text("contract_type: wrong\n")
        result = runner.invoke(main, ["sum", str(example_file), "--rules", str(contract)])
        assert result.exit_code == 2


class TestCheck:
    def test_text_output(self, runner, example_file):
        result = runner.invoke(main, ["check", str(example_file)])
        assert result.exit_code == 0
        assert "[0] OK" in result.output
        assert "[3] FAIL" in result.output
        assert "3/6 updates correctly ordered" in result.output

    def test_json_output(self, runner, example_file):
        result = runner.invoke(
            main, ["--log-level", "error", "check", str(example_file), "--output", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["middle_sum"] == 143
        assert data["violations"] == 3
        assert data["results"][3]["violation"]["before"] == 97

    def test_fail_on_violation(self, runner, example_file):
        result = runner.invoke(main, ["check", str(example_file), "--fail-on-violation"])
        assert result.exit_code == 1

    def test_fail_on_violation_clean(self, runner, tmp_path):
        clean = tmp_path / "clean.txt"
        clean.write_text("1|2\n\n1,3,2\n")
        result = runner.invoke(main, ["check", str(clean), "--fail-on-violation"])
        assert result.exit_code == 0

    def test_events_go_to_stderr(self, runner, example_file):
        result = runner.invoke(
            main,
            ["--log-level", "error", "check", str(example_file), "--output", "json", "--events"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["middle_sum"] == 143

        events = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
        names = [e["event"] for e in events]
        assert names.count("update.checked") == 6
        assert names.count("update.violation") == 3
        assert names[-1] == "batch.completed"
        assert events[-1]["middle_sum"] == 143
        assert events[0]["run_id"] == str(example_file)

    def test_log_options(self, runner, example_file):
        result = runner.invoke(
            main, ["--log-level", "debug", "--log-format", "json", "check", str(example_file)]
        )
        assert result.exit_code == 0


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "sum" in result.stdout
    assert "check" in result.stdout
