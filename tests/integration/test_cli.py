"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from eventlint.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "order_fulfillment.yaml")]
        )

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_validate_with_errors(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "invalid" / "dangling_references.yaml")],
        )

        assert result.exit_code == 1
        assert "MESSAGE_EVENT_INVALID_MESSAGE_REF" in result.output
        assert "COMPENSATE_EVENT_INVALID_ACTIVITY_REF" in result.output

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "invalid" / "missing_configuration.yaml"),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert data["error_count"] == 5
        link = data["issues"][2]
        assert link["code"] == "LINK_EVENT_DEFINITION_MISSING_TARGET"
        assert link["params"] == {"eventId": "jumpAhead", "eventName": "Skip to escalation"}

    def test_format_from_environment(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "order_fulfillment.yaml")],
            env={"EVENTLINT_FORMAT": "json"},
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True

    def test_validate_selected_process(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "invalid" / "missing_configuration.yaml"),
                "--process",
                "escalation",
            ],
        )

        assert result.exit_code == 1
        assert "SIGNAL_EVENT_MISSING_SIGNAL_REF" in result.output
        assert "EVENT_TIMER_MISSING_CONFIGURATION" not in result.output

    def test_validate_unknown_process(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "order_fulfillment.yaml"),
                "--process",
                "nope",
            ],
        )

        assert result.exit_code == 2

    def test_validate_nonexistent_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent/model.yaml"])

        assert result.exit_code == 2

    def test_validate_schema_error(self, runner, tmp_path):
        model_file = tmp_path / "bad.yaml"
        model_file.write_text("processes:\n  - elements: []\n")

        result = runner.invoke(main, ["validate", str(model_file)])

        assert result.exit_code == 2

    def test_log_level_option(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "--log-level",
                "debug",
                "validate",
                str(examples_dir / "order_fulfillment.yaml"),
            ],
        )

        assert result.exit_code == 0


class TestCodesCommand:
    def test_lists_all_codes(self, runner):
        result = runner.invoke(main, ["codes"])

        assert result.exit_code == 0
        codes = result.output.split()
        assert len(codes) == 10
        assert "EVENT_TIMER_MISSING_CONFIGURATION" in codes
