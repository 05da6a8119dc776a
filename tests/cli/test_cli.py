"""Tests for the command line entry point."""

import json
from pathlib import Path

from typer.testing import CliRunner

from emailval.cli import app
from emailval.prompt import format_rule_checklist

runner = CliRunner()


class TestInteractiveRun:
    """Test the default interactive mode."""

    def test_valid_address(self):
        result = runner.invoke(app, [], input="user@example.com\n")

        assert result.exit_code == 0
        assert "=== Email Address Validation Program ===" in result.output
        assert "This program will validate your email address format." in result.output
        assert "✓ Valid email address entered: user@example.com" in result.output
        assert "Success! Your email 'user@example.com' has been validated and stored." in result.output

    def test_retry_then_valid(self):
        result = runner.invoke(app, [], input="user@@example.com\na@b.co\n")

        assert result.exit_code == 0
        assert "✗ Invalid email address. Please check the following:" in result.output
        assert "Success! Your email 'a@b.co'" in result.output

    def test_input_ends(self):
        result = runner.invoke(app, [], input="not-an-email\n")

        assert result.exit_code == 1
        assert "Error: Failed to read input" in result.output
        assert "Program terminated due to input error." in result.output

    def test_attempt_limit_from_config(self, tmp_path: Path):
        config_file = tmp_path / "emailval.yaml"
        config_file.write_text("prompt:\n  max_attempts: 1\n", encoding="utf-8")

        result = runner.invoke(app, ["--config", str(config_file)], input="bad\nuser@example.com\n")

        assert result.exit_code == 1
        assert "Program terminated due to input error." in result.output


class TestLoggingOutput:
    """Logs go to stderr; stdout carries only the prompt transcript."""

    def test_json_logs_on_stderr(self):
        result = runner.invoke(app, ["--log-level", "INFO", "--log-json"],
                               input="user@example\nuser@example.com\n")

        assert result.exit_code == 0
        assert result.stdout == (
            "=== Email Address Validation Program ===\n"
            "This program will validate your email address format.\n\n"
            "Please enter your email address: "
            + format_rule_checklist(5, 255)
            + "Please enter your email address: "
            "✓ Valid email address entered: user@example.com\n"
            "\nSuccess! Your email 'user@example.com' has been validated and stored.\n"
        )

        records = [json.loads(line) for line in result.stderr.splitlines() if line.strip()]
        attempts = [record for record in records if record.get("subsystem") == "prompt"]
        assert [record["result"] for record in attempts] == ["REJECTED", "ACCEPTED"]
        assert attempts[0]["rule"] == "domain_no_dot"
        assert all(record["level"] == "info" for record in attempts)

    def test_default_level_keeps_stderr_quiet(self):
        result = runner.invoke(app, [], input="user@example.com\n")

        assert result.exit_code == 0
        assert result.stderr == ""


class TestCheckMode:
    """Test the non-interactive --check option."""

    def test_valid(self):
        result = runner.invoke(app, ["--check", "user@example.com"])
        assert result.exit_code == 0
        assert "✓ Valid email address: user@example.com" in result.output

    def test_invalid(self):
        result = runner.invoke(app, ["--check", "user@example.c"])
        assert result.exit_code == 1
        assert "✗ Invalid email address: user@example.c" in result.output

    def test_rules_from_config(self, tmp_path: Path):
        config_file = tmp_path / "emailval.yaml"
        config_file.write_text("rules:\n  min_tld_length: 4\n", encoding="utf-8")

        result = runner.invoke(app, ["--config", str(config_file), "--check", "user@example.com"])
        assert result.exit_code == 1


class TestConfigErrors:
    """Test configuration failures."""

    def test_missing_config_file(self, tmp_path: Path):
        result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2
        assert "Configuration error" in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "--check", "user@example.com"])
        assert result.exit_code == 2
        assert "logging.level" in result.output
