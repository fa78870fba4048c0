"""Tests for the form-gate CLI."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from form_gate import __version__
from form_gate.cli import app
from form_gate.logging_utils import LOGGER_NAME

runner = CliRunner()

ADDRESS_A = "A" * 64
ADDRESS_B = "B" * 64


def kyc_payload(address: str, confirm: str) -> dict:
    return {"address": address, "confirmAddress": confirm, "acknowledged": "true"}


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI callback installs on the package logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def write_payloads(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n")
    return path


class TestVersion:
    """Tests for --version."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestCheck:
    """Tests for the check command."""

    def test_check_writes_diagnostics(self, tmp_path: Path, form_registry_path: Path) -> None:
        """Test one diagnostic line is written per payload."""
        input_path = write_payloads(
            tmp_path / "in.jsonl",
            [
                json.dumps(kyc_payload(ADDRESS_A, ADDRESS_A)),
                "",
                json.dumps(kyc_payload(ADDRESS_A, ADDRESS_B)),
            ],
        )
        output_path = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            [
                "check",
                "--in", str(input_path),
                "--out", str(output_path),
                "--form", "kyc_address",
                "--registry", str(form_registry_path),
            ],
        )

        assert result.exit_code == 0
        assert "Summary" in result.output
        lines = [json.loads(line) for line in output_path.read_text().splitlines()]
        assert [line["status"] for line in lines] == ["valid", "invalid"]
        assert [line["index"] for line in lines] == [1, 3]

    def test_check_skips_bad_lines(self, tmp_path: Path, form_registry_path: Path) -> None:
        """Test malformed lines are skipped with a warning."""
        input_path = write_payloads(tmp_path / "in.jsonl", ["{not json", "[1, 2]"])
        output_path = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            [
                "check",
                "-i", str(input_path),
                "-o", str(output_path),
                "-f", "kyc_address",
                "--registry", str(form_registry_path),
            ],
        )

        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert output_path.read_text() == ""

    def test_check_registry_from_env(
        self, tmp_path: Path, form_registry_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the registry option falls back to FORM_GATE_REGISTRY."""
        monkeypatch.setenv("FORM_GATE_REGISTRY", str(form_registry_path))
        input_path = write_payloads(tmp_path / "in.jsonl", [json.dumps({"email": "a@b.co"})])
        output_path = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            ["check", "-i", str(input_path), "-o", str(output_path), "-f", "settings"],
        )

        assert result.exit_code == 0
        (line,) = output_path.read_text().splitlines()
        assert json.loads(line)["form_version"] == "1.1.0"

    def test_check_missing_input(self, tmp_path: Path, form_registry_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "check",
                "-i", str(tmp_path / "missing.jsonl"),
                "-o", str(tmp_path / "out.jsonl"),
                "-f", "kyc_address",
                "--registry", str(form_registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_check_unknown_form(self, tmp_path: Path, form_registry_path: Path) -> None:
        input_path = write_payloads(tmp_path / "in.jsonl", ["{}"])

        result = runner.invoke(
            app,
            [
                "check",
                "-i", str(input_path),
                "-o", str(tmp_path / "out.jsonl"),
                "-f", "nonexistent",
                "--registry", str(form_registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Error loading form definition" in result.output

    def test_check_missing_registry(self, tmp_path: Path) -> None:
        input_path = write_payloads(tmp_path / "in.jsonl", ["{}"])

        result = runner.invoke(
            app,
            [
                "check",
                "-i", str(input_path),
                "-o", str(tmp_path / "out.jsonl"),
                "-f", "kyc_address",
                "--registry", str(tmp_path / "nowhere"),
            ],
        )

        assert result.exit_code == 1
        assert "Form registry not found" in result.output


class TestShow:
    """Tests for the show command."""

    def test_show_form(self, form_registry_path: Path) -> None:
        result = runner.invoke(
            app, ["show", "kyc_address", "--registry", str(form_registry_path)]
        )

        assert result.exit_code == 0
        assert "kyc_address@1.0.0" in result.output
        assert "Rule: confirmAddress matches address" in result.output

    def test_show_unknown_form(self, form_registry_path: Path) -> None:
        result = runner.invoke(app, ["show", "nope", "--registry", str(form_registry_path)])
        assert result.exit_code == 1


class TestValidate:
    """Tests for the validate command."""

    def test_valid_definition(self, form_registry_path: Path, form_schema_path: Path) -> None:
        definition = form_registry_path / "forms" / "settings" / "1-0-0.json"

        result = runner.invoke(app, ["validate", str(definition), "-s", str(form_schema_path)])

        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_invalid_definition(self, tmp_path: Path, form_schema_path: Path) -> None:
        definition = tmp_path / "bad.json"
        definition.write_text(json.dumps({"type": "form_definition", "form_id": "demo"}))

        result = runner.invoke(app, ["validate", str(definition), "-s", str(form_schema_path)])

        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_missing_definition(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Definition file not found" in result.output
