"""Tests for ruleforge CLI commands."""

import json

import pytest
from click.testing import CliRunner

from ruleforge.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("RULEFORGE_LOCALE", raising=False)
    monkeypatch.delenv("RULEFORGE_FAIL_FAST", raising=False)


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        "fields:\n"
        "  name: required\n"
        "  email: required|email|minlength:20\n"
        "  \"items.*.qty\": required|integer|min:1\n",
        encoding="utf-8",
    )
    return path


def write_data(tmp_path, data) -> str:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestValidate:
    def test_valid_data(self, runner, spec_file, tmp_path):
        data = write_data(
            tmp_path,
            {"name": "Ada", "email": "ada.lovelace@example.com", "items": [{"qty": 1}]},
        )
        result = runner.invoke(cli, ["validate", str(spec_file), data])
        assert result.exit_code == 0
        assert "All 3 field(s) are valid." in result.output

    def test_invalid_data(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, {"name": "", "email": "nope", "items": [{"qty": 0}]})
        result = runner.invoke(cli, ["validate", str(spec_file), data])

        assert result.exit_code == 1
        assert "name" in result.output
        assert "✗ This field is required. (required)" in result.output
        assert "items.0.qty" in result.output
        assert "3 field(s) failed validation" in result.output

    def test_fail_fast_by_default(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, {"name": "Ada", "email": "nope", "items": []})
        result = runner.invoke(cli, ["validate", str(spec_file), data])
        assert "(email)" in result.output
        assert "(minlength)" not in result.output

    def test_all_errors(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, {"name": "Ada", "email": "nope", "items": []})
        result = runner.invoke(cli, ["validate", str(spec_file), data, "--all-errors"])
        assert result.exit_code == 1
        assert "(email)" in result.output
        assert "(minlength)" in result.output

    def test_json_output(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, {"name": "", "email": "ada.lovelace@example.com"})
        result = runner.invoke(cli, ["validate", str(spec_file), data, "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload == {"valid": False, "errors": {"name": {"required": "This field is required."}}}

    def test_locale_option(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, {"name": "", "email": "ada.lovelace@example.com"})
        result = runner.invoke(cli, ["validate", str(spec_file), data, "--locale", "fr"])
        assert "Ce champ est obligatoire." in result.output

    def test_locale_from_env(self, runner, spec_file, tmp_path, monkeypatch):
        monkeypatch.setenv("RULEFORGE_LOCALE", "fr")
        data = write_data(tmp_path, {"name": "", "email": "ada.lovelace@example.com"})
        result = runner.invoke(cli, ["validate", str(spec_file), data])
        assert "Ce champ est obligatoire." in result.output

    def test_invalid_spec_exits_2(self, runner, tmp_path):
        spec = tmp_path / "rules.yaml"
        spec.write_text("fields:\n  name: required|shiny\n", encoding="utf-8")
        data = write_data(tmp_path, {"name": "x"})

        result = runner.invoke(cli, ["validate", str(spec), data])

        assert result.exit_code == 2
        assert "Error:" in result.output
        assert "shiny" in result.output

    def test_data_must_be_mapping(self, runner, spec_file, tmp_path):
        data = write_data(tmp_path, [1, 2, 3])
        result = runner.invoke(cli, ["validate", str(spec_file), data])
        assert result.exit_code == 2
        assert "mapping" in result.output

    def test_missing_file(self, runner, spec_file):
        result = runner.invoke(cli, ["validate", str(spec_file), "missing.json"])
        assert result.exit_code == 2


class TestCheck:
    def test_valid_spec(self, runner, spec_file):
        result = runner.invoke(cli, ["check", str(spec_file)])
        assert result.exit_code == 0
        assert "Rule spec is valid." in result.output

    def test_schema_errors(self, runner, tmp_path):
        spec = tmp_path / "rules.yaml"
        spec.write_text("fields: {}\nextra: 1\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(spec)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "2 error(s) found" in result.output

    def test_unknown_rule(self, runner, tmp_path):
        spec = tmp_path / "rules.yaml"
        spec.write_text("fields:\n  name: required|shiny\n", encoding="utf-8")
        result = runner.invoke(cli, ["check", str(spec)])
        assert result.exit_code == 1
        assert "Unknown rule 'shiny'" in result.output

    def test_warnings(self, runner, tmp_path):
        spec = tmp_path / "rules.yaml"
        spec.write_text(
            "messages:\n  es:\n    required: Obligatorio.\nfields:\n  name: required\n",
            encoding="utf-8",
        )

        result = runner.invoke(cli, ["check", str(spec)])
        assert result.exit_code == 0
        assert "1 warning(s) found." in result.output
        assert "Rule spec is valid." in result.output

    def test_strict_turns_warnings_into_errors(self, runner, tmp_path):
        spec = tmp_path / "rules.yaml"
        spec.write_text(
            "messages:\n  es:\n    required: Obligatorio.\nfields:\n  name: required\n",
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["check", str(spec), "--strict"])
        assert result.exit_code == 1
        assert "1 error(s) found" in result.output


class TestRules:
    def test_lists_rules(self, runner):
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert "  required" in result.output
        assert "  phone" in result.output
        assert "rule(s) registered." in result.output

    def test_messages_in_locale(self, runner):
        result = runner.invoke(cli, ["rules", "--messages", "--locale", "fr"])
        assert result.exit_code == 0
        assert "Ce champ est obligatoire." in result.output
