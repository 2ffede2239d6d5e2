"""
Tests for the structify command-line interface.
"""

import json
import tempfile
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from structify.cli.main import app
from structify.config import SettingsManager

runner = CliRunner()

USERS_DDL = "CREATE TABLE users (id INT AUTO_INCREMENT PRIMARY KEY, name VARCHAR(50) NOT NULL COMMENT '姓名')"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every command in an empty directory without structify env vars."""
    for env_var in SettingsManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestCLI:
    """Test CLI commands."""

    def test_no_command_shows_help(self):
        """Test invoking without a command prints help."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "convert" in result.output
        assert "detect" in result.output
        assert "inspect" in result.output

    def test_convert_from_stdin(self):
        """Test converting DDL read from stdin."""
        result = runner.invoke(app, ["convert"], input=USERS_DDL)

        assert result.exit_code == 0
        assert result.output.startswith("// Users represents the users table\ntype Users struct {\n")
        assert "TableName" in result.output

    def test_convert_from_file(self, mysql_ddl, tmp_path):
        """Test converting DDL read from a file."""
        input_file = tmp_path / "orders.sql"
        input_file.write_text(mysql_ddl, encoding="utf-8")

        result = runner.invoke(app, ["convert", str(input_file), "--no-table-name", "-n", "Order"])

        assert result.exit_code == 0
        assert "type Order struct {" in result.output
        assert "TableName" not in result.output

    def test_convert_json_separate_types(self, sample_json):
        """Test --no-inline emits separate nested declarations."""
        result = runner.invoke(app, ["convert", "--no-inline"], input=sample_json)

        assert result.exit_code == 0
        assert "type Meta struct {" in result.output

    def test_convert_as_file(self, postgresql_ddl):
        """Test --file prints a complete Go file."""
        result = runner.invoke(app, ["convert", "--file", "-p", "entity"], input=postgresql_ddl)

        assert result.exit_code == 0
        assert result.output.startswith("package entity\n\nimport (\n")

    def test_convert_line_numbers(self):
        """Test --line-numbers prefixes lines."""
        result = runner.invoke(app, ["convert", "--line-numbers"], input=USERS_DDL)

        assert result.exit_code == 0
        assert result.output.startswith(" 1 | // Users represents the users table")

    def test_convert_to_output_dir(self, sample_json):
        """Test writing the Go file to a directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(
                app, ["convert", "-n", "UserProfile", "-o", tmpdir], input=sample_json
            )

            assert result.exit_code == 0
            output_file = Path(tmpdir) / "user_profile.go"
            assert output_file.exists()
            assert output_file.read_text(encoding="utf-8").startswith("package model\n\n// UserProfile")

    def test_convert_explicit_dialect(self):
        """Test --dialect bypasses detection."""
        result = runner.invoke(app, ["convert", "-d", "sqlite"], input="CREATE TABLE t (a DATETIME)")

        assert result.exit_code == 0
        assert "A string" in result.output

    def test_convert_invalid_dialect(self):
        """Test unsupported dialects are rejected."""
        result = runner.invoke(app, ["convert", "-d", "oracle"], input=USERS_DDL)
        assert result.exit_code != 0

    def test_convert_unknown_input(self):
        """Test undetectable input fails with an error."""
        result = runner.invoke(app, ["convert"], input="hello world")

        assert result.exit_code == 1
        assert "Could not detect input type" in result.output

    def test_convert_missing_file(self):
        """Test a missing input file fails with an error."""
        result = runner.invoke(app, ["convert", "missing.sql"])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_convert_empty_input(self):
        """Test empty input fails with an error."""
        result = runner.invoke(app, ["convert"], input="   ")

        assert result.exit_code == 1
        assert "Input is empty" in result.output

    def test_settings_apply_to_convert(self, tmp_path):
        """Test settings from structify.toml are used."""
        (tmp_path / "structify.toml").write_text("emit_storage_accessor = false\n")

        result = runner.invoke(app, ["convert"], input=USERS_DDL)

        assert result.exit_code == 0
        assert "TableName" not in result.output

    def test_flags_override_settings(self, tmp_path):
        """Test command-line flags beat settings."""
        (tmp_path / "structify.toml").write_text("emit_storage_accessor = false\n")

        result = runner.invoke(app, ["convert", "--table-name"], input=USERS_DDL)

        assert result.exit_code == 0
        assert "TableName" in result.output

    @pytest.mark.parametrize(
        "fixture_name, expected",
        [
            ("mysql_ddl", "mysql"),
            ("postgresql_ddl", "postgresql"),
            ("sqlite_ddl", "sqlite"),
            ("sample_json", "json"),
        ],
    )
    def test_detect(self, request, fixture_name, expected):
        """Test the detect command prints the dialect."""
        result = runner.invoke(app, ["detect"], input=request.getfixturevalue(fixture_name))

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_detect_unknown(self):
        """Test unknown input exits with status 1."""
        result = runner.invoke(app, ["detect"], input="hello")

        assert result.exit_code == 1
        assert result.output.strip() == "unknown"

    def test_inspect_json(self):
        """Test inspect prints the parsed schema as JSON."""
        result = runner.invoke(app, ["inspect"], input=USERS_DDL)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["dialect"] == "mysql"
        assert data["table_name"] == "users"
        assert [f["source_name"] for f in data["fields"]] == ["id", "name"]
        assert data["fields"][1]["comment"] == "姓名"

    def test_inspect_yaml(self, sample_json):
        """Test inspect prints YAML."""
        result = runner.invoke(app, ["inspect", "-f", "yaml"], input=sample_json)

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["dialect"] == "json"
        assert [n["name"] for n in data["nested_types"]] == ["Meta"]

    def test_inspect_invalid_format(self):
        """Test unsupported formats are rejected."""
        result = runner.invoke(app, ["inspect", "-f", "xml"], input=USERS_DDL)
        assert result.exit_code != 0

    def test_inspect_parse_error(self):
        """Test structural errors are reported."""
        result = runner.invoke(app, ["inspect", "-d", "json"], input="{broken")

        assert result.exit_code == 1
        assert "invalid JSON" in result.output

    def test_config(self, tmp_path):
        """Test config prints the effective settings."""
        (tmp_path / "structify.toml").write_text('package_name = "entity"\n')

        result = runner.invoke(app, ["config", str(tmp_path)])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["package_name"] == "entity"
        assert data["inline_nested_types"] is True
