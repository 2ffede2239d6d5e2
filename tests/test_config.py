"""
Tests for settings loading.
"""

import tempfile
from pathlib import Path

import pytest

from structify.config import Settings, SettingsManager, load_settings, parse_bool
from structify.parser.shared.exceptions import ConfigError


@pytest.fixture
def project_dir():
    """Temporary directory to hold configuration files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove structify environment variables."""
    for env_var in SettingsManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


class TestParseBool:
    """Test boolean parsing of configuration values."""

    @pytest.mark.parametrize("value", [True, "true", "1", "YES", " on "])
    def test_true_values(self, value):
        assert parse_bool(value, "key") is True

    @pytest.mark.parametrize("value", [False, "false", "0", "no", "Off"])
    def test_false_values(self, value):
        assert parse_bool(value, "key") is False

    @pytest.mark.parametrize("value", ["maybe", 2, None])
    def test_invalid_values(self, value):
        with pytest.raises(ConfigError, match="Invalid boolean for 'key'"):
            parse_bool(value, "key")


class TestSettingsManager:
    """Test settings precedence and validation."""

    def test_defaults(self, project_dir):
        """Test defaults when nothing is configured."""
        settings = load_settings(project_dir)

        assert settings == Settings()
        assert settings.package_name == "model"
        assert settings.emit_storage_accessor is True
        assert settings.inline_nested_types is True
        assert settings.default_json_struct_name == "Response"

    def test_pyproject_tool_section(self, project_dir):
        """Test [tool.structify] in pyproject.toml."""
        (project_dir / "pyproject.toml").write_text(
            '[tool.structify]\npackage_name = "entity"\ninline_nested_types = false\n'
        )

        settings = load_settings(project_dir)

        assert settings.package_name == "entity"
        assert settings.inline_nested_types is False

    def test_standalone_file(self, project_dir):
        """Test structify.toml when pyproject.toml has no tool section."""
        (project_dir / "pyproject.toml").write_text('[project]\nname = "x"\n')
        (project_dir / "structify.toml").write_text('struct_name = "Thing"\n')

        assert load_settings(project_dir).struct_name == "Thing"

    def test_environment_overrides_toml(self, project_dir, monkeypatch):
        """Test environment variables win over files."""
        (project_dir / "structify.toml").write_text(
            'package_name = "entity"\nemit_storage_accessor = true\n'
        )
        monkeypatch.setenv("STRUCTIFY_PACKAGE_NAME", "dto")
        monkeypatch.setenv("STRUCTIFY_EMIT_STORAGE_ACCESSOR", "false")

        settings = load_settings(project_dir)

        assert settings.package_name == "dto"
        assert settings.emit_storage_accessor is False

    def test_empty_strings_reset_to_defaults(self, project_dir, monkeypatch):
        """Test empty values fall back to defaults."""
        monkeypatch.setenv("STRUCTIFY_STRUCT_NAME", "")
        monkeypatch.setenv("STRUCTIFY_PACKAGE_NAME", "  ")

        settings = load_settings(project_dir)

        assert settings.struct_name is None
        assert settings.package_name == "model"

    def test_invalid_boolean_raises(self, project_dir, monkeypatch):
        """Test invalid booleans are rejected."""
        monkeypatch.setenv("STRUCTIFY_INLINE_NESTED_TYPES", "sometimes")

        with pytest.raises(ConfigError):
            load_settings(project_dir)

    def test_invalid_string_type_raises(self, project_dir):
        """Test non-string values for string settings are rejected."""
        (project_dir / "structify.toml").write_text("package_name = 3\n")

        with pytest.raises(ConfigError, match="package_name"):
            load_settings(project_dir)

    def test_unknown_keys_are_ignored(self, project_dir):
        """Test unknown settings are skipped."""
        (project_dir / "structify.toml").write_text('color = "blue"\n')
        assert load_settings(project_dir) == Settings()

    def test_malformed_toml_is_ignored(self, project_dir):
        """Test unreadable files fall back to defaults."""
        (project_dir / "structify.toml").write_text("this is = = not toml")
        assert load_settings(project_dir) == Settings()

    def test_to_options(self):
        """Test settings convert to generator options."""
        options = Settings(struct_name="X", package_name="p", inline_nested_types=False).to_options()

        assert options.struct_name == "X"
        assert options.package_name == "p"
        assert options.emit_storage_accessor is True
        assert options.inline_nested_types is False
