"""
Settings management.

This module loads generation preferences from pyproject.toml (or
structify.toml) and environment variables with proper precedence and
validation.
"""

import logging
import os
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from structify.parser.shared.constants import DEFAULT_JSON_STRUCT_NAME
from structify.parser.shared.exceptions import ConfigError
from structify.typing.schema import GenerateOptions

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}
_BOOLEAN_KEYS = ("emit_storage_accessor", "inline_nested_types")
_STRING_KEYS = ("struct_name", "package_name", "default_json_struct_name")


@dataclass
class Settings:
    """Generation preferences."""

    struct_name: str | None = None
    package_name: str = "model"
    emit_storage_accessor: bool = True
    inline_nested_types: bool = True
    default_json_struct_name: str = DEFAULT_JSON_STRUCT_NAME

    def to_options(self) -> GenerateOptions:
        """Build generator options from these settings."""
        return GenerateOptions(
            struct_name=self.struct_name,
            package_name=self.package_name,
            emit_storage_accessor=self.emit_storage_accessor,
            inline_nested_types=self.inline_nested_types,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def parse_bool(value: Any, key: str) -> bool:
    """
    Interpret a configuration value as a boolean.

    Raises:
        ConfigError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ConfigError(f"Invalid boolean for '{key}': {value!r}")


class SettingsManager:
    """Manages settings from multiple sources."""

    # Map environment variables to settings keys
    ENV_MAPPINGS = {
        "STRUCTIFY_STRUCT_NAME": "struct_name",
        "STRUCTIFY_PACKAGE_NAME": "package_name",
        "STRUCTIFY_EMIT_STORAGE_ACCESSOR": "emit_storage_accessor",
        "STRUCTIFY_INLINE_NESTED_TYPES": "inline_nested_types",
        "STRUCTIFY_DEFAULT_JSON_STRUCT_NAME": "default_json_struct_name",
    }

    def __init__(self, project_root: str | Path | None = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self) -> Settings:
        """
        Load settings from TOML and environment variables (env vars win).

        Returns:
            Settings with defaults for anything not configured

        Raises:
            ConfigError: If a configured value is invalid
        """
        merged = {**self._load_toml_config(), **self._load_env_config()}
        return self._create_settings(merged)

    def _load_toml_config(self) -> dict[str, Any]:
        """Load [tool.structify] from pyproject.toml, or structify.toml."""
        pyproject = self.project_root / "pyproject.toml"
        standalone = self.project_root / "structify.toml"

        for toml_file in (pyproject, standalone):
            if not toml_file.exists():
                continue

            try:
                with open(toml_file, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                self.logger.warning(f"Could not read {toml_file.name}: {e}")
                continue

            if toml_file is pyproject:
                config = data.get("tool", {}).get("structify")
                if config is None:
                    continue
            else:
                config = data

            self.logger.debug(f"Loaded settings from {toml_file}")
            return dict(config)

        self.logger.debug("No structify settings found in TOML files")
        return {}

    def _load_env_config(self) -> dict[str, Any]:
        env_config = {}
        for env_var, key in self.ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if value is not None:
                env_config[key] = value
        return env_config

    def _create_settings(self, config: dict[str, Any]) -> Settings:
        settings = Settings()

        for key, value in config.items():
            if key in _BOOLEAN_KEYS:
                setattr(settings, key, parse_bool(value, key))
            elif key in _STRING_KEYS:
                if not isinstance(value, str):
                    raise ConfigError(f"Invalid value for '{key}': expected a string")
                setattr(settings, key, value.strip() or None)
            else:
                self.logger.warning(f"Ignoring unknown setting '{key}'")

        # These two always need a value
        settings.package_name = settings.package_name or Settings.package_name
        settings.default_json_struct_name = (
            settings.default_json_struct_name or DEFAULT_JSON_STRUCT_NAME
        )
        return settings


def load_settings(project_root: str | Path | None = None) -> Settings:
    """Load settings for a project directory (defaults to the working directory)."""
    return SettingsManager(project_root).load()
