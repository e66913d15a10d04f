"""
Configuration loader for objcompare.

Display settings come from built-in defaults, then an optional YAML file
validated against ``settings.schema.json``, then environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


SCHEMA_PATH = Path(__file__).resolve().parent / "settings.schema.json"

DEFAULT_TABLE_GAP = 4
DEFAULT_SHOW_HEADERS = True
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variable names
ENV_CONFIG_FILE = "OBJCOMPARE_CONFIG_FILE"
ENV_TABLE_GAP = "OBJCOMPARE_TABLE_GAP"
ENV_SHOW_HEADERS = "OBJCOMPARE_SHOW_HEADERS"
ENV_LOG_LEVEL = "OBJCOMPARE_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _read_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ConfigurationError(f"{name} must be true or false, got {raw!r}")


def _read_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {value}")
    return value


class Settings:
    """
    Display and logging settings for the comparison entry point.

    Settings never change the core table constants; they only control how
    rows are written and how much is logged.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Dict[str, str]] = None,
    ):
        """
        Load settings.

        Args:
            config_file: YAML settings file (defaults to $OBJCOMPARE_CONFIG_FILE)
            environ: Environment mapping (defaults to os.environ)

        Raises:
            ConfigurationError: If the file or an environment value is invalid
        """
        self.environ = dict(os.environ if environ is None else environ)
        self.table_gap = DEFAULT_TABLE_GAP
        self.show_headers = DEFAULT_SHOW_HEADERS
        self.log_level = DEFAULT_LOG_LEVEL
        self.schema: Dict[str, Any] = {}

        self.config_file = config_file or self.environ.get(ENV_CONFIG_FILE) or None
        if self.config_file:
            self._apply(self.load_file(self.config_file))

        self._apply_environment()

    def load_schema(self) -> Dict[str, Any]:
        """Load the JSON schema used to validate settings files."""
        if not self.schema:
            try:
                with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
                    self.schema = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {SCHEMA_PATH}: {e}") from e
        return self.schema

    def load_file(self, path: str) -> Dict[str, Any]:
        """
        Read and validate a YAML settings file.

        Args:
            path: Path to the YAML file

        Returns:
            Validated settings mapping (empty for an empty file)

        Raises:
            ConfigurationError: If the file is missing, not YAML, or fails validation
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Settings file not found: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if content is None:
            logger.warning(f"Empty settings file: {path}")
            return {}

        try:
            jsonschema.validate(instance=content, schema=self.load_schema())
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Settings file {path} failed validation: {e.message}") from e

        logger.debug(f"Loaded settings from {path}")
        return content

    def _apply(self, values: Dict[str, Any]) -> None:
        if "table_gap" in values:
            self.table_gap = values["table_gap"]
        if "show_headers" in values:
            self.show_headers = values["show_headers"]
        if "log_level" in values:
            self.log_level = values["log_level"]

    def _apply_environment(self) -> None:
        raw_gap = self.environ.get(ENV_TABLE_GAP)
        if raw_gap is not None:
            self.table_gap = _read_int(ENV_TABLE_GAP, raw_gap)

        raw_headers = self.environ.get(ENV_SHOW_HEADERS)
        if raw_headers is not None:
            self.show_headers = _read_bool(ENV_SHOW_HEADERS, raw_headers)

        raw_level = self.environ.get(ENV_LOG_LEVEL)
        if raw_level is not None:
            level = raw_level.strip().upper()
            if level not in VALID_LOG_LEVELS:
                raise ConfigurationError(
                    f"{ENV_LOG_LEVEL} must be one of {', '.join(VALID_LOG_LEVELS)}, got {raw_level!r}"
                )
            self.log_level = level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_gap": self.table_gap,
            "show_headers": self.show_headers,
            "log_level": self.log_level,
        }
