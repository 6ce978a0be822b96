"""
config_loader.py

Load optional settings from a JSON file and merge them over the built-in
defaults. The file location comes from the THERMISTOR_CALCULATOR_CONFIG
environment variable; when the variable is unset only the defaults are used.

Command line flags are applied later (see cli.py) and take precedence over
everything loaded here.

Classes:
    ConfigLoader

Usage:
    loader = ConfigLoader(logger)
    settings = loader.as_dict()
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from thermistor_calculator.logging_setup import LOG_LEVELS
from thermistor_calculator.configuration import Configuration
from thermistor_calculator.exceptions import (
    ConfigFileNotFoundError,
    InvalidConfigValueError,
)

CONFIG_PATH_ENV_VAR = "THERMISTOR_CALCULATOR_CONFIG"
DEFAULT_LOG_LEVEL = "WARNING"

KNOWN_KEYS = frozenset(
    {
        "circuit_variant",
        "beta_coefficient",
        "reference_resistance",
        "divider_resistor",
        "supply_voltage",
        "adc_resolution",
        "log_level",
        "log_dir",
    }
)


def _load_json_config(path: Path, logger=None) -> Dict[str, Any]:
    """
    Load a JSON object from the given file path.

    Raises:
        InvalidConfigValueError: If the file cannot be read, is not valid
            JSON, or does not hold a JSON object.
    """
    try:
        with open(path, "r") as file:
            data = json.load(file)
    except (OSError, ValueError) as e:
        if logger is not None:
            logger.error(f"ConfigLoader: failed reading {path}: {e}")
        raise InvalidConfigValueError(f"cannot read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigValueError(
            f"settings file {path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


class ConfigLoader:
    """
    Load and validate settings from an optional JSON file.

    JSON keys (all optional):
      - circuit_variant (1 or 2)
      - beta_coefficient (float > 0)
      - reference_resistance (float > 0)
      - divider_resistor (float > 0)
      - supply_voltage (float > 0)
      - adc_resolution (int, 2..65536)
      - log_level (str, default "WARNING")
      - log_dir (str, enables the log file)
    """

    def __init__(self, logger):
        """
        Resolve the settings file, load it and validate the logging fields.

        Args:
            logger (Logger): Logger instance for diagnostic output.

        Raises:
            ConfigFileNotFoundError: If the environment names a missing file.
            InvalidConfigValueError: If the file or one of its values is invalid.
        """
        self.logger = logger

        self.config_path = self._resolve_config_path()
        self.config: Dict[str, Any] = (
            _load_json_config(self.config_path, self.logger) if self.config_path else {}
        )

        self._warn_unknown_keys()

        self.log_level = self._get_log_level()
        self.log_dir = self._get_log_dir()

    def as_dict(self) -> Dict[str, Any]:
        """
        Return the built-in defaults overlaid with the values from the file.
        """
        merged: Dict[str, Any] = asdict(Configuration())
        merged["circuit_variant"] = int(merged["circuit_variant"])

        for key in KNOWN_KEYS:
            if key in self.config:
                merged[key] = self.config[key]

        merged["log_level"] = self.log_level
        merged["log_dir"] = self.log_dir

        self.logger.debug(f"ConfigLoader: settings loaded: {merged}")
        return merged

    def _resolve_config_path(self) -> Optional[Path]:
        env_path = os.getenv(CONFIG_PATH_ENV_VAR)
        if not env_path:
            return None

        path = Path(env_path).expanduser().resolve()
        if not path.is_file():
            raise ConfigFileNotFoundError(
                f"{CONFIG_PATH_ENV_VAR} set but file does not exist: {path}"
            )
        self.logger.info(f"ConfigLoader: using settings from {path}")
        return path

    def _warn_unknown_keys(self) -> None:
        for key in sorted(set(self.config) - KNOWN_KEYS):
            self.logger.warning(f"ConfigLoader: ignoring unknown key '{key}'")

    def _get_log_level(self) -> str:
        """
        Retrieve the log_level from the file or default to "WARNING".

        Raises:
            InvalidConfigValueError: If the level name is unknown.
        """
        value = self.config.get("log_level", DEFAULT_LOG_LEVEL)
        if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
            self.logger.error(f"Invalid log_level: {value!r}")
            raise InvalidConfigValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}",
                key="log_level",
                value=value,
            )
        return value.upper()

    def _get_log_dir(self) -> Optional[str]:
        value = self.config.get("log_dir")
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            self.logger.error(f"Invalid log_dir: {value!r}")
            raise InvalidConfigValueError(
                "log_dir must be a non-empty string", key="log_dir", value=value
            )
        return value
