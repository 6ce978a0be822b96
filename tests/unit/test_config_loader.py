import json
from pathlib import Path
from unittest.mock import patch, mock_open

import pytest

from thermistor_calculator.config_loader import CONFIG_PATH_ENV_VAR, ConfigLoader
from thermistor_calculator.configuration import Configuration
from thermistor_calculator.exceptions import (
    ConfigurationError,
    ConfigFileNotFoundError,
    InvalidConfigValueError,
)


class DummyLogger:
    """Minimal logger substitute for testing."""

    def __init__(self):
        self.messages = []

    def debug(self, msg):
        self.messages.append(msg)

    def info(self, msg):
        self.messages.append(msg)

    def warning(self, msg):
        self.messages.append(msg)

    def error(self, msg):
        self.messages.append(msg)


def write_settings(tmp_path, data, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))
    return path


# ----------------------------
# No settings file
# ----------------------------

def test_without_settings_file_uses_defaults():
    loader = ConfigLoader(DummyLogger())
    settings = loader.as_dict()

    assert loader.config_path is None
    assert settings["circuit_variant"] == 1
    assert settings["beta_coefficient"] == 4300.0
    assert settings["reference_resistance"] == 10000.0
    assert settings["divider_resistor"] == 10000.0
    assert settings["supply_voltage"] == 3.3
    assert settings["adc_resolution"] == 256
    assert settings["log_level"] == "WARNING"
    assert settings["log_dir"] is None
    assert Configuration.from_mapping(settings) == Configuration()


# ----------------------------
# Valid settings file
# ----------------------------

def test_settings_file_values_override_defaults(tmp_path, monkeypatch):
    path = write_settings(
        tmp_path,
        {"circuit_variant": 2, "adc_resolution": 1024, "supply_voltage": 5.0, "log_level": "info"},
        monkeypatch,
    )
    logger = DummyLogger()
    settings = ConfigLoader(logger).as_dict()

    assert settings["circuit_variant"] == 2
    assert settings["adc_resolution"] == 1024
    assert settings["supply_voltage"] == 5.0
    assert settings["beta_coefficient"] == 4300.0
    assert settings["log_level"] == "INFO"
    assert any(str(path.resolve()) in message for message in logger.messages)


@patch.dict("os.environ", {CONFIG_PATH_ENV_VAR: "/fake/settings.json"})
@patch("thermistor_calculator.config_loader.ConfigLoader._resolve_config_path")
@patch(
    "builtins.open",
    new_callable=mock_open,
    read_data='{"beta_coefficient": 3950, "log_dir": "log"}',
)
def test_settings_file_read_through_open(mock_file, mock_resolve_path):
    mock_resolve_path.return_value = Path("/fake/settings.json")

    settings = ConfigLoader(DummyLogger()).as_dict()

    mock_file.assert_called_once_with(Path("/fake/settings.json"), "r")
    assert settings["beta_coefficient"] == 3950
    assert settings["log_dir"] == "log"


def test_unknown_keys_are_warned_and_dropped(tmp_path, monkeypatch):
    write_settings(tmp_path, {"sensors": [], "adc_resolution": 512}, monkeypatch)
    logger = DummyLogger()
    settings = ConfigLoader(logger).as_dict()

    assert "sensors" not in settings
    assert settings["adc_resolution"] == 512
    assert "ConfigLoader: ignoring unknown key 'sensors'" in logger.messages


# ----------------------------
# Invalid settings file
# ----------------------------

def test_missing_settings_file_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(tmp_path / "absent.json"))

    with pytest.raises(ConfigFileNotFoundError) as excinfo:
        ConfigLoader(DummyLogger())
    assert isinstance(excinfo.value, FileNotFoundError)


def test_malformed_json_raises(tmp_path, monkeypatch):
    write_settings(tmp_path, "{not json", monkeypatch)
    logger = DummyLogger()

    with pytest.raises(InvalidConfigValueError, match="cannot read settings file"):
        ConfigLoader(logger)
    assert any("failed reading" in message for message in logger.messages)


def test_non_object_json_raises(tmp_path, monkeypatch):
    write_settings(tmp_path, [1, 2, 3], monkeypatch)

    with pytest.raises(InvalidConfigValueError, match="JSON object"):
        ConfigLoader(DummyLogger())


@pytest.mark.parametrize("level", ["LOUD", 10, ""])
def test_invalid_log_level_raises(level, tmp_path, monkeypatch):
    write_settings(tmp_path, {"log_level": level}, monkeypatch)

    with pytest.raises(InvalidConfigValueError) as excinfo:
        ConfigLoader(DummyLogger())
    assert excinfo.value.key == "log_level"


@pytest.mark.parametrize("log_dir", ["", "   ", 5])
def test_invalid_log_dir_raises(log_dir, tmp_path, monkeypatch):
    write_settings(tmp_path, {"log_dir": log_dir}, monkeypatch)

    with pytest.raises(ConfigurationError):
        ConfigLoader(DummyLogger())


def test_out_of_range_values_are_left_for_configuration(tmp_path, monkeypatch):
    write_settings(tmp_path, {"adc_resolution": 70000}, monkeypatch)
    settings = ConfigLoader(DummyLogger()).as_dict()

    with pytest.raises(InvalidConfigValueError, match="maximum allowed ADC resolution"):
        Configuration.from_mapping(settings)
