from .config_exceptions import (
    ConfigurationError,
    InvalidConfigValueError,
    ConfigFileNotFoundError,
)
from .cli_exceptions import CommandLineError

__all__ = [
    "ConfigurationError",
    "InvalidConfigValueError",
    "ConfigFileNotFoundError",
    "CommandLineError",
]
