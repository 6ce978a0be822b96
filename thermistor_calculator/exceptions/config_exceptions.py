"""
config_exceptions.py

Unified exception hierarchy for all configuration-related errors.

All exceptions here share a common base (ConfigurationError) so callers
can either catch broadly:

    except ConfigurationError: ...

or precisely:

    except InvalidConfigValueError: ...
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Base class for all configuration-related errors."""


class InvalidConfigValueError(ConfigurationError):
    """
    Raised when a config value fails validation.
    Carries the offending key and value for logs without string parsing.
    """

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class ConfigFileNotFoundError(ConfigurationError, FileNotFoundError):
    """Raised when the configuration file cannot be located."""
