from .config_exceptions import ConfigurationError


class CommandLineError(ConfigurationError):
    """Raised when the command line cannot be parsed (unknown flag, bad value)."""
