from thermistor_calculator.__version__ import __version__

PACKAGE_LOGGER_NAME = "thermistor_calculator"

__all__ = ["__version__", "PACKAGE_LOGGER_NAME"]
