"""
main.py

Bootstrap entry point for the thermistor calculator. Loads the optional
settings file, parses the command line, sets up logging, computes the lookup
table and prints it.

Exit status is 0 on success or -h, 1 on any settings or command line error.
"""

import logging
import sys
from typing import Optional, Sequence

from thermistor_calculator.__version__ import __version__
from thermistor_calculator.calculator.lookup_table import compute_lookup_table
from thermistor_calculator.cli import build_configuration, parse_arguments
from thermistor_calculator.config_loader import ConfigLoader
from thermistor_calculator.configuration import Configuration
from thermistor_calculator.exceptions import ConfigurationError, InvalidConfigValueError
from thermistor_calculator.help_text import format_usage
from thermistor_calculator.logging_setup import setup_logging
from thermistor_calculator.outputs.table_writer import write_table

PROGRAM_NAME = "thermistor-calculator"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

BANNER = (
    "+-------------------------------------------------+\n"
    "| Thermistor calculator (C) 2018 Adrien RICCIARDI |\n"
    "+-------------------------------------------------+"
)


def _bootstrap_logger() -> logging.Logger:
    # No handler: until setup_logging() runs, records fall through to
    # logging.lastResort, which writes to the current sys.stderr.
    bootstrap_logger = logging.getLogger("bootstrap")
    bootstrap_logger.setLevel(logging.WARNING)
    return bootstrap_logger


def _report_error(error: Exception, defaults: Optional[Configuration]) -> int:
    print(f"Error : {error}.", file=sys.stderr)
    if defaults is not None:
        print(file=sys.stderr)
        print(format_usage(PROGRAM_NAME, defaults), file=sys.stderr)
    return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the calculator once.

    Args:
        argv: Command line arguments without the program name. Defaults to
            sys.argv[1:].

    Returns:
        int: Process exit status.
    """
    print(BANNER)

    bootstrap_logger = _bootstrap_logger()
    bootstrap_logger.debug(f"Thermistor calculator v{__version__}")

    try:
        settings = ConfigLoader(logger=bootstrap_logger).as_dict()
        defaults = Configuration.from_mapping(settings)
    except ConfigurationError as e:
        return _report_error(e, None)

    try:
        arguments = parse_arguments(argv, defaults)
        if arguments.help:
            print(format_usage(PROGRAM_NAME, defaults))
            return EXIT_SUCCESS
        configuration = build_configuration(arguments)
    except ConfigurationError as e:
        return _report_error(e, defaults)

    try:
        logger = setup_logging(
            log_level=arguments.log_level or settings["log_level"],
            log_dir=settings["log_dir"],
        )
    except OSError as e:
        error = InvalidConfigValueError(
            f"cannot write log file in {settings['log_dir']}: {e}",
            key="log_dir",
            value=settings["log_dir"],
        )
        return _report_error(error, None)

    logger.info(f"Computing lookup table with {configuration}")

    results = compute_lookup_table(configuration)
    rows = write_table(results, sys.stdout)

    logger.info(f"Wrote {rows} rows")
    return EXIT_SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
