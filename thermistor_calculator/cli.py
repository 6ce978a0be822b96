"""
cli.py

Command line parsing. Turns argv into a validated Configuration, using a base
Configuration (built-in defaults merged with the settings file) for every
flag that is not given.

argparse's own help and exit handling are disabled: -h is reported back to
the caller, and parse failures raise CommandLineError so main() can print
the error together with the help text.

Usage:
    arguments = parse_arguments(["-c", "2", "-a", "1024"], defaults)
    if not arguments.help:
        configuration = build_configuration(arguments)
"""

import argparse
from typing import Optional, Sequence

from thermistor_calculator.configuration import CircuitVariant, Configuration
from thermistor_calculator.exceptions import CommandLineError
from thermistor_calculator.logging_setup import LOG_LEVELS

CONFIGURATION_FIELDS = (
    "circuit_variant",
    "beta_coefficient",
    "reference_resistance",
    "divider_resistor",
    "supply_voltage",
    "adc_resolution",
)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise CommandLineError(message)


def _float_type(label: str):
    def convert(text: str) -> float:
        try:
            return float(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {label} value") from None

    return convert


def _circuit_variant_type(text: str) -> CircuitVariant:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid circuit variant value") from None
    try:
        return CircuitVariant(number)
    except ValueError:
        raise argparse.ArgumentTypeError("circuit variant value must be 1 or 2") from None


def _adc_resolution_type(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid ADC resolution value") from None


def build_parser(defaults: Configuration) -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument(
        "-c", dest="circuit_variant", type=_circuit_variant_type,
        default=defaults.circuit_variant,
    )
    parser.add_argument(
        "-B", dest="beta_coefficient", type=_float_type("thermistor beta coefficient"),
        default=defaults.beta_coefficient,
    )
    parser.add_argument(
        "-R", dest="reference_resistance",
        type=_float_type("thermistor reference resistance (R25)"),
        default=defaults.reference_resistance,
    )
    parser.add_argument(
        "-r", dest="divider_resistor", type=_float_type("voltage divider resistor"),
        default=defaults.divider_resistor,
    )
    parser.add_argument(
        "-v", dest="supply_voltage", type=_float_type("voltage divider bridge voltage"),
        default=defaults.supply_voltage,
    )
    parser.add_argument(
        "-a", dest="adc_resolution", type=_adc_resolution_type,
        default=defaults.adc_resolution,
    )
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS)
    return parser


def parse_arguments(
    argv: Optional[Sequence[str]],
    defaults: Configuration,
) -> argparse.Namespace:
    """
    Parse the command line.

    -h takes precedence over malformed or out-of-range values: when it is
    present the returned namespace has help set and the other values are
    left unconverted.

    Raises:
        CommandLineError: On unknown flags or malformed values.
    """
    help_arguments = _scan_for_help(argv)
    if help_arguments is not None:
        return help_arguments
    return build_parser(defaults).parse_args(argv)


def _scan_for_help(argv: Optional[Sequence[str]]) -> Optional[argparse.Namespace]:
    scanner = _RaisingArgumentParser(add_help=False, allow_abbrev=False)
    for flag in ("-c", "-B", "-R", "-r", "-v", "-a", "--log-level"):
        scanner.add_argument(flag)
    scanner.add_argument("-h", dest="help", action="store_true")
    try:
        arguments, _ = scanner.parse_known_args(argv)
    except CommandLineError:
        return None
    return arguments if arguments.help else None


def build_configuration(arguments: argparse.Namespace) -> Configuration:
    """
    Build the run Configuration from parsed arguments.

    Raises:
        InvalidConfigValueError: If a value is out of range.
    """
    return Configuration(**{name: getattr(arguments, name) for name in CONFIGURATION_FIELDS})
