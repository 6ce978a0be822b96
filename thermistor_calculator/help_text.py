"""
help_text.py

Renders the program usage help. The defaults shown are read from the
Configuration passed in, so a settings file changes what -h reports.
"""

from thermistor_calculator.configuration import MAXIMUM_ADC_RESOLUTION, Configuration

DESCRIPTION = (
    "Compute the ADC lookup table (containing Celsius temperatures) corresponding to a "
    "specific thermistor voltage, taking into account the voltage divider the thermistor "
    "is connected to.\n"
    "For now, only Negative Temperature Coefficient thermistors are supported."
)

CIRCUIT_DIAGRAMS = """\
Here are the two voltage divider circuits that are supported by the program :

Circuit variant 1        Circuit variant 2
-----------------        -----------------

      Vcc                      Vcc
       |                        |
      +-+                      +-+
      | | Resistor             | | NTC
      +-+                      +-+
       |                        |
       |--- Vntc                |--- Vntc
       |                        |
      +-+                      +-+
      | | NTC                  | | Resistor
      +-+                      +-+
       |                        |
      GND                      GND"""


def format_usage(program_name: str, defaults: Configuration) -> str:
    """
    Build the full help text.

    Args:
        program_name: Name shown on the usage line.
        defaults: Configuration whose values are reported as defaults.
    """
    options = [
        f"  -c : circuit variant, it can be 1 or 2 (see above for circuit variants "
        f"description). Default value is {int(defaults.circuit_variant)}.",
        f"  -B : thermistor Beta coefficient (kelvin), this is the B25/100 value of the "
        f"datasheet. Default value is {defaults.beta_coefficient:g}.",
        f"  -R : thermistor resistance at 25 Celsius degrees (ohm), floating numbers are "
        f"allowed. Default value is {defaults.reference_resistance:g}.",
        f"  -r : voltage divider bridge other resistance value (ohm), floating numbers are "
        f"allowed. Default value is {defaults.divider_resistor:g}.",
        f"  -v : Vcc voltage (volt), floating numbers are allowed. "
        f"Default value is {defaults.supply_voltage:g}.",
        f"  -a : ADC resolution (or how many values you want in the lookup table), "
        f"from 2 to {MAXIMUM_ADC_RESOLUTION}. Default value is {defaults.adc_resolution}.",
        "  -h : display this help.",
        "  --log-level : logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL), "
        "messages are written to stderr.",
    ]
    usage = (
        f"Usage : {program_name} [-c circuit] [-B beta] [-R r25] [-r resistor] "
        f"[-v Vcc] [-a resolution] [--log-level level]"
    )
    return "\n".join([DESCRIPTION, "", CIRCUIT_DIAGRAMS, "", usage, *options])
