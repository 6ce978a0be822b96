"""
table_writer.py

Formats lookup table rows as tab-separated text. Non-finite values are
written as inf, -inf or nan.
"""

from typing import Iterable, TextIO

from thermistor_calculator.calculator.lookup_table import SampleResult

TABLE_HEADER = (
    "ADC value\tThermistor voltage (V)\tThermistor resistance (ohm)"
    "\tThermistor temperature (Celsius)"
)


def format_row(result: SampleResult) -> str:
    return (
        f"{result.adc_value}\t\t{result.voltage:f}\t\t"
        f"{result.resistance:f}\t\t\t{result.temperature:f}"
    )


def write_table(results: Iterable[SampleResult], stream: TextIO) -> int:
    """
    Write the header followed by one line per result.

    Returns:
        int: Number of rows written, header excluded.
    """
    stream.write(TABLE_HEADER + "\n")
    count = 0
    for result in results:
        stream.write(format_row(result) + "\n")
        count += 1
    return count
