"""
lookup_table.py

Runs every ADC code of a Configuration through the conversion stages and
collects one SampleResult per code.

Classes:
    SampleResult

Usage:
    results = compute_lookup_table(configuration)
"""

import logging
import math
from dataclasses import dataclass

from thermistor_calculator import PACKAGE_LOGGER_NAME
from thermistor_calculator.calculator.stages import (
    divider_output_voltage,
    thermistor_resistance,
    thermistor_temperature,
)
from thermistor_calculator.configuration import Configuration

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.lookup_table")


@dataclass(frozen=True)
class SampleResult:
    """All computed values for a single ADC code."""

    adc_value: int
    voltage: float
    resistance: float
    temperature: float

    def is_finite(self) -> bool:
        return all(
            math.isfinite(value)
            for value in (self.voltage, self.resistance, self.temperature)
        )


def compute_sample(configuration: Configuration, adc_value: int) -> SampleResult:
    """
    Convert a single ADC code into voltage, resistance and temperature.

    Never raises on numeric domain problems; boundary codes come back with
    inf or NaN fields.
    """
    voltage = divider_output_voltage(
        configuration.supply_voltage,
        configuration.adc_resolution,
        adc_value,
    )
    resistance = thermistor_resistance(
        configuration.circuit_variant,
        configuration.supply_voltage,
        voltage,
        configuration.divider_resistor,
    )
    temperature = thermistor_temperature(
        configuration.beta_coefficient,
        configuration.reference_resistance,
        resistance,
    )
    return SampleResult(
        adc_value=adc_value,
        voltage=float(voltage),
        resistance=float(resistance),
        temperature=float(temperature),
    )


def compute_lookup_table(configuration: Configuration) -> list[SampleResult]:
    """
    Compute the lookup table for every ADC code in [0, adc_resolution).

    Args:
        configuration: Validated circuit and ADC description.

    Returns:
        list[SampleResult]: One row per ADC code, in ascending code order.
    """
    results = [
        compute_sample(configuration, adc_value)
        for adc_value in range(configuration.adc_resolution)
    ]

    non_finite = sum(1 for result in results if not result.is_finite())
    logger.debug(
        f"Computed {len(results)} rows for circuit variant "
        f"{int(configuration.circuit_variant)} ({non_finite} non-finite)"
    )
    return results
