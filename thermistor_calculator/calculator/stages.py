"""
stages.py

The three conversion stages of the lookup table: ADC code to divider output
voltage, output voltage to NTC resistance, resistance to Celsius temperature.

Every stage is a plain function that accepts scalars or numpy arrays. Values
are computed as IEEE-754 doubles: divisions by zero and logarithms of zero or
negative resistances produce inf/NaN instead of raising, so boundary ADC codes
come out as non-finite values rather than aborting the table.
"""

import numpy as np

from thermistor_calculator.configuration import CircuitVariant

KELVIN_OFFSET = 273.15
REFERENCE_TEMPERATURE_KELVIN = KELVIN_OFFSET + 25.0


def divider_output_voltage(supply_voltage, adc_resolution: int, adc_value):
    """
    Compute the voltage divider output voltage corresponding to an ADC value.

    Args:
        supply_voltage: Vcc voltage (volts).
        adc_resolution: Amount of ADC steps, e.g. 256 for an 8-bit ADC. Must
            be at least 2, see Configuration.
        adc_value: ADC code(s) in range [0, adc_resolution - 1].

    Returns:
        The output voltage (volts). Code 0 gives 0 and the last code gives
        exactly supply_voltage.
    """
    # The highest reachable code is resolution - 1
    ratio = np.asarray(adc_value, dtype=np.float64) / (adc_resolution - 1)
    return np.float64(supply_voltage) * ratio


def thermistor_resistance(
    circuit_variant: CircuitVariant,
    supply_voltage,
    output_voltage,
    divider_resistor,
):
    """
    Compute the thermistor resistance for a divider output voltage.

    Args:
        circuit_variant: Which side of the divider the thermistor sits on.
        supply_voltage: Vcc voltage (volts).
        output_voltage: Divider output voltage(s) (volts).
        divider_resistor: The fixed divider resistor (ohms).

    Returns:
        The thermistor resistance (ohms). +inf when output_voltage equals
        supply_voltage (low side) or 0 (high side).
    """
    vcc = np.float64(supply_voltage)
    vout = np.asarray(output_voltage, dtype=np.float64)
    resistor = np.float64(divider_resistor)

    with np.errstate(divide="ignore", invalid="ignore"):
        if circuit_variant == CircuitVariant.THERMISTOR_LOW_SIDE:
            return vout * resistor / (vcc - vout)
        return (vcc * resistor / vout) - resistor


def thermistor_temperature(beta_coefficient, reference_resistance, resistance):
    """
    Determine the thermistor Celsius temperature with the Beta equation.

        1/T = ln(R / R25) / B + 1/T25

    Args:
        beta_coefficient: B25/100 value of the datasheet (kelvin).
        reference_resistance: R25, the resistance at 25 Celsius (ohms).
        resistance: Thermistor resistance(s) to convert (ohms).

    Returns:
        The temperature (Celsius). NaN for negative resistances. A zero
        resistance gives ln(0) = -inf and so -273.15 rather than NaN, as does
        an infinite one.
    """
    ratio = np.asarray(resistance, dtype=np.float64) / np.float64(reference_resistance)

    with np.errstate(divide="ignore", invalid="ignore"):
        kelvin = 1.0 / (np.log(ratio) / np.float64(beta_coefficient) + 1.0 / REFERENCE_TEMPERATURE_KELVIN)
    return kelvin - KELVIN_OFFSET
