"""
configuration.py

Immutable, validated description of the thermistor circuit and the ADC that
samples it. A Configuration is built once per run, either from defaults,
from a settings mapping (see config_loader.py) or from the command line, and
is then handed to the calculator.

Classes:
    CircuitVariant
    Configuration
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping

from thermistor_calculator.exceptions import InvalidConfigValueError

# 16-bit ADC
MAXIMUM_ADC_RESOLUTION = 65536
MINIMUM_ADC_RESOLUTION = 2


class CircuitVariant(IntEnum):
    """
    Supported voltage divider circuits.

    THERMISTOR_LOW_SIDE: fixed resistor between Vcc and the tap, NTC between
    the tap and ground.
    THERMISTOR_HIGH_SIDE: NTC between Vcc and the tap, fixed resistor between
    the tap and ground.
    """

    THERMISTOR_LOW_SIDE = 1
    THERMISTOR_HIGH_SIDE = 2


@dataclass(frozen=True)
class Configuration:
    circuit_variant: CircuitVariant = CircuitVariant.THERMISTOR_LOW_SIDE
    supply_voltage: float = 3.3
    divider_resistor: float = 10000.0
    reference_resistance: float = 10000.0
    beta_coefficient: float = 4300.0
    adc_resolution: int = 256

    def __post_init__(self) -> None:
        if not isinstance(self.circuit_variant, CircuitVariant):
            raise InvalidConfigValueError(
                "circuit variant value must be 1 or 2",
                key="circuit_variant",
                value=self.circuit_variant,
            )

        _require_positive("supply_voltage", "Vcc voltage", self.supply_voltage)
        _require_positive("divider_resistor", "voltage divider resistor", self.divider_resistor)
        _require_positive(
            "reference_resistance",
            "thermistor reference resistance (R25)",
            self.reference_resistance,
        )
        _require_positive("beta_coefficient", "thermistor beta coefficient", self.beta_coefficient)

        if isinstance(self.adc_resolution, bool) or not isinstance(self.adc_resolution, int):
            raise InvalidConfigValueError(
                f"invalid ADC resolution value: {self.adc_resolution!r}",
                key="adc_resolution",
                value=self.adc_resolution,
            )
        if self.adc_resolution > MAXIMUM_ADC_RESOLUTION:
            raise InvalidConfigValueError(
                f"maximum allowed ADC resolution is {MAXIMUM_ADC_RESOLUTION}",
                key="adc_resolution",
                value=self.adc_resolution,
            )
        if self.adc_resolution < MINIMUM_ADC_RESOLUTION:
            raise InvalidConfigValueError(
                f"minimum allowed ADC resolution is {MINIMUM_ADC_RESOLUTION}",
                key="adc_resolution",
                value=self.adc_resolution,
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Configuration":
        """
        Build a Configuration from a settings mapping, falling back to the
        built-in defaults for absent keys.

        Args:
            mapping: Settings such as those returned by ConfigLoader.as_dict().
                Keys other than the Configuration fields are ignored.

        Raises:
            InvalidConfigValueError: If a value is malformed or out of range.
        """
        defaults = cls()
        return cls(
            circuit_variant=to_circuit_variant(
                mapping.get("circuit_variant", defaults.circuit_variant)
            ),
            supply_voltage=_to_float(
                "supply_voltage", mapping.get("supply_voltage", defaults.supply_voltage)
            ),
            divider_resistor=_to_float(
                "divider_resistor", mapping.get("divider_resistor", defaults.divider_resistor)
            ),
            reference_resistance=_to_float(
                "reference_resistance",
                mapping.get("reference_resistance", defaults.reference_resistance),
            ),
            beta_coefficient=_to_float(
                "beta_coefficient", mapping.get("beta_coefficient", defaults.beta_coefficient)
            ),
            adc_resolution=_to_int(
                "adc_resolution", mapping.get("adc_resolution", defaults.adc_resolution)
            ),
        )


def to_circuit_variant(value: Any) -> CircuitVariant:
    """
    Convert 1/2 (int or numeric string) into a CircuitVariant.

    Raises:
        InvalidConfigValueError: If the value is not 1 or 2.
    """
    number = _to_int("circuit_variant", value)
    try:
        return CircuitVariant(number)
    except ValueError:
        raise InvalidConfigValueError(
            "circuit variant value must be 1 or 2", key="circuit_variant", value=value
        ) from None


def _require_positive(key: str, label: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigValueError(f"invalid {label} value: {value!r}", key=key, value=value)
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise InvalidConfigValueError(
            f"{label} is out of range", key=key, value=value
        ) from None
    if not finite or value <= 0:
        raise InvalidConfigValueError(
            f"{label} must be a positive number, got {value}", key=key, value=value
        )


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidConfigValueError(f"invalid {key} value: {value!r}", key=key, value=value)
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidConfigValueError(
            f"invalid {key} value: {value!r}", key=key, value=value
        ) from None


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidConfigValueError(f"invalid {key} value: {value!r}", key=key, value=value)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidConfigValueError(
                f"{key} must be an integer, got {value}", key=key, value=value
            )
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigValueError(
            f"invalid {key} value: {value!r}", key=key, value=value
        ) from None
