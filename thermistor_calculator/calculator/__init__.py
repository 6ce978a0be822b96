from .lookup_table import SampleResult, compute_lookup_table, compute_sample
from .stages import divider_output_voltage, thermistor_resistance, thermistor_temperature

__all__ = [
    "SampleResult",
    "compute_lookup_table",
    "compute_sample",
    "divider_output_voltage",
    "thermistor_resistance",
    "thermistor_temperature",
]
