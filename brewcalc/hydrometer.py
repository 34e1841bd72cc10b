"""Hydrometer reading correction for sample temperature."""

from __future__ import annotations

from brewcalc.quantity import Temperature, Unit, celsius_to_fahrenheit

_COEFF1 = 1.313454
_COEFF2 = 0.132674
_COEFF3 = 2.057793e-3
_COEFF4 = 2.627634e-6


def _correction(temp_f: float) -> float:
    return (
        _COEFF1
        - _COEFF2 * temp_f
        + _COEFF3 * temp_f * temp_f
        - _COEFF4 * temp_f * temp_f * temp_f
    )


def corrected_gravity(
    reading: float,
    sample: float,
    calibrated: float,
    unit: Unit = Temperature.fahrenheit,
) -> float:
    """Correct a specific-gravity ``reading`` taken at ``sample`` temperature.

    ``calibrated`` is the hydrometer's calibration temperature; both
    temperatures are in ``unit`` (Fahrenheit or Celsius).
    """
    if unit == Temperature.celsius:
        sample = celsius_to_fahrenheit(sample)
        calibrated = celsius_to_fahrenheit(calibrated)
    corr = (_correction(sample) - _correction(calibrated)) / 1000.0
    return reading / (1.0 - corr)


def format_gravity(value: float) -> str:
    """Format a specific gravity with three decimals."""
    return f"{value:.3f}"