"""Unit normalisation for the calculator inputs.

Every quantity is converted to one canonical unit before it reaches the
path-loss formula:
- power -> dBm
- distance -> km
- frequency -> MHz

Invalid input is reported with ``math.nan`` rather than an exception, so the
caller can check the whole set of normalised values in one place. Gains and
losses are the exception: they are optional and fall back to 0 dB.
"""

import math
from typing import Any, Tuple

POWER_UNITS: Tuple[str, ...] = ("dBm", "mW", "W")
DISTANCE_UNITS: Tuple[str, ...] = ("km", "m")
FREQUENCY_UNITS: Tuple[str, ...] = ("Hz", "kHz", "MHz", "GHz")


def to_number(value: Any) -> float:
    """Parse a raw form value; NaN when empty, non-numeric or non-finite."""
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return math.nan
        # float() also takes digit separators ("1_000"); form input does not
        if "_" in value:
            return math.nan
    try:
        x = float(value)
    except (TypeError, ValueError):
        return math.nan
    return x if math.isfinite(x) else math.nan


def pt_to_dbm(value: Any, unit: str) -> float:
    """Transmit power to dBm.

    dBm passes through (any sign); mW and W must be strictly positive.
    """
    x = to_number(value)
    if not math.isfinite(x):
        return math.nan
    if unit == "dBm":
        return x
    if unit == "mW":
        if x <= 0:
            return math.nan
        return 10.0 * math.log10(x)
    if unit == "W":
        if x <= 0:
            return math.nan
        return 10.0 * math.log10(x * 1000.0)
    return math.nan


def d_to_km(value: Any, unit: str) -> float:
    x = to_number(value)
    if not math.isfinite(x) or x <= 0:
        return math.nan
    if unit == "km":
        return x
    if unit == "m":
        return x / 1000.0
    return math.nan


def f_to_mhz(value: Any, unit: str) -> float:
    x = to_number(value)
    if not math.isfinite(x) or x <= 0:
        return math.nan
    if unit == "GHz":
        return x * 1000.0
    if unit == "MHz":
        return x
    if unit == "kHz":
        return x / 1000.0
    if unit == "Hz":
        return x / 1e6
    return math.nan


def mhz_to_unit(frequency_mhz: float, unit: str) -> float:
    """Express a MHz value in ``unit`` (inverse of :func:`f_to_mhz`)."""
    if unit == "GHz":
        return frequency_mhz / 1000.0
    if unit == "MHz":
        return frequency_mhz
    if unit == "kHz":
        return frequency_mhz * 1000.0
    if unit == "Hz":
        return frequency_mhz * 1e6
    return math.nan


def optional_db(value: Any) -> float:
    """Gain/loss field: 0 dB when absent or non-numeric."""
    x = to_number(value)
    return x if math.isfinite(x) else 0.0
