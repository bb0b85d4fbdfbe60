"""Default parameter set and fixed limits.

The values in :class:`Defaults` are what "Reset to defaults" restores on the
page and what the CLI falls back to when a flag is omitted.
"""

from dataclasses import dataclass

# Sweeps longer than this are truncated (bounds work and chart size per request).
MAX_SWEEP_POINTS = 3000
# Tolerance on the inclusive stop bound of a sweep.
SWEEP_EPSILON = 1e-12
# Charts with more points than this are drawn without point markers.
MARKER_POINT_LIMIT = 80


@dataclass(frozen=True)
class Defaults:
    pt_value: float = 20.0
    pt_unit: str = "dBm"
    d_value: float = 1.0
    d_unit: str = "km"
    f_value: float = 2400.0
    f_unit: str = "MHz"
    f_start: float = 800.0
    f_stop: float = 2600.0
    f_step: float = 50.0
    f_range_unit: str = "MHz"
    gt_db: float = 0.0
    gr_db: float = 0.0
    loss_db: float = 0.0


DEFAULTS = Defaults()
