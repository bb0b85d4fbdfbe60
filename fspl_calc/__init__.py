from .units import (
    POWER_UNITS,
    DISTANCE_UNITS,
    FREQUENCY_UNITS,
    to_number,
    pt_to_dbm,
    d_to_km,
    f_to_mhz,
    mhz_to_unit,
    optional_db,
)
from .fspl import fspl_db, received_power_dbm
from .sweep import linspace
from .defaults import (
    Defaults,
    DEFAULTS,
    MAX_SWEEP_POINTS,
    SWEEP_EPSILON,
    MARKER_POINT_LIMIT,
)
from .link_budget import (
    Measurement,
    LinkInputs,
    LinkParameters,
    LinkResult,
    SweepPoint,
    RangeResult,
    evaluate,
    compute_single,
    compute_range,
)
from .formatting import (
    format_dbm,
    format_db,
    format_km,
    format_mhz,
    single_fields,
    range_fields,
    range_summary,
    sweep_to_table,
    save_sweep_csv,
    print_table,
)
from .chart import ChartHandle
from .controller import Calculator, Outcome, MODES

__all__ = [
    "POWER_UNITS",
    "DISTANCE_UNITS",
    "FREQUENCY_UNITS",
    "to_number",
    "pt_to_dbm",
    "d_to_km",
    "f_to_mhz",
    "mhz_to_unit",
    "optional_db",
    "fspl_db",
    "received_power_dbm",
    "linspace",
    "Defaults",
    "DEFAULTS",
    "MAX_SWEEP_POINTS",
    "SWEEP_EPSILON",
    "MARKER_POINT_LIMIT",
    "Measurement",
    "LinkInputs",
    "LinkParameters",
    "LinkResult",
    "SweepPoint",
    "RangeResult",
    "evaluate",
    "compute_single",
    "compute_range",
    "format_dbm",
    "format_db",
    "format_km",
    "format_mhz",
    "single_fields",
    "range_fields",
    "range_summary",
    "sweep_to_table",
    "save_sweep_csv",
    "print_table",
    "ChartHandle",
    "Calculator",
    "Outcome",
    "MODES",
]
