"""UI controller: mode state machine, calculate and reset.

The controller is the only owner of mutable UI state:
- ``mode``: "single" or "range" (initially "single")
- ``chart``: the :class:`ChartHandle` holding the live figure
- ``error``: the message shown in the error banner, or None
- ``fields`` / ``summary``: the last successfully rendered output

Inputs are not held here. Front-ends build a fresh :class:`LinkInputs` for
every request and pass it to :meth:`Calculator.calculate`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .chart import ChartHandle
from .formatting import range_fields, range_summary, single_fields
from .link_budget import LinkInputs, LinkResult, RangeResult, compute_range, compute_single
from .units import mhz_to_unit

logger = logging.getLogger(__name__)

MODES = ("single", "range")

MSG_SINGLE_INVALID = "Invalid input: check transmit power / frequency / distance (must be positive numbers)."
MSG_RANGE_LINK_INVALID = "Invalid input: check transmit power / distance (must be positive numbers)."
MSG_RANGE_BOUNDS_INVALID = "Invalid input: check the frequency range (must be positive numbers)."
MSG_RANGE_EMPTY = "Invalid frequency range: make sure stop >= start and step > 0."

SINGLE_POINT_LABEL = "Single frequency"


@dataclass
class Outcome:
    """What one calculate request produced."""
    mode: str
    error: Optional[str] = None
    result: Optional[Union[LinkResult, RangeResult]] = None
    fields: Dict[str, str] = field(default_factory=dict)
    summary: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_range(result: RangeResult) -> Optional[str]:
    """Return the error message for an unusable range result, else None."""
    if not math.isfinite(result.pt_dbm) or not math.isfinite(result.distance_km):
        return MSG_RANGE_LINK_INVALID
    if not all(math.isfinite(v) for v in (result.f_start_mhz, result.f_stop_mhz, result.f_step_mhz)):
        return MSG_RANGE_BOUNDS_INVALID
    if not result.points:
        return MSG_RANGE_EMPTY
    return None


class Calculator:
    def __init__(self, chart: Optional[ChartHandle] = None):
        self.mode = "single"
        self.chart = chart if chart is not None else ChartHandle()
        self.error: Optional[str] = None
        self.fields: Dict[str, str] = {}
        self.summary: Optional[str] = None

    def close(self) -> None:
        self.chart.close()

    def set_mode(self, mode: str) -> None:
        """Switch input panel; clears the error banner and hides the range summary."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode
        self.error = None
        self.summary = None

    def _fail(self, message: str) -> Outcome:
        self.error = message
        logger.info("rejected %s-mode input: %s", self.mode, message)
        return Outcome(mode=self.mode, error=message)

    def calculate(self, inputs: LinkInputs) -> Outcome:
        """Run one calculation in the current mode.

        On invalid input only ``error`` changes; fields, summary and chart keep
        whatever was rendered last.
        """
        self.error = None
        if self.mode == "single":
            return self._calculate_single(inputs)
        return self._calculate_range(inputs)

    def _calculate_single(self, inputs: LinkInputs) -> Outcome:
        r = compute_single(inputs)
        if not r.is_valid():
            return self._fail(MSG_SINGLE_INVALID)

        self.fields = single_fields(r)
        self.summary = None
        self.chart.replace([SINGLE_POINT_LABEL], [r.pr_dbm])
        logger.debug("single: fspl=%.2f dB pr=%.2f dBm", r.fspl_db, r.pr_dbm)
        return Outcome(mode="single", result=r, fields=dict(self.fields))

    def _calculate_range(self, inputs: LinkInputs) -> Outcome:
        rr = compute_range(inputs)
        message = validate_range(rr)
        if message is not None:
            return self._fail(message)

        self.fields = range_fields(rr)
        self.summary = range_summary(rr)
        labels = [mhz_to_unit(p.frequency_mhz, rr.unit) for p in rr.points]
        self.chart.replace(labels, [p.pr_dbm for p in rr.points], x_title=f"Frequency ({rr.unit})")
        logger.debug("range: %d points, pr %.2f..%.2f dBm", len(rr.points), rr.pr_min_dbm, rr.pr_max_dbm)
        return Outcome(mode="range", result=rr, fields=dict(self.fields), summary=self.summary)

    def reset(self) -> Tuple[LinkInputs, Outcome]:
        """Restore the default inputs, switch to single mode and calculate."""
        inputs = LinkInputs.from_defaults()
        self.set_mode("single")
        return inputs, self.calculate(inputs)
