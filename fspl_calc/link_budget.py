"""Link evaluation for single-frequency and swept calculations.

The page (or CLI) builds one :class:`LinkInputs` per request from the raw
form values. The functions here normalise it with :mod:`.units`, evaluate
:mod:`.fspl` and, in range mode, expand the frequency axis with
:func:`.sweep.linspace`.

Invalid inputs never raise: they propagate as NaN in the returned records
and are checked by the caller before anything is displayed.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .defaults import DEFAULTS, Defaults
from .fspl import fspl_db, received_power_dbm
from .sweep import linspace
from .units import d_to_km, f_to_mhz, optional_db, pt_to_dbm


@dataclass(frozen=True)
class Measurement:
	"""Raw user input: a magnitude (as typed) and its unit tag."""
	value: Any
	unit: str


@dataclass(frozen=True)
class LinkInputs:
	"""Raw form values for one calculation request.

	Fields:
	- power, distance: shared by both modes
	- frequency: single mode
	- f_start / f_stop / f_step with f_range_unit: range mode (one unit for all three)
	- gt, gr, loss: optional dB values, 0 when blank
	"""
	power: Measurement
	distance: Measurement
	frequency: Measurement
	f_start: Any
	f_stop: Any
	f_step: Any
	f_range_unit: str = "MHz"
	gt: Any = 0.0
	gr: Any = 0.0
	loss: Any = 0.0

	@classmethod
	def from_defaults(cls, defaults: Optional[Defaults] = None) -> "LinkInputs":
		d = defaults or DEFAULTS
		return cls(
			power=Measurement(d.pt_value, d.pt_unit),
			distance=Measurement(d.d_value, d.d_unit),
			frequency=Measurement(d.f_value, d.f_unit),
			f_start=d.f_start,
			f_stop=d.f_stop,
			f_step=d.f_step,
			f_range_unit=d.f_range_unit,
			gt=d.gt_db,
			gr=d.gr_db,
			loss=d.loss_db,
		)


@dataclass(frozen=True)
class LinkParameters:
	"""Normalised inputs (dBm, km, MHz, dB)."""
	pt_dbm: float
	distance_km: float
	frequency_mhz: float
	gt_db: float = 0.0
	gr_db: float = 0.0
	loss_db: float = 0.0


@dataclass(frozen=True)
class LinkResult:
	"""Single-frequency result together with the parameters it was computed from."""
	params: LinkParameters
	fspl_db: float
	pr_dbm: float

	def is_valid(self) -> bool:
		p = self.params
		return all(math.isfinite(v) for v in (p.pt_dbm, p.distance_km, p.frequency_mhz, self.fspl_db, self.pr_dbm))


@dataclass(frozen=True)
class SweepPoint:
	frequency_mhz: float
	fspl_db: float
	pr_dbm: float


@dataclass(frozen=True)
class RangeResult:
	"""Swept result; ``points`` is ordered by strictly increasing frequency."""
	pt_dbm: float
	distance_km: float
	f_start_mhz: float
	f_stop_mhz: float
	f_step_mhz: float
	unit: str
	gt_db: float
	gr_db: float
	loss_db: float
	points: Tuple[SweepPoint, ...]

	@property
	def pr_min_dbm(self) -> float:
		return min(p.pr_dbm for p in self.points)

	@property
	def pr_max_dbm(self) -> float:
		return max(p.pr_dbm for p in self.points)

	@property
	def fspl_min_db(self) -> float:
		return min(p.fspl_db for p in self.points)

	@property
	def fspl_max_db(self) -> float:
		return max(p.fspl_db for p in self.points)


def evaluate(params: LinkParameters) -> LinkResult:
	"""Evaluate FSPL and Pr for already normalised parameters."""
	loss = fspl_db(params.distance_km, params.frequency_mhz)
	pr = received_power_dbm(params.pt_dbm, params.gt_db, params.gr_db, loss, params.loss_db)
	return LinkResult(params=params, fspl_db=loss, pr_dbm=pr)


def compute_single(inputs: LinkInputs) -> LinkResult:
	"""Normalise the single-mode fields and evaluate once."""
	params = LinkParameters(
		pt_dbm=pt_to_dbm(inputs.power.value, inputs.power.unit),
		distance_km=d_to_km(inputs.distance.value, inputs.distance.unit),
		frequency_mhz=f_to_mhz(inputs.frequency.value, inputs.frequency.unit),
		gt_db=optional_db(inputs.gt),
		gr_db=optional_db(inputs.gr),
		loss_db=optional_db(inputs.loss),
	)
	return evaluate(params)


def compute_range(inputs: LinkInputs) -> RangeResult:
	"""Normalise the range-mode fields and evaluate at each sweep frequency.

	Steps:
	1) Convert start/stop/step with the shared range unit.
	2) Convert power/distance and the optional gains/loss.
	3) Expand the frequency axis (empty when the range is not usable) and
	   evaluate FSPL/Pr per sample.
	"""
	unit = inputs.f_range_unit
	f_start = f_to_mhz(inputs.f_start, unit)
	f_stop = f_to_mhz(inputs.f_stop, unit)
	f_step = f_to_mhz(inputs.f_step, unit)

	pt = pt_to_dbm(inputs.power.value, inputs.power.unit)
	d_km = d_to_km(inputs.distance.value, inputs.distance.unit)
	gt = optional_db(inputs.gt)
	gr = optional_db(inputs.gr)
	loss = optional_db(inputs.loss)

	points = []
	for f_mhz in linspace(f_start, f_stop, f_step):
		pl = fspl_db(d_km, f_mhz)
		points.append(SweepPoint(
			frequency_mhz=f_mhz,
			fspl_db=pl,
			pr_dbm=received_power_dbm(pt, gt, gr, pl, loss),
		))
	return RangeResult(
		pt_dbm=pt,
		distance_km=d_km,
		f_start_mhz=f_start,
		f_stop_mhz=f_stop,
		f_step_mhz=f_step,
		unit=unit,
		gt_db=gt,
		gr_db=gr,
		loss_db=loss,
		points=tuple(points),
	)
