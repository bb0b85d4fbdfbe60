import math
from dataclasses import replace

from fspl_calc.link_budget import LinkInputs, Measurement, compute_range, compute_single


def test_single_default_scenario(defaults):
    r = compute_single(defaults)
    assert r.is_valid()
    assert r.params.pt_dbm == 20.0
    assert r.params.distance_km == 1.0
    assert r.params.frequency_mhz == 2400.0
    assert abs(r.fspl_db - 100.04) < 0.01
    assert abs(r.pr_dbm - (-80.04)) < 0.01


def test_single_unit_mix_matches_canonical(defaults):
    mixed = replace(
        defaults,
        power=Measurement("0.1", "W"),
        distance=Measurement("1000", "m"),
        frequency=Measurement("2.4", "GHz"),
    )
    a = compute_single(defaults)
    b = compute_single(mixed)
    assert abs(a.pr_dbm - b.pr_dbm) < 1e-9


def test_single_gains_default_to_zero_when_blank(defaults):
    blank = replace(defaults, gt="", gr="n/a", loss=None)
    r = compute_single(blank)
    assert r.is_valid()
    assert (r.params.gt_db, r.params.gr_db, r.params.loss_db) == (0.0, 0.0, 0.0)


def test_single_gains_and_loss_shift_pr(defaults):
    base = compute_single(defaults)
    r = compute_single(replace(defaults, gt="6", gr="3", loss="2"))
    assert abs((r.pr_dbm - base.pr_dbm) - 7.0) < 1e-9
    assert r.fspl_db == base.fspl_db


def test_single_invalid_distance_propagates(defaults):
    r = compute_single(replace(defaults, distance=Measurement("0", "km")))
    assert not r.is_valid()
    assert math.isnan(r.fspl_db)
    assert math.isnan(r.pr_dbm)


def test_single_blank_power_is_invalid_not_zero(defaults):
    r = compute_single(replace(defaults, power=Measurement("", "dBm")))
    assert not r.is_valid()


def test_range_default_sweep(defaults):
    rr = compute_range(defaults)
    assert len(rr.points) == 37
    assert rr.points[0].frequency_mhz == 800.0
    assert rr.points[-1].frequency_mhz == 2600.0
    freqs = [p.frequency_mhz for p in rr.points]
    assert all(a < b for a, b in zip(freqs, freqs[1:]))
    # Pr falls as frequency rises
    assert rr.pr_max_dbm == rr.points[0].pr_dbm
    assert rr.pr_min_dbm == rr.points[-1].pr_dbm
    assert abs(rr.pr_max_dbm - (-70.50)) < 0.01
    assert abs(rr.pr_min_dbm - (-80.74)) < 0.01


def test_range_in_ghz(defaults):
    rr = compute_range(replace(defaults, f_start="1", f_stop="2", f_step="0.25", f_range_unit="GHz"))
    assert [p.frequency_mhz for p in rr.points] == [1000.0, 1250.0, 1500.0, 1750.0, 2000.0]
    assert rr.unit == "GHz"


def test_range_reversed_bounds_give_no_points(defaults):
    rr = compute_range(replace(defaults, f_start="2600", f_stop="800"))
    assert rr.points == ()
    assert math.isfinite(rr.f_start_mhz) and math.isfinite(rr.f_stop_mhz)


def test_range_invalid_step_is_nan(defaults):
    rr = compute_range(replace(defaults, f_step="0"))
    assert math.isnan(rr.f_step_mhz)
    assert rr.points == ()


def test_from_defaults_matches_reset_values():
    inputs = LinkInputs.from_defaults()
    assert inputs.power == Measurement(20.0, "dBm")
    assert inputs.distance == Measurement(1.0, "km")
    assert inputs.frequency == Measurement(2400.0, "MHz")
    assert (inputs.f_start, inputs.f_stop, inputs.f_step, inputs.f_range_unit) == (800.0, 2600.0, 50.0, "MHz")
