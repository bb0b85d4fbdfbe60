import math

from fspl_calc.fspl import fspl_db, received_power_dbm


def test_reference_scenario():
    # 32.44 + 20 log10(1) + 20 log10(2400)
    loss = fspl_db(1.0, 2400.0)
    assert abs(loss - 100.0442) < 1e-3
    pr = received_power_dbm(20.0, 0.0, 0.0, loss, 0.0)
    assert abs(pr - (-80.0442)) < 1e-3


def test_fspl_at_unit_inputs_is_constant():
    assert fspl_db(1.0, 1.0) == 32.44


def test_fspl_monotonic_in_distance_and_frequency():
    ds = [0.001, 0.1, 1.0, 7.5, 100.0]
    fs = [0.01, 1.0, 900.0, 2400.0, 60000.0]
    for f in fs:
        vals = [fspl_db(d, f) for d in ds]
        assert all(a < b for a, b in zip(vals, vals[1:]))
    for d in ds:
        vals = [fspl_db(d, f) for f in fs]
        assert all(a < b for a, b in zip(vals, vals[1:]))


def test_fspl_doubling_distance_adds_6db():
    assert abs(fspl_db(2.0, 2400.0) - fspl_db(1.0, 2400.0) - 6.0206) < 1e-4


def test_fspl_invalid_arguments_give_nan():
    for d, f in ((0.0, 2400.0), (-1.0, 2400.0), (1.0, 0.0), (float("nan"), 2400.0), (1.0, float("nan"))):
        assert math.isnan(fspl_db(d, f))


def test_received_power_includes_gains_and_loss():
    pr = received_power_dbm(20.0, 3.0, 2.0, 100.0, 1.5)
    assert abs(pr - (-76.5)) < 1e-9


def test_fspl_is_reproducible():
    assert fspl_db(3.3, 5800.0) == fspl_db(3.3, 5800.0)
