"""FSPL utilities.

Free-space path loss in the km/MHz engineering form

    FSPL [dB] = 32.44 + 20 log10(d_km) + 20 log10(f_MHz)

and the received-power link equation built on it.
"""

import math

_FSPL_CONSTANT_DB = 32.44


def fspl_db(distance_km: float, frequency_mhz: float) -> float:
    """Free-space path loss in dB.

    Args:
        distance_km: distance in kilometers (> 0)
        frequency_mhz: frequency in MHz (> 0)

    Returns NaN unless both arguments are strictly positive.
    """
    if not (distance_km > 0) or not (frequency_mhz > 0):
        return math.nan
    return _FSPL_CONSTANT_DB + 20.0 * math.log10(distance_km) + 20.0 * math.log10(frequency_mhz)


def received_power_dbm(
    pt_dbm: float,
    gt_db: float,
    gr_db: float,
    fspl_db_value: float,
    loss_db: float = 0.0,
) -> float:
    """Received power in dBm.

    Pr [dBm] = Pt + Gt + Gr − FSPL − L
    """
    return pt_dbm + gt_db + gr_db - fspl_db_value - loss_db
