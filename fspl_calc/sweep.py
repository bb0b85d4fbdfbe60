"""Frequency sweep generation."""

from typing import List

from .defaults import MAX_SWEEP_POINTS, SWEEP_EPSILON


def linspace(start: float, stop: float, step: float, max_points: int = MAX_SWEEP_POINTS) -> List[float]:
    """Evenly spaced samples from ``start`` to ``stop`` inclusive.

    Samples are produced by repeated addition of ``step``; the upper bound is
    compared with a small tolerance so accumulated rounding does not drop the
    last sample. At most ``max_points`` samples are returned.

    An empty list means "no range": step <= 0, stop < start, a NaN bound, or a
    step too small to move past a sample in floating point.
    """
    out: List[float] = []
    if not (step > 0):
        return out
    if not (stop >= start):
        return out
    x = start
    while x <= stop + SWEEP_EPSILON and len(out) < max_points:
        out.append(x)
        nxt = x + step
        if nxt <= x:
            return []
        x = nxt
    return out
