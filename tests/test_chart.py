from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from fspl_calc.chart import ChartHandle
from fspl_calc.defaults import MARKER_POINT_LIMIT


def test_context_manager_closes_figure():
    with ChartHandle() as chart:
        fig = chart.replace([800.0, 900.0], [-70.0, -71.0], x_title="Frequency (MHz)")
        assert plt.fignum_exists(fig.number)
    assert not plt.fignum_exists(fig.number)
    assert not chart.is_open


def test_single_point_uses_category_label():
    with ChartHandle() as chart:
        fig = chart.replace(["Single frequency"], [-80.04])
        ax = fig.axes[0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["Single frequency"]
        assert ax.lines[0].get_marker() == "o"


def test_markers_hidden_for_dense_sweeps():
    n = MARKER_POINT_LIMIT + 1
    with ChartHandle() as chart:
        fig = chart.replace([float(i) for i in range(n)], [-float(i) for i in range(n)])
        assert fig.axes[0].lines[0].get_marker() in (None, "None", "")


def test_save_png(tmp_path: Path):
    with ChartHandle() as chart:
        with pytest.raises(ValueError):
            chart.save(tmp_path / "none.png")
        chart.replace([1.0, 2.0], [-60.0, -66.0])
        out = chart.save(tmp_path / "plots" / "pr.png")
    assert out.exists() and out.stat().st_size > 0
