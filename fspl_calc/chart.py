"""Received-power line chart.

:class:`ChartHandle` owns at most one matplotlib figure at a time. Every
redraw goes through :meth:`ChartHandle.replace`, which closes the previous
figure before creating the next one, so repeated calculations never leave
figures registered with pyplot.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from .defaults import MARKER_POINT_LIMIT

logger = logging.getLogger(__name__)

_LINE_COLOR = "#22c55e"
_SERIES_LABEL = "Received power Pr (dBm)"


class ChartHandle:
    """Owned chart resource: one live figure, replaced wholesale on redraw."""

    def __init__(self, figsize: tuple[float, float] = (8.0, 4.0)):
        self.figsize = figsize
        self.figure: Optional[Figure] = None

    def __enter__(self) -> "ChartHandle":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self.figure is not None

    def close(self) -> None:
        """Release the current figure, if any."""
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None

    def replace(
        self,
        labels: Sequence,
        values: Sequence[float],
        x_title: Optional[str] = None,
    ) -> Figure:
        """Dispose of the current figure and draw a new Pr line chart."""
        self.close()
        y = np.asarray(values, dtype=float)
        n = len(y)
        categorical = n > 0 and isinstance(labels[0], str)
        x = np.arange(n) if categorical else np.asarray(labels, dtype=float)

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(
            x,
            y,
            color=_LINE_COLOR,
            linewidth=1.8,
            marker="o" if n <= MARKER_POINT_LIMIT else None,
            markersize=3,
            label=_SERIES_LABEL,
        )
        if n > 1:
            ax.fill_between(x, y, y.min(), color=_LINE_COLOR, alpha=0.15)
        if categorical:
            ax.set_xticks(x)
            ax.set_xticklabels(labels)
        if x_title:
            ax.set_xlabel(x_title)
        ax.set_ylabel("Pr (dBm)")
        ax.grid(True, alpha=0.3)
        ax.legend(loc="best")
        fig.tight_layout()
        self.figure = fig
        logger.debug("chart redrawn with %d point(s)", n)
        return fig

    def save(self, path: str | Path, dpi: int = 150) -> Path:
        """Write the current figure to ``path`` (PNG by extension)."""
        if self.figure is None:
            raise ValueError("no chart to save")
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(p, dpi=dpi)
        return p
