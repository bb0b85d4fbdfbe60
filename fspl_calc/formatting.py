"""Display strings and tabular export for calculation results."""

import csv
from pathlib import Path
from typing import Iterable, List

from .link_budget import LinkResult, RangeResult, SweepPoint


def format_dbm(x: float) -> str:
    return f"{x:.2f} dBm"


def format_db(x: float) -> str:
    return f"{x:.2f} dB"


def format_km(x: float) -> str:
    return f"{x:.6f} km"


def format_mhz(x: float) -> str:
    return f"{x:.6f} MHz"


def single_fields(result: LinkResult) -> dict:
    """Result fields for single mode, keyed like the page's output slots."""
    p = result.params
    return {
        "pt": format_dbm(p.pt_dbm),
        "distance": format_km(p.distance_km),
        "frequency": format_mhz(p.frequency_mhz),
        "fspl": format_db(result.fspl_db),
        "pr": format_dbm(result.pr_dbm),
    }


def range_fields(result: RangeResult) -> dict:
    """Result fields for range mode; FSPL and Pr are shown as min–max spans."""
    return {
        "pt": format_dbm(result.pt_dbm),
        "distance": format_km(result.distance_km),
        "frequency": (
            f"{result.f_start_mhz:.2f}–{result.f_stop_mhz:.2f} MHz "
            f"(step {result.f_step_mhz:.2f} MHz)"
        ),
        "fspl": f"{result.fspl_min_db:.2f}–{result.fspl_max_db:.2f} dB",
        "pr": f"{result.pr_min_dbm:.2f}–{result.pr_max_dbm:.2f} dBm",
    }


def range_summary(result: RangeResult) -> str:
    return (
        f"Range mode: {len(result.points)} points. "
        f"Pr (dBm) from {result.pr_min_dbm:.2f} to {result.pr_max_dbm:.2f}."
    )


def sweep_to_table(points: Iterable[SweepPoint]) -> List[List[str]]:
    """Convert sweep points to a simple table (strings) for printing or CSV export."""
    table = [["frequency_mhz", "fspl_db", "pr_dbm"]]
    for p in points:
        table.append([
            f"{p.frequency_mhz:.6f}",
            f"{p.fspl_db:.2f}",
            f"{p.pr_dbm:.2f}",
        ])
    return table


def save_sweep_csv(points: Iterable[SweepPoint], path: str | Path) -> None:
    """Save sweep points to a CSV file (columns: frequency_mhz, fspl_db, pr_dbm)."""
    table = sweep_to_table(points)
    p = Path(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(table)


def print_table(table: List[List[str]]) -> None:
    """Pretty-print a simple table to the console."""
    widths = [max(len(row[i]) for row in table) for i in range(len(table[0]))]
    for row in table:
        print("  ".join(cell.ljust(widths[j]) for j, cell in enumerate(row)))
