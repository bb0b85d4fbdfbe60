"""CLI to compute FSPL / received power and optionally save the chart and sweep.

Usage:
    python -m fspl_calc.cli single --pt 20 --pt-unit dBm --d 1 --d-unit km --f 2400 --f-unit MHz
    python -m fspl_calc.cli range --start 800 --stop 2600 --step 50 --unit MHz --plot pr.png --csv sweep.csv
"""

import argparse
import sys
from pathlib import Path

from . import (
    DEFAULTS,
    DISTANCE_UNITS,
    FREQUENCY_UNITS,
    POWER_UNITS,
    Calculator,
    LinkInputs,
    Measurement,
    print_table,
    save_sweep_csv,
    sweep_to_table,
)
from .logging_config import setup_logging

_FIELD_LABELS = [
    ("pt", "Transmit power"),
    ("distance", "Distance"),
    ("frequency", "Frequency"),
    ("fspl", "FSPL"),
    ("pr", "Received power"),
]


def build_parser() -> argparse.ArgumentParser:
    d = DEFAULTS
    parser = argparse.ArgumentParser(description="Free-space path loss and received power calculator")
    parser.add_argument("--log-level", type=str, default="WARNING")

    common = argparse.ArgumentParser(add_help=False)
    # values are kept as strings; validation happens in the calculator
    common.add_argument("--pt", type=str, default=str(d.pt_value), help="transmit power")
    common.add_argument("--pt-unit", type=str, default=d.pt_unit, choices=POWER_UNITS)
    common.add_argument("--d", type=str, default=str(d.d_value), help="distance")
    common.add_argument("--d-unit", type=str, default=d.d_unit, choices=DISTANCE_UNITS)
    common.add_argument("--gt", type=str, default=str(d.gt_db), help="Tx antenna gain (dB)")
    common.add_argument("--gr", type=str, default=str(d.gr_db), help="Rx antenna gain (dB)")
    common.add_argument("--loss", type=str, default=str(d.loss_db), help="misc. loss (dB)")
    common.add_argument("--plot", type=Path, default=None, help="save the Pr chart to this PNG")

    sub = parser.add_subparsers(dest="mode", required=True)
    single = sub.add_parser("single", parents=[common], help="one frequency")
    single.add_argument("--f", type=str, default=str(d.f_value), help="frequency")
    single.add_argument("--f-unit", type=str, default=d.f_unit, choices=FREQUENCY_UNITS)

    rng = sub.add_parser("range", parents=[common], help="frequency sweep")
    rng.add_argument("--start", type=str, default=str(d.f_start))
    rng.add_argument("--stop", type=str, default=str(d.f_stop))
    rng.add_argument("--step", type=str, default=str(d.f_step))
    rng.add_argument("--unit", type=str, default=d.f_range_unit, choices=FREQUENCY_UNITS)
    rng.add_argument("--table", action="store_true", help="print every sweep point")
    rng.add_argument("--csv", type=Path, default=None, help="write the sweep to CSV")
    return parser


def inputs_from_args(args: argparse.Namespace) -> LinkInputs:
    d = DEFAULTS
    return LinkInputs(
        power=Measurement(args.pt, args.pt_unit),
        distance=Measurement(args.d, args.d_unit),
        frequency=Measurement(getattr(args, "f", d.f_value), getattr(args, "f_unit", d.f_unit)),
        f_start=getattr(args, "start", d.f_start),
        f_stop=getattr(args, "stop", d.f_stop),
        f_step=getattr(args, "step", d.f_step),
        f_range_unit=getattr(args, "unit", d.f_range_unit),
        gt=args.gt,
        gr=args.gr,
        loss=args.loss,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    calc = Calculator()
    try:
        calc.set_mode(args.mode)
        outcome = calc.calculate(inputs_from_args(args))
        if not outcome.ok:
            print(outcome.error, file=sys.stderr)
            return 2

        width = max(len(label) for _, label in _FIELD_LABELS)
        for key, label in _FIELD_LABELS:
            print(f"{label.ljust(width)}  {outcome.fields[key]}")
        if outcome.summary:
            print(outcome.summary)

        if args.mode == "range":
            if args.table:
                print_table(sweep_to_table(outcome.result.points))
            if args.csv is not None:
                args.csv.parent.mkdir(parents=True, exist_ok=True)
                save_sweep_csv(outcome.result.points, args.csv)
                print(f"Saved {len(outcome.result.points)} rows to {args.csv}")
        if args.plot is not None:
            calc.chart.save(args.plot)
            print(f"Saved chart to {args.plot}")
    finally:
        calc.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
