"""Command-line front end for the enrichment calculators."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from swu_calculator.analysis.tails_charts import plot_feed_swu_tradeoff, plot_tails_cost, tails_cost_curve
from swu_calculator.batch import solve_scenarios
from swu_calculator.config.constants import ASSAY_UNITS, MASS_UNITS
from swu_calculator.config.settings import load_settings
from swu_calculator.core.modes import MODES, get_mode, parse_inputs
from swu_calculator.core.optimizer import find_optimum_tails
from swu_calculator.formatting import format_result


def _add_unit_options(parser: argparse.ArgumentParser, settings) -> None:
    parser.add_argument(
        "--assay-unit",
        choices=ASSAY_UNITS,
        default=settings.assay_unit,
        help="How bare assay numbers are read (default: %(default)s)",
    )
    parser.add_argument(
        "--mass-unit",
        choices=MASS_UNITS,
        default=settings.mass_unit,
        help="Unit for bare mass inputs and for printed masses (default: %(default)s)",
    )


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="swu-calc", description="Uranium enrichment feed/product/SWU calculators.")
    sub = parser.add_subparsers(dest="command", required=True)

    for spec in MODES.values():
        mode_parser = sub.add_parser(spec.key, help=f"[{spec.number}] {spec.title}")
        for input_spec in spec.inputs:
            mode_parser.add_argument(
                f"--{input_spec.name.replace('_', '-')}",
                dest=input_spec.name,
                required=True,
                help=f"{input_spec.label} ({input_spec.kind})",
            )
        _add_unit_options(mode_parser, settings)

    batch = sub.add_parser("batch", help="Solve every row of a CSV with one mode")
    batch.add_argument("input", type=str, help="CSV with one column per mode input")
    batch.add_argument("--mode", required=True, help="Mode key or number")
    batch.add_argument("--out", type=str, default=None, help="Write results CSV here instead of stdout")
    _add_unit_options(batch, settings)

    plot = sub.add_parser("plot", help="Chart cost, feed and SWU against tails assay")
    for name in ("product_assay", "feed_assay", "feed_price", "swu_price"):
        plot.add_argument(f"--{name.replace('_', '-')}", dest=name, required=True)
    plot.add_argument("--outdir", type=str, default="artifacts/tails_charts", help="Directory to write PNGs")
    plot.add_argument("--grid-points", type=int, default=200)
    _add_unit_options(plot, settings)
    return parser


def _units(args) -> dict:
    return {"assay": args.assay_unit, "mass": args.mass_unit}


def _run_mode(args) -> int:
    spec = get_mode(args.command)
    raw = {name: getattr(args, name) for name in spec.input_names}
    result = spec.solver(*parse_inputs(spec, raw, _units(args)))
    print(format_result(spec, result, mass_unit=args.mass_unit))
    return 0


def _run_batch(args) -> int:
    scenarios = pd.read_csv(args.input, dtype=str)
    results = solve_scenarios(scenarios, args.mode, _units(args))
    failed = int(results["error"].notna().sum())
    if args.out:
        results.to_csv(args.out, index=False)
        print(f"Wrote {len(results)} rows to {args.out} ({failed} failed)")
    else:
        print(results.to_csv(index=False), end="")
    return 0


def _run_plot(args) -> int:
    spec = get_mode("optimum_tails")
    raw = {name: getattr(args, name) for name in spec.input_names}
    xp, xf, feed_price, swu_price = parse_inputs(spec, raw, _units(args))
    optimum = find_optimum_tails(xp, xf, feed_price, swu_price)
    curve = tails_cost_curve(xp, xf, feed_price, swu_price, grid_points=args.grid_points)

    outdir = Path(args.outdir)
    outputs = [plot_tails_cost(curve, outdir, optimum), plot_feed_swu_tradeoff(curve, outdir)]
    print(format_result(spec, optimum))
    print("Charts written:")
    for path in outputs:
        print(f" - {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser(settings).parse_args(argv)
    try:
        if args.command == "batch":
            return _run_batch(args)
        if args.command == "plot":
            return _run_plot(args)
        return _run_mode(args)
    except (ValueError, KeyError, OSError) as exc:
        # KeyError str() wraps the message in quotes
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        print(f"Error: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
