"""Run one calculator mode over a table of scenarios."""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Mapping, Optional

import pandas as pd

from swu_calculator.core.errors import EnrichmentError
from swu_calculator.core.fuel_cycle import EnrichmentResult
from swu_calculator.core.modes import get_mode, run_mode
from swu_calculator.core.optimizer import OptimumTails
from swu_calculator.formatting import result_to_dict


def result_columns(mode) -> list[str]:
    spec = get_mode(mode)
    result_type = OptimumTails if spec.key == "optimum_tails" else EnrichmentResult
    return [f.name for f in fields(result_type)]


def solve_scenarios(
    scenarios: pd.DataFrame,
    mode,
    units: Optional[Mapping[str, str]] = None,
) -> pd.DataFrame:
    """Solve every row of ``scenarios`` with ``mode``.

    Columns must be named after the mode's inputs (e.g. product_assay,
    tails_assay, feed_assay, product_mass) and hold raw text or numbers.
    Rows that fail keep NaN results and carry the message in ``error``.
    """
    spec = get_mode(mode)
    out_cols = result_columns(spec)

    missing = [name for name in spec.input_names if name not in scenarios.columns]
    if missing:
        raise ValueError(f"scenarios missing columns for {spec.key}: {', '.join(missing)}")

    if scenarios.empty:
        return pd.DataFrame(columns=list(scenarios.columns) + out_cols + ["error"])

    rows = []
    for idx, row in scenarios.iterrows():
        raw = {name: "" if pd.isna(row[name]) else str(row[name]) for name in spec.input_names}
        try:
            solved = result_to_dict(run_mode(spec, raw, units))
            solved["error"] = None
        except EnrichmentError as exc:
            logging.warning("Scenario %s skipped for %s: %s", idx, spec.key, exc)
            solved = {col: float("nan") for col in out_cols}
            solved["error"] = str(exc)
        rows.append(solved)

    results = pd.DataFrame(rows, index=scenarios.index, columns=out_cols + ["error"])
    return pd.concat([scenarios, results], axis=1)
