"""Tails-assay trade-off curves and charts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for CLI/export use
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np
import pandas as pd

from swu_calculator.config.constants import EPS
from swu_calculator.core.errors import DegenerateResultError, OrderingError
from swu_calculator.core.fuel_cycle import feed_per_product, swu_per_product
from swu_calculator.core.optimizer import OptimumTails


def tails_cost_curve(
    product_assay: float,
    feed_assay: float,
    feed_price: float,
    swu_price: float,
    bounds: Optional[Tuple[float, float]] = None,
    grid_points: int = 200,
) -> pd.DataFrame:
    """Feed, SWU and cost per unit product over a grid of tails assays.

    Default bounds span 5%..95% of the feed assay, which keeps the ends of the
    curve on screen; any bounds must lie inside (0, feed_assay).
    """
    xp, xf = product_assay, feed_assay
    if not xp > xf:
        raise OrderingError("Assay relationship must satisfy xp > xf")
    lo, hi = bounds if bounds is not None else (0.05 * xf, 0.95 * xf)
    if not (EPS <= lo < hi <= xf - EPS):
        raise DegenerateResultError(f"Tails bounds must lie inside (0, {xf}); got ({lo}, {hi})")
    if grid_points < 2:
        raise ValueError(f"grid_points must be at least 2, got {grid_points}")

    xw = np.linspace(lo, hi, grid_points)
    feed_p = feed_per_product(xp, xf, xw)
    swu_p = swu_per_product(xp, xf, xw)
    return pd.DataFrame(
        {
            "tails_assay": xw,
            "feed_per_product": feed_p,
            "swu_per_product": swu_p,
            "cost_per_product": feed_price * feed_p + swu_price * swu_p,
        }
    )


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_tails_cost(curve: pd.DataFrame, outdir: Path, optimum: Optional[OptimumTails] = None) -> Path:
    """Cost per kg product vs tails assay, with the optimum marked when given."""
    _ensure_dir(outdir)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(curve["tails_assay"] * 100, curve["cost_per_product"], label="Cost per kg product")
    if optimum is not None:
        ax.axvline(optimum.tails_assay * 100, color="black", linestyle="--", linewidth=1)
        ax.scatter([optimum.tails_assay * 100], [optimum.cost_per_product], color="red", zorder=3, label="Optimum")
    ax.set_title("Cost per kg Product vs Tails Assay")
    ax.set_xlabel("Tails assay (%)")
    ax.set_ylabel("Cost per kg product")
    ax.grid(True, linestyle="--", alpha=0.5)
    ax.legend()
    outpath = outdir / "tails_cost.png"
    fig.tight_layout()
    fig.savefig(outpath, dpi=200)
    plt.close(fig)
    return outpath


def plot_feed_swu_tradeoff(curve: pd.DataFrame, outdir: Path) -> Path:
    """Feed and SWU per kg product vs tails assay on twin axes."""
    _ensure_dir(outdir)
    fig, ax1 = plt.subplots(figsize=(10, 5))
    ax1.plot(curve["tails_assay"] * 100, curve["feed_per_product"], color="tab:blue")
    ax1.set_xlabel("Tails assay (%)")
    ax1.set_ylabel("Feed per kg product (kg)", color="tab:blue")
    ax1.grid(True, linestyle="--", alpha=0.5)
    ax2 = ax1.twinx()
    ax2.plot(curve["tails_assay"] * 100, curve["swu_per_product"], color="tab:orange")
    ax2.set_ylabel("SWU per kg product", color="tab:orange")
    ax1.set_title("Feed vs SWU Trade-off")
    outpath = outdir / "feed_swu_tradeoff.png"
    fig.tight_layout()
    fig.savefig(outpath, dpi=200)
    plt.close(fig)
    return outpath
