"""Optimum tails assay: minimise feed + enrichment cost per unit of product."""

from __future__ import annotations

import math
from dataclasses import dataclass

from swu_calculator.config.constants import EPS, MAX_ITER
from swu_calculator.core.errors import DegenerateResultError, EnrichmentError, OrderingError
from swu_calculator.core.fuel_cycle import feed_per_product, swu_per_product

INV_PHI = (math.sqrt(5) - 1) / 2  # 1 / golden ratio


@dataclass(frozen=True)
class OptimumTails:
    tails_assay: float
    feed_per_product: float
    swu_per_product: float
    cost_per_product: float
    iterations: int


def tails_cost(xw: float, xp: float, xf: float, feed_price: float, swu_price: float) -> float:
    """Cost per unit product at tails assay ``xw``: cf * F/P + cs * SWU/P."""
    return feed_price * feed_per_product(xp, xf, xw) + swu_price * swu_per_product(xp, xf, xw)


def find_optimum_tails(xp: float, xf: float, feed_price: float, swu_price: float) -> OptimumTails:
    """Golden-section search for the tails assay in (EPS, xf - EPS) with the lowest cost.

    The bracket shrinks by 1/phi per step and one interior point is reused, so
    each iteration costs a single new evaluation. Stops when the bracket is
    narrower than EPS or after MAX_ITER steps and reports the bracket midpoint.
    """
    if not xp > xf:
        raise OrderingError("Assay relationship must satisfy xp > xf")
    if feed_price <= 0 or swu_price <= 0:
        raise EnrichmentError("Feed and SWU prices must be positive")

    a, b = EPS, xf - EPS
    if b <= a:
        raise DegenerateResultError("Feed assay too low: no tails assay exists below it")

    def cost(xw: float) -> float:
        return tails_cost(xw, xp, xf, feed_price, swu_price)

    c = b - (b - a) * INV_PHI
    d = a + (b - a) * INV_PHI
    fc, fd = cost(c), cost(d)

    iterations = 0
    while iterations < MAX_ITER and (b - a) > EPS:
        if fc < fd:
            b, d, fd = d, c, fc
            c = b - (b - a) * INV_PHI
            fc = cost(c)
        else:
            a, c, fc = c, d, fd
            d = a + (b - a) * INV_PHI
            fd = cost(d)
        iterations += 1

    xw = (a + b) / 2
    return OptimumTails(
        tails_assay=xw,
        feed_per_product=feed_per_product(xp, xf, xw),
        swu_per_product=swu_per_product(xp, xf, xw),
        cost_per_product=cost(xw),
        iterations=iterations,
    )
