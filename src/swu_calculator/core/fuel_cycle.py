"""Enrichment math: mass balance and separative work for the four algebraic modes.

Assays are fractions; masses are kg of uranium. Every solver checks
``xp > xf > xw`` before doing any arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from swu_calculator.config.constants import EPS, MASS_BALANCE_TOL
from swu_calculator.core.errors import ConsistencyError, DegenerateResultError, OrderingError


@dataclass(frozen=True)
class EnrichmentResult:
    product_kg: float
    feed_kg: float
    tails_kg: float
    swu: float


def value_function(x):
    """Standard enrichment value function, V(x) = (1 - 2x) ln((1 - x) / x).

    ``x`` is clamped into [EPS, 1 - EPS] first so stray values just outside the
    open interval do not hit log(0). Accepts scalars or numpy arrays.
    """
    x = np.clip(x, EPS, 1 - EPS)
    return (1 - 2 * x) * np.log((1 - x) / x)


def check_assay_order(xp: float, xf: float, xw: float) -> None:
    if not (xp > xf > xw):
        raise OrderingError("Assay relationship must satisfy xp > xf > xw")


def feed_per_product(xp: float, xf: float, xw: float) -> float:
    """Feed mass needed per unit of product, F/P."""
    return (xp - xw) / (xf - xw)


def swu_per_product(xp: float, xf: float, xw):
    """Separative work per unit of product, SWU/P. ``xw`` may be a numpy array."""
    return (
        value_function(xp)
        + ((xp - xf) / (xf - xw)) * value_function(xw)
        - ((xp - xw) / (xf - xw)) * value_function(xf)
    )


def _swu(product: float, feed: float, tails: float, xp: float, xf: float, xw: float) -> float:
    return float(product * value_function(xp) + tails * value_function(xw) - feed * value_function(xf))


def _check_balance(product: float, feed: float, tails: float) -> None:
    if abs(feed - (product + tails)) > MASS_BALANCE_TOL:
        raise ConsistencyError("Mass balance violated: F != P + W")


def mass_balance(product: float, xp: float, xf: float, xw: float) -> tuple[float, float]:
    """Return (feed, tails) for ``product`` kg at the given assays."""
    feed = feed_per_product(xp, xf, xw) * product
    tails = feed - product
    _check_balance(product, feed, tails)
    return feed, tails


def feed_and_swu_for_product(xp: float, xw: float, xf: float, product: float) -> EnrichmentResult:
    """Given product mass and assays, compute feed, tails and SWU."""
    check_assay_order(xp, xf, xw)
    feed, tails = mass_balance(product, xp, xf, xw)
    return EnrichmentResult(
        product_kg=product,
        feed_kg=feed,
        tails_kg=tails,
        swu=_swu(product, feed, tails, xp, xf, xw),
    )


def feed_swu_for_one_kg(xp: float, xw: float, xf: float) -> EnrichmentResult:
    """Feed, tails and SWU for 1 kg of product."""
    return feed_and_swu_for_product(xp, xw, xf, 1.0)


def product_and_swu_for_feed(xp: float, xw: float, xf: float, feed: float) -> EnrichmentResult:
    """Given an available feed mass, compute product, tails and SWU."""
    check_assay_order(xp, xf, xw)
    product = ((xf - xw) / (xp - xw)) * feed
    if product <= 0:
        raise DegenerateResultError("Computed product mass must be positive")
    tails = feed - product
    _check_balance(product, feed, tails)
    return EnrichmentResult(
        product_kg=product,
        feed_kg=feed,
        tails_kg=tails,
        swu=_swu(product, feed, tails, xp, xf, xw),
    )


def product_and_feed_for_swu(xp: float, xw: float, xf: float, swu: float) -> EnrichmentResult:
    """Given available separative work, compute the product and feed it supports."""
    check_assay_order(xp, xf, xw)
    denom = swu_per_product(xp, xf, xw)
    if abs(denom) < EPS:
        raise DegenerateResultError("Denominator too small for SWU->mass conversion")
    product = swu / denom
    feed, tails = mass_balance(product, xp, xf, xw)
    return EnrichmentResult(product_kg=product, feed_kg=feed, tails_kg=tails, swu=swu)
