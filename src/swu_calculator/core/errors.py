"""Failure kinds raised by the enrichment calculators."""

from __future__ import annotations


class EnrichmentError(ValueError):
    """Base class for every calculator failure; the message is user-facing."""


class ParseError(EnrichmentError):
    """Raw text could not be read as the expected kind of number."""


class OrderingError(EnrichmentError):
    """Assays do not satisfy product > feed > tails."""


class DegenerateResultError(EnrichmentError):
    """A derived quantity is physically meaningless (e.g. non-positive product)."""


class ConsistencyError(EnrichmentError):
    """Mass balance F = P + W failed beyond tolerance."""
