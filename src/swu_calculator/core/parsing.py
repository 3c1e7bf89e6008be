"""Turn raw form/CLI text into validated assays, masses and positive scalars."""

from __future__ import annotations

import math
import re
from typing import Optional

from swu_calculator.config.constants import ASSAY_UNITS, EPS, KG_PER_LB
from swu_calculator.core.errors import ParseError

INPUT_KINDS = ("assay", "mass", "scalar")

_MASS_WITH_UNIT = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([A-Za-z]+)$")
_KG_FACTORS = {"kg": 1.0, "g": 1e-3, "lb": KG_PER_LB}


def _to_float(text: str, what: str) -> float:
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise ParseError(f"Invalid {what} input: {text!r}") from None
    if not math.isfinite(value):
        raise ParseError(f"Invalid {what} input: {text!r}")
    return value


def parse_assay(raw: str, unit: str = "fraction") -> float:
    """Parse "5%", "0.05" or "1/20" into a fraction strictly inside (EPS, 1 - EPS).

    An explicit ``%`` or ``n/d`` form wins over the ``unit`` hint; bare numbers
    are read according to ``unit`` ("percent" or "fraction").
    """
    text = str(raw).strip()
    if unit not in ASSAY_UNITS:
        raise ParseError(f"Unsupported assay unit: {unit}")

    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            raise ParseError("Invalid fraction for assay")
        try:
            num, den = (float(p) for p in parts)
        except ValueError:
            raise ParseError("Invalid fraction for assay") from None
        if not (math.isfinite(num) and math.isfinite(den)) or den == 0:
            raise ParseError("Invalid fraction for assay")
        frac = num / den
    elif text.endswith("%"):
        frac = _to_float(text[:-1].strip(), "assay") / 100
    else:
        value = _to_float(text, "assay")
        frac = value / 100 if unit == "percent" else value

    if not (EPS < frac < 1 - EPS):
        raise ParseError("Assay must be between 0 and 1 (exclusive)")
    return frac


def parse_mass(raw: str, unit: str = "kg") -> float:
    """Parse "100 g", "0.1 kg", "5 lb" or a bare number (read in ``unit``) into kilograms."""
    text = str(raw).strip()
    match = _MASS_WITH_UNIT.match(text)
    if match:
        value = _to_float(match.group(1), "mass")
        unit = match.group(2)
    else:
        value = _to_float(text, "mass")

    unit = unit.lower()
    if unit not in _KG_FACTORS:
        raise ParseError(f"Unsupported mass unit: {unit}")
    if value <= 0:
        raise ParseError("Mass must be a positive number")
    return value * _KG_FACTORS[unit]


def parse_positive(raw: str) -> float:
    """Parse an SWU quantity or a price; must be finite and > 0."""
    value = _to_float(str(raw).strip(), "numeric")
    if value <= 0:
        raise ParseError("Value must be a positive number")
    return value


def parse_input(raw: str, kind: str, unit: Optional[str] = None) -> float:
    """Dispatch to the parser for ``kind`` (assay, mass or scalar)."""
    if kind == "assay":
        return parse_assay(raw, unit or "fraction")
    if kind == "mass":
        return parse_mass(raw, unit or "kg")
    if kind == "scalar":
        return parse_positive(raw)
    raise ValueError(f"Unknown input kind '{kind}'. Expected one of {INPUT_KINDS}")
