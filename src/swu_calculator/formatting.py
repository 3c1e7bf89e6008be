"""Display conventions for calculator results (the solvers return full precision)."""

from __future__ import annotations

from dataclasses import fields

from swu_calculator.config.constants import KG_PER_LB, MASS_DECIMALS, SWU_DECIMALS
from swu_calculator.core.fuel_cycle import EnrichmentResult
from swu_calculator.core.modes import ModeSpec, get_mode
from swu_calculator.core.optimizer import OptimumTails


def format_mass(kg: float, unit: str = "kg") -> str:
    if unit == "kg":
        return f"{kg:.{MASS_DECIMALS}f} kg"
    if unit == "g":
        return f"{kg * 1000:.3f} g"
    if unit == "lb":
        return f"{kg / KG_PER_LB:.{MASS_DECIMALS}f} lb"
    raise ValueError(f"Unsupported mass unit: {unit}")


def format_swu(swu: float) -> str:
    return f"{swu:.{SWU_DECIMALS}f} SWU"


def format_assay(fraction: float) -> str:
    return f"{fraction * 100:.4f}%"


def format_result(mode, result, mass_unit: str = "kg") -> str:
    """Multi-line text for a mode result, in the order the mode solves for."""
    spec: ModeSpec = get_mode(mode)
    if isinstance(result, OptimumTails):
        lines = [
            f"Optimum tails assay: {format_assay(result.tails_assay)}",
            f"Feed per kg product: {result.feed_per_product:.{MASS_DECIMALS}f}",
            f"SWU per kg product: {result.swu_per_product:.{SWU_DECIMALS}f}",
            f"Cost per kg product: {result.cost_per_product:.2f}",
        ]
    elif isinstance(result, EnrichmentResult):
        rows = {
            "product_kg": f"Product: {format_mass(result.product_kg, mass_unit)}",
            "feed_kg": f"Feed: {format_mass(result.feed_kg, mass_unit)}",
            "tails_kg": f"Tails: {format_mass(result.tails_kg, mass_unit)}",
            "swu": f"SWU: {format_swu(result.swu)}",
        }
        if spec.number == 3:
            order = ("product_kg", "tails_kg", "swu", "feed_kg")
        elif spec.number == 4:
            order = ("product_kg", "feed_kg", "tails_kg", "swu")
        else:
            order = ("feed_kg", "tails_kg", "swu", "product_kg")
        lines = [rows[name] for name in order]
    else:
        raise TypeError(f"Cannot format result of type {type(result).__name__}")
    return "\n".join([spec.title] + lines)


def result_to_dict(result) -> dict:
    """Flatten a result dataclass to {field: value} (used for tables and history)."""
    return {f.name: getattr(result, f.name) for f in fields(result)}
