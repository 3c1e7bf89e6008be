"""Registry tying each calculator mode to its inputs and solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from swu_calculator.core.errors import ParseError
from swu_calculator.core.fuel_cycle import (
    feed_and_swu_for_product,
    feed_swu_for_one_kg,
    product_and_feed_for_swu,
    product_and_swu_for_feed,
)
from swu_calculator.core.optimizer import find_optimum_tails
from swu_calculator.core.parsing import parse_input


@dataclass(frozen=True)
class InputSpec:
    name: str
    kind: str  # assay | mass | scalar
    label: str
    unit: Optional[str] = None


@dataclass(frozen=True)
class ModeSpec:
    key: str
    number: int
    title: str
    inputs: Tuple[InputSpec, ...]
    solver: Callable

    @property
    def input_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.inputs)


_PRODUCT = InputSpec("product_assay", "assay", "Product assay")
_TAILS = InputSpec("tails_assay", "assay", "Tails assay")
_FEED = InputSpec("feed_assay", "assay", "Feed assay")
_ASSAYS = (_PRODUCT, _TAILS, _FEED)

MODES: Dict[str, ModeSpec] = {
    spec.key: spec
    for spec in (
        ModeSpec("feed_swu_per_kg", 1, "Feed & SWU for 1 kg of product", _ASSAYS, feed_swu_for_one_kg),
        ModeSpec(
            "feed_swu",
            2,
            "Feed & SWU for a product mass",
            _ASSAYS + (InputSpec("product_mass", "mass", "Product mass", "kg"),),
            feed_and_swu_for_product,
        ),
        ModeSpec(
            "eup_swu",
            3,
            "Product & SWU from a feed mass",
            _ASSAYS + (InputSpec("feed_mass", "mass", "Feed mass", "kg"),),
            product_and_swu_for_feed,
        ),
        ModeSpec(
            "feed_eup_from_swu",
            4,
            "Product & feed from available SWU",
            _ASSAYS + (InputSpec("swu", "scalar", "Available SWU"),),
            product_and_feed_for_swu,
        ),
        ModeSpec(
            "optimum_tails",
            5,
            "Optimum tails assay",
            (
                _PRODUCT,
                _FEED,
                InputSpec("feed_price", "scalar", "Feed price per kg"),
                InputSpec("swu_price", "scalar", "Price per SWU"),
            ),
            find_optimum_tails,
        ),
    )
}


def get_mode(mode: Union[str, int, ModeSpec]) -> ModeSpec:
    """Look a mode up by key ("feed_swu") or number (2)."""
    if isinstance(mode, ModeSpec):
        return mode
    if isinstance(mode, int) or (isinstance(mode, str) and mode.isdigit()):
        number = int(mode)
        for spec in MODES.values():
            if spec.number == number:
                return spec
    elif mode in MODES:
        return MODES[mode]
    raise KeyError(f"Unknown mode '{mode}'. Expected one of {sorted(MODES)} or 1-{len(MODES)}")


def parse_inputs(
    mode: Union[str, int, ModeSpec],
    raw: Union[Mapping[str, str], Sequence[str]],
    units: Optional[Mapping[str, str]] = None,
) -> Tuple[float, ...]:
    """Parse raw strings for ``mode`` in declared input order.

    ``units`` may hold unit hints keyed by input name or by kind ("assay",
    "mass"); a name entry wins over a kind entry.
    """
    spec = get_mode(mode)
    units = units or {}

    if isinstance(raw, Mapping):
        missing = [s.name for s in spec.inputs if raw.get(s.name) in (None, "")]
        if missing:
            raise ParseError(f"Missing inputs for {spec.key}: {', '.join(missing)}")
        values = [raw[s.name] for s in spec.inputs]
    else:
        values = list(raw)
        if len(values) != len(spec.inputs):
            raise ParseError(f"{spec.key} expects {len(spec.inputs)} inputs, got {len(values)}")

    parsed = []
    for input_spec, value in zip(spec.inputs, values):
        unit = units.get(input_spec.name) or units.get(input_spec.kind) or input_spec.unit
        parsed.append(parse_input(value, input_spec.kind, unit))
    return tuple(parsed)


def run_mode(
    mode: Union[str, int, ModeSpec],
    raw: Union[Mapping[str, str], Sequence[str]],
    units: Optional[Mapping[str, str]] = None,
):
    """Parse ``raw`` and run the solver for ``mode``; returns its result dataclass."""
    spec = get_mode(mode)
    return spec.solver(*parse_inputs(spec, raw, units))
