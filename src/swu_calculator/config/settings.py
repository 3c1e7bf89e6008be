"""Runtime settings for the calculator front ends.

Reads values from environment variables (a local ``.env`` file is loaded first
when present). Only the CLI reads settings; the solvers take every value
as an argument.

Env vars:
  - SWU_CALC_LOG_LEVEL (default: WARNING)
  - SWU_CALC_MASS_UNIT (default: kg)
  - SWU_CALC_ASSAY_UNIT (default: fraction)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from swu_calculator.config.constants import ASSAY_UNITS, MASS_UNITS


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    mass_unit: str = "kg"
    assay_unit: str = "fraction"


def load_settings(use_dotenv: bool = True) -> Settings:
    """Build Settings from SWU_CALC_* env vars, validating each one."""
    if use_dotenv:
        load_dotenv()

    log_level = os.getenv("SWU_CALC_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SWU_CALC_LOG_LEVEL is not a logging level: {log_level}")

    mass_unit = os.getenv("SWU_CALC_MASS_UNIT", "kg").lower()
    if mass_unit not in MASS_UNITS:
        raise ValueError(f"SWU_CALC_MASS_UNIT must be one of {MASS_UNITS}, got {mass_unit!r}")

    assay_unit = os.getenv("SWU_CALC_ASSAY_UNIT", "fraction").lower()
    if assay_unit not in ASSAY_UNITS:
        raise ValueError(f"SWU_CALC_ASSAY_UNIT must be one of {ASSAY_UNITS}, got {assay_unit!r}")

    return Settings(
        log_level=log_level,
        mass_unit=mass_unit,
        assay_unit=assay_unit,
    )
