"""Shared constants for enrichment calculations."""

NATURAL_U235_ASSAY = 0.00711  # atomic fraction of U-235 in natural uranium
DEFAULT_TAILS_ASSAY = 0.0025

EPS = 1e-9  # keeps assays off the log singularities at 0 and 1
MAX_ITER = 100
MASS_BALANCE_TOL = 1e-6

KG_PER_LB = 0.45359237
MASS_UNITS = ("kg", "g", "lb")
ASSAY_UNITS = ("fraction", "percent")

HISTORY_LIMIT = 20
MASS_DECIMALS = 6
SWU_DECIMALS = 3
