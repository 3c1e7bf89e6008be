#!/usr/bin/env python
"""Run the enrichment calculators from a checkout without installing the console script."""

from __future__ import annotations

from swu_calculator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
