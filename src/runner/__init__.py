"""Batch running of grid cases against the route walker."""

from .models import (
    GridCase,
    SuiteConfig,
    GridTestResult,
    CaseOutcome,
    SuiteResult,
)
from .fixtures import EXAMPLE_GRIDS, BUILTIN_CASES
from .tester import evaluate_grid, compare_case, GridSuite

__all__ = [
    "GridCase",
    "SuiteConfig",
    "GridTestResult",
    "CaseOutcome",
    "SuiteResult",
    "EXAMPLE_GRIDS",
    "BUILTIN_CASES",
    "evaluate_grid",
    "compare_case",
    "GridSuite",
]
