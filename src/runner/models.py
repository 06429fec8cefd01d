"""
Pydantic models for the runner layer.

Suite configuration (what to run and what to expect) and results (what
happened). The running logic itself lives in tester.py.
"""

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from ..routes.models import PathResult, ErrorDetail
from ..routes.parsing import parse_grid


Rows = List[List[Optional[str]]]


class GridCase(BaseModel):
    """A grid to run plus its expected outcome."""
    name: str
    grid: Optional[str] = None  # Inline drawing
    rows: Optional[Rows] = None  # Explicit cell matrix
    file: Optional[str] = None  # Drawing on disk, relative to the suite file
    expected_path: Optional[str] = None
    expected_letters: Optional[str] = None
    expected_error: Optional[str] = None  # Error code, e.g. "FORK_IN_PATH"

    @model_validator(mode='after')
    def _check_source(self) -> "GridCase":
        sources = [s for s in (self.grid, self.rows, self.file) if s is not None]
        if len(sources) != 1:
            raise ValueError(f"Case '{self.name}' needs exactly one of grid, rows or file")
        if self.expected_error and (self.expected_path or self.expected_letters):
            raise ValueError(f"Case '{self.name}' cannot expect both a path and an error")
        return self

    def load_grid(self, base_dir: Optional[Path] = None) -> Rows:
        """Resolve the case's grid into rows of cells."""
        if self.rows is not None:
            return self.rows
        if self.grid is not None:
            return parse_grid(self.grid)

        path = Path(self.file)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        return parse_grid(path.read_text())


class SuiteConfig(BaseModel):
    """Configuration for a suite run."""
    name: str = "grid-suite"
    max_steps: Optional[int] = Field(None, ge=1)
    include_builtin: bool = False
    cases: List[GridCase] = Field(default_factory=list)
    base_dir: Optional[Path] = None  # Set by the loader; resolves case files


class GridTestResult(BaseModel):
    """Result of validating and walking a single grid."""
    grid_name: str
    success: bool
    path: Optional[PathResult] = None
    error: Optional[ErrorDetail] = None


class CaseOutcome(BaseModel):
    """A GridTestResult judged against its case's expectations."""
    case: str
    passed: bool
    result: GridTestResult
    mismatches: List[str] = Field(default_factory=list)


class SuiteResult(BaseModel):
    """Result of a complete suite run."""
    config: SuiteConfig
    outcomes: List[CaseOutcome] = Field(default_factory=list)
    passed: int = 0
    failed: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
