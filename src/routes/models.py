"""Data models for grid validation and route walking."""

from typing import List, Optional, NamedTuple, Sequence
from pydantic import BaseModel, ConfigDict, Field


# A grid is a sequence of rows; a cell is a single character or None (empty).
Grid = Sequence[Sequence[Optional[str]]]


class Point(NamedTuple):
    """A (row, col) position on the grid, zero-based."""
    row: int
    col: int


class Direction(NamedTuple):
    """A unit step on the grid, named for diagnostics."""
    row: int
    col: int
    name: str


class GridPoint(NamedTuple):
    """A marker lookup result: where it is and which character it holds."""
    point: Point
    char: str


class Dimensions(NamedTuple):
    """Grid size."""
    rows: int
    cols: int


class LetterEncounter(BaseModel):
    """First sighting of a letter at a specific cell."""
    letter: str = Field(..., pattern=r'^[A-Z]$')
    point: Point


class PathResult(BaseModel):
    """Result of walking a route from the entry marker to the exit marker."""
    visited: List[Point] = Field(default_factory=list)
    letters: List[LetterEncounter] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)

    @property
    def path_string(self) -> str:
        """The characters along the route, e.g. '@-A-+|+-x'."""
        return ''.join(self.path)

    @property
    def letter_string(self) -> str:
        """The collected letters in encounter order."""
        return ''.join(encounter.letter for encounter in self.letters)


class ValidationResult(BaseModel):
    """Snapshot of a successful grid validation."""
    model_config = ConfigDict(frozen=True)

    valid: bool
    start: GridPoint
    end: GridPoint
    dimensions: Dimensions


class ErrorDetail(BaseModel):
    """A single failure, in a form that can be displayed or serialized."""
    code: str
    message: str
    point: Optional[Point] = None


class GridCheck(BaseModel):
    """Outcome of a non-throwing validation."""
    valid: bool
    result: Optional[ValidationResult] = None
    error: Optional[ErrorDetail] = None
