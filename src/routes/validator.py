"""
Structural validation for route grids.

Validates, in order:
1. Structure (non-empty, a sequence of rows, all rows the same length)
2. Entry marker '@' (exactly one)
3. Exit marker 'x' (exactly one)

A defect in an earlier step masks everything after it, so a grid with two
'@' and no 'x' reports MULTIPLE_STARTS.
"""

from typing import Tuple, Type

from .errors import (
    RouteError,
    InvalidGrid,
    UnevenRows,
    MissingStart,
    MultipleStarts,
    MissingEnd,
    MultipleEnds,
)
from .geometry import find_all
from .models import Grid, GridPoint, Dimensions, ValidationResult, GridCheck


START_MARKER = '@'
END_MARKER = 'x'


def _is_row_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def validate_structure(grid: Grid) -> None:
    """Raise InvalidGrid or UnevenRows unless the grid is a non-empty rectangle."""
    if not _is_row_sequence(grid) or not grid or not _is_row_sequence(grid[0]):
        raise InvalidGrid()

    expected_length = len(grid[0])
    for row_idx, row in enumerate(grid):
        if not _is_row_sequence(row) or len(row) != expected_length:
            raise UnevenRows(
                f"{UnevenRows.default_message} Row {row_idx} differs from row 0 "
                f"(expected {expected_length} cells)."
            )


def validate_marker(
    grid: Grid,
    char: str,
    missing_error: Type[RouteError],
    multiple_error: Type[RouteError],
) -> GridPoint:
    """Return the single occurrence of `char`, or raise if it is absent or repeated."""
    points = find_all(char, grid)

    if not points:
        raise missing_error()

    if len(points) > 1:
        raise multiple_error(point=points[1].point)

    return points[0]


def validate_endpoints(grid: Grid) -> Tuple[GridPoint, GridPoint]:
    """Validate the entry marker, then the exit marker."""
    start = validate_marker(grid, START_MARKER, MissingStart, MultipleStarts)
    end = validate_marker(grid, END_MARKER, MissingEnd, MultipleEnds)
    return start, end


def validate_grid(grid: Grid) -> ValidationResult:
    """
    Full validation: structure first, then markers.

    Returns a ValidationResult with both endpoints and the grid dimensions.
    Raises the first RouteError encountered.
    """
    validate_structure(grid)
    start, end = validate_endpoints(grid)

    return ValidationResult(
        valid=True,
        start=start,
        end=end,
        dimensions=Dimensions(rows=len(grid), cols=len(grid[0])),
    )


def try_validate_grid(grid: Grid) -> GridCheck:
    """Like validate_grid, but reports failures in the result instead of raising."""
    try:
        result = validate_grid(grid)
    except RouteError as e:
        return GridCheck(valid=False, error=e.to_detail())
    return GridCheck(valid=True, result=result)
