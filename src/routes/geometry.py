"""Point arithmetic and neighbor lookup over a character grid."""

import re
from typing import List, Optional, Tuple

from .models import Grid, Point, Direction, GridPoint


UP = Direction(-1, 0, 'up')
DOWN = Direction(1, 0, 'down')
LEFT = Direction(0, -1, 'left')
RIGHT = Direction(0, 1, 'right')

# Neighbor enumeration order is part of the walking rules
DIRECTIONS: Tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

VALID_CELL = re.compile(r'[A-Zx+\-|@]')


def is_in_bounds(point: Point, grid: Grid) -> bool:
    """True if the point lies inside the grid, measured against its own row."""
    row, col = point
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def is_valid_cell(point: Point, grid: Grid) -> bool:
    """True if the point is in bounds and holds a drawable route character."""
    if not is_in_bounds(point, grid):
        return False
    cell = grid[point[0]][point[1]]
    return isinstance(cell, str) and VALID_CELL.fullmatch(cell) is not None


def find_all(char: str, grid: Grid) -> List[GridPoint]:
    """All cells holding `char`, in row-major scan order."""
    return [
        GridPoint(Point(row_idx, col_idx), char)
        for row_idx, row in enumerate(grid)
        for col_idx, cell in enumerate(row)
        if cell == char
    ]


def add(p1: Tuple[int, int], p2: Tuple[int, int]) -> Point:
    """Component-wise sum."""
    return Point(p1[0] + p2[0], p1[1] + p2[1])


def delta(from_point: Tuple[int, int], to_point: Tuple[int, int]) -> Point:
    """The step taken to move from `from_point` to `to_point`."""
    return Point(to_point[0] - from_point[0], to_point[1] - from_point[1])


def neighbor(point: Point, direction: Direction) -> Point:
    """The point one step away in `direction`."""
    return add(point, direction[:2])


def valid_neighbors(point: Point, grid: Grid) -> List[Point]:
    """Neighbors holding route characters, in up/down/left/right order."""
    return [
        candidate
        for candidate in (neighbor(point, direction) for direction in DIRECTIONS)
        if is_valid_cell(candidate, grid)
    ]


def character_at(point: Point, grid: Grid) -> Optional[str]:
    """The cell content, or None when the point is out of bounds."""
    if not is_in_bounds(point, grid):
        return None
    return grid[point[0]][point[1]]


def is_perpendicular(d1: Tuple[int, int], d2: Tuple[int, int]) -> bool:
    """True if two step vectors are at right angles."""
    return d1[0] * d2[0] + d1[1] * d2[1] == 0
