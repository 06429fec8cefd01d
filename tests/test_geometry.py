"""Tests for point arithmetic and neighbor lookup."""

import pytest

from src.routes.geometry import (
    UP,
    DOWN,
    LEFT,
    RIGHT,
    DIRECTIONS,
    is_in_bounds,
    is_valid_cell,
    find_all,
    add,
    delta,
    neighbor,
    valid_neighbors,
    character_at,
    is_perpendicular,
)
from src.routes.models import Point, GridPoint


GRID = [
    ['A', '-', '@', 'x'],
    [None, '|', ' ', '@'],
]


class TestBounds:
    """Test bounds checking."""

    def test_point_inside(self):
        """A point inside the grid is in bounds."""
        assert is_in_bounds(Point(0, 1), GRID) is True

    @pytest.mark.parametrize("point", [(-1, 0), (0, -1), (10, 0), (0, 10), (2, 0)])
    def test_points_outside(self, point):
        """Negative or too-large coordinates are out of bounds."""
        assert is_in_bounds(Point(*point), GRID) is False

    def test_uses_length_of_own_row(self):
        """Jagged storage is measured per row."""
        jagged = [['@', '-', 'x'], ['|']]
        assert is_in_bounds(Point(0, 2), jagged) is True
        assert is_in_bounds(Point(1, 2), jagged) is False


class TestValidCell:
    """Test the cell alphabet check."""

    def test_route_characters_are_valid(self):
        """Letters, markers and pipes are valid cells."""
        grid = [['A', 'Z', 'x', '+', '-', '|', '@']]
        assert all(is_valid_cell(Point(0, c), grid) for c in range(7))

    def test_empty_cells_are_invalid(self):
        """None and whitespace are not route cells."""
        assert is_valid_cell(Point(1, 0), GRID) is False
        assert is_valid_cell(Point(1, 2), GRID) is False

    def test_other_characters_are_invalid(self):
        """Only the route alphabet counts; uppercase X is an ordinary letter."""
        grid = [['a', 'X', '1', '*', '--']]
        assert is_valid_cell(Point(0, 0), grid) is False
        assert is_valid_cell(Point(0, 1), grid) is True
        assert is_valid_cell(Point(0, 2), grid) is False
        assert is_valid_cell(Point(0, 3), grid) is False
        assert is_valid_cell(Point(0, 4), grid) is False

    def test_out_of_bounds_is_invalid(self):
        """Cells outside the grid are never valid."""
        assert is_valid_cell(Point(5, 5), GRID) is False


class TestFindAll:
    """Test marker lookup."""

    def test_finds_all_in_scan_order(self):
        """Matches come back row by row, left to right."""
        assert find_all('@', GRID) == [
            GridPoint(Point(0, 2), '@'),
            GridPoint(Point(1, 3), '@'),
        ]

    def test_no_match(self):
        """A missing character yields an empty list."""
        assert find_all('C', GRID) == []


class TestArithmetic:
    """Test point arithmetic."""

    def test_add(self):
        """Points add component-wise."""
        assert add((1, 2), (3, 4)) == Point(4, 6)

    def test_delta_is_to_minus_from(self):
        """delta answers 'which way do I move from a to b'."""
        assert delta((1, 2), (3, 4)) == Point(2, 2)
        assert delta((3, 4), (1, 2)) == Point(-2, -2)
        assert delta((2, 2), (2, 3)) == (RIGHT.row, RIGHT.col)

    def test_neighbor(self):
        """neighbor steps one cell in a direction."""
        assert neighbor(Point(1, 1), UP) == Point(0, 1)
        assert neighbor(Point(1, 1), DOWN) == Point(2, 1)
        assert neighbor(Point(1, 1), LEFT) == Point(1, 0)
        assert neighbor(Point(1, 1), RIGHT) == Point(1, 2)

    def test_perpendicular(self):
        """Right angles have a zero dot product."""
        assert is_perpendicular((1, 0), (0, 1)) is True
        assert is_perpendicular((0, 1), (-1, 0)) is True
        assert is_perpendicular((1, 0), (-1, 0)) is False
        assert is_perpendicular((0, 1), (0, 1)) is False


class TestDirections:
    """Test the direction table."""

    def test_order_and_names(self):
        """Directions are up, down, left, right."""
        assert [d.name for d in DIRECTIONS] == ['up', 'down', 'left', 'right']
        assert [(d.row, d.col) for d in DIRECTIONS] == [(-1, 0), (1, 0), (0, -1), (0, 1)]


class TestNeighbors:
    """Test valid neighbor enumeration."""

    def test_valid_neighbors_in_direction_order(self):
        """Only route cells are returned, up/down/left/right."""
        grid = [
            [None, 'A', None],
            ['-', '+', '|'],
            [None, 'x', None],
        ]
        assert valid_neighbors(Point(1, 1), grid) == [
            Point(0, 1), Point(2, 1), Point(1, 0), Point(1, 2),
        ]

    def test_skips_empty_and_out_of_bounds(self):
        """Corners only see their in-grid route neighbors."""
        assert valid_neighbors(Point(0, 0), GRID) == [Point(0, 1)]

    def test_character_at(self):
        """character_at returns the cell or None out of bounds."""
        assert character_at(Point(0, 0), GRID) == 'A'
        assert character_at(Point(1, 0), GRID) is None
        assert character_at(Point(2, 0), GRID) is None
