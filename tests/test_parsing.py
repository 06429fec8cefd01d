"""Tests for turning drawings into grids and back."""

import pytest

from src.routes import parse_grid, extract_grid_content, render_grid, validate_grid, find_path, UnevenRows
from src.routes.models import Point


class TestExtractContent:
    """Test content extraction."""

    def test_tagged(self):
        """Content between <grid> tags is used."""
        assert extract_grid_content("noise <grid>\n@-x\n</grid> noise") == "@-x"

    def test_untagged(self):
        """Without tags the whole text is used."""
        assert extract_grid_content("@-x") == "@-x"

    def test_blank_edge_lines_dropped(self):
        """Empty leading lines and blank trailing lines go, inner ones stay."""
        assert extract_grid_content("\n\n@\n\nx\n  \n") == "@\n\nx"

    def test_leading_row_of_spaces_kept(self):
        """A first row drawn with spaces only is still a row."""
        assert extract_grid_content("     \n@-x") == "     \n@-x"

    def test_leading_spaces_kept(self):
        """Indentation on the first row is part of the drawing."""
        assert extract_grid_content("\n  @-x\n") == "  @-x"


class TestParseGrid:
    """Test drawing parsing."""

    def test_spaces_become_none(self):
        """Spaces are empty cells."""
        assert parse_grid("@ x") == [['@', None, 'x']]

    def test_row_numbers_match_drawing(self):
        """A blank first row keeps the route on the line it was drawn on."""
        grid = parse_grid("     \n@-x")
        assert len(grid) == 2
        assert grid[0] == [None] * 5
        assert find_path('@', grid).visited[0] == Point(1, 0)

    def test_padded_to_widest_row(self):
        """Short rows are padded so the grid is rectangular."""
        grid = parse_grid("@-+\n  |\n  +-x")
        assert [len(row) for row in grid] == [5, 5, 5]
        assert grid[0][3] is None
        validate_grid(grid)

    def test_unpadded_keeps_shape(self):
        """pad=False keeps the rows as drawn, and the validator rejects them."""
        grid = parse_grid("@-+\n  |\n  +-x", pad=False)
        assert [len(row) for row in grid] == [3, 3, 5]
        with pytest.raises(UnevenRows):
            validate_grid(grid)

    def test_empty_text(self):
        """Nothing to parse gives an empty grid."""
        assert parse_grid("") == []
        assert parse_grid("\n\n") == []

    def test_windows_line_endings(self):
        """Carriage returns are dropped."""
        assert parse_grid("@-x\r\n") == [['@', '-', 'x']]


class TestRenderGrid:
    """Test grid rendering."""

    def test_round_trip(self):
        """Rendering a parsed drawing gives the drawing back."""
        text = "@-A-+\n    |\n    x"
        assert render_grid(parse_grid(text)) == text

    def test_custom_empty(self):
        """Empty cells can be drawn with another character."""
        assert render_grid([['@', None, 'x']], empty='.') == "@.x"

    def test_highlight_marks_pipes_only(self):
        """Highlighted pipes become '*', markers and letters stay."""
        grid = parse_grid("@-A-+\n    x")
        visited = [Point(0, 0), Point(0, 1), Point(0, 2), Point(0, 3), Point(0, 4), Point(1, 4)]
        assert render_grid(grid, highlight=visited) == "@*A**\n    x"
