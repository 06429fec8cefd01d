"""Grid parsing and rendering utilities."""

import re
from typing import Iterable, List, Optional

from .models import Grid, Point


def extract_grid_content(text: str) -> str:
    """
    Extract content from between <grid> and </grid> tags.

    Empty lines before the drawing and blank lines after it are dropped.
    A leading line of spaces is a drawn row and is kept, so row numbers
    match the drawing.
    """
    match = re.search(r'<grid>(.*?)</grid>', text, re.DOTALL)
    if match:
        text = match.group(1)

    lines = text.split('\n')
    while lines and not lines[0].rstrip('\r'):
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return '\n'.join(lines)


def parse_grid(text: str, pad: bool = True) -> List[List[Optional[str]]]:
    """
    Parse an ASCII drawing into rows of cells.

    Spaces become empty cells (None). Text art usually loses trailing
    spaces, so by default rows are right-padded with None to the widest
    line. Pass pad=False to keep the rows as drawn.
    """
    content = extract_grid_content(text)
    if not content:
        return []

    rows = [
        [None if ch == ' ' else ch for ch in line.rstrip('\r')]
        for line in content.split('\n')
    ]

    if pad:
        width = max(len(row) for row in rows)
        for row in rows:
            row.extend([None] * (width - len(row)))

    return rows


def render_grid(
    grid: Grid,
    highlight: Optional[Iterable[Point]] = None,
    empty: str = ' ',
) -> str:
    """
    Render the grid to a string.

    Cells in `highlight` that hold plain route characters ('-', '|', '+')
    are drawn as '*', so a walked route stands out; markers and letters
    are always drawn as-is.
    """
    marked = set(highlight or ())

    lines = []
    for row_idx, row in enumerate(grid):
        line = ''
        for col_idx, cell in enumerate(row):
            if not isinstance(cell, str) or not cell:
                line += empty
            elif (row_idx, col_idx) in marked and cell in ('-', '|', '+'):
                line += '*'
            else:
                line += cell
        lines.append(line.rstrip() if empty == ' ' else line)

    return '\n'.join(lines)
