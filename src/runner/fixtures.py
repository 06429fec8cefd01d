"""Reference grids with known outcomes, used as the built-in suite."""

from typing import Dict, List, Optional

from ..routes.parsing import parse_grid
from .models import GridCase, Rows


def _grid(*lines: str) -> Rows:
    return parse_grid('\n'.join(lines))


# Valid routes

G1 = _grid(
    "@---A---+",
    "        |",
    "x-B-+   C",
    "    |   |",
    "    +---+",
)

# Route crosses itself on a straight segment
G2 = _grid(
    "@",
    "| +-C--+",
    "A |    |",
    "+---B--+",
    "  |      x",
    "  |      |",
    "  +---D--+",
)

# Letter used as a corner
G3 = _grid(
    "@---A---+",
    "        |",
    "x-B-+   |",
    "    |   |",
    "    +---C",
)

# Letters passed twice are collected once
G4 = _grid(
    "    +-O-N-+",
    "    |     |",
    "    |   +-I-+",
    "@-G-O-+ | | |",
    "    | | +-+ E",
    "    +-+     S",
    "            |",
    "            x",
)

# Compact turns
G5 = _grid(
    " +-L-+",
    " |  +A-+",
    "@B+ ++ H",
    " ++    x",
)

# Anything after the exit is ignored
G6 = _grid(
    "@-A--+",
    "     |",
    "     +-B--x-C--D",
)

# Invalid grids

G7 = _grid(
    " ---A---+",
    "        |",
    "x-B-+   |",
    "    |   |",
    "    +---C",
)

G8 = _grid(
    "@---A---+",
    "        |",
    "  B-+   |",
    "    |   |",
    "    +---C",
)

G9 = _grid(
    " @--A-@-+",
    "        |",
    "x-B-+   C",
    "    |   |",
    "    +---+",
)

G10 = _grid(
    "@--A---+",
    "       |",
    "       C",
    "       x",
    "   @-B-+",
)

# Multiple starts mask the multiple ends
G11 = _grid(
    " @--A--x",
    "",
    "x-B-+",
    "    |",
    "    @",
)

G12A = _grid(
    "     x-B",
    "       |",
    "@--A---+",
    "       |",
    "  -+   C",
    "   |   |",
    "   +---+",
)

G12B = _grid(
    "     x-B",
    "       |",
    "@--A---+",
    "       |",
    "  x+   C",
    "   |   |",
    "   +---+",
)

G12C = _grid(
    "x-B",
    "  |",
    "@-+",
    "  |",
    " -+",
)

G13 = _grid(
    "@--A-+",
    "     |",
    "",
    "     B-x",
)

G14A = _grid("x-B-@-A-x")

G14B = _grid("x-B-@-A--")

G15 = _grid("@-A-+-B-x")


EXAMPLE_GRIDS: Dict[str, Rows] = {
    "G1": G1,
    "G2": G2,
    "G3": G3,
    "G4": G4,
    "G5": G5,
    "G6": G6,
    "G7": G7,
    "G8": G8,
    "G9": G9,
    "G10": G10,
    "G11": G11,
    "G12a": G12A,
    "G12b": G12B,
    "G12c": G12C,
    "G13": G13,
    "G14a": G14A,
    "G14b": G14B,
    "G15": G15,
}


def _case(
    name: str,
    expected_path: Optional[str] = None,
    expected_letters: Optional[str] = None,
    expected_error: Optional[str] = None,
) -> GridCase:
    return GridCase(
        name=name,
        rows=EXAMPLE_GRIDS[name],
        expected_path=expected_path,
        expected_letters=expected_letters,
        expected_error=expected_error,
    )


BUILTIN_CASES: List[GridCase] = [
    _case("G1", "@---A---+|C|+---+|+-B-x", "ACB"),
    _case("G2", "@|A+---B--+|+--C-+|-||+---D--+|x", "ABCD"),
    _case("G3", "@---A---+|||C---+|+-B-x", "ACB"),
    _case("G4", "@-G-O-+|+-+|O||+-O-N-+|I|+-+|+-I-+|ES|x", "GOONIES"),
    _case("G5", "@B+++B|+-L-+A+++A-+Hx", "BLAH"),
    _case("G6", "@-A--+|+-B--x", "AB"),
    _case("G7", expected_error="MISSING_START"),
    _case("G8", expected_error="MISSING_END"),
    _case("G9", expected_error="MULTIPLE_STARTS"),
    _case("G10", expected_error="MULTIPLE_STARTS"),
    _case("G11", expected_error="MULTIPLE_STARTS"),
    _case("G12a", expected_error="FORK_IN_PATH"),
    _case("G12b", expected_error="MULTIPLE_ENDS"),
    _case("G12c", expected_error="FORK_IN_PATH"),
    _case("G13", expected_error="BROKEN_PATH"),
    _case("G14a", expected_error="MULTIPLE_ENDS"),
    _case("G14b", expected_error="MULTIPLE_STARTING_PATHS"),
    _case("G15", expected_error="FAKE_TURN"),
]
