"""Grid validation and route walking for ASCII pipe diagrams."""

from .validator import (
    validate_grid,
    try_validate_grid,
    validate_structure,
    validate_marker,
    validate_endpoints,
    START_MARKER,
    END_MARKER,
)
from .walker import find_path, classify, CellKind
from .models import (
    Grid,
    Point,
    Direction,
    GridPoint,
    Dimensions,
    LetterEncounter,
    PathResult,
    ValidationResult,
    ErrorDetail,
    GridCheck,
)
from .errors import (
    RouteError,
    GridValidationError,
    InvalidGrid,
    UnevenRows,
    MissingStart,
    MultipleStarts,
    MissingEnd,
    MultipleEnds,
    PathError,
    MultipleStartingPaths,
    BrokenPath,
    FakeTurn,
    ForkInPath,
    StepLimitExceeded,
)
from .parsing import parse_grid, extract_grid_content, render_grid

__all__ = [
    # Main entry points
    "validate_grid",
    "try_validate_grid",
    "find_path",
    # Validation steps
    "validate_structure",
    "validate_marker",
    "validate_endpoints",
    "START_MARKER",
    "END_MARKER",
    # Walker internals
    "classify",
    "CellKind",
    # Models
    "Grid",
    "Point",
    "Direction",
    "GridPoint",
    "Dimensions",
    "LetterEncounter",
    "PathResult",
    "ValidationResult",
    "ErrorDetail",
    "GridCheck",
    # Errors
    "RouteError",
    "GridValidationError",
    "InvalidGrid",
    "UnevenRows",
    "MissingStart",
    "MultipleStarts",
    "MissingEnd",
    "MultipleEnds",
    "PathError",
    "MultipleStartingPaths",
    "BrokenPath",
    "FakeTurn",
    "ForkInPath",
    "StepLimitExceeded",
    # Parsing
    "parse_grid",
    "extract_grid_content",
    "render_grid",
]
