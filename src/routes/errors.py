"""Named failure kinds raised by the validator and the walker."""

from typing import Optional

from .models import ErrorDetail, Point


class RouteError(Exception):
    """Base class for every grid or route failure."""
    code = "ROUTE_ERROR"
    default_message = "Route error."

    def __init__(self, message: Optional[str] = None, point: Optional[Point] = None):
        self.message = message or self.default_message
        self.point = point
        super().__init__(self.message)

    def to_detail(self) -> ErrorDetail:
        """Convert to a serializable ErrorDetail."""
        return ErrorDetail(code=self.code, message=self.message, point=self.point)


# Structural problems, found before any traversal

class GridValidationError(RouteError):
    code = "GRID_INVALID"
    default_message = "Invalid grid."


class InvalidGrid(GridValidationError):
    code = "INVALID_GRID"
    default_message = "Grid must be a non-empty 2D array."


class UnevenRows(GridValidationError):
    code = "UNEVEN_ROWS"
    default_message = "Grid must have rows of equal length."


class MissingStart(GridValidationError):
    code = "MISSING_START"
    default_message = "Missing start character."


class MultipleStarts(GridValidationError):
    code = "MULTIPLE_STARTS"
    default_message = "Multiple starts."


class MissingEnd(GridValidationError):
    code = "MISSING_END"
    default_message = "Missing end character."


class MultipleEnds(GridValidationError):
    code = "MULTIPLE_ENDS"
    default_message = "Multiple end characters."


# Traversal problems, found while walking

class PathError(RouteError):
    code = "PATH_ERROR"
    default_message = "Invalid path."


class MultipleStartingPaths(PathError):
    code = "MULTIPLE_STARTING_PATHS"
    default_message = "Multiple starting paths."


class BrokenPath(PathError):
    code = "BROKEN_PATH"
    default_message = "Broken path."


class FakeTurn(PathError):
    code = "FAKE_TURN"
    default_message = "Fake turn."


class ForkInPath(PathError):
    code = "FORK_IN_PATH"
    default_message = "Fork in path."


class StepLimitExceeded(PathError):
    code = "STEP_LIMIT_EXCEEDED"
    default_message = "Step limit exceeded."
