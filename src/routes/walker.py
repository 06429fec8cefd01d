"""
Route walking over a validated grid.

The walker is a small state machine. Each cell is classified once:

    @      ENTRY     leave along the single open neighbor
    A-Z    LETTER    record the letter, go straight, else into unvisited cells
    +      TURN      exactly one perpendicular continuation
    - |    STRAIGHT  go straight, else anywhere but back
    x      EXIT      done

Only the first cell of a walk is an ENTRY. A stray '@' met later is
treated as plumbing. A walk that starts on a letter still records it.
"""

from enum import Enum
from typing import List, Optional, Set, Tuple
from pydantic import BaseModel, Field

from .errors import (
    MissingStart,
    MultipleStartingPaths,
    BrokenPath,
    FakeTurn,
    ForkInPath,
    StepLimitExceeded,
)
from .geometry import add, delta, find_all, valid_neighbors, character_at, is_perpendicular
from .models import Grid, Point, LetterEncounter, PathResult
from .validator import START_MARKER, END_MARKER


class CellKind(str, Enum):
    ENTRY = "entry"
    LETTER = "letter"
    TURN = "turn"
    STRAIGHT = "straight"
    EXIT = "exit"


def classify(char: Optional[str], first: bool = False) -> CellKind:
    """Decide how the walker treats a cell."""
    if char == END_MARKER:
        return CellKind.EXIT
    if first:
        return CellKind.ENTRY
    if char is not None and len(char) == 1 and 'A' <= char <= 'Z':
        return CellKind.LETTER
    if char == '+':
        return CellKind.TURN
    return CellKind.STRAIGHT


class WalkState(BaseModel):
    """Everything the walker carries from one step to the next."""
    point: Point
    direction: Optional[Point] = None
    visited: List[Point] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)
    letters: List[LetterEncounter] = Field(default_factory=list)
    visited_set: Set[Point] = Field(default_factory=set)
    seen_letters: Set[Tuple[str, Point]] = Field(default_factory=set)

    @classmethod
    def start(cls, point: Point, char: str) -> "WalkState":
        return cls(point=point, visited=[point], path=[char], visited_set={point})

    @property
    def char(self) -> str:
        return self.path[-1]

    @property
    def steps(self) -> int:
        return len(self.visited) - 1

    @property
    def previous(self) -> Optional[Point]:
        """The point visited immediately before the current one."""
        return self.visited[-2] if len(self.visited) > 1 else None

    @property
    def straight_ahead(self) -> Optional[Point]:
        if self.direction is None:
            return None
        return add(self.point, self.direction)

    def record_letter(self) -> None:
        key = (self.char, self.point)
        if key not in self.seen_letters:
            self.seen_letters.add(key)
            self.letters.append(LetterEncounter(letter=self.char, point=self.point))

    def advance(self, next_point: Point, char: str) -> None:
        self.direction = delta(self.point, next_point)
        self.point = next_point
        self.path.append(char)
        self.visited.append(next_point)
        self.visited_set.add(next_point)

    def to_result(self) -> PathResult:
        return PathResult(visited=self.visited, letters=self.letters, path=self.path)


def _from_entry(state: WalkState, candidates: List[Point]) -> Optional[Point]:
    if len(candidates) > 1:
        raise MultipleStartingPaths(point=state.point)
    # A walk may start on a letter
    if classify(state.char) is CellKind.LETTER:
        state.record_letter()
    return candidates[0]


def _from_letter(state: WalkState, candidates: List[Point]) -> Optional[Point]:
    state.record_letter()

    ahead = state.straight_ahead
    if ahead in candidates:
        return ahead

    # Letters are junctions: never re-enter the route except straight through
    return next((p for p in candidates if p not in state.visited_set), None)


def _from_turn(state: WalkState, candidates: List[Point]) -> Optional[Point]:
    previous = state.previous
    turns = [
        p for p in candidates
        if p != previous and is_perpendicular(state.direction, delta(state.point, p))
    ]

    if not turns:
        raise FakeTurn(point=state.point)
    if len(turns) > 1:
        raise ForkInPath(point=state.point)

    return turns[0]


def _from_straight(state: WalkState, candidates: List[Point]) -> Optional[Point]:
    ahead = state.straight_ahead
    if ahead in candidates:
        return ahead

    previous = state.previous
    return next((p for p in candidates if p != previous), None)


def next_point(kind: CellKind, state: WalkState, candidates: List[Point]) -> Optional[Point]:
    """Pick the next cell, or None if the route stops here."""
    if kind is CellKind.EXIT:
        return None
    if kind is CellKind.ENTRY:
        return _from_entry(state, candidates)
    if kind is CellKind.LETTER:
        return _from_letter(state, candidates)
    if kind is CellKind.TURN:
        return _from_turn(state, candidates)
    return _from_straight(state, candidates)


def find_path(start_char: str, grid: Grid, max_steps: Optional[int] = None) -> PathResult:
    """
    Walk the route beginning at the first `start_char` in the grid.

    Args:
        start_char: The entry marker, normally '@'
        grid: The grid to walk; it is never modified
        max_steps: Optional cap on the number of moves before giving up

    Returns:
        PathResult with the visited points, the letters collected and the
        characters along the route

    Raises:
        MissingStart, MultipleStartingPaths, BrokenPath, FakeTurn,
        ForkInPath or StepLimitExceeded
    """
    starts = find_all(start_char, grid)
    if not starts:
        raise MissingStart()

    state = WalkState.start(starts[0].point, start_char)

    while True:
        candidates = valid_neighbors(state.point, grid)
        kind = classify(state.char, first=state.steps == 0)

        if kind is CellKind.EXIT:
            return state.to_result()

        if not candidates:
            raise BrokenPath(point=state.point)

        if max_steps is not None and state.steps >= max_steps:
            raise StepLimitExceeded(
                f"No exit reached after {max_steps} steps.", point=state.point
            )

        following = next_point(kind, state, candidates)
        if following is None:
            raise BrokenPath(point=state.point)

        state.advance(following, character_at(following, grid))
