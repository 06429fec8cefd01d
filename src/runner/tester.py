import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Callable
from pydantic import BaseModel, Field

from ..routes import validate_grid, find_path, render_grid, RouteError, START_MARKER
from ..routes.models import Grid
from .fixtures import BUILTIN_CASES
from .models import GridCase, SuiteConfig, GridTestResult, CaseOutcome, SuiteResult


def evaluate_grid(
    grid: Grid,
    grid_name: str,
    max_steps: Optional[int] = None,
) -> GridTestResult:
    """
    Validate a grid and, if it passes, walk its route.

    Args:
        grid: The grid to evaluate
        grid_name: Name used for reporting
        max_steps: Optional cap on walker moves

    Returns:
        GridTestResult with the path on success or the error on failure
    """
    try:
        validate_grid(grid)
        path = find_path(START_MARKER, grid, max_steps=max_steps)
    except RouteError as e:
        return GridTestResult(grid_name=grid_name, success=False, error=e.to_detail())

    return GridTestResult(grid_name=grid_name, success=True, path=path)


def compare_case(case: GridCase, result: GridTestResult) -> CaseOutcome:
    """Judge a result against the expectations declared on its case."""
    mismatches: List[str] = []

    if case.expected_error is not None:
        if result.success:
            mismatches.append(f"Expected error {case.expected_error}, but the route was walked")
        elif result.error.code != case.expected_error:
            mismatches.append(f"Expected error {case.expected_error}, got {result.error.code}")
    elif not result.success:
        mismatches.append(f"Unexpected error {result.error.code}: {result.error.message}")
    else:
        if case.expected_path is not None and result.path.path_string != case.expected_path:
            mismatches.append(
                f"Path mismatch: expected '{case.expected_path}', got '{result.path.path_string}'"
            )
        if case.expected_letters is not None and result.path.letter_string != case.expected_letters:
            mismatches.append(
                f"Letters mismatch: expected '{case.expected_letters}', got '{result.path.letter_string}'"
            )

    return CaseOutcome(
        case=case.name,
        passed=not mismatches,
        result=result,
        mismatches=mismatches,
    )


class GridSuite(BaseModel):
    """
    Runs a batch of grid cases and aggregates pass/fail counts.

    Attributes:
        config: Suite configuration
        cases: The cases to run, built-in cases first when included
        outcomes: Outcomes recorded so far
        started_at: When the run started
        ended_at: When the run finished
    """

    config: SuiteConfig = Field(default_factory=SuiteConfig)
    cases: List[GridCase] = Field(default_factory=list)
    outcomes: List[CaseOutcome] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @classmethod
    def create(cls, config: Optional[SuiteConfig] = None, **config_kwargs) -> "GridSuite":
        """
        Factory method to create a suite from a configuration.

        Args:
            config: Optional SuiteConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            GridSuite ready to run
        """
        if config is None:
            config = SuiteConfig(**config_kwargs)

        cases = list(BUILTIN_CASES) if config.include_builtin else []
        cases.extend(config.cases)

        return cls(config=config, cases=cases)

    def run_case(self, case: GridCase) -> CaseOutcome:
        """Load, evaluate and judge a single case."""
        grid = case.load_grid(self.config.base_dir)
        result = evaluate_grid(grid, case.name, max_steps=self.config.max_steps)
        outcome = compare_case(case, result)
        self.outcomes.append(outcome)
        return outcome

    def run(
        self,
        on_case: Optional[Callable[[CaseOutcome], None]] = None,
        verbose: bool = False,
    ) -> SuiteResult:
        """
        Run every case in order.

        Args:
            on_case: Optional callback called after each case
            verbose: If True, print progress to stdout

        Returns:
            SuiteResult with every outcome and the pass/fail totals
        """
        self.outcomes = []
        self.started_at = datetime.now()

        if verbose:
            print(f"Running suite '{self.config.name}' with {len(self.cases)} grids")
            print("-" * 40)

        for case in self.cases:
            outcome = self.run_case(case)

            if verbose:
                self._print_outcome(case, outcome)

            if on_case:
                on_case(outcome)

        self.ended_at = datetime.now()

        if verbose:
            result = self.get_result()
            print("-" * 40)
            print(f"Passed: {result.passed}/{result.total}")

        return self.get_result()

    def _print_outcome(self, case: GridCase, outcome: CaseOutcome) -> None:
        result = outcome.result
        status = "✓" if outcome.passed else "✗"

        if result.success:
            print(f"{status} {case.name}: {result.path.path_string} (letters: {result.path.letter_string})")
        else:
            print(f"{status} {case.name}: {result.error.message}")

        for mismatch in outcome.mismatches:
            print(f"    - {mismatch}")

        if not outcome.passed and result.success:
            grid = case.load_grid(self.config.base_dir)
            print(render_grid(grid, highlight=result.path.visited))

    def get_result(self) -> SuiteResult:
        """Build the SuiteResult for the outcomes recorded so far."""
        passed = sum(1 for o in self.outcomes if o.passed)
        started = self.started_at or datetime.now()
        ended = self.ended_at or datetime.now()

        return SuiteResult(
            config=self.config,
            outcomes=self.outcomes,
            passed=passed,
            failed=len(self.outcomes) - passed,
            started_at=started.isoformat(),
            ended_at=ended.isoformat(),
            duration_seconds=(ended - started).total_seconds(),
        )

    def save_result(self, output_path: str | Path) -> Path:
        """Write the current result to a JSON file, creating parent directories."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w') as f:
            json.dump(self.get_result().model_dump(mode='json'), f, indent=2)

        return output_path
