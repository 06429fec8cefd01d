"""
Main entry point for walking route grids.

Usage:
    python -m src.main
    python -m src.main suite.yaml --output results/run1.json --verbose
    python -m src.main --grid drawing.txt
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml

from .routes import validate_grid, find_path, parse_grid, render_grid, RouteError, START_MARKER
from .runner import GridSuite, SuiteConfig


def load_config(config_path: str) -> SuiteConfig:
    """Load a suite configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    data.setdefault("base_dir", path.parent)
    return SuiteConfig(**data)


def walk_grid_file(grid_path: str, max_steps: Optional[int] = None) -> int:
    """Validate and walk a single drawing, printing the outcome."""
    path = Path(grid_path)
    if not path.exists():
        print(f"Error: grid file not found: {grid_path}", file=sys.stderr)
        return 1

    grid = parse_grid(path.read_text())

    try:
        validation = validate_grid(grid)
        result = find_path(START_MARKER, grid, max_steps=max_steps)
    except RouteError as e:
        print(render_grid(grid))
        print()
        print(f"✗ {e.code}: {e.message}", file=sys.stderr)
        return 1

    print(render_grid(grid, highlight=result.visited))
    print()
    print(f"Size: {validation.dimensions.rows}x{validation.dimensions.cols}")
    print(f"Path: {result.path_string}")
    print(f"Letters: {result.letter_string}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Walk ASCII route grids and check them against expected outcomes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example suite.yaml:
  name: my-grids
  max_steps: 10000
  include_builtin: true
  cases:
    - name: simple
      grid: |
        @-A-+
            |
            x
      expected_path: "@-A-+|x"
      expected_letters: A
    - name: fork
      file: grids/fork.txt
      expected_error: FORK_IN_PATH
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML suite file (default: run the built-in grids)"
    )
    parser.add_argument(
        "--grid", "-g",
        help="Walk a single grid drawing instead of running a suite"
    )
    parser.add_argument(
        "--builtin",
        action="store_true",
        help="Also run the built-in grids alongside the suite file"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        help="Give up on a route after this many moves"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    if args.grid:
        return walk_grid_file(args.grid, max_steps=args.max_steps)

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
        if args.builtin:
            config.include_builtin = True
    else:
        config = SuiteConfig(name="builtin", include_builtin=True)

    if args.max_steps is not None:
        config.max_steps = args.max_steps

    suite = GridSuite.create(config=config)

    try:
        result = suite.run(verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nRun interrupted by user")
        result = suite.get_result()
    except (OSError, ValueError) as e:
        print(f"Error during run: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = suite.save_result(args.output)
        if args.verbose:
            print(f"Results saved to: {output_path}")

    print()
    print("=== Suite Summary ===")
    print(f"Suite: {result.config.name}")
    print(f"Passed: {result.passed}")
    print(f"Failed: {result.failed}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    for outcome in result.outcomes:
        if not outcome.passed:
            print(f"  ✗ {outcome.case}: {'; '.join(outcome.mismatches)}")

    return 0 if result.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
