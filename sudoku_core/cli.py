"""Command-line interface for the Sudoku generator and solver."""

import argparse
import sys
import json
from typing import List, Optional

from .benchmark import GenerationBenchmark, Visualizer
from .config import load_config
from .core.board import SudokuBoard
from .core.validator import board_status
from .generator import SudokuGenerator, Difficulty
from .solvers import solve

DIFFICULTY_CHOICES = [d.value for d in Difficulty] + ["all"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-core",
        description="Sudoku Puzzle Generator, Checker & Backtracking Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 hard puzzles with their solutions
  sudoku-core generate --count 5 --difficulty hard --with-solution

  # Solve a puzzle
  sudoku-core solve --puzzle "530070000600195000..."

  # List conflicting cells of a board in progress
  sudoku-core check --puzzle "535070000600195000..."

  # Time generation for every difficulty
  sudoku-core benchmark --runs 20 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES,
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--with-solution", action="store_true",
        help="Also print and save each puzzle's solution"
    )
    gen_parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON file overriding difficulty ranges and the attempt bound"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for candidate ordering"
    )
    solve_parser.add_argument(
        "--max-attempts", type=int, default=None,
        help="Give up after this many candidate digits"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Report conflicting cells of a board")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Board string (81 chars, 0 or . for empty cells)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES,
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--timeout", type=float, default=60.0,
        help="Seconds allowed per generation (default: 60)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON file overriding difficulty ranges and the attempt bound"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "generate": cmd_generate,
        "solve": cmd_solve,
        "check": cmd_check,
        "benchmark": cmd_benchmark,
    }
    return commands[args.command](args)


def _difficulties(name: str) -> List[Difficulty]:
    if name == "all":
        return list(Difficulty)
    return [Difficulty(name)]


def _parse_board(text: str) -> Optional[SudokuBoard]:
    try:
        return SudokuBoard.from_string(text)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        return None


def cmd_generate(args) -> int:
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed, config=load_config(args.config))

    all_puzzles = []
    failures = 0

    for difficulty in _difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzle(s)...")
        results = generator.generate_batch(args.count, difficulty)

        for i, result in enumerate(results, 1):
            if not result.ok:
                failures += 1
                print(f"\n✗ {difficulty.value.capitalize()} puzzle {i} failed ({result.error.reason}): {result.error.message}")
                continue

            puzzle = result.puzzle
            puzzle_data = {
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "blanks": puzzle.count_empty()
            }
            if args.with_solution:
                puzzle_data["solution"] = result.solution.to_string()
            all_puzzles.append(puzzle_data)

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_empty()} blanks) ---")
            print(puzzle)
            if args.with_solution:
                print("Solution:")
                print(result.solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return 1 if failures else 0


def cmd_solve(args) -> int:
    """Handle the solve command."""
    board = _parse_board(args.puzzle)
    if board is None:
        return 1
    if args.max_attempts is not None and args.max_attempts <= 0:
        print(f"Error: --max-attempts must be positive, got {args.max_attempts}")
        return 1

    print("Input puzzle:")
    print(board)
    print()

    result = solve(board, max_attempts=args.max_attempts, seed=args.seed)
    stats = result.stats

    if result.ok:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Attempts: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
        print(result.board)
        return 0

    print(f"✗ Failed to solve ({result.error.reason}): {result.error.message}")
    if args.verbose:
        print(f"  Time: {stats.time_seconds:.4f}s")
        print(f"  Attempts: {stats.iterations:,}")
    return 1


def cmd_check(args) -> int:
    """Handle the check command."""
    board = _parse_board(args.puzzle)
    if board is None:
        return 1

    status = board_status(board)
    print(board)
    print()

    if status.invalid_cells:
        cells = ", ".join(f"({r}, {c})" for r, c in sorted(status.invalid_cells))
        print(f"✗ {len(status.invalid_cells)} conflicting cell(s): {cells}")
        return 1

    if status.is_complete:
        print("✓ Board is complete and valid")
    else:
        print(f"✓ No conflicts, {board.count_empty()} cell(s) left, next empty at {status.empty_cell}")
    return 0


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    config = load_config(args.config)
    difficulties = _difficulties(args.difficulty)

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Runs per difficulty: {args.runs}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        runs_per_difficulty=args.runs,
        difficulties=difficulties,
        seed=args.seed,
        config=config,
        timeout_seconds=args.timeout,
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for diff, stats in summary["results_by_difficulty"].items():
        print(f"\n{diff.capitalize()}:")
        print(f"  Success: {stats['success_rate']:.1f}% ({stats['generated']}/{stats['runs']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Attempts: {stats['avg_attempts']:,.0f}")
        print(f"  Avg Blanks: {stats['avg_blanks']:.1f} (range {stats['removal_range']})")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output, config=config)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
