"""Command-line interface for the grid solver."""

import argparse
import logging
import sys

from .core.errors import ConstraintError
from .core.grid import Grid
from .puzzles import EXAMPLES, load_example
from .solvers import SearchSolver
from .benchmark import Benchmark


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Generalized Sudoku solver: constraint propagation plus branch search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the bundled classic hard puzzle
  sudoku-engine solve

  # Solve a puzzle string with a fixed seed, showing candidates and stats
  sudoku-engine solve --puzzle "530070000600195000..." --seed 7 --show-candidates -v

  # Run 20 randomized runs per bundled puzzle
  sudoku-engine benchmark --runs 20 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (N*N chars, 0 . or _ for empty cells, A.. for 10 and up)"
    )
    source.add_argument(
        "--example", "-e", choices=sorted(EXAMPLES), default="classic-hard",
        help="Bundled puzzle to solve (default: classic-hard)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for branch ordering"
    )
    solve_parser.add_argument(
        "--show-candidates", action="store_true",
        help="Print the initial candidate sets"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show diagnostic messages and solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run repeated randomized solves")
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=10,
        help="Runs per puzzle (default: 10)"
    )
    bench_parser.add_argument(
        "--examples", "-e", nargs="+", choices=sorted(EXAMPLES), default=None,
        help="Bundled puzzles to benchmark (default: all)"
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
        help="Seconds allowed per run (default: 60)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show diagnostic messages"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def format_candidates(grid: Grid) -> str:
    """Render the candidate set of every cell, one grid row per line."""
    lines = []
    for row in grid.candidates():
        lines.append(" ".join("{" + ",".join(map(str, sorted(c))) + "}" for c in row))
    return "\n".join(lines)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        if args.puzzle is not None:
            grid = Grid.from_string(args.puzzle)
        else:
            grid = load_example(args.example)
    except ConstraintError as e:
        print(f"{type(e).__name__}: {e}")
        sys.exit(1)

    print("Given:")
    print(grid)
    print()

    if args.show_candidates:
        print("Initial candidates:")
        try:
            print(format_candidates(grid))
        except ConstraintError as e:
            print(f"{type(e).__name__}: {e}")
        print()

    solver = SearchSolver(seed=args.seed)
    solution, stats = solver.solve(grid)

    if stats.solved:
        print(f"Solution ({stats.time_seconds:.4f}s):")
        print(solution)
        if args.verbose:
            print(f"  Search calls: {stats.iterations:,}")
            print(f"  Branches tried: {stats.nodes_explored:,}")
            print(f"  Dead branches: {stats.backtracks:,}")
            print(f"  Propagation passes: {stats.propagation_passes:,}")
            print(f"  Forced cells: {stats.forced_cells:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    else:
        print("No solution found")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Branches tried: {stats.nodes_explored:,}")
        sys.exit(2)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    names = args.examples or list(EXAMPLES)
    puzzles = {name: load_example(name) for name in names}

    print("=" * 60)
    print("GRID SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Runs per puzzle: {args.runs}")
    print(f"Puzzles: {', '.join(names)}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = Benchmark(
        puzzles=puzzles,
        runs=args.runs,
        timeout_seconds=args.timeout,
        seed=args.seed
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for name, stats in summary["results_by_puzzle"].items():
        print(f"\n{name}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Branches: {stats['avg_nodes_explored']:.1f}")
        print(f"  Distinct Solutions: {stats['distinct_solutions']}")

    benchmark.save_results(args.output)
    print(f"\nResults saved to {args.output}/")

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
