"""Benchmarking repeated randomized solver runs."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import logging
import os
import random

from tqdm import tqdm

from ..core.grid import Grid
from ..puzzles import EXAMPLES, load_example
from ..solvers import SearchSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single solver run."""
    puzzle: str
    run_id: int
    seed: int
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    propagation_passes: int = 0
    forced_cells: int = 0
    solution: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "run_id": self.run_id,
            "seed": self.seed,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "propagation_passes": self.propagation_passes,
            "forced_cells": self.forced_cells,
            "solution": self.solution,
            **self.extra
        }


class Benchmark:
    """
    Runs the search solver repeatedly on each puzzle with different seeds.

    Besides timing and memory, the summary reports how many distinct
    solutions the randomized branch order surfaced per puzzle.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, Grid]] = None,
        runs: int = 10,
        timeout_seconds: float = 60.0,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of name -> puzzle grid (default: all bundled examples).
            runs: Solver runs per puzzle.
            timeout_seconds: Maximum time per run.
            seed: Seed for drawing the per-run seeds.
        """
        if runs < 1:
            raise ValueError(f"runs must be positive, got {runs}")
        if puzzles is None:
            puzzles = {name: load_example(name) for name in EXAMPLES}
        self.puzzles = puzzles
        self.runs = runs
        self.timeout_seconds = timeout_seconds
        self.seed = seed
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run every puzzle `runs` times.

        Returns:
            List of BenchmarkResult objects.
        """
        seeder = random.Random(self.seed)
        self.results = []

        pbar = tqdm(
            total=len(self.puzzles) * self.runs,
            desc="Benchmarking",
            disable=not show_progress
        )

        for name, puzzle in self.puzzles.items():
            for run_id in range(self.runs):
                run_seed = seeder.randrange(2 ** 32)
                self.results.append(self._run_single(name, puzzle, run_id, run_seed))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, name: str, puzzle: Grid, run_id: int, seed: int) -> BenchmarkResult:
        """Run the solver once on one puzzle."""
        solver = SearchSolver(seed=seed)

        # The worker thread keeps running after a timeout; only the result is dropped.
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(solver.solve, puzzle)
        try:
            solution, stats = future.result(timeout=self.timeout_seconds)
        except TimeoutError:
            log.warning("%s run %d timed out after %.1fs", name, run_id, self.timeout_seconds)
            return BenchmarkResult(
                puzzle=name,
                run_id=run_id,
                seed=seed,
                solved=False,
                time_seconds=self.timeout_seconds,
                memory_bytes=0,
                iterations=0,
                backtracks=0,
                nodes_explored=0,
                extra={"error": "Timeout"}
            )
        finally:
            executor.shutdown(wait=False)

        return BenchmarkResult(
            puzzle=name,
            run_id=run_id,
            seed=seed,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            propagation_passes=stats.propagation_passes,
            forced_cells=stats.forced_cells,
            solution=solution.to_string() if solution is not None else None,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics per puzzle from the results."""
        summary = {
            "runs_per_puzzle": self.runs,
            "puzzles": list(self.puzzles.keys()),
            "results_by_puzzle": {}
        }

        for name in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == name]
            if not puzzle_results:
                continue
            solved = [r for r in puzzle_results if r.solved]
            times = [r.time_seconds for r in puzzle_results]
            memory = [r.memory_bytes for r in puzzle_results]
            nodes = [r.nodes_explored for r in puzzle_results]

            summary["results_by_puzzle"][name] = {
                "accuracy": len(solved) / len(puzzle_results) * 100,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                "avg_nodes_explored": sum(nodes) / len(nodes),
                "distinct_solutions": len({r.solution for r in solved}),
                "total_solved": len(solved),
                "total_tested": len(puzzle_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw results, the summary and the puzzles to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_file = os.path.join(output_dir, "puzzles.json")
        with open(puzzles_file, "w") as f:
            json.dump({name: grid.to_list() for name, grid in self.puzzles.items()}, f, indent=2)

        log.info("Results saved to %s", output_dir)
