"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Charts for repeated-run benchmark results, one group per puzzle.
    """

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _puzzles(self) -> List[str]:
        seen = []
        for r in self.results:
            if r.puzzle not in seen:
                seen.append(r.puzzle)
        return seen

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_distinct_solutions(),
            self.plot_nodes_explored(),
        ]

    def plot_time_distribution(self) -> str:
        """Create box plot of solve times per puzzle."""
        fig, ax = plt.subplots(figsize=(10, 6))

        puzzles = self._puzzles()
        data = [[r.time_seconds for r in self.results if r.puzzle == p] for p in puzzles]

        sns.boxplot(data=data, ax=ax)
        ax.set_xticks(range(len(puzzles)))
        ax.set_xticklabels(puzzles)
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time Distribution by Puzzle', fontsize=14, fontweight='bold')

        return self._save("time_distribution.png")

    def plot_distinct_solutions(self) -> str:
        """Create bar chart of distinct solutions surfaced per puzzle."""
        fig, ax = plt.subplots(figsize=(10, 6))

        puzzles = self._puzzles()
        counts = []
        for p in puzzles:
            solutions = {r.solution for r in self.results if r.puzzle == p and r.solved}
            counts.append(len(solutions))

        bars = ax.bar(puzzles, counts, color=sns.color_palette("husl", len(puzzles)),
                      edgecolor='black', linewidth=0.5)

        for bar, count in zip(bars, counts):
            ax.annotate(f'{count}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Distinct solutions', fontsize=12)
        ax.set_title('Distinct Solutions Across Runs', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("distinct_solutions.png")

    def plot_nodes_explored(self) -> str:
        """Create bar chart of average branches tried per puzzle."""
        fig, ax = plt.subplots(figsize=(10, 6))

        puzzles = self._puzzles()
        avg_nodes = [
            np.mean([r.nodes_explored for r in self.results if r.puzzle == p])
            for p in puzzles
        ]

        ax.bar(puzzles, avg_nodes, color=sns.color_palette("husl", len(puzzles)),
               edgecolor='black', linewidth=0.5)
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Average branches tried', fontsize=12)
        ax.set_yscale('symlog')
        ax.set_title('Search Effort by Puzzle', fontsize=14, fontweight='bold')

        return self._save("nodes_explored.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Puzzle | Accuracy | Avg Time | Avg Memory | Avg Branches | Distinct Solutions |",
            "|--------|----------|----------|------------|--------------|--------------------|"
        ]

        for p in self._puzzles():
            puzzle_results = [r for r in self.results if r.puzzle == p]

            solved = [r for r in puzzle_results if r.solved]
            accuracy = (len(solved) / len(puzzle_results)) * 100

            avg_time = np.mean([r.time_seconds for r in puzzle_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in puzzle_results])
            avg_nodes = np.mean([r.nodes_explored for r in puzzle_results])
            distinct = len({r.solution for r in solved})

            lines.append(
                f"| {p} | {accuracy:.1f}% | {avg_time:.4f}s | {avg_memory:.2f} MB | {int(avg_nodes):,} | {distinct} |"
            )

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path
