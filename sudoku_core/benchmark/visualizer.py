"""Charts for generation benchmark results."""

from __future__ import annotations
import os
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult
from ..config import SudokuConfig, DEFAULT_CONFIG
from ..generator import Difficulty


class Visualizer:
    """
    Chart generator for generation benchmark results.

    One colour per difficulty, shared by every chart.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(
        self,
        results: List[BenchmarkResult],
        output_dir: str = "results",
        config: Optional[SudokuConfig] = None,
    ):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
            config: Settings the benchmark ran with, for the range overlay.
        """
        self.results = results
        self.output_dir = output_dir
        self.config = config or DEFAULT_CONFIG
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    @property
    def difficulties(self) -> List[str]:
        """Difficulties present in the results, easiest first."""
        present = {r.difficulty for r in self.results}
        return [d.value for d in Difficulty if d.value in present]

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
            self.plot_time_by_difficulty(),
            self.plot_attempts_distribution(),
            self.plot_blank_histogram(),
        ]

    def plot_time_by_difficulty(self) -> str:
        """Create bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self.difficulties
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == d])
            for d in difficulties
        ]
        colors = [self.COLORS.get(d, "#95a5a6") for d in difficulties]

        bars = ax.bar([d.capitalize() for d in difficulties], avg_times,
                      color=colors, edgecolor='black', linewidth=0.5)

        for bar, time in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_by_difficulty.png")

    def plot_attempts_distribution(self) -> str:
        """Create box plot of backtracking attempts per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self.difficulties
        xs = [r.difficulty for r in self.results]
        ys = [max(r.attempts, 1) for r in self.results]

        sns.boxplot(x=xs, y=ys, order=difficulties, hue=xs, hue_order=difficulties,
                    palette=self.COLORS, legend=False, ax=ax)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Attempts (Log Scale)', fontsize=12)
        ax.set_title('Backtracking Attempts per Generation', fontsize=14, fontweight='bold')

        # Attempt counts can vary by several orders of magnitude
        ax.set_yscale('log')

        return self._save("attempts_distribution.png")

    def plot_blank_histogram(self) -> str:
        """Histogram of blank cells per puzzle, with each configured range shaded."""
        fig, ax = plt.subplots(figsize=(12, 6))

        for diff in self.difficulties:
            blanks = [r.blanks for r in self.results if r.difficulty == diff and r.generated]
            color = self.COLORS.get(diff, "#95a5a6")
            low, high = self.config.removal_range(diff)
            ax.axvspan(low - 0.5, high + 0.5, color=color, alpha=0.1)
            if blanks:
                sns.histplot(blanks, discrete=True, color=color,
                             label=diff.capitalize(), ax=ax)

        ax.set_xlabel('Blank Cells', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Blank Cells per Generated Puzzle', fontsize=14, fontweight='bold')
        ax.legend(title='Difficulty')

        return self._save("blank_histogram.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Benchmark Summary\n",
            "| Difficulty | Success | Avg Time | Avg Memory | Avg Attempts | Avg Blanks |",
            "|------------|---------|----------|------------|--------------|------------|"
        ]

        for diff in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == diff]
            generated = [r for r in diff_results if r.generated]

            success = len(generated) / len(diff_results) * 100
            avg_time = np.mean([r.time_seconds for r in diff_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in diff_results])
            avg_attempts = np.mean([r.attempts for r in diff_results])
            avg_blanks = np.mean([r.blanks for r in generated]) if generated else 0.0

            lines.append(
                f"| {diff.capitalize()} | {success:.1f}% | {avg_time:.4f}s | "
                f"{avg_memory:.2f} MB | {int(avg_attempts):,} | {avg_blanks:.1f} |"
            )

        content = "\n".join(lines) + "\n"

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
