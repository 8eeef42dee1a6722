"""Benchmark for puzzle generation across difficulty levels."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import random
import os

from tqdm import tqdm

from ..config import SudokuConfig, DEFAULT_CONFIG
from ..generator import SudokuGenerator, Difficulty, GenerationResult


@dataclass
class BenchmarkResult:
    """Results from a single generation run."""
    run_id: int
    difficulty: str
    generated: bool
    time_seconds: float
    memory_bytes: int
    attempts: int
    backtracks: int
    blanks: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run_id": self.run_id,
            "difficulty": self.difficulty,
            "generated": self.generated,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "attempts": self.attempts,
            "backtracks": self.backtracks,
            "blanks": self.blanks,
            **self.extra
        }


class GenerationBenchmark:
    """
    Times puzzle generation for each difficulty.

    Each run is executed in a worker thread and recorded as a timeout if
    no result arrives within ``timeout_seconds``.
    """

    def __init__(
        self,
        runs_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        seed: Optional[int] = None,
        config: Optional[SudokuConfig] = None,
        timeout_seconds: float = 60.0,
        track_memory: bool = True,
    ):
        """
        Initialize the benchmark.

        Args:
            runs_per_difficulty: Puzzles generated per difficulty.
            difficulties: Difficulties to test (default: all).
            seed: Random seed for reproducibility.
            config: Difficulty table and attempt bound.
            timeout_seconds: Seconds to wait for each run before recording
                a timeout. The abandoned worker is not waited for.
            track_memory: Record peak memory of each run.
        """
        self.runs_per_difficulty = runs_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.config = config or DEFAULT_CONFIG
        self.timeout_seconds = timeout_seconds
        self.track_memory = track_memory
        # Hands out one seed per run; workers never share a random source.
        self._seeds = random.Random(seed)
        self.results: List[BenchmarkResult] = []
        self.puzzles: Dict[str, List[GenerationResult]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.puzzles = {d.value: [] for d in self.difficulties}

        total = len(self.difficulties) * self.runs_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        run_id = 0
        for difficulty in self.difficulties:
            for _ in range(self.runs_per_difficulty):
                self.results.append(self._run_single(run_id, difficulty))
                run_id += 1
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, run_id: int, difficulty: Difficulty) -> BenchmarkResult:
        """Generate one puzzle and record its stats."""
        generator = SudokuGenerator(
            seed=self._seeds.getrandbits(32),
            config=self.config,
            track_memory=self.track_memory,
        )
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(generator.generate, difficulty)
        try:
            result = future.result(timeout=self.timeout_seconds)
        except TimeoutError:
            # Return now; the worker thread finishes on its own.
            executor.shutdown(wait=False, cancel_futures=True)
            print(f"Warning: {difficulty.value} run {run_id} timed out")
            return BenchmarkResult(
                run_id=run_id,
                difficulty=difficulty.value,
                generated=False,
                time_seconds=self.timeout_seconds,
                memory_bytes=0,
                attempts=0,
                backtracks=0,
                blanks=0,
                extra={"error": "Timeout"}
            )
        executor.shutdown()

        self.puzzles[difficulty.value].append(result)
        stats = result.stats
        extra = {}
        if not result.ok:
            print(f"Warning: {difficulty.value} run {run_id} failed: {result.error.message}")
            extra["error"] = result.error.reason

        return BenchmarkResult(
            run_id=run_id,
            difficulty=difficulty.value,
            generated=result.ok,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            attempts=stats.iterations,
            backtracks=stats.backtracks,
            blanks=result.puzzle.count_empty() if result.ok else 0,
            extra=extra
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_runs": len(self.results),
            "difficulties": [d.value for d in self.difficulties],
            "max_attempts": self.config.max_attempts,
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                continue

            generated = [r for r in diff_results if r.generated]
            times = [r.time_seconds for r in diff_results]
            attempts = [r.attempts for r in diff_results]

            summary["results_by_difficulty"][difficulty.value] = {
                "success_rate": len(generated) / len(diff_results) * 100,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_attempts": sum(attempts) / len(attempts),
                "avg_blanks": (
                    sum(r.blanks for r in generated) / len(generated) if generated else 0.0
                ),
                "removal_range": list(self.config.removal_range(difficulty)),
                "generated": len(generated),
                "runs": len(diff_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for difficulty, results in self.puzzles.items():
            diff_dir = os.path.join(puzzles_dir, difficulty)
            SudokuGenerator.save_to_folder(results, diff_dir, prefix=f"puzzle_{difficulty}")

        print(f"Results and puzzles saved to {output_dir}")
