"""Benchmark module for puzzle generation."""

from .benchmark import GenerationBenchmark, BenchmarkResult
from .visualizer import Visualizer

__all__ = ["GenerationBenchmark", "BenchmarkResult", "Visualizer"]
