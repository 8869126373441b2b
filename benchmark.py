import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable

import numpy as np

import constants
from concurrency import quickhull_parallel
from geometry import Point
from quickhull import quickhull

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    n: int
    best: float
    mean: float
    edges: int

    @property
    def points_per_sec(self) -> float:
        return self.n / self.best if self.best > 0 else float('inf')


def uniform_box(n: int, seed: int | None = None,
                low: float = constants.BOX_LOW, high: float = constants.BOX_HIGH) -> list[Point]:
    """
    n points uniformly distributed in the square [low, high)^2.
    The same seed always gives the same points.
    """
    rng = np.random.RandomState(seed)
    xy = rng.uniform(low, high, size=(n, 2))
    return [Point(float(x), float(y)) for x, y in xy]


def time_hull(hull_func: Callable, points: list[Point], repeat: int) -> tuple[list[float], int]:
    times = []
    edges = []
    for _ in range(repeat):
        start = time.perf_counter()
        edges = hull_func(points)
        times.append(time.perf_counter() - start)
    return times, len(edges)


def run_benchmark(sizes: Iterable[int] = constants.BENCHMARK_SIZES,
                  repeat: int = constants.BENCHMARK_REPEAT,
                  parallel: bool = False) -> list[BenchmarkResult]:
    if repeat < 1:
        raise ValueError(f"repeat must be positive, got {repeat}")
    hull_func = quickhull_parallel if parallel else quickhull

    results = []
    for n in sizes:
        points = uniform_box(n, seed=n)
        times, n_edges = time_hull(hull_func, points, repeat)
        result = BenchmarkResult(n=n, best=min(times), mean=float(np.mean(times)), edges=n_edges)
        logger.info("uniform_box %d: best %.6fs, mean %.6fs, %d edges", n, result.best, result.mean, n_edges)
        results.append(result)
    return results
