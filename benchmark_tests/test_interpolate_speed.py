"""
Benchmark tests for cardinal spline interpolation.

Compares building the Hermite basis per call against reusing one basis
across calls. Run with ``pytest benchmark_tests -s``.
"""
import numpy as np
import time
from typing import Callable, Tuple
from curvecalc import interpolate, CardinalSpline, HermiteBasis


def benchmark(
    fn: Callable[[np.ndarray], np.ndarray],
    points: np.ndarray,
    num_runs: int = 20,
) -> Tuple[float, np.ndarray]:
    """
    Time ``fn(points)``.

    Args:
        fn: Interpolation callable
        points: Flat control point array
        num_runs: Number of runs to average

    Returns:
        Tuple of (average_time_seconds, last_result)
    """
    times = []
    result = None

    for _ in range(num_runs):
        start_time = time.time()
        result = fn(points)
        times.append(time.time() - start_time)

    return float(np.mean(times)), result


def random_walk(n_points: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return np.cumsum(rng.normal(size=2 * n_points))


def test_basis_reuse_matches_fresh_basis():
    points = random_walk(2000)
    segments = 32

    fresh_time, fresh = benchmark(lambda p: interpolate(p, 0.5, segments), points)
    basis = HermiteBasis(segments)
    reused_time, reused = benchmark(lambda p: interpolate(p, 0.5, segments, basis=basis), points)
    spline_time, spline_result = benchmark(CardinalSpline(0.5, segments), points)

    print(f"\n{'Method':<20} {'Time (ms)':>12}")
    print("-" * 34)
    print(f"{'fresh basis':<20} {fresh_time * 1000:>12.3f}")
    print(f"{'shared basis':<20} {reused_time * 1000:>12.3f}")
    print(f"{'CardinalSpline':<20} {spline_time * 1000:>12.3f}")

    assert fresh.tobytes() == reused.tobytes() == spline_result.tobytes()


def test_scaling_with_resolution():
    points = random_walk(500)
    print(f"\n{'Segments':>10} {'Samples':>10} {'Time (ms)':>12}")
    for segments in (4, 16, 64, 256):
        elapsed, result = benchmark(lambda p: interpolate(p, 0.5, segments, closed=True), points)
        print(f"{segments:>10} {result.size // 2:>10} {elapsed * 1000:>12.3f}")
        assert result.size == 2 * 500 * segments + 2
