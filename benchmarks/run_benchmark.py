"""Benchmark runner comparing front-runner with Pymoo's non-dominated sorting.

Times the construction + full front peeling on layered inputs with a known
front structure and on random objective arrays, and checks that both
libraries agree on the fronts.

Usage:
    uv run python benchmarks/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.util.nds.non_dominated_sorting import NonDominatedSorting

from benchmarks.problems import LAYERED_CASES, RANDOM_CASES, layered_solutions, random_objectives

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


N_RUNS = 5
SEEDS = list(range(N_RUNS))


def run_front_runner(objectives: np.ndarray) -> tuple[list[list[int]], float]:
    """Sort rows of ``objectives`` with front-runner's Pareto ordering.

    Returns:
        Tuple of (fronts as sorted index lists, elapsed_time_seconds).
    """
    from front_runner import ParetoDominance, pareto_fronts

    rows = [tuple(row) for row in objectives.tolist()]
    start_time = time.perf_counter()
    fronts = pareto_fronts(rows, ParetoDominance())
    elapsed = time.perf_counter() - start_time
    return [sorted(f.indices) for f in fronts], elapsed


def run_front_runner_matrix(objectives: np.ndarray) -> tuple[list[list[int]], float]:
    """Sort rows of ``objectives`` through the vectorized dominance matrix."""
    from front_runner import objective_fronts

    start_time = time.perf_counter()
    fronts = objective_fronts(objectives)
    elapsed = time.perf_counter() - start_time
    return [sorted(f.indices) for f in fronts], elapsed


def run_pymoo(objectives: np.ndarray) -> tuple[list[list[int]], float]:
    """Sort rows of ``objectives`` with Pymoo's fast non-dominated sort."""
    sorter = NonDominatedSorting(method="fast_non_dominated_sort")
    start_time = time.perf_counter()
    fronts = sorter.do(objectives)
    elapsed = time.perf_counter() - start_time
    return [sorted(int(i) for i in f) for f in fronts], elapsed


RUNNERS = [
    ("front-runner", run_front_runner),
    ("front-runner-matrix", run_front_runner_matrix),
    ("pymoo", run_pymoo),
]


def build_cases(seed: int) -> dict[str, tuple[np.ndarray, list[list[int]] | None]]:
    """Build all benchmark inputs for one seed, with expected fronts when known."""
    cases: dict[str, tuple[np.ndarray, list[list[int]] | None]] = {}
    for name, (n, n_fronts) in LAYERED_CASES.items():
        solutions, expected = layered_solutions(n, n_fronts)
        cases[name] = (np.array(solutions, dtype=np.float64), expected)
    for name, (n, n_obj) in RANDOM_CASES.items():
        cases[name] = (random_objectives(n, n_obj, seed), None)
    return cases


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.

    Raises:
        AssertionError: If a library disagrees with the expected fronts.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "layered_cases": LAYERED_CASES,
            "random_cases": RANDOM_CASES,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    results = []
    total_runs = len(SEEDS) * (len(LAYERED_CASES) + len(RANDOM_CASES)) * len(RUNNERS)
    current_run = 0

    for seed in SEEDS:
        for case_name, (objectives, expected) in build_cases(seed).items():
            reference = expected
            for library_name, runner in RUNNERS:
                current_run += 1
                logger.info(f"Running [{current_run}/{total_runs}]: {library_name} on {case_name} (seed={seed})")

                fronts, elapsed = runner(objectives)
                if reference is None:
                    reference = fronts
                elif fronts != reference:
                    raise AssertionError(f"{library_name} disagrees on fronts for {case_name} (seed={seed})")

                results.append(
                    {
                        "library": library_name,
                        "case": case_name,
                        "seed": seed,
                        "n_fronts": len(fronts),
                        "time_seconds": elapsed,
                    }
                )
                logger.info(f"  Fronts: {len(fronts)}, Time: {elapsed:.4f}s")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print mean timings per case and library."""
    time_data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        time_data[r["case"]][r["library"]].append(r["time_seconds"])

    libraries = [name for name, _ in RUNNERS]

    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY (mean seconds per run)")
    print("=" * 80)

    header = f"{'Case':<18}"
    for lib in libraries:
        header += f"{lib:>22}"
    print(header)
    print("-" * 84)

    for case in sorted(time_data):
        row = f"{case:<18}"
        for lib in libraries:
            times = time_data[case][lib]
            row += f"{np.mean(times):>22.4f}" if times else f"{'N/A':>22}"
        print(row)

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting non-dominated sorting benchmark suite")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
