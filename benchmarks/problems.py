"""Synthetic inputs for non-dominated sorting benchmarks.

Two families:
- layered: ``n_fronts`` groups of ``n`` bi-objective points with a known
  front structure (group g is exactly front g)
- random: uniformly random objective vectors, the typical shape of an
  evolutionary algorithm's combined parent+offspring population
"""

import numpy as np


def layered_solutions(n: int, n_fronts: int) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Create ``n_fronts`` fronts of ``n`` points each.

    Point i of group g is (g + i, g + n - i). Points of one group trade off
    against each other, and point i of group g dominates point i of group
    g + 1, so group g is exactly front g.

    Returns:
        Tuple of (solutions, expected_fronts) where expected_fronts[g] holds
        the indices of group g in ascending order.
    """
    solutions = []
    expected_fronts = []
    for front in range(n_fronts):
        expected_fronts.append(list(range(front * n, (front + 1) * n)))
        for i in range(n):
            solutions.append((front + i, front + n - i))
    return solutions, expected_fronts


def random_objectives(n: int, n_obj: int, seed: int) -> np.ndarray:
    """Uniform random objective vectors in [0, 1). Shape (n, n_obj)."""
    return np.random.default_rng(seed).uniform(0.0, 1.0, size=(n, n_obj))


# name -> (n, n_fronts) for the layered family
LAYERED_CASES: dict[str, tuple[int, int]] = {
    "layered_100x10": (100, 10),
    "layered_1000x10": (1_000, 10),
    "layered_10x100": (10, 100),
}

# name -> (n, n_obj) for the random family
RANDOM_CASES: dict[str, tuple[int, int]] = {
    "random_200x2": (200, 2),
    "random_200x3": (200, 3),
    "random_1000x3": (1_000, 3),
}
