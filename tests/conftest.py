"""Shared test fixtures for front-runner tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- tuple_ordering: Pareto dominance on 2-tuples written out by hand
- worked_solutions: Small input with three known fronts
- layered: Factory for inputs with a known multi-front structure
- assert_valid_partition: Checks the structural properties of a sort result
"""

from collections.abc import Callable

import numpy as np
import pytest

from front_runner import Dominance, Front


def tuple_dominance(a: tuple[int, int], b: tuple[int, int]) -> Dominance:
    """Pareto dominance on 2-tuples, lower is better."""
    if (a[0] < b[0] and a[1] <= b[1]) or (a[0] <= b[0] and a[1] < b[1]):
        return Dominance.LESS
    if (a[0] > b[0] and a[1] >= b[1]) or (a[0] >= b[0] and a[1] > b[1]):
        return Dominance.GREATER
    return Dominance.EQUAL


def create_solutions_with_n_fronts(n: int, n_fronts: int) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Create ``n_fronts`` groups of ``n`` solutions; group g is front g.

    Point i of group g is (g + i, g + n - i): points of one group trade off,
    point i of group g dominates point i of group g + 1.
    """
    solutions = []
    expected_fronts = []
    for front in range(n_fronts):
        expected_fronts.append(list(range(front * n, (front + 1) * n)))
        for i in range(n):
            solutions.append((front + i, front + n - i))
    return solutions, expected_fronts


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tuple_ordering() -> Callable[[tuple[int, int], tuple[int, int]], Dominance]:
    """Hand-written Pareto dominance on 2-tuples (minimization)."""
    return tuple_dominance


@pytest.fixture
def worked_solutions() -> list[tuple[int, int]]:
    """Five 2-tuples with a known front structure.

    Layout (minimization):
        (0,2) dominates (1,2), (1,2) and (1,3)
        (1,2) dominates (1,3)
        (2,1) trades off against everything

    Resulting fronts:
        Front 0: indices 2, 4
        Front 1: indices 0, 1
        Front 2: index 3
    """
    return [(1, 2), (1, 2), (2, 1), (1, 3), (0, 2)]


@pytest.fixture
def layered() -> Callable[[int, int], tuple[list[tuple[int, int]], list[list[int]]]]:
    """Factory for synthetic inputs with ``n_fronts`` fronts of ``n`` solutions."""
    return create_solutions_with_n_fronts


@pytest.fixture
def assert_valid_partition() -> Callable[[list[Front], list, Callable], None]:
    """Return a checker for partition, rank and incomparability properties."""

    def check(fronts: list[Front], solutions: list, ordering: Callable) -> None:
        all_indices = [i for front in fronts for i in front.indices]
        assert sorted(all_indices) == list(range(len(solutions)))

        assert [front.rank for front in fronts] == list(range(len(fronts)))
        assert all(len(front) > 0 for front in fronts)

        for front in fronts:
            for i in front.indices:
                for j in front.indices:
                    if i != j:
                        assert ordering(solutions[i], solutions[j]) == Dominance.EQUAL

        for earlier in range(len(fronts)):
            for later in range(earlier + 1, len(fronts)):
                for i in fronts[earlier].indices:
                    for j in fronts[later].indices:
                        assert ordering(solutions[j], solutions[i]) != Dominance.LESS

        # Every member of a later front is dominated by some member of the front before it
        for previous, front in zip(fronts, fronts[1:]):
            for j in front.indices:
                assert any(ordering(solutions[i], solutions[j]) == Dominance.LESS for i in previous.indices)

    return check
