"""Dominance orderings and adapters.

This module provides ready-made dominance orderings and helpers around the
``DominanceOrd`` protocol:

- from_dominates: build an ordering from a boolean ``dominates(a, b)`` predicate
- dominates: boolean view of an ordering
- ParetoDominance: Pareto dominance on objective vectors
- ConstrainedDominance: feasibility-first dominance on (objectives, violation) pairs
- check_dominance: debug-only O(n^3) consistency check of an ordering
"""

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from front_runner.protocols import Dominance, DominanceOrd


class DominanceError(ValueError):
    """Raised when a dominance ordering violates the strict partial order contract."""


def from_dominates(predicate: Callable[[Any, Any], bool]) -> DominanceOrd:
    """Turn a boolean dominance predicate into a dominance ordering.

    Args:
        predicate: Callable returning True iff its first argument dominates
            its second argument.

    Returns:
        A ``DominanceOrd`` that asks ``predicate(a, b)`` first and
        ``predicate(b, a)`` only if needed.

    Examples:
        >>> ordering = from_dominates(lambda a, b: a < b)
        >>> ordering(1, 2)
        <Dominance.LESS: -1>
        >>> ordering(2, 2)
        <Dominance.EQUAL: 0>
    """

    def ordering(a: Any, b: Any) -> Dominance:
        if predicate(a, b):
            return Dominance.LESS
        if predicate(b, a):
            return Dominance.GREATER
        return Dominance.EQUAL

    return ordering


def dominates(ordering: DominanceOrd, a: Any, b: Any) -> bool:
    """Return True if ``a`` dominates ``b`` under ``ordering``."""
    return ordering(a, b) == Dominance.LESS


def _sense(maximize: bool | Sequence[bool] | None) -> np.ndarray | bool:
    if maximize is None:
        return False
    if isinstance(maximize, (bool, np.bool_)):
        return bool(maximize)
    return np.asarray(maximize, dtype=bool)


class ParetoDominance:
    """Pareto dominance on objective vectors.

    Solution ``a`` dominates ``b`` iff it is no worse on every objective and
    strictly better on at least one. All objectives are minimized unless
    ``maximize`` says otherwise.

    Instances are plain picklable objects, so they can be shipped to worker
    processes when the pairwise sweep runs in parallel.

    Args:
        maximize: None (minimize everything), a bool applied to every
            objective, or a per-objective boolean mask.

    Examples:
        >>> pareto = ParetoDominance()
        >>> pareto((1, 2), (1, 3))
        <Dominance.LESS: -1>
        >>> pareto((1, 3), (3, 1))
        <Dominance.EQUAL: 0>
        >>> ParetoDominance(maximize=True)((1, 2), (1, 3))
        <Dominance.GREATER: 1>
    """

    def __init__(self, maximize: bool | Sequence[bool] | None = None) -> None:
        self.maximize = _sense(maximize)

    def _oriented(self, values: Any) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        return np.where(self.maximize, -arr, arr)

    def __call__(self, a: Any, b: Any) -> Dominance:
        fa = self._oriented(a)
        fb = self._oriented(b)
        if fa.shape != fb.shape:
            raise ValueError(f"Objective vectors must have the same shape, got {fa.shape} and {fb.shape}")

        a_better = bool(np.any(fa < fb))
        b_better = bool(np.any(fb < fa))
        if a_better and not b_better:
            return Dominance.LESS
        if b_better and not a_better:
            return Dominance.GREATER
        return Dominance.EQUAL

    def __repr__(self) -> str:
        return f"ParetoDominance(maximize={self.maximize!r})"


class ConstrainedDominance:
    """Feasibility-first (constrained) dominance.

    Solutions are ``(objectives, violation)`` pairs where ``violation`` is the
    aggregate constraint violation (0 or less means feasible). Then:

    1. A feasible solution dominates an infeasible one.
    2. Between two infeasible solutions, the smaller violation dominates;
       equal violations are incomparable.
    3. Between two feasible solutions, Pareto dominance decides.

    Args:
        maximize: Objective sense, forwarded to ``ParetoDominance``.
        tolerance: Violations ``<= tolerance`` count as feasible.

    Examples:
        >>> constrained = ConstrainedDominance()
        >>> constrained(((5.0, 5.0), 0.0), ((1.0, 1.0), 0.3))
        <Dominance.LESS: -1>
        >>> constrained(((1.0, 1.0), 0.5), ((1.0, 1.0), 0.3))
        <Dominance.GREATER: 1>
    """

    def __init__(self, maximize: bool | Sequence[bool] | None = None, tolerance: float = 0.0) -> None:
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        self.pareto = ParetoDominance(maximize)
        self.tolerance = float(tolerance)

    def __call__(self, a: Any, b: Any) -> Dominance:
        objectives_a, violation_a = a
        objectives_b, violation_b = b
        cv_a = max(float(violation_a) - self.tolerance, 0.0)
        cv_b = max(float(violation_b) - self.tolerance, 0.0)

        if cv_a == 0.0 and cv_b == 0.0:
            return self.pareto(objectives_a, objectives_b)
        if cv_a < cv_b:
            return Dominance.LESS
        if cv_b < cv_a:
            return Dominance.GREATER
        return Dominance.EQUAL

    def __repr__(self) -> str:
        return f"ConstrainedDominance(maximize={self.pareto.maximize!r}, tolerance={self.tolerance})"


def check_dominance(solutions: Sequence[Any], ordering: DominanceOrd) -> None:
    """Verify that ``ordering`` is a strict partial order on ``solutions``.

    This is a debugging aid with O(n^3) cost. The sorter never calls it and
    never repairs an inconsistent ordering; it only assumes consistency.

    Checks, over all index pairs and triples:
      - irreflexivity: ordering(s, s) is EQUAL
      - antisymmetry: ordering(a, b) is the reverse of ordering(b, a)
      - transitivity: a dominates b and b dominates c implies a dominates c

    Args:
        solutions: Indexable sequence of solutions.
        ordering: Dominance ordering under test.

    Raises:
        DominanceError: On the first violation found. The message names the
            offending indices.
    """
    n = len(solutions)
    table = np.zeros((n, n), dtype=bool)

    for i in range(n):
        if ordering(solutions[i], solutions[i]) != Dominance.EQUAL:
            raise DominanceError(f"Ordering is not irreflexive: solution {i} dominates itself")
        for j in range(n):
            if i == j:
                continue
            result = ordering(solutions[i], solutions[j])
            mirrored = ordering(solutions[j], solutions[i])
            if result != Dominance(mirrored).reverse():
                raise DominanceError(
                    f"Ordering is not antisymmetric for solutions {i} and {j}: "
                    f"got {Dominance(result).name} and {Dominance(mirrored).name}"
                )
            table[i, j] = result == Dominance.LESS

    for i in range(n):
        for j in np.flatnonzero(table[i]):
            missing = table[j] & ~table[i]
            if np.any(missing):
                k = int(np.flatnonzero(missing)[0])
                raise DominanceError(
                    f"Ordering is not transitive: {i} dominates {int(j)} and {int(j)} dominates {k}, "
                    f"but {i} does not dominate {k}"
                )
