"""Numpy helpers for sorting objective arrays.

Shortcuts for the common case where solutions are rows of an (n, n_obj)
objective array under Pareto minimization:

- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- MatrixDominance: dominance ordering backed by a precomputed matrix
- non_dominated_ranks: per-row front rank of an objective array
- objective_fronts: fronts of an objective array, optionally stopping early
"""

import numpy as np

from front_runner.index import DEFAULT_INDEX_DTYPE
from front_runner.protocols import Dominance
from front_runner.results import Front, fronts_to_ranks
from front_runner.sort import NonDominatedSort


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a is no worse than b everywhere and strictly better somewhere.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([1.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise Pareto dominance for all rows (vectorized).

    Memory is O(n^2 * n_obj) for the broadcast comparison.

    Args:
        objectives: Objective values. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] is True iff row i
        dominates row j.

    Raises:
        ValueError: If objectives is not 2D.
    """
    objectives = np.asarray(objectives)
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    rows = objectives[:, np.newaxis, :]
    cols = objectives[np.newaxis, :, :]
    return np.all(rows <= cols, axis=2) & np.any(rows < cols, axis=2)


class MatrixDominance:
    """Dominance ordering over integer positions, read from a dominance matrix.

    Pair it with ``range(n)`` as the solution sequence: the sorter then never
    touches objective values, every comparison is two boolean lookups.

    Args:
        matrix: Boolean array of shape (n, n), matrix[i, j] True iff i
            dominates j.

    Example:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0]])
        >>> ordering = MatrixDominance(dominates_matrix(objs))
        >>> ordering(0, 1)
        <Dominance.LESS: -1>
    """

    def __init__(self, matrix: np.ndarray) -> None:
        matrix = np.asarray(matrix, dtype=bool)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"dominance matrix must be square, got shape {matrix.shape}")
        if np.any(np.diagonal(matrix)):
            raise ValueError("dominance matrix must have an all-False diagonal")
        self.matrix = matrix

    def __len__(self) -> int:
        return self.matrix.shape[0]

    def __call__(self, a: int, b: int) -> Dominance:
        if self.matrix[a, b]:
            return Dominance.LESS
        if self.matrix[b, a]:
            return Dominance.GREATER
        return Dominance.EQUAL


def _sort_objectives(objectives: np.ndarray, index_dtype) -> NonDominatedSort:
    ordering = MatrixDominance(dominates_matrix(objectives))
    return NonDominatedSort(range(len(ordering)), ordering, index_dtype=index_dtype)


def non_dominated_ranks(objectives: np.ndarray, *, index_dtype=DEFAULT_INDEX_DTYPE) -> np.ndarray:
    """Assign each row of an objective array to a Pareto front.

    Args:
        objectives: Objective values for all solutions. Shape (n, n_obj).
        index_dtype: Integer dtype for the sorter's adjacency lists.

    Returns:
        Integer array of shape (n,) where rank[i] is the front index of row i.
        Rank 0 = non-dominated.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
        >>> non_dominated_ranks(objs)
        array([0, 1, 2])
    """
    objectives = np.asarray(objectives)
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")
    if objectives.shape[0] == 0:
        return np.array([], dtype=np.int64)

    return fronts_to_ranks(_sort_objectives(objectives, index_dtype), objectives.shape[0])


def objective_fronts(
    objectives: np.ndarray,
    *,
    min_solutions: int | None = None,
    index_dtype=DEFAULT_INDEX_DTYPE,
) -> list[Front]:
    """Return the Pareto fronts of an objective array.

    Args:
        objectives: Objective values. Shape (n, n_obj).
        min_solutions: If given, stop after the first fronts covering at
            least this many rows (whole fronts only).
        index_dtype: Integer dtype for the sorter's adjacency lists.

    Returns:
        Fronts in rank order; indices are row numbers.
    """
    sorter = _sort_objectives(objectives, index_dtype)
    if min_solutions is None:
        return sorter.pareto_fronts()
    return sorter.pareto_fronts_stop_at(min_solutions)
