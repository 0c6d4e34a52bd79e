"""Non-dominated sorting by front peeling.

This module implements the sorting engine:

- non_dominated_sort: build the dominance graph and return the rank-0 cursor
- FrontCursor: one front plus the engine state needed to reach the next one
- NonDominatedSort: iterator over all fronts, with batch and early-stop helpers
- pareto_fronts / pareto_fronts_stop_at: functional wrappers

Construction compares every unordered pair (i, j), i < j, exactly once and
records who dominates whom in per-solution adjacency lists together with a
domination count per solution. Fronts are then peeled off one at a time: the
members of the current front decrement the counts of the solutions they
dominate, and every solution whose count drops to zero joins the next front.
Each adjacency entry is consumed exactly once, so the total cost is the
n * (n - 1) / 2 comparisons of the sweep plus one decrement per dominance
edge, independent of the number of fronts.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np
from joblib import Parallel, delayed, effective_n_jobs

from front_runner.index import DEFAULT_INDEX_DTYPE, check_index_capacity
from front_runner.protocols import Dominance, DominanceOrd
from front_runner.results import Front

logger = logging.getLogger(__name__)

# (solutions i dominates with j > i, solutions dominating i with j > i)
RowComparison = tuple[list[int], list[int]]


class CursorConsumedError(RuntimeError):
    """Raised when advancing a cursor whose state was already handed on."""


def _compare_rows(solutions: Sequence[Any], ordering: DominanceOrd, start: int, stop: int) -> list[RowComparison]:
    """Compare rows ``start:stop`` of the upper pair triangle."""
    n = len(solutions)
    rows: list[RowComparison] = []
    for i in range(start, stop):
        p = solutions[i]
        less: list[int] = []
        greater: list[int] = []
        for j in range(i + 1, n):
            result = ordering(p, solutions[j])
            if result == Dominance.LESS:
                less.append(j)
            elif result == Dominance.GREATER:
                greater.append(j)
        rows.append((less, greater))
    return rows


def _row_chunks(n: int, n_chunks: int) -> list[tuple[int, int]]:
    """Split rows 0..n into contiguous chunks holding roughly equal pair counts.

    Row i holds n - 1 - i pairs, so equal work boundaries follow
    n * (1 - sqrt(1 - k / n_chunks)).
    """
    k = np.arange(n_chunks + 1) / n_chunks
    bounds = np.unique(np.round(n * (1.0 - np.sqrt(1.0 - k))).astype(np.intp))
    return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]


class _DominanceGraph:
    """Mutable engine state: adjacency lists and domination counts.

    Owned by exactly one live ``FrontCursor`` at a time.
    """

    __slots__ = ("solutions", "dominated", "count", "index_dtype")

    def __init__(self, solutions: Sequence[Any], dominated: list[np.ndarray], count: np.ndarray, index_dtype: np.dtype) -> None:
        self.solutions = solutions
        self.dominated = dominated
        self.count = count
        self.index_dtype = index_dtype

    @classmethod
    def build(cls, solutions: Sequence[Any], ordering: DominanceOrd, index_dtype: np.dtype, n_workers: int | None) -> "_DominanceGraph":
        n = len(solutions)

        if n_workers is None or n_workers == 1 or n < 2:
            rows = _compare_rows(solutions, ordering, 0, n)
        else:
            n_jobs = effective_n_jobs(n_workers)
            chunks = _row_chunks(n, min(n, 4 * n_jobs))
            logger.debug("Comparing %d solutions in %d chunks on %d workers", n, len(chunks), n_jobs)
            results = Parallel(n_jobs=n_workers)(
                delayed(_compare_rows)(solutions, ordering, start, stop) for start, stop in chunks
            )
            rows = [row for chunk in results for row in chunk]

        # Merging rows in index order leaves every adjacency list ascending,
        # identical to a single sequential sweep.
        dominated: list[list[int]] = [[] for _ in range(n)]
        count = [0] * n
        for i, (less, greater) in enumerate(rows):
            dominated[i].extend(less)
            for j in less:
                count[j] += 1
            for j in greater:
                dominated[j].append(i)
            count[i] += len(greater)

        edges = sum(len(d) for d in dominated)
        logger.debug("Compared %d pairs of %d solutions, found %d dominance edges", n * (n - 1) // 2, n, edges)

        return cls(
            solutions=solutions,
            dominated=[np.asarray(d, dtype=index_dtype) for d in dominated],
            count=np.asarray(count, dtype=np.intp),
            index_dtype=index_dtype,
        )

    def initial_front(self) -> tuple[int, ...]:
        return tuple(np.flatnonzero(self.count == 0).tolist())

    def peel(self, front: tuple[int, ...]) -> tuple[int, ...]:
        """Remove ``front`` from the graph and return the next front.

        Members of the next front are ordered by the moment their count
        reaches zero while walking ``front`` and each member's adjacency list
        in stored order.
        """
        if not front:
            return ()

        targets = np.concatenate([self.dominated[p] for p in front]).astype(np.intp, copy=False)
        for p in front:
            self.dominated[p] = self.dominated[p][:0]
        if targets.size == 0:
            return ()

        np.subtract.at(self.count, targets, 1)

        # A solution is released by the last decrement it receives.
        unique, first_from_end = np.unique(targets[::-1], return_index=True)
        released = self.count[unique] == 0
        last_hit = targets.size - 1 - first_from_end[released]
        return tuple(unique[released][np.argsort(last_hit, kind="stable")].tolist())


class FrontCursor:
    """A Pareto front together with the state needed to compute the next one.

    Cursors form a linear chain. ``advance()`` hands the engine state over to
    the new cursor and invalidates this one; a second ``advance()`` on the
    same cursor raises ``CursorConsumedError``. The front itself (``rank``,
    ``indices``, ``front``) stays readable after advancing.

    Example:
        >>> cursor = non_dominated_sort([(1, 2), (2, 1), (2, 2)], ParetoDominance())
        >>> cursor.rank, cursor.indices
        (0, (0, 1))
        >>> nxt = cursor.advance()
        >>> nxt.rank, nxt.indices
        (1, (2,))
        >>> nxt.advance() is None
        True
    """

    __slots__ = ("_front", "_graph")

    def __init__(self, front: Front, graph: _DominanceGraph) -> None:
        self._front = front
        self._graph: _DominanceGraph | None = graph

    @property
    def rank(self) -> int:
        """0-based rank of this front."""
        return self._front.rank

    @property
    def indices(self) -> tuple[int, ...]:
        """Member indices into the original input sequence."""
        return self._front.indices

    @property
    def front(self) -> Front:
        """Immutable snapshot of this front, independent of the engine state."""
        return self._front

    @property
    def is_empty(self) -> bool:
        return len(self._front) == 0

    @property
    def is_consumed(self) -> bool:
        return self._graph is None

    @property
    def solutions(self) -> Sequence[Any]:
        """The caller's input sequence (borrowed, not copied)."""
        if self._graph is None:
            raise CursorConsumedError(f"cursor for front {self.rank} has already been advanced")
        return self._graph.solutions

    def __len__(self) -> int:
        return len(self._front)

    def __repr__(self) -> str:
        state = "consumed" if self._graph is None else "live"
        return f"FrontCursor(rank={self.rank}, indices={self.indices}, {state})"

    def advance(self) -> "FrontCursor | None":
        """Consume this cursor and return the cursor for the next front.

        Returns:
            The next cursor (rank + 1), or None when no solutions are left.

        Raises:
            CursorConsumedError: If this cursor was already advanced.
        """
        graph = self._graph
        if graph is None:
            raise CursorConsumedError(f"cursor for front {self.rank} has already been advanced")
        self._graph = None

        next_indices = graph.peel(self.indices)
        if not next_indices:
            return None
        return FrontCursor(Front(rank=self.rank + 1, indices=next_indices), graph)


def non_dominated_sort(
    solutions: Sequence[Any],
    ordering: DominanceOrd,
    *,
    index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE,
    n_workers: int | None = None,
) -> FrontCursor:
    """Perform a non-dominated sort and return the cursor on the first front.

    Args:
        solutions: Indexable sequence of solutions. Held by reference; it must
            not be mutated while cursors derived from it are in use.
        ordering: Dominance ordering, called as ``ordering(solutions[i],
            solutions[j])`` for every i < j.
        index_dtype: Integer dtype for the adjacency lists. See
            ``front_runner.index.INDEX_DTYPES``.
        n_workers: Run the pairwise sweep with joblib on this many workers
            (-1 for all cores). None or 1 runs sequentially. The result is
            identical either way; ``ordering`` must be picklable.

    Returns:
        Cursor on the rank-0 front. It is empty only when ``solutions`` is.

    Raises:
        IndexWidthError: If ``index_dtype`` cannot address every solution.

    Examples:
        >>> solutions = [(1, 2), (1, 2), (2, 1), (1, 3), (0, 2)]
        >>> cursor = non_dominated_sort(solutions, ParetoDominance())
        >>> cursor.indices
        (2, 4)
    """
    dtype = check_index_capacity(len(solutions), index_dtype)
    graph = _DominanceGraph.build(solutions, ordering, dtype, n_workers)
    return FrontCursor(Front(rank=0, indices=graph.initial_front()), graph)


def iter_fronts(cursor: FrontCursor | None) -> Iterator[Front]:
    """Yield fronts lazily, advancing ``cursor`` until it is exhausted."""
    while cursor is not None and not cursor.is_empty:
        yield cursor.front
        cursor = cursor.advance()


class NonDominatedSort:
    """Iterator over the Pareto fronts of ``solutions``.

    Each ``next()`` yields the next ``Front``, starting with rank 0. The
    iterator is single-pass: fronts are peeled destructively.

    Args:
        solutions: Indexable sequence of solutions.
        ordering: Dominance ordering.
        index_dtype: Integer dtype for the adjacency lists.
        n_workers: Parallel workers for the pairwise sweep.

    Example:
        >>> solutions = [(1, 2), (1, 2), (2, 1), (1, 3), (0, 2)]
        >>> [f.indices for f in NonDominatedSort(solutions, ParetoDominance())]
        [(2, 4), (0, 1), (3,)]
    """

    def __init__(
        self,
        solutions: Sequence[Any],
        ordering: DominanceOrd,
        *,
        index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE,
        n_workers: int | None = None,
    ) -> None:
        self.n_solutions = len(solutions)
        self._fronts = iter_fronts(
            non_dominated_sort(solutions, ordering, index_dtype=index_dtype, n_workers=n_workers)
        )

    def __iter__(self) -> "NonDominatedSort":
        return self

    def __next__(self) -> Front:
        return next(self._fronts)

    def pareto_fronts(self) -> list[Front]:
        """Return all remaining fronts."""
        return list(self)

    def pareto_fronts_stop_at(self, min_solutions: int) -> list[Front]:
        """Return whole fronts until at least ``min_solutions`` are covered.

        Fronts are never split, so the result may hold more than
        ``min_solutions`` solutions. If fewer solutions exist, every front is
        returned.

        Raises:
            ValueError: If min_solutions is negative.
        """
        if min_solutions < 0:
            raise ValueError(f"min_solutions must be non-negative, got {min_solutions}")

        fronts: list[Front] = []
        found = 0
        while found < min_solutions:
            front = next(self, None)
            if front is None:
                break
            fronts.append(front)
            found += len(front)
        return fronts


def pareto_fronts(
    solutions: Sequence[Any],
    ordering: DominanceOrd,
    *,
    index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE,
    n_workers: int | None = None,
) -> list[Front]:
    """Return every Pareto front of ``solutions`` in rank order."""
    return NonDominatedSort(solutions, ordering, index_dtype=index_dtype, n_workers=n_workers).pareto_fronts()


def pareto_fronts_stop_at(
    solutions: Sequence[Any],
    ordering: DominanceOrd,
    min_solutions: int,
    *,
    index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE,
    n_workers: int | None = None,
) -> list[Front]:
    """Return the leading Pareto fronts covering at least ``min_solutions``.

    Typical use: picking enough survivors for the next generation of an
    evolutionary algorithm without ranking the whole population.
    """
    return NonDominatedSort(
        solutions, ordering, index_dtype=index_dtype, n_workers=n_workers
    ).pareto_fronts_stop_at(min_solutions)
