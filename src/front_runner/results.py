"""Result types for non-dominated sorting.

- Front: immutable snapshot of one Pareto front (rank + member indices)
- fronts_to_ranks: flatten a list of fronts into a per-solution rank vector

A Front owns only its rank and its index tuple. It holds no reference to the
sorter's internal counters, so it stays valid after the sort moves on.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Front:
    """One Pareto front.

    Attributes:
        rank: 0-based front number. Rank 0 holds the non-dominated solutions.
        indices: Positions of the front's members in the original input
            sequence, in the order the sorter discovered them.

    Example:
        >>> front = Front(rank=1, indices=[0, 1])
        >>> front.indices
        (0, 1)
        >>> len(front), 1 in front
        (2, True)
    """

    rank: int
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate rank and normalize indices to a tuple of Python ints.

        Raises:
            TypeError: If rank is not an integer.
            ValueError: If rank or any index is negative, or indices repeat.
        """
        if not isinstance(self.rank, (int, np.integer)) or isinstance(self.rank, bool):
            raise TypeError(f"rank must be an integer, got {type(self.rank).__name__}")
        if self.rank < 0:
            raise ValueError(f"rank must be non-negative, got {self.rank}")

        indices = tuple(int(i) for i in self.indices)
        if any(i < 0 for i in indices):
            raise ValueError(f"indices must be non-negative, got {indices}")
        if len(set(indices)) != len(indices):
            raise ValueError(f"indices must be unique, got {indices}")

        object.__setattr__(self, "rank", int(self.rank))
        object.__setattr__(self, "indices", indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def select(self, solutions: Sequence) -> list:
        """Return the members of this front taken from ``solutions``."""
        return [solutions[i] for i in self.indices]


def fronts_to_ranks(fronts: Iterable[Front], n: int) -> np.ndarray:
    """Convert fronts into a rank vector.

    Args:
        fronts: Fronts covering every index in ``range(n)`` exactly once.
        n: Number of solutions.

    Returns:
        Integer array of shape (n,) where rank[i] is the rank of the front
        containing solution i.

    Raises:
        ValueError: If an index is out of range, appears twice, or is missing.

    Examples:
        >>> fronts_to_ranks([Front(0, (2, 4)), Front(1, (0, 1)), Front(2, (3,))], 5)
        array([1, 1, 0, 2, 0])
    """
    ranks = np.full(n, -1, dtype=np.int64)

    for front in fronts:
        for i in front.indices:
            if i >= n:
                raise ValueError(f"index {i} is out of range for {n} solutions")
            if ranks[i] != -1:
                raise ValueError(f"index {i} appears in more than one front")
            ranks[i] = front.rank

    missing = np.flatnonzero(ranks < 0)
    if missing.size:
        raise ValueError(f"indices {missing.tolist()} are not assigned to any front")

    return ranks
