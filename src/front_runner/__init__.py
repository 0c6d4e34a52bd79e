"""front-runner: non-dominated sorting for multi-objective optimization.

Partitions a set of solutions into Pareto fronts F0, F1, ... under any
caller-supplied dominance ordering. The sorter compares every pair once and
then peels fronts off one at a time, so ranking all fronts costs the same
O(n^2) comparisons as finding the first one.

Example (all fronts):
    >>> from front_runner import ParetoDominance, pareto_fronts
    >>> solutions = [(1, 2), (1, 2), (2, 1), (1, 3), (0, 2)]
    >>> [front.indices for front in pareto_fronts(solutions, ParetoDominance())]
    [(2, 4), (0, 1), (3,)]

Example (front by front):
    >>> from front_runner import non_dominated_sort
    >>> cursor = non_dominated_sort(solutions, ParetoDominance())
    >>> while cursor is not None:
    ...     print(cursor.rank, cursor.indices)
    ...     cursor = cursor.advance()
    0 (2, 4)
    1 (0, 1)
    2 (3,)
"""

from front_runner.domination import (
    ConstrainedDominance,
    DominanceError,
    ParetoDominance,
    check_dominance,
    dominates,
    from_dominates,
)
from front_runner.index import INDEX_DTYPES, IndexWidthError, check_index_capacity, max_solutions
from front_runner.primitives import (
    MatrixDominance,
    dominates_matrix,
    non_dominated_ranks,
    objective_fronts,
)
from front_runner.protocols import Dominance, DominanceOrd
from front_runner.registry import DominanceRegistry, list_dominances
from front_runner.results import Front, fronts_to_ranks
from front_runner.sort import (
    CursorConsumedError,
    FrontCursor,
    NonDominatedSort,
    non_dominated_sort,
    pareto_fronts,
    pareto_fronts_stop_at,
)

__all__ = [
    # Sorting
    "non_dominated_sort",
    "pareto_fronts",
    "pareto_fronts_stop_at",
    "NonDominatedSort",
    "FrontCursor",
    "Front",
    "fronts_to_ranks",
    # Dominance orderings
    "Dominance",
    "DominanceOrd",
    "from_dominates",
    "dominates",
    "ParetoDominance",
    "ConstrainedDominance",
    "MatrixDominance",
    "check_dominance",
    # Objective arrays
    "dominates_matrix",
    "non_dominated_ranks",
    "objective_fronts",
    # Index width
    "INDEX_DTYPES",
    "check_index_capacity",
    "max_solutions",
    # Registry system
    "DominanceRegistry",
    "list_dominances",
    # Errors
    "CursorConsumedError",
    "DominanceError",
    "IndexWidthError",
]
