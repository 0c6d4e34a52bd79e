"""Protocol definitions for the dominance capability consumed by the sorter.

The sorting engine never looks inside a solution. Everything it knows about
the solutions comes from a single caller-supplied comparison, the dominance
ordering, which answers one question for a pair of solutions ``(a, b)``:

1. **LESS**: ``a`` dominates ``b``.
2. **GREATER**: ``b`` dominates ``a``.
3. **EQUAL**: neither dominates the other (incomparable or tied).

Caller obligations (documented, never checked by the engine):

- Irreflexive: comparing a solution with itself yields ``EQUAL``.
- Antisymmetric: if ``a`` dominates ``b`` then ``b`` does not dominate ``a``.
- Transitive: "dominates" forms a strict partial order. Fronts are only
  well-defined under this assumption.

Use ``front_runner.domination.check_dominance`` in tests to verify a
relation on a concrete sample.

Example usage:
    ```python
    def by_first_two(a, b) -> Dominance:
        if a[0] <= b[0] and a[1] <= b[1] and a != b:
            return Dominance.LESS
        if b[0] <= a[0] and b[1] <= a[1] and a != b:
            return Dominance.GREATER
        return Dominance.EQUAL

    cursor = non_dominated_sort(solutions, by_first_two)
    ```
"""

from enum import IntEnum
from typing import Any, Protocol, runtime_checkable


class Dominance(IntEnum):
    """Outcome of comparing two solutions ``a`` and ``b``.

    The integer values follow the usual comparison convention so that a
    dominance ordering reads like ``cmp(a, b)``: negative when ``a`` is
    better (dominates), positive when ``b`` is better.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Dominance":
        """Return the outcome of the same comparison with operands swapped."""
        return Dominance(-self.value)


@runtime_checkable
class DominanceOrd(Protocol):
    """Protocol for dominance orderings.

    A dominance ordering is any callable taking two solutions and returning a
    ``Dominance``. It must be a pure function: the sorter may call it up to
    ``n * (n - 1) / 2`` times, always as ``ordering(solutions[i], solutions[j])``
    with ``i < j``, and infers ``ordering(solutions[j], solutions[i])`` as the
    reversed outcome instead of asking again.

    Example implementations:
        - Pareto dominance on objective vectors (``ParetoDominance``)
        - Feasibility-first constrained dominance (``ConstrainedDominance``)
        - Lookup into a precomputed dominance matrix (``MatrixDominance``)
    """

    def __call__(self, a: Any, b: Any) -> Dominance:
        """Compare two solutions.

        Args:
            a: First solution.
            b: Second solution.

        Returns:
            ``Dominance.LESS`` if a dominates b, ``Dominance.GREATER`` if b
            dominates a, ``Dominance.EQUAL`` otherwise.
        """
        ...
