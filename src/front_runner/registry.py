"""Registry of named dominance orderings.

Experiments usually pick their dominance relation from a config file. The
registry maps names to factories so a relation can be selected by string and
configured with keyword arguments at retrieval time:

    ```python
    from front_runner.registry import DominanceRegistry

    ordering = DominanceRegistry.get("pareto", maximize=[False, True])
    fronts = pareto_fronts(solutions, ordering)
    ```

Custom relations are registered the same way:

    ```python
    DominanceRegistry.register("lexicographic", lambda: my_lexicographic_ordering)
    ```
"""

from collections.abc import Callable

from front_runner.domination import ConstrainedDominance, ParetoDominance
from front_runner.protocols import DominanceOrd


class DominanceRegistry:
    """Class-level registry of dominance ordering factories.

    Class Attributes:
        _registry: Dictionary mapping names to callables that return a
            ``DominanceOrd`` when called with configuration keyword arguments.
    """

    _registry: dict[str, Callable[..., DominanceOrd]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., DominanceOrd]) -> None:
        """Register a dominance ordering factory. Overwrites an existing name."""
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> DominanceOrd:
        """Get a configured dominance ordering by name.

        Args:
            name: Name of the registered ordering.
            **kwargs: Configuration passed to the factory.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available names.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Dominance ordering '{name}' not found. Available orderings: {available}")
        return cls._registry[name](**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered names."""
        return sorted(cls._registry.keys())


def list_dominances() -> list[str]:
    """List all registered dominance orderings."""
    return DominanceRegistry.list()


DominanceRegistry.register("pareto", ParetoDominance)
DominanceRegistry.register("constrained", ConstrainedDominance)
