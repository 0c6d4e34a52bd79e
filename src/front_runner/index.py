"""Index width selection for the dominance graph.

The adjacency lists built during sorting hold one index per dominance edge,
which is O(n^2) in the worst case. Storing them in a narrower integer dtype
trades the addressable population size for memory. The width is checked once
before sorting starts; an index that does not fit is an error, never a
silent truncation.
"""

import numpy as np

INDEX_DTYPES: dict[str, np.dtype] = {
    "uint8": np.dtype(np.uint8),
    "uint16": np.dtype(np.uint16),
    "uint32": np.dtype(np.uint32),
    "uint64": np.dtype(np.uint64),
    "intp": np.dtype(np.intp),
}

DEFAULT_INDEX_DTYPE = "intp"


class IndexWidthError(OverflowError):
    """Raised when the chosen index dtype cannot address every solution."""


def resolve_index_dtype(index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE) -> np.dtype:
    """Resolve an index dtype given by name, numpy dtype or numpy scalar type.

    Args:
        index_dtype: One of the names in ``INDEX_DTYPES``, or anything
            ``np.dtype`` accepts that describes an integer type.

    Returns:
        The resolved numpy integer dtype.

    Raises:
        ValueError: If a name is not one of ``INDEX_DTYPES``.
        TypeError: If the dtype is not an integer dtype.

    Examples:
        >>> resolve_index_dtype("uint16")
        dtype('uint16')
        >>> resolve_index_dtype(np.uint8)
        dtype('uint8')
    """
    if isinstance(index_dtype, str):
        if index_dtype not in INDEX_DTYPES:
            available = ", ".join(sorted(INDEX_DTYPES))
            raise ValueError(f"Unknown index dtype '{index_dtype}'. Available: {available}")
        return INDEX_DTYPES[index_dtype]

    dtype = np.dtype(index_dtype)
    if not np.issubdtype(dtype, np.integer):
        raise TypeError(f"index dtype must be an integer dtype, got {dtype}")
    return dtype


def max_solutions(index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE) -> int:
    """Return the largest population size addressable with ``index_dtype``.

    Indices run from 0 to n - 1, so a dtype whose maximum is ``m`` supports
    populations of up to ``m + 1`` solutions.

    Examples:
        >>> max_solutions("uint8")
        256
    """
    return int(np.iinfo(resolve_index_dtype(index_dtype)).max) + 1


def check_index_capacity(n: int, index_dtype: str | np.dtype | type = DEFAULT_INDEX_DTYPE) -> np.dtype:
    """Ensure ``n`` solutions can be indexed with ``index_dtype``.

    Args:
        n: Number of solutions.
        index_dtype: Requested index dtype.

    Returns:
        The resolved numpy dtype.

    Raises:
        ValueError: If n is negative.
        IndexWidthError: If index ``n - 1`` is not representable.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    dtype = resolve_index_dtype(index_dtype)
    limit = max_solutions(dtype)
    if n > limit:
        raise IndexWidthError(f"index dtype {dtype} addresses at most {limit} solutions, got {n}")
    return dtype
