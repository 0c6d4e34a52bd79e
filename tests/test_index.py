"""Tests for index width selection."""

import numpy as np
import pytest

from front_runner.index import (
    INDEX_DTYPES,
    IndexWidthError,
    check_index_capacity,
    max_solutions,
    resolve_index_dtype,
)


class TestResolveIndexDtype:
    """Tests for resolve_index_dtype."""

    @pytest.mark.parametrize("name", sorted(INDEX_DTYPES))
    def test_resolves_every_named_width(self, name) -> None:
        """Every registered name resolves to an integer dtype."""
        dtype = resolve_index_dtype(name)
        assert np.issubdtype(dtype, np.integer)

    def test_accepts_numpy_types(self) -> None:
        """Scalar types and dtypes are accepted directly."""
        assert resolve_index_dtype(np.uint16) == np.dtype(np.uint16)
        assert resolve_index_dtype(np.dtype("int32")) == np.dtype(np.int32)

    def test_unknown_name_raises(self) -> None:
        """Unknown names list the available widths."""
        with pytest.raises(ValueError, match="Available: intp, uint16"):
            resolve_index_dtype("int7")

    def test_float_dtype_raises(self) -> None:
        """Indices must be integers."""
        with pytest.raises(TypeError, match="integer dtype"):
            resolve_index_dtype(np.float32)


class TestCapacity:
    """Tests for max_solutions and check_index_capacity."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("uint8", 256), ("uint16", 65_536), ("uint32", 2**32)],
    )
    def test_max_solutions(self, name, expected) -> None:
        """Capacity is the dtype maximum plus one."""
        assert max_solutions(name) == expected

    def test_exact_capacity_is_accepted(self) -> None:
        """n equal to the capacity fits."""
        assert check_index_capacity(256, "uint8") == np.dtype(np.uint8)

    def test_one_over_capacity_raises(self) -> None:
        """n one above the capacity is rejected."""
        with pytest.raises(IndexWidthError, match="uint8 addresses at most 256 solutions, got 257"):
            check_index_capacity(257, "uint8")

    def test_zero_solutions_always_fit(self) -> None:
        """An empty population fits any width."""
        check_index_capacity(0, "uint8")

    def test_negative_count_raises(self) -> None:
        """A negative population size is invalid."""
        with pytest.raises(ValueError, match="non-negative"):
            check_index_capacity(-1)
