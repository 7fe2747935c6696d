################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the numeric element type set."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_linalg.numeric import NUMERIC_TYPES
from oasis_linalg.numeric import NumericTypeError
from oasis_linalg.numeric import as_numeric_array
from oasis_linalg.numeric import coerce_scalar
from oasis_linalg.numeric import infer_dtype
from oasis_linalg.numeric import is_numeric_dtype
from oasis_linalg.numeric import is_numeric_scalar
from oasis_linalg.numeric import resolve_dtype
from oasis_linalg.numeric import zero
from oasis_linalg.shape import DimensionError


def test_numeric_set_is_closed() -> None:
    """Checks every primitive width is a member and nothing else is."""
    assert len(NUMERIC_TYPES) == 10
    for scalar_type in NUMERIC_TYPES:
        assert is_numeric_dtype(scalar_type)
    assert not is_numeric_dtype(np.bool_)
    assert not is_numeric_dtype(np.float16)
    assert not is_numeric_dtype(np.complex128)
    assert not is_numeric_dtype(object)


def test_resolve_dtype_accepts_names() -> None:
    """Checks dtype names and scalar types resolve to the same dtype."""
    assert resolve_dtype("uint8") == np.dtype(np.uint8)
    assert resolve_dtype(np.float32) == np.dtype("float32")


def test_resolve_dtype_rejects_outsiders() -> None:
    """Checks non-members and missing dtypes are rejected."""
    with pytest.raises(NumericTypeError):
        resolve_dtype(None)
    with pytest.raises(NumericTypeError):
        resolve_dtype("not-a-dtype")
    with pytest.raises(NumericTypeError):
        resolve_dtype(np.float16)


def test_zero_has_element_type() -> None:
    """Checks the zero value carries its element type."""
    for scalar_type in NUMERIC_TYPES:
        value: Any = zero(scalar_type)
        assert value == 0
        assert value.dtype == np.dtype(scalar_type)


def test_numeric_scalars() -> None:
    """Checks which single values take part in arithmetic."""
    assert is_numeric_scalar(3)
    assert is_numeric_scalar(2.5)
    assert is_numeric_scalar(np.int8(1))
    assert is_numeric_scalar(np.float64(1.0))
    assert not is_numeric_scalar(True)
    assert not is_numeric_scalar(np.bool_(True))
    assert not is_numeric_scalar(np.float16(1.0))
    assert not is_numeric_scalar("1")
    assert not is_numeric_scalar(None)


def test_infer_dtype_defaults() -> None:
    """Checks plain Python numbers take the configured defaults."""
    assert infer_dtype([1, 2, 3]) == np.dtype(np.int64)
    assert infer_dtype([1, 2.5]) == np.dtype(np.float64)


def test_infer_dtype_logs_default(caplog: pytest.LogCaptureFixture) -> None:
    """Checks inference from plain Python numbers is logged."""
    caplog.set_level(logging.DEBUG, logger="oasis_linalg.numeric")
    as_numeric_array([1, 2], name="vector")

    messages: list[str] = [record.getMessage() for record in caplog.records]
    assert "Inferred element type int64 for vector" in messages


def test_infer_dtype_keeps_numpy_types() -> None:
    """Checks typed input keeps its element type."""
    assert infer_dtype(np.array([1, 2], dtype=np.uint16)) == np.dtype(np.uint16)
    assert infer_dtype([np.float32(1.0), np.float32(2.0)]) == np.dtype(np.float32)


def test_as_numeric_array_copies() -> None:
    """Checks the returned array does not alias its source."""
    source: NDArray[np.int32] = np.array([1, 2, 3], dtype=np.int32)
    result: NDArray[Any] = as_numeric_array(source)
    source[0] = 100
    assert result[0] == 1
    assert result.dtype == np.dtype(np.int32)


def test_as_numeric_array_accepts_iterables() -> None:
    """Checks generators are materialized once."""
    result: NDArray[Any] = as_numeric_array(value * 2 for value in range(3))
    assert result.tolist() == [0, 2, 4]


def test_as_numeric_array_rejects_bad_values() -> None:
    """Checks non-numeric and unrepresentable values are rejected."""
    with pytest.raises(NumericTypeError):
        as_numeric_array([True, False])
    with pytest.raises(NumericTypeError):
        as_numeric_array(["a", "b"])
    with pytest.raises(NumericTypeError):
        as_numeric_array([1.5, 2.0], dtype=np.int32)
    with pytest.raises(NumericTypeError):
        as_numeric_array([256], dtype=np.uint8)
    with pytest.raises(NumericTypeError):
        as_numeric_array([-1], dtype=np.uint8)


def test_as_numeric_array_checks_float_range() -> None:
    """Checks finite values must fit a narrower float type."""
    with pytest.raises(NumericTypeError):
        as_numeric_array([1e300], dtype=np.float32)
    with pytest.raises(NumericTypeError):
        as_numeric_array([-1e39, 0.0], dtype=np.float32)
    result: NDArray[Any] = as_numeric_array([np.inf, 1.5], dtype=np.float32)
    assert np.isinf(result[0])
    assert result.dtype == np.dtype(np.float32)


def test_as_numeric_array_checks_dimensions() -> None:
    """Checks dimensionality and rectangular nesting."""
    with pytest.raises(DimensionError):
        as_numeric_array([[1, 2], [3, 4]])
    with pytest.raises(DimensionError):
        as_numeric_array([[1, 2], [3]], ndim=2)
    grid: NDArray[Any] = as_numeric_array([[1, 2], [3, 4]], ndim=2)
    assert grid.shape == (2, 2)


def test_coerce_scalar() -> None:
    """Checks single values convert only when representable."""
    value: Any = coerce_scalar(3, np.uint8)
    assert value == 3
    assert value.dtype == np.dtype(np.uint8)
    assert coerce_scalar(2, np.float32).dtype == np.dtype(np.float32)
    with pytest.raises(NumericTypeError):
        coerce_scalar(1.5, np.int32)
    with pytest.raises(NumericTypeError):
        coerce_scalar(True, np.int32)
