################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the fixed-arity vector container."""

from __future__ import annotations

import copy
import pickle
from typing import Any
from typing import Iterator

import numpy as np
import pytest

from oasis_linalg.numeric import NumericTypeError
from oasis_linalg.shape import DimensionError
from oasis_linalg.shape import OutOfBoundsError
from oasis_linalg.vector import Vector
from oasis_linalg.vector import Vector2
from oasis_linalg.vector import Vector3
from oasis_linalg.vector import Vector4
from oasis_linalg.vector import vector_type


def test_construct_from_array() -> None:
    """Checks construction keeps the values and their order."""
    vec: Vector = Vector([8, 9, 10, 11, 12, 13])
    assert vec.arity == 6
    assert len(vec) == 6
    assert [int(value) for value in vec] == [8, 9, 10, 11, 12, 13]
    assert vec.dtype == np.dtype(np.int64)


def test_explicit_dtype() -> None:
    """Checks an explicit element type is applied."""
    vec: Vector3 = Vector3([255, 100, 100], dtype=np.uint8)
    assert vec.dtype == np.dtype(np.uint8)
    assert vec[0] == 255


def test_fixed_arity_is_enforced() -> None:
    """Checks fixed-arity classes reject other lengths."""
    with pytest.raises(DimensionError):
        Vector3([1, 2])
    with pytest.raises(DimensionError):
        Vector2([1, 2, 3])
    with pytest.raises(DimensionError):
        Vector4([1, 2, 3])


def test_rejects_values_outside_numeric_set() -> None:
    """Checks non-numeric element types are rejected."""
    with pytest.raises(NumericTypeError):
        Vector([True, False])
    with pytest.raises(NumericTypeError):
        Vector([1, 2], dtype=np.complex128)
    with pytest.raises(NumericTypeError):
        Vector3([256, 0, 0], dtype=np.uint8)


def test_from_tuple_dispatches_on_arity() -> None:
    """Checks tuple conversion builds the matching fixed-arity vector."""
    vec2: Vector = Vector.from_tuple((8, 9))
    vec3: Vector = Vector.from_tuple((8, 9, 10))
    vec4: Vector = Vector.from_tuple((8, 9, 10, 11))
    assert isinstance(vec2, Vector2)
    assert isinstance(vec3, Vector3)
    assert isinstance(vec4, Vector4)
    assert vec3 == Vector3([8, 9, 10])


def test_tuple_round_trip() -> None:
    """Checks tuple to vector to tuple recovers the tuple."""
    original: tuple[int, int, int] = (8, 9, 10)
    vec: Vector = Vector3.from_tuple(original, dtype=np.uint8)
    assert vec == Vector3([8, 9, 10], dtype=np.uint8)
    assert vec.to_tuple() == original


def test_from_tuple_rejects_other_arities() -> None:
    """Checks tuple conversion is limited to arities 2 through 4."""
    with pytest.raises(DimensionError):
        Vector.from_tuple((1,))
    with pytest.raises(DimensionError):
        Vector.from_tuple((1, 2, 3, 4, 5))
    with pytest.raises(DimensionError):
        Vector3.from_tuple((1, 2))
    with pytest.raises(TypeError):
        Vector.from_tuple([1, 2])  # type: ignore[arg-type]


def test_zeroed() -> None:
    """Checks the zero constructor for fixed and generic vectors."""
    vec3: Vector = Vector3.zeroed(dtype=np.int32)
    assert isinstance(vec3, Vector3)
    assert vec3 == Vector3([0, 0, 0], dtype=np.int32)
    assert vec3.dtype == np.dtype(np.int32)

    vec5: Vector = Vector.zeroed(5)
    assert vec5.arity == 5
    assert vec5.dtype == np.dtype(np.float64)
    assert all(value == 0.0 for value in vec5)

    with pytest.raises(DimensionError):
        Vector.zeroed()


def test_index_and_assign() -> None:
    """Checks element reads and writes."""
    colour: Vector3 = Vector3([255, 100, 100], dtype=np.uint8)
    assert colour[0] == 255
    colour[0] = 100
    assert colour[0] == 100
    assert colour.dtype == np.dtype(np.uint8)


def test_assign_validates_value() -> None:
    """Checks assigned values must fit the element type."""
    vec: Vector3 = Vector3([1, 2, 3])
    with pytest.raises(NumericTypeError):
        vec[0] = 1.5
    with pytest.raises(NumericTypeError):
        vec[0] = "1"
    assert vec == Vector3([1, 2, 3])


def test_index_one_past_end_raises() -> None:
    """Checks indexing at the arity raises instead of wrapping."""
    vec: Vector3 = Vector3([1, 2, 3])
    with pytest.raises(OutOfBoundsError):
        vec[3]
    with pytest.raises(IndexError):
        vec[3]
    with pytest.raises(OutOfBoundsError):
        vec[3] = 4


def test_negative_index_raises() -> None:
    """Checks negative indices are out of bounds."""
    vec: Vector3 = Vector3([1, 2, 3])
    with pytest.raises(OutOfBoundsError):
        vec[-1]


def test_non_integer_index_raises() -> None:
    """Checks slices and floats are not indices."""
    vec: Vector3 = Vector3([1, 2, 3])
    with pytest.raises(TypeError):
        vec[0:2]
    with pytest.raises(TypeError):
        vec[1.0]
    with pytest.raises(TypeError):
        vec[True]
    with pytest.raises(TypeError):
        vec[np.bool_(False)] = 4


def test_iterator_is_single_pass() -> None:
    """Checks iteration yields every element once in storage order."""
    vec: Vector4 = Vector4([4, 3, 2, 1])
    iterator: Iterator[Any] = iter(vec)
    assert [int(value) for value in iterator] == [4, 3, 2, 1]
    assert next(iterator, None) is None


def test_iterator_uses_snapshot() -> None:
    """Checks mutation after iter() does not change the iteration."""
    vec: Vector2 = Vector2([1, 2])
    iterator: Iterator[Any] = iter(vec)
    vec[1] = 5
    assert [int(value) for value in iterator] == [1, 2]


def test_structural_equality() -> None:
    """Checks equality compares arity and values."""
    assert Vector([1, 2, 3]) == Vector3([1, 2, 3])
    assert Vector3([1, 2, 3]) != Vector3([1, 2, 4])
    assert Vector2([1, 2]) != Vector3([1, 2, 0])
    assert Vector2([1, 2]) != (1, 2)


def test_equality_compares_element_type() -> None:
    """Checks vectors with equal values but different types are unequal."""
    assert Vector([1.0, 2.0]) != Vector([1, 2])
    assert Vector2([1, 2], dtype=np.int32) != Vector2([1, 2])
    assert Vector2([1, 2], dtype=np.int32) == Vector2([1, 2], dtype=np.int32)


def test_unhashable() -> None:
    """Checks mutable vectors cannot be hashed."""
    with pytest.raises(TypeError):
        hash(Vector2([1, 2]))


def test_copy_is_independent() -> None:
    """Checks copies do not share storage."""
    vec: Vector3 = Vector3([1, 2, 3])
    for duplicate in (vec.copy(), copy.copy(vec), copy.deepcopy(vec)):
        assert isinstance(duplicate, Vector3)
        duplicate[0] = 9
        assert vec[0] == 1


def test_pickle_round_trip() -> None:
    """Checks vectors survive pickling with their type."""
    vec: Vector4 = Vector4([1, 2, 3, 4], dtype=np.uint16)
    restored: Vector = pickle.loads(pickle.dumps(vec))
    assert isinstance(restored, Vector4)
    assert restored == vec
    assert restored.dtype == np.dtype(np.uint16)


def test_to_array_is_a_copy() -> None:
    """Checks exported arrays do not alias the vector."""
    vec: Vector2 = Vector2([1.0, 2.0])
    exported: Any = vec.to_array()
    exported[0] = 5.0
    assert vec[0] == 1.0
    assert np.asarray(vec).tolist() == [1.0, 2.0]


def test_repr() -> None:
    """Checks the representation names class, values and type."""
    assert repr(Vector3([1, 2, 3], dtype=np.uint8)) == "Vector3([1, 2, 3], dtype=uint8)"


def test_vector_type() -> None:
    """Checks the class lookup by arity."""
    assert vector_type(2) is Vector2
    assert vector_type(3) is Vector3
    assert vector_type(4) is Vector4
    assert vector_type(7) is Vector
