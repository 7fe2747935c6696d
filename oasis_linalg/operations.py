################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Arithmetic kernels behind the vector and matrix operators.

Responsibility:
    Combine the raw element arrays of two containers after checking that
    their element types and arities agree. The container classes wrap the
    returned arrays back into vectors.

Inputs/outputs:
    - Vector data is a 1-D array of shape (N,).
    - Matrix data is the column store of shape (C, R): C columns of R rows.
    - Every result keeps the element type of its inputs.

Operations:
    - add, sub: elementwise
    - hadamard: elementwise product, not a dot product
    - dot: sum of the elementwise product, a single element
    - scale: product with one scalar
    - row_vector_product: vector times matrix

Equations:
    Vector-matrix product for a matrix with R rows and C = N columns:
        result[m] = sum_n values[n] * matrix[m][n]    for m in [0, R)
    which is accumulated column by column from the column store:
        result = sum_n values[n] * column_n

Determinism and edge cases:
    - Integer results wrap modulo the element width.
    - Mismatched arities raise DimensionError before any arithmetic.
    - Mismatched element types raise NumericTypeError.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.numeric import NumericTypeError
from oasis_linalg.numeric import coerce_scalar
from oasis_linalg.numeric import zero
from oasis_linalg.shape import DimensionError
from oasis_linalg.shape import check_same_arity


def add(lhs: NDArray[Any], rhs: NDArray[Any]) -> NDArray[Any]:
    """Return the elementwise sum of two equal-arity arrays."""
    _check_operands(lhs, rhs, "addition")
    return np.add(lhs, rhs, dtype=lhs.dtype)


def sub(lhs: NDArray[Any], rhs: NDArray[Any]) -> NDArray[Any]:
    """Return the elementwise difference of two equal-arity arrays."""
    _check_operands(lhs, rhs, "subtraction")
    return np.subtract(lhs, rhs, dtype=lhs.dtype)


def hadamard(lhs: NDArray[Any], rhs: NDArray[Any]) -> NDArray[Any]:
    """Return the elementwise product of two equal-arity arrays."""
    _check_operands(lhs, rhs, "elementwise product")
    return np.multiply(lhs, rhs, dtype=lhs.dtype)


def dot(lhs: NDArray[Any], rhs: NDArray[Any]) -> np.generic:
    """Return the sum of the elementwise product of two equal-arity arrays."""
    _check_operands(lhs, rhs, "dot product")
    products: NDArray[Any] = np.multiply(lhs, rhs, dtype=lhs.dtype)
    return products.sum(dtype=lhs.dtype)


def scale(values: NDArray[Any], scalar: Any) -> NDArray[Any]:
    """Return every element multiplied by a scalar.

    The scalar must be representable in the element type of the values, so an
    integer array cannot be scaled by a float.
    """
    factor: np.generic = coerce_scalar(scalar, values.dtype, name="scalar")
    return np.multiply(values, factor, dtype=values.dtype)


def row_vector_product(values: NDArray[Any], columns: NDArray[Any]) -> NDArray[Any]:
    """Return the product of a vector with a column-stored matrix."""
    column_count: int = columns.shape[0]
    row_count: int = columns.shape[1]
    if values.shape[0] != column_count:
        raise DimensionError(
            "vector-matrix product requires the vector arity "
            f"{values.shape[0]} to equal the matrix column count {column_count}"
        )
    _check_same_dtype(values, columns, "vector-matrix product")

    result: NDArray[Any] = np.full(row_count, zero(values.dtype), dtype=values.dtype)
    for n in range(column_count):
        result += np.multiply(columns[n], values[n], dtype=values.dtype)
    return result


def _check_operands(lhs: NDArray[Any], rhs: NDArray[Any], operation: str) -> None:
    check_same_arity(lhs.shape[0], rhs.shape[0], operation)
    _check_same_dtype(lhs, rhs, operation)


def _check_same_dtype(lhs: NDArray[Any], rhs: NDArray[Any], operation: str) -> None:
    if lhs.dtype != rhs.dtype:
        raise NumericTypeError(
            f"{operation} requires equal element types, got {lhs.dtype} and {rhs.dtype}"
        )
