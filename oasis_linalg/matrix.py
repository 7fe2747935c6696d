################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-shape matrices stored column by column."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.numeric import as_numeric_array
from oasis_linalg.numeric import coerce_scalar
from oasis_linalg.numeric import resolve_dtype
from oasis_linalg.shape import DimensionError
from oasis_linalg.shape import check_arity
from oasis_linalg.shape import check_index


class Matrix:
    """Grid of R rows and C columns with a fixed element type.

    Storage is column-major: C columns, each holding the R values of that
    column. Two constructors fill it:

        - from_rows(rows) takes the matrix as it reads on paper, R lists of C
          values, and transposes it into the column store.
        - from_columns(columns) takes C lists of R values, already in storage
          order, and keeps them as given.

    Both describe the same matrix when from_columns receives the transpose of
    the literal given to from_rows. Indexing always presents rows:
    matrix[r][c] is the value at row r and column c whichever constructor
    was used.

    Example:
        Matrix.from_rows([[1, 2, 3],
                          [4, 5, 6]])

        Matrix.from_columns([[1, 4],
                             [2, 5],
                             [3, 6]])
    """

    # Fixed row count, None when any shape is accepted
    ROWS: Optional[int] = None
    # Fixed column count, None when any shape is accepted
    COLUMNS: Optional[int] = None

    def __init__(self, *, columns: Any, dtype: DTypeLike = None) -> None:
        """Initialize from a column-major literal of C columns by R rows."""
        store: NDArray[Any] = as_numeric_array(
            columns, dtype=dtype, ndim=2, name="columns"
        )
        column_count: int = store.shape[0]
        row_count: int = store.shape[1]
        if row_count == 0 or column_count == 0:
            raise DimensionError("matrix must have at least one row and one column")
        if self.ROWS is not None:
            check_arity(row_count, self.ROWS, f"{type(self).__name__} rows")
        if self.COLUMNS is not None:
            check_arity(column_count, self.COLUMNS, f"{type(self).__name__} columns")

        self._columns: NDArray[Any] = store

    @classmethod
    def from_rows(cls, rows: Any, dtype: DTypeLike = None) -> Matrix:
        """Create a matrix from a row-major literal, transposing it."""
        grid: NDArray[Any] = as_numeric_array(rows, dtype=dtype, ndim=2, name="rows")
        return cls(columns=grid.T, dtype=grid.dtype)

    @classmethod
    def from_columns(cls, columns: Any, dtype: DTypeLike = None) -> Matrix:
        """Create a matrix from a column-major literal without transposing."""
        return cls(columns=columns, dtype=dtype)

    @classmethod
    def zeroed(
        cls,
        rows: Optional[int] = None,
        columns: Optional[int] = None,
        dtype: DTypeLike = None,
    ) -> Matrix:
        """Create a matrix filled with zeros."""
        row_count: int = _fixed_or_given(rows, cls.ROWS, "rows")
        column_count: int = _fixed_or_given(columns, cls.COLUMNS, "columns")
        element_type: np.dtype = _element_type(dtype)
        return cls(
            columns=np.zeros((column_count, row_count), dtype=element_type),
            dtype=element_type,
        )

    @classmethod
    def identity(cls, size: Optional[int] = None, dtype: DTypeLike = None) -> Matrix:
        """Create a square matrix with ones on the diagonal."""
        if cls.ROWS is not None and cls.ROWS != cls.COLUMNS:
            raise DimensionError(f"{cls.__name__} is not square")
        order: int = _fixed_or_given(size, cls.ROWS, "size")
        element_type: np.dtype = _element_type(dtype)
        return cls(columns=np.eye(order, dtype=element_type), dtype=element_type)

    @property
    def row_count(self) -> int:
        return int(self._columns.shape[1])

    @property
    def column_count(self) -> int:
        return int(self._columns.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (rows, columns)."""
        return (self.row_count, self.column_count)

    @property
    def dtype(self) -> np.dtype:
        return self._columns.dtype

    def __getitem__(self, row: Any) -> MatrixRow:
        """Return a writable view of one row, ordered by column."""
        position: int = check_index(row, self.row_count, "matrix row")
        return MatrixRow(self, position)

    def __setitem__(self, row: Any, values: Any) -> None:
        """Replace one row with C new values."""
        position: int = check_index(row, self.row_count, "matrix row")
        new_row: NDArray[Any] = as_numeric_array(values, dtype=self.dtype, name="row")
        check_arity(new_row.shape[0], self.column_count, "matrix row")
        self._columns[:, position] = new_row

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[NDArray[Any]]:
        """Iterate over copies of the rows."""
        return iter([row.copy() for row in self._columns.T])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.dtype == other.dtype
            and bool(np.array_equal(self._columns, other._columns))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self.to_rows()}, dtype={self.dtype})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self).from_columns, (self.to_columns(), self.dtype.name))

    def column(self, index: Any) -> NDArray[Any]:
        """Return a copy of one column, ordered by row."""
        position: int = check_index(index, self.column_count, "matrix column")
        return self._columns[position].copy()

    def to_rows(self) -> List[List[Any]]:
        """Return the values as R lists of C values."""
        return self._columns.T.tolist()

    def to_columns(self) -> List[List[Any]]:
        """Return the values as C lists of R values."""
        return self._columns.tolist()

    def to_array(self) -> NDArray[Any]:
        """Return a row-major (R, C) copy of the values."""
        return self._columns.T.copy()

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns exchanged."""
        result_type: type = matrix_type(self.column_count, self.row_count)
        return result_type(columns=self._columns.T, dtype=self.dtype)

    def copy(self) -> Matrix:
        return type(self)(columns=self._columns, dtype=self.dtype)


class MatrixRow:
    """Checked view of one matrix row.

    Column indices follow the same bounds rules as vectors, and writes are
    validated against the element type before they reach the matrix.
    """

    def __init__(self, matrix: Matrix, row: int) -> None:
        self._matrix: Matrix = matrix
        self._row: int = row

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    def __len__(self) -> int:
        return self._matrix.column_count

    def __getitem__(self, column: Any) -> Any:
        position: int = check_index(column, len(self), "matrix column")
        return self._matrix._columns[position, self._row]

    def __setitem__(self, column: Any, value: Any) -> None:
        position: int = check_index(column, len(self), "matrix column")
        self._matrix._columns[position, self._row] = coerce_scalar(value, self.dtype)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.tolist())

    def __array__(
        self, dtype: DTypeLike = None, copy: Optional[bool] = None
    ) -> NDArray[Any]:
        values: NDArray[Any] = self._matrix._columns[:, self._row]
        if dtype is None:
            return values.copy()
        return values.astype(dtype)

    def __repr__(self) -> str:
        return f"MatrixRow({self.tolist()}, dtype={self.dtype})"

    def tolist(self) -> List[Any]:
        """Return the row values as Python numbers."""
        return self._matrix._columns[:, self._row].tolist()


class Matrix2(Matrix):
    """Matrix with a fixed shape of 2x2."""

    ROWS = 2
    COLUMNS = 2


class Matrix3(Matrix):
    """Matrix with a fixed shape of 3x3."""

    ROWS = 3
    COLUMNS = 3


class Matrix4(Matrix):
    """Matrix with a fixed shape of 4x4."""

    ROWS = 4
    COLUMNS = 4


_SQUARE_TYPES: Dict[int, type] = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def matrix_type(rows: int, columns: int) -> type:
    """Return the matrix class for a shape."""
    if rows == columns:
        return _SQUARE_TYPES.get(rows, Matrix)
    return Matrix


def _fixed_or_given(given: Optional[int], fixed: Optional[int], name: str) -> int:
    if given is None:
        if fixed is None:
            raise DimensionError(f"matrix {name} must be given")
        return fixed
    if fixed is not None:
        check_arity(given, fixed, f"matrix {name}")
    return given


def _element_type(dtype: DTypeLike) -> np.dtype:
    if dtype is None:
        return resolve_dtype(get_config().default_float_dtype())
    return resolve_dtype(dtype)
