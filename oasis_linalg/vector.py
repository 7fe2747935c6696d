################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-arity vectors and the operators defined on them."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Iterator
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_linalg import operations
from oasis_linalg.colours import COLOUR_DTYPE
from oasis_linalg.colours import RGB
from oasis_linalg.colours import RGBA
from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.matrix import Matrix
from oasis_linalg.numeric import as_numeric_array
from oasis_linalg.numeric import coerce_scalar
from oasis_linalg.numeric import is_numeric_scalar
from oasis_linalg.numeric import resolve_dtype
from oasis_linalg.points import Point2
from oasis_linalg.points import Point3
from oasis_linalg.shape import DimensionError
from oasis_linalg.shape import check_arity
from oasis_linalg.shape import check_index
from oasis_linalg.sizes import Size2
from oasis_linalg.sizes import Size3


class Vector:
    """Ordered sequence of N numbers with a fixed element type.

    The arity N is set at construction and never changes. Indexing outside
    [0, N) raises OutOfBoundsError; negative indices are not wrapped.

    Operators:
        v + u, v - u    elementwise, equal arity and element type
        v * u           elementwise (Hadamard) product, not a dot product
        v * k, k * v    every element scaled by the number k
        v * m           vector times a matrix with N columns, arity R result

    Named equivalents: add(), sub(), hadamard(), scale(), matmul(). The scalar
    dot product is only available as dot().
    """

    # Fixed arity, None when any arity is accepted
    ARITY: Optional[int] = None

    def __init__(self, data: Any, dtype: DTypeLike = None) -> None:
        """Initialize from N values, inferring the element type if not given."""
        values: NDArray[Any] = as_numeric_array(data, dtype=dtype, name="vector")
        if self.ARITY is not None:
            check_arity(values.shape[0], self.ARITY, type(self).__name__)

        self._data: NDArray[Any] = values

    @classmethod
    def from_tuple(cls, values: Tuple[Any, ...], dtype: DTypeLike = None) -> Vector:
        """Create a 2, 3 or 4-vector from a tuple of the same arity."""
        if not isinstance(values, tuple):
            raise TypeError(f"expected a tuple, got {type(values).__name__}")
        if len(values) not in _FIXED_TYPES:
            raise DimensionError(
                f"tuple conversion supports arities 2, 3 and 4, got {len(values)}"
            )
        target: type = vector_type(len(values)) if cls is Vector else cls
        return target(values, dtype=dtype)

    @classmethod
    def zeroed(cls, arity: Optional[int] = None, *, dtype: DTypeLike = None) -> Vector:
        """Create a vector filled with the zero of its element type."""
        if arity is None:
            if cls.ARITY is None:
                raise DimensionError("arity must be given for a generic vector")
            arity = cls.ARITY

        element_type: np.dtype
        if dtype is None:
            element_type = resolve_dtype(get_config().default_float_dtype())
        else:
            element_type = resolve_dtype(dtype)

        return cls(np.zeros(arity, dtype=element_type), dtype=element_type)

    @property
    def arity(self) -> int:
        return int(self._data.shape[0])

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self.arity

    def __getitem__(self, index: Any) -> Any:
        position: int = check_index(index, self.arity, "vector")
        return self._data[position]

    def __setitem__(self, index: Any, value: Any) -> None:
        position: int = check_index(index, self.arity, "vector")
        self._data[position] = coerce_scalar(value, self.dtype)

    def __iter__(self) -> Iterator[Any]:
        """Iterate once over a snapshot of the elements in storage order."""
        return iter(list(self._data))

    def __array__(
        self, dtype: DTypeLike = None, copy: Optional[bool] = None
    ) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            self.arity == other.arity
            and self.dtype == other.dtype
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()}, dtype={self.dtype})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (self._data.tolist(), self.dtype.name))

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.hadamard(other)
        if isinstance(other, Matrix):
            return self.matmul(other)
        if is_numeric_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if is_numeric_scalar(other):
            return self.scale(other)
        return NotImplemented

    def add(self, other: Vector) -> Vector:
        """Return the elementwise sum."""
        _require_vector(other, "addition")
        return self._like(operations.add(self._data, other._data))

    def sub(self, other: Vector) -> Vector:
        """Return the elementwise difference."""
        _require_vector(other, "subtraction")
        return self._like(operations.sub(self._data, other._data))

    def hadamard(self, other: Vector) -> Vector:
        """Return the elementwise product."""
        _require_vector(other, "elementwise product")
        return self._like(operations.hadamard(self._data, other._data))

    def dot(self, other: Vector) -> Any:
        """Return the scalar dot product as an element of the shared type."""
        _require_vector(other, "dot product")
        return operations.dot(self._data, other._data)

    def scale(self, scalar: Any) -> Vector:
        """Return every element multiplied by a scalar."""
        return self._like(operations.scale(self._data, scalar))

    def matmul(self, matrix: Matrix) -> Vector:
        """Return the product with a matrix of N columns, one value per row."""
        if not isinstance(matrix, Matrix):
            raise TypeError(f"expected a Matrix, got {type(matrix).__name__}")
        values: NDArray[Any] = operations.row_vector_product(
            self._data, matrix._columns
        )
        return vector_type(values.shape[0])(values, dtype=values.dtype)

    def to_tuple(self) -> Tuple[Any, ...]:
        """Return the elements as a tuple of Python numbers."""
        return tuple(self._data.tolist())

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the elements."""
        return self._data.copy()

    def copy(self) -> Vector:
        return self._like(self._data)

    def _like(self, values: NDArray[Any]) -> Vector:
        return type(self)(values, dtype=self.dtype)


class Vector2(Vector, Point2, Size2):
    """Vector with a fixed arity of 2, readable as a point or a size."""

    ARITY = 2

    @classmethod
    def at(cls, x: Any, y: Any, dtype: DTypeLike = None) -> Vector2:
        """Create a point on a plane."""
        return cls([x, y], dtype=dtype)

    @classmethod
    def size(cls, w: Any, h: Any, dtype: DTypeLike = None) -> Vector2:
        """Create the size of a flat object."""
        return cls([w, h], dtype=dtype)


class Vector3(Vector, RGB, Point3, Size3):
    """Vector with a fixed arity of 3, readable as a colour, point or size."""

    ARITY = 3

    @classmethod
    def at(cls, x: Any, y: Any, z: Any, dtype: DTypeLike = None) -> Vector3:
        """Create a point in space."""
        return cls([x, y, z], dtype=dtype)

    @classmethod
    def size(cls, w: Any, h: Any, d: Any, dtype: DTypeLike = None) -> Vector3:
        """Create the size of a solid object."""
        return cls([w, h, d], dtype=dtype)

    @classmethod
    def rgb(cls, r: Any, g: Any, b: Any) -> Vector3:
        """Create an opaque colour from uint8 channels."""
        return cls([r, g, b], dtype=COLOUR_DTYPE)


class Vector4(Vector, RGBA):
    """Vector with a fixed arity of 4, readable as a colour with alpha."""

    ARITY = 4

    @classmethod
    def rgba(cls, r: Any, g: Any, b: Any, a: Any) -> Vector4:
        """Create a colour with alpha from uint8 channels."""
        return cls([r, g, b, a], dtype=COLOUR_DTYPE)


_FIXED_TYPES: Dict[int, type] = {2: Vector2, 3: Vector3, 4: Vector4}


def vector_type(arity: int) -> type:
    """Return the vector class for an arity."""
    return _FIXED_TYPES.get(arity, Vector)


def _require_vector(other: Any, operation: str) -> None:
    if not isinstance(other, Vector):
        raise TypeError(f"{operation} requires a Vector, got {type(other).__name__}")
