################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vectors and matrices with colour, point and size accessors."""

from __future__ import annotations

from oasis_linalg.colours import RGB
from oasis_linalg.colours import RGBA
from oasis_linalg.matrix import Matrix
from oasis_linalg.matrix import Matrix2
from oasis_linalg.matrix import Matrix3
from oasis_linalg.matrix import Matrix4
from oasis_linalg.matrix import MatrixRow
from oasis_linalg.matrix import matrix_type
from oasis_linalg.numeric import NUMERIC_TYPES
from oasis_linalg.numeric import NumericTypeError
from oasis_linalg.numeric import zero
from oasis_linalg.points import Point2
from oasis_linalg.points import Point3
from oasis_linalg.shape import DimensionError
from oasis_linalg.shape import OutOfBoundsError
from oasis_linalg.sizes import Size2
from oasis_linalg.sizes import Size3
from oasis_linalg.vector import Vector
from oasis_linalg.vector import Vector2
from oasis_linalg.vector import Vector3
from oasis_linalg.vector import Vector4
from oasis_linalg.vector import vector_type


__all__ = [
    "DimensionError",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixRow",
    "NUMERIC_TYPES",
    "NumericTypeError",
    "OutOfBoundsError",
    "Point2",
    "Point3",
    "RGB",
    "RGBA",
    "Size2",
    "Size3",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "matrix_type",
    "vector_type",
    "zero",
]
