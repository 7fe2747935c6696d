################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Arity and index checks shared by the fixed-size containers."""

from __future__ import annotations

import operator
from typing import Any

import numpy as np


class DimensionError(TypeError):
    """Raised when container arities or shapes do not match."""


class OutOfBoundsError(IndexError):
    """Raised when a container is indexed outside its fixed bounds."""


def check_index(index: Any, size: int, name: str) -> int:
    """Return a validated position in [0, size).

    Negative positions are rejected instead of counting from the end, so an
    index one past either end always raises.
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"{name} indices must be integers, not bool")

    try:
        position: int = operator.index(index)
    except TypeError as exc:
        raise TypeError(
            f"{name} indices must be integers, not {type(index).__name__}"
        ) from exc

    if position < 0 or position >= size:
        raise OutOfBoundsError(
            f"{name} index {position} out of bounds for size {size}"
        )

    return position


def check_arity(actual: int, expected: int, name: str) -> None:
    """Require a container to hold exactly the expected number of values."""
    if actual != expected:
        raise DimensionError(f"{name} requires {expected} values, got {actual}")


def check_same_arity(lhs: int, rhs: int, operation: str) -> None:
    """Require both operands of an elementwise operation to share an arity."""
    if lhs != rhs:
        raise DimensionError(
            f"{operation} requires equal arities, got {lhs} and {rhs}"
        )
