################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric element types usable inside vectors and matrices.

The set of element types is closed: every primitive integer width, signed and
unsigned, plus single and double precision floats. Each member provides a zero
value and supports addition, subtraction and multiplication, including the
in-place forms, under numpy array semantics. Booleans, complex numbers and
Python objects are not members.

Integer arithmetic wraps modulo the width of the element type.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.shape import DimensionError


_LOG: logging.Logger = logging.getLogger(__name__)


# Element types accepted by the containers
NUMERIC_TYPES: Tuple[type, ...] = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.float32,
    np.float64,
)

_NUMERIC_DTYPES: frozenset[np.dtype] = frozenset(
    np.dtype(scalar_type) for scalar_type in NUMERIC_TYPES
)


class NumericTypeError(TypeError):
    """Raised when a value or element type is outside the numeric set."""


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """Return the numpy dtype for a member of the numeric set."""
    if dtype is None:
        raise NumericTypeError("element type must be given explicitly")

    try:
        resolved: np.dtype = np.dtype(dtype)
    except (TypeError, ValueError) as exc:
        raise NumericTypeError(f"{dtype!r} is not a numeric element type") from exc

    if resolved not in _NUMERIC_DTYPES:
        raise NumericTypeError(f"{resolved} is not a numeric element type")

    return resolved


def is_numeric_dtype(dtype: DTypeLike) -> bool:
    """Check whether a dtype belongs to the numeric set."""
    try:
        resolve_dtype(dtype)
    except NumericTypeError:
        return False
    return True


def zero(dtype: DTypeLike) -> np.generic:
    """Return the zero value of a numeric element type."""
    return resolve_dtype(dtype).type(0)


def is_numeric_scalar(value: Any) -> bool:
    """Check whether a single value can take part in container arithmetic."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, np.generic):
        return value.dtype in _NUMERIC_DTYPES
    return isinstance(value, (int, float))


def infer_dtype(values: Any) -> np.dtype:
    """Return the element type for container input without an explicit dtype.

    Typed numpy input keeps its own element type. Input containing plain Python
    numbers takes the configured default integer or float type.
    """
    values = _materialize(values)
    raw: NDArray[Any] = _as_raw_array(values, "values")
    return _infer_from_raw(values, raw, "values")


def as_numeric_array(
    values: Any,
    dtype: DTypeLike = None,
    ndim: int = 1,
    name: str = "values",
) -> NDArray[Any]:
    """Return an owned, validated array of numeric elements.

    Args:
        values: Sequence (or nested sequences for ndim=2) of numbers
        dtype: Target element type, inferred from the values when None
        ndim: Required number of dimensions
        name: Name used in error messages

    Raises:
        DimensionError: The values do not form an array with ndim dimensions
        NumericTypeError: The values cannot be represented in the element type
    """
    values = _materialize(values)
    raw: NDArray[Any] = _as_raw_array(values, name)
    if raw.ndim != ndim:
        raise DimensionError(
            f"{name} must be {ndim}-dimensional, got shape {raw.shape}"
        )

    target: np.dtype
    if dtype is None:
        target = _infer_from_raw(values, raw, name)
    else:
        target = resolve_dtype(dtype)

    if target.kind in "iu":
        if raw.dtype.kind == "f":
            raise NumericTypeError(f"{name} has float values, cannot store as {target}")
        if raw.size:
            info: np.iinfo = np.iinfo(target)
            lowest: int = int(raw.min())
            highest: int = int(raw.max())
            if lowest < info.min or highest > info.max:
                raise NumericTypeError(
                    f"{name} has values outside [{info.min}, {info.max}] for {target}"
                )

    if target.kind == "f" and raw.dtype.kind == "f" and raw.size:
        # Only finite values are range checked
        finite: NDArray[Any] = raw[np.isfinite(raw)]
        limit: float = float(np.finfo(target).max)
        if finite.size and float(np.abs(finite).max()) > limit:
            raise NumericTypeError(
                f"{name} has values outside [-{limit}, {limit}] for {target}"
            )

    return raw.astype(target, copy=True)


def coerce_scalar(value: Any, dtype: DTypeLike, name: str = "value") -> np.generic:
    """Return a single value converted to a numeric element type."""
    if not is_numeric_scalar(value):
        raise NumericTypeError(f"{name} must be a number, got {type(value).__name__}")

    array: NDArray[Any] = as_numeric_array([value], dtype=dtype, name=name)
    return array[0]


def _materialize(values: Any) -> Any:
    if isinstance(values, (np.ndarray, list, tuple)):
        return values
    return [
        list(item) if isinstance(item, (list, tuple, np.ndarray)) else item
        for item in values
    ]


def _as_raw_array(values: Any, name: str) -> NDArray[Any]:
    try:
        raw: NDArray[Any] = np.asarray(values)
    except ValueError as exc:
        # Ragged nesting
        raise DimensionError(f"{name} must be rectangular") from exc

    if raw.dtype.kind not in "iuf":
        raise NumericTypeError(f"{name} must contain only numbers, got {raw.dtype}")

    return raw


def _infer_from_raw(values: Any, raw: NDArray[Any], name: str) -> np.dtype:
    if isinstance(values, np.ndarray) or (
        raw.size > 0 and _all_numpy_scalars(values)
    ):
        return resolve_dtype(raw.dtype)

    config = get_config()
    target: np.dtype
    if raw.dtype.kind == "f":
        target = resolve_dtype(config.default_float_dtype())
    else:
        target = resolve_dtype(config.default_int_dtype())

    _LOG.debug("Inferred element type %s for %s", target, name)

    return target


def _all_numpy_scalars(values: Any) -> bool:
    for item in values:
        if isinstance(item, np.ndarray):
            continue
        if isinstance(item, (list, tuple)):
            if not _all_numpy_scalars(item):
                return False
            continue
        if not isinstance(item, np.generic):
            return False
    return True
