################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for fixed-size linear algebra."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Element type used when a container is built from plain Python ints
DEFAULT_INT_DTYPE: str = "int64"
# Element type used when a container is built from plain Python floats
DEFAULT_FLOAT_DTYPE: str = "float64"

# Integer element types accepted as the integer default
INT_DTYPE_NAMES: frozenset[str] = frozenset(
    {"int8", "int16", "int32", "int64", "uint8", "uint16", "uint32", "uint64"}
)
# Floating-point element types accepted as the float default
FLOAT_DTYPE_NAMES: frozenset[str] = frozenset({"float32", "float64"})


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_member(value: Any, allowed: frozenset[str], name: str) -> None:
    """Require a dtype name from an allowed set."""
    if not isinstance(value, str):
        raise LinalgParamsError(f"{name} must be a dtype name")
    if value not in allowed:
        raise LinalgParamsError(
            f"{name} must be one of {', '.join(sorted(allowed))}, got {value}"
        )


@dataclass(frozen=True)
class DtypeParams:
    """Default element types for untyped container input."""

    # Element type for plain Python ints
    default_int_dtype: str = DEFAULT_INT_DTYPE
    # Element type for plain Python floats
    default_float_dtype: str = DEFAULT_FLOAT_DTYPE


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for the linear algebra package."""

    dtypes: DtypeParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(dtypes=DtypeParams())

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_member(
            self.dtypes.default_int_dtype,
            INT_DTYPE_NAMES,
            "dtypes.default_int_dtype",
        )
        _require_member(
            self.dtypes.default_float_dtype,
            FLOAT_DTYPE_NAMES,
            "dtypes.default_float_dtype",
        )

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
