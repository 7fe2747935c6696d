################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Coordinate accessors for 2D and 3D points."""

from __future__ import annotations

from typing import Any


class Point2:
    """Position of a point on a plane: x at 0, y at 1."""

    @property
    def x(self) -> Any:
        return self[0]  # type: ignore[index]

    @property
    def y(self) -> Any:
        return self[1]  # type: ignore[index]


class Point3(Point2):
    """Position of a point in space, adding z at 2."""

    @property
    def z(self) -> Any:
        return self[2]  # type: ignore[index]
