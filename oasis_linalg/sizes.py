################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Extent accessors for 2D and 3D sizes."""

from __future__ import annotations

from typing import Any


class Size2:
    """Extent of a flat object: width at 0, height at 1."""

    @property
    def w(self) -> Any:
        return self[0]  # type: ignore[index]

    @property
    def h(self) -> Any:
        return self[1]  # type: ignore[index]


class Size3(Size2):
    """Extent of a solid object, adding depth at 2."""

    @property
    def d(self) -> Any:
        return self[2]  # type: ignore[index]
