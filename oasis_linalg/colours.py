################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Colour channel accessors for uint8 vectors.

RGB reads the red, green and blue channels from positions 0, 1 and 2. RGBA
adds the alpha channel at position 3. Packed integer layouts:

    3 channels: 0xRRGGBB      red bits 16-23, green 8-15, blue 0-7
    4 channels: 0xRRGGBBAA    red bits 24-31, green 16-23, blue 8-15, alpha 0-7

Packing and unpacking are exact inverses for uint8 channels.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np

from oasis_linalg.numeric import NumericTypeError


# Element type of every colour channel
COLOUR_DTYPE: np.dtype = np.dtype(np.uint8)

# Width of a packed RGB colour in bits
RGB_HEX_BITS: int = 24
# Width of a packed RGBA colour in bits
RGBA_HEX_BITS: int = 32


class RGB:
    """Red, green and blue channels of a colour vector."""

    @property
    def r(self) -> Any:
        return self._channel(0)

    @property
    def g(self) -> Any:
        return self._channel(1)

    @property
    def b(self) -> Any:
        return self._channel(2)

    @classmethod
    def from_hex(cls, value: int) -> Any:
        """Create a colour from a packed 0xRRGGBB integer."""
        packed: int = _check_packed(value, RGB_HEX_BITS)
        return cls(  # type: ignore[call-arg]
            [(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF],
            dtype=COLOUR_DTYPE,
        )

    def to_hex(self) -> int:
        """Return the colour packed as 0xRRGGBB."""
        return (int(self.r) << 16) | (int(self.g) << 8) | int(self.b)

    def _channel(self, position: int) -> Any:
        dtype: np.dtype = self.dtype  # type: ignore[attr-defined]
        if dtype != COLOUR_DTYPE:
            raise NumericTypeError(f"colour channels must be {COLOUR_DTYPE}, got {dtype}")
        return self[position]  # type: ignore[index]


class RGBA(RGB):
    """Red, green, blue and alpha channels of a colour vector."""

    @property
    def a(self) -> Any:
        return self._channel(3)

    @classmethod
    def from_hex(cls, value: int) -> Any:
        """Create a colour from a packed 0xRRGGBBAA integer."""
        packed: int = _check_packed(value, RGBA_HEX_BITS)
        return cls(  # type: ignore[call-arg]
            [
                (packed >> 24) & 0xFF,
                (packed >> 16) & 0xFF,
                (packed >> 8) & 0xFF,
                packed & 0xFF,
            ],
            dtype=COLOUR_DTYPE,
        )

    def to_hex(self) -> int:
        """Return the colour packed as 0xRRGGBBAA."""
        return (
            (int(self.r) << 24)
            | (int(self.g) << 16)
            | (int(self.b) << 8)
            | int(self.a)
        )


def _check_packed(value: Any, bits: int) -> int:
    """Return a packed colour after checking it fits the channel layout."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("packed colour must be an integer, not bool")
    packed: int = operator.index(value)
    if packed < 0 or packed >= (1 << bits):
        raise ValueError(f"packed colour {packed:#x} does not fit in {bits} bits")
    return packed
