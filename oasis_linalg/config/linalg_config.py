################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for fixed-size linear algebra."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .linalg_params import LinalgParams
from .linalg_params import LinalgParamsError


_LOG: logging.Logger = logging.getLogger(__name__)


class LinalgConfigError(Exception):
    """Raised when linear algebra configuration validation fails."""


@dataclass(frozen=True)
class LinalgConfig:
    """Convenience wrapper around linear algebra parameters."""

    params: LinalgParams

    def __init__(self, params: LinalgParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> LinalgConfig:
        """Return a configuration built from default parameters."""
        return cls(LinalgParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except LinalgParamsError as exc:
            raise LinalgConfigError(str(exc)) from exc

    def default_int_dtype(self) -> str:
        """Return the element type used for plain Python ints."""
        return self.params.dtypes.default_int_dtype

    def default_float_dtype(self) -> str:
        """Return the element type used for plain Python floats."""
        return self.params.dtypes.default_float_dtype


_active_config: LinalgConfig = LinalgConfig.defaults()


def get_config() -> LinalgConfig:
    """Return the process-wide configuration."""
    return _active_config


def set_config(config: LinalgConfig) -> None:
    """Replace the process-wide configuration."""
    global _active_config

    if not isinstance(config, LinalgConfig):
        raise LinalgConfigError("config must be a LinalgConfig")

    _active_config = config
    _LOG.info(
        "Default dtypes set to int=%s float=%s",
        config.default_int_dtype(),
        config.default_float_dtype(),
    )


def reset_config() -> None:
    """Restore the default process-wide configuration."""
    set_config(LinalgConfig.defaults())
