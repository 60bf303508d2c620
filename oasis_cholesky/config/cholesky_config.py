################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the Cholesky correctness suite."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .cholesky_params import CholeskyParams
from .cholesky_params import CholeskyParamsError


class CholeskyConfigError(Exception):
    """Raised when suite configuration validation fails."""


@dataclass(frozen=True)
class CholeskyConfig:
    """Convenience wrapper around suite parameters."""

    params: CholeskyParams

    def __init__(self, params: CholeskyParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except CholeskyParamsError as exc:
            raise CholeskyConfigError(str(exc)) from exc

        if self.params.tolerance.exact > self.params.tolerance.general:
            raise CholeskyConfigError(
                "tolerance.exact must not exceed tolerance.general"
            )

        block: np.ndarray = self.params.structured.exact_block
        if block[0, 1] != block[1, 0]:
            raise CholeskyConfigError("structured.exact_block must be symmetric")
        if block[0, 0] <= 0.0 or np.linalg.det(block) <= 0.0:
            raise CholeskyConfigError(
                "structured.exact_block must be positive definite"
            )

    def general_tolerance(self) -> float:
        """Return the tolerance for general SPD matrices."""
        return self.params.tolerance.general

    def exact_tolerance(self) -> float:
        """Return the tolerance for matrices with exact factors."""
        return self.params.tolerance.exact

    def fuzz_seeds(self) -> list[int]:
        """Return the seeds used by the repeated random-matrix case."""
        base: int = self.params.fuzz.base_seed
        return [base + offset for offset in range(self.params.fuzz.iterations)]
