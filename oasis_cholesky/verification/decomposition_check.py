################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Checks that a computed factor really decomposes its input matrix."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field

import numpy as np
from numpy.typing import NDArray

from oasis_cholesky.decomposition.cholesky_types import MATRIX_SIZE
from oasis_cholesky.math_utils.matrix32 import Mat32
from oasis_cholesky.math_utils.validation import ensure_matrix32


# Default tolerance for reconstruction and triangularity checks
DEFAULT_TOLERANCE: float = 1e-9

_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckReport:
    """Outcome of one verification check.

    Attributes:
        name: Label used in log messages
        passed: True when the check succeeded
        max_error: Largest reconstruction error, when reconstruction was checked
        max_error_index: (row, col) of the largest reconstruction error
        upper_violations: (row, col) entries above the diagonal beyond tolerance
        diagonal_violations: Diagonal indices whose entry is not positive
    """

    name: str
    passed: bool
    max_error: float | None = None
    max_error_index: tuple[int, int] | None = None
    upper_violations: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    diagonal_violations: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate report fields."""
        if not isinstance(self.passed, bool):
            raise ValueError("passed must be a bool")
        if self.max_error is not None:
            if not np.isfinite(self.max_error) or self.max_error < 0.0:
                raise ValueError("max_error must be finite and non-negative")


class DecompositionCheck:
    """Verification helpers for Cholesky factors."""

    @staticmethod
    def reconstruction(
        A: NDArray[np.float64],
        L: NDArray[np.float64],
        tolerance: float = DEFAULT_TOLERANCE,
        name: str = "reconstruction",
    ) -> CheckReport:
        """Check that L @ L.T matches A element-wise within tolerance."""
        original: NDArray[np.float64] = ensure_matrix32(A, "A")
        lower: NDArray[np.float64] = ensure_matrix32(L, "L")
        rebuilt: NDArray[np.float64] = Mat32.multiply(lower, Mat32.transpose(lower))
        passed: bool = Mat32.compare(original, rebuilt, tolerance)

        max_error: float
        row: int
        col: int
        max_error, row, col = Mat32.max_abs_error(original, rebuilt)
        if not passed:
            _LOG.warning(
                "%s: L x L^T != A, max error %e at [%d][%d] "
                "(A = %e, L x L^T = %e)",
                name,
                max_error,
                row,
                col,
                float(original[row, col]),
                float(rebuilt[row, col]),
            )

        return CheckReport(
            name=name,
            passed=passed,
            max_error=max_error,
            max_error_index=(row, col),
        )

    @staticmethod
    def lower_triangular(
        L: NDArray[np.float64],
        tolerance: float = DEFAULT_TOLERANCE,
        name: str = "lower triangular",
    ) -> CheckReport:
        """Check that L is lower triangular with a positive diagonal."""
        lower: NDArray[np.float64] = ensure_matrix32(L, "L")
        upper_violations: tuple[tuple[int, int], ...] = tuple(
            (int(i), int(j))
            for i, j in np.argwhere(np.abs(np.triu(lower, k=1)) > tolerance)
        )
        diagonal_violations: tuple[int, ...] = tuple(
            i for i in range(MATRIX_SIZE) if lower[i, i] <= 0.0
        )

        for i, j in upper_violations:
            _LOG.warning(
                "%s: upper element [%d][%d] = %e exceeds %e",
                name,
                i,
                j,
                float(lower[i, j]),
                tolerance,
            )
        for i in diagonal_violations:
            _LOG.warning(
                "%s: diagonal element [%d][%d] = %e is not positive",
                name,
                i,
                i,
                float(lower[i, i]),
            )

        return CheckReport(
            name=name,
            passed=not upper_violations and not diagonal_violations,
            upper_violations=upper_violations,
            diagonal_violations=diagonal_violations,
        )

    @staticmethod
    def decomposition(
        A: NDArray[np.float64],
        L: NDArray[np.float64],
        tolerance: float = DEFAULT_TOLERANCE,
        name: str = "decomposition",
    ) -> CheckReport:
        """Run both the reconstruction and the triangularity checks."""
        rebuilt: CheckReport = DecompositionCheck.reconstruction(
            A, L, tolerance, name
        )
        shape: CheckReport = DecompositionCheck.lower_triangular(L, tolerance, name)
        return CheckReport(
            name=name,
            passed=rebuilt.passed and shape.passed,
            max_error=rebuilt.max_error,
            max_error_index=rebuilt.max_error_index,
            upper_violations=shape.upper_violations,
            diagonal_violations=shape.diagonal_violations,
        )
