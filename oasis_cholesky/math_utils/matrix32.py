################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Helpers for building and comparing 32x32 matrices."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_cholesky.decomposition.cholesky_types import MATRIX_SIZE

from .validation import MATRIX_SHAPE
from .validation import assert_finite
from .validation import ensure_matrix32


class Mat32:
    """Matrix utilities for 32x32 matrices."""

    @staticmethod
    def identity() -> NDArray[np.float64]:
        """Return the 32x32 identity matrix."""
        return np.eye(MATRIX_SIZE, dtype=np.float64)

    @staticmethod
    def diagonal(values: Sequence[float]) -> NDArray[np.float64]:
        """Return a diagonal matrix with the given 32 diagonal entries."""
        diag: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
        if diag.shape != (MATRIX_SIZE,):
            raise ValueError(f"values must have shape ({MATRIX_SIZE},)")
        assert_finite(diag, "values")
        return np.diag(diag)

    @staticmethod
    def block_diagonal(block: NDArray[np.float64]) -> NDArray[np.float64]:
        """Tile a 2x2 block along the diagonal of a 32x32 matrix."""
        mat: NDArray[np.float64] = np.asarray(block, dtype=np.float64)
        if mat.shape != (2, 2):
            raise ValueError("block must have shape (2, 2)")
        assert_finite(mat, "block")
        result: NDArray[np.float64] = np.zeros(MATRIX_SHAPE, dtype=np.float64)
        for start in range(0, MATRIX_SIZE, 2):
            result[start : start + 2, start : start + 2] = mat
        return result

    @staticmethod
    def multiply(A: NDArray[np.float64], B: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the product A @ B."""
        lhs: NDArray[np.float64] = ensure_matrix32(A, "A")
        rhs: NDArray[np.float64] = ensure_matrix32(B, "B")
        return lhs @ rhs

    @staticmethod
    def transpose(A: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return a copy of the transpose of A."""
        mat: NDArray[np.float64] = ensure_matrix32(A, "A")
        return np.array(mat.T, dtype=np.float64)

    @staticmethod
    def compare(
        A: NDArray[np.float64],
        B: NDArray[np.float64],
        tolerance: float,
    ) -> bool:
        """Return True when every |A[i][j] - B[i][j]| is within tolerance."""
        if tolerance < 0.0:
            raise ValueError("tolerance must be non-negative")
        lhs: NDArray[np.float64] = ensure_matrix32(A, "A")
        rhs: NDArray[np.float64] = ensure_matrix32(B, "B")
        return bool(np.all(np.abs(lhs - rhs) <= tolerance))

    @staticmethod
    def max_abs_error(
        A: NDArray[np.float64],
        B: NDArray[np.float64],
    ) -> tuple[float, int, int]:
        """Return the largest element-wise error and its (row, col)."""
        lhs: NDArray[np.float64] = ensure_matrix32(A, "A")
        rhs: NDArray[np.float64] = ensure_matrix32(B, "B")
        errors: NDArray[np.float64] = np.abs(lhs - rhs)
        flat_index: int = int(np.argmax(errors))
        row: int
        col: int
        row, col = divmod(flat_index, MATRIX_SIZE)
        return float(errors[row, col]), row, col
