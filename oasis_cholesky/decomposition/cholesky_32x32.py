################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cholesky decomposition of 32x32 symmetric positive definite matrices.

The factor is computed with the Cholesky-Crout algorithm, one column at a
time. Column i only depends on columns 0..i-1, which are final by the time it
is computed, so a single forward sweep produces L:

    L[i][i] = sqrt(A[i][i] - sum(L[i][k]^2 for k < i))
    L[j][i] = (A[j][i] - sum(L[j][k] * L[i][k] for k < i)) / L[i][i],  j > i

Symmetry is checked for the whole matrix before elimination starts. Positive
definiteness is checked lazily on each pivot, so the reported column is the
first one whose leading principal minor is not positive.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_cholesky.decomposition.cholesky_types import CHOLESKY_EPSILON
from oasis_cholesky.decomposition.cholesky_types import MATRIX_SIZE
from oasis_cholesky.decomposition.cholesky_types import CholeskyError
from oasis_cholesky.decomposition.cholesky_types import CholeskyStatus
from oasis_cholesky.decomposition.cholesky_types import NotPositiveDefiniteError
from oasis_cholesky.decomposition.cholesky_types import NotSymmetricError
from oasis_cholesky.decomposition.cholesky_types import NumericalDegeneracyError
from oasis_cholesky.math_utils.validation import MATRIX_SHAPE
from oasis_cholesky.math_utils.validation import ensure_matrix32
from oasis_cholesky.math_utils.validation import ensure_output_buffer


_LOG: logging.Logger = logging.getLogger(__name__)


class CholeskyDecomposer:
    """Stateless Cholesky-Crout decomposer for 32x32 SPD matrices.

    Data contract:
        - A is a finite float64 matrix of shape (32, 32). It is only read,
          unless it is also passed as the output buffer.
        - out, when given, is a writeable float64 array of shape (32, 32).
          Passing A itself as out factors A in place.

    Determinism and edge cases:
        - Identical inputs give bit-identical factors.
        - On failure the output buffer may hold partially computed columns
          and must be discarded.
        - The strict upper triangle of the result is written as exact zeros,
          so a dirty output buffer is acceptable.
    """

    @staticmethod
    def decompose(
        A: NDArray[np.float64],
        out: Optional[NDArray[np.float64]] = None,
    ) -> NDArray[np.float64]:
        """Return the lower-triangular factor L with L @ L.T == A.

        Raises:
            ValueError: A is not a finite 32x32 matrix, or out is unusable
            NotSymmetricError: A is not symmetric within the epsilon
            NotPositiveDefiniteError: a pivot is not above the epsilon
            NumericalDegeneracyError: a diagonal factor is too small to divide by
        """
        matrix: NDArray[np.float64] = ensure_matrix32(A, "A")
        lower: NDArray[np.float64]
        if out is None:
            lower = np.zeros(MATRIX_SHAPE, dtype=np.float64)
        else:
            lower = ensure_output_buffer(out, "out")

        CholeskyDecomposer._check_symmetric(matrix)

        for i in range(MATRIX_SIZE):
            row_i: NDArray[np.float64] = lower[i, :i]
            pivot: float = float(matrix[i, i] - np.dot(row_i, row_i))
            if pivot <= CHOLESKY_EPSILON or math.isnan(pivot):
                _LOG.debug("Rejecting matrix, pivot %e at column %d", pivot, i)
                raise NotPositiveDefiniteError(i, pivot)

            lower[i, i] = math.sqrt(pivot)

            if i + 1 < MATRIX_SIZE:
                diagonal: float = float(lower[i, i])
                if abs(diagonal) < CHOLESKY_EPSILON:
                    _LOG.debug("Rejecting matrix, L[%d][%d] = %e", i, i, diagonal)
                    raise NumericalDegeneracyError(i, diagonal)
                numerators: NDArray[np.float64] = (
                    matrix[i + 1 :, i] - lower[i + 1 :, :i] @ lower[i, :i]
                )
                lower[i + 1 :, i] = numerators / diagonal

            # Upper triangle must read as zero for L @ L.T
            lower[:i, i] = 0.0

        return lower

    @staticmethod
    def decompose_into(
        A: NDArray[np.float64],
        L: NDArray[np.float64],
    ) -> CholeskyStatus:
        """Factor A into the caller's buffer L and return a status code.

        Input validation errors still raise ValueError, since they describe a
        caller bug rather than a property of the matrix.
        """
        try:
            CholeskyDecomposer.decompose(A, out=L)
        except CholeskyError as exc:
            return exc.status
        return CholeskyStatus.OK

    @staticmethod
    def _check_symmetric(matrix: NDArray[np.float64]) -> None:
        difference: NDArray[np.float64] = np.abs(matrix - matrix.T)
        offenders: NDArray[np.intp] = np.argwhere(
            np.triu(difference, k=1) > CHOLESKY_EPSILON
        )
        if offenders.size:
            row: int = int(offenders[0, 0])
            col: int = int(offenders[0, 1])
            _LOG.debug("Rejecting matrix, A[%d][%d] is not mirrored", row, col)
            raise NotSymmetricError(row, col, float(difference[row, col]))


def cholesky_decompose_32x32(
    A: NDArray[np.float64],
    L: NDArray[np.float64],
) -> CholeskyStatus:
    """Decompose A into L, returning 0 on success or a non-zero status."""
    return CholeskyDecomposer.decompose_into(A, L)
