################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shape constants, status codes and errors for the 32x32 Cholesky kernel."""

from __future__ import annotations

import enum
from typing import Optional


# Matrix dimension handled by the decomposer
MATRIX_SIZE: int = 32

# Absolute tolerance shared by the symmetry, pivot and division guards
CHOLESKY_EPSILON: float = 1e-10


class CholeskyStatus(enum.IntEnum):
    """Result codes returned by the buffer-based decomposition call."""

    OK = 0
    NOT_SYMMETRIC = 1
    NOT_POSITIVE_DEFINITE = 2
    NUMERICAL_ERROR = 3


class CholeskyError(ValueError):
    """Base class for inputs the decomposer refuses to factor.

    Attributes:
        status: Status code reported by the buffer-based call
        column: Elimination column where the failure was detected, or None
            when the failure was detected before elimination started
    """

    status: CholeskyStatus

    def __init__(self, message: str, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.column: Optional[int] = column


class NotSymmetricError(CholeskyError):
    """Raised when A[i][j] and A[j][i] differ by more than the epsilon."""

    status = CholeskyStatus.NOT_SYMMETRIC

    def __init__(self, row: int, col: int, difference: float) -> None:
        super().__init__(
            f"Matrix is not symmetric: |A[{row}][{col}] - A[{col}][{row}]| = "
            f"{difference:e}"
        )
        self.row: int = row
        self.col: int = col
        self.difference: float = difference


class NotPositiveDefiniteError(CholeskyError):
    """Raised when a pivot is not strictly above the epsilon."""

    status = CholeskyStatus.NOT_POSITIVE_DEFINITE

    def __init__(self, column: int, pivot: float) -> None:
        super().__init__(
            f"Matrix is not positive definite: pivot {pivot:e} at column {column}",
            column=column,
        )
        self.pivot: float = pivot


class NumericalDegeneracyError(CholeskyError):
    """Raised when a diagonal factor is too small to divide by."""

    status = CholeskyStatus.NUMERICAL_ERROR

    def __init__(self, column: int, diagonal: float) -> None:
        super().__init__(
            f"Numerical error: L[{column}][{column}] = {diagonal:e} is too small "
            "to divide by",
            column=column,
        )
        self.diagonal: float = diagonal
