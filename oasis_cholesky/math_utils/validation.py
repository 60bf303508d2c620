################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for fixed-size 32x32 matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_cholesky.decomposition.cholesky_types import MATRIX_SIZE


# Expected shape for every matrix handled by the package
MATRIX_SHAPE: tuple[int, int] = (MATRIX_SIZE, MATRIX_SIZE)


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise ValueError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise ValueError(f"{name} must be finite")


def ensure_matrix32(values: object, name: str) -> NDArray[np.float64]:
    """Return a finite float64 view of a 32x32 matrix."""
    matrix: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
    if matrix.shape != MATRIX_SHAPE:
        raise ValueError(f"{name} must have shape {MATRIX_SHAPE}")
    assert_finite(matrix, name)
    return matrix


def ensure_output_buffer(buffer: object, name: str) -> NDArray[np.float64]:
    """Check that a caller-supplied output buffer can hold a 32x32 result."""
    if not isinstance(buffer, np.ndarray):
        raise ValueError(f"{name} must be a numpy array")
    if buffer.shape != MATRIX_SHAPE:
        raise ValueError(f"{name} must have shape {MATRIX_SHAPE}")
    if buffer.dtype != np.float64:
        raise ValueError(f"{name} must have dtype float64")
    if not buffer.flags.writeable:
        raise ValueError(f"{name} must be writeable")
    return buffer
