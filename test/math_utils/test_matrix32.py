################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for 32x32 matrix helpers."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_cholesky.math_utils.matrix32 import Mat32


def test_identity() -> None:
    """Checks the identity has ones on the diagonal only."""
    eye: NDArray[np.float64] = Mat32.identity()
    assert eye.shape == (32, 32)
    assert eye.dtype == np.float64
    assert np.array_equal(eye, np.eye(32))


def test_multiply_matches_matmul() -> None:
    """Checks multiplication against numpy."""
    rng: np.random.Generator = np.random.default_rng(3)
    A: NDArray[np.float64] = rng.standard_normal((32, 32))
    B: NDArray[np.float64] = rng.standard_normal((32, 32))
    assert np.allclose(Mat32.multiply(A, B), A @ B)
    assert np.array_equal(Mat32.multiply(A, Mat32.identity()), A)


def test_transpose_returns_copy() -> None:
    """Checks the transpose is a new array."""
    A: NDArray[np.float64] = np.arange(32 * 32, dtype=float).reshape((32, 32))
    At: NDArray[np.float64] = Mat32.transpose(A)
    assert At[2, 5] == A[5, 2]
    At[0, 1] = -1.0
    assert A[1, 0] != -1.0


def test_compare_tolerance() -> None:
    """Checks tolerance comparison is inclusive."""
    A: NDArray[np.float64] = Mat32.identity()
    B: NDArray[np.float64] = Mat32.identity()
    B[4, 9] = 0.5
    assert Mat32.compare(A, B, 0.5)
    assert not Mat32.compare(A, B, 0.25)
    with pytest.raises(ValueError):
        Mat32.compare(A, B, -1.0)


def test_max_abs_error_location() -> None:
    """Checks the largest error and its index."""
    A: NDArray[np.float64] = Mat32.identity()
    B: NDArray[np.float64] = Mat32.identity()
    B[7, 30] = 0.1
    B[12, 3] = -0.3
    error, row, col = Mat32.max_abs_error(A, B)
    assert np.isclose(error, 0.3)
    assert (row, col) == (12, 3)


def test_diagonal_and_block_diagonal() -> None:
    """Checks the structured builders."""
    values: list[float] = [float(i + 1) for i in range(32)]
    D: NDArray[np.float64] = Mat32.diagonal(values)
    assert np.array_equal(np.diag(D), np.asarray(values))
    assert np.count_nonzero(D) == 32

    block: NDArray[np.float64] = np.array([[4.0, 1.0], [1.0, 4.0]])
    A: NDArray[np.float64] = Mat32.block_diagonal(block)
    assert np.array_equal(A[30:32, 30:32], block)
    assert A[1, 2] == 0.0
    assert np.count_nonzero(A) == 16 * 4


def test_shape_validation() -> None:
    """Checks wrong shapes are rejected."""
    with pytest.raises(ValueError):
        Mat32.diagonal([1.0, 2.0])
    with pytest.raises(ValueError):
        Mat32.block_diagonal(np.eye(3))
    with pytest.raises(ValueError):
        Mat32.multiply(np.eye(4), np.eye(4))
