################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for decomposition verification checks."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_cholesky.decomposition.cholesky_32x32 import CholeskyDecomposer
from oasis_cholesky.math_utils.matrix32 import Mat32
from oasis_cholesky.math_utils.spd_generator import generate_random_spd_matrix
from oasis_cholesky.verification.decomposition_check import CheckReport
from oasis_cholesky.verification.decomposition_check import DecompositionCheck


def test_valid_factor_passes() -> None:
    """Checks a computed factor passes every check."""
    A: NDArray[np.float64] = generate_random_spd_matrix(12345)
    L: NDArray[np.float64] = CholeskyDecomposer.decompose(A)
    report: CheckReport = DecompositionCheck.decomposition(A, L)
    assert report.passed
    assert report.max_error is not None
    assert report.max_error <= 1e-9
    assert report.upper_violations == ()
    assert report.diagonal_violations == ()


def test_reconstruction_failure_reports_location(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Checks the max error location is reported and logged."""
    A: NDArray[np.float64] = Mat32.identity()
    L: NDArray[np.float64] = Mat32.identity()
    L[6, 6] = 2.0
    with caplog.at_level(logging.WARNING):
        report: CheckReport = DecompositionCheck.reconstruction(A, L, 1e-9, "bad")
    assert not report.passed
    assert report.max_error_index == (6, 6)
    assert report.max_error is not None
    assert np.isclose(report.max_error, 3.0)
    assert "max error" in caplog.text


def test_upper_triangle_violation() -> None:
    """Checks non-zero upper entries are flagged."""
    L: NDArray[np.float64] = Mat32.identity()
    L[0, 5] = 1e-3
    report: CheckReport = DecompositionCheck.lower_triangular(L)
    assert not report.passed
    assert report.upper_violations == ((0, 5),)


def test_non_positive_diagonal_violation() -> None:
    """Checks non-positive diagonal entries are flagged."""
    L: NDArray[np.float64] = Mat32.identity()
    L[9, 9] = 0.0
    L[20, 20] = -1.0
    report: CheckReport = DecompositionCheck.lower_triangular(L)
    assert not report.passed
    assert report.diagonal_violations == (9, 20)


def test_report_validation() -> None:
    """Checks invalid report fields raise errors."""
    with pytest.raises(ValueError):
        CheckReport(name="x", passed=True, max_error=float("nan"))
    with pytest.raises(ValueError):
        CheckReport(name="x", passed=1)  # type: ignore[arg-type]


def test_report_violations_are_immutable() -> None:
    """Checks violation collections cannot be changed after the check."""
    L: NDArray[np.float64] = Mat32.identity()
    L[0, 5] = 1e-3
    report: CheckReport = DecompositionCheck.lower_triangular(L)
    assert isinstance(report.upper_violations, tuple)
    assert isinstance(report.diagonal_violations, tuple)
    with pytest.raises(AttributeError):
        report.upper_violations.append((1, 2))  # type: ignore[attr-defined]
