################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the named correctness cases."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from oasis_cholesky.config.cholesky_config import CholeskyConfig
from oasis_cholesky.config.cholesky_params import CholeskyParams
from oasis_cholesky.decomposition import cholesky_32x32
from oasis_cholesky.suite.correctness_suite import CaseResult
from oasis_cholesky.suite.correctness_suite import CorrectnessSuite
from oasis_cholesky.suite.correctness_suite import SuiteSummary


def _suite(params: CholeskyParams | None = None) -> CorrectnessSuite:
    return CorrectnessSuite(CholeskyConfig(params or CholeskyParams.defaults()))


def test_default_suite_passes() -> None:
    """Every default case should pass."""
    summary: SuiteSummary = _suite().run()
    assert summary.tests_run == 6
    assert summary.tests_passed == 6
    assert summary.tests_failed == 0
    assert summary.all_passed()


def test_exact_block_case_uses_configured_block() -> None:
    """A different SPD block should still reconstruct exactly."""
    params: CholeskyParams = CholeskyParams.defaults().replace(
        structured=dataclasses.replace(
            CholeskyParams.defaults().structured,
            exact_block=np.array([[9.0, 3.0], [3.0, 5.0]]),
        )
    )
    result: CaseResult = _suite(params).exact_block_case()
    assert result.passed


def test_rejected_input_fails_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """A decomposition error should fail the case with its status code."""
    monkeypatch.setattr(cholesky_32x32, "CHOLESKY_EPSILON", 4.0)
    result: CaseResult = _suite().identity_case()
    assert not result.passed
    assert result.message == "error code 2"


def test_fuzz_failures_are_counted(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every failing iteration should be tallied."""
    monkeypatch.setattr(cholesky_32x32, "CHOLESKY_EPSILON", 1e6)
    params: CholeskyParams = CholeskyParams.defaults().replace(
        fuzz=dataclasses.replace(CholeskyParams.defaults().fuzz, iterations=3)
    )
    result: CaseResult = _suite(params).multiple_random_case()
    assert not result.passed
    assert result.message == "3/3 iterations failed"


def test_summary_counts_failures() -> None:
    """Summary tallies should track failed results."""
    summary: SuiteSummary = SuiteSummary()
    summary.results.append(CaseResult("a", True))
    summary.results.append(CaseResult("b", False, "nope"))
    assert summary.tests_run == 2
    assert summary.tests_passed == 1
    assert summary.tests_failed == 1
    assert not summary.all_passed()
