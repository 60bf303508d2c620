################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Named correctness cases for the 32x32 Cholesky decomposer
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import field
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from oasis_cholesky.config.cholesky_config import CholeskyConfig
from oasis_cholesky.decomposition.cholesky_32x32 import CholeskyDecomposer
from oasis_cholesky.decomposition.cholesky_types import MATRIX_SIZE
from oasis_cholesky.decomposition.cholesky_types import CholeskyError
from oasis_cholesky.math_utils.matrix32 import Mat32
from oasis_cholesky.math_utils.spd_generator import generate_random_spd_matrix
from oasis_cholesky.verification.decomposition_check import CheckReport
from oasis_cholesky.verification.decomposition_check import DecompositionCheck


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one named case."""

    name: str
    passed: bool
    message: str | None = None


@dataclass
class SuiteSummary:
    """Tally of the cases executed by a suite run."""

    results: list[CaseResult] = field(default_factory=list)

    @property
    def tests_run(self) -> int:
        return len(self.results)

    @property
    def tests_passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def tests_failed(self) -> int:
        return self.tests_run - self.tests_passed

    def all_passed(self) -> bool:
        """Return True when every executed case passed."""
        return self.tests_failed == 0


class CorrectnessSuite:
    """
    Runs the decomposer over matrices with known properties
    """

    def __init__(self, config: CholeskyConfig) -> None:
        self._config: CholeskyConfig = config

    def cases(self) -> list[tuple[str, Callable[[], CaseResult]]]:
        return [
            ("Identity Matrix", self.identity_case),
            ("Diagonal Matrix", self.diagonal_case),
            ("Random SPD Matrix", self.random_spd_case),
            ("Known Exact Decomposition", self.exact_block_case),
            ("Lower Triangular Property", self.lower_triangular_case),
            (
                f"Multiple Random Matrices ({self._config.params.fuzz.iterations} "
                "iterations)",
                self.multiple_random_case,
            ),
        ]

    def run(self) -> SuiteSummary:
        summary: SuiteSummary = SuiteSummary()
        for index, (label, case) in enumerate(self.cases(), start=1):
            result: CaseResult = case()
            summary.results.append(result)
            if result.passed:
                _LOG.info("Test %d: %s... PASSED", index, label)
            else:
                _LOG.error("Test %d: %s... FAILED (%s)", index, label, result.message)
        return summary

    def identity_case(self) -> CaseResult:
        name: str = "identity"
        A: NDArray[np.float64] = Mat32.identity()
        L: NDArray[np.float64] | CaseResult = self._decompose(name, A)
        if isinstance(L, CaseResult):
            return L

        tol: float = self._config.general_tolerance()
        if not Mat32.compare(A, L, tol):
            return CaseResult(name, False, "L should equal identity")
        return self._checked(name, DecompositionCheck.decomposition(A, L, tol, name))

    def diagonal_case(self) -> CaseResult:
        name: str = "diagonal"
        step: float = self._config.params.structured.diagonal_step
        values: list[float] = [step * (i + 1) for i in range(MATRIX_SIZE)]
        A: NDArray[np.float64] = Mat32.diagonal(values)
        L: NDArray[np.float64] | CaseResult = self._decompose(name, A)
        if isinstance(L, CaseResult):
            return L

        expected: NDArray[np.float64] = Mat32.diagonal(
            [math.sqrt(value) for value in values]
        )
        tol: float = self._config.general_tolerance()
        if not Mat32.compare(L, expected, tol):
            error: float
            row: int
            col: int
            error, row, col = Mat32.max_abs_error(L, expected)
            return CaseResult(
                name, False, f"L[{row}][{col}] is off by {error:e} from sqrt(D)"
            )
        return self._checked(name, DecompositionCheck.reconstruction(A, L, tol, name))

    def random_spd_case(self) -> CaseResult:
        name: str = "random SPD"
        A: NDArray[np.float64] = generate_random_spd_matrix(
            self._config.params.seeds.random_spd
        )
        L: NDArray[np.float64] | CaseResult = self._decompose(name, A)
        if isinstance(L, CaseResult):
            return L
        tol: float = self._config.general_tolerance()
        return self._checked(name, DecompositionCheck.decomposition(A, L, tol, name))

    def exact_block_case(self) -> CaseResult:
        name: str = "known exact decomposition"
        A: NDArray[np.float64] = Mat32.block_diagonal(
            self._config.params.structured.exact_block
        )
        L: NDArray[np.float64] | CaseResult = self._decompose(name, A)
        if isinstance(L, CaseResult):
            return L
        tol: float = self._config.exact_tolerance()
        return self._checked(name, DecompositionCheck.reconstruction(A, L, tol, name))

    def lower_triangular_case(self) -> CaseResult:
        name: str = "lower triangular property"
        A: NDArray[np.float64] = generate_random_spd_matrix(
            self._config.params.seeds.lower_triangular
        )
        L: NDArray[np.float64] | CaseResult = self._decompose(name, A)
        if isinstance(L, CaseResult):
            return L
        tol: float = self._config.general_tolerance()
        return self._checked(name, DecompositionCheck.lower_triangular(L, tol, name))

    def multiple_random_case(self) -> CaseResult:
        name: str = "multiple random matrices"
        seeds: list[int] = self._config.fuzz_seeds()
        failed_count: int = 0
        for iteration, seed in enumerate(seeds):
            A: NDArray[np.float64] = generate_random_spd_matrix(seed)
            L: NDArray[np.float64] | CaseResult = self._decompose(
                f"{name} #{iteration}", A
            )
            if isinstance(L, CaseResult):
                failed_count += 1
                continue
            report: CheckReport = DecompositionCheck.reconstruction(
                A, L, self._config.general_tolerance(), name
            )
            if not report.passed:
                failed_count += 1

        if failed_count > 0:
            return CaseResult(
                name, False, f"{failed_count}/{len(seeds)} iterations failed"
            )
        return CaseResult(name, True)

    @staticmethod
    def _decompose(
        name: str, A: NDArray[np.float64]
    ) -> NDArray[np.float64] | CaseResult:
        try:
            return CholeskyDecomposer.decompose(A)
        except CholeskyError as exc:
            _LOG.warning("%s: decomposition rejected input, %s", name, exc)
            return CaseResult(name, False, f"error code {int(exc.status)}")

    @staticmethod
    def _checked(name: str, report: CheckReport) -> CaseResult:
        if report.passed:
            return CaseResult(name, True)
        return CaseResult(name, False, "verification failed")
