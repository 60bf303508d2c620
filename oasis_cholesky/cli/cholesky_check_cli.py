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
Entry point for running the Cholesky correctness suite.
"""

import argparse
import logging
import sys
from typing import Optional
from typing import Sequence

from oasis_cholesky.config.cholesky_config import CholeskyConfig
from oasis_cholesky.config.cholesky_config import CholeskyConfigError
from oasis_cholesky.config.cholesky_params import CholeskyParams
from oasis_cholesky.config.cholesky_params import FuzzParams
from oasis_cholesky.config.cholesky_params import ToleranceParams
from oasis_cholesky.suite.correctness_suite import CorrectnessSuite
from oasis_cholesky.suite.correctness_suite import SuiteSummary


_LOG: logging.Logger = logging.getLogger(__name__)


################################################################################
# Command-line entry point
################################################################################


def _parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults: CholeskyParams = CholeskyParams.defaults()

    parser = argparse.ArgumentParser(
        description="Run the 32x32 Cholesky decomposition correctness suite"
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=defaults.tolerance.general,
        help="Reconstruction tolerance for general SPD matrices",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=defaults.fuzz.iterations,
        help="Number of random SPD matrices in the repeated case",
    )
    parser.add_argument(
        "--base-seed",
        type=int,
        default=defaults.fuzz.base_seed,
        help="Seed of the first random SPD matrix in the repeated case",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log rejected inputs and check details",
    )
    return parser.parse_args(args=args)


def _build_config(options: argparse.Namespace) -> CholeskyConfig:
    defaults: CholeskyParams = CholeskyParams.defaults()
    params: CholeskyParams = defaults.replace(
        tolerance=ToleranceParams(
            general=options.tolerance,
            exact=min(defaults.tolerance.exact, options.tolerance),
        ),
        fuzz=FuzzParams(iterations=options.iterations, base_seed=options.base_seed),
    )
    return CholeskyConfig(params)


def main(args: Optional[Sequence[str]] = None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config: CholeskyConfig = _build_config(options)
    except CholeskyConfigError as exc:
        _LOG.error("Invalid configuration: %s", exc)
        return 2

    _LOG.info("=== Cholesky Decomposition Correctness Tests ===")

    summary: SuiteSummary = CorrectnessSuite(config).run()

    _LOG.info("=== Test Summary ===")
    _LOG.info("Tests run: %d", summary.tests_run)
    _LOG.info("Tests passed: %d", summary.tests_passed)
    _LOG.info("Tests failed: %d", summary.tests_failed)

    return 0 if summary.all_passed() else 1


if __name__ == "__main__":
    sys.exit(main())
