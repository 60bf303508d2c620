################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the correctness suite configuration wrapper."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from oasis_cholesky.config.cholesky_config import CholeskyConfig
from oasis_cholesky.config.cholesky_config import CholeskyConfigError
from oasis_cholesky.config.cholesky_params import CholeskyParams


def test_defaults_construct() -> None:
    """Default parameters should construct a CholeskyConfig."""
    CholeskyConfig(CholeskyParams.defaults())


def test_params_error_wrapped() -> None:
    """Parameter errors should surface as config errors."""
    params: CholeskyParams = CholeskyParams.defaults().replace(
        fuzz=dataclasses.replace(CholeskyParams.defaults().fuzz, iterations=-1)
    )
    with pytest.raises(CholeskyConfigError):
        CholeskyConfig(params)


def test_exact_tolerance_above_general() -> None:
    """The exact tolerance must not be looser than the general one."""
    params: CholeskyParams = CholeskyParams.defaults().replace(
        tolerance=dataclasses.replace(
            CholeskyParams.defaults().tolerance, exact=1e-6
        )
    )
    with pytest.raises(CholeskyConfigError):
        CholeskyConfig(params)


def test_block_must_be_spd() -> None:
    """Asymmetric or indefinite blocks should raise an error."""
    for block in (
        np.array([[4.0, 1.0], [2.0, 4.0]]),
        np.array([[1.0, 2.0], [2.0, 1.0]]),
    ):
        params: CholeskyParams = CholeskyParams.defaults().replace(
            structured=dataclasses.replace(
                CholeskyParams.defaults().structured, exact_block=block
            )
        )
        with pytest.raises(CholeskyConfigError):
            CholeskyConfig(params)


def test_accessors() -> None:
    """Accessor methods should return expected values."""
    params: CholeskyParams = CholeskyParams.defaults()
    config: CholeskyConfig = CholeskyConfig(params)

    assert config.general_tolerance() == params.tolerance.general
    assert config.exact_tolerance() == params.tolerance.exact
    assert config.fuzz_seeds() == list(range(1000, 1010))
