################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Seeded random generator for symmetric positive definite test matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .matrix32 import Mat32
from .validation import MATRIX_SHAPE


# Half-width of the uniform distribution for factor entries
FACTOR_SPREAD: float = 0.5
# Positive bias added to the diagonal of the factor
DIAGONAL_BIAS: float = 0.5
# Smallest diagonal entry kept as drawn
DIAGONAL_FLOOR: float = 0.1


def generate_random_lower_factor(seed: int) -> NDArray[np.float64]:
    """Return a random lower-triangular matrix with a positive diagonal.

    Entries on and below the diagonal are uniform in [-0.5, 0.5], with 0.5
    added on the diagonal. A diagonal entry that still falls below 0.1 is
    redrawn as 0.1 + U(0, 1), so every pivot of L @ L.T stays well away from
    zero.
    """
    if seed < 0:
        raise ValueError("seed must be non-negative")
    rng: np.random.Generator = np.random.default_rng(seed)
    samples: NDArray[np.float64] = rng.uniform(-1.0, 1.0, size=MATRIX_SHAPE)
    lower: NDArray[np.float64] = np.tril(samples * FACTOR_SPREAD)
    diag: NDArray[np.float64] = np.diagonal(lower) + DIAGONAL_BIAS

    for i in range(diag.shape[0]):
        if diag[i] < DIAGONAL_FLOOR:
            diag[i] = DIAGONAL_FLOOR + rng.uniform(0.0, 1.0)

    np.fill_diagonal(lower, diag)
    return lower


def generate_random_spd_matrix(seed: int) -> NDArray[np.float64]:
    """Return a reproducible random SPD matrix A = L @ L.T."""
    lower: NDArray[np.float64] = generate_random_lower_factor(seed)
    return Mat32.multiply(lower, Mat32.transpose(lower))
