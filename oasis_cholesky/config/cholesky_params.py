################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the Cholesky correctness suite."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any

import numpy as np


# Reconstruction tolerance for general SPD matrices
TOLERANCE_GENERAL: float = 1e-9
# Reconstruction tolerance for matrices with exact rational factors
TOLERANCE_EXACT: float = 1e-10

# Seed for the single random SPD case
SEED_RANDOM_SPD: int = 12345
# Seed for the lower-triangular property case
SEED_LOWER_TRIANGULAR: int = 9999

# Number of independently seeded random matrices
FUZZ_ITERATIONS: int = 10
# Seed of the first random matrix, later ones count up from here
FUZZ_BASE_SEED: int = 1000

# Step between consecutive diagonal entries of the diagonal case
DIAGONAL_STEP: float = 2.0

# 2x2 SPD block tiled along the diagonal of the exact case
EXACT_BLOCK: np.ndarray = np.array([[4.0, 1.0], [1.0, 4.0]], dtype=np.float64)


class CholeskyParamsError(Exception):
    """Raised when suite parameter validation fails."""


def _as_block(value: Any, name: str) -> np.ndarray:
    """Coerce a value to a finite float64 numpy array with shape (2, 2)."""
    array: np.ndarray = np.asarray(value, dtype=np.float64)
    if array.shape != (2, 2):
        raise CholeskyParamsError(f"{name} must have shape (2, 2)")
    if not np.all(np.isfinite(array)):
        raise CholeskyParamsError(f"{name} must contain finite values")
    return array


def _require_positive(value: float, name: str) -> None:
    """Require a finite, positive value."""
    if not np.isfinite(value) or value <= 0.0:
        raise CholeskyParamsError(f"{name} must be positive")


def _require_seed(value: int, name: str) -> None:
    """Require a non-negative integer seed."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise CholeskyParamsError(f"{name} must be an int")
    if value < 0:
        raise CholeskyParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Element-wise tolerances used when comparing L x L^T with A."""

    # Tolerance for general SPD matrices
    general: float = TOLERANCE_GENERAL
    # Tolerance for matrices with exact low-rational factors
    exact: float = TOLERANCE_EXACT


@dataclass(frozen=True)
class SeedParams:
    """Seeds for the single-matrix random cases."""

    # Seed for the random SPD case
    random_spd: int = SEED_RANDOM_SPD
    # Seed for the lower-triangular property case
    lower_triangular: int = SEED_LOWER_TRIANGULAR


@dataclass(frozen=True)
class FuzzParams:
    """Repeated random-matrix case parameters."""

    # Number of random matrices to decompose
    iterations: int = FUZZ_ITERATIONS
    # Seed of the first random matrix
    base_seed: int = FUZZ_BASE_SEED


@dataclass(frozen=True)
class StructuredParams:
    """Inputs for the cases with a closed-form factor."""

    # Step between consecutive diagonal entries
    diagonal_step: float = DIAGONAL_STEP
    # 2x2 block tiled along the diagonal
    exact_block: np.ndarray = field(default_factory=lambda: EXACT_BLOCK.copy())

    def __post_init__(self) -> None:
        """Coerce the block into a float64 numpy array."""
        object.__setattr__(
            self,
            "exact_block",
            _as_block(self.exact_block, "structured.exact_block"),
        )


@dataclass(frozen=True)
class CholeskyParams:
    """Complete configuration tree for the correctness suite."""

    tolerance: ToleranceParams
    seeds: SeedParams
    fuzz: FuzzParams
    structured: StructuredParams

    @classmethod
    def defaults(cls) -> CholeskyParams:
        """Return the default suite parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            seeds=SeedParams(),
            fuzz=FuzzParams(),
            structured=StructuredParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.tolerance.general, "tolerance.general")
        _require_positive(self.tolerance.exact, "tolerance.exact")

        _require_seed(self.seeds.random_spd, "seeds.random_spd")
        _require_seed(self.seeds.lower_triangular, "seeds.lower_triangular")

        if not isinstance(self.fuzz.iterations, int) or isinstance(
            self.fuzz.iterations, bool
        ):
            raise CholeskyParamsError("fuzz.iterations must be an int")
        if self.fuzz.iterations <= 0:
            raise CholeskyParamsError("fuzz.iterations must be positive")
        _require_seed(self.fuzz.base_seed, "fuzz.base_seed")

        _require_positive(self.structured.diagonal_step, "structured.diagonal_step")

    def replace(self, **namespace_overrides: Any) -> CholeskyParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses and numpy arrays into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value
