"""
Design class for replicate generation.

GenerateDesign encapsulates all inputs needed by backends to produce
replicates. Immutable, validated at construction: every precondition
of the requested generation type is checked here, before any sampling.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyinfer.core.compute.rng import SeedLike, check_seed
from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import InputError, MissingMetadataError, ValidationError
from pyinfer.core.validation import (
    REPLICATE_COLUMN, check_categorical, check_min_rows, check_reps,
    check_single_column,
)
from pyinfer.generate._common import VALID_TYPES
from pyinfer.generate._permute import permuted_column
from pyinfer.hypothesize._common import NullType


@dataclass(frozen=True, eq=False)
class GenerateDesign:
    """
    Frozen design for replicate generation.

    Attributes:
        dataset: Input data with roles and (optional) hypothesis.
        reps: Number of replicates.
        type: "bootstrap", "permute", or "simulate".
        seed: Integer seed, Generator, or None.
        permute_column: Column to shuffle (permute only).
    """
    dataset: InferDataset
    reps: int
    type: str
    seed: SeedLike
    permute_column: str | None = None

    @property
    def n(self) -> int:
        return self.dataset.n_observations

    @classmethod
    def for_generate(
        cls,
        dataset: InferDataset,
        reps: int = 1,
        type: str = "bootstrap",
        *,
        seed: SeedLike = None,
    ) -> GenerateDesign:
        """
        Create a generation design with validation.

        Args:
            dataset: Data to replicate. Must not already contain a
                'replicate' column.
            reps: Number of replicates. Must be >= 1.
            type: "bootstrap", "permute", or "simulate".
            seed: Random seed.

        Returns:
            Validated GenerateDesign.

        Raises:
            ValidationError: Unknown type or bad seed
            InputError: Bad reps, or data unfit for the type
            MissingMetadataError: permute/simulate without a hypothesis
            UnsupportedOperationError: permute under a null with no rule
        """
        reps = check_reps(reps)
        if type not in VALID_TYPES:
            raise ValidationError(f"type must be one of {VALID_TYPES}, got {type!r}")
        check_seed(seed)

        if dataset.has_replicates:
            raise InputError(
                f"data already has a {REPLICATE_COLUMN!r} column; "
                f"generate from the original data",
                columns=(REPLICATE_COLUMN,),
            )
        check_min_rows(dataset.data, 1, 'data')

        permute_column = None
        if type == "permute":
            permute_column = permuted_column(dataset)
        elif type == "simulate":
            cls._check_simulate(dataset)

        return cls(
            dataset=dataset,
            reps=reps,
            type=type,
            seed=seed,
            permute_column=permute_column,
        )

    @staticmethod
    def _check_simulate(dataset: InferDataset) -> None:
        column = check_single_column(dataset.data, "simulation")
        check_categorical(dataset.data, column)
        hypothesis = dataset.hypothesis
        if hypothesis is None:
            raise MissingMetadataError(
                "simulation requires a point null hypothesis; "
                "call hypothesize(x, null='point', p=...) first",
                operation='simulate',
            )
        if hypothesis.null is not NullType.POINT:
            raise InputError(
                f"simulation draws from a point null, got null={hypothesis.null.value!r}"
            )
