"""
Solver dispatch for replicate generation.

Provides generate() and the two primitives it is built on,
rep_sample_n() and permute_once().
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from typing import Literal

import pandas as pd

from pyinfer.core.compute.rng import SeedLike, make_rng
from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import InputError, ValidationError
from pyinfer.core.validation import REPLICATE_COLUMN, check_min_rows, check_reps
from pyinfer.generate._common import VALID_TYPES
from pyinfer.generate._permute import apply_permutation, permuted_column
from pyinfer.generate._sampling import draw_indices, expand_level_weights, take_blocks
from pyinfer.generate.backends.cpu import CPUGenerateBackend
from pyinfer.generate.design import GenerateDesign
from pyinfer.generate.solution import ReplicateSolution


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu'):
    """Select backend for replicate generation."""
    if backend == 'cpu':
        return CPUGenerateBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _as_dataset(x: InferDataset | pd.DataFrame) -> InferDataset:
    if isinstance(x, InferDataset):
        return x
    return InferDataset.from_dataframe(x)


def generate(
    x: InferDataset | pd.DataFrame,
    reps: int = 1,
    type: str = "bootstrap",
    *,
    seed: SeedLike = None,
    backend: BackendChoice = 'cpu',
):
    """
    Generate resamples, permutations, or simulations of a dataset.

    Parameters
    ----------
    x : InferDataset or DataFrame
        Data to replicate, usually the output of hypothesize().
        DataFrames are wrapped with default roles.
    reps : int
        Number of replicates. Default 1.
    type : str
        "bootstrap" (default): resample n rows with replacement.
        "permute": shuffle one column per the attached null
        ('equal means' or 'independence').
        "simulate": draw n rows with replacement weighted by the
        probabilities of a 'point' null (single categorical column).
        Any other value returns x unchanged with a warning.
    seed : int, Generator, or None
        Random seed. The same integer reproduces the same replicates.
    backend : str
        'cpu' (default).

    Returns
    -------
    ReplicateSolution
        Long-format replicates tagged by a 'replicate' column, with the
        input's roles and hypothesis carried over unchanged.

    Raises
    ------
    InputError
        Bad reps, or data with the wrong columns for the type.
    MissingMetadataError
        permute/simulate without a hypothesis.
    UnsupportedOperationError
        permute under a null that has no permutation rule.
    """
    if type not in VALID_TYPES:
        warnings.warn(
            f"Unknown generation type {type!r}; returning the data unchanged. "
            f"Valid types: {VALID_TYPES}",
            UserWarning,
            stacklevel=2,
        )
        return x

    dataset = _as_dataset(x)
    design = GenerateDesign.for_generate(dataset, reps, type, seed=seed)

    be = _get_backend(backend)
    result = be.solve(design)
    return ReplicateSolution(_result=result, _design=design)


def rep_sample_n(
    data: InferDataset | pd.DataFrame,
    size: int,
    replace: bool = False,
    reps: int = 1,
    weights: Sequence[float] | Mapping | None = None,
    *,
    seed: SeedLike = None,
) -> pd.DataFrame:
    """
    Draw reps samples of size rows from data.

    Parameters
    ----------
    data : InferDataset or DataFrame
        Rows to sample from.
    size : int
        Rows per sample.
    replace : bool
        Sample with replacement. Default False.
    reps : int
        Number of samples. Default 1.
    weights : sequence or mapping, optional
        Weight of each level of the data's single categorical column,
        in level order or keyed by level. Each row is drawn with
        probability proportional to its level's weight. Only valid for
        single-column data.
    seed : int, Generator, or None
        Random seed.

    Returns
    -------
    DataFrame
        The samples stacked in order, with a leading 'replicate' column
        (1..reps, each repeated size times).

    Raises
    ------
    InputError
        Bad size or reps, size > n without replacement, or weights on
        data that is not a single categorical column.
    """
    frame = data.variables if isinstance(data, InferDataset) else data.reset_index(drop=True)
    if REPLICATE_COLUMN in frame.columns:
        raise InputError(
            f"data already has a {REPLICATE_COLUMN!r} column", columns=(REPLICATE_COLUMN,),
        )
    size = check_reps(size, 'size')
    reps = check_reps(reps)
    check_min_rows(frame, 1, 'data')

    p = None if weights is None else expand_level_weights(frame, weights)
    rng = make_rng(seed)
    indices = draw_indices(len(frame), size, replace, reps, rng, p=p)
    return take_blocks(frame, indices, reps, size)


def permute_once(x: InferDataset, *, seed: SeedLike = None) -> InferDataset:
    """
    One full permutation of a dataset under its attached null.

    'equal means' shuffles the numeric response; 'independence'
    shuffles the response. All other columns stay in place.

    Raises
    ------
    MissingMetadataError
        No hypothesis attached.
    UnsupportedOperationError
        The attached null has no permutation rule.
    """
    if not isinstance(x, InferDataset):
        raise ValidationError(
            f"permute_once needs an InferDataset with a hypothesis, got {type(x).__name__}"
        )
    column = permuted_column(x)
    rng = make_rng(seed)
    order = rng.permutation(x.n_observations)
    return x.with_data(apply_permutation(x.data, column, order))
