"""
pyinfer: simulation-based statistical inference for tabular data.

Declare a null hypothesis, generate bootstrap resamples, permutations,
or simulations of a dataset, and reduce each replicate to a statistic.

Usage:
    from pyinfer import InferDataset, hypothesize, generate, calculate

    ds = InferDataset.from_dataframe(df[['mpg', 'am']])
    diffs = calculate(
        generate(hypothesize(ds, null='equal means'), reps=1000,
                 type='permute', seed=42),
        stat='diff in means',
    )

Submodules:
    hypothesize: Null hypothesis declaration
    generate: Replicate generation (bootstrap, permute, simulate)
    calculate: Per-replicate statistics
"""

__version__ = "0.1.0"

from pyinfer.core import (
    InferDataset,
    PyInferError,
    ValidationError,
    InputError,
    MissingMetadataError,
    UnsupportedOperationError,
)
from pyinfer.hypothesize import hypothesize, NullHypothesis, NullType
from pyinfer.generate import generate, rep_sample_n, permute_once, ReplicateSolution
from pyinfer.calculate import calculate, StatisticSolution

__all__ = [
    "__version__",
    "InferDataset",
    "hypothesize",
    "generate",
    "rep_sample_n",
    "permute_once",
    "calculate",
    "NullHypothesis",
    "NullType",
    "ReplicateSolution",
    "StatisticSolution",
    "PyInferError",
    "ValidationError",
    "InputError",
    "MissingMetadataError",
    "UnsupportedOperationError",
]
