"""
Solver dispatch for statistic calculation.

Provides calculate(), which reduces each replicate of generate() output
(or a plain dataset, as a single replicate) to a statistic.
"""

from __future__ import annotations

from typing import Literal

import pandas as pd

from pyinfer.calculate._common import StatName
from pyinfer.calculate.backends.cpu import CPUCalculateBackend
from pyinfer.calculate.design import CalculateDesign
from pyinfer.calculate.solution import StatisticSolution
from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import ValidationError
from pyinfer.generate.solution import ReplicateSolution


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu'):
    """Select backend for statistic calculation."""
    if backend == 'cpu':
        return CPUCalculateBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _as_dataset(x) -> InferDataset:
    if isinstance(x, ReplicateSolution):
        return x.dataset
    if isinstance(x, InferDataset):
        return x
    if isinstance(x, pd.DataFrame):
        return InferDataset.from_dataframe(x)
    raise ValidationError(
        f"calculate expects generate() output, an InferDataset, or a DataFrame, "
        f"got {type(x).__name__}"
    )


def calculate(
    x: ReplicateSolution | InferDataset | pd.DataFrame,
    stat: StatName,
    *,
    order=None,
    backend: BackendChoice = 'cpu',
) -> StatisticSolution:
    """
    Calculate a statistic for every replicate.

    Parameters
    ----------
    x : ReplicateSolution, InferDataset, or DataFrame
        Output of generate(), or data without a 'replicate' column,
        which is reduced as a single replicate (the observed statistic).
    stat : str
        "mean": mean of the single numeric column.
        "prop": fraction of the single categorical column equal to its
        first level.
        "diff in means": difference in response means between the two
        groups of the explanatory column.
        "diff in props": difference in the proportion of the response's
        first level between the two groups.
        "Chisq" and "F" are recognized but not implemented.
    order : pair, optional
        Group levels for difference statistics; the result is
        order[0] minus order[1]. Defaults to level order.
    backend : str
        'cpu' (default).

    Returns
    -------
    StatisticSolution
        One row per replicate.

    Raises
    ------
    UnsupportedOperationError
        Chisq, F, or an unknown stat.
    InputError
        Data with the wrong columns or group count for stat.
    """
    dataset = _as_dataset(x)
    design = CalculateDesign.for_calculate(dataset, stat, order=order)

    be = _get_backend(backend)
    result = be.solve(design)
    return StatisticSolution(_result=result, _design=design)
