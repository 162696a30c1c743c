"""
Null-hypothesis permutation rules.

Which column gets shuffled depends on the declared null:

    equal means    shuffle the (numeric) response across rows
    independence   shuffle the response across rows

Both break any association between response and group while keeping
each column's values intact. Every other null has no permutation rule
and is rejected.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import MissingMetadataError, UnsupportedOperationError
from pyinfer.core.validation import check_numeric
from pyinfer.hypothesize._common import NullType


def permuted_column(dataset: InferDataset) -> str:
    """
    Name of the column the attached null says to shuffle.

    Raises:
        MissingMetadataError: No hypothesis attached
        InputError: 'equal means' with a non-numeric response
        UnsupportedOperationError: A null without a permutation rule
    """
    hypothesis = dataset.hypothesis
    if hypothesis is None:
        raise MissingMetadataError(
            "permutation requires a null hypothesis; call hypothesize() first",
            operation='permute',
        )

    if hypothesis.null is NullType.EQUAL_MEANS:
        check_numeric(dataset.data, dataset.response)
        return dataset.response
    elif hypothesis.null is NullType.INDEPENDENCE:
        return dataset.response
    else:
        raise UnsupportedOperationError(
            f"no permutation rule for null={hypothesis.null.value!r}; "
            f"use 'equal means' or 'independence'",
            operation='permute',
            value=hypothesis.null.value,
        )


def apply_permutation(data: pd.DataFrame, column: str, order: NDArray[np.intp]) -> pd.DataFrame:
    """Copy of data with column reordered by order; other columns fixed."""
    out = data.reset_index(drop=True).copy()
    out[column] = out[column].iloc[order].reset_index(drop=True)
    return out
