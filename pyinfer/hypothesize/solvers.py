"""
hypothesize(): attach a validated null hypothesis to a dataset.

Only the declaration is checked here. How the null is used (which
column to shuffle, which probabilities to draw with) is decided by
generate().
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import InputError, ValidationError
from pyinfer.core.validation import check_categorical
from pyinfer.hypothesize._common import (
    NullHypothesis, NullType, P_SUM_TOLERANCE, VALID_NULLS,
)


def _as_dataset(x: InferDataset | pd.DataFrame) -> InferDataset:
    if isinstance(x, InferDataset):
        return x
    return InferDataset.from_dataframe(x)


def _parse_null(null: str | NullType) -> NullType:
    try:
        return NullType(null)
    except ValueError:
        raise ValidationError(
            f"null must be one of {VALID_NULLS}, got {null!r}"
        ) from None


def _point_probabilities(
    p: Sequence[float] | Mapping | None,
    levels: list,
) -> tuple[float, ...]:
    """Align p with levels and validate it as a probability vector."""
    if p is None:
        raise ValidationError("null='point' requires probabilities p")

    if isinstance(p, Mapping):
        unknown = [k for k in p if k not in levels]
        if unknown:
            raise ValidationError(
                f"p names levels {unknown} not present in response levels {levels}"
            )
        missing = [lv for lv in levels if lv not in p]
        if missing:
            raise ValidationError(f"p is missing levels {missing}")
        values = [p[lv] for lv in levels]
    else:
        values = list(p)

    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1 or len(arr) != len(levels):
        raise ValidationError(
            f"p must have one probability per level ({len(levels)}: {levels}), "
            f"got {len(values)}"
        )
    if not np.all(np.isfinite(arr)) or np.any(arr < 0) or np.any(arr > 1):
        raise ValidationError(f"p values must lie in [0, 1], got {values}")
    if abs(arr.sum() - 1.0) > P_SUM_TOLERANCE:
        raise ValidationError(f"p must sum to 1, got {arr.sum():.10g}")
    return tuple(float(v) for v in arr)


def hypothesize(
    x: InferDataset | pd.DataFrame,
    null: str | NullType,
    *,
    p: Sequence[float] | Mapping | None = None,
    **levels_p: float,
) -> InferDataset:
    """
    Declare a null hypothesis for a dataset.

    Parameters
    ----------
    x : InferDataset or DataFrame
        Data to annotate. DataFrames are wrapped with default roles.
    null : str
        "equal means", "independence", or "point".
    p : sequence or mapping, optional
        For ``point``: probability of each response level, in level
        order, or a mapping level -> probability.
    **levels_p
        Alternative spelling ``p1=0.25, p2=0.75`` for point nulls.

    Returns
    -------
    InferDataset
        A copy with the hypothesis attached; the rows are untouched.

    Raises
    ------
    ValidationError
        Unknown null, malformed probabilities, or probabilities
        supplied for a non-point null.
    InputError
        Point null on a non-categorical response, or a two-variable
        null on single-variable data.
    """
    ds = _as_dataset(x)
    null_type = _parse_null(null)

    if levels_p:
        if p is not None:
            raise ValidationError("give probabilities either as p= or as p1=, p2=, not both")
        bad = [k for k in levels_p if not (k.startswith('p') and k[1:].isdigit())]
        if bad:
            raise ValidationError(f"unexpected keyword arguments: {bad}")
        p = [levels_p[k] for k in sorted(levels_p, key=lambda k: int(k[1:]))]

    if null_type is NullType.POINT:
        response = check_categorical(ds.data, ds.response)
        levels = list(response.cat.categories)
        probs = _point_probabilities(p, levels)
        return ds.with_hypothesis(
            NullHypothesis(null=null_type, p=probs, levels=tuple(levels))
        )

    if p is not None:
        raise ValidationError(f"probabilities are only used with null='point', got null={null_type.value!r}")
    if ds.explanatory is None:
        raise InputError(
            f"null={null_type.value!r} needs a response and an explanatory variable, "
            f"got only {ds.response!r}",
            columns=ds.columns,
        )
    return ds.with_hypothesis(NullHypothesis(null=null_type))
