"""
Index sampling primitives.

Every random draw made by generate() comes from the two helpers here,
in replicate order, from a single Generator. A fixed seed therefore
reproduces a whole batch.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pyinfer.core.exceptions import InputError
from pyinfer.core.validation import REPLICATE_COLUMN, check_categorical


def expand_level_weights(
    data: pd.DataFrame,
    weights: Sequence[float] | Mapping,
) -> NDArray[np.float64]:
    """
    Turn per-level weights into normalized per-row probabilities.

    The weights belong to the levels of the (single) categorical column
    of data, in level order or as a level -> weight mapping. Each row
    gets the weight of its level, then the vector is scaled to sum to 1
    so selection probability is proportional to weight.

    Raises:
        InputError: If data has more than one column, the column is not
            categorical, has missing values, or the weights do not fit
            its levels
    """
    columns = [c for c in data.columns if c != REPLICATE_COLUMN]
    if len(columns) != 1:
        raise InputError(
            f"weighted sampling requires a single categorical column, got {len(columns)}: {columns}",
            columns=tuple(columns),
        )
    column = columns[0]
    series = check_categorical(data, column)
    levels = list(series.cat.categories)

    if isinstance(weights, Mapping):
        unknown = [k for k in weights if k not in levels]
        if unknown:
            raise InputError(
                f"weights name levels {unknown} not present in {column!r} levels {levels}",
                columns=(column,),
            )
        level_w = np.array([weights.get(lv, 0.0) for lv in levels], dtype=np.float64)
    else:
        level_w = np.asarray(list(weights), dtype=np.float64)
        if level_w.ndim != 1 or len(level_w) != len(levels):
            raise InputError(
                f"expected one weight per level of {column!r} ({len(levels)}), got {len(level_w)}",
                columns=(column,),
            )

    if not np.all(np.isfinite(level_w)) or np.any(level_w < 0):
        raise InputError(f"weights must be finite and non-negative, got {level_w.tolist()}")

    codes = series.cat.codes.to_numpy()
    if np.any(codes < 0):
        raise InputError(
            f"{column}: {int(np.sum(codes < 0))} missing values cannot be weighted",
            columns=(column,),
        )

    row_w = level_w[codes]
    total = row_w.sum()
    if total <= 0:
        raise InputError("weights give zero total probability to the observed rows")
    return row_w / total


def draw_indices(
    n: int,
    size: int,
    replace: bool,
    reps: int,
    rng: np.random.Generator,
    p: NDArray[np.float64] | None = None,
) -> NDArray[np.intp]:
    """
    Draw reps independent index vectors of length size from range(n).

    Without replacement and with p, each draw removes the chosen index
    and renormalizes the rest (numpy's Generator.choice semantics).

    Returns:
        Concatenated indices, shape (reps * size,), replicate-major.
    """
    if not replace:
        if size > n:
            raise InputError(
                f"cannot take a sample of size {size} from {n} rows without replacement"
            )
        if p is not None and int(np.count_nonzero(p)) < size:
            raise InputError(
                f"only {int(np.count_nonzero(p))} rows have non-zero weight, "
                f"cannot draw {size} without replacement"
            )

    out = np.empty(reps * size, dtype=np.intp)
    for b in range(reps):
        out[b * size:(b + 1) * size] = rng.choice(n, size=size, replace=replace, p=p)
    return out


def draw_permutations(n: int, reps: int, rng: np.random.Generator) -> list[NDArray[np.intp]]:
    """reps independent full permutations of range(n)."""
    return [rng.permutation(n) for _ in range(reps)]


def take_blocks(data: pd.DataFrame, indices: NDArray[np.intp], reps: int, size: int) -> pd.DataFrame:
    """
    Select rows by index and prepend the replicate column.

    Column dtypes (including categorical levels) are preserved.
    """
    out = data.iloc[indices].reset_index(drop=True)
    out.insert(0, REPLICATE_COLUMN, np.repeat(np.arange(1, reps + 1), size))
    return out
