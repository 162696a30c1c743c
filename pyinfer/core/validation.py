"""
Input validation utilities for pyinfer.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion of columns
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Column names included in all error messages
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from pyinfer.core.exceptions import InputError


REPLICATE_COLUMN = 'replicate'


def is_categorical(series: pd.Series) -> bool:
    """True if the column is a pandas Categorical (an R factor)."""
    return isinstance(series.dtype, pd.CategoricalDtype)


def is_numeric(series: pd.Series) -> bool:
    """True for numeric columns. Booleans and categoricals are not numeric."""
    if is_categorical(series) or pd.api.types.is_bool_dtype(series.dtype):
        return False
    return pd.api.types.is_numeric_dtype(series.dtype)


def check_reps(reps: int, name: str = 'reps') -> int:
    """
    Verify a replicate count is a positive integer.

    Args:
        reps: Replicate count
        name: Parameter name for error messages

    Returns:
        reps as a Python int

    Raises:
        InputError: If reps is not an integer or is < 1
    """
    if isinstance(reps, bool) or not isinstance(reps, (int, np.integer)):
        raise InputError(f"{name} must be an integer, got {type(reps).__name__}")
    if reps < 1:
        raise InputError(f"{name} must be >= 1, got {reps}")
    return int(reps)


def check_column(data: pd.DataFrame, column: str) -> pd.Series:
    """
    Verify a column exists and return it.

    Raises:
        InputError: If the column is missing
    """
    if column not in data.columns:
        raise InputError(
            f"column {column!r} not found. Available: {list(data.columns)}",
            columns=(column,),
        )
    return data[column]


def check_numeric(data: pd.DataFrame, column: str) -> pd.Series:
    """
    Verify a column is numeric.

    Raises:
        InputError: If the column is missing or not numeric
    """
    series = check_column(data, column)
    if not is_numeric(series):
        raise InputError(
            f"{column}: expected a numeric column, got dtype {series.dtype}",
            columns=(column,),
        )
    return series


def check_categorical(data: pd.DataFrame, column: str) -> pd.Series:
    """
    Verify a column is categorical (pandas Categorical dtype).

    Raises:
        InputError: If the column is missing or not categorical
    """
    series = check_column(data, column)
    if not is_categorical(series):
        raise InputError(
            f"{column}: expected a categorical column, got dtype {series.dtype}. "
            f"Convert with df[{column!r}].astype('category').",
            columns=(column,),
        )
    return series


def check_non_numeric(data: pd.DataFrame, column: str) -> pd.Series:
    """
    Verify a column can serve as a group label (anything but numeric).

    Raises:
        InputError: If the column is missing or numeric
    """
    series = check_column(data, column)
    if is_numeric(series):
        raise InputError(
            f"{column}: expected a non-numeric group column, got dtype {series.dtype}",
            columns=(column,),
        )
    return series


def check_single_column(data: pd.DataFrame, context: str) -> str:
    """
    Verify the data has exactly one column besides 'replicate'.

    Args:
        data: DataFrame to check
        context: Operation name for error messages

    Returns:
        The name of that column

    Raises:
        InputError: If there are zero or several such columns
    """
    columns = tuple(c for c in data.columns if c != REPLICATE_COLUMN)
    if len(columns) != 1:
        raise InputError(
            f"{context} requires exactly one variable, got {len(columns)}: {list(columns)}",
            columns=columns,
        )
    return columns[0]


def check_min_rows(data: pd.DataFrame, min_rows: int, name: str) -> None:
    """
    Verify the data has at least min_rows rows.

    Raises:
        InputError: If there are fewer rows
    """
    n = len(data)
    if n < min_rows:
        raise InputError(f"{name}: requires at least {min_rows} rows, got {n}")


def group_levels(series: pd.Series) -> list:
    """
    Levels of a group column in order.

    Categorical columns use their declared categories; other columns use
    their sorted unique values, matching how grouping orders them.
    """
    if is_categorical(series):
        return list(series.cat.categories)
    return sorted(series.dropna().unique().tolist())


def check_two_levels(series: pd.Series, column: str, levels=None) -> list:
    """
    Verify a group column has exactly two levels.

    Args:
        series: The group column.
        column: Its name, for messages.
        levels: Levels fixed when the dataset was built. Taken from
            series when None.

    Returns:
        The two levels in order

    Raises:
        InputError: If the column has a different number of levels
    """
    levels = group_levels(series) if levels is None else list(levels)
    if len(levels) != 2:
        raise InputError(
            f"{column}: difference statistics need exactly 2 groups, "
            f"got {len(levels)}: {levels}",
            columns=(column,),
        )
    return levels
