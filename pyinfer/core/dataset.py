"""
InferDataset: a table plus the roles and hypothesis inference needs.

InferDataset pairs a pandas DataFrame with its column roles (response,
optional explanatory) and an optional NullHypothesis. Roles are resolved
once, at construction, so downstream stages never re-derive them by
scanning column types.

Usage:
    from pyinfer import InferDataset, hypothesize

    ds = InferDataset.from_dataframe(mtcars[['mpg', 'am']])
    ds.response      # 'mpg'  (the only numeric column)
    ds.explanatory   # 'am'

    ds = hypothesize(ds, null='equal means')
    ds.hypothesis    # NullHypothesis(null=NullType.EQUAL_MEANS, ...)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, TYPE_CHECKING

import pandas as pd

from pyinfer.core.exceptions import InputError, ValidationError
from pyinfer.core.validation import (
    REPLICATE_COLUMN, check_column, group_levels, is_numeric,
)

if TYPE_CHECKING:
    from pyinfer.hypothesize._common import NullHypothesis


@dataclass(frozen=True, eq=False)
class InferDataset:
    """
    Immutable table with resolved column roles.

    Construct via factory classmethods, not directly.

    Attributes:
        data: The rows. May carry a leading 'replicate' column.
        response: Name of the response variable.
        explanatory: Name of the grouping variable, or None.
        hypothesis: Attached null hypothesis, or None.
        explanatory_levels: Levels of a non-numeric explanatory column,
            fixed from the data the dataset was built from. Replicates
            keep them even when a resample misses a group.
    """
    data: pd.DataFrame
    response: str
    explanatory: str | None = None
    hypothesis: NullHypothesis | None = None
    explanatory_levels: tuple | None = None

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """Names of all variable columns (excluding 'replicate')."""
        return frozenset(c for c in self.data.columns if c != REPLICATE_COLUMN)

    def __getitem__(self, key: str) -> pd.Series:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, listing available columns
        """
        if key not in self.data.columns:
            raise KeyError(
                f"InferDataset has no column '{key}'. Available: {sorted(self.keys())}"
            )
        return self.data[key]

    def __contains__(self, key: str) -> bool:
        return key in self.data.columns

    def __len__(self) -> int:
        return len(self.data)

    # === Properties ===

    @property
    def columns(self) -> tuple[str, ...]:
        """Variable columns in order, excluding 'replicate'."""
        return tuple(c for c in self.data.columns if c != REPLICATE_COLUMN)

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return len(self.data)

    @property
    def has_replicates(self) -> bool:
        return REPLICATE_COLUMN in self.data.columns

    @property
    def variables(self) -> pd.DataFrame:
        """The data without the 'replicate' column."""
        if self.has_replicates:
            return self.data.drop(columns=REPLICATE_COLUMN)
        return self.data

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n_observations': self.n_observations,
            'columns': list(self.columns),
            'response': self.response,
            'explanatory': self.explanatory,
            'explanatory_levels': self.explanatory_levels,
            'null': None if self.hypothesis is None else self.hypothesis.null.value,
        }

    # === Derivation ===

    def with_hypothesis(self, hypothesis: NullHypothesis | None) -> InferDataset:
        """Copy with a different hypothesis attached."""
        return replace(self, hypothesis=hypothesis)

    def with_data(self, data: pd.DataFrame) -> InferDataset:
        """Copy with new rows, keeping roles and hypothesis."""
        return replace(self, data=data)

    # === Factory Methods ===

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        *,
        response: str | None = None,
        explanatory: str | None = None,
    ) -> InferDataset:
        """
        Construct from a pandas DataFrame, resolving column roles.

        Explicit names win. Otherwise:
            - one column: it is the response
            - two columns, exactly one numeric: the numeric one is the
              response and the other the explanatory variable
            - otherwise: first column is the response, second the
              explanatory variable

        Args:
            df: Input table. Not modified.
            response: Response column name.
            explanatory: Grouping column name.

        Raises:
            ValidationError: If df is not a DataFrame
            InputError: If it has no variable columns, or a named
                column is missing
        """
        if not isinstance(df, pd.DataFrame):
            raise ValidationError(
                f"expected a pandas DataFrame, got {type(df).__name__}"
            )
        data = df.reset_index(drop=True)
        columns = [c for c in data.columns if c != REPLICATE_COLUMN]
        if not columns:
            raise InputError("data has no variable columns")

        if response is None:
            response, inferred = cls._resolve_roles(data, columns)
            if explanatory is None:
                explanatory = inferred
        check_column(data, response)
        if explanatory is not None:
            check_column(data, explanatory)
            if explanatory == response:
                raise InputError(
                    f"response and explanatory must differ, both are {response!r}",
                    columns=(response,),
                )

        levels = None
        if explanatory is not None and not is_numeric(data[explanatory]):
            levels = tuple(group_levels(data[explanatory]))
        return cls(
            data=data,
            response=response,
            explanatory=explanatory,
            explanatory_levels=levels,
        )

    @classmethod
    def from_columns(cls, **columns: Any) -> InferDataset:
        """
        Construct from named columns, in keyword order.

        Example:
            >>> InferDataset.from_columns(x=[1.0, 2.0, 3.0])
        """
        return cls.from_dataframe(pd.DataFrame(columns))

    @staticmethod
    def _resolve_roles(data: pd.DataFrame, columns: list[str]) -> tuple[str, str | None]:
        if len(columns) == 1:
            return columns[0], None
        if len(columns) == 2:
            numeric = [c for c in columns if is_numeric(data[c])]
            if len(numeric) == 1:
                other = columns[1] if numeric[0] == columns[0] else columns[0]
                return numeric[0], other
        return columns[0], columns[1]

    def __repr__(self) -> str:
        null = None if self.hypothesis is None else self.hypothesis.null.value
        return (
            f"InferDataset(n={self.n_observations}, response={self.response!r}, "
            f"explanatory={self.explanatory!r}, null={null!r})"
        )
