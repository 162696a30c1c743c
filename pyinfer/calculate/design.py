"""
CalculateDesign: validated inputs for statistic calculation.

Resolves, once, which columns a statistic reduces and in which group
order, and rejects data that does not fit before any reduction runs.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pyinfer.calculate._common import (
    DIFFERENCE_STATS, UNSUPPORTED_STATS, VALID_STATS,
)
from pyinfer.core.dataset import InferDataset
from pyinfer.core.exceptions import InputError, UnsupportedOperationError
from pyinfer.core.validation import (
    REPLICATE_COLUMN, check_categorical, check_min_rows, check_non_numeric,
    check_numeric, check_single_column, check_two_levels,
)


@dataclass(frozen=True, eq=False)
class CalculateDesign:
    """
    Frozen design for statistic calculation.

    Attributes:
        dataset: Replicate-grouped data. Always has a 'replicate' column;
            plain data is treated as replicate 1.
        stat: Statistic name.
        response: Column the statistic is computed on.
        group: Group column for difference statistics, else None.
        order: The two group levels (first minus second), else None.
        success: Level counted as a success for proportions, else None.
    """
    dataset: InferDataset
    stat: str
    response: str
    group: str | None = None
    order: tuple | None = None
    success: object = None

    @property
    def data(self):
        return self.dataset.data

    @classmethod
    def for_calculate(
        cls,
        dataset: InferDataset,
        stat: str,
        *,
        order=None,
    ) -> CalculateDesign:
        """
        Create a calculation design with validation.

        Args:
            dataset: Replicate-grouped data, or plain data.
            stat: "mean", "prop", "diff in means", or "diff in props".
            order: Optional pair of group levels for difference
                statistics; the result is order[0] minus order[1].

        Returns:
            Validated CalculateDesign.

        Raises:
            UnsupportedOperationError: Chisq, F, or an unknown stat
            InputError: Data with the wrong columns for stat
        """
        if stat in UNSUPPORTED_STATS:
            raise UnsupportedOperationError(
                f"stat={stat!r} is not implemented",
                operation='calculate',
                value=stat,
            )
        if stat not in VALID_STATS:
            raise UnsupportedOperationError(
                f"unknown stat {stat!r}; supported: {VALID_STATS}",
                operation='calculate',
                value=stat,
            )
        if order is not None and stat not in DIFFERENCE_STATS:
            raise InputError(f"order only applies to difference statistics, got stat={stat!r}")

        if not dataset.has_replicates:
            data = dataset.data.copy()
            data.insert(0, REPLICATE_COLUMN, np.ones(len(data), dtype=np.int64))
            dataset = dataset.with_data(data)
        data = dataset.data
        check_min_rows(data, 1, 'data')

        if stat == 'mean':
            column = check_single_column(data, stat)
            check_numeric(data, column)
            return cls(dataset=dataset, stat=stat, response=column)

        elif stat == 'prop':
            column = check_single_column(data, stat)
            series = check_categorical(data, column)
            return cls(
                dataset=dataset,
                stat=stat,
                response=column,
                success=cls._first_level(series, column),
            )

        elif stat == 'diff in means':
            group = cls._group_column(dataset, stat)
            check_numeric(data, dataset.response)
            group_series = check_non_numeric(data, group)
            return cls(
                dataset=dataset,
                stat=stat,
                response=dataset.response,
                group=group,
                order=cls._resolve_order(
                    group_series, group, order, dataset.explanatory_levels,
                ),
            )

        elif stat == 'diff in props':
            group = cls._group_column(dataset, stat)
            series = check_categorical(data, dataset.response)
            group_series = check_categorical(data, group)
            return cls(
                dataset=dataset,
                stat=stat,
                response=dataset.response,
                group=group,
                order=cls._resolve_order(
                    group_series, group, order, dataset.explanatory_levels,
                ),
                success=cls._first_level(series, dataset.response),
            )

        else:
            raise UnsupportedOperationError(
                f"unknown stat {stat!r}", operation='calculate', value=stat,
            )

    @staticmethod
    def _group_column(dataset: InferDataset, stat: str) -> str:
        if dataset.explanatory is None:
            raise InputError(
                f"{stat} needs a group column; data has only {list(dataset.columns)}",
                columns=dataset.columns,
            )
        return dataset.explanatory

    @staticmethod
    def _first_level(series, column: str):
        levels = list(series.cat.categories)
        if not levels:
            raise InputError(f"{column}: categorical column has no levels", columns=(column,))
        return levels[0]

    @staticmethod
    def _resolve_order(group_series, group: str, order, levels=None) -> tuple:
        levels = check_two_levels(group_series, group, levels)
        if order is None:
            return tuple(levels)
        order = tuple(order)
        if len(order) != 2 or order[0] == order[1]:
            raise InputError(f"order must name two different levels of {group!r}, got {order}")
        unknown = [lv for lv in order if lv not in levels]
        if unknown:
            raise InputError(
                f"order levels {unknown} not found in {group!r} levels {levels}",
                columns=(group,),
            )
        return order
