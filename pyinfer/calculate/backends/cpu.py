"""
CPU backend for statistic calculation.

CPUCalculateBackend: grouped per-replicate reductions with pandas.
Missing values are skipped by the reductions.
"""

from __future__ import annotations

import pandas as pd

from pyinfer.calculate._common import STAT_COLUMNS, StatParams
from pyinfer.calculate.design import CalculateDesign
from pyinfer.core.compute.timing import Timer
from pyinfer.core.result import Result
from pyinfer.core.validation import REPLICATE_COLUMN, is_categorical


class CPUCalculateBackend:
    """
    CPU backend for statistic calculation.

    One output row per distinct replicate, in replicate order.
    """

    @property
    def name(self) -> str:
        return 'cpu_calculate'

    def solve(self, design: CalculateDesign) -> Result[StatParams]:
        """Reduce each replicate and return Result[StatParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        stat = design.stat
        column = STAT_COLUMNS[stat]
        group_stats = None

        with timer.section('reduction'):
            if stat == 'mean':
                values = self._mean(data, design.response)
            elif stat == 'prop':
                values = self._prop(data, design.response, design.success)
            elif stat == 'diff in means':
                values, group_stats = self._diff(
                    data[design.response], data, design.group, design.order, 'mean',
                )
            elif stat == 'diff in props':
                indicator = self._indicator(data, design.response, design.success)
                values, group_stats = self._diff(
                    indicator, data, design.group, design.order, 'prop',
                )
            else:
                raise ValueError(f"Unknown stat: {stat!r}")

        table = values.rename(column).astype(float).reset_index()
        timer.stop()

        warnings_list = []
        if table[column].isna().any():
            n_nan = int(table[column].isna().sum())
            warnings_list.append(
                f"{n_nan} replicate(s) gave an undefined {column} "
                f"(empty group or no observations)"
            )

        params = StatParams(
            table=table,
            stat=stat,
            column=column,
            group_stats=group_stats,
            order=design.order,
        )

        info = {
            'stat': stat,
            'reps': len(table),
            'response': design.response,
        }
        if design.group is not None:
            info['group'] = design.group

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _mean(self, data: pd.DataFrame, column: str) -> pd.Series:
        """Arithmetic mean of column per replicate."""
        return data.groupby(REPLICATE_COLUMN, sort=True)[column].mean()

    def _indicator(self, data: pd.DataFrame, column: str, success) -> pd.Series:
        """1.0 where column equals success, 0.0 elsewhere, NaN if missing."""
        indicator = data[column].eq(success).astype(float)
        return indicator.where(data[column].notna())

    def _prop(self, data: pd.DataFrame, column: str, success) -> pd.Series:
        """Fraction of rows equal to success per replicate."""
        indicator = self._indicator(data, column, success)
        return indicator.groupby(data[REPLICATE_COLUMN], sort=True).mean()

    def _diff(
        self,
        values: pd.Series,
        data: pd.DataFrame,
        group: str,
        order: tuple,
        agg_name: str,
    ) -> tuple[pd.Series, pd.DataFrame]:
        """
        Per (replicate, group) mean of values, then first minus second.

        Returns:
            (difference per replicate, long table of N and the mean)
        """
        groups = data[group]
        if not is_categorical(groups):
            # declared levels keep groups a replicate never drew
            groups = groups.astype(pd.CategoricalDtype(list(order)))
        keys = [data[REPLICATE_COLUMN], groups]
        grouped = values.groupby(keys, observed=False, sort=True)
        group_stats = pd.DataFrame({
            'N': grouped.size(),
            agg_name: grouped.mean(),
        })
        group_stats.index.names = [REPLICATE_COLUMN, group]
        group_stats = group_stats.reset_index()

        wide = group_stats.pivot(index=REPLICATE_COLUMN, columns=group, values=agg_name)
        first, second = order
        diff = wide[first] - wide[second]
        diff.name = None
        return diff, group_stats
