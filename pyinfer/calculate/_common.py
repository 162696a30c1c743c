"""
Common types for statistic calculation.

Defines the recognized statistic names, the output column each one
produces, and StatParams, the payload wrapped by Result[P].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


StatName = Literal['mean', 'prop', 'diff in means', 'diff in props', 'Chisq', 'F']

# stat name -> output column
STAT_COLUMNS = {
    'mean': 'mean',
    'prop': 'prop',
    'diff in means': 'diffmean',
    'diff in props': 'diffprop',
}

VALID_STATS = tuple(STAT_COLUMNS)

# Recognized names without an implementation.
UNSUPPORTED_STATS = ('Chisq', 'F')

DIFFERENCE_STATS = ('diff in means', 'diff in props')


@dataclass(frozen=True, eq=False)
class StatParams:
    """
    Parameter payload for statistic calculation.

    - table: one row per replicate, columns 'replicate' and `column`
    - stat: statistic name as requested
    - column: name of the statistic column in table
    - group_stats: per (replicate, group) N and mean/prop for
      difference statistics, else None
    - order: the two group levels, first minus second, for difference
      statistics, else None
    """
    table: pd.DataFrame
    stat: str
    column: str
    group_stats: pd.DataFrame | None = None
    order: tuple | None = None
