"""
Statistic calculation.

Public API:
    calculate(x, stat)  - Per-replicate mean, prop, diff in means,
                          or diff in props
"""

from pyinfer.calculate._common import (
    StatParams, STAT_COLUMNS, UNSUPPORTED_STATS, VALID_STATS,
)
from pyinfer.calculate.design import CalculateDesign
from pyinfer.calculate.solution import StatisticSolution
from pyinfer.calculate.solvers import calculate

__all__ = [
    "calculate",
    "CalculateDesign",
    "StatParams",
    "StatisticSolution",
    "STAT_COLUMNS",
    "VALID_STATS",
    "UNSUPPORTED_STATS",
]
