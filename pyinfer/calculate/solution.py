"""
Solution wrapper for calculated statistics.

StatisticSolution wraps Result[StatParams]: the per-replicate statistic
table plus, for difference statistics, the per-group intermediates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pyinfer.calculate._common import StatParams
from pyinfer.core.result import Result
from pyinfer.core.validation import REPLICATE_COLUMN

if TYPE_CHECKING:
    from pyinfer.calculate.design import CalculateDesign


@dataclass
class StatisticSolution:
    """
    User-facing statistic table.

    One row per replicate with columns 'replicate' and the statistic
    ('mean', 'prop', 'diffmean', or 'diffprop').
    """
    _result: Result[StatParams]
    _design: 'CalculateDesign'

    # --- Core fields ---

    @property
    def table(self) -> pd.DataFrame:
        """Statistic table, one row per replicate."""
        return self._result.params.table

    @property
    def stat(self) -> str:
        """Statistic name as requested."""
        return self._result.params.stat

    @property
    def column(self) -> str:
        """Name of the statistic column in table."""
        return self._result.params.column

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Statistic values in replicate order, shape (reps,)."""
        return self.table[self.column].to_numpy(dtype=np.float64)

    @property
    def replicates(self) -> NDArray[np.integer[Any]]:
        """Replicate indices, shape (reps,)."""
        return self.table[REPLICATE_COLUMN].to_numpy()

    @property
    def group_stats(self) -> pd.DataFrame | None:
        """Per (replicate, group) N and mean/prop, for difference statistics."""
        return self._result.params.group_stats

    @property
    def order(self) -> tuple | None:
        """Group levels subtracted, first minus second."""
        return self._result.params.order

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __len__(self) -> int:
        return len(self.table)

    # --- Display ---

    def summary(self) -> str:
        """Distribution summary of the statistic across replicates."""
        vals = self.values
        finite = vals[np.isfinite(vals)]
        lines = [
            f"\nSTATISTIC: {self.stat}",
            "",
            f"Replicates: {len(vals)}",
        ]
        if self.order is not None:
            lines.append(f"Order: {self.order[0]} - {self.order[1]}")
        if len(finite) > 0:
            sd = float(np.std(finite, ddof=1)) if len(finite) > 1 else float('nan')
            lines.extend([
                f"Mean: {float(np.mean(finite)):.6g}",
                f"SD: {sd:.6g}",
                f"Range: [{float(np.min(finite)):.6g}, {float(np.max(finite)):.6g}]",
            ])
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"StatisticSolution(stat={self.stat!r}, reps={len(self)}, "
            f"backend={self.backend_name!r})"
        )
