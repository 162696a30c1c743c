"""
Solution wrapper for generated replicates.

ReplicateSolution wraps Result[ReplicateParams] and provides convenient
accessors, a grouped view, and a summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import pandas as pd

from pyinfer.core.dataset import InferDataset
from pyinfer.core.result import Result
from pyinfer.core.validation import REPLICATE_COLUMN
from pyinfer.generate._common import ReplicateParams

if TYPE_CHECKING:
    from pandas.core.groupby import DataFrameGroupBy
    from pyinfer.generate.design import GenerateDesign
    from pyinfer.hypothesize._common import NullHypothesis


@dataclass
class ReplicateSolution:
    """
    User-facing replicate-grouped data.

    The table is long format: all rows of replicate 1, then all rows of
    replicate 2, and so on. Pass it straight to calculate().
    """
    _result: Result[ReplicateParams]
    _design: 'GenerateDesign'

    # --- Core fields ---

    @property
    def data(self) -> pd.DataFrame:
        """Replicate table with a leading 'replicate' column."""
        return self._result.params.data

    @property
    def reps(self) -> int:
        """Number of replicates."""
        return self._result.params.reps

    @property
    def type(self) -> str:
        """Generation type used."""
        return self._result.params.type

    @property
    def n(self) -> int:
        """Rows per replicate."""
        return self._result.params.n

    @property
    def hypothesis(self) -> NullHypothesis | None:
        """The null hypothesis, unchanged from the input."""
        return self._result.params.hypothesis

    @property
    def dataset(self) -> InferDataset:
        """Replicates as an InferDataset carrying roles and hypothesis."""
        params = self._result.params
        return InferDataset(
            data=params.data,
            response=params.response,
            explanatory=params.explanatory,
            hypothesis=params.hypothesis,
            explanatory_levels=params.explanatory_levels,
        )

    def groupby(self) -> DataFrameGroupBy:
        """The data grouped by replicate."""
        return self.data.groupby(REPLICATE_COLUMN, sort=True)

    def replicate(self, i: int) -> pd.DataFrame:
        """Rows of replicate i (1-based), without the replicate column."""
        if not 1 <= i <= self.reps:
            raise IndexError(f"replicate must be in [1, {self.reps}], got {i}")
        block = self.data.iloc[(i - 1) * self.n:i * self.n]
        return block.drop(columns=REPLICATE_COLUMN).reset_index(drop=True)

    # --- Metadata ---

    @property
    def seed(self):
        """Random seed used."""
        return self._design.seed

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
        return len(self.data)

    # --- Display ---

    def summary(self) -> str:
        """Short description of the replicate batch."""
        title = {
            "bootstrap": "BOOTSTRAP RESAMPLES",
            "permute": "PERMUTATION REPLICATES",
            "simulate": "SIMULATED REPLICATES",
        }[self.type]
        columns = [c for c in self.data.columns if c != REPLICATE_COLUMN]
        lines = [
            f"\n{title}\n",
            f"Replicates: {self.reps}",
            f"Rows per replicate: {self.n}",
            f"Variables: {', '.join(str(c) for c in columns)}",
        ]
        if self.hypothesis is not None:
            lines.append(str(self.hypothesis))
        if 'permuted_column' in self.info:
            lines.append(f"Permuted column: {self.info['permuted_column']}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ReplicateSolution(reps={self.reps}, n={self.n}, "
            f"type={self.type!r}, backend={self.backend_name!r})"
        )
