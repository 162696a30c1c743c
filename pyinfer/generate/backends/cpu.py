"""
CPU backend for replicate generation.

CPUGenerateBackend: bootstrap, permutation, and point-null simulation.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from pyinfer.core.compute.rng import make_rng
from pyinfer.core.compute.timing import Timer
from pyinfer.core.result import Result
from pyinfer.core.validation import REPLICATE_COLUMN
from pyinfer.generate._common import ReplicateParams
from pyinfer.generate._permute import apply_permutation
from pyinfer.generate._sampling import (
    draw_indices, draw_permutations, expand_level_weights, take_blocks,
)
from pyinfer.generate.design import GenerateDesign


class CPUGenerateBackend:
    """
    CPU backend for replicate generation.

    Replicates are drawn one after another from a single Generator.
    """

    @property
    def name(self) -> str:
        return 'cpu_generate'

    def solve(self, design: GenerateDesign) -> Result[ReplicateParams]:
        """Generate replicates and return Result[ReplicateParams]."""
        timer = Timer()
        timer.start()

        dataset = design.dataset
        data = dataset.data.reset_index(drop=True)
        n = design.n
        reps = design.reps
        rng = make_rng(design.seed)

        with timer.section('replicates'):
            if design.type == "bootstrap":
                out = self._bootstrap(data, n, reps, rng)
            elif design.type == "permute":
                out = self._permute(data, design.permute_column, n, reps, rng)
            elif design.type == "simulate":
                out = self._simulate(data, dataset.hypothesis.p, n, reps, rng)
            else:
                raise ValueError(f"Unknown generation type: {design.type!r}")

        timer.stop()

        params = ReplicateParams(
            data=out,
            reps=reps,
            type=design.type,
            n=n,
            response=dataset.response,
            explanatory=dataset.explanatory,
            hypothesis=dataset.hypothesis,
            explanatory_levels=dataset.explanatory_levels,
        )

        info = {
            'type': design.type,
            'reps': reps,
            'n': n,
        }
        if design.permute_column is not None:
            info['permuted_column'] = design.permute_column

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    def _bootstrap(
        self,
        data: pd.DataFrame,
        n: int,
        reps: int,
        rng: np.random.Generator,
    ) -> pd.DataFrame:
        """reps resamples of n rows with replacement."""
        indices = draw_indices(n, n, True, reps, rng)
        return take_blocks(data, indices, reps, n)

    def _permute(
        self,
        data: pd.DataFrame,
        column: str,
        n: int,
        reps: int,
        rng: np.random.Generator,
    ) -> pd.DataFrame:
        """reps copies of data, each with column shuffled independently."""
        blocks = [
            apply_permutation(data, column, order)
            for order in draw_permutations(n, reps, rng)
        ]
        out = pd.concat(blocks, ignore_index=True)
        out.insert(0, REPLICATE_COLUMN, np.repeat(np.arange(1, reps + 1), n))
        return out

    def _simulate(
        self,
        data: pd.DataFrame,
        p: tuple[float, ...],
        n: int,
        reps: int,
        rng: np.random.Generator,
    ) -> pd.DataFrame:
        """reps weighted draws of n rows, weights from the point null."""
        row_p = expand_level_weights(data, p)
        indices = draw_indices(n, n, True, reps, rng, p=row_p)
        return take_blocks(data, indices, reps, n)
