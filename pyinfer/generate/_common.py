"""
Common data structures for replicate generation.

ReplicateParams is the payload wrapped by Result[P] and exposed
through ReplicateSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from pyinfer.hypothesize._common import NullHypothesis


GenerationType = Literal['bootstrap', 'permute', 'simulate']

VALID_TYPES = ('bootstrap', 'permute', 'simulate')


@dataclass(frozen=True, eq=False)
class ReplicateParams:
    """
    Parameter payload for generated replicates.

    - data: long-format table, leading 'replicate' column (1..reps),
      one block of n rows per replicate, blocks in order
    - reps: number of replicates
    - type: generation type that produced them
    - n: rows per replicate block
    - hypothesis: the null carried over unchanged from the input
    - explanatory_levels: group levels of the input, kept for replicates
      that miss a group
    """
    data: pd.DataFrame
    reps: int
    type: str
    n: int
    response: str
    explanatory: str | None
    hypothesis: NullHypothesis | None
    explanatory_levels: tuple | None = None
