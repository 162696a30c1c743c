"""
Null hypothesis declaration.

Public API:
    hypothesize(x, null, p=None)  - Attach a NullHypothesis to a dataset
"""

from pyinfer.hypothesize._common import NullHypothesis, NullType, VALID_NULLS
from pyinfer.hypothesize.solvers import hypothesize

__all__ = [
    "hypothesize",
    "NullHypothesis",
    "NullType",
    "VALID_NULLS",
]
