"""
Replicate generation.

Provides bootstrap resampling, null-hypothesis permutation, and
point-null simulation of a dataset.

Usage:
    from pyinfer.generate import generate, rep_sample_n

    # Bootstrap
    boots = generate(ds, reps=1000, type="bootstrap", seed=42)

    # Permutation under a declared null
    perms = generate(hypothesize(ds, null="independence"), reps=1000,
                     type="permute", seed=42)
"""

from pyinfer.generate._common import ReplicateParams, VALID_TYPES
from pyinfer.generate.design import GenerateDesign
from pyinfer.generate.solution import ReplicateSolution
from pyinfer.generate.solvers import generate, permute_once, rep_sample_n

__all__ = [
    "generate",
    "rep_sample_n",
    "permute_once",
    "GenerateDesign",
    "ReplicateParams",
    "ReplicateSolution",
    "VALID_TYPES",
]
