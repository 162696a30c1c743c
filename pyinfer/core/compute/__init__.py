"""
Shared compute infrastructure for pyinfer.

IMPORTANT: This is NOT where stage-specific backends live. Those go in
{stage}/backends/. This module contains shared infrastructure.

Submodules:
    timing: Execution timing utilities
    rng: Random generator construction
"""

from pyinfer.core.compute.rng import check_seed, make_rng
from pyinfer.core.compute.timing import Timer, timed

__all__ = [
    "check_seed",
    "make_rng",
    "Timer",
    "timed",
]
