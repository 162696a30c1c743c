"""
Random generator construction.

Every source of randomness in pyinfer goes through make_rng so that an
integer seed reproduces a whole generate() call.
"""

from __future__ import annotations

import numpy as np

from pyinfer.core.exceptions import ValidationError


SeedLike = int | np.random.Generator | None


def check_seed(seed: SeedLike) -> None:
    """
    Verify seed is None, a Generator, or a non-negative integer.

    Raises:
        ValidationError: For bools, negative integers, and other types
    """
    if seed is None or isinstance(seed, np.random.Generator):
        return
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValidationError(
            f"seed must be an int, numpy Generator, or None, got {type(seed).__name__}"
        )
    if seed < 0:
        raise ValidationError(f"seed must be non-negative, got {seed}")


def make_rng(seed: SeedLike) -> np.random.Generator:
    """
    Build a numpy Generator from a seed.

    Args:
        seed: Integer seed, an existing Generator (used as-is, so its
            state advances), or None for fresh OS entropy.

    Returns:
        numpy.random.Generator
    """
    check_seed(seed)
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed))
