"""
Common types for null hypothesis declarations.

Defines NullType (the recognized nulls) and NullHypothesis, the metadata
that generate() reads to decide how to permute or simulate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Point probabilities must sum to one within this tolerance.
P_SUM_TOLERANCE = 1e-8


class NullType(str, Enum):
    """Recognized null hypotheses. Values match the user-facing strings."""
    EQUAL_MEANS = "equal means"
    INDEPENDENCE = "independence"
    POINT = "point"


VALID_NULLS = tuple(t.value for t in NullType)


@dataclass(frozen=True)
class NullHypothesis:
    """
    A declared null hypothesis.

    Attributes
    ----------
    null : NullType
        Which null is assumed.
    p : tuple of float or None
        For ``point`` only: hypothesized probability of each response
        level, aligned with the levels in order (p1, p2, ...).
    levels : tuple or None
        The response levels ``p`` is aligned with, recorded when the
        hypothesis is attached.
    """
    null: NullType
    p: tuple[float, ...] | None = None
    levels: tuple | None = None

    @property
    def is_point(self) -> bool:
        return self.null is NullType.POINT

    def level_probabilities(self) -> dict:
        """Mapping level -> hypothesized probability (point nulls only)."""
        if self.p is None or self.levels is None:
            return {}
        return dict(zip(self.levels, self.p))

    def __str__(self) -> str:
        if self.p is None:
            return f"H0: {self.null.value}"
        probs = ", ".join(f"p{i + 1}={v:g}" for i, v in enumerate(self.p))
        return f"H0: {self.null.value} ({probs})"
