"""Backends for statistic calculation."""

from pyinfer.calculate.backends.cpu import CPUCalculateBackend

__all__ = ["CPUCalculateBackend"]
