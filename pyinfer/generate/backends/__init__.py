"""Backends for replicate generation."""

from pyinfer.generate.backends.cpu import CPUGenerateBackend

__all__ = ["CPUGenerateBackend"]
