"""Exception types raised by the deletion pipeline.

Bad input is reported as ``ValueError`` throughout the toolkit; the classes
here subclass it (or ``IndexError``) so callers can catch either the precise
type or the builtin one.
"""
from __future__ import annotations


class MeshcullError(Exception):
    """Base class for all meshcull errors."""


class EmptySelectionError(MeshcullError, ValueError):
    """Raised when a deletion request contains no vertex indices."""

    def __init__(self, message: str = "Vertices Not Found"):
        super().__init__(message)


class IndexOutOfRangeError(MeshcullError, IndexError):
    """Raised under the 'raise' policy for indices outside [0, vertex_count)."""

    def __init__(self, indices, vertex_count: int):
        self.indices = [int(i) for i in indices]
        self.vertex_count = int(vertex_count)
        preview = self.indices[:8]
        more = '' if len(self.indices) <= 8 else f' (+{len(self.indices) - 8} more)'
        super().__init__(
            f"vertex indices {preview}{more} out of range for mesh with {self.vertex_count} vertices")


class MeshValidationError(MeshcullError, ValueError):
    """Raised when mesh data breaks the per-vertex length or index invariants."""

    def __init__(self, problems):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__('; '.join(self.problems))


__all__ = ['MeshcullError', 'EmptySelectionError', 'IndexOutOfRangeError', 'MeshValidationError']
