"""Triangle index rewriting after vertex deletion.

Two interchangeable strategies produce identical indices:

- ``descending``: walk the deleted indices from highest to lowest, removing
  triangles that touch the current one and decrementing every larger slot by
  one. O(D x T); kept as the reference behaviour.
- ``prefix``: a triangle is removed iff any slot is deleted; every surviving
  slot drops by the number of deleted indices below it (binary search).
  O(T log D + D log D).

Removed triangles are tagged by a boolean mask. Their rows in ``indices`` are
filled with INVALID_INDEX for inspection only; never test for it.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import INDEX_DTYPE, INVALID_INDEX
from .mesh_data import as_triangles
from .vertex_filter import CanonicalDeletionSet

__all__ = ['RemapResult', 'remap', 'remap_descending', 'remap_prefix']


@dataclass(eq=False)
class RemapResult:
    indices: np.ndarray  # (T, 3) remapped, same row count as the input
    removed: np.ndarray  # (T,) bool

    @property
    def removed_count(self) -> int:
        return int(np.count_nonzero(self.removed))

    def surviving(self) -> np.ndarray:
        """Remapped triangles that were not removed, in original order."""
        return np.ascontiguousarray(self.indices[~self.removed])


def remap_descending(triangles, deletion_set: CanonicalDeletionSet) -> RemapResult:
    tris = as_triangles(triangles).astype(np.int64, copy=True)
    removed = np.zeros(tris.shape[0], dtype=bool)
    for d in deletion_set.descending:
        live = ~removed
        hit = live & np.any(tris == d, axis=1)
        removed |= hit
        live &= ~hit
        # decrement slots above d on triangles still alive
        shift = (tris > d) & live[:, None]
        tris[shift] -= 1
    tris[removed] = INVALID_INDEX
    return RemapResult(tris.astype(INDEX_DTYPE), removed)


def remap_prefix(triangles, deletion_set: CanonicalDeletionSet) -> RemapResult:
    tris = as_triangles(triangles).astype(np.int64)
    if tris.shape[0] == 0 or len(deletion_set) == 0:
        return RemapResult(tris.astype(INDEX_DTYPE), np.zeros(tris.shape[0], dtype=bool))
    removed = np.any(deletion_set.contains(tris), axis=1)
    out = tris - deletion_set.count_below(tris)
    out[removed] = INVALID_INDEX
    return RemapResult(out.astype(INDEX_DTYPE), removed)


_STRATEGIES = {
    'prefix': remap_prefix,
    'descending': remap_descending,
}


def remap(triangles, deletion_set: CanonicalDeletionSet, strategy: str = 'prefix') -> RemapResult:
    """Rewrite one triangle list for ``deletion_set`` using the named strategy."""
    try:
        fn = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown remap strategy {strategy!r}; expected one of {tuple(_STRATEGIES)}") from None
    return fn(triangles, deletion_set)
