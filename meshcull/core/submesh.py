"""Per-submesh triangle rewriting and slot compaction."""
from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .triangle_remap import remap
from .vertex_filter import CanonicalDeletionSet
from .logging_utils import get_logger

logger = get_logger('meshcull.submesh')

__all__ = ['assemble', 'submesh_slot_map']


def assemble(submeshes: Sequence, deletion_set: CanonicalDeletionSet,
             strategy: str = 'prefix') -> Tuple[List[np.ndarray], np.ndarray]:
    """Remap every submesh and pack the non-empty ones into slots 0..k-1.

    Parameters
    ----------
    submeshes : sequence of (K, 3) int arrays
        Original triangle lists in slot order.
    deletion_set : CanonicalDeletionSet
    strategy : str
        Remap strategy name, see :func:`meshcull.core.triangle_remap.remap`.

    Returns
    -------
    new_submeshes : list of (K', 3) int32
        Surviving triangle lists; relative submesh order is preserved.
    dropped : (S,) bool
        True for each original submesh left without triangles.
    """
    dropped = np.zeros(len(submeshes), dtype=bool)
    new_submeshes: List[np.ndarray] = []
    for i, tris in enumerate(submeshes):
        result = remap(tris, deletion_set, strategy=strategy)
        kept = result.surviving()
        if kept.shape[0] == 0:
            dropped[i] = True
            logger.debug("submesh %d dropped (%d triangles removed)", i, result.removed_count)
            continue
        logger.debug("submesh %d -> slot %d: triangles %d->%d",
                     i, len(new_submeshes), result.indices.shape[0], kept.shape[0])
        new_submeshes.append(kept)
    return new_submeshes, dropped


def submesh_slot_map(dropped) -> np.ndarray:
    """Map original submesh index to its new slot, -1 where the submesh was dropped.

    Useful to keep per-slot material lists aligned with the compacted mesh.
    """
    dropped = np.asarray(dropped, dtype=bool)
    slots = np.full(dropped.shape[0], -1, dtype=np.int32)
    keep = ~dropped
    slots[keep] = np.arange(int(keep.sum()), dtype=np.int32)
    return slots
