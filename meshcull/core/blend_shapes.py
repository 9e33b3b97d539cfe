"""Projection of blend shape deltas onto the compacted vertex order."""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .errors import MeshValidationError
from .mesh_data import BlendShape, MeshData
from .vertex_filter import CanonicalDeletionSet, exclude, keep_mask
from .logging_utils import get_logger

logger = get_logger('meshcull.blend_shapes')

__all__ = ['project']

_DELTA_FIELDS = ('delta_vertices', 'delta_normals', 'delta_tangents')


def project(original: MeshData, new_vertex_count: int,
            deletion_set: CanonicalDeletionSet,
            keep: Optional[np.ndarray] = None) -> List[BlendShape]:
    """Return the blend shapes of ``original`` with deleted vertices removed.

    Each frame is read at the original vertex count (missing delta arrays are
    zeros) and filtered with the same deletion set as the base attributes, so
    deltas stay aligned with the new vertex order. Names, weights and order
    are preserved. ``keep`` is an optional precomputed keep mask over the
    original vertices.

    Raises MeshValidationError if any delta array does not match the
    original vertex count.
    """
    n = original.vertex_count
    if keep is None:
        keep = keep_mask(n, deletion_set)
    if int(keep.sum()) != new_vertex_count:
        raise MeshValidationError(
            f"{int(keep.sum())} vertices survive deletion, expected {new_vertex_count}")
    projected = []
    for shape in original.blend_shapes:
        frame = shape.frame(n)
        bad = [f"{field} has {arr.shape[0]} rows"
               for field, arr in zip(_DELTA_FIELDS, frame) if arr.shape[0] != n]
        if bad:
            raise MeshValidationError(
                [f"blend shape {shape.name!r}: {msg}, expected {n}" for msg in bad])
        dv, dn, dt = (exclude(arr, deletion_set, keep) for arr in frame)
        projected.append(BlendShape(name=shape.name, weight=shape.weight,
                                    delta_vertices=dv, delta_normals=dn, delta_tangents=dt))
    if projected:
        logger.debug("projected %d blend shapes onto %d vertices", len(projected), new_vertex_count)
    return projected
