"""Vertex deletion: the pipeline that ties the filter, remap and projection stages together.

The input mesh is never modified; every call builds a fresh MeshData whose
surviving vertices keep their original relative order.
"""
from __future__ import annotations

import time
from typing import Iterable, Optional, Tuple

import numpy as np

from .blend_shapes import project
from .config import DeletionConfig
from .mesh_data import MeshData
from .stats import DeletionStats
from .submesh import assemble
from .vertex_filter import CanonicalDeletionSet, canonicalize, exclude, keep_mask
from .logging_utils import get_logger

logger = get_logger('meshcull.deleter')

__all__ = ['delete_vertices', 'delete_vertices_with_stats', 'derived_name', 'filter_vertex_channels']


def derived_name(name: str, suffix: Optional[str] = '_deleted') -> str:
    return name if not suffix else f"{name}{suffix}"


def filter_vertex_channels(mesh: MeshData, deletion_set: CanonicalDeletionSet,
                           keep: Optional[np.ndarray] = None) -> dict:
    """Compact every per-vertex channel of ``mesh``; returns MeshData keyword arguments."""
    if keep is None:
        keep = keep_mask(mesh.vertex_count, deletion_set)
    return {
        'positions': exclude(mesh.positions, deletion_set, keep),
        'normals': exclude(mesh.normals, deletion_set, keep),
        'tangents': exclude(mesh.tangents, deletion_set, keep),
        'colors': exclude(mesh.colors, deletion_set, keep),
        'colors32': exclude(mesh.colors32, deletion_set, keep),
        'uvs': [exclude(uv, deletion_set, keep) for uv in mesh.uvs],
        'bone_indices': exclude(mesh.bone_indices, deletion_set, keep),
        'bone_weights': exclude(mesh.bone_weights, deletion_set, keep),
    }


def delete_vertices_with_stats(mesh: MeshData, indices: Iterable[int],
                               config: Optional[DeletionConfig] = None) -> Tuple[MeshData, DeletionStats]:
    """Delete ``indices`` from ``mesh`` and report what changed.

    Parameters
    ----------
    mesh : MeshData
        Source mesh; left untouched.
    indices : iterable of int
        Vertex indices to delete. Duplicates are collapsed and order does
        not matter.
    config : DeletionConfig, optional

    Returns
    -------
    (MeshData, DeletionStats)

    Raises
    ------
    EmptySelectionError
        If ``indices`` is empty (or only holds ignored out-of-range values).
    IndexOutOfRangeError
        For out-of-range indices under ``config.out_of_range == 'raise'``.
    MeshValidationError
        If ``config.validate_input`` is set and the mesh is malformed.
    """
    cfg = config or DeletionConfig()
    t0 = time.perf_counter()

    requested = list(indices)
    deletion_set = canonicalize(requested, max_index=mesh.vertex_count, policy=cfg.out_of_range)
    if cfg.validate_input:
        mesh.validate()
    logger.debug("deleting %d unique vertices (%d requested) from %r",
                 len(deletion_set), len(requested), mesh.name)

    keep = keep_mask(mesh.vertex_count, deletion_set)
    attrs = filter_vertex_channels(mesh, deletion_set, keep)
    new_vertex_count = attrs['positions'].shape[0]

    submeshes, dropped = assemble(mesh.submeshes, deletion_set, strategy=cfg.remap_strategy)
    blend_shapes = project(mesh, new_vertex_count, deletion_set, keep)

    result = MeshData(
        submeshes=submeshes,
        bind_poses=mesh.bind_poses.copy(),
        blend_shapes=blend_shapes,
        name=derived_name(mesh.name, cfg.name_suffix),
        **attrs,
    )

    old_to_new = np.full(mesh.vertex_count, -1, dtype=np.int32)
    old_to_new[keep] = np.arange(new_vertex_count, dtype=np.int32)

    stats = DeletionStats(
        requested=len(requested),
        unique=len(deletion_set),
        ignored=len(deletion_set.ignored),
        vertices_before=mesh.vertex_count,
        vertices_after=result.vertex_count,
        triangles_before=mesh.triangle_count,
        triangles_after=result.triangle_count,
        submeshes_before=mesh.submesh_count,
        submeshes_after=result.submesh_count,
        blend_shapes=len(blend_shapes),
        channels=tuple(result.active_channels()),
        dropped_submeshes=dropped,
        old_to_new=old_to_new,
        strategy=cfg.remap_strategy,
        time_total=time.perf_counter() - t0,
    )
    logger.info("Vertices deleted from %r: vertices %d->%d, triangles %d->%d, submeshes %d->%d",
                mesh.name, stats.vertices_before, stats.vertices_after,
                stats.triangles_before, stats.triangles_after,
                stats.submeshes_before, stats.submeshes_after)
    return result, stats


def delete_vertices(mesh: MeshData, indices: Iterable[int],
                    config: Optional[DeletionConfig] = None) -> MeshData:
    """Return a copy of ``mesh`` without ``indices`` and without any triangle touching them.

    See :func:`delete_vertices_with_stats` for parameters and errors.
    """
    result, _ = delete_vertices_with_stats(mesh, indices, config)
    return result
