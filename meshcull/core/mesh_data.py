"""Mesh snapshot containers consumed and produced by the deletion pipeline.

All arrays follow the toolkit's canonical layout:
    positions: (N, 3) float64
    submesh triangles: (K, 3) int32, one array per submesh
Unused per-vertex channels are stored as arrays with zero rows; absence is a
valid state, not an error.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from .constants import (BONES_PER_VERTEX, FLOAT_DTYPE, INDEX_DTYPE, MAX_UV_CHANNELS,
                        VERTEX_CHANNELS)
from .errors import MeshValidationError

__all__ = ['BlendShape', 'MeshData', 'as_channel', 'as_triangles']


def as_channel(data, width: int, dtype=FLOAT_DTYPE, name: str = 'channel') -> np.ndarray:
    """Return ``data`` as a contiguous (N, width) array; None or empty gives (0, width)."""
    if data is None:
        return np.empty((0, width), dtype=dtype)
    arr = np.asarray(data, dtype=dtype)
    if arr.size == 0:
        return np.empty((0, width), dtype=dtype)
    if arr.ndim == 2 and arr.shape[1] == width:
        return np.ascontiguousarray(arr)
    if arr.ndim != 1 or arr.size % width != 0:
        raise MeshValidationError(f"{name}: shape {arr.shape} cannot form rows of width {width}")
    return np.ascontiguousarray(arr.reshape(-1, width))


def as_triangles(data, name: str = 'triangles') -> np.ndarray:
    """Return triangle indices as (K, 3) int32; flat sequences must hold whole triples."""
    return as_channel(data, 3, dtype=INDEX_DTYPE, name=name)


@dataclass(eq=False)
class BlendShape:
    """One morph target holding a single weighted frame of per-vertex deltas.

    Empty delta arrays stand for an all-zero frame.
    """
    name: str
    weight: float = 100.0
    delta_vertices: np.ndarray = None
    delta_normals: np.ndarray = None
    delta_tangents: np.ndarray = None

    def __post_init__(self):
        self.name = str(self.name)
        self.weight = float(self.weight)
        self.delta_vertices = as_channel(self.delta_vertices, 3, name=f'{self.name}.delta_vertices')
        self.delta_normals = as_channel(self.delta_normals, 3, name=f'{self.name}.delta_normals')
        self.delta_tangents = as_channel(self.delta_tangents, 3, name=f'{self.name}.delta_tangents')

    def frame(self, vertex_count: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return the three delta arrays sized to ``vertex_count``, zero-filling missing ones."""
        out = []
        for arr in (self.delta_vertices, self.delta_normals, self.delta_tangents):
            if arr.shape[0] == 0:
                out.append(np.zeros((vertex_count, 3), dtype=FLOAT_DTYPE))
            else:
                out.append(arr)
        return out[0], out[1], out[2]


@dataclass(eq=False)
class MeshData:
    """Raw data of a skinned, multi-material triangle mesh.

    Attributes
    ----------
    positions : (N, 3) float64
    normals : (N, 3) float64 or empty
    tangents : (N, 4) float64 or empty
    colors : (N, 4) float64 or empty
    colors32 : (N, 4) uint8 or empty
        Legacy byte-packed colors.
    uvs : list of 4 arrays, each (N, 2) float64 or empty
    bone_indices, bone_weights : (N, 4) int32 / float64 or empty
        Up to four bone influences per vertex; filtered together.
    submeshes : list of (K, 3) int32
        Triangle lists, one per material slot.
    bind_poses : (B, 4, 4) float64
        One matrix per bone, independent of the vertex count.
    blend_shapes : list of BlendShape
        Order is significant; consumers address them by position too.
    name : str
    """
    positions: np.ndarray = None
    normals: np.ndarray = None
    tangents: np.ndarray = None
    colors: np.ndarray = None
    colors32: np.ndarray = None
    uvs: List[np.ndarray] = field(default_factory=list)
    bone_indices: np.ndarray = None
    bone_weights: np.ndarray = None
    submeshes: List[np.ndarray] = field(default_factory=list)
    bind_poses: np.ndarray = None
    blend_shapes: List[BlendShape] = field(default_factory=list)
    name: str = 'mesh'

    def __post_init__(self):
        self.positions = as_channel(self.positions, 3, name='positions')
        self.normals = as_channel(self.normals, 3, name='normals')
        self.tangents = as_channel(self.tangents, 4, name='tangents')
        self.colors = as_channel(self.colors, 4, name='colors')
        self.colors32 = as_channel(self.colors32, 4, dtype=np.uint8, name='colors32')
        uvs = list(self.uvs or [])
        if len(uvs) > MAX_UV_CHANNELS:
            raise MeshValidationError(f"at most {MAX_UV_CHANNELS} UV channels supported, got {len(uvs)}")
        uvs += [None] * (MAX_UV_CHANNELS - len(uvs))
        self.uvs = [as_channel(uv, 2, name=f'uv{i}') for i, uv in enumerate(uvs)]
        self.bone_indices = as_channel(self.bone_indices, BONES_PER_VERTEX, dtype=INDEX_DTYPE,
                                       name='bone_indices')
        self.bone_weights = as_channel(self.bone_weights, BONES_PER_VERTEX, name='bone_weights')
        if isinstance(self.submeshes, np.ndarray):
            self.submeshes = [self.submeshes]
        self.submeshes = [as_triangles(t, name=f'submesh {i}') for i, t in enumerate(self.submeshes or [])]
        if self.bind_poses is None:
            self.bind_poses = np.empty((0, 4, 4), dtype=FLOAT_DTYPE)
        else:
            bp = np.asarray(self.bind_poses, dtype=FLOAT_DTYPE)
            if bp.size % 16 != 0:
                raise MeshValidationError(f"bind_poses: {bp.size} values cannot form 4x4 matrices")
            self.bind_poses = np.ascontiguousarray(bp.reshape(-1, 4, 4))
        self.blend_shapes = list(self.blend_shapes or [])

    @classmethod
    def from_triangles(cls, positions, triangles, **attrs) -> 'MeshData':
        """Build a single-submesh mesh from positions and one triangle list."""
        return cls(positions=positions, submeshes=[triangles], **attrs)

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def submesh_count(self) -> int:
        return len(self.submeshes)

    @property
    def triangle_count(self) -> int:
        return int(sum(t.shape[0] for t in self.submeshes))

    @property
    def triangles(self) -> np.ndarray:
        """All submesh triangles stacked in submesh order, (T, 3) int32."""
        if not self.submeshes:
            return np.empty((0, 3), dtype=INDEX_DTYPE)
        return np.concatenate(self.submeshes, axis=0)

    def vertex_channels(self) -> Dict[str, np.ndarray]:
        """Every per-vertex array keyed by attribute name (empty ones included)."""
        channels = {
            'positions': self.positions,
            'normals': self.normals,
            'tangents': self.tangents,
            'colors': self.colors,
            'colors32': self.colors32,
        }
        for i, uv in enumerate(self.uvs):
            channels[f'uv{i}'] = uv
        channels['bone_indices'] = self.bone_indices
        channels['bone_weights'] = self.bone_weights
        return channels

    def active_channels(self) -> List[str]:
        """Names of the non-empty vertex channels, in VERTEX_CHANNELS order."""
        arrays = self.vertex_channels()
        return [name for name in VERTEX_CHANNELS if arrays[name].shape[0] > 0]

    def check(self) -> Tuple[bool, List[str]]:
        """Check the mesh invariants; returns (ok, messages)."""
        msgs: List[str] = []
        n = self.vertex_count
        for name, arr in self.vertex_channels().items():
            if arr.shape[0] not in (0, n):
                msgs.append(f"{name} has {arr.shape[0]} rows, expected 0 or {n}")
        if (self.bone_indices.shape[0] == 0) != (self.bone_weights.shape[0] == 0):
            msgs.append("bone_indices and bone_weights must be both present or both empty")
        for i, tris in enumerate(self.submeshes):
            if tris.size and (tris.min() < 0 or tris.max() >= n):
                msgs.append(f"submesh {i} references vertices outside [0, {n})")
        for shape in self.blend_shapes:
            for label, arr in (('delta_vertices', shape.delta_vertices),
                               ('delta_normals', shape.delta_normals),
                               ('delta_tangents', shape.delta_tangents)):
                if arr.shape[0] not in (0, n):
                    msgs.append(f"blend shape {shape.name!r} {label} has {arr.shape[0]} rows, expected 0 or {n}")
        return (not msgs), msgs

    def validate(self) -> 'MeshData':
        """Raise MeshValidationError if any invariant is broken; returns self."""
        ok, msgs = self.check()
        if not ok:
            raise MeshValidationError(msgs)
        return self

    def copy(self) -> 'MeshData':
        return copy.deepcopy(self)

    def __repr__(self):
        return (f"MeshData(name={self.name!r}, vertices={self.vertex_count}, "
                f"triangles={self.triangle_count}, submeshes={self.submesh_count}, "
                f"blend_shapes={len(self.blend_shapes)}, channels={self.active_channels()})")
