"""Shared constants for mesh layout and index bookkeeping.

Kept in one place so channel names and dtypes are not scattered as literals
across the pipeline stages.
"""
from __future__ import annotations

import numpy as np

# Marker written into remapped triangle rows that were removed
INVALID_INDEX: int = -1

MAX_UV_CHANNELS: int = 4
BONES_PER_VERTEX: int = 4

INDEX_DTYPE = np.int32
FLOAT_DTYPE = np.float64

# Per-vertex channels in the order they are filtered and reported.
# 'bone_weights' covers both bone_indices and bone_weights arrays.
VERTEX_CHANNELS = (
    'positions',
    'normals',
    'tangents',
    'colors',
    'colors32',
    'uv0',
    'uv1',
    'uv2',
    'uv3',
    'bone_weights',
)

REMAP_STRATEGIES = ('prefix', 'descending')
OUT_OF_RANGE_POLICIES = ('ignore', 'raise')

__all__ = [
    'INVALID_INDEX',
    'MAX_UV_CHANNELS',
    'BONES_PER_VERTEX',
    'INDEX_DTYPE',
    'FLOAT_DTYPE',
    'VERTEX_CHANNELS',
    'REMAP_STRATEGIES',
    'OUT_OF_RANGE_POLICIES',
]
