"""Deletion statistics data structures and presentation utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np


@dataclass
class DeletionStats:
    requested: int = 0          # indices in the raw request, duplicates included
    unique: int = 0             # size of the canonical deletion set
    ignored: int = 0            # out-of-range indices dropped by policy
    vertices_before: int = 0
    vertices_after: int = 0
    triangles_before: int = 0
    triangles_after: int = 0
    submeshes_before: int = 0
    submeshes_after: int = 0
    blend_shapes: int = 0
    channels: tuple = ()
    dropped_submeshes: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=bool))
    # old vertex index -> new index, -1 for deleted vertices
    old_to_new: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.int32))
    strategy: str = 'prefix'
    time_total: float = 0.0

    @property
    def new_to_old(self) -> np.ndarray:
        return np.nonzero(self.old_to_new >= 0)[0].astype(np.int32)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'requested': self.requested,
            'unique': self.unique,
            'ignored': self.ignored,
            'vertices_before': self.vertices_before,
            'vertices_after': self.vertices_after,
            'vertices_removed': self.vertices_before - self.vertices_after,
            'triangles_before': self.triangles_before,
            'triangles_after': self.triangles_after,
            'triangles_removed': self.triangles_before - self.triangles_after,
            'submeshes_before': self.submeshes_before,
            'submeshes_after': self.submeshes_after,
            'dropped_submeshes': np.nonzero(self.dropped_submeshes)[0].tolist(),
            'blend_shapes': self.blend_shapes,
            'channels': list(self.channels),
            'strategy': self.strategy,
            'time_total': self.time_total,
            'triangle_removal_rate': ((self.triangles_before - self.triangles_after) / self.triangles_before)
            if self.triangles_before else 0.0,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable before/after table for a DeletionStats.to_dict() mapping."""
    if not stats_dict:
        return "<no stats>"
    header = ["item", "before", "after", "removed"]
    rows = []
    for label in ('vertices', 'triangles', 'submeshes'):
        before = stats_dict[f'{label}_before']
        after = stats_dict[f'{label}_after']
        rows.append([label, str(before), str(after), str(before - after)])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            if len(v) > col_w[i]:
                col_w[i] = len(v)

    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))

    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    lines.append(f"request: {stats_dict['requested']} indices, {stats_dict['unique']} unique, "
                 f"{stats_dict['ignored']} ignored; strategy={stats_dict['strategy']}; "
                 f"{stats_dict['time_total'] * 1000.0:.3f} ms")
    if stats_dict['dropped_submeshes']:
        lines.append(f"dropped submeshes: {stats_dict['dropped_submeshes']}")
    return "\n".join(lines)


__all__ = ["DeletionStats", "format_stats_table"]
