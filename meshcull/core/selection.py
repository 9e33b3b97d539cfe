"""Axis-aligned box selection of vertices in world space.

Produces the deletion requests fed to :func:`meshcull.core.deleter.delete_vertices`.
Positions are mapped through an optional 4x4 object-to-world matrix before the
containment test; the mirrored box is the box reflected across the x = 0 plane.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import SelectionConfig
from .logging_utils import get_logger

logger = get_logger('meshcull.selection')

__all__ = ['SelectBox', 'select_vertices_in_box', 'transform_points']


@dataclass
class SelectBox:
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    mirrored_x: bool = False

    def __post_init__(self):
        self.center = np.asarray(self.center, dtype=np.float64).reshape(3)
        self.size = np.asarray(self.size, dtype=np.float64).reshape(3)
        if np.any(self.size < 0):
            raise ValueError(f"box size must be non-negative, got {self.size.tolist()}")

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        half = 0.5 * self.size
        return self.center - half, self.center + half

    def mirrored_bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        center = self.center * np.array([-1.0, 1.0, 1.0])
        half = 0.5 * self.size
        return center - half, center + half

    def contains(self, points, inclusive: bool = True, mirror_x: Optional[bool] = None) -> np.ndarray:
        """Boolean mask of the (N, 3) ``points`` inside the box (or its mirror)."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        mask = _inside(pts, *self.bounds(), inclusive=inclusive)
        use_mirror = self.mirrored_x if mirror_x is None else mirror_x
        if use_mirror:
            mask |= _inside(pts, *self.mirrored_bounds(), inclusive=inclusive)
        return mask


def _inside(pts, lo, hi, inclusive=True):
    if inclusive:
        return np.all((pts >= lo) & (pts <= hi), axis=1)
    return np.all((pts > lo) & (pts < hi), axis=1)


def transform_points(points, matrix) -> np.ndarray:
    """Apply a 4x4 affine matrix (column-vector convention) to (N, 3) points."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError(f"transform must be 4x4, got shape {m.shape}")
    homo = np.column_stack([pts, np.ones(len(pts))])
    out = homo @ m.T
    w = out[:, 3:4]
    if not np.allclose(w, 1.0):
        out = out / w
    return out[:, :3]


def select_vertices_in_box(positions, box: SelectBox, transform=None,
                           config: Optional[SelectionConfig] = None) -> np.ndarray:
    """Return the ascending indices of vertices whose world position lies in ``box``.

    Parameters
    ----------
    positions : (N, 3) array
        Local-space vertex positions.
    box : SelectBox
    transform : (4, 4) array, optional
        Object-to-world matrix; identity when omitted.
    config : SelectionConfig, optional
        ``mirror_x`` ORs in the mirrored box even when ``box.mirrored_x`` is
        False; ``inclusive`` controls whether faces count as inside.
    """
    cfg = config or SelectionConfig()
    pts = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    if transform is not None:
        pts = transform_points(pts, transform)
    mirror = box.mirrored_x or cfg.mirror_x
    mask = box.contains(pts, inclusive=cfg.inclusive, mirror_x=mirror)
    selected = np.nonzero(mask)[0]
    logger.debug("box selection: %d of %d vertices (mirror_x=%s)", selected.size, pts.shape[0], mirror)
    return selected
