"""Preview plots for vertex selections and deletion results.

Meshes are projected onto a coordinate plane and drawn with matplotlib's
triplot; selected vertices are overlaid as red dots.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .mesh_data import MeshData
from .logging_utils import get_logger

logger = get_logger('meshcull.viz')

_PLANES = {'xy': (0, 1), 'xz': (0, 2), 'yz': (1, 2)}


def plot_selection(mesh: MeshData, selected=None, outname: str = "selection.png",
                   plane: str = 'xy', title: str = None) -> str:
    """Render ``mesh`` projected on ``plane`` with ``selected`` vertices in red.

    Each submesh gets its own line color. Returns the written path.
    """
    try:
        a, b = _PLANES[plane]
    except KeyError:
        raise ValueError(f"Unknown plane {plane!r}; expected one of {tuple(_PLANES)}") from None
    pts = mesh.positions
    fig, ax = plt.subplots(figsize=(6, 6))
    cmap = plt.get_cmap('tab10')
    for i, tris in enumerate(mesh.submeshes):
        if tris.shape[0] == 0:
            continue
        ax.triplot(pts[:, a], pts[:, b], tris, lw=0.6, color=cmap(i % 10))
    npts = max(1, pts.shape[0])
    s = max(0.6, min(8.0, 200.0 / float(npts)))
    if pts.shape[0]:
        ax.scatter(pts[:, a], pts[:, b], s=s, color='black')
    if selected is not None:
        sel = np.asarray(list(selected), dtype=np.int64)
        sel = sel[(sel >= 0) & (sel < pts.shape[0])]
        if sel.size:
            ax.scatter(pts[sel, a], pts[sel, b], s=max(4.0, 3 * s), color='red', zorder=3)
        logger.debug("plotting %d selected vertices", sel.size)
    ax.set_title(title or f"{mesh.name}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles")
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    return outname


__all__ = ['plot_selection']
