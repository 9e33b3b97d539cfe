"""Inspection export for meshcull meshes.

- write_vtk: legacy ASCII VTK for ParaView/VisIt. Carries positions, all
  submesh triangles, a per-triangle ``submesh`` scalar and, when present,
  normals as point vectors. Not an asset format: UVs, colors, skinning and
  blend shapes are not written.
"""
from __future__ import annotations

import warnings
from typing import Dict, Optional

import numpy as np

from .mesh_data import MeshData


def _write_field(f, name: str, data: np.ndarray, kind: str) -> None:
    data = np.asarray(data)
    if data.ndim == 1:
        f.write(f"SCALARS {name} double 1\n")
        f.write("LOOKUP_TABLE default\n")
        for val in data:
            f.write(f"{float(val):.16e}\n")
    elif data.ndim == 2 and data.shape[1] == 3:
        f.write(f"VECTORS {name} double\n")
        for vec in data:
            f.write(f"{vec[0]:.16e} {vec[1]:.16e} {vec[2]:.16e}\n")
    else:
        warnings.warn(f"Skipping {kind}['{name}'] with unsupported shape {data.shape}")


def write_vtk(filepath: str,
              mesh: MeshData,
              point_data: Optional[Dict[str, np.ndarray]] = None,
              cell_data: Optional[Dict[str, np.ndarray]] = None,
              title: Optional[str] = None) -> None:
    """Write a mesh to legacy VTK format (ASCII).

    Parameters
    ----------
    filepath : str
        Output .vtk file path
    mesh : MeshData
        Mesh to export; all submeshes are written as one cell list in slot order.
    point_data : dict, optional
        Extra per-vertex fields, (N,) scalars or (N, 3) vectors.
    cell_data : dict, optional
        Extra per-triangle fields, (T,) scalars or (T, 3) vectors.
    title : str, optional
        Dataset title; defaults to the mesh name.

    Examples
    --------
    >>> result = delete_vertices(mesh, [3, 4])
    >>> write_vtk('result.vtk', result)
    """
    points = mesh.positions
    triangles = mesh.triangles
    num_points = len(points)
    num_triangles = len(triangles)

    points_fields: Dict[str, np.ndarray] = {}
    if mesh.normals.shape[0] == num_points and num_points:
        points_fields['normals'] = mesh.normals
    for name, data in (point_data or {}).items():
        if np.asarray(data).shape[0] != num_points:
            raise ValueError(f"point_data['{name}'] has {np.asarray(data).shape[0]} rows, expected {num_points}")
        points_fields[name] = data

    cells_fields: Dict[str, np.ndarray] = {
        'submesh': np.concatenate([np.full(len(t), i, dtype=np.float64) for i, t in enumerate(mesh.submeshes)])
        if mesh.submeshes else np.empty((0,), dtype=np.float64),
    }
    for name, data in (cell_data or {}).items():
        if np.asarray(data).shape[0] != num_triangles:
            raise ValueError(f"cell_data['{name}'] has {np.asarray(data).shape[0]} rows, expected {num_triangles}")
        cells_fields[name] = data

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title or mesh.name}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {num_points} double\n")
        for pt in points:
            f.write(f"{pt[0]:.16e} {pt[1]:.16e} {pt[2]:.16e}\n")

        # numIndices v0 v1 v2
        f.write(f"\nCELLS {num_triangles} {num_triangles * 4}\n")
        for tri in triangles:
            f.write(f"3 {tri[0]} {tri[1]} {tri[2]}\n")

        # 5 = VTK_TRIANGLE
        f.write(f"\nCELL_TYPES {num_triangles}\n")
        for _ in range(num_triangles):
            f.write("5\n")

        if points_fields:
            f.write(f"\nPOINT_DATA {num_points}\n")
            for name, data in points_fields.items():
                _write_field(f, name, data, 'point_data')

        if num_triangles:
            f.write(f"\nCELL_DATA {num_triangles}\n")
            for name, data in cells_fields.items():
                _write_field(f, name, data, 'cell_data')


__all__ = ['write_vtk']
