"""Smoke test to ensure top-level package import works and exposes the flat API."""
import numpy as np


def test_import_meshcull_smoke():
    import meshcull
    from meshcull.core.errors import EmptySelectionError
    assert hasattr(meshcull, 'delete_vertices')
    assert hasattr(meshcull, 'MeshData')
    assert meshcull.EmptySelectionError is EmptySelectionError
    assert isinstance(meshcull.__version__, str)
    assert callable(meshcull.plot_selection)  # lazy proxy


def test_facade_round_trip():
    import meshcull

    mesh = meshcull.MeshData.from_triangles(np.zeros((4, 3)), [[0, 1, 2], [1, 2, 3]])
    out = meshcull.delete_vertices(mesh, [0])
    assert out.submeshes[0].tolist() == [[0, 1, 2]]
