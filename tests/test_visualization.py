import pytest

from meshcull.core.visualization import plot_selection
from meshcull.core.deleter import delete_vertices


def test_plot_selection_writes_png(grid_mesh, tmp_path):
    out = tmp_path / "sel.png"
    path = plot_selection(grid_mesh, selected=[0, 5, 99], outname=str(out))
    assert path == str(out)
    assert out.exists() and out.stat().st_size > 0


def test_plot_after_deletion_and_other_plane(grid_mesh, tmp_path):
    result = delete_vertices(grid_mesh, [0, 1, 2])
    out = tmp_path / "after.png"
    plot_selection(result, outname=str(out), plane='xy', title='after')
    assert out.exists()


def test_plot_unknown_plane(grid_mesh, tmp_path):
    with pytest.raises(ValueError):
        plot_selection(grid_mesh, outname=str(tmp_path / "x.png"), plane='uv')
