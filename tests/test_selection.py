import numpy as np
import pytest

from meshcull.core.config import SelectionConfig
from meshcull.core.selection import SelectBox, select_vertices_in_box, transform_points


PTS = np.array([
    [0.0, 0.0, 0.0],   # 0 inside
    [0.5, 0.5, 0.5],   # 1 on the face
    [2.0, 0.0, 0.0],   # 2 outside
    [-2.0, 0.0, 0.0],  # 3 inside the mirrored box only
])


def test_box_bounds():
    box = SelectBox(center=(1.0, 2.0, 3.0), size=(2.0, 2.0, 2.0))
    lo, hi = box.bounds()
    assert lo.tolist() == [0.0, 1.0, 2.0]
    assert hi.tolist() == [2.0, 3.0, 4.0]
    mlo, mhi = box.mirrored_bounds()
    assert mlo.tolist() == [-2.0, 1.0, 2.0]
    assert mhi.tolist() == [0.0, 3.0, 4.0]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        SelectBox(size=(1.0, -1.0, 1.0))


def test_select_inclusive_and_exclusive():
    box = SelectBox(center=(0, 0, 0), size=(1, 1, 1))
    assert select_vertices_in_box(PTS, box).tolist() == [0, 1]
    assert select_vertices_in_box(PTS, box, config=SelectionConfig(inclusive=False)).tolist() == [0]


def test_mirrored_selection():
    box = SelectBox(center=(2.0, 0, 0), size=(1, 1, 1), mirrored_x=True)
    assert select_vertices_in_box(PTS, box).tolist() == [2, 3]
    plain = SelectBox(center=(2.0, 0, 0), size=(1, 1, 1))
    assert select_vertices_in_box(PTS, plain).tolist() == [2]
    assert select_vertices_in_box(PTS, plain, config=SelectionConfig(mirror_x=True)).tolist() == [2, 3]


def test_transform_moves_points_into_world_space():
    m = np.eye(4)
    m[:3, 3] = [2.0, 0.0, 0.0]
    world = transform_points(PTS, m)
    assert world[0].tolist() == [2.0, 0.0, 0.0]
    box = SelectBox(center=(2.0, 0, 0), size=(0.2, 0.2, 0.2))
    assert select_vertices_in_box(PTS, box, transform=m).tolist() == [0]


def test_transform_rejects_bad_shape():
    with pytest.raises(ValueError):
        transform_points(PTS, np.eye(3))


def test_empty_selection_returns_empty_array():
    box = SelectBox(center=(10, 10, 10), size=(1, 1, 1))
    sel = select_vertices_in_box(PTS, box)
    assert sel.size == 0
