import numpy as np
import pytest

from meshcull.core.errors import MeshValidationError
from meshcull.core.mesh_data import BlendShape, MeshData, as_channel


def test_defaults_are_empty_channels():
    mesh = MeshData(positions=np.zeros((3, 3)), submeshes=[[0, 1, 2]])
    assert mesh.vertex_count == 3
    assert mesh.normals.shape == (0, 3)
    assert mesh.tangents.shape == (0, 4)
    assert mesh.colors32.dtype == np.uint8
    assert len(mesh.uvs) == 4 and all(uv.shape == (0, 2) for uv in mesh.uvs)
    assert mesh.bind_poses.shape == (0, 4, 4)
    assert mesh.active_channels() == ['positions']


def test_flat_triangle_buffer_is_reshaped():
    mesh = MeshData(positions=np.zeros((4, 3)), submeshes=[[0, 1, 2, 1, 2, 3]])
    assert mesh.submeshes[0].shape == (2, 3)
    assert mesh.submeshes[0].dtype == np.int32
    assert mesh.triangle_count == 2


def test_flat_buffer_with_partial_triangle_is_rejected():
    with pytest.raises(MeshValidationError):
        MeshData(positions=np.zeros((4, 3)), submeshes=[[0, 1, 2, 3]])


def test_wrong_width_is_rejected():
    with pytest.raises(MeshValidationError):
        as_channel(np.zeros((4, 3)), 2, name='uv0')


def test_single_array_is_one_submesh():
    mesh = MeshData(positions=np.zeros((3, 3)), submeshes=np.array([[0, 1, 2]]))
    assert mesh.submesh_count == 1


def test_too_many_uv_channels():
    with pytest.raises(MeshValidationError):
        MeshData(positions=np.zeros((1, 3)), uvs=[np.zeros((1, 2))] * 5)


def test_triangles_stacks_submeshes_in_order():
    mesh = MeshData(positions=np.zeros((5, 3)), submeshes=[[[0, 1, 2]], [[2, 3, 4]]])
    assert mesh.triangles.tolist() == [[0, 1, 2], [2, 3, 4]]
    assert MeshData(positions=np.zeros((1, 3))).triangles.shape == (0, 3)


def test_check_reports_each_problem():
    mesh = MeshData(
        positions=np.zeros((3, 3)),
        normals=np.zeros((2, 3)),
        bone_weights=np.ones((3, 4)),
        submeshes=[[0, 1, 5]],
        blend_shapes=[BlendShape('s', 1.0, np.zeros((4, 3)))],
    )
    ok, msgs = mesh.check()
    assert not ok
    text = ' | '.join(msgs)
    assert 'normals' in text
    assert 'bone_indices and bone_weights' in text
    assert 'submesh 0' in text
    assert "'s'" in text
    with pytest.raises(MeshValidationError) as exc:
        mesh.validate()
    assert len(exc.value.problems) == len(msgs)


def test_validate_returns_self_for_good_mesh(grid_mesh):
    assert grid_mesh.validate() is grid_mesh


def test_active_channels_on_full_mesh(grid_mesh):
    assert grid_mesh.active_channels() == [
        'positions', 'normals', 'tangents', 'colors', 'colors32',
        'uv0', 'uv1', 'uv2', 'uv3', 'bone_weights',
    ]


def test_copy_is_deep(grid_mesh):
    dup = grid_mesh.copy()
    dup.positions[0, 0] = 99.0
    dup.blend_shapes[0].delta_vertices[0, 0] = 99.0
    assert grid_mesh.positions[0, 0] != 99.0
    assert grid_mesh.blend_shapes[0].delta_vertices[0, 0] != 99.0


def test_blend_shape_frame_zero_fills():
    shape = BlendShape('s', 10.0, delta_normals=np.ones((2, 3)))
    dv, dn, dt = shape.frame(2)
    assert not dv.any() and not dt.any()
    assert dn.shape == (2, 3) and dn.all()


def test_repr_mentions_counts(grid_mesh):
    text = repr(grid_mesh)
    assert 'vertices=12' in text and 'submeshes=2' in text
