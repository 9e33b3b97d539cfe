from meshcull.core.deleter import delete_vertices_with_stats
from meshcull.core.stats import DeletionStats, format_stats_table


def test_to_dict_derived_fields(grid_mesh):
    _, stats = delete_vertices_with_stats(grid_mesh, [0, 1, 2])
    d = stats.to_dict()
    assert d['vertices_removed'] == 3
    assert d['triangles_removed'] == d['triangles_before'] - d['triangles_after']
    assert d['dropped_submeshes'] == [0]
    assert d['strategy'] == 'prefix'
    assert 0.0 < d['triangle_removal_rate'] <= 1.0
    assert d['time_total'] >= 0.0
    assert 'positions' in d['channels']


def test_format_stats_table(grid_mesh):
    _, stats = delete_vertices_with_stats(grid_mesh, [0, 1, 2, 2])
    table = format_stats_table(stats.to_dict())
    lines = table.splitlines()
    assert lines[0].split() == ['item', 'before', 'after', 'removed']
    assert lines[2].split() == ['vertices', '12', '9', '3']
    assert 'request: 4 indices, 3 unique, 0 ignored' in table
    assert 'dropped submeshes: [0]' in table


def test_empty_stats():
    assert format_stats_table({}) == "<no stats>"
    d = DeletionStats().to_dict()
    assert d['triangle_removal_rate'] == 0.0
    assert d['dropped_submeshes'] == []
