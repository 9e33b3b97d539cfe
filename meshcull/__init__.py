"""Public package API for the meshcull vertex deletion toolkit.

This facade provides a stable, flatter import surface on top of the
internal implementation package ``meshcull.core`` while deferring the
matplotlib-backed preview module until first use to keep
``import meshcull`` fast.

Example
-------
    from meshcull import MeshData, delete_vertices

    result = delete_vertices(mesh, [4, 7, 7, 12])

The deeper modules (``meshcull.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound

try:
    __version__ = _pkg_version("meshcull")  # populated when installed
except _NotFound:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('meshcull.core.constants')
_errors = _imp('meshcull.core.errors')
_config = _imp('meshcull.core.config')
_mesh = _imp('meshcull.core.mesh_data')
_filter = _imp('meshcull.core.vertex_filter')
_remap = _imp('meshcull.core.triangle_remap')
_submesh = _imp('meshcull.core.submesh')
_shapes = _imp('meshcull.core.blend_shapes')
_deleter = _imp('meshcull.core.deleter')
_selection = _imp('meshcull.core.selection')
_stats = _imp('meshcull.core.stats')
_log = _imp('meshcull.core.logging_utils')
_io = _imp('meshcull.core.io')


def _lazy_attr(mod_name, name):
    def _wrapper(*args, **kwargs):
        return getattr(_imp(mod_name), name)(*args, **kwargs)
    _wrapper.__name__ = name
    return _wrapper


# Data model
MeshData = _mesh.MeshData
BlendShape = _mesh.BlendShape

# Pipeline entry points
delete_vertices = _deleter.delete_vertices
delete_vertices_with_stats = _deleter.delete_vertices_with_stats
canonicalize = _filter.canonicalize
exclude = _filter.exclude
CanonicalDeletionSet = _filter.CanonicalDeletionSet
remap = _remap.remap
assemble = _submesh.assemble
project = _shapes.project

# Selection
SelectBox = _selection.SelectBox
select_vertices_in_box = _selection.select_vertices_in_box

# Configuration, errors, stats
DeletionConfig = _config.DeletionConfig
SelectionConfig = _config.SelectionConfig
DeletionStats = _stats.DeletionStats
MeshcullError = _errors.MeshcullError
EmptySelectionError = _errors.EmptySelectionError
IndexOutOfRangeError = _errors.IndexOutOfRangeError
MeshValidationError = _errors.MeshValidationError

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# I/O and preview
write_vtk = _io.write_vtk
plot_selection = _lazy_attr('meshcull.core.visualization', 'plot_selection')

# Namespace submodules for exploratory users
constants = _const
vertex_filter = _filter
triangle_remap = _remap
submesh = _submesh
blend_shapes = _shapes
selection = _selection
stats = _stats
io = _io

__all__ = [
    '__version__',
    # data model
    'MeshData', 'BlendShape',
    # pipeline
    'delete_vertices', 'delete_vertices_with_stats', 'canonicalize', 'exclude',
    'CanonicalDeletionSet', 'remap', 'assemble', 'project',
    # selection
    'SelectBox', 'select_vertices_in_box',
    # config / errors / stats
    'DeletionConfig', 'SelectionConfig', 'DeletionStats',
    'MeshcullError', 'EmptySelectionError', 'IndexOutOfRangeError', 'MeshValidationError',
    # logging
    'get_logger', 'configure_logging',
    # io / preview
    'write_vtk', 'plot_selection',
    # submodules / namespaces
    'constants', 'vertex_filter', 'triangle_remap', 'submesh', 'blend_shapes', 'selection', 'stats', 'io',
]
