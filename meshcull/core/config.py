"""Configuration objects for vertex deletion and box selection."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import REMAP_STRATEGIES, OUT_OF_RANGE_POLICIES


@dataclass
class DeletionConfig:
    """Options for :func:`meshcull.core.deleter.delete_vertices`.

    Attributes
    ----------
    remap_strategy : str
        'prefix' (binary-search prefix counts, default) or 'descending'
        (one pass per deleted index, highest first). Both give identical
        triangle indices.
    out_of_range : str
        'ignore' drops indices outside [0, vertex_count) with a warning;
        'raise' rejects them with IndexOutOfRangeError.
    validate_input : bool
        Run MeshData.validate() on the input before deleting.
    name_suffix : str or None
        Appended to the mesh name of the result; None keeps the name.
    """
    remap_strategy: str = 'prefix'
    out_of_range: str = 'ignore'
    validate_input: bool = False
    name_suffix: Optional[str] = '_deleted'

    def __post_init__(self):
        if self.remap_strategy not in REMAP_STRATEGIES:
            raise ValueError(
                f"Unknown remap_strategy {self.remap_strategy!r}; expected one of {REMAP_STRATEGIES}")
        if self.out_of_range not in OUT_OF_RANGE_POLICIES:
            raise ValueError(
                f"Unknown out_of_range policy {self.out_of_range!r}; expected one of {OUT_OF_RANGE_POLICIES}")


@dataclass
class SelectionConfig:
    """Preferences for box selection.

    - mirror_x: also select vertices inside the box reflected across x = 0.
    - inclusive: points exactly on a box face count as inside.
    """
    mirror_x: bool = False
    inclusive: bool = True


__all__ = ['DeletionConfig', 'SelectionConfig']
