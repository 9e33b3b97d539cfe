"""Canonical deletion sets and order-preserving exclusion of vertex rows.

The canonical set is the single source of truth shared by the attribute,
triangle and blend-shape stages. Membership tests are binary searches against
its ascending form.
"""
from __future__ import annotations

import bisect
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .constants import OUT_OF_RANGE_POLICIES
from .errors import EmptySelectionError, IndexOutOfRangeError
from .logging_utils import get_logger

logger = get_logger('meshcull.filter')

T = TypeVar('T')

_INT64 = np.iinfo(np.int64)

__all__ = ['CanonicalDeletionSet', 'canonicalize', 'keep_mask', 'exclude', 'iter_excluding']


@dataclass(frozen=True, eq=False)
class CanonicalDeletionSet:
    """Deduplicated, ascending vertex indices scheduled for deletion.

    ``ignored`` holds the requested indices dropped by the out-of-range policy,
    as exact Python ints since they need not fit in int64; they take no part
    in filtering or remapping.
    """
    ascending: np.ndarray
    ignored: Tuple[int, ...] = ()

    def __post_init__(self):
        asc = np.array(self.ascending, dtype=np.int64).reshape(-1)
        asc.setflags(write=False)
        object.__setattr__(self, 'ascending', asc)
        object.__setattr__(self, 'ignored', tuple(int(i) for i in self.ignored))

    @property
    def descending(self) -> np.ndarray:
        return self.ascending[::-1]

    def __len__(self) -> int:
        return int(self.ascending.shape[0])

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self.ascending)

    def __contains__(self, value) -> bool:
        i = int(np.searchsorted(self.ascending, value))
        return i < len(self) and int(self.ascending[i]) == int(value)

    def contains(self, values) -> np.ndarray:
        """Vectorized membership: boolean array shaped like ``values``."""
        values = np.asarray(values, dtype=np.int64)
        if len(self) == 0:
            return np.zeros(values.shape, dtype=bool)
        pos = np.searchsorted(self.ascending, values)
        pos_clipped = np.minimum(pos, len(self) - 1)
        return (pos < len(self)) & (self.ascending[pos_clipped] == values)

    def count_below(self, values) -> np.ndarray:
        """Number of deleted indices strictly smaller than each of ``values``."""
        return np.searchsorted(self.ascending, np.asarray(values, dtype=np.int64), side='left')

    def __repr__(self):
        return f"CanonicalDeletionSet({self.ascending.tolist()!r})"


def _as_index(value) -> int:
    """Exact Python int for ``value``; non-integral numbers raise ValueError."""
    try:
        return operator.index(value)
    except TypeError:
        pass
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"vertex index {value!r} is not an integer")
    return int(number)


def canonicalize(requested: Iterable[int], max_index: Optional[int] = None,
                 policy: str = 'ignore') -> CanonicalDeletionSet:
    """Collapse a deletion request into its canonical ascending form.

    Parameters
    ----------
    requested : iterable of int
        Vertex indices to delete; duplicates and any order are accepted.
        Integral floats such as ``2.0`` are accepted, fractional ones are not.
    max_index : int, optional
        Vertex count of the target mesh. When given, indices outside
        [0, max_index) are handled by ``policy``; when None no range check
        is made.
    policy : {'ignore', 'raise'}
        'ignore' drops out-of-range indices (logged as a warning);
        'raise' raises IndexOutOfRangeError.

    Raises
    ------
    EmptySelectionError
        If ``requested`` is empty, or nothing is left after dropping
        out-of-range indices.
    ValueError
        For non-integral indices, or, without ``max_index``, indices that
        do not fit in int64.
    """
    if policy not in OUT_OF_RANGE_POLICIES:
        raise ValueError(f"Unknown out-of-range policy {policy!r}")
    values = sorted({_as_index(i) for i in requested})
    if not values:
        raise EmptySelectionError()
    ignored = []
    if max_index is not None:
        limit = int(max_index)
        ignored = [v for v in values if v < 0 or v >= limit]
        if ignored:
            if policy == 'raise':
                raise IndexOutOfRangeError(ignored, limit)
            values = [v for v in values if 0 <= v < limit]
            logger.warning("ignoring %d vertex indices outside [0, %d): %s",
                           len(ignored), limit, ignored[:8])
            if not values:
                raise EmptySelectionError("Vertices Not Found (all requested indices out of range)")
    elif values[0] < _INT64.min or values[-1] > _INT64.max:
        raise ValueError(f"vertex indices must fit in int64, got range [{values[0]}, {values[-1]}]")
    return CanonicalDeletionSet(np.array(values, dtype=np.int64), tuple(ignored))


def keep_mask(length: int, deletion_set: CanonicalDeletionSet) -> np.ndarray:
    """Boolean mask of the positions in ``range(length)`` that survive deletion."""
    return ~deletion_set.contains(np.arange(int(length), dtype=np.int64))


def exclude(source, deletion_set: CanonicalDeletionSet,
            keep: Optional[np.ndarray] = None) -> np.ndarray:
    """Return the rows of ``source`` whose position is not in the deletion set.

    Relative order is preserved. Empty channels pass through unchanged, so an
    unused attribute stays unused. ``keep`` is a precomputed
    :func:`keep_mask`; it is used when its length matches ``source`` and the
    mask is rebuilt otherwise.
    """
    arr = np.asarray(source)
    if arr.shape[0] == 0:
        return arr.copy()
    if keep is None or keep.shape[0] != arr.shape[0]:
        keep = keep_mask(arr.shape[0], deletion_set)
    return np.ascontiguousarray(arr[keep])


def iter_excluding(source: Sequence[T], deletion_set: CanonicalDeletionSet) -> Iterator[T]:
    """Lazily yield ``source[i]`` for every ``i`` not in the deletion set.

    Works on any sequence; each position costs one bisect against the
    ascending set.
    """
    asc = deletion_set.ascending.tolist()
    n = len(asc)
    for i, item in enumerate(source):
        j = bisect.bisect_left(asc, i)
        if j < n and asc[j] == i:
            continue
        yield item
