# =========================
# Strided column/row views
# =========================

from __future__ import annotations
from typing import Any, Iterator, List, Sequence, Tuple, TypeVar, Union, overload

from waterfall.errors import GridConfigurationError, GridIndexError

T = TypeVar("T")


class GridSlice(Sequence[T]):
    """
    A read-only view over one column (or row) of a 2D grid stored in a flat sequence.

    Elements are dealt round-robin: element ``k`` of group ``g`` is ``source[k * total_groups + g]``.
    No element is copied; the view keeps a reference to ``source`` and reads through it.

    >>> data = [0, 1, 2, 3, 4, 5, 6, 7]
    >>> str(GridSlice(data, 0, 2)), str(GridSlice(data, 1, 2))
    ('[0, 2, 4, 6]', '[1, 3, 5, 7]')

    Notes
    -----
    - ``source`` must be zero-based and randomly addressable (list, tuple, range, numpy array...).
    - The length is recomputed from ``len(source)`` on every call; callers must not mutate
      ``source`` while a view over it is being consumed.
    - When ``len(source)`` is not a multiple of ``total_groups`` the extra elements go to
      the lowest groups first.
    """

    __slots__ = ("_source", "group", "total_groups")

    def __init__(self, source: Sequence[T], group: int, total_groups: int) -> None:
        if total_groups < 1:
            raise GridConfigurationError(f"total_groups must be >= 1, got {total_groups}")
        if not 0 <= group < total_groups:
            raise GridConfigurationError(f"group must be in [0, {total_groups}), got {group}")
        self._source = source
        self.group = group
        self.total_groups = total_groups

    @property
    def source(self) -> Sequence[T]:
        return self._source

    def __len__(self) -> int:
        count = len(self._source)
        return count // self.total_groups + (1 if count % self.total_groups > self.group else 0)

    def flat_index(self, index: int) -> int:
        """Translate a local index of this view into a position of ``source``."""
        length = len(self)
        if not 0 <= index < length:
            raise GridIndexError(f"index {index} out of range for slice of length {length}")
        return index * self.total_groups + self.group

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        if isinstance(index, slice):
            return [self._source[self.flat_index(k)] for k in range(len(self))[index]]
        return self._source[self.flat_index(index)]

    def __iter__(self) -> Iterator[T]:
        for k in range(len(self)):
            yield self._source[k * self.total_groups + self.group]

    def __reversed__(self) -> Iterator[T]:
        for k in reversed(range(len(self))):
            yield self._source[k * self.total_groups + self.group]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridSlice):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return "[" + ", ".join(str(element) for element in self) + "]"

    def __repr__(self) -> str:
        return f"GridSlice({self}, group={self.group}, total_groups={self.total_groups})"


def column_slice(source: Sequence[T], column: int, total_columns: int) -> GridSlice[T]:
    """Return the view of ``source`` that lands in ``column`` of a grid with ``total_columns`` columns."""
    return GridSlice(source, column, total_columns)


def strided_position(flat_index: int, total_groups: int) -> Tuple[int, int]:
    """
    Inverse of ``GridSlice.flat_index``: map a position of the flat source
    to its ``(group, local_index)`` pair.
    """
    if total_groups < 1:
        raise GridConfigurationError(f"total_groups must be >= 1, got {total_groups}")
    if flat_index < 0:
        raise GridIndexError(f"flat index must be non-negative, got {flat_index}")
    return flat_index % total_groups, flat_index // total_groups


def indexed(sequence: Sequence[Any]) -> List[Tuple[int, Any]]:
    """Pair every element with its position, keeping the original order."""
    return list(enumerate(sequence))
