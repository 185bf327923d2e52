# =========================
# Grid axis / per-track layout
# =========================

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from waterfall.errors import GridConfigurationError, GridIndexError


class Axis(str, Enum):
    COLUMNS = "columns"  # grows downward
    ROWS = "rows"  # grows rightward


class HorizontalAlignment(str, Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VerticalAlignment(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Column:
    """
    How a single column lays out its children.
    - alignment: horizontal alignment of each child inside the column.
    - spacing: gap between consecutive children; None lets the renderer pick its default.
    """

    alignment: HorizontalAlignment = HorizontalAlignment.CENTER
    spacing: Optional[float] = None


@dataclass(frozen=True)
class Row:
    """
    How a single row lays out its children.
    - alignment: vertical alignment of each child inside the row.
    - spacing: gap between consecutive children; None lets the renderer pick its default.
    """

    alignment: VerticalAlignment = VerticalAlignment.CENTER
    spacing: Optional[float] = None


TrackSpec = Union[Column, Row]

_SPEC_TYPES = {Axis.COLUMNS: Column, Axis.ROWS: Row}


class WaterfallItems:
    """
    Axis of a waterfall grid: either a list of ``Column`` (the grid grows vertically)
    or a list of ``Row`` (the grid grows horizontally). One track is built per entry.

    Behaves as a value: ``set_all_spacings``/``set_spacing`` rebind an internal tuple,
    so the copies returned by ``setting_all_spacings``/``setting_spacing`` never share state.
    """

    __slots__ = ("_axis", "_tracks")

    def __init__(self, axis: Axis, tracks: Iterable[TrackSpec] = ()) -> None:
        axis = Axis(axis)
        tracks = tuple(tracks)
        expected = _SPEC_TYPES[axis]
        for spec in tracks:
            if not isinstance(spec, expected):
                raise GridConfigurationError(
                    f"{axis.value} configuration expects {expected.__name__} specs, got {type(spec).__name__}"
                )
        self._axis = axis
        self._tracks: Tuple[TrackSpec, ...] = tracks

    @classmethod
    def from_columns(cls, columns: Iterable[Column]) -> "WaterfallItems":
        return cls(Axis.COLUMNS, columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> "WaterfallItems":
        return cls(Axis.ROWS, rows)

    @classmethod
    def repeating(cls, axis: Axis, count: int, spacing: Optional[float] = None) -> "WaterfallItems":
        """Build ``count`` default tracks along ``axis``, all sharing ``spacing``."""
        if count < 0:
            raise GridConfigurationError(f"track count must be non-negative, got {count}")
        spec_type = _SPEC_TYPES[Axis(axis)]
        return cls(axis, [spec_type(spacing=spacing) for _ in range(count)])

    # ----- read-only accessors -----

    @property
    def axis(self) -> Axis:
        return self._axis

    @property
    def tracks(self) -> Tuple[TrackSpec, ...]:
        return self._tracks

    @property
    def items_count(self) -> int:
        """Total number of columns or rows in the grid."""
        return len(self._tracks)

    @property
    def columns(self) -> Optional[List[Column]]:
        """All columns if the grid grows vertically, otherwise None."""
        if self._axis is Axis.COLUMNS:
            return list(self._tracks)  # type: ignore[arg-type]
        return None

    @property
    def rows(self) -> Optional[List[Row]]:
        """All rows if the grid grows horizontally, otherwise None."""
        if self._axis is Axis.ROWS:
            return list(self._tracks)  # type: ignore[arg-type]
        return None

    @property
    def is_vertical(self) -> bool:
        return self._axis is Axis.COLUMNS

    @property
    def is_horizontal(self) -> bool:
        return not self.is_vertical

    def track(self, index: int) -> TrackSpec:
        self._check_index(index)
        return self._tracks[index]

    # ----- in-place mutation -----

    def set_all_spacings(self, spacing: Optional[float]) -> None:
        """Set the spacing between elements of every column or row."""
        self._tracks = tuple(replace(spec, spacing=spacing) for spec in self._tracks)

    def set_spacing(self, spacing: Optional[float], index: int) -> None:
        """Set the spacing between elements of the column or row at ``index``."""
        self._check_index(index)
        tracks = list(self._tracks)
        tracks[index] = replace(tracks[index], spacing=spacing)
        self._tracks = tuple(tracks)

    # ----- copy-returning variants -----

    def setting_all_spacings(self, spacing: Optional[float]) -> "WaterfallItems":
        copy = self.copy()
        copy.set_all_spacings(spacing)
        return copy

    def setting_spacing(self, spacing: Optional[float], index: int) -> "WaterfallItems":
        copy = self.copy()
        copy.set_spacing(spacing, index)
        return copy

    def flipped(self) -> "WaterfallItems":
        """Switch orientation, keeping the track count and resetting every track to defaults."""
        other = Axis.ROWS if self.is_vertical else Axis.COLUMNS
        return WaterfallItems.repeating(other, self.items_count)

    def resized(self, count: int, spacing: Optional[float] = None) -> "WaterfallItems":
        """Same orientation with ``count`` default tracks."""
        return WaterfallItems.repeating(self._axis, count, spacing)

    def copy(self) -> "WaterfallItems":
        return WaterfallItems(self._axis, self._tracks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tracks):
            raise GridIndexError(f"track index {index} out of range for {len(self._tracks)} {self._axis.value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WaterfallItems):
            return NotImplemented
        return self._axis is other._axis and self._tracks == other._tracks

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WaterfallItems.{self._axis.value}({list(self._tracks)!r})"
