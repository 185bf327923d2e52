from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from waterfall.axis import Column, Row, TrackSpec
from waterfall.grid_slice import GridSlice


@dataclass(frozen=True)
class WaterfallItemInfo:
    """
    Everything a renderer needs to draw one full column or row of a waterfall grid.
    - grid_item: the Column or Row spec of this track
    - index: position of the track in the grid
    - items_count: total number of tracks in the grid
    - data: the elements that land in this track, in order
    """

    grid_item: TrackSpec
    index: int
    items_count: int
    data: GridSlice[Any]

    @property
    def column(self) -> Optional[Column]:
        return self.grid_item if isinstance(self.grid_item, Column) else None

    @property
    def row(self) -> Optional[Row]:
        return self.grid_item if isinstance(self.grid_item, Row) else None

    @property
    def is_vertical(self) -> bool:
        return isinstance(self.grid_item, Column)

    @property
    def spacing(self) -> Optional[float]:
        return self.grid_item.spacing
