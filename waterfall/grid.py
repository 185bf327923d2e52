# =========================
# Waterfall grid composition
# =========================

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterator, List, Optional, Sequence, Tuple

from waterfall.axis import WaterfallItems
from waterfall.errors import GridIndexError
from waterfall.grid_slice import GridSlice, indexed, strided_position
from waterfall.item_info import WaterfallItemInfo

logger = logging.getLogger(__name__)


def default_id(element: Any) -> Hashable:
    """Use ``element.id`` when present, otherwise the element itself."""
    return getattr(element, "id", element)


@dataclass
class WaterfallGrid:
    """
    Splits ``data`` across the tracks described by ``items``.

    Every call to ``tracks()`` is a fresh pass over the current ``data``: the
    per-track views are rebuilt, so appending to ``data`` or swapping ``items``
    between passes is picked up without any bookkeeping.

    - spacing: gap between tracks (None = renderer default)
    - id: identity extractor used to match elements across passes (None = ``default_id``)
    """

    items: WaterfallItems
    data: Sequence[Any]
    spacing: Optional[float] = None
    id: Optional[Callable[[Any], Hashable]] = None

    def track(self, index: int) -> WaterfallItemInfo:
        count = self.items.items_count
        if not 0 <= index < count:
            raise GridIndexError(f"track index {index} out of range for {count} {self.items.axis.value}")
        return WaterfallItemInfo(
            grid_item=self.items.track(index),
            index=index,
            items_count=count,
            data=GridSlice(self.data, index, count),
        )

    def tracks(self) -> List[WaterfallItemInfo]:
        count = self.items.items_count
        logger.debug("Splitting %d elements across %d %s", len(self.data), count, self.items.axis.value)
        return [
            WaterfallItemInfo(grid_item=spec, index=i, items_count=count, data=GridSlice(self.data, i, count))
            for i, spec in indexed(self.items.tracks)
        ]

    def __iter__(self) -> Iterator[WaterfallItemInfo]:
        return iter(self.tracks())

    def track_ids(self, index: int) -> List[Hashable]:
        identity = self.id if self.id is not None else default_id
        return [identity(element) for element in self.track(index).data]

    def locate(self, flat_index: int) -> Tuple[int, int]:
        """Return ``(track, local_index)`` for the element at ``flat_index`` of ``data``."""
        if flat_index >= len(self.data):
            raise GridIndexError(f"flat index {flat_index} out of range for {len(self.data)} elements")
        return strided_position(flat_index, self.items.items_count)
