from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple

from waterfall import GridConfigurationError, WaterfallItems

SPACING_RANGE: Tuple[float, float] = (0.0, 32.0)
DEFAULT_SPACING = 10.0
DEFAULT_ITEMS_SPACING = 10.0
DEFAULT_TRACK_COUNT = 4
MAX_TRACK_COUNT = 10
OUTPUT_DIR = "output"


@dataclass(frozen=True)
class GridSettings:
    """
    User-tunable spacing for the demo grids.
    - spacing: gap between columns/rows
    - items_spacing: gap between consecutive elements inside one column/row
    """

    spacing: float = DEFAULT_SPACING
    items_spacing: float = DEFAULT_ITEMS_SPACING

    def __post_init__(self) -> None:
        low, high = SPACING_RANGE
        for name in ("spacing", "items_spacing"):
            value = getattr(self, name)
            if not low <= value <= high:
                raise GridConfigurationError(f"{name} must be within [{low:g}, {high:g}], got {value}")

    def with_spacing(self, spacing: float) -> "GridSettings":
        return replace(self, spacing=spacing)

    def with_items_spacing(self, items_spacing: float) -> "GridSettings":
        return replace(self, items_spacing=items_spacing)

    def apply(self, items: WaterfallItems) -> WaterfallItems:
        """Copy of ``items`` with every track using ``items_spacing``."""
        return items.setting_all_spacings(self.items_spacing)

    @staticmethod
    def reset() -> "GridSettings":
        return GridSettings()
