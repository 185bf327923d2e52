# =========================
# Track builders
# =========================

from __future__ import annotations
from typing import Any, Callable, List, Sequence

import numpy as np
import plotly.graph_objects as go

from plot.tile_spec import TileSpec
from waterfall import WaterfallItemInfo

# Fraction of the free cross-axis space placed before a tile, per alignment value.
_ALIGNMENT_SHIFT = {
    "leading": 0.0,
    "top": 0.0,
    "center": 0.5,
    "trailing": 1.0,
    "bottom": 1.0,
}


def main_axis_offsets(extents: Sequence[float], spacing: float) -> np.ndarray:
    """Start offset of each element when they are stacked with ``spacing`` in between."""
    sizes = np.asarray(extents, dtype=float)
    if sizes.size == 0:
        return sizes
    return np.concatenate(([0.0], np.cumsum(sizes + spacing)[:-1]))


def build_track_tiles(
    info: WaterfallItemInfo,
    *,
    thickness: float,
    track_offset: float,
    default_spacing: float,
    extent: Callable[[Any], float] = lambda e: e.size,
    cross_ratio: Callable[[Any], float] = lambda e: getattr(e, "cross_ratio", 1.0),
    color: Callable[[Any], str] = lambda e: getattr(e, "color", "gray"),
    label: Callable[[Any], str] = str,
) -> List[TileSpec]:
    """
    Lay out the elements of one column/row.

    - Along the growth axis, elements are stacked with the track's spacing
      (``default_spacing`` when the track leaves it unset).
    - Across it, each element takes ``cross_ratio * thickness`` and is placed
      according to the track's alignment, starting at ``track_offset``.
    """
    elements = list(info.data)
    spacing = info.spacing if info.spacing is not None else default_spacing
    extents = [float(extent(e)) for e in elements]
    starts = main_axis_offsets(extents, spacing)
    shift = _ALIGNMENT_SHIFT[info.grid_item.alignment.value]

    tiles: List[TileSpec] = []
    for k, element in enumerate(elements):
        breadth = thickness * min(max(float(cross_ratio(element)), 0.0), 1.0)
        cross0 = track_offset + (thickness - breadth) * shift
        main0 = float(starts[k])
        main1 = main0 + extents[k]
        if info.is_vertical:
            x0, x1, y0, y1 = cross0, cross0 + breadth, main0, main1
        else:
            x0, x1, y0, y1 = main0, main1, cross0, cross0 + breadth
        tiles.append(
            TileSpec(
                track=info.index,
                position=k,
                x0=x0,
                x1=x1,
                y0=y0,
                y1=y1,
                color=color(element),
                label=label(element),
            )
        )
    return tiles


def build_label_trace(name: str, tiles: Sequence[TileSpec]) -> go.Scatter:
    """Text trace that prints each tile's label at its center, with position details on hover."""
    centers = [t.center for t in tiles]
    customdata = [[t.track, t.position] for t in tiles]
    return go.Scatter(
        x=[c[0] for c in centers],
        y=[c[1] for c in centers],
        text=[t.label for t in tiles],
        mode="text",
        name=name,
        customdata=customdata,
        hovertemplate=f"<b>{name}</b><br>Item %{{text}}<br>Position: %{{customdata[1]}}<extra></extra>",
        showlegend=False,
    )


def tile_shape(tile: TileSpec) -> dict:
    return dict(
        type="rect",
        xref="x",
        yref="y",
        x0=tile.x0,
        x1=tile.x1,
        y0=tile.y0,
        y1=tile.y1,
        fillcolor=tile.color,
        line=dict(width=0),
        layer="below",
    )
