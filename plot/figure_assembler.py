from __future__ import annotations
from typing import Any, Callable, List, Optional

import plotly.graph_objects as go

from plot.tile_spec import TileSpec
from plot.track_builder import build_label_trace, build_track_tiles, tile_shape
from waterfall import WaterfallGrid

DEFAULT_TRACK_THICKNESS = 120.0
DEFAULT_ITEMS_SPACING = 8.0
DEFAULT_TRACK_SPACING = 8.0


def assemble_waterfall_figure(
    grid: WaterfallGrid,
    *,
    thickness: float = DEFAULT_TRACK_THICKNESS,
    default_spacing: float = DEFAULT_ITEMS_SPACING,
    default_track_spacing: float = DEFAULT_TRACK_SPACING,
    extent: Optional[Callable[[Any], float]] = None,
    title: Optional[str] = None,
    figure_width: int = 900,
    figure_height: int = 800,
) -> go.Figure:
    """
    Draw every column/row of ``grid`` into one figure.

    Tiles are rectangle shapes (one per element) plus one text trace per track
    for labels and hover. Vertical grids grow downward, horizontal grids grow
    rightward; the y axis is reversed in both cases so track 0 sits top-left.
    """
    track_spacing = grid.spacing if grid.spacing is not None else default_track_spacing
    builder_kwargs = {} if extent is None else {"extent": extent}

    fig = go.Figure()
    tiles: List[TileSpec] = []
    for info in grid.tracks():
        track_tiles = build_track_tiles(
            info,
            thickness=thickness,
            track_offset=info.index * (thickness + track_spacing),
            default_spacing=default_spacing,
            **builder_kwargs,
        )
        kind = "Column" if info.is_vertical else "Row"
        fig.add_trace(build_label_trace(f"{kind} {info.index + 1}", track_tiles))
        tiles.extend(track_tiles)

    x_max = max((t.x1 for t in tiles), default=1.0)
    y_max = max((t.y1 for t in tiles), default=1.0)

    fig.update_layout(
        shapes=[tile_shape(t) for t in tiles],
        title=title,
        width=figure_width,
        height=figure_height,
        hovermode="closest",
        plot_bgcolor="white",
        margin=dict(l=20, r=20, t=60 if title else 20, b=20),
    )
    # Hide ticks for clean gallery feel
    fig.update_xaxes(range=[0, x_max], showticklabels=False, showgrid=False, zeroline=False)
    fig.update_yaxes(
        range=[y_max, 0],
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        scaleanchor="x",
        scaleratio=1,
    )
    return fig
