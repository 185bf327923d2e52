from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

PALETTE = ["red", "gold", "hotpink", "royalblue", "seagreen", "darkorange", "mediumpurple", "gray"]
SIZE_RANGE = (100.0, 300.0)
CROSS_RATIO_RANGE = (0.6, 1.0)
BATCH_SIZE = 30


@dataclass(frozen=True)
class DemoItem:
    """
    A placeholder tile for the demo grids.
    - id: stable identity, also printed on the tile
    - color: plotly color name
    - size: extent along the growth axis (height in columns, width in rows)
    - cross_ratio: fraction of the track thickness the tile occupies
    """

    id: int
    color: str
    size: float
    cross_ratio: float = 1.0

    def __str__(self) -> str:
        return str(self.id)


def make_items(
    start: int,
    count: int = BATCH_SIZE,
    *,
    reverse: bool = False,
    seed: Optional[int] = None,
) -> List[DemoItem]:
    """
    Generate ``count`` items with consecutive ids starting at ``start``.

    Parameters
    ----------
    start : int
        First id.
    count : int, default=30
        Number of items to generate.
    reverse : bool, default=False
        Negate the ids and return them in reverse order, so that a list built
        with ``start=1`` reads ``-count, ..., -1``.
    seed : int, optional
        Seed for ``numpy.random.default_rng``; None gives a fresh random layout.

    Returns
    -------
    List[DemoItem]
    """
    rng = np.random.default_rng(seed)
    colors = rng.choice(len(PALETTE), size=count)
    sizes = rng.uniform(*SIZE_RANGE, size=count)
    ratios = rng.uniform(*CROSS_RATIO_RANGE, size=count)

    items = [
        DemoItem(
            id=-(start + i) if reverse else start + i,
            color=PALETTE[int(colors[i])],
            size=round(float(sizes[i]), 1),
            cross_ratio=round(float(ratios[i]), 2),
        )
        for i in range(count)
    ]
    return items[::-1] if reverse else items


def shuffle_items(items: Sequence[DemoItem], seed: Optional[int] = None) -> List[DemoItem]:
    rng = np.random.default_rng(seed)
    order = rng.permutation(len(items))
    return [items[int(i)] for i in order]


def load_more(items: Sequence[DemoItem], count: int = BATCH_SIZE, seed: Optional[int] = None) -> List[DemoItem]:
    """Append a new batch whose ids continue after the current largest id."""
    start = max((item.id for item in items), default=-1) + 1
    return list(items) + make_items(start, count, seed=seed)
