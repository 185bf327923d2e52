from __future__ import annotations

import unittest

from demo_items import CROSS_RATIO_RANGE, PALETTE, SIZE_RANGE, load_more, make_items, shuffle_items
from grid_settings import SPACING_RANGE, GridSettings
from waterfall import Axis, GridConfigurationError, WaterfallItems


class TestDemoItems(unittest.TestCase):
    def test_make_items(self) -> None:
        items = make_items(5, 10, seed=0)
        self.assertEqual([i.id for i in items], list(range(5, 15)))
        for item in items:
            self.assertIn(item.color, PALETTE)
            self.assertTrue(SIZE_RANGE[0] <= item.size <= SIZE_RANGE[1])
            self.assertTrue(CROSS_RATIO_RANGE[0] <= item.cross_ratio <= CROSS_RATIO_RANGE[1])

    def test_seed_is_reproducible(self) -> None:
        self.assertEqual(make_items(0, 8, seed=3), make_items(0, 8, seed=3))

    def test_reverse_gives_negative_ascending_ids(self) -> None:
        items = make_items(1, 4, reverse=True, seed=0)
        self.assertEqual([i.id for i in items], [-4, -3, -2, -1])

    def test_load_more_continues_ids(self) -> None:
        items = make_items(0, 3, seed=0)
        more = load_more(items, 2, seed=1)
        self.assertEqual([i.id for i in more], [0, 1, 2, 3, 4])
        self.assertEqual(len(items), 3)
        self.assertEqual([i.id for i in load_more([], 2)], [0, 1])

    def test_shuffle_keeps_items(self) -> None:
        items = make_items(0, 12, seed=0)
        shuffled = shuffle_items(items, seed=4)
        self.assertEqual(sorted(i.id for i in shuffled), list(range(12)))

    def test_str_is_id(self) -> None:
        self.assertEqual(str(make_items(7, 1, seed=0)[0]), "7")


class TestGridSettings(unittest.TestCase):
    def test_defaults_and_reset(self) -> None:
        settings = GridSettings().with_spacing(20).with_items_spacing(0)
        self.assertEqual((settings.spacing, settings.items_spacing), (20, 0))
        self.assertEqual(settings.reset(), GridSettings())

    def test_out_of_range_is_rejected(self) -> None:
        with self.assertRaises(GridConfigurationError):
            GridSettings(spacing=SPACING_RANGE[1] + 1)
        with self.assertRaises(GridConfigurationError):
            GridSettings(items_spacing=-1)

    def test_apply_sets_every_track_spacing(self) -> None:
        items = WaterfallItems.repeating(Axis.COLUMNS, 3)
        applied = GridSettings(items_spacing=14).apply(items)
        self.assertEqual([c.spacing for c in applied.tracks], [14, 14, 14])
        self.assertEqual([c.spacing for c in items.tracks], [None, None, None])


if __name__ == "__main__":
    unittest.main()
