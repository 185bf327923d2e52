from __future__ import annotations

import unittest

from waterfall import (
    Axis,
    Column,
    GridConfigurationError,
    GridIndexError,
    HorizontalAlignment,
    Row,
    VerticalAlignment,
    WaterfallItems,
)


class TestWaterfallItemsAccessors(unittest.TestCase):
    def test_columns_variant(self) -> None:
        items = WaterfallItems.from_columns([Column(), Column(HorizontalAlignment.LEADING, 4)])
        self.assertEqual(items.items_count, 2)
        self.assertTrue(items.is_vertical)
        self.assertFalse(items.is_horizontal)
        self.assertIsNone(items.rows)
        self.assertEqual(items.columns, [Column(), Column(HorizontalAlignment.LEADING, 4)])
        self.assertIs(items.axis, Axis.COLUMNS)

    def test_rows_variant(self) -> None:
        items = WaterfallItems.from_rows([Row(VerticalAlignment.TOP)])
        self.assertTrue(items.is_horizontal)
        self.assertIsNone(items.columns)
        self.assertEqual(items.rows, [Row(VerticalAlignment.TOP)])

    def test_empty_configuration_is_allowed(self) -> None:
        items = WaterfallItems.from_columns([])
        self.assertEqual(items.items_count, 0)
        self.assertEqual(items.columns, [])

    def test_mismatched_spec_type_is_rejected(self) -> None:
        with self.assertRaises(GridConfigurationError):
            WaterfallItems.from_columns([Column(), Row()])  # type: ignore[list-item]

    def test_repeating(self) -> None:
        items = WaterfallItems.repeating(Axis.ROWS, 3, spacing=6)
        self.assertEqual(items.rows, [Row(spacing=6)] * 3)
        with self.assertRaises(GridConfigurationError):
            WaterfallItems.repeating(Axis.ROWS, -1)

    def test_defaults(self) -> None:
        self.assertEqual(Column().alignment, HorizontalAlignment.CENTER)
        self.assertIsNone(Row().spacing)


class TestWaterfallItemsSpacing(unittest.TestCase):
    def test_set_spacing_only_touches_one_track(self) -> None:
        r0, r1, r2 = Row(VerticalAlignment.TOP, 1), Row(), Row(VerticalAlignment.BOTTOM)
        items = WaterfallItems.from_rows([r0, r1, r2])
        items.set_spacing(12, 1)
        rows = items.rows
        assert rows is not None
        self.assertEqual(rows[1].spacing, 12)
        self.assertEqual(rows[0], r0)
        self.assertEqual(rows[2], r2)
        self.assertEqual(items.items_count, 3)
        self.assertTrue(items.is_horizontal)

    def test_set_all_spacings_keeps_alignments(self) -> None:
        items = WaterfallItems.from_columns([Column(HorizontalAlignment.LEADING), Column(HorizontalAlignment.TRAILING, 3)])
        items.set_all_spacings(20)
        self.assertEqual(
            items.columns,
            [Column(HorizontalAlignment.LEADING, 20), Column(HorizontalAlignment.TRAILING, 20)],
        )

    def test_out_of_range_index_raises(self) -> None:
        items = WaterfallItems.repeating(Axis.COLUMNS, 2)
        with self.assertRaises(GridIndexError):
            items.set_spacing(5, 2)
        with self.assertRaises(GridIndexError):
            items.setting_spacing(5, -1)
        with self.assertRaises(GridIndexError):
            items.track(2)

    def test_copy_returning_forms_leave_receiver_alone(self) -> None:
        items = WaterfallItems.repeating(Axis.COLUMNS, 3, spacing=4)
        all_changed = items.setting_all_spacings(9)
        one_changed = items.setting_spacing(7, 0)

        self.assertEqual(items.columns, [Column(spacing=4)] * 3)
        self.assertEqual(all_changed.columns, [Column(spacing=9)] * 3)
        self.assertEqual(one_changed.columns, [Column(spacing=7), Column(spacing=4), Column(spacing=4)])

    def test_copies_do_not_alias(self) -> None:
        items = WaterfallItems.repeating(Axis.ROWS, 2)
        copy = items.copy()
        copy.set_all_spacings(1)
        self.assertEqual(items.rows, [Row(), Row()])
        self.assertNotEqual(items, copy)

    def test_returned_list_is_detached(self) -> None:
        items = WaterfallItems.repeating(Axis.COLUMNS, 1)
        columns = items.columns
        assert columns is not None
        columns.append(Column())
        self.assertEqual(items.items_count, 1)


class TestWaterfallItemsShape(unittest.TestCase):
    def test_structural_equality(self) -> None:
        self.assertEqual(WaterfallItems.repeating(Axis.ROWS, 2), WaterfallItems.from_rows([Row(), Row()]))
        self.assertNotEqual(WaterfallItems.repeating(Axis.ROWS, 0), WaterfallItems.repeating(Axis.COLUMNS, 0))

    def test_flipped_keeps_count(self) -> None:
        items = WaterfallItems.from_columns([Column(spacing=3)] * 4)
        flipped = items.flipped()
        self.assertTrue(flipped.is_horizontal)
        self.assertEqual(flipped.rows, [Row()] * 4)
        self.assertEqual(flipped.flipped(), WaterfallItems.repeating(Axis.COLUMNS, 4))

    def test_resized(self) -> None:
        items = WaterfallItems.repeating(Axis.ROWS, 2).resized(5, spacing=10)
        self.assertEqual(items.rows, [Row(spacing=10)] * 5)


if __name__ == "__main__":
    unittest.main()
