from typing import Optional

from InquirerPy import inquirer

from grid_settings import DEFAULT_TRACK_COUNT, MAX_TRACK_COUNT
from waterfall import Axis, HorizontalAlignment, VerticalAlignment, WaterfallItems, Column, Row

AXIS_LABELS = {
    Axis.COLUMNS: "Columns (grows downward)",
    Axis.ROWS: "Rows (grows rightward)",
}


def pick_axis(default: Axis = Axis.COLUMNS) -> Axis:
    axis_choices = [{"name": label, "value": axis.value} for axis, label in AXIS_LABELS.items()]
    axis_choice = inquirer.select(  # type: ignore[reportPrivateImportUsage]
        message="Select how the grid grows:",
        choices=axis_choices,
        default=default.value,
    ).execute()
    return Axis(axis_choice)


def pick_track_count(axis: Axis, default: int = DEFAULT_TRACK_COUNT) -> int:
    kind = "columns" if axis is Axis.COLUMNS else "rows"
    count_choices = [{"name": str(n), "value": n} for n in range(1, MAX_TRACK_COUNT + 1)]
    return inquirer.select(  # type: ignore[reportPrivateImportUsage]
        message=f"How many {kind}?",
        choices=count_choices,
        default=default,
    ).execute()


def pick_alignment(axis: Axis) -> str:
    alignments = HorizontalAlignment if axis is Axis.COLUMNS else VerticalAlignment
    alignment_choices = [{"name": a.value.capitalize(), "value": a.value} for a in alignments]
    return inquirer.select(  # type: ignore[reportPrivateImportUsage]
        message="Select the alignment of each element inside its track:",
        choices=alignment_choices,
        default="center",
    ).execute()


def pick_waterfall_items(items_spacing: Optional[float] = None) -> WaterfallItems:
    axis = pick_axis()
    count = pick_track_count(axis)
    alignment = pick_alignment(axis)
    if axis is Axis.COLUMNS:
        return WaterfallItems.from_columns(
            Column(HorizontalAlignment(alignment), items_spacing) for _ in range(count)
        )
    return WaterfallItems.from_rows(Row(VerticalAlignment(alignment), items_spacing) for _ in range(count))
