import logging
import os
from typing import List, Optional

import typer
from InquirerPy import inquirer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from demo_items import BATCH_SIZE, DemoItem, load_more, make_items, shuffle_items
from figure_saver import get_save_choice, save_figure
from grid_settings import DEFAULT_TRACK_COUNT, OUTPUT_DIR, GridSettings
from plot import assemble_waterfall_figure, show_with_progress
from utils.axis_picker import pick_waterfall_items
from waterfall import (
    Axis,
    Column,
    HorizontalAlignment,
    Row,
    VerticalAlignment,
    WaterfallGrid,
    WaterfallItems,
)

app = typer.Typer()
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every grid pass.")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_items(axis: Axis, count: int, alignment: str, settings: GridSettings) -> WaterfallItems:
    if axis is Axis.COLUMNS:
        items = WaterfallItems.from_columns(Column(HorizontalAlignment(alignment)) for _ in range(count))
    else:
        items = WaterfallItems.from_rows(Row(VerticalAlignment(alignment)) for _ in range(count))
    return settings.apply(items)


def build_data(count: int, seed: Optional[int], shuffle: bool, with_negatives: bool) -> List[DemoItem]:
    data = make_items(0, count, seed=seed)
    if with_negatives:
        data = make_items(1, count, reverse=True, seed=seed) + data
    if shuffle:
        data = shuffle_items(data, seed=seed)
    return data


def print_tracks(grid: WaterfallGrid) -> None:
    kind = "Column" if grid.items.is_vertical else "Row"
    table = Table(title=f"{len(grid.data)} items across {grid.items.items_count} {grid.items.axis.value}")
    table.add_column("Track", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Spacing", justify="right")
    table.add_column("Items")
    for info in grid.tracks():
        spacing = "-" if info.spacing is None else f"{info.spacing:g}"
        table.add_row(f"{kind} {info.index + 1}", str(len(info.data)), spacing, escape(str(info.data)))
    console.print(table)


@app.command()
def layout(
    axis: Axis = Axis.COLUMNS,
    count: int = DEFAULT_TRACK_COUNT,
    items: int = BATCH_SIZE,
    alignment: str = "center",
    items_spacing: float = GridSettings().items_spacing,
    seed: Optional[int] = None,
    shuffle: bool = False,
):
    """Print which items land in which column/row."""
    try:
        settings = GridSettings(items_spacing=items_spacing)
        grid = WaterfallGrid(build_items(axis, count, alignment, settings), build_data(items, seed, shuffle, False))
        print_tracks(grid)
    except ValueError as e:
        console.print(f"[red][❌] {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def preview(
    axis: Axis = Axis.COLUMNS,
    count: int = DEFAULT_TRACK_COUNT,
    items: int = BATCH_SIZE,
    alignment: str = "center",
    spacing: float = GridSettings().spacing,
    items_spacing: float = GridSettings().items_spacing,
    seed: Optional[int] = None,
    shuffle: bool = False,
    with_negatives: bool = False,
    show_fig: bool = True,
    save: Optional[str] = None,
):
    """Render the demo grid as a Plotly figure."""
    try:
        settings = GridSettings(spacing=spacing, items_spacing=items_spacing)
        grid = WaterfallGrid(
            build_items(axis, count, alignment, settings),
            build_data(items, seed, shuffle, with_negatives),
            spacing=settings.spacing,
        )
    except ValueError as e:
        console.print(f"[red][❌] {e}[/red]")
        raise typer.Exit(code=1)

    fig = assemble_waterfall_figure(grid, title=f"Waterfall grid: {count} {axis.value}")
    if show_fig:
        show_with_progress(fig)
    if save:
        console.print(f"[✅] Saved grid to {save_figure(fig, save)}")


@app.command()
def explore(output_dir: str = OUTPUT_DIR, seed: Optional[int] = None, show_fig: bool = True):
    """Interactively pick an axis, track count and alignment, then load more items as you go."""
    settings = GridSettings()
    data = make_items(0, seed=seed)

    while True:
        waterfall_items = pick_waterfall_items(settings.items_spacing)
        grid = WaterfallGrid(waterfall_items, data, spacing=settings.spacing)
        print_tracks(grid)

        fig = assemble_waterfall_figure(grid)
        if show_fig:
            show_with_progress(fig)

        save_choice = get_save_choice()
        if save_choice != "":
            default_save_name = os.path.join(output_dir, f"grid.{save_choice}")
            save_name: str = inquirer.text(message="Enter the filename to save as:", default=default_save_name).execute()  # type: ignore[reportPrivateImportUsage]
            console.print(f"[✅] Saved grid to {save_figure(fig, save_name)}")

        next_step = inquirer.select(  # type: ignore[reportPrivateImportUsage]
            message="What next?",
            choices=[
                {"name": "Load more items", "value": "more"},
                {"name": "Shuffle items", "value": "shuffle"},
                {"name": "Reset items", "value": "reset"},
                {"name": "Keep items", "value": "keep"},
                {"name": "Exit", "value": ""},
            ],
            default="keep",
        ).execute()

        if next_step == "":
            break
        if next_step == "more":
            data = load_more(data)
        elif next_step == "shuffle":
            data = shuffle_items(data)
        elif next_step == "reset":
            data = make_items(0)
        print("\n")


if __name__ == "__main__":
    app()
