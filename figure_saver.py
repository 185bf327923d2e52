import importlib.util
import os
from typing import List

import plotly.graph_objects as go
from InquirerPy import inquirer

HTML_FORMAT = "html"
STATIC_FORMATS = ["png", "svg", "pdf", "jpg"]


def available_save_formats() -> List[str]:
    """Formats the current environment can write; static images need the kaleido engine."""
    if importlib.util.find_spec("kaleido") is None:
        return [HTML_FORMAT]
    return [HTML_FORMAT] + STATIC_FORMATS


def get_save_choice() -> str:
    """Ask which format to save in; an empty string means "don't save"."""
    choices = [{"name": fmt.upper(), "value": fmt} for fmt in available_save_formats()]
    return inquirer.select(  # type: ignore[reportPrivateImportUsage]
        message="Save the grid as:",
        choices=choices + [{"name": "Don't Save", "value": ""}],
        default="",
    ).execute()


def save_figure(fig: go.Figure, save_name: str) -> str:
    """Write ``fig`` to ``save_name``; the extension picks html or a static image (needs kaleido)."""
    directory = os.path.dirname(save_name)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if save_name.lower().endswith(f".{HTML_FORMAT}"):
        fig.write_html(save_name)
    else:
        fig.write_image(save_name)
    return save_name
