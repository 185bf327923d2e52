"""Show a Rich indicator while a blocking call (typically ``fig.show()``) runs.

Notes
-----
- The target callable runs in a background thread while the main thread
  renders a spinner or a pulsing bar.
- Exceptions raised by the callable are re-raised in the caller's thread.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Literal, Optional, TypeVar

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

T = TypeVar("T")
UIKind = Literal["spinner", "bar"]


def _progress(ui: UIKind) -> Progress:
    if ui == "spinner":
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            transient=True,
        )
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TimeElapsedColumn(),
        transient=True,
    )


def run_with_progress(
    blocking_fn: Callable[[], T],
    *,
    description: str = "Working…",
    ui: UIKind = "spinner",
    refresh_interval: float = 0.05,
    bar_steps: int = 100,
) -> T:
    """Run ``blocking_fn`` while showing an indicator.

    Parameters
    ----------
    blocking_fn : Callable[[], T]
        Zero-argument callable to execute in a worker thread.
    description : str, optional
        Text shown next to the indicator.
    ui : {"spinner", "bar"}, optional
        Indicator style, by default ``"spinner"``.
    refresh_interval : float, optional
        UI update cadence in seconds.
    bar_steps : int, optional
        Resolution of the pulsing bar.

    Returns
    -------
    T
        Whatever ``blocking_fn`` returns.
    """
    holder: Dict[str, Any] = {"res": None, "exc": None}

    def worker() -> None:
        try:
            holder["res"] = blocking_fn()
        except BaseException as e:  # noqa: BLE001 — re-raised below in the caller's thread
            holder["exc"] = e

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()

    with _progress(ui) as progress:
        task_id = progress.add_task(description, total=None if ui == "spinner" else bar_steps)
        while thread.is_alive():
            if ui == "bar":
                progress.advance(task_id, max(1.0, bar_steps * refresh_interval / 2.0))
                if progress.tasks[0].completed >= bar_steps:
                    progress.reset(task_id)
            time.sleep(refresh_interval)
        thread.join()

    if holder["exc"] is not None:
        raise holder["exc"]
    return holder["res"]  # type: ignore[return-value]


def show_with_progress(
    fig: Any,
    *,
    description: str = "Opening Plotly figure…",
    renderer: Optional[str] = None,
    ui: UIKind = "spinner",
) -> Any:
    """Drop-in replacement for ``fig.show()`` with a spinner or pulsing bar."""

    def _call() -> Any:
        if renderer is None:
            return fig.show()
        return fig.show(renderer=renderer)

    return run_with_progress(_call, description=description, ui=ui)
