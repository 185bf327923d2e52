from __future__ import annotations

import time
import unittest

from plot.rich_plot_progress import run_with_progress, show_with_progress


class _FakeFigure:
    def __init__(self) -> None:
        self.calls = []

    def show(self, **kwargs):
        self.calls.append(kwargs)
        return "shown"


class TestRunWithProgress(unittest.TestCase):
    def test_returns_result_with_spinner(self) -> None:
        self.assertEqual(run_with_progress(lambda: 42, description="Computing…"), 42)

    def test_returns_result_with_bar(self) -> None:
        def slow() -> str:
            time.sleep(0.15)
            return "done"

        self.assertEqual(run_with_progress(slow, ui="bar", refresh_interval=0.01, bar_steps=5), "done")

    def test_worker_exception_is_reraised(self) -> None:
        def boom() -> None:
            raise RuntimeError("renderer failed")

        with self.assertRaisesRegex(RuntimeError, "renderer failed"):
            run_with_progress(boom)

        with self.assertRaises(RuntimeError):
            run_with_progress(boom, ui="bar")

    def test_show_with_progress_forwards_renderer(self) -> None:
        fig = _FakeFigure()
        self.assertEqual(show_with_progress(fig), "shown")
        self.assertEqual(show_with_progress(fig, renderer="browser", ui="bar"), "shown")
        self.assertEqual(fig.calls, [{}, {"renderer": "browser"}])


if __name__ == "__main__":
    unittest.main()
