"""Paints a :class:`~core.render_model.DrawModel` at fixed screen positions."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.control import Control
from rich.text import Text

from core.render_model import DrawModel, DrawRow

TITLE_ROW = 0
GOAL_ROW = 1
TIME_ROW = 2
HEADER_ROW = 3
FIRST_SPLIT_ROW = 4


class ConsoleRenderer:
    """Full redraws on :meth:`draw`, time line and open rows on :meth:`refresh`.

    Write errors from the underlying console are not caught.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self._prompt_row = FIRST_SPLIT_ROW + 2

    @property
    def prompt_row(self) -> int:
        """First free row below the controls legend."""
        return self._prompt_row

    def draw(self, model: DrawModel) -> None:
        self.console.control(Control.clear(), Control.home())
        self._put(TITLE_ROW, 0, model.title)
        self._put(GOAL_ROW, 0, model.goal_line)
        self._put(TIME_ROW, 0, model.time_line)
        self._put(HEADER_ROW, 0, model.splits_header)
        for pos, row in enumerate(model.rows):
            self._put_row(pos, row)
        controls_row = FIRST_SPLIT_ROW + len(model.rows) + 1
        self._put(controls_row, 0, model.controls)
        self._prompt_row = controls_row + 1
        self._park()

    def refresh(self, model: DrawModel) -> None:
        self._put(TIME_ROW, 0, model.time_line + "   ")
        for pos in model.live_rows:
            self._put_row(pos, model.rows[pos])
        self._park()

    def move_to_prompt(self) -> None:
        self.console.control(Control.move_to(0, self._prompt_row))
        self.flush()

    def flush(self) -> None:
        self.console.file.flush()

    def _put_row(self, pos: int, row: DrawRow) -> None:
        self._put(FIRST_SPLIT_ROW + pos, row.indent, row.text, style="bold" if row.active else "")

    def _put(self, y: int, x: int, text: str, style: str = "") -> None:
        self.console.control(Control.move_to(x, y))
        self.console.print(Text(text, style=style), end="", soft_wrap=True)

    def _park(self) -> None:
        self.console.control(Control.move_to(0, self._prompt_row))
        self.flush()


__all__ = ["ConsoleRenderer", "FIRST_SPLIT_ROW", "TIME_ROW"]
