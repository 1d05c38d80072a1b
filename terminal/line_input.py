from __future__ import annotations

from contextlib import ExitStack
from typing import Optional

from rich.text import Text

from .keys import KeyReader
from .raw_mode import RawTerminal
from .renderer import ConsoleRenderer


class TerminalLineReader:
    """Blocking line prompt shown below the current drawing.

    The key reader is held off and the terminal is in cooked mode for the
    duration of the prompt. There is no way to cancel it.
    """

    def __init__(
        self,
        renderer: ConsoleRenderer,
        terminal: Optional[RawTerminal] = None,
        keys: Optional[KeyReader] = None,
    ) -> None:
        self.renderer = renderer
        self.terminal = terminal
        self.keys = keys

    def read(self, prompt: str) -> str:
        with ExitStack() as stack:
            if self.keys is not None:
                stack.enter_context(self.keys.paused())
            if self.terminal is not None:
                stack.enter_context(self.terminal.cooked())
            self.renderer.move_to_prompt()
            text = self.renderer.console.input(Text(prompt))
        return text.strip()


__all__ = ["TerminalLineReader"]
