from .keys import KeyReader
from .line_input import TerminalLineReader
from .raw_mode import RawTerminal
from .renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer", "KeyReader", "RawTerminal", "TerminalLineReader"]
