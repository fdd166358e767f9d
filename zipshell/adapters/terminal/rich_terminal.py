"""
Rich console adapter implementation for terminal I/O.
"""

from rich.console import Console
from typing_extensions import override

from zipshell.ports.terminal.terminal_port import TerminalPort

# Erase display, then move the cursor to row 1, column 1.
CLEAR_SEQUENCE = "\033[2J\033[1;1H"


class RichTerminal(TerminalPort):
    """
    Terminal backed by a rich Console.

    Shell output bypasses rich rendering and goes straight to the console's
    file, so archive text keeps its tabs, carriage returns and control
    characters. Rich renders only the prompt and the startup banner.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    @override
    def write_line(self, text: str = "") -> None:
        self.console.file.write(text + "\n")
        self.console.file.flush()

    @override
    def clear_screen(self) -> None:
        self.console.file.write(CLEAR_SEQUENCE)
        self.console.file.flush()

    @override
    def read_line(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False, emoji=False)
