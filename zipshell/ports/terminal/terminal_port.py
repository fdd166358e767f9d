"""
Terminal port interface defining the contract for interactive console I/O.
"""

from abc import ABC, abstractmethod


class TerminalPort(ABC):
    """Port interface for terminal input and output."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Print text verbatim, followed by a newline."""
        pass

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear the screen and move the cursor home."""
        pass

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Show a prompt and read one line of input.

        Args:
            prompt: Text shown before the input

        Returns:
            The line read, without its newline

        Raises:
            EOFError: If the input stream is exhausted
            KeyboardInterrupt: If the user interrupts the input
        """
        pass
