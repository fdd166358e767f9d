"""
Read-eval-print loop dispatching input lines to the command engine.
"""

import logging
from typing import Callable, Optional

from zipshell.ports.terminal.terminal_port import TerminalPort
from zipshell.use_cases.shell.command_engine import (
    CAT,
    CD,
    CLEAR,
    EXIT,
    LS,
    PWD,
    SHELL_NAME,
    CommandEngine,
)


class ShellRepl:
    """Interactive loop: prompt, tokenize, dispatch until ``exit``."""

    def __init__(
        self,
        engine: CommandEngine,
        terminal: TerminalPort,
        user: str,
        computer: str,
        logger: Optional[logging.Logger] = None,
    ):
        self._engine = engine
        self._terminal = terminal
        self.user = user
        self.computer = computer
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[list[str]], bool]] = {
            LS: self._ls,
            CD: self._cd,
            CAT: self._cat,
            PWD: self._pwd,
            CLEAR: self._clear,
            EXIT: self._exit,
        }

    def prompt(self) -> str:
        return f"{self.user}@{self.computer}:/{self._engine.cursor}$ "

    # ------------------------- command handlers -------------------------
    # Each handler returns False when the loop must stop.

    def _ls(self, args: list[str]) -> bool:
        self._engine.ls(args[0] if args else "")
        return True

    def _cd(self, args: list[str]) -> bool:
        self._engine.cd(args[0] if args else "")
        return True

    def _cat(self, args: list[str]) -> bool:
        if not args:
            self._terminal.write_line(f"{SHELL_NAME}: {CAT}: missing file operand")
            return True
        self._engine.cat(args[0])
        return True

    def _pwd(self, args: list[str]) -> bool:
        self._engine.pwd()
        return True

    def _clear(self, args: list[str]) -> bool:
        self._engine.clear()
        return True

    def _exit(self, args: list[str]) -> bool:
        self._engine.exit()
        return False

    def execute_line(self, line: str) -> bool:
        """
        Run one input line.

        Args:
            line: Raw input; the first whitespace-delimited word is the command

        Returns:
            False once the shell has exited, True otherwise
        """
        parts = line.split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]
        handler = self._handlers.get(command)
        if handler is None:
            self._terminal.write_line(f"{SHELL_NAME}: {command}: unknown command")
            return True

        self._logger.debug(f"Dispatching {command} {args}")
        return handler(args)

    def run(self) -> None:
        """Loop until ``exit``; end of input behaves like ``exit``."""
        while True:
            try:
                line = self._terminal.read_line(self.prompt())
            except EOFError:
                self._terminal.write_line()
                self._engine.exit()
                break
            except KeyboardInterrupt:
                self._terminal.write_line()
                continue

            if not self.execute_line(line):
                break
