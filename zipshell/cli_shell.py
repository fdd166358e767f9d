import argparse
import logging
import os
import sys

from rich import box
from rich.panel import Panel

from zipshell.adapters.terminal.rich_terminal import RichTerminal
from zipshell.config.settings import Settings
from zipshell.container import DependencyContainer
from zipshell.exceptions import BaseAppError

DEFAULT_CONFIG_PATH = os.path.join("config", "config.toml")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zipshell",
        description="Browse a ZIP archive through a read-only shell (ls, cd, cat, pwd, clear, exit).",
    )
    parser.add_argument(
        "--config",
        default=os.getenv("ZIPSHELL_CONFIG", DEFAULT_CONFIG_PATH),
        help="TOML configuration file (default: $ZIPSHELL_CONFIG or config/config.toml)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the welcome panel",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_file(args.config)
    except BaseAppError as e:
        print(f"zipshell: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger("zipshell")

    container = DependencyContainer(settings, logger)
    try:
        repl = container.get_repl()
    except BaseAppError as e:
        logger.error(f"Startup failed: {e}")
        print(f"zipshell: {e}", file=sys.stderr)
        return 1

    terminal = container.get_terminal()
    if not args.no_banner and isinstance(terminal, RichTerminal):
        terminal.console.print(
            Panel(
                f"Archive: {settings.archive_path}\n"
                "Commands: ls [dir], cd [dir], cat <file>, pwd, clear, exit",
                title="zipshell",
                border_style="cyan",
                box=box.ROUNDED,
            )
        )

    try:
        repl.run()
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
