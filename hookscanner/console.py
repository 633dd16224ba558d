from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

LEVEL_STYLES = {
    "INFO": "bold green",
    "ERROR": "bold red",
    "DEBUG": "bold blue",
}


class RichLogger:
    """Levelled log lines on stderr so stdout stays clean for reports and JSON."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console(stderr=True, highlight=False)
        self.verbose = verbose

    def _emit(self, level: str, msg: str) -> None:
        tag = Text(level.ljust(5), style=LEVEL_STYLES[level])
        self.console.log(tag, Text(msg), _stack_offset=3)

    def info(self, msg: str) -> None:
        self._emit("INFO", msg)

    def error(self, msg: str) -> None:
        self._emit("ERROR", msg)

    def debug(self, msg: str) -> None:
        if self.verbose:
            self._emit("DEBUG", msg)
