from __future__ import annotations

import os
from typing import Optional


def line_at(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def shorten_path(path: str, cwd: Optional[str] = None) -> str:
    """Drop the working-directory prefix from ``path`` for display."""
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = ""
    if cwd and path.startswith(cwd):
        return path[len(cwd):].lstrip("/" + os.sep)
    return path
