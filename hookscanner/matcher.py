from __future__ import annotations

from typing import Iterator, Pattern, Tuple

from .text_utils import line_at


def iter_hook_names(text: str, pattern: Pattern[str]) -> Iterator[Tuple[str, int]]:
    """Yield ``(name, offset)`` for every match of ``pattern`` in ``text``.

    ``name`` is the first capture group and ``offset`` the start of that
    group, in left-to-right order. Matches never overlap.
    """
    for m in pattern.finditer(text):
        yield m.group(1), m.start(1)


def find_hooks(text: str, pattern: Pattern[str]) -> Iterator[Tuple[str, int]]:
    """Like :func:`iter_hook_names` but with 1-based line numbers instead of offsets."""
    for name, offset in iter_hook_names(text, pattern):
        yield name, line_at(text, offset)
