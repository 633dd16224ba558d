from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .console import RichLogger


def normalize_extension(extension: str) -> str:
    value = extension.strip()
    return value if value.startswith(".") else f".{value}"


def detect_text_encoding(sample: bytes) -> str:
    if sample.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    if sample.startswith(b"\xff\xfe") or sample.startswith(b"\xfe\xff"):
        return "utf-16"
    return "utf-8"


@dataclass(frozen=True)
class SourceFile:
    path: Path

    @property
    def display_name(self) -> str:
        return str(self.path)

    def read_text(self) -> str:
        data = self.path.read_bytes()
        return data.decode(detect_text_encoding(data[:4]), errors="replace")


def iter_source_files(
    root: Path,
    extension: str,
    logger: Optional[RichLogger] = None,
) -> Iterator[SourceFile]:
    """Yield files under ``root`` whose extension is exactly ``extension``.

    Paths come out in sorted order so repeated scans of an unchanged tree
    report occurrences in the same order. The comparison is case-sensitive:
    with ``.php`` neither ``.PHP`` nor ``.phps`` qualify. A file named just
    ``.php`` counts as a ``.php`` file.
    """
    suffix = normalize_extension(extension)
    for p in sorted(root.rglob("*")):
        try:
            if not p.name.endswith(suffix):
                continue
            if not p.is_file():
                continue
        except OSError as e:
            if logger:
                logger.debug(f"Skipping unreadable path: {p} ({e})")
            continue
        yield SourceFile(path=p)
