from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .console import RichLogger
from .input_sources import SourceFile, iter_source_files, normalize_extension
from .matcher import find_hooks
from .models import Occurrence, SnapshotDiff
from .patterns import HOOK_KINDS, resolve_category
from .results import HookResults
from .snapshot import Snapshot, compare_snapshots, save_snapshot, to_snapshot

DEFAULT_EXTENSION = "php"


class DirectoryNotFoundError(FileNotFoundError):
    def __init__(self, directory: Union[str, Path]):
        super().__init__(f"Directory not found: {directory}")
        self.directory = str(directory)


class HookScanner:
    def __init__(self, extension: str = DEFAULT_EXTENSION, logger: Optional[RichLogger] = None):
        self.extension = normalize_extension(extension)
        self.logger = logger or RichLogger()
        self.results = HookResults()
        self.files_scanned = 0
        self.files_skipped = 0

    def scan(self, directory: Union[str, Path]) -> "HookScanner":
        """Scan ``directory`` recursively and add every hook call found.

        Results accumulate across calls on the same instance.
        """
        root = Path(directory)
        if not root.is_dir():
            raise DirectoryNotFoundError(directory)

        for source in iter_source_files(root, self.extension, self.logger):
            self.scan_file(source)

        self.logger.debug(
            f"Scanned {self.files_scanned} {self.extension} file(s) under {root}, "
            f"skipped {self.files_skipped} unreadable, "
            f"{self.results.total_count()} unique hooks so far"
        )
        return self

    def scan_file(self, source: SourceFile) -> None:
        try:
            text = source.read_text()
        except OSError as e:
            self.logger.debug(f"Skipping unreadable file: {source.display_name} ({e})")
            self.files_skipped += 1
            return

        self.files_scanned += 1
        for kind in HOOK_KINDS:
            for name, line in find_hooks(text, kind.pattern):
                self.results.add(kind.category, name, Occurrence(file=source.display_name, line=line))

    def to_array(self) -> Dict[str, Dict[str, List[Dict[str, object]]]]:
        return self.results.to_dict()

    def to_json(self) -> str:
        return self.results.to_json()

    def total_count(self) -> int:
        return self.results.total_count()

    def hooks_by_category(self, category: str) -> Dict[str, List[Occurrence]]:
        resolved = resolve_category(category)
        if resolved is None:
            return {}
        return dict(self.results.hooks[resolved])

    def has_hook(self, name: str, category: Optional[str] = None) -> bool:
        if category is not None:
            return name in self.hooks_by_category(category)
        return any(name in by_name for by_name in self.results.hooks.values())

    def to_snapshot(self) -> Snapshot:
        return to_snapshot(self.results)

    def save_snapshot(self, path: Union[str, Path]) -> bool:
        return save_snapshot(self.to_snapshot(), path)

    def compare_to_snapshot(self, previous: Mapping[str, object]) -> SnapshotDiff:
        return compare_snapshots(self.to_snapshot(), previous)
