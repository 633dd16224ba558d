from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Occurrence:
    file: str
    line: int

    def to_dict(self) -> Dict[str, object]:
        return {"file": self.file, "line": self.line}


@dataclass(frozen=True)
class SnapshotDiff:
    added: Dict[str, List[str]] = field(default_factory=dict)
    removed: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def match(self) -> bool:
        return not self.added and not self.removed

    def to_dict(self) -> Dict[str, object]:
        return {
            "added": {c: list(names) for c, names in self.added.items()},
            "removed": {c: list(names) for c, names in self.removed.items()},
            "match": self.match,
        }
