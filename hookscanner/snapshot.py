from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .models import SnapshotDiff
from .patterns import CATEGORIES
from .results import HookResults

Snapshot = Dict[str, List[str]]


def to_snapshot(results: HookResults) -> Snapshot:
    """Reduce ``results`` to sorted hook names per category, without locations."""
    return {category: sorted(set(results.names(category))) for category in CATEGORIES}


def save_snapshot(snapshot: Mapping[str, List[str]], path: Union[str, Path]) -> bool:
    path = Path(path)
    payload = json.dumps(dict(snapshot), indent=4) + "\n"
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as handle:
            handle.write(payload)
        tmp_path.replace(path)
    except OSError:
        try:
            tmp_path.unlink()
        except OSError:
            pass
        return False
    return True


def load_snapshot(path: Union[str, Path]) -> Optional[Dict[str, object]]:
    """Return the snapshot stored at ``path`` or ``None`` if there is no usable one."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _category_names(snapshot: Mapping[str, object], category: str) -> List[str]:
    # Anything but a list of strings counts as no names.
    value = snapshot.get(category)
    if not isinstance(value, list):
        return []
    return [n for n in value if isinstance(n, str)]


def compare_snapshots(current: Mapping[str, object], previous: Mapping[str, object]) -> SnapshotDiff:
    added: Dict[str, List[str]] = {}
    removed: Dict[str, List[str]] = {}
    for category in CATEGORIES:
        current_names = _category_names(current, category)
        previous_names = _category_names(previous, category)
        previous_set = set(previous_names)
        current_set = set(current_names)

        added_names = [n for n in current_names if n not in previous_set]
        removed_names = [n for n in previous_names if n not in current_set]
        if added_names:
            added[category] = added_names
        if removed_names:
            removed[category] = removed_names
    return SnapshotDiff(added=added, removed=removed)
