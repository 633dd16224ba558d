from __future__ import annotations

import json
from typing import Dict, List

from .models import Occurrence
from .patterns import CATEGORIES


class HookResults:
    """Hook occurrences grouped by category, then by hook name.

    Every category is present from construction on, even when empty. Names
    keep the order they were first seen in; occurrence lists keep scan order.
    """

    def __init__(self):
        self.hooks: Dict[str, Dict[str, List[Occurrence]]] = {c: {} for c in CATEGORIES}

    def add(self, category: str, name: str, occurrence: Occurrence) -> None:
        self.hooks[category].setdefault(name, []).append(occurrence)

    def names(self, category: str) -> List[str]:
        return list(self.hooks.get(category, {}))

    def counts(self) -> Dict[str, int]:
        return {c: len(self.hooks[c]) for c in CATEGORIES}

    def total_count(self) -> int:
        return sum(self.counts().values())

    def to_dict(self) -> Dict[str, Dict[str, List[Dict[str, object]]]]:
        return {
            category: {name: [o.to_dict() for o in occurrences] for name, occurrences in by_name.items()}
            for category, by_name in self.hooks.items()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=4)
