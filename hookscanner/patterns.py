from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern, Tuple

QUOTED_NAME_PATTERN = r"""\s*\(\s*['"]([^'"]+)['"]"""


def call_pattern(call: str) -> Pattern[str]:
    return re.compile(rf"\b{re.escape(call)}{QUOTED_NAME_PATTERN}")


@dataclass(frozen=True)
class HookKind:
    category: str
    call: str
    pattern: Pattern[str]
    label: str
    style: str
    symbol: str


HOOK_KINDS: Tuple[HookKind, ...] = (
    HookKind("registered", "add_action", call_pattern("add_action"), "Registered Actions", "green", "▶"),
    HookKind("fired", "do_action", call_pattern("do_action"), "Fired Actions", "yellow", "⚡"),
    HookKind("registered-filter", "add_filter", call_pattern("add_filter"), "Registered Filters", "blue", "◆"),
    HookKind("applied-filter", "apply_filters", call_pattern("apply_filters"), "Applied Filters", "magenta", "✦"),
)

CATEGORIES: Tuple[str, ...] = tuple(kind.category for kind in HOOK_KINDS)
KINDS_BY_CATEGORY: Dict[str, HookKind] = {kind.category: kind for kind in HOOK_KINDS}
CATEGORY_BY_CALL: Dict[str, str] = {kind.call: kind.category for kind in HOOK_KINDS}


def resolve_category(name: str) -> Optional[str]:
    """Accept a category tag or its call token (``add_action``) and return the tag."""
    if name in KINDS_BY_CATEGORY:
        return name
    return CATEGORY_BY_CALL.get(name)
