from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional, Tuple, Union

from rich.console import Console
from rich.text import Text

from .models import Occurrence, SnapshotDiff
from .patterns import HOOK_KINDS, KINDS_BY_CATEGORY, HookKind
from .results import HookResults
from .scanner import HookScanner
from .text_utils import shorten_path

TITLE = "Hook Scanner"
TITLE_VERSION = "v1.0"
HEAVY_RULE = "═" * 50
LIGHT_RULE = "─" * 48

Part = Tuple[str, str]


def build_console(use_colors: bool = True, file: Optional[IO[str]] = None) -> Console:
    # "auto" resolves to no colour at all when the stream is not a terminal.
    return Console(
        file=file,
        color_system="auto" if use_colors else None,
        highlight=False,
        soft_wrap=True,
        emoji=False,
    )


class Reporter:
    def __init__(self, console: Optional[Console] = None, use_colors: bool = True, cwd: Optional[str] = None):
        self.console = console or build_console(use_colors)
        self.cwd = cwd

    def _line(self, *parts: Part) -> None:
        self.console.print(Text.assemble(*parts))

    def _blank(self) -> None:
        self.console.print()

    def render(self, source: Union[HookScanner, HookResults]) -> None:
        results = source.results if isinstance(source, HookScanner) else source
        self._header()

        counts = results.counts()
        for kind in HOOK_KINDS:
            hooks = results.hooks[kind.category]
            if not hooks:
                continue
            self._section(kind, hooks)

        self._summary(counts)

    def _header(self) -> None:
        self._blank()
        self._line(("  " + TITLE, "bold"), (f" {TITLE_VERSION}", "bright_black"))
        self._line(("  " + HEAVY_RULE, "bright_black"))
        self._blank()

    def _section(self, kind: HookKind, hooks) -> None:
        self._line((f"  {kind.symbol} {kind.label}", kind.style), (f" ({len(hooks)})", "bright_black"))
        self._line(("  " + LIGHT_RULE, "bright_black"))
        for name in sorted(hooks):
            locations: List[Occurrence] = hooks[name]
            parts: List[Part] = [("    ✓ ", "green"), (name, "white")]
            if len(locations) == 1:
                loc = locations[0]
                parts.extend(
                    [
                        (" → ", "bright_black"),
                        (shorten_path(loc.file, self.cwd), "cyan"),
                        (f":{loc.line}", "bright_black"),
                    ]
                )
            else:
                parts.append((f" ({len(locations)} occurrences)", "bright_black"))
            self._line(*parts)
        self._blank()

    def _summary(self, counts) -> None:
        total = sum(counts.values())
        self._line(("  " + HEAVY_RULE, "bright_black"))
        self._line(("  Summary: ", "bold"), (f"{total} unique hooks found", "white"))

        breakdown: List[Part] = []
        for kind in HOOK_KINDS:
            count = counts.get(kind.category, 0)
            if count <= 0:
                continue
            if breakdown:
                breakdown.append((" · ", "bright_black"))
            breakdown.append((f"{count} ", kind.style))
            breakdown.append((kind.label.lower(), "bright_black"))
        if breakdown:
            self._line(("  ", ""), *breakdown)
        self._blank()

    def render_diff(self, diff: SnapshotDiff) -> None:
        if diff.match:
            self._blank()
            self._line(("  ✓ Hooks match snapshot", "green"))
            self._blank()
            return

        self._blank()
        self._line(("  ✗ Hook snapshot mismatch", "yellow"))
        self._line(("  " + HEAVY_RULE, "bright_black"))
        self._blank()

        if diff.added:
            self._line(("  Added hooks (not in snapshot):", "green"))
            self._diff_group(diff.added, "+", "green")
        if diff.removed:
            self._line(("  Removed hooks (missing from code):", "yellow"))
            self._diff_group(diff.removed, "-", "yellow")

        self._line(("  Run with --update to update the snapshot", "bright_black"))
        self._blank()

    def _diff_group(self, grouped, marker: str, style: str) -> None:
        for category, names in grouped.items():
            kind = KINDS_BY_CATEGORY.get(category)
            label = kind.label if kind else category
            self._line((f"    {label}:", "bright_black"))
            for name in names:
                self._line((f"      {marker} ", style), (name, "white"))
        self._blank()

    def render_snapshot_saved(self, path: Union[str, Path]) -> None:
        self._blank()
        self._line((f"  ✓ Snapshot saved to {path}", "green"))
        self._blank()

    def render_json(self, source: Union[HookScanner, HookResults]) -> None:
        self.console.out(to_json(source), highlight=False)


def to_json(source: Union[HookScanner, HookResults]) -> str:
    results = source.results if isinstance(source, HookScanner) else source
    return results.to_json()
