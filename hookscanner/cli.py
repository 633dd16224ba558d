from __future__ import annotations

import argparse
import os
from typing import List, Optional

from rich.console import Console

from .console import RichLogger
from .reporter import Reporter, build_console
from .scanner import DEFAULT_EXTENSION, DirectoryNotFoundError, HookScanner
from .snapshot import load_snapshot

VERSION = "1.0.0"
DEFAULT_DIRECTORY = "src"
DEFAULT_SNAPSHOT = ".hooks-snapshot.json"
SNAPSHOT_ENV_VAR = "HOOK_SCANNER_SNAPSHOT"

EPILOG = """\
examples:
  scan-hooks src                          pretty print hooks in src/
  scan-hooks src --json                   output as JSON
  scan-hooks src --update                 create snapshot
  scan-hooks src --check                  compare against snapshot
  scan-hooks . --snapshot=hooks.json      use custom snapshot path
"""


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="scan-hooks",
        description="WP Hook Scanner - Scan PHP files for WordPress hooks.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help=f"Directory to scan (default: {DEFAULT_DIRECTORY}).",
    )
    ap.add_argument("--json", action="store_true", help="Output results as JSON.")
    ap.add_argument("--update", action="store_true", help="Create/update snapshot file.")
    ap.add_argument("--check", action="store_true", help="Compare against snapshot (for CI).")
    ap.add_argument(
        "--snapshot",
        default=None,
        help=f"Snapshot file path (default: ${SNAPSHOT_ENV_VAR} or {DEFAULT_SNAPSHOT}).",
    )
    ap.add_argument(
        "--ext",
        default=DEFAULT_EXTENSION,
        help=f"File extension to scan, compared case-sensitively (default: {DEFAULT_EXTENSION}).",
    )
    ap.add_argument("--no-color", action="store_true", help="Disable colored output.")
    ap.add_argument("--verbose", action="store_true", help="Verbose debug logs")
    ap.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"WP Hook Scanner v{VERSION}",
        help="Show version information.",
    )
    return ap


def _resolve_snapshot_path(explicit: str | None) -> str:
    if explicit and explicit.strip():
        return explicit.strip()
    value = os.environ.get(SNAPSHOT_ENV_VAR, "")
    if value.strip():
        return value.strip()
    return DEFAULT_SNAPSHOT


def run(args, console: Optional[Console] = None) -> int:
    logger = RichLogger(verbose=args.verbose)
    reporter = Reporter(console=console or build_console(use_colors=not args.no_color))
    snapshot_path = _resolve_snapshot_path(args.snapshot)

    scanner = HookScanner(extension=args.ext, logger=logger)
    try:
        scanner.scan(args.directory)
    except DirectoryNotFoundError as exc:
        logger.error(f"Error: {exc}")
        return 1

    if args.json:
        reporter.render_json(scanner)
        return 0

    if args.update:
        if scanner.save_snapshot(snapshot_path):
            reporter.render_snapshot_saved(snapshot_path)
            return 0
        logger.error(f"Error: Failed to save snapshot to {snapshot_path}")
        return 1

    if args.check:
        previous = load_snapshot(snapshot_path)
        if previous is None:
            logger.error(f"Error: No snapshot found at {snapshot_path}")
            logger.info("Run with --update to create one")
            return 1
        diff = scanner.compare_to_snapshot(previous)
        reporter.render_diff(diff)
        return 0 if diff.match else 1

    reporter.render(scanner)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run(args)
