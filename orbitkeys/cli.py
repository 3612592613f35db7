"""Command line entry point: show the shortcut board for an application."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from orbitkeys.board import ShortcutBoard, cleanup_lock_file
from orbitkeys.resolver import ShortcutResolver


def find_shortcuts_directory(environ: Mapping[str, str] | None = None) -> Path:
    """The first existing shortcuts directory, falling back to ./shortcuts."""
    env = os.environ if environ is None else environ
    if "XDG_DATA_HOME" in env:
        candidate = Path(env["XDG_DATA_HOME"]) / "orbitkeys" / "shortcuts"
        if candidate.exists():
            return candidate
    if "HOME" in env:
        candidate = Path(env["HOME"]) / ".local" / "share" / "orbitkeys" / "shortcuts"
        if candidate.exists():
            return candidate
    return Path("shortcuts")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="orbitkeys", description="Show keyboard shortcuts for an application."
    )
    parser.add_argument("app_id", nargs="?", default="", help="application id to show")
    parser.add_argument("--search", default="", help="filter shortcuts by text")
    parser.add_argument(
        "--shortcuts-dir", type=Path, default=None, help="directory of shortcut files"
    )
    parser.add_argument("--home", action="store_true", help="show desktop-wide shortcuts")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shortcut board; returns the process exit status."""
    args = _parse_args(argv)
    directory = args.shortcuts_dir or find_shortcuts_directory()
    try:
        try:
            resolver = ShortcutResolver(directory)
        except OSError as exc:
            print(f"orbitkeys: {exc}", file=sys.stderr)
            return 1
        board = ShortcutBoard(resolver)
        if args.home:
            board.go_home()
        elif args.app_id:
            board.set_active_app(args.app_id)
        board.set_search(args.search)
        print(board.render())
        return 0
    finally:
        cleanup_lock_file()


if __name__ == "__main__":
    sys.exit(main())