"""Shortcut board: loads, filters, groups and renders shortcuts for the focused app."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from orbitkeys.glyphs import legend
from orbitkeys.keyformat import pretty_keys
from orbitkeys.resolver import ShortcutResolver

APP_ID = "orbitkeys"
DEFAULT_CATEGORY = "General"
HOME_APP_ID = "root"
UNKNOWN_APP_ID = "unknown"
GRID_COLUMNS = 5
DESC_MAX_CHARS = 26
LOCK_FILE_NAME = "orbitkeys.lock"


@dataclass(frozen=True)
class ShortcutEntry:
    """One shortcut: its key combination, a description and a category."""

    keys: str
    desc: str
    category: str = DEFAULT_CATEGORY


def _require_str(entry: Mapping[str, object], field: str, position: int) -> str:
    value = entry[field]
    if not isinstance(value, str):
        raise ValueError(f"shortcut {position}: field '{field}' must be a string")
    return value


def _parse_entry(entry: object, position: int) -> ShortcutEntry:
    if not isinstance(entry, dict):
        raise ValueError(f"shortcut {position}: expected an object")
    if "desc" in entry and "description" in entry:
        raise ValueError(f"shortcut {position}: duplicate field 'desc'")
    desc_field = "desc" if "desc" in entry else "description"
    for field in ("keys", desc_field):
        if field not in entry:
            raise ValueError(f"shortcut {position}: missing field '{field}'")
    keys = _require_str(entry, "keys", position)
    desc = _require_str(entry, desc_field, position)
    category = entry.get("category")
    if category is None:
        category = DEFAULT_CATEGORY
    elif not isinstance(category, str):
        raise ValueError(f"shortcut {position}: field 'category' must be a string")
    return ShortcutEntry(keys, desc, category)


def load_shortcuts(path: str | os.PathLike[str]) -> list[ShortcutEntry]:
    """Read a shortcut file; raises OSError or ValueError if it is unusable."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    if "shortcuts" not in data:
        raise ValueError("missing field 'shortcuts'")
    shortcuts = data["shortcuts"]
    if not isinstance(shortcuts, list):
        raise ValueError("field 'shortcuts' must be a list")
    return [_parse_entry(entry, position) for position, entry in enumerate(shortcuts)]


def ellipsize(text: str, max_chars: int) -> str:
    """Trim *text* to at most *max_chars* characters, ending in an ellipsis if cut."""
    text = text.strip()
    if max_chars <= 0:
        return ""
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1] + "…"


def no_wrap_spaces(text: str) -> str:
    """Replace spaces with non-breaking spaces so the text does not wrap."""
    return text.replace(" ", "\u00a0")


def cleanup_lock_file(environ: Mapping[str, str] | None = None) -> None:
    """Remove the lock file from the runtime directory, if there is one."""
    env = os.environ if environ is None else environ
    runtime_dir = env.get("XDG_RUNTIME_DIR") or env.get("TMPDIR") or "/tmp"
    if "XDG_RUNTIME_DIR" in env:
        runtime_dir = env["XDG_RUNTIME_DIR"]
    elif "TMPDIR" in env:
        runtime_dir = env["TMPDIR"]
    try:
        (Path(runtime_dir) / LOCK_FILE_NAME).unlink()
    except OSError:
        pass


class ShortcutBoard:
    """State of the shortcut viewer: the active app, its shortcuts and the filter."""

    def __init__(self, resolver: ShortcutResolver) -> None:
        self.resolver = resolver
        self.app_id_text = ""
        self.search = ""
        self.items: list[ShortcutEntry] = []
        self.load_error: str | None = None
        self.last_target_app_id: str | None = None
        self.show_settings = False

    def load_for_app_id(self, app_id: str) -> None:
        """Load the shortcuts for *app_id*, recording any failure in load_error."""
        self.items = []
        self.load_error = None

        app_id = app_id.strip()
        if not app_id:
            return

        path = self.resolver.resolve(app_id)
        if path is None:
            self.load_error = f"No shortcuts for app_id: {app_id}"
            return

        try:
            self.items = load_shortcuts(path)
        except (OSError, ValueError) as exc:
            self.load_error = str(exc)

    def set_active_app(self, app_id: str) -> None:
        """Switch to *app_id* unless it is blank or already active."""
        app_id = app_id.strip()
        if not app_id or self.last_target_app_id == app_id:
            return
        self.last_target_app_id = app_id
        self.app_id_text = app_id
        self.load_for_app_id(app_id)

    def handle_focus(self, app_id: str) -> None:
        """React to a focus change reported by the desktop."""
        if app_id == APP_ID:
            return
        app_id = app_id.strip()
        if not app_id or app_id == UNKNOWN_APP_ID:
            return
        self.set_active_app(app_id)

    def set_search(self, text: str) -> None:
        """Set the filter text."""
        self.search = text

    def go_home(self) -> None:
        """Show the desktop-wide shortcuts."""
        self.set_active_app(HOME_APP_ID)

    def filtered_items(self) -> list[ShortcutEntry]:
        """Shortcuts whose keys, description or category contain the search text."""
        query = self.search.strip().lower()
        if not query:
            return list(self.items)
        return [
            item
            for item in self.items
            if query in item.keys.lower()
            or query in item.desc.lower()
            or query in item.category.lower()
        ]

    def grouped_items(self) -> dict[str, list[tuple[str, str]]]:
        """Filtered shortcuts grouped by category, categories in sorted order."""
        groups: dict[str, list[tuple[str, str]]] = {}
        for item in self.filtered_items():
            groups.setdefault(item.category, []).append((item.keys, item.desc))
        return {category: groups[category] for category in sorted(groups)}

    def grouped_columns(
        self, max_cols: int
    ) -> list[list[tuple[str, list[tuple[str, str]]]]]:
        """Categories dealt round-robin into *max_cols* columns."""
        if max_cols <= 0:
            raise ValueError("max_cols must be positive")
        columns: list[list[tuple[str, list[tuple[str, str]]]]] = [
            [] for _ in range(max_cols)
        ]
        for position, group in enumerate(self.grouped_items().items()):
            columns[position % max_cols].append(group)
        return columns

    def _render_body(self) -> list[str]:
        if not self.items and self.load_error is None:
            return ["Focus an app to load shortcuts."]
        if self.load_error is not None:
            return [self.load_error]
        lines: list[str] = []
        for column in self.grouped_columns(GRID_COLUMNS):
            for category, entries in column:
                if lines:
                    lines.append("")
                lines.append(category)
                for keys, desc in entries:
                    desc_one = no_wrap_spaces(
                        ellipsize(desc.replace("\n", " "), DESC_MAX_CHARS)
                    )
                    lines.append(f"  {pretty_keys(keys)}  {desc_one}")
        return lines

    def render(self) -> str:
        """The board as plain text."""
        lines = [
            "OrbitKeys",
            f"App ID: {self.app_id_text}",
            f"Search: {self.search}",
            "",
        ]
        lines.extend(self._render_body())
        lines.append("")
        lines.append("  ".join(f"{glyph.symbol} {glyph.label}" for glyph in legend()))
        if self.show_settings:
            lines.extend(["", "Settings"])
        return "\n".join(lines)