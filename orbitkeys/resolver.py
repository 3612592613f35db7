"""Map application ids to shortcut files in a directory."""

from __future__ import annotations

import json
import os
from pathlib import Path


def normalize(text: str) -> str:
    """Trim surrounding whitespace and lower-case *text*."""
    return text.strip().lower()


def _meta_ids(data: bytes) -> list[str]:
    """Ids declared by a shortcut file, or none if its metadata is malformed."""
    try:
        meta = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return []
    if not isinstance(meta, dict):
        return []

    app_id = meta.get("app_id")
    aliases = meta.get("app_ids")
    if app_id is not None and not isinstance(app_id, str):
        return []
    if aliases is not None:
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            return []

    ids = [app_id] if app_id is not None else []
    ids.extend(aliases or [])
    return ids


class ShortcutResolver:
    """Finds the shortcut file for an application id."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)
        self.index: dict[str, Path] = {}
        self.rebuild_index()

    def __repr__(self) -> str:
        return f"ShortcutResolver({str(self.directory)!r})"

    def rebuild_index(self) -> None:
        """Rescan the directory; raises OSError if it cannot be listed."""
        self.index.clear()
        for path in sorted(self.directory.iterdir()):
            if path.suffix != ".json":
                continue
            self.index[normalize(path.stem)] = path
            try:
                data = path.read_bytes()
            except OSError:
                continue
            for app_id in _meta_ids(data):
                self.index[normalize(app_id)] = path

    def resolve(self, app_id: str) -> Path | None:
        """Path of the shortcut file for *app_id*, or None if nothing matches."""
        query = normalize(app_id)
        found = self.index.get(query)
        if found is not None:
            return found
        return next(
            (self.index[key] for key in sorted(self.index) if query in key or key in query),
            None,
        )