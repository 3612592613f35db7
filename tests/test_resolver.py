import json

import pytest

from orbitkeys.resolver import ShortcutResolver, normalize


def _write(directory, name, content):
    path = directory / name
    path.write_text(content if isinstance(content, str) else json.dumps(content))
    return path


def test_normalize_trims_and_lowercases():
    assert normalize("  Firefox\n") == "firefox"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        ShortcutResolver(tmp_path / "absent")


def test_resolves_by_file_stem(tmp_path):
    path = _write(tmp_path, "Firefox.json", {"shortcuts": []})
    resolver = ShortcutResolver(tmp_path)
    assert resolver.resolve("firefox") == path
    assert resolver.resolve("  FIREFOX ") == path


def test_ignores_non_json_files(tmp_path):
    _write(tmp_path, "notes.txt", "hello")
    resolver = ShortcutResolver(tmp_path)
    assert resolver.index == {}
    assert resolver.resolve("notes") is None


def test_app_id_and_aliases_indexed(tmp_path):
    path = _write(
        tmp_path,
        "editor.json",
        {"app_id": "Com.Example.Editor", "app_ids": ["ed", "TextEd"]},
    )
    resolver = ShortcutResolver(tmp_path)
    for key in ("editor", "com.example.editor", "ed", "texted"):
        assert resolver.index[key] == path


def test_malformed_metadata_keeps_stem_only(tmp_path):
    path = _write(tmp_path, "broken.json", "{not json")
    _write(tmp_path, "badtype.json", {"app_id": 5, "app_ids": ["x"]})
    resolver = ShortcutResolver(tmp_path)
    assert resolver.index["broken"] == path
    assert "x" not in resolver.index
    assert set(resolver.index) == {"broken", "badtype"}


def test_substring_match_in_sorted_key_order(tmp_path):
    _write(tmp_path, "bbb-term.json", {})
    first = _write(tmp_path, "aaa-term.json", {})
    resolver = ShortcutResolver(tmp_path)
    assert resolver.resolve("term") == first


def test_query_containing_key_matches(tmp_path):
    path = _write(tmp_path, "code.json", {})
    resolver = ShortcutResolver(tmp_path)
    assert resolver.resolve("com.visualstudio.code") == path


def test_no_match_returns_none(tmp_path):
    _write(tmp_path, "code.json", {})
    resolver = ShortcutResolver(tmp_path)
    assert resolver.resolve("gimp") is None


def test_rebuild_index_picks_up_new_files(tmp_path):
    resolver = ShortcutResolver(tmp_path)
    assert resolver.resolve("root") is None
    path = _write(tmp_path, "root.json", {"shortcuts": []})
    resolver.rebuild_index()
    assert resolver.resolve("root") == path


def test_rebuild_index_drops_removed_files(tmp_path):
    path = _write(tmp_path, "root.json", {})
    resolver = ShortcutResolver(tmp_path)
    path.unlink()
    resolver.rebuild_index()
    assert resolver.index == {}