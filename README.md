# orbitkeys

Orbitkeys shows the keyboard shortcuts for an application. It reads them from
JSON files and prints them in the terminal, grouped by category. Modifier and
special keys are drawn as glyphs, for example `⌃`, `⇧`, `⎇`, `⌘`, `↵` and `⎋`.

## Installation

```
pip install .
```

## Usage

```
orbitkeys [APP_ID] [--search TEXT] [--shortcuts-dir DIR] [--home]
```

- `APP_ID` – the application whose shortcuts are shown.
- `--search TEXT` – keep only shortcuts whose keys, description or category
  contain `TEXT` (case-insensitive).
- `--shortcuts-dir DIR` – read shortcut files from `DIR` instead of the
  default location.
- `--home` – show the shortcuts of the application id `root` (the
  desktop-wide sheet); takes precedence over `APP_ID`.

The board is printed to standard output: a header with the app id and search
text, the shortcuts, and a legend of the key glyphs. If no file matches the
app id, the message `No shortcuts for app_id: <id>` is shown instead; if a
file cannot be read or parsed, the error is shown. The command exits with
status 1 if the shortcuts directory cannot be listed, otherwise 0. When it
finishes it removes a stale `orbitkeys.lock` from `$XDG_RUNTIME_DIR` (or
`$TMPDIR`, or `/tmp`) if one is there.

## Shortcut files

Without `--shortcuts-dir`, orbitkeys uses the first of these that exists:

1. `$XDG_DATA_HOME/orbitkeys/shortcuts`
2. `$HOME/.local/share/orbitkeys/shortcuts`
3. `shortcuts` in the current directory

Each `*.json` file in that directory covers one application. The file is found
by its name without the extension, and also by the optional `app_id` and
`app_ids` fields. Matching ignores case and surrounding whitespace. If no name
matches exactly, the first indexed name (in sorted order) that contains the
requested id, or that the requested id contains, is used.

```json
{
  "app_id": "org.mozilla.firefox",
  "app_ids": ["firefox"],
  "shortcuts": [
    {"keys": "Ctrl+T", "desc": "New tab", "category": "Tabs"},
    {"keys": "Ctrl+Shift+Tab", "description": "Previous tab", "category": "Tabs"},
    {"keys": "Ctrl+L", "desc": "Focus address bar"}
  ]
}
```

Each shortcut needs `keys` and either `desc` or `description`. A shortcut with
no category is listed under `General`. Categories are shown in sorted order,
dealt across five columns; descriptions longer than 26 characters are cut off
with `…`.

## Library use

```python
from orbitkeys.resolver import ShortcutResolver
from orbitkeys.board import ShortcutBoard, load_shortcuts
from orbitkeys.keyformat import pretty_keys
from orbitkeys.glyphs import KeyGlyph, legend

board = ShortcutBoard(ShortcutResolver("shortcuts"))
board.set_active_app("firefox")
board.set_search("tab")
print(board.render())

print(pretty_keys("Ctrl+Shift+Tab"))  # ⌃⇧⇥
print(KeyGlyph.ENTER.symbol, KeyGlyph.ENTER.label)  # ↵ Enter
```

`ShortcutBoard` also offers `handle_focus(app_id)`, which switches to an app
reported as focused (ignoring blank ids, `unknown` and orbitkeys' own id),
`go_home()`, `filtered_items()`, `grouped_items()` and
`grouped_columns(max_cols)`.

## What it does not do

Orbitkeys does not watch the desktop for the focused window and has no
graphical window of its own. The application id is given on the command line
(or to `ShortcutBoard` by the calling code), and the board is printed once as
plain text.