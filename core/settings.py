"""core/settings.py — App settings loaded from ``data/settings.toml``.

File locations, window geometry and input limits live in one TOML file
read once at startup.  Any module can read a value with::

    from core import settings
    path = settings.get("files", "reports", "reports.json")

A missing file is not an error: every ``get`` call carries its default.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


DEFAULTS: dict = {
    "files": {
        "reports": "reports.json",
        "characters": "characters.json",
        "level_table": "data/level_table.json",
    },
    "window": {
        "title": "BA Reports",
        "width": 720,
        "height": 560,
        "fps": 30,
    },
    "reports": {
        "max_quantity": 50000.0,
        "step": 10.0,
    },
}

_data: dict = {}


def load(path: str | Path | None = None) -> None:
    """Load settings from *path*.

    If *path* is ``None``, default to ``data/settings.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "settings.toml"
    else:
        path = Path(path)

    if not path.exists():
        print(f"[SETTINGS] {path} not found, using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[SETTINGS] Loaded {_count_leaves(_data)} values from {path}")


def get(section_path: str, key: str, default=None):
    """Read a setting, falling back to ``DEFAULTS`` and then *default*.

    *section_path* uses dot-notation to traverse nested tables.

    >>> get("window", "title")
    'BA Reports'
    """
    for source in (_data, DEFAULTS):
        node = _lookup(source, section_path)
        if isinstance(node, dict) and key in node:
            return node[key]
    return default


def section(section_path: str) -> dict:
    """Return a merged copy of a section (file values over defaults)."""
    merged: dict = {}
    for source in (DEFAULTS, _data):
        node = _lookup(source, section_path)
        if isinstance(node, dict):
            merged.update(node)
    return merged


def _lookup(source: dict, section_path: str):
    node = source
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
