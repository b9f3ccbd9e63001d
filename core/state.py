"""core/state.py — JSON persistence contract for domain entities.

Every persisted entity (Reports, Character) subclasses ``Persistable``
and supplies two hooks:

    to_dict()            -> plain JSON-ready dict
    from_dict(path, d)   -> fresh entity, raising Corrupt on bad shape

Loading is always a classmethod taking an explicit path; it never
mutates an existing instance:

    reports = Reports.load("reports.json")
    reports.save("reports.json")

Files are pretty-printed (2-space indent) so they diff cleanly.
Writes are not atomic: a crash mid-write can leave a truncated file,
which the next load reports as ``Corrupt``.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, TypeVar

from core.errors import Corrupt, NotFound, SaveError

T = TypeVar("T", bound="Persistable")


class Persistable:
    """Mixin giving a dataclass entity load/save against a JSON file."""

    @classmethod
    def from_dict(cls: type[T], path: Path, data: dict[str, Any]) -> T:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def load(cls: type[T], path: str | Path) -> T:
        """Read a fresh entity from *path*.

        Raises ``NotFound`` if the file is missing and ``Corrupt`` if it
        cannot be decoded or does not match the entity's shape.
        """
        path = Path(path)
        data = read_json(path)
        if not isinstance(data, dict):
            raise Corrupt(path, f"expected an object, got {type(data).__name__}")
        return cls.from_dict(path, data)

    def save(self, path: str | Path) -> None:
        """Overwrite *path* with this entity.  Raises ``SaveError``."""
        write_json(Path(path), self.to_dict())


def read_json(path: Path) -> Any:
    if not path.exists():
        raise NotFound(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (ValueError, RecursionError) as ex:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and the
        # int-digit limit; RecursionError is very deep nesting
        raise Corrupt(path, str(ex) or type(ex).__name__) from ex
    except OSError as ex:
        raise Corrupt(path, ex.strerror or str(ex)) from ex


def write_json(path: Path, data: dict[str, Any]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
    except OSError as ex:
        raise SaveError(path, ex.strerror or str(ex)) from ex


def load_or_default(cls: type[T], path: str | Path) -> T:
    """Load *cls* from *path*, falling back to ``cls()`` on any load failure.

    A missing file is the normal first-run case and stays quiet; a
    corrupt one is printed so the user can find out why their data
    disappeared.
    """
    try:
        return cls.load(path)
    except NotFound:
        return cls()
    except Corrupt as ex:
        print(f"[STATE] {ex}, using defaults")
        return cls()


# ── Field validators shared by from_dict implementations ─────────────

def require_number(path: Path, field: str, value: Any) -> float:
    """Return *value* as a float, rejecting bools, strings and non-finite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise Corrupt(path, f"{field} must be a number, got {value!r}")
    if value != value or value in (float("inf"), float("-inf")):
        raise Corrupt(path, f"{field} must be finite")
    try:
        return float(value)
    except OverflowError as ex:
        raise Corrupt(path, f"{field} is too large") from ex


def require_int(path: Path, field: str, value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise Corrupt(path, f"{field} must be an integer, got {value!r}")
    if value < minimum:
        raise Corrupt(path, f"{field} must be >= {minimum}, got {value}")
    return value


def require_list(path: Path, field: str, value: Any, length: int | None = None) -> list:
    if not isinstance(value, list):
        raise Corrupt(path, f"{field} must be a list, got {value!r}")
    if length is not None and len(value) != length:
        raise Corrupt(path, f"{field} must have {length} entries, got {len(value)}")
    return value
