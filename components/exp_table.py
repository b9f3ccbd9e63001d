"""components.exp_table — Cumulative experience required per level.

Loaded once at startup from ``level_table.json``::

    {"exp_needed": [0, 15, 49, ...]}

Entry *i* is the total experience needed to reach level *i + 1*.  The
table is immutable after load and passed explicitly to whatever needs
it.  Unlike Reports and Character there is no sane default, so load
failures propagate and stop the app.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from core.errors import Corrupt
from core.state import read_json, require_int, require_list


@dataclass(frozen=True)
class ExpTable:
    exp_needed: tuple[int, ...]

    @classmethod
    def load(cls, path: str | Path) -> ExpTable:
        """Read the table.  Raises ``NotFound`` or ``Corrupt``."""
        path = Path(path)
        data = read_json(path)
        if not isinstance(data, dict) or "exp_needed" not in data:
            raise Corrupt(path, "expected an object with exp_needed")
        raw = require_list(path, "exp_needed", data["exp_needed"])
        if not raw:
            raise Corrupt(path, "exp_needed is empty")
        values = tuple(require_int(path, f"exp_needed[{i}]", v)
                       for i, v in enumerate(raw))
        print(f"[TABLE] Loaded {len(values)} levels from {path}")
        return cls(values)

    @property
    def max_level(self) -> int:
        return len(self.exp_needed)

    def required_for(self, level: int) -> int:
        """Cumulative experience to reach *level* (1-based).

        Levels past the end of the table raise ``IndexError``: the table
        is expected to cover the game's level cap.
        """
        if level < 1 or level > len(self.exp_needed):
            raise IndexError(f"level {level} outside table (1..{len(self.exp_needed)})")
        return self.exp_needed[level - 1]
