"""core/session.py — Owns every entity for one run of the app.

Startup order:
1. main.py loads settings (file locations)
2. Load the experience table (fatal if missing or malformed)
3. Load Reports and Character (missing/corrupt files give defaults)
4. Hand the session to the scenes

Saving happens only when the user asks.  A failed save is printed and
recorded in the status log; in-memory state is left untouched so the
user can retry.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

from components.character import Character
from components.exp_table import ExpTable
from components.reports import Reports
from components.status_log import StatusLog
from core import settings
from core.errors import SaveError
from core.state import Persistable, load_or_default


@dataclass
class Session:
    reports: Reports
    character: Character
    exp_table: ExpTable
    reports_path: Path
    characters_path: Path
    status: StatusLog = field(default_factory=StatusLog)

    @classmethod
    def start(cls, reports_path: str | Path | None = None,
              characters_path: str | Path | None = None,
              level_table_path: str | Path | None = None) -> Session:
        """Load everything.  Paths default to the ``[files]`` settings."""
        reports_path = Path(reports_path or settings.get("files", "reports"))
        characters_path = Path(characters_path or settings.get("files", "characters"))
        level_table_path = Path(level_table_path or settings.get("files", "level_table"))

        exp_table = ExpTable.load(level_table_path)
        return cls(
            reports=load_or_default(Reports, reports_path),
            character=load_or_default(Character, characters_path),
            exp_table=exp_table,
            reports_path=reports_path,
            characters_path=characters_path,
        )

    def save_reports(self) -> bool:
        return self._save(self.reports, self.reports_path, "Reports")

    def save_character(self) -> bool:
        return self._save(self.character, self.characters_path, "Character")

    def _save(self, entity: Persistable, path: Path, label: str) -> bool:
        try:
            entity.save(path)
        except SaveError as ex:
            print(f"[SAVE] Failed to save {label.lower()}: {ex}")
            self.status.record("save", f"Failed to save {label.lower()}", error=True)
            return False
        print(f"[SAVE] {label} written to {path}")
        self.status.record("save", f"{label} saved")
        return True
