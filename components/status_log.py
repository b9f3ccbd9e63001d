"""components.status_log — User-facing status messages.

A small ring-buffer the scenes write to whenever something worth telling
the user happens (saved, save failed, bad input).  The footer draws the
newest entry.

Usage:
    log = session.status
    log.record("save", "Reports saved")
    log.record("calc", "Please insert a number", error=True)

Each entry is a dict:
    {"cat": str, "msg": str, "error": bool}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class StatusLog:
    entries: list[dict] = field(default_factory=list)
    max_entries: int = 50

    def record(self, cat: str, msg: str, *, error: bool = False) -> None:
        self.entries.append({"cat": cat, "msg": msg, "error": error})
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    @property
    def latest(self) -> dict | None:
        return self.entries[-1] if self.entries else None
