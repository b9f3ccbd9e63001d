"""components.character — The tracked player character.

``current_exp`` is kept as the raw text the user typed.  It is only
validated when a leveling calculation runs, so a half-typed value can
still be saved and restored.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.constants import DEFAULT_SKILL_LEVEL, MIN_LEVEL, SKILL_COUNT
from core.errors import Corrupt
from core.state import Persistable, require_int, require_list


@dataclass
class Character(Persistable):
    name: str | None = None
    level: int = MIN_LEVEL
    skills: list[int] = field(default_factory=lambda: [DEFAULT_SKILL_LEVEL] * SKILL_COUNT)
    current_exp: str = ""

    def __post_init__(self):
        if self.level < MIN_LEVEL:
            raise ValueError(f"level must be >= {MIN_LEVEL}, got {self.level}")

    @property
    def is_selected(self) -> bool:
        return self.name is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "level": self.level,
            "skills": list(self.skills),
            "current_exp": self.current_exp,
        }

    @classmethod
    def from_dict(cls, path: Path, data: dict[str, Any]) -> Character:
        """Build a Character, defaulting every missing or null field."""
        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise Corrupt(path, f"name must be a string, got {name!r}")

        level = data.get("level")
        level = MIN_LEVEL if level is None else require_int(path, "level", level, MIN_LEVEL)

        skills = data.get("skills")
        if skills is None:
            skills = [DEFAULT_SKILL_LEVEL] * SKILL_COUNT
        else:
            raw = require_list(path, "skills", skills, SKILL_COUNT)
            skills = [require_int(path, f"skills[{i}]", s) for i, s in enumerate(raw)]

        current_exp = data.get("current_exp")
        if current_exp is None:
            current_exp = ""
        elif isinstance(current_exp, int) and not isinstance(current_exp, bool):
            current_exp = str(current_exp)
        elif not isinstance(current_exp, str):
            raise Corrupt(path, f"current_exp must be text, got {current_exp!r}")

        return cls(name=name, level=level, skills=skills, current_exp=current_exp)
