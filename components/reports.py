"""components.reports — Report inventory and its conversion result."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.constants import TIER_COUNT
from core.errors import Corrupt
from core.state import Persistable, require_list, require_number


@dataclass(frozen=True)
class ConversionResult:
    """Output of one conversion run.

    Both values always exist together, so the pair lives in one optional
    slot on ``Reports`` rather than two independent ones.
    """
    purple_reports: float
    exp: float


@dataclass
class Reports(Persistable):
    """Report counts in tier order ``[white, blue, orange, purple]``.

    ``conversion`` is set by ``logic.conversion.apply_conversion`` and
    removed by ``clear``.  It is written on save but always dropped on
    load, so a fresh session never shows stale totals.
    """
    quantities: list[float] = field(default_factory=lambda: [0.0] * TIER_COUNT)
    conversion: ConversionResult | None = None

    def to_dict(self) -> dict[str, Any]:
        conv = self.conversion
        return {
            "quantities": [float(q) for q in self.quantities],
            "purple_reports": conv.purple_reports if conv else None,
            "exp": conv.exp if conv else None,
        }

    @classmethod
    def from_dict(cls, path: Path, data: dict[str, Any]) -> Reports:
        if "quantities" not in data:
            raise Corrupt(path, "missing quantities")
        raw = require_list(path, "quantities", data["quantities"], TIER_COUNT)
        quantities = []
        for i, q in enumerate(raw):
            value = require_number(path, f"quantities[{i}]", q)
            if value < 0:
                raise Corrupt(path, f"quantities[{i}] is negative")
            quantities.append(value)
        # purple_reports / exp are transient: ignore whatever was saved
        return cls(quantities=quantities, conversion=None)
