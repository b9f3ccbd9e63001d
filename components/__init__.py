"""components — Domain entities, one module per concern.

Submodules
----------
reports      Reports, ConversionResult
character    Character
exp_table    ExpTable
status_log   StatusLog

All public names are re-exported here so code can do
``from components import Reports``.
"""

from components.reports import Reports, ConversionResult
from components.character import Character
from components.exp_table import ExpTable
from components.status_log import StatusLog

__all__ = [
    "Reports", "ConversionResult",
    "Character",
    "ExpTable",
    "StatusLog",
]
