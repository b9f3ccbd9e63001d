"""core/constants.py — Shared constants used across the codebase.

Centralises the fixed conversion ratios so there's exactly one place to
change them.

Report tiers
------------
Four report tiers, always in this order in every list and file:

    index   tier      per purple-equivalent
    0       white     200
    1       blue      20
    2       orange    5
    3       purple    1

One purple-equivalent is worth ``EXP_PER_PURPLE`` experience.
"""

# ── Report tiers ────────────────────────────────────────────────────
TIER_WHITE  = 0
TIER_BLUE   = 1
TIER_ORANGE = 2
TIER_PURPLE = 3

TIER_NAMES = ("White", "Blue", "Orange", "Purple")
TIER_COUNT = len(TIER_NAMES)

# Reports of each tier needed for one purple-equivalent
TIER_WEIGHTS = (200.0, 20.0, 5.0, 1.0)

EXP_PER_PURPLE = 10000.0
ORANGE_PER_PURPLE = TIER_WEIGHTS[TIER_ORANGE]

# ── Character defaults ──────────────────────────────────────────────
MIN_LEVEL = 1
SKILL_COUNT = 4
DEFAULT_SKILL_LEVEL = 1

# Swatch colours for each tier (UI only)
TIER_COLORS = {
    TIER_WHITE:  (220, 220, 220),
    TIER_BLUE:   (70, 140, 230),
    TIER_ORANGE: (240, 150, 40),
    TIER_PURPLE: (170, 90, 220),
}
