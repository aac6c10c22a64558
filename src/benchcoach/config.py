"""Centralized configuration for Bench Coach.

All scoring weights, limits and paths in one place.
Environment variables can override the runtime settings.

Scoring Constants:
    CONTINUITY_EXACT_WEIGHT - Bonus for repeating last inning's position
    CONTINUITY_AREA_WEIGHT - Bonus for staying in the same area (IF/OF)
    PRIMARY_WEIGHT / SECONDARY_WEIGHT - Preference bonuses
    EXPERIENCE_WEIGHT / EXPERIENCE_CAP - Position history bonus
    INFIELD_NEED_BONUS - Fixed bonus while a player still needs infield time

Continuity Constants:
    CONTINUITY_PRIORITIZED / CONTINUITY_RELAXED - Base continuity factor
    MODE_CONTINUITY_SHIFT - Per-mode adjustment
    CONTINUITY_FLOOR / CONTINUITY_CEILING - Clamp for the adjusted factor
    HIGH_CONTINUITY_THRESHOLD - Above this, keep players in place first

Environment Variables:
    BENCHCOACH_LOG_LEVEL - Logging level for CLI runs (default INFO)
    BENCHCOACH_REPORTS_DIR - Where the CLI writes CSV reports
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root (src/benchcoach/config.py -> benchcoach -> src -> project_root)
PROJECT_ROOT = Path(__file__).parent.parent.parent
STORAGE_DIR = PROJECT_ROOT / "storage"
REPORTS_DIR = Path(os.environ.get("BENCHCOACH_REPORTS_DIR", str(STORAGE_DIR / "reports")))

LOG_LEVEL = os.environ.get("BENCHCOACH_LOG_LEVEL", "INFO").upper()

# Game shape
FIELD_POSITION_COUNT = 9
DEFAULT_INNINGS = 6
MAX_INNINGS = 12
MAX_ROSTER_SIZE = 30

# Score weights (relative values must stay fixed for tie-break parity)
CONTINUITY_EXACT_WEIGHT = 10.0
CONTINUITY_AREA_WEIGHT = 5.0
PRIMARY_WEIGHT = 7.0
SECONDARY_WEIGHT = 5.0
EXPERIENCE_WEIGHT = 3.0
EXPERIENCE_CAP = 3
INFIELD_NEED_BONUS = 15.0

# Continuity factor
CONTINUITY_PRIORITIZED = 0.7
CONTINUITY_RELAXED = 0.3
MODE_CONTINUITY_SHIFT = 0.2
CONTINUITY_FLOOR = 0.2
CONTINUITY_CEILING = 0.9
HIGH_CONTINUITY_THRESHOLD = 0.6

# Preference factors per lineup mode
PRIMARY_FACTORS = {"competitive": 0.8, "developmental": 0.2, "standard": 0.5}
SECONDARY_FACTORS = {"competitive": 0.2, "developmental": 0.8, "standard": 0.5}

# Assignment strategies
ASSIGNMENT_STRATEGIES = ("greedy", "lp")
DEFAULT_ASSIGNMENT_STRATEGY = "greedy"

# Roster-order tie-break bonus on LP weights; must stay far below any real score gap
LP_TIE_BREAK_EPSILON = 1e-5
