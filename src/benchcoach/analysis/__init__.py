"""Analysis module - lineup validation, queries and reports.

Submodules:
    queries   - Per-player counts over a finished lineup
    fair_play - Validation checks and coach-facing issues
    report    - pandas grids and console formatting
"""

from benchcoach.analysis.fair_play import (
    ValidationResult,
    categorize_issues,
    check_consecutive_bench,
    check_duplicate_assignments,
    check_infield_experience,
    get_fair_play_issues,
    validate_lineup,
    validate_positions_filled,
)
from benchcoach.analysis.queries import (
    benched_innings,
    consecutive_bench_innings,
    infield_innings,
    infield_percentage,
    innings_at_position,
    innings_played,
    outfield_innings,
    position_label_for_player,
    positions_played,
)
from benchcoach.analysis.report import LineupFormatter, lineup_grid, playing_time_summary

__all__ = [
    # Validation
    "ValidationResult",
    "validate_lineup",
    "validate_positions_filled",
    "check_consecutive_bench",
    "check_infield_experience",
    "check_duplicate_assignments",
    "get_fair_play_issues",
    "categorize_issues",
    # Queries
    "benched_innings",
    "consecutive_bench_innings",
    "infield_innings",
    "infield_percentage",
    "innings_at_position",
    "innings_played",
    "outfield_innings",
    "position_label_for_player",
    "positions_played",
    # Reports
    "LineupFormatter",
    "lineup_grid",
    "playing_time_summary",
]
