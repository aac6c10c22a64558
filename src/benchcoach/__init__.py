"""
Bench Coach - Fair-Play Lineup Generation for Youth Baseball

One decision: who plays where, every inning.
Fairness rules: equitable bench time, guaranteed infield variety,
no child sitting out twice in a row.

Structure:
    config      - Scoring weights, limits and environment overrides
    data/       - Request schemas and read-only request loading
    models/     - Domain types and the generation core
    decisions/  - App-facing entry point (generate_lineup)
    analysis/   - Fair-play validation and pandas reports

Usage:
    from benchcoach.decisions import generate_lineup
    from benchcoach.models import FairPlaySettings, LineupMode, Player
    from benchcoach.analysis import get_fair_play_issues, lineup_grid
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
