"""Fair play validation for finished lineups.

Checks a lineup (generated or hand-edited) against the fair play rules
and produces coach-facing messages.

Key Classes:
    ValidationResult - Outcome of one check

Key Functions:
    validate_lineup() - Run every structural and fairness check
    get_fair_play_issues() - Human-readable issue list
    categorize_issues() - Group issues for display

Checks:
    positions_filled      error    every field position staffed each inning
    duplicate_assignments error    nobody holds two positions in one inning
    consecutive_bench     warning  nobody sits two innings in a row
    infield_experience    warning  everyone plays infield (games of 3+ innings)

Usage:
    from benchcoach.analysis import get_fair_play_issues, categorize_issues

    issues = get_fair_play_issues(lineup, players)
    for category, messages in categorize_issues(issues).items():
        print(category, len(messages))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from benchcoach.analysis.queries import (
    benched_innings,
    consecutive_bench_innings,
    innings_played,
    positions_played,
)
from benchcoach.models.lineup import Lineup, Player
from benchcoach.models.positions import FIELD_POSITIONS, is_infield

MIN_INNINGS_FOR_BALANCE_CHECKS = 3
FULL_GAME_ROSTER_LIMIT = 10

ISSUE_CATEGORIES = ("Bench Time", "Position Variety", "Playing Time", "Other Issues")


@dataclass
class ValidationResult:
    """Outcome of one lineup check."""

    check: str
    valid: bool
    severity: str  # "error" or "warning"
    message: Optional[str] = None
    affected_players: List[str] = field(default_factory=list)
    affected_innings: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "check": self.check,
            "valid": self.valid,
            "severity": self.severity,
            "message": self.message,
            "affected_players": list(self.affected_players),
            "affected_innings": list(self.affected_innings),
        }


def validate_positions_filled(lineup: Lineup) -> ValidationResult:
    incomplete = [
        inning.number
        for inning in lineup.innings
        if any(not inning.assignments.get(pos) for pos in FIELD_POSITIONS)
    ]
    return ValidationResult(
        check="positions_filled",
        valid=not incomplete,
        severity="error",
        message="Some positions are not filled" if incomplete else None,
        affected_innings=incomplete,
    )


def check_duplicate_assignments(lineup: Lineup) -> ValidationResult:
    players: List[str] = []
    innings: List[int] = []
    for inning in lineup.innings:
        on_field = inning.field_player_ids()
        repeated = [pid for pid in dict.fromkeys(on_field) if on_field.count(pid) > 1]
        if repeated:
            innings.append(inning.number)
            players.extend(pid for pid in repeated if pid not in players)
    return ValidationResult(
        check="duplicate_assignments",
        valid=not innings,
        severity="error",
        message="Some players are assigned to two positions in one inning" if innings else None,
        affected_players=players,
        affected_innings=innings,
    )


def check_consecutive_bench(lineup: Lineup, player_ids: Sequence[str]) -> ValidationResult:
    players: List[str] = []
    innings: List[int] = []
    for player_id in player_ids:
        if consecutive_bench_innings(lineup, player_id) < 2:
            continue
        players.append(player_id)
        for number in benched_innings(lineup, player_id):
            if number not in innings:
                innings.append(number)
    return ValidationResult(
        check="consecutive_bench",
        valid=not players,
        severity="warning",
        message="Some players are benched for 2+ consecutive innings" if players else None,
        affected_players=players,
        affected_innings=sorted(innings),
    )


def check_infield_experience(lineup: Lineup, player_ids: Sequence[str]) -> ValidationResult:
    if lineup.inning_count < MIN_INNINGS_FOR_BALANCE_CHECKS:
        return ValidationResult(check="infield_experience", valid=True, severity="warning")

    players = [
        pid for pid in player_ids if not any(is_infield(pos) for pos in positions_played(lineup, pid))
    ]
    return ValidationResult(
        check="infield_experience",
        valid=not players,
        severity="warning",
        message="Some players haven't played any infield positions" if players else None,
        affected_players=players,
    )


def validate_lineup(lineup: Lineup, players: Sequence[Player]) -> List[ValidationResult]:
    """Run every check against the active players.

    Args:
        lineup: Lineup to check.
        players: Team roster; inactive players are ignored.

    Returns:
        One ValidationResult per check, in a fixed order.
    """
    player_ids = [p.player_id for p in players if p.active]
    return [
        validate_positions_filled(lineup),
        check_consecutive_bench(lineup, player_ids),
        check_infield_experience(lineup, player_ids),
        check_duplicate_assignments(lineup),
    ]


def get_fair_play_issues(lineup: Lineup, players: Sequence[Player]) -> List[str]:
    """Coach-facing fair play messages.

    Failed checks produce one message per affected player (or one general
    message). Games of three or more innings also flag players with fewer
    than half the innings, players who never sit while a roster over ten
    rotates, and players stuck at one position.
    """
    active = [p for p in players if p.active]
    by_id: Dict[str, Player] = {p.player_id: p for p in active}
    issues: List[str] = []

    for result in validate_lineup(lineup, players):
        if result.valid or not result.message:
            continue
        named = [by_id[pid] for pid in result.affected_players if pid in by_id]
        if named:
            issues.extend(f"{result.message}: {player.display_name}" for player in named)
        else:
            issues.append(result.message)

    total = lineup.inning_count
    if total < MIN_INNINGS_FOR_BALANCE_CHECKS:
        return issues

    minimum = total // 2
    for player in active:
        played = innings_played(lineup, player.player_id)
        if played < minimum:
            issues.append(f"{player.display_name} only plays {played} of {total} innings.")
        if played == total and len(active) > FULL_GAME_ROSTER_LIMIT:
            issues.append(
                f"{player.display_name} plays all {total} innings while other players sit out."
            )

    for player in active:
        positions = positions_played(lineup, player.player_id)
        played = innings_played(lineup, player.player_id)
        if len(positions) == 1 and played > 1:
            issues.append(f"{player.display_name} plays only {positions[0]} for all {played} innings.")

    return issues


def categorize_issues(issues: Sequence[str]) -> Dict[str, List[str]]:
    """Group issue messages by keyword; empty groups are dropped."""
    groups: Dict[str, List[str]] = {name: [] for name in ISSUE_CATEGORIES}
    for issue in issues:
        if "bench" in issue or "consecutive innings" in issue:
            groups["Bench Time"].append(issue)
        elif "position" in issue or "infield" in issue:
            groups["Position Variety"].append(issue)
        elif "play" in issue or "innings" in issue:
            groups["Playing Time"].append(issue)
        else:
            groups["Other Issues"].append(issue)
    return {name: items for name, items in groups.items() if items}
