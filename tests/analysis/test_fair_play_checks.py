"""Tests for lineup queries and fair play validation."""

from dataclasses import replace

import pytest

from benchcoach.analysis import (
    benched_innings,
    categorize_issues,
    check_duplicate_assignments,
    check_infield_experience,
    consecutive_bench_innings,
    get_fair_play_issues,
    infield_innings,
    infield_percentage,
    innings_at_position,
    innings_played,
    outfield_innings,
    position_label_for_player,
    positions_played,
    validate_lineup,
)
from benchcoach.models.lineup import Lineup, LineupMode
from benchcoach.models.positions import Position

FIRST_NINE = [f"p{i}" for i in range(1, 10)]


@pytest.fixture
def lineup(make_inning):
    """p10 sits innings 1, 2 and 4 and pitches inning 3 while p1 sits."""
    innings = [
        make_inning(1, FIRST_NINE),
        make_inning(2, FIRST_NINE),
        make_inning(3, ["p10"] + FIRST_NINE[1:]),
        make_inning(4, FIRST_NINE),
    ]
    return Lineup("L", "g1", "t1", LineupMode.STANDARD, innings)


class TestQueries:
    """Per-player counts."""

    def test_bench_queries(self, lineup):
        assert benched_innings(lineup, "p10") == [1, 2, 4]
        assert consecutive_bench_innings(lineup, "p10") == 2
        assert consecutive_bench_innings(lineup, "p1") == 1
        assert consecutive_bench_innings(lineup, "p2") == 0
        assert innings_played(lineup, "p10") == 1

    def test_position_queries(self, lineup):
        assert positions_played(lineup, "p1") == [Position.PITCHER]
        assert innings_at_position(lineup, "p1", Position.PITCHER) == 3
        assert innings_at_position(lineup, "p10", Position.PITCHER) == 1

    def test_area_queries(self, lineup):
        assert infield_innings(lineup, "p2") == 4
        assert outfield_innings(lineup, "p7") == 4
        assert infield_percentage(lineup, "p7") == 0.0
        assert infield_percentage(lineup, "p10") == 100.0
        assert infield_percentage(lineup, "nobody") == 0.0

    def test_position_label(self, ten_players):
        p1 = ten_players[0]
        assert position_label_for_player(p1, Position.PITCHER) == "primary"
        assert position_label_for_player(p1, Position.FIRST_BASE) == "secondary"
        assert position_label_for_player(p1, Position.RIGHT_FIELD) == "new"


class TestValidateLineup:
    """Structured checks."""

    def test_results_in_fixed_order(self, lineup, ten_players):
        results = validate_lineup(lineup, ten_players)
        assert [r.check for r in results] == [
            "positions_filled",
            "consecutive_bench",
            "infield_experience",
            "duplicate_assignments",
        ]

    def test_findings(self, lineup, ten_players):
        filled, bench, infield, duplicates = validate_lineup(lineup, ten_players)
        assert filled.valid and filled.severity == "error"
        assert not bench.valid
        assert bench.severity == "warning"
        assert bench.affected_players == ["p10"]
        assert bench.affected_innings == [1, 2, 4]
        assert not infield.valid
        assert infield.affected_players == ["p7", "p8", "p9"]
        assert duplicates.valid

    def test_open_position_is_an_error(self, lineup, ten_players):
        del lineup.innings[1].assignments[Position.SHORTSTOP]
        filled = validate_lineup(lineup, ten_players)[0]
        assert not filled.valid
        assert filled.affected_innings == [2]

    def test_duplicate_assignment_detected(self, lineup):
        lineup.innings[2].assignments[Position.CATCHER] = "p10"
        result = check_duplicate_assignments(lineup)
        assert not result.valid
        assert result.affected_players == ["p10"]
        assert result.affected_innings == [3]

    def test_infield_check_skipped_for_short_games(self, make_inning):
        short = Lineup("L", "g", "t", LineupMode.STANDARD, [make_inning(1, FIRST_NINE), make_inning(2, FIRST_NINE)])
        assert check_infield_experience(short, FIRST_NINE).valid

    def test_inactive_players_not_checked(self, lineup, ten_players):
        players = ten_players[:9] + [replace(ten_players[9], active=False)]
        bench = validate_lineup(lineup, players)[1]
        assert bench.valid


class TestFairPlayIssues:
    """Coach-facing messages."""

    def test_messages(self, lineup, ten_players):
        issues = get_fair_play_issues(lineup, ten_players)
        assert "Some players are benched for 2+ consecutive innings: Player 10 (#10)" in issues
        assert "Some players haven't played any infield positions: Player 7 (#7)" in issues
        assert "Player 10 (#10) only plays 1 of 4 innings." in issues
        assert "Player 1 (#1) plays only P for all 3 innings." in issues
        assert "Player 2 (#2) plays only C for all 4 innings." in issues
        assert len(issues) == 14

    def test_full_game_flagged_for_big_rosters(self, make_inning, make_players):
        players = make_players(11)
        innings = [make_inning(n, FIRST_NINE) for n in range(1, 4)]
        lineup = Lineup("L", "g", "t", LineupMode.STANDARD, innings)
        issues = get_fair_play_issues(lineup, players)
        assert "Player 1 (#1) plays all 3 innings while other players sit out." in issues

    def test_categories(self, lineup, ten_players):
        grouped = categorize_issues(get_fair_play_issues(lineup, ten_players))
        assert list(grouped) == ["Bench Time", "Position Variety", "Playing Time"]
        assert len(grouped["Bench Time"]) == 1
        assert len(grouped["Position Variety"]) == 3
        assert len(grouped["Playing Time"]) == 10

    def test_other_issues_and_empty_groups(self):
        assert categorize_issues(["Roster not loaded"]) == {"Other Issues": ["Roster not loaded"]}
        assert categorize_issues([]) == {}
