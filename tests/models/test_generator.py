"""Tests for the full generation pipeline.

Properties checked on every generated lineup:
    - nine distinct occupants per inning when nine or more players exist
    - no back-to-back bench when no_consecutive_bench is on
    - bench spread of at most one under no_double_before_all
    - infield guarantee met or reported
    - identical inputs give identical output
"""

import pytest

from benchcoach.models.errors import InsufficientPlayersError, LineupInputError
from benchcoach.models.generator import LineupGenerator
from benchcoach.models.lineup import FairPlaySettings, Lineup, LineupMode, Player, make_lineup_id
from benchcoach.models.positions import FIELD_POSITIONS, Position
from benchcoach.models.repair import count_infield_innings


def _generate(players, innings=6, **kwargs):
    return LineupGenerator("g1", "t1", innings, players, **kwargs).generate()


def _ids(players):
    return [p.player_id for p in players]


def _assert_fully_staffed(lineup):
    for inning in lineup.innings:
        occupants = [inning.assignments.get(pos) for pos in FIELD_POSITIONS]
        assert None not in occupants, f"Inning {inning.number} has an open position"
        assert len(set(occupants)) == 9, f"Inning {inning.number} repeats a player"


class TestValidation:
    """Hard input failures."""

    def test_fewer_than_nine_players(self, make_players):
        with pytest.raises(InsufficientPlayersError) as exc_info:
            LineupGenerator("g1", "t1", 6, make_players(8))
        assert exc_info.value.available == 8
        assert exc_info.value.required == 9

    def test_inactive_players_do_not_count(self, make_players):
        players = make_players(8) + [Player("bench_only", active=False), Player("also_out", active=False)]
        with pytest.raises(InsufficientPlayersError):
            LineupGenerator("g1", "t1", 6, players)

    def test_inactive_player_never_appears(self, nine_players):
        players = nine_players + [Player("injured", primary_positions=["P"], active=False)]
        lineup = _generate(players, fair_play=FairPlaySettings.all_enabled())
        for inning in lineup.innings:
            assert "injured" not in inning.field_player_ids()
        assert "injured" not in lineup.diagnostics.bench_counts

    @pytest.mark.parametrize("innings", [0, -1, 13])
    def test_inning_count_out_of_range(self, nine_players, innings):
        with pytest.raises(LineupInputError, match="Inning count"):
            LineupGenerator("g1", "t1", innings, nine_players)

    def test_duplicate_ids(self, nine_players):
        with pytest.raises(LineupInputError, match="Duplicate"):
            LineupGenerator("g1", "t1", 6, nine_players + [Player("p1")])

    def test_roster_too_large(self, make_players):
        with pytest.raises(LineupInputError, match="exceeds"):
            LineupGenerator("g1", "t1", 6, make_players(31))

    def test_unknown_strategy(self, nine_players):
        with pytest.raises(LineupInputError, match="strategy"):
            LineupGenerator("g1", "t1", 6, nine_players, assignment_strategy="random")

    def test_insufficient_players_is_an_input_error(self):
        assert issubclass(InsufficientPlayersError, LineupInputError)
        assert issubclass(LineupInputError, ValueError)


class TestFairPlayOff:
    """Settings absent: inning 1 repeated."""

    def test_nine_players_clone_first_inning(self, nine_players):
        lineup = _generate(nine_players, fair_play=None)
        assert lineup.inning_count == 6
        first = lineup.innings[0].assignments
        for number, inning in enumerate(lineup.innings, 1):
            assert inning.number == number
            assert inning.assignments == first

    def test_clone_with_extra_players_repeats_bench(self, twelve_players):
        lineup = _generate(twelve_players, fair_play=None)
        benched = [inning.benched(_ids(twelve_players)) for inning in lineup.innings]
        assert all(b == benched[0] for b in benched)
        assert lineup.diagnostics.bench_spread == 6

    def test_template_seeds_clone(self, ten_players, make_inning):
        template = Lineup("tpl", "g0", "t1", LineupMode.STANDARD, [make_inning(1, _ids(ten_players)[1:])])
        lineup = _generate(ten_players, fair_play=None, template=template)
        assert all(inning.player_at(Position.PITCHER) == "p2" for inning in lineup.innings)


class TestFairPlayProperties:
    """Invariants across rosters and modes."""

    @pytest.mark.parametrize("size", [9, 10, 11, 12, 14])
    @pytest.mark.parametrize("mode", list(LineupMode))
    @pytest.mark.parametrize("strategy", ["greedy", "lp"])
    def test_fully_staffed_and_no_consecutive_bench(self, make_players, size, mode, strategy):
        players = make_players(size)
        lineup = _generate(
            players,
            fair_play=FairPlaySettings.all_enabled(),
            mode=mode,
            assignment_strategy=strategy,
        )
        _assert_fully_staffed(lineup)

        roster = _ids(players)
        for prev, cur in zip(lineup.innings, lineup.innings[1:]):
            assert not set(prev.benched(roster)) & set(cur.benched(roster))

    @pytest.mark.parametrize("size", [10, 12])
    def test_bench_spread_within_one(self, make_players, size):
        lineup = _generate(make_players(size), fair_play=FairPlaySettings.all_enabled())
        assert lineup.diagnostics.bench_spread <= 1
        assert not lineup.diagnostics.unsatisfiable_fairness

    def test_bench_counts_match_lineup(self, twelve_players):
        lineup = _generate(twelve_players, fair_play=FairPlaySettings.all_enabled())
        roster = _ids(twelve_players)
        for pid in roster:
            expected = sum(1 for inning in lineup.innings if pid in inning.benched(roster))
            assert lineup.diagnostics.bench_counts[pid] == expected

    def test_idempotent(self, twelve_players):
        kwargs = dict(fair_play=FairPlaySettings.all_enabled(), mode=LineupMode.COMPETITIVE)
        first = _generate(twelve_players, **kwargs)
        second = _generate(twelve_players, **kwargs)
        assert first.to_dict() == second.to_dict()
        assert first.lineup_id == make_lineup_id("t1", "g1")


class TestScenarios:
    """Concrete game setups."""

    def test_ten_players_no_consecutive_bench_only(self, ten_players):
        lineup = _generate(ten_players, fair_play=FairPlaySettings(no_consecutive_bench=True))
        roster = _ids(ten_players)
        _assert_fully_staffed(lineup)
        benched = [inning.benched(roster) for inning in lineup.innings]
        assert all(len(b) == 1 for b in benched)
        for prev, cur in zip(benched, benched[1:]):
            assert prev != cur

    def test_twelve_players_outfield_only_player_gets_infield(self, make_players):
        players = make_players(11) + [
            Player("of", jersey_number=12, primary_positions=["LF"], secondary_positions=["RF"])
        ]
        lineup = _generate(players, fair_play=FairPlaySettings(no_consecutive_bench=True, at_least_one_infield=True))

        counts = count_infield_innings(lineup.innings, _ids(players))
        assert counts["of"] >= 1
        assert lineup.diagnostics.infield_shortfall == []

    def test_all_rules_every_player_plays_infield(self, twelve_players):
        lineup = _generate(twelve_players, fair_play=FairPlaySettings.all_enabled())
        counts = count_infield_innings(lineup.innings, _ids(twelve_players))
        assert min(counts.values()) >= 1

    def test_previously_benched_start_on_field(self, ten_players, make_inning):
        template = Lineup("tpl", "g0", "t1", LineupMode.STANDARD, [make_inning(1, _ids(ten_players)[:9])])
        lineup = _generate(
            ten_players,
            fair_play=FairPlaySettings(no_consecutive_game_bench=True),
            template=template,
            previously_benched=["p10"],
        )
        assert "p10" in lineup.innings[0].field_player_ids()
        assert len(lineup.diagnostics.first_inning_swaps) == 1

    def test_dh_repeated_every_inning(self, ten_players, make_inning):
        first = make_inning(1, _ids(ten_players)[:9])
        first.assignments[Position.DESIGNATED_HITTER] = "p10"
        template = Lineup("tpl", "g0", "t1", LineupMode.STANDARD, [first])
        lineup = _generate(ten_players, fair_play=FairPlaySettings.all_enabled(), template=template)
        assert all(inning.player_at(Position.DESIGNATED_HITTER) == "p10" for inning in lineup.innings)

    def test_position_history_accepts_codes(self, twelve_players):
        history = {"p1": ["P", "P", "1B"], "p7": ["LF"]}
        lineup = _generate(
            twelve_players,
            fair_play=FairPlaySettings.all_enabled(),
            mode=LineupMode.DEVELOPMENTAL,
            position_history=history,
        )
        _assert_fully_staffed(lineup)

    def test_single_inning_game(self, ten_players):
        lineup = _generate(ten_players, innings=1, fair_play=FairPlaySettings.all_enabled())
        assert lineup.inning_count == 1
        _assert_fully_staffed(lineup)
