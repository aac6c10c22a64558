"""Tests for the per-run fairness counters."""

from benchcoach.models.fairness import FairnessState
from benchcoach.models.lineup import LineupMode
from benchcoach.models.positions import Position


class TestFairnessStateStart:
    """Initial state."""

    def test_fresh_counters(self, ten_players):
        state = FairnessState.start(ten_players, LineupMode.STANDARD)
        assert state.roster == [p.player_id for p in ten_players]
        assert set(state.bench_counts.values()) == {0}
        assert all(state.needs_infield(pid) for pid in state.roster)
        assert state.bench_spread() == 0

    def test_history_seeds_standard_mode(self, ten_players):
        history = {"p1": [Position.SHORTSTOP, Position.SHORTSTOP]}
        state = FairnessState.start(ten_players, LineupMode.DEVELOPMENTAL, history)
        assert state.history_count("p1", Position.SHORTSTOP) == 2
        # Prior games never count toward this game's infield guarantee
        assert state.needs_infield("p1")

    def test_history_ignored_for_competitive(self, ten_players):
        history = {"p1": [Position.SHORTSTOP]}
        state = FairnessState.start(ten_players, LineupMode.COMPETITIVE, history)
        assert state.history_count("p1", Position.SHORTSTOP) == 0


class TestRecordInning:
    """Counter updates after an inning."""

    def test_bench_and_infield_updates(self, ten_players, make_inning):
        state = FairnessState.start(ten_players, LineupMode.STANDARD)
        benched = state.record_inning(make_inning(1, [f"p{i}" for i in range(1, 10)]))

        assert benched == ["p10"]
        assert state.bench_counts["p10"] == 1
        assert state.bench_counts["p1"] == 0
        assert not state.needs_infield("p6")
        assert state.needs_infield("p7")
        assert state.position_history["p7"] == [Position.LEFT_FIELD]
        assert state.min_bench_count() == 0
        assert state.bench_spread() == 1

    def test_dh_does_not_count_as_playing(self, ten_players, make_inning):
        state = FairnessState.start(ten_players, LineupMode.STANDARD)
        inning = make_inning(1, [f"p{i}" for i in range(1, 10)])
        inning.assignments[Position.DESIGNATED_HITTER] = "p10"
        state.record_inning(inning)
        assert state.bench_counts["p10"] == 1
        assert state.position_history["p10"] == []
