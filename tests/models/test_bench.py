"""Tests for per-inning bench selection."""

from benchcoach.models.bench import BenchSelector
from benchcoach.models.fairness import FairnessState
from benchcoach.models.lineup import FairPlaySettings, LineupMode

FIRST_NINE = [f"p{i}" for i in range(1, 10)]


def _state_after_first(players, make_inning, mode=LineupMode.STANDARD):
    state = FairnessState.start(players, mode)
    state.record_inning(make_inning(1, FIRST_NINE))
    return state


class TestForcedToPlay:
    """no_consecutive_bench."""

    def test_benched_last_inning_must_play(self, ten_players, make_inning):
        state = _state_after_first(ten_players, make_inning)
        selector = BenchSelector(FairPlaySettings(no_consecutive_bench=True), LineupMode.STANDARD, 6)
        decision = selector.select(FIRST_NINE, state, 2)

        assert decision.forced_to_play == ["p10"]
        assert "p10" in decision.on_field
        assert decision.benched == ["p1"]
        assert len(decision.on_field) == 9
        assert not decision.overflow

    def test_overflow_keeps_nine_owed_players(self, make_players, make_inning):
        players = make_players(19)
        state = _state_after_first(players, make_inning)
        selector = BenchSelector(FairPlaySettings(no_consecutive_bench=True), LineupMode.STANDARD, 6)
        decision = selector.select(FIRST_NINE, state, 2)

        assert decision.overflow
        assert len(decision.forced_to_play) == 9
        assert sorted(decision.on_field) == sorted(decision.forced_to_play)
        assert len(decision.benched) == 10


class TestEarnedBenchTurns:
    """no_double_before_all."""

    def test_field_players_at_minimum_sit_first(self, ten_players, make_inning):
        state = _state_after_first(ten_players, make_inning)
        selector = BenchSelector(FairPlaySettings(no_double_before_all=True), LineupMode.STANDARD, 6)
        decision = selector.select(FIRST_NINE, state, 2)

        # p10 already sat once; p1 is the first fielded player still at zero
        assert decision.benched == ["p1"]
        assert "p10" in decision.on_field

    def test_full_rotation_still_earns_turns(self, twelve_players, make_inning):
        """Once everyone has sat once, field players are owed the next turns."""
        selector = BenchSelector(FairPlaySettings(no_double_before_all=True), LineupMode.COMPETITIVE, 12)
        state = FairnessState.start(twelve_players, LineupMode.COMPETITIVE)
        roster = state.roster
        bench_order = [["p10", "p11", "p12"], ["p1", "p2", "p3"], ["p4", "p5", "p6"], ["p7", "p8", "p9"]]
        for number, sitting in enumerate(bench_order, 1):
            state.record_inning(make_inning(number, [pid for pid in roster if pid not in sitting]))
        assert state.bench_spread() == 0

        previous_field = [pid for pid in roster if pid not in bench_order[-1]]
        decision = selector.select(previous_field, state, 5)

        assert decision.benched == ["p1", "p2", "p3"]

    def test_spread_stays_within_one(self, twelve_players, make_inning):
        """Rotating twelve players over six innings never lets a gap of two open."""
        settings = FairPlaySettings(no_consecutive_bench=True, no_double_before_all=True)
        selector = BenchSelector(settings, LineupMode.STANDARD, 6)
        state = _state_after_first(twelve_players, make_inning)
        on_field = FIRST_NINE
        for number in range(2, 7):
            decision = selector.select(on_field, state, number)
            assert len(decision.benched) == 3
            state.record_inning(make_inning(number, decision.on_field))
            assert state.bench_spread() <= 1
            on_field = decision.on_field


class TestPriorityPick:
    """Ordering when no rule decides."""

    def test_roster_order_by_default(self, ten_players):
        state = FairnessState.start(ten_players, LineupMode.STANDARD)
        selector = BenchSelector(FairPlaySettings(), LineupMode.STANDARD, 6)
        decision = selector.select(FIRST_NINE, state, 2)
        assert decision.benched == ["p1"]

    def test_competitive_benches_late_roster_early_in_game(self, ten_players):
        state = FairnessState.start(ten_players, LineupMode.COMPETITIVE)
        selector = BenchSelector(FairPlaySettings(), LineupMode.COMPETITIVE, 6)
        assert selector.select(FIRST_NINE, state, 2).benched == ["p10"]

    def test_competitive_bias_ends_at_half_game(self, ten_players):
        state = FairnessState.start(ten_players, LineupMode.COMPETITIVE)
        selector = BenchSelector(FairPlaySettings(), LineupMode.COMPETITIVE, 6)
        assert selector.select(FIRST_NINE, state, 3).benched == ["p1"]

    def test_exactly_nine_players_never_bench(self, nine_players):
        state = FairnessState.start(nine_players, LineupMode.STANDARD)
        selector = BenchSelector(FairPlaySettings.all_enabled(), LineupMode.STANDARD, 6)
        decision = selector.select(FIRST_NINE, state, 2)
        assert decision.benched == []
        assert decision.on_field == FIRST_NINE
