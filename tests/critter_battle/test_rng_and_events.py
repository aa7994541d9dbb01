import pytest

from critter_battle.enums import BattleEvent
from critter_battle.events import EventBus
from critter_battle.utils.rng import RngState, advance, choice_index, rand16, randint, random_float, uniform


def test_lcg_sequence_is_deterministic():
    state = RngState(rng_seed=0)
    assert advance(state) == 1013904223
    assert rand16(RngState(rng_seed=0)) == 15470


def test_draw_ranges():
    state = RngState(rng_seed=77)
    for _ in range(200):
        assert 0.0 <= random_float(state) < 1.0
        assert 0.85 <= uniform(state, 0.85, 1.0) < 1.0
        assert -5 <= randint(state, -5, 5) <= 5
        assert 0 <= choice_index(state, 3) < 3


def test_bad_ranges():
    state = RngState(rng_seed=1)
    assert choice_index(state, 0) == -1
    with pytest.raises(ValueError):
        randint(state, 3, 1)


def test_event_bus_routes_by_name_and_keeps_history():
    bus = EventBus()
    received = []
    bus.on(BattleEvent.FAINTED, received.append)
    bus.emit("battle:fainted", {"critterId": "a"})
    bus.emit(BattleEvent.VICTORY)
    assert received == [{"critterId": "a"}]
    assert bus.names() == ["battle:fainted", "battle:victory"]
    assert bus.payloads(BattleEvent.VICTORY) == [{}]

    bus.off(BattleEvent.FAINTED, received.append)
    bus.emit(BattleEvent.FAINTED, {"critterId": "b"})
    assert len(received) == 1

    bus.clear_history()
    assert bus.history == []


def test_history_can_be_disabled():
    bus = EventBus(keep_history=False)
    bus.emit(BattleEvent.STARTED)
    assert bus.history == []
