import pytest

from critter_battle.battle_state_machine import PHASE_GRAPH, BattleStateMachine
from critter_battle.enums import BattleEvent, BattlePhase
from critter_battle.errors import InvalidTransitionError
from critter_battle.events import EventBus


def walk(machine: BattleStateMachine, *phases: BattlePhase) -> None:
    for phase in phases:
        assert machine.transition_to(phase, strict=True)


def test_starts_in_intro_and_walks_the_opening():
    machine = BattleStateMachine()
    assert machine.current_phase == BattlePhase.INTRO
    walk(machine, BattlePhase.PRE_BATTLE_INFO, BattlePhase.BRING_OUT_CRITTER, BattlePhase.PLAYER_INPUT)
    assert machine.is_in_phase(BattlePhase.PLAYER_INPUT)


def test_transition_emits_exit_phase_and_enter_events():
    events = EventBus()
    machine = BattleStateMachine(events)
    machine.transition_to(BattlePhase.PRE_BATTLE_INFO)
    assert events.names() == ["battle:state:exiting", "battle:state:preBattleInfo", "battle:state:entered"]
    assert events.payloads(BattleEvent.STATE_EXITING) == [{"from": "intro"}]
    assert events.payloads(BattleEvent.STATE_ENTERED) == [{"state": "preBattleInfo"}]


def test_same_phase_is_dropped():
    machine = BattleStateMachine()
    assert not machine.transition_to(BattlePhase.INTRO)


def test_illegal_edge_rejected_or_raised():
    machine = BattleStateMachine()
    assert not machine.transition_to(BattlePhase.BATTLE)
    assert machine.current_phase == BattlePhase.INTRO
    with pytest.raises(InvalidTransitionError):
        machine.transition_to(BattlePhase.BATTLE, strict=True)


def test_reentrant_transition_is_dropped():
    machine = BattleStateMachine()
    nested = []
    machine.register_handler(BattlePhase.PRE_BATTLE_INFO, lambda: nested.append(machine.transition_to(BattlePhase.BRING_OUT_CRITTER)))
    assert machine.transition_to(BattlePhase.PRE_BATTLE_INFO)
    assert nested == [False]
    assert machine.current_phase == BattlePhase.PRE_BATTLE_INFO
    assert not machine.is_transitioning


def test_in_flight_flag_cleared_when_handler_raises():
    machine = BattleStateMachine()

    def explode():
        raise RuntimeError("boom")

    machine.register_handler(BattlePhase.PRE_BATTLE_INFO, explode)
    with pytest.raises(RuntimeError):
        machine.transition_to(BattlePhase.PRE_BATTLE_INFO)
    assert not machine.is_transitioning
    assert machine.current_phase == BattlePhase.INTRO


def test_finished_is_terminal():
    machine = BattleStateMachine()
    walk(
        machine,
        BattlePhase.PRE_BATTLE_INFO,
        BattlePhase.BRING_OUT_CRITTER,
        BattlePhase.PLAYER_INPUT,
        BattlePhase.FLEEING,
        BattlePhase.FINISHED,
    )
    for phase in BattlePhase:
        assert not machine.transition_to(phase)
    assert machine.current_phase == BattlePhase.FINISHED


def test_reset_returns_to_intro():
    machine = BattleStateMachine()
    walk(machine, BattlePhase.PRE_BATTLE_INFO)
    machine.reset()
    assert machine.current_phase == BattlePhase.INTRO


def test_every_phase_has_graph_entry():
    assert set(PHASE_GRAPH) == set(BattlePhase)
    assert PHASE_GRAPH[BattlePhase.FINISHED] == frozenset()
