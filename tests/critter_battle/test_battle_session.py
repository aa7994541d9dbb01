from critter_battle.battle_manager import BattleManager
from critter_battle.battle_session import BattleSession
from critter_battle.constants import (
    MSG_CANT_CAPTURE_FAINTED,
    MSG_CANT_CAPTURE_TRAINER,
    MSG_CANT_FLEE_TRAINER,
    MSG_CANT_SWITCH,
    MSG_ITEM_NO_EFFECT,
    MSG_NO_MOVE_IN_SLOT,
    MSG_NO_PP,
)
from critter_battle.enums import BattleEndReason, BattleEvent, BattlePhase, BattleStatus
from critter_battle.registry import GameData
from critter_battle.schema.battle_action import BattleAction
from critter_battle.utils.mon_factory import create_critter, create_trainer_party

DATA = GameData.create()


def make_session(player, opponent, wild: bool = True, seed: int = 11) -> BattleSession:
    """player/opponent are lists of (species, level) pairs"""
    player_party = [create_critter(s, lvl, DATA, seed=seed + i) for i, (s, lvl) in enumerate(player)]
    opponent_party = [create_critter(s, lvl, DATA, seed=seed + 50 + i) for i, (s, lvl) in enumerate(opponent)]
    battle = BattleManager.create_battle("player", "Red", player_party, "opponent", "Foe", opponent_party, is_wild_encounter=wild, seed=seed)
    return BattleSession(BattleManager(battle, DATA))


def test_session_opens_at_player_input():
    session = make_session([("embolt", 5)], [("thornwick", 5)])
    assert session.phase == BattlePhase.PLAYER_INPUT
    assert session.battle.log == ["Turn 0: A wild Thornwick appeared!", "Turn 0: Go, Embolt!"]
    assert len(session.events.payloads(BattleEvent.STARTED)) == 1


def test_knockout_finishes_wild_battle():
    session = make_session([("embolt", 50)], [("thornwick", 2)])
    player = session.battle.player.active_critter
    report = session.submit(BattleAction.move(0))

    assert report.accepted
    assert report.phase == BattlePhase.FINISHED
    assert report.battleStatus == BattleStatus.PLAYER_WON
    assert report.endReason == BattleEndReason.KNOCKOUT
    assert any(m.endswith("Embolt used Scratch!") for m in report.messages)
    assert any(m.endswith("It's super effective!") for m in report.messages)
    assert session.is_finished
    assert len(session.events.payloads(BattleEvent.EXPERIENCE_GAINED)) == 1
    assert player.experience > 125000
    # PP is restored once the battle is over
    assert player.moves[0].currentPP == player.moves[0].maxPP


def test_actions_after_finish_are_rejected():
    session = make_session([("embolt", 50)], [("thornwick", 2)])
    session.submit(BattleAction.move(0))
    turn = session.battle.turnCount
    report = session.submit(BattleAction.move(0))
    assert not report.accepted
    assert report.phase == BattlePhase.FINISHED
    assert session.battle.turnCount == turn


def test_trainer_battle_sends_out_next_critter():
    player = [create_critter("embolt", 60, DATA, seed=1)]
    opponent = create_trainer_party("camper-rowan", DATA, seed=2)
    for critter in opponent:
        critter.currentHP = 1
    battle = BattleManager.create_battle("player", "Red", player, "camper-rowan", "Rowan", opponent, seed=3)
    session = BattleSession(BattleManager(battle, DATA))

    first = session.submit(BattleAction.move(0))
    assert first.accepted
    assert first.phase == BattlePhase.PLAYER_INPUT
    assert first.battleStatus == BattleStatus.ACTIVE
    assert session.battle.opponent.currentCritterIndex == 1
    assert session.battle.turnCount == 1

    second = session.submit(BattleAction.move(0))
    assert second.phase == BattlePhase.FINISHED
    assert second.battleStatus == BattleStatus.PLAYER_WON
    assert len(session.events.payloads(BattleEvent.EXPERIENCE_GAINED)) == 2


def test_fainted_player_critter_is_replaced():
    session = make_session([("embolt", 5), ("aqualis", 5)], [("infernus", 50)])
    session.battle.player.active_critter.currentHP = 1

    report = session.submit(BattleAction.move(0))
    assert report.accepted
    assert report.phase == BattlePhase.PLAYER_INPUT
    assert report.battleStatus == BattleStatus.ACTIVE
    assert session.battle.player.party[0].isFainted
    assert session.battle.player.currentCritterIndex == 1
    # the fainted critter never got to act
    assert session.battle.player.party[0].moves[0].currentPP == 35


def test_losing_last_critter_finishes_battle():
    session = make_session([("embolt", 5)], [("infernus", 50)])
    session.battle.player.active_critter.currentHP = 1
    report = session.submit(BattleAction.move(0))
    assert report.phase == BattlePhase.FINISHED
    assert report.battleStatus == BattleStatus.OPPONENT_WON


def test_flee_is_refused_in_trainer_battle():
    session = make_session([("embolt", 5)], [("thornwick", 5)], wild=False)
    log_length = len(session.battle.log)
    report = session.submit(BattleAction.flee())
    assert not report.accepted
    assert report.messages == [MSG_CANT_FLEE_TRAINER]
    assert session.phase == BattlePhase.PLAYER_INPUT
    assert len(session.battle.log) == log_length


def test_flee_from_wild_battle_eventually_succeeds():
    outcomes = []
    for seed in range(20):
        session = make_session([("embolt", 50)], [("sparkit", 2)], seed=seed)
        report = session.submit(BattleAction.flee())
        assert report.accepted
        outcomes.append(report.endReason)
        if report.endReason == BattleEndReason.FLED:
            assert report.phase == BattlePhase.FINISHED
            assert report.battleStatus == BattleStatus.ACTIVE
        else:
            assert report.phase == BattlePhase.PLAYER_INPUT
    assert BattleEndReason.FLED in outcomes


def test_capture_orb_catches_weakened_wild_critter():
    session = make_session([("embolt", 5)], [("thornwick", 5)])
    session.battle.opponent.active_critter.currentHP = 1
    report = session.submit(BattleAction.item("master-ball"))
    assert report.accepted
    assert report.phase == BattlePhase.FINISHED
    assert report.endReason == BattleEndReason.CAUGHT
    assert report.battleStatus == BattleStatus.ACTIVE
    assert len(session.events.payloads(BattleEvent.CAPTURED)) == 1


def test_capture_orb_refused_in_trainer_battle():
    session = make_session([("embolt", 5)], [("thornwick", 5)], wild=False)
    report = session.submit(BattleAction.item("pokeball"))
    assert not report.accepted
    assert report.messages == [MSG_CANT_CAPTURE_TRAINER]
    assert session.phase == BattlePhase.PLAYER_INPUT


def test_capture_orb_refused_on_fainted_target():
    session = make_session([("embolt", 5)], [("thornwick", 5)])
    target = session.battle.opponent.active_critter
    target.currentHP = 0
    target.isFainted = True
    report = session.submit(BattleAction.item("master-ball"))
    assert not report.accepted
    assert report.messages == [MSG_CANT_CAPTURE_FAINTED]
    assert report.endReason == BattleEndReason.NONE


def test_potion_use_passes_the_turn():
    session = make_session([("embolt", 50)], [("thornwick", 2)])
    full_hp = session.submit(BattleAction.item("potion"))
    assert not full_hp.accepted
    assert full_hp.messages == [MSG_ITEM_NO_EFFECT]
    assert session.submit(BattleAction.item("no-such-item")).messages == [MSG_ITEM_NO_EFFECT]

    critter = session.battle.player.active_critter
    critter.take_damage(30)
    report = session.submit(BattleAction.item("potion"))
    assert report.accepted
    assert report.phase == BattlePhase.PLAYER_INPUT
    assert session.battle.turnCount == 1
    assert any("recovered 20 HP" in m for m in report.messages)


def test_switch_action():
    session = make_session([("embolt", 50), ("aqualis", 50)], [("thornwick", 2)])
    current = session.submit(BattleAction.switch(0))
    assert not current.accepted
    assert current.messages == [MSG_CANT_SWITCH]
    assert session.submit(BattleAction.switch(3)).messages == [MSG_CANT_SWITCH]

    report = session.submit(BattleAction.switch(1))
    assert report.accepted
    assert session.battle.player.currentCritterIndex == 1
    assert session.battle.turnCount == 1
    assert session.phase == BattlePhase.PLAYER_INPUT


def test_move_without_pp_is_rejected():
    session = make_session([("embolt", 5)], [("thornwick", 5)])
    session.battle.player.active_critter.moves[0].currentPP = 0
    report = session.submit(BattleAction.move(0))
    assert not report.accepted
    assert report.messages == [MSG_NO_PP]
    empty_slot = session.submit(BattleAction.move(3))
    assert not empty_slot.accepted
    assert empty_slot.messages == [MSG_NO_MOVE_IN_SLOT]
    assert session.battle.turnCount == 0


def test_submit_during_transition_is_rejected():
    session = make_session([("embolt", 50)], [("thornwick", 50)])
    nested = []
    session.machine.register_handler(BattlePhase.ENEMY_INPUT, lambda: nested.append(session.submit(BattleAction.move(0))))
    report = session.submit(BattleAction.move(0))
    assert report.accepted
    assert len(nested) == 1
    assert not nested[0].accepted
