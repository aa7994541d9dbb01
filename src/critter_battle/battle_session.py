"""
Headless battle session

Drives a BattleManager through the BattleStateMachine one player action at a
time, the way a presentation layer would, with every animation wait collapsed
into a synchronous call.
"""

import logging
from typing import Optional

from critter_battle.constants import (
    MSG_CANT_CAPTURE_FAINTED,
    MSG_CANT_CAPTURE_TRAINER,
    MSG_CANT_FLEE_TRAINER,
    MSG_CANT_SWITCH,
    MSG_ITEM_NO_EFFECT,
    MSG_MISSED,
    MSG_NO_EFFECT,
    MSG_NO_MOVE_IN_SLOT,
    MSG_NO_PP,
)
from critter_battle.battle_manager import BattleManager
from critter_battle.battle_state_machine import BattleStateMachine
from critter_battle.enums import AITier, BattleEvent, BattlePhase, ItemKind, TurnOrder
from critter_battle.schema.battle_action import BattleAction
from critter_battle.schema.results import AIDecision, TurnReport
from critter_battle.type_effectiveness import TypeEffectiveness

logger = logging.getLogger(__name__)


class BattleSession:
    """
    One battle from intro to finished

    Construction runs intro -> preBattleInfo -> bringOutCritter -> playerInput.
    Each submit() resolves a full turn and leaves the session back in
    playerInput, or in finished once the battle is decided, caught or fled.
    """

    def __init__(self, manager: BattleManager, opponent_tier: Optional[AITier] = None):
        self.manager = manager
        self.battle = manager.battle
        self.events = manager.events
        if opponent_tier is None:
            opponent_tier = AITier.WILD if self.battle.isWildEncounter else AITier.TRAINER
        self.opponent_tier = opponent_tier
        self.machine = BattleStateMachine(self.events)
        self._start()

    @property
    def phase(self) -> BattlePhase:
        return self.machine.current_phase

    @property
    def is_finished(self) -> bool:
        return self.machine.is_in_phase(BattlePhase.FINISHED)

    def _go(self, phase: BattlePhase) -> None:
        self.machine.transition_to(phase, strict=True)

    def _start(self) -> None:
        player, opponent = self.battle.player, self.battle.opponent
        self._go(BattlePhase.PRE_BATTLE_INFO)
        self.events.emit(
            BattleEvent.STARTED,
            {"battleId": self.battle.id, "playerId": player.id, "opponentId": opponent.id, "isWild": self.battle.isWildEncounter},
        )
        if self.battle.isWildEncounter:
            self.manager.add_log(f"A wild {self.manager.species_name(opponent.active_critter)} appeared!")
        else:
            self.manager.add_log(f"{opponent.name} wants to battle!")
        self._go(BattlePhase.BRING_OUT_CRITTER)
        self.manager.add_log(f"Go, {self.manager.species_name(player.active_critter)}!")
        self._go(BattlePhase.PLAYER_INPUT)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def submit(self, action: BattleAction) -> TurnReport:
        """Resolve one player action and everything it sets off this turn"""
        if self.machine.is_transitioning or not self.machine.is_in_phase(BattlePhase.PLAYER_INPUT) or self.manager.is_over:
            logger.warning("Rejected %s: session is in phase %s", action.action_type.name, self.phase.value)
            return self._report(False, len(self.battle.log))

        log_start = len(self.battle.log)
        if action.action_type == BattleAction.ActionType.MOVE:
            accepted, reason = self._player_move(action)
        elif action.action_type == BattleAction.ActionType.SWITCH:
            accepted, reason = self._player_switch(action)
        elif action.action_type == BattleAction.ActionType.ITEM:
            accepted, reason = self._player_item(action)
        else:
            accepted, reason = self._player_flee()

        report = self._report(accepted, log_start)
        if reason:
            report.messages.append(reason)
        return report

    def _report(self, accepted: bool, log_start: int) -> TurnReport:
        return TurnReport(
            accepted=accepted,
            turn=self.battle.turnCount,
            messages=self.battle.log[log_start:],
            phase=self.phase,
            battleStatus=self.battle.battleStatus,
            endReason=self.battle.endReason,
        )

    def _player_move(self, action: BattleAction) -> tuple[bool, str]:
        critter = self.battle.player.active_critter
        slot = action.move_slot if action.move_slot is not None else 0
        if slot >= len(critter.moves):
            return False, MSG_NO_MOVE_IN_SLOT
        move_id = critter.moves[slot].moveId
        if critter.moves[slot].currentPP <= 0:
            return False, MSG_NO_PP

        self._go(BattlePhase.ENEMY_INPUT)
        decision = self._opponent_decision()
        self._go(BattlePhase.BATTLE)
        if decision.action == AIDecision.Action.SWITCH:
            self.manager.switch_critter(self.battle.opponent.id, decision.switchCritterIndex)
            self._execute_move(self.battle.player.id, move_id)
        else:
            self._run_exchange(move_id, decision.moveId)
        self._post_attack_check()
        return True, ""

    def _player_switch(self, action: BattleAction) -> tuple[bool, str]:
        player = self.battle.player
        slot = action.party_slot
        if slot is None or slot >= len(player.party) or slot == player.currentCritterIndex or player.party[slot].isFainted:
            return False, MSG_CANT_SWITCH
        self._go(BattlePhase.SWITCH_CRITTER)
        self.manager.switch_critter(player.id, slot)
        self._opponent_turn()
        return True, ""

    def _player_item(self, action: BattleAction) -> tuple[bool, str]:
        item = self.manager.game_data.items.get(action.item_id or "")
        if item is None:
            return False, MSG_ITEM_NO_EFFECT

        if item.kind == ItemKind.CAPTURE_ORB:
            opponent_critter = self.battle.opponent.active_critter
            if not self.battle.isWildEncounter:
                return False, MSG_CANT_CAPTURE_TRAINER
            if opponent_critter.isFainted:
                return False, MSG_CANT_CAPTURE_FAINTED
            self._go(BattlePhase.CAPTURE_ITEM_USED)
            shakes = self.manager.simulate_catch_animation()
            self.manager.add_log(f"The {item.name} shook {shakes} time(s)...")
            if self.manager.use_item(self.battle.player.id, item.id):
                self._go(BattlePhase.CAUGHT_CRITTER)
                self._finish()
            else:
                self._opponent_turn()
            return True, ""

        if not self.manager.use_item(self.battle.player.id, item.id):
            return False, MSG_ITEM_NO_EFFECT
        self._go(BattlePhase.USED_ITEM)
        self._opponent_turn()
        return True, ""

    def _player_flee(self) -> tuple[bool, str]:
        if not self.battle.isWildEncounter:
            return False, MSG_CANT_FLEE_TRAINER
        self._go(BattlePhase.FLEEING)
        player_critter = self.battle.player.active_critter
        opponent_critter = self.battle.opponent.active_critter
        if self.manager.attempt_flee(player_critter.currentStats.speed, opponent_critter.currentStats.speed):
            self._finish()
        else:
            self._opponent_turn()
        return True, ""

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------

    def _opponent_decision(self) -> AIDecision:
        opponent = self.battle.opponent
        return self.manager.ai.decide(
            self.opponent_tier,
            opponent.active_critter,
            self.battle.player.active_critter,
            opponent.party,
            self.battle,
        )

    def _opponent_turn(self) -> None:
        """The opponent acts alone after the player spent the turn on something else"""
        self._go(BattlePhase.ENEMY_INPUT)
        decision = self._opponent_decision()
        self._go(BattlePhase.BATTLE)
        if decision.action == AIDecision.Action.SWITCH:
            self.manager.switch_critter(self.battle.opponent.id, decision.switchCritterIndex)
        else:
            self._execute_move(self.battle.opponent.id, decision.moveId)
        self._post_attack_check()

    def _run_exchange(self, player_move_id: str, opponent_move_id: Optional[str]) -> None:
        player, opponent = self.battle.player, self.battle.opponent
        player_priority = self._priority(player_move_id)
        opponent_priority = self._priority(opponent_move_id)
        order = self.manager.determine_turn_order(player.active_critter, opponent.active_critter, player_priority, opponent_priority)
        actions = [(player.id, player_move_id), (opponent.id, opponent_move_id)]
        if order == TurnOrder.OPPONENT:
            actions.reverse()
        for participant_id, move_id in actions:
            self._execute_move(participant_id, move_id)
            if self.manager.check_battle_status().is_terminal():
                break

    def _priority(self, move_id: Optional[str]) -> int:
        move = self.manager.game_data.moves.get(move_id) if move_id else None
        return move.priority if move is not None else 0

    def _execute_move(self, attacker_id: str, move_id: Optional[str]) -> None:
        manager = self.manager
        attacker = manager.get_active_critter(attacker_id)
        defender_side = manager.get_opponent_of(attacker_id)
        if attacker is None or defender_side is None or attacker.isFainted:
            return
        defender = defender_side.active_critter
        name = manager.species_name(attacker)

        move = manager.game_data.moves.get(move_id) if move_id else None
        if move is None:
            manager.add_log(f"{name} has no move it can use!")
            return
        if not manager.use_move(attacker_id, move.id):
            manager.add_log(f"{name} tried {move.name}. {MSG_NO_PP}")
            return
        manager.add_log(f"{name} used {move.name}!")

        if not manager.does_move_hit(move.accuracy):
            manager.add_log(MSG_MISSED)
            self.events.emit(BattleEvent.MISSED, {"participantId": attacker_id, "moveId": move.id})
            return

        if move.is_status:
            manager.apply_secondary_effect(move.id, defender_side.id)
            return

        result = manager.resolve_move_action(attacker_id, move.id, defender.currentStats, defender.types)
        if result.effectiveness == 0:
            manager.add_log(MSG_NO_EFFECT)
            return
        manager.damage_active_critter(defender_side.id, result.damage)
        description = TypeEffectiveness.get_effectiveness_description(move.type, defender.types)
        if description:
            manager.add_log(description)
        if not defender.isFainted:
            manager.apply_secondary_effect(move.id, defender_side.id)

    def _post_attack_check(self) -> None:
        self._go(BattlePhase.POST_ATTACK_CHECK)
        manager = self.manager
        player, opponent = self.battle.player, self.battle.opponent
        player_fainted = player.active_critter.isFainted
        opponent_fainted = opponent.active_critter.isFainted
        status = manager.check_battle_status()

        if opponent_fainted and not player_fainted:
            self._go(BattlePhase.GAIN_EXPERIENCE)
            manager.distribute_experience(player.id, opponent.active_critter)
            if status.is_terminal():
                self._finish()
                return
            self._send_out_next(opponent.id)
            self._go(BattlePhase.BRING_OUT_CRITTER)
        elif status.is_terminal():
            self._finish()
            return
        elif player_fainted or opponent_fainted:
            self._go(BattlePhase.SWITCH_CRITTER)
            if player_fainted:
                self._send_out_next(player.id)
            if opponent_fainted:
                self._send_out_next(opponent.id)

        manager.next_turn()
        self._go(BattlePhase.PLAYER_INPUT)

    def _send_out_next(self, participant_id: str) -> None:
        index = self.manager.find_next_active_critter(participant_id)
        if index is not None:
            self.manager.switch_critter(participant_id, index)

    def _finish(self) -> None:
        self._go(BattlePhase.FINISHED)
        self.manager.restore_pp_after_battle()
        self.manager.end_battle()
