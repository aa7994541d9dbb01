"""
Battle manager - owns one Battle aggregate and every rule that mutates it

All in-battle operations report failure through their return value (False,
None or a zero-damage result) and leave the Battle untouched. Operations that
mutate a battle which is already over log a warning and return their failure
value. check_battle_status() is the only code path that decides a winner.
"""

import logging
import time
from typing import Optional

from critter_battle.ai import AIDecisionMaker
from critter_battle.capture import catch_probability, flee_chance, is_caught, shake_count, status_catch_bonus
from critter_battle.constants import (
    ACCURACY_ROLL_MAX,
    DEFAULT_ORB_MODIFIER,
    MSG_BROKE_FREE,
    MSG_CANT_FLEE_TRAINER,
    MSG_FLED,
    MSG_FLEE_FAILED,
)
from critter_battle.damage_calculator import calculate_move_damage
from critter_battle.enums import (
    BattleEndReason,
    BattleEvent,
    BattleStatus,
    ItemEffectKind,
    ItemKind,
    MoveEffectKind,
    StatusEffect,
    TurnOrder,
    Type,
)
from critter_battle.evolution import EvolutionManager
from critter_battle.events import EventBus
from critter_battle.leveling import apply_experience, experience_gained_for
from critter_battle.move_learning import MoveLearningManager
from critter_battle.registry import GameData
from critter_battle.schema.battle_state import Battle, BattleParticipant, PendingEvolution, PendingMoveLearn
from critter_battle.schema.critter import Critter
from critter_battle.schema.results import DamageResult, ExperienceAward
from critter_battle.schema.stats import Stats
from critter_battle.utils.rng import random_float

logger = logging.getLogger(__name__)

# Secondary effects that inflict a status condition on the target
STATUS_EFFECTS: dict[MoveEffectKind, StatusEffect] = {
    MoveEffectKind.BURN: StatusEffect.BURN,
    MoveEffectKind.PARALYZE: StatusEffect.PARALYZE,
    MoveEffectKind.SLEEP: StatusEffect.SLEEP,
    MoveEffectKind.POISON: StatusEffect.POISON,
}


class BattleManager:
    """
    Rules engine for a single battle

    The manager holds the Battle (plain, serializable data), the GameData
    catalogs it resolves ids against, and the EventBus it notifies. Random
    draws advance `battle.rng_seed`; every draw can be pinned by the caller.
    """

    def __init__(self, battle: Battle, game_data: GameData, events: Optional[EventBus] = None):
        self.battle = battle
        self.game_data = game_data
        self.events = events if events is not None else EventBus()
        self.ai = AIDecisionMaker(game_data)
        self.move_learning = MoveLearningManager(game_data, self.events)
        self.evolution = EvolutionManager(game_data, self.events)
        self._outcome_announced = not battle.is_active

    @staticmethod
    def create_battle(
        player_id: str,
        player_name: str,
        player_party: list[Critter],
        opponent_id: str,
        opponent_name: str,
        opponent_party: list[Critter],
        is_wild_encounter: bool = False,
        seed: Optional[int] = None,
    ) -> Battle:
        """Build a fresh Active battle with both sides at party index 0 on turn 0"""
        battle = Battle(
            player=BattleParticipant(id=player_id, name=player_name, party=player_party),
            opponent=BattleParticipant(id=opponent_id, name=opponent_name, party=opponent_party),
            isWildEncounter=is_wild_encounter,
            isTrainerBattle=not is_wild_encounter,
            # Seeded battles replay exactly; unseeded ones start from the clock
            rng_seed=(seed if seed is not None else int(time.time())) % 0xFFFFFFFF,
        )
        logger.info("Battle %s created: %s vs %s (wild=%s)", battle.id, player_name, opponent_name, is_wild_encounter)
        return battle

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_battle(self) -> Battle:
        return self.battle

    def get_participant(self, participant_id: str) -> Optional[BattleParticipant]:
        if self.battle.player.id == participant_id:
            return self.battle.player
        if self.battle.opponent.id == participant_id:
            return self.battle.opponent
        return None

    def get_opponent_of(self, participant_id: str) -> Optional[BattleParticipant]:
        if self.battle.player.id == participant_id:
            return self.battle.opponent
        if self.battle.opponent.id == participant_id:
            return self.battle.player
        return None

    def get_active_critter(self, participant_id: str) -> Optional[Critter]:
        participant = self.get_participant(participant_id)
        if participant is None:
            return None
        return participant.active_critter

    def find_critter(self, critter_id: str) -> Optional[Critter]:
        return self.battle.player.find_critter(critter_id) or self.battle.opponent.find_critter(critter_id)

    def species_name(self, critter: Critter) -> str:
        species = self.game_data.species.get(critter.speciesId)
        return critter.display_name(species.name if species is not None else critter.speciesId)

    @property
    def is_over(self) -> bool:
        """True once a winner is decided or the battle ended by capture, flight or abort"""
        return not self.battle.is_active or self.battle.endReason != BattleEndReason.NONE

    def _guard(self, operation: str) -> bool:
        """True when the battle may still be mutated; logs and refuses otherwise"""
        if self.is_over:
            logger.warning(
                "Rejected %s on finished battle %s (status=%s, reason=%s)",
                operation,
                self.battle.id,
                self.battle.battleStatus.value,
                self.battle.endReason.value,
            )
            return False
        return True

    # ------------------------------------------------------------------
    # Move resolution
    # ------------------------------------------------------------------

    def resolve_move_action(
        self,
        attacker_id: str,
        move_id: str,
        defender_stats: Stats,
        defender_types: list[Type],
        random_factor: Optional[float] = None,
    ) -> DamageResult:
        """Damage the attacker's active critter would deal with a move.

        Unknown moves and missing attackers resolve to zero damage so the turn
        can continue; status moves deal no damage and carry no flags.
        """
        move = self.game_data.moves.get(move_id)
        if move is None:
            logger.warning("Unknown move %r resolves to no damage", move_id)
            return DamageResult(damage=0)
        attacker = self.get_active_critter(attacker_id)
        if attacker is None:
            logger.warning("No active critter for participant %r", attacker_id)
            return DamageResult(damage=0)
        return calculate_move_damage(attacker, move, defender_stats, defender_types, random_factor, self.battle)

    def determine_turn_order(
        self,
        player_critter: Critter,
        opponent_critter: Critter,
        player_priority: int = 0,
        opponent_priority: int = 0,
    ) -> TurnOrder:
        """Compare speed + priority; ties always go to the player"""
        player_speed = player_critter.currentStats.speed + player_priority
        opponent_speed = opponent_critter.currentStats.speed + opponent_priority
        return TurnOrder.PLAYER if player_speed >= opponent_speed else TurnOrder.OPPONENT

    def does_move_hit(self, accuracy: int, roll: Optional[float] = None) -> bool:
        """roll is in [0, 100); the move hits when roll <= accuracy"""
        if roll is None:
            roll = random_float(self.battle) * ACCURACY_ROLL_MAX
        return roll <= accuracy

    def get_random_move(self, critter: Critter) -> Optional[str]:
        return self.ai.get_random_move(critter, self.battle)

    def use_move(self, participant_id: str, move_id: str) -> bool:
        """Spend one PP of the active critter's move"""
        if not self._guard("use_move"):
            return False
        critter = self.get_active_critter(participant_id)
        if critter is None or critter.isFainted:
            return False
        return critter.use_move_pp(move_id)

    def apply_secondary_effect(self, move_id: str, target_participant_id: str, roll: Optional[float] = None) -> bool:
        """Roll a move's rider effect.

        Status riders land on the target's active critter; heal riders restore
        the user's (the target's opponent's) HP by a percent of its max HP.
        roll is in [0, 100); the effect triggers when roll < chance.
        """
        if not self._guard("apply_secondary_effect"):
            return False
        move = self.game_data.moves.get(move_id)
        if move is None or move.effect is None:
            return False
        effect = move.effect
        if roll is None:
            roll = random_float(self.battle) * 100
        if roll >= effect.chance:
            return False

        if effect.kind in STATUS_EFFECTS:
            target = self.get_active_critter(target_participant_id)
            if target is None:
                return False
            return self.apply_status_effect(target.id, STATUS_EFFECTS[effect.kind])

        if effect.kind == MoveEffectKind.HEAL:
            user_side = self.get_opponent_of(target_participant_id)
            if user_side is None:
                return False
            user = user_side.active_critter
            restored = user.restore_hp(int(user.maxHP * effect.value / 100))
            if restored <= 0:
                return False
            self.add_log(f"{self.species_name(user)} restored {restored} HP!")
            self.events.emit(BattleEvent.HEALED, {"participantId": user_side.id, "critterId": user.id, "amount": restored})
            return True

        logger.debug("Secondary effect %s of %s has no battle behavior", effect.kind.value, move_id)
        return False

    # ------------------------------------------------------------------
    # State mutators
    # ------------------------------------------------------------------

    def switch_critter(self, participant_id: str, new_index: int) -> bool:
        if not self._guard("switch_critter"):
            return False
        participant = self.get_participant(participant_id)
        if participant is None or new_index < 0 or new_index >= len(participant.party):
            return False
        if new_index == participant.currentCritterIndex or participant.party[new_index].isFainted:
            return False
        participant.currentCritterIndex = new_index
        incoming = participant.party[new_index]
        self.add_log(f"{participant.name} switched to {self.species_name(incoming)}!")
        self.events.emit(BattleEvent.SWITCHED, {"participantId": participant_id, "critterIndex": new_index, "critterId": incoming.id})
        return True

    def damage_active_critter(self, participant_id: str, damage: int) -> bool:
        """Apply damage to a side's active critter, clamping HP at 0 and fainting it there"""
        if not self._guard("damage_active_critter"):
            return False
        critter = self.get_active_critter(participant_id)
        if critter is None or damage < 0:
            return False
        dealt = critter.take_damage(damage)
        self.events.emit(BattleEvent.DAMAGE_DEALT, {"participantId": participant_id, "damage": dealt, "remainingHP": critter.currentHP})
        if critter.isFainted:
            self.add_log(f"{self.species_name(critter)} fainted!")
            self.events.emit(BattleEvent.FAINTED, {"participantId": participant_id, "critterId": critter.id})
        return True

    def apply_status_effect(self, critter_id: str, status: StatusEffect) -> bool:
        """Inflict a status on one of the two active critters; no stacking, no fainted targets"""
        if not self._guard("apply_status_effect"):
            return False
        for participant in (self.battle.player, self.battle.opponent):
            critter = participant.active_critter
            if critter.id != critter_id:
                continue
            if not critter.apply_status(status):
                return False
            self.add_log(f"{self.species_name(critter)} is afflicted by {status.value}!")
            self.events.emit(BattleEvent.STATUS_APPLIED, {"participantId": participant.id, "critterId": critter_id, "status": status.value})
            return True
        return False

    def heal_party(self, participant_id: str) -> bool:
        """Fully restore every critter of a participant, PP included"""
        participant = self.get_participant(participant_id)
        if participant is None:
            return False
        for critter in participant.party:
            critter.heal()
            critter.reset_move_pp()
        self.events.emit(BattleEvent.HEALED, {"participantId": participant_id, "party": True})
        return True

    def use_item(self, participant_id: str, item_id: str, target_index: Optional[int] = None) -> bool:
        """Use an item in battle.

        Capture orbs are thrown at the opposing active critter. Other items
        target the participant's critter at target_index (default: active).
        """
        if not self._guard("use_item"):
            return False
        participant = self.get_participant(participant_id)
        item = self.game_data.items.get(item_id)
        if participant is None or item is None:
            return False

        if item.kind == ItemKind.CAPTURE_ORB:
            opponent = self.get_opponent_of(participant_id)
            return self.attempt_catch(opponent.active_critter, item.catchModifier or DEFAULT_ORB_MODIFIER)

        if item.effect is None:
            return False
        index = participant.currentCritterIndex if target_index is None else target_index
        if index < 0 or index >= len(participant.party):
            return False
        critter = participant.party[index]
        effect = item.effect
        name = self.species_name(critter)

        if effect.kind == ItemEffectKind.HEAL:
            restored = critter.restore_hp(effect.value)
            if restored <= 0:
                return False
            self.add_log(f"{name} recovered {restored} HP!")
        elif effect.kind == ItemEffectKind.REVIVE:
            if not critter.revive(effect.value):
                return False
            self.add_log(f"{name} was revived!")
        elif effect.kind == ItemEffectKind.CURE_STATUS:
            if critter.status is None or critter.status != effect.status:
                return False
            critter.clear_status()
            self.add_log(f"{name} was cured of {effect.status.value}!")
        elif effect.kind == ItemEffectKind.FULL_HEAL:
            if critter.isFainted or (critter.currentHP == critter.maxHP and critter.status is None):
                return False
            critter.heal()
            self.add_log(f"{name} was fully healed!")
        else:
            return False

        self.events.emit(BattleEvent.HEALED, {"participantId": participant_id, "critterId": critter.id, "itemId": item_id})
        return True

    # ------------------------------------------------------------------
    # Capture / flee
    # ------------------------------------------------------------------

    def calculate_catch_probability(self, target: Critter, orb_modifier: float = DEFAULT_ORB_MODIFIER, status_bonus: Optional[float] = None) -> float:
        species = self.game_data.species.get(target.speciesId)
        if species is None:
            return 0.0
        bonus = status_bonus if status_bonus is not None else status_catch_bonus(target.status)
        return catch_probability(species.catchRate, target.currentHP, target.maxHP, orb_modifier, bonus)

    def attempt_catch(self, target: Critter, orb_modifier: float = DEFAULT_ORB_MODIFIER, roll: Optional[float] = None) -> bool:
        """Throw a capture orb; only wild, non-fainted opposing critters can be caught"""
        if not self._guard("attempt_catch"):
            return False
        if not self.battle.isWildEncounter or target.isFainted:
            return False
        if self.battle.opponent.find_critter(target.id) is None:
            return False

        probability = self.calculate_catch_probability(target, orb_modifier)
        if roll is None:
            roll = random_float(self.battle)
        logger.debug("Catch roll %.3f vs probability %.3f", roll, probability)

        name = self.species_name(target)
        if not is_caught(probability, roll):
            self.add_log(MSG_BROKE_FREE)
            self.events.emit(BattleEvent.CAPTURE_FAILED, {"critterId": target.id, "probability": probability})
            return False

        self.battle.endReason = BattleEndReason.CAUGHT
        self.add_log(f"Gotcha! {name} was caught!")
        logger.info("Critter %s (%s) caught in battle %s", target.id, target.speciesId, self.battle.id)
        self.events.emit(BattleEvent.CAPTURED, {"critterId": target.id, "speciesId": target.speciesId, "probability": probability})
        return True

    def simulate_catch_animation(self, roll: Optional[float] = None) -> int:
        """Number of orb shakes (1-4) to show before the outcome"""
        if roll is None:
            roll = random_float(self.battle)
        return shake_count(roll)

    def attempt_flee(self, player_speed: int, opponent_speed: int, roll: Optional[float] = None) -> bool:
        if not self._guard("attempt_flee"):
            return False
        if not self.battle.isWildEncounter:
            self.add_log(MSG_CANT_FLEE_TRAINER)
            return False
        chance = flee_chance(player_speed, opponent_speed)
        if roll is None:
            roll = random_float(self.battle)
        if roll >= chance:
            self.add_log(MSG_FLEE_FAILED)
            return False
        self.battle.endReason = BattleEndReason.FLED
        self.add_log(MSG_FLED)
        self.events.emit(BattleEvent.FLED, {"participantId": self.battle.player.id})
        return True

    # ------------------------------------------------------------------
    # Termination
    # ------------------------------------------------------------------

    def has_active_critters(self, participant_id: str) -> bool:
        participant = self.get_participant(participant_id)
        return participant is not None and any(not c.isFainted for c in participant.party)

    def find_next_active_critter(self, participant_id: str) -> Optional[int]:
        participant = self.get_participant(participant_id)
        if participant is None:
            return None
        for index, critter in enumerate(participant.party):
            if not critter.isFainted:
                return index
        return None

    def check_battle_status(self) -> BattleStatus:
        """Decide the winner once both sides' parties say so.

        A terminal status is final: later calls return it unchanged.
        """
        if self.battle.battleStatus.is_terminal():
            return self.battle.battleStatus

        player_alive = self.has_active_critters(self.battle.player.id)
        opponent_alive = self.has_active_critters(self.battle.opponent.id)
        if not player_alive and not opponent_alive:
            self.battle.battleStatus = BattleStatus.ERROR
        elif not player_alive:
            self.battle.battleStatus = BattleStatus.OPPONENT_WON
        elif not opponent_alive:
            self.battle.battleStatus = BattleStatus.PLAYER_WON
        else:
            return self.battle.battleStatus

        if self.battle.endReason == BattleEndReason.NONE:
            self.battle.endReason = BattleEndReason.KNOCKOUT
        self._announce_outcome()
        return self.battle.battleStatus

    def _announce_outcome(self) -> None:
        if self._outcome_announced:
            return
        self._outcome_announced = True
        status = self.battle.battleStatus
        logger.info("Battle %s finished: %s", self.battle.id, status.value)
        if status == BattleStatus.PLAYER_WON:
            self.add_log(f"{self.battle.player.name} won the battle!")
            self.events.emit(BattleEvent.VICTORY, {"battleId": self.battle.id, "winnerId": self.battle.player.id})
        elif status == BattleStatus.OPPONENT_WON:
            self.add_log(f"{self.battle.player.name} is out of usable critters!")
            self.events.emit(BattleEvent.DEFEAT, {"battleId": self.battle.id, "winnerId": self.battle.opponent.id})
        elif status == BattleStatus.ERROR:
            self.events.emit(BattleEvent.ERROR, {"battleId": self.battle.id, "message": "Draw - both out of critters"})

    def end_battle(self) -> None:
        """Close the session. A battle still undecided and not caught/fled is aborted as Error."""
        if self.battle.is_active and self.battle.endReason == BattleEndReason.NONE:
            self.battle.battleStatus = BattleStatus.ERROR
            self.battle.endReason = BattleEndReason.ABORTED
            self._outcome_announced = True
            logger.info("Battle %s aborted", self.battle.id)
        self.events.emit(
            BattleEvent.ENDED,
            {"battleId": self.battle.id, "status": self.battle.battleStatus.value, "reason": self.battle.endReason.value},
        )

    # ------------------------------------------------------------------
    # Experience, move learning and evolution prompts
    # ------------------------------------------------------------------

    def distribute_experience(self, winner_id: str, defeated: Critter) -> Optional[ExperienceAward]:
        """Award experience for a knocked-out critter to the winner's active critter.

        New moves and a possible evolution are queued as pending prompts on
        the battle; nothing is learned or evolved until confirmed.
        """
        winner = self.get_participant(winner_id)
        if winner is None or not defeated.isFainted:
            return None
        recipient = winner.active_critter
        if recipient.isFainted or recipient.id == defeated.id:
            return None
        species = self.game_data.species.get(defeated.speciesId)
        if species is None:
            logger.warning("No experience for unknown species %r", defeated.speciesId)
            return None

        amount = experience_gained_for(species.baseExp, defeated.level, True, self.battle.isWildEncounter)
        old_level = recipient.level
        result = apply_experience(recipient, amount)
        name = self.species_name(recipient)
        self.add_log(f"{name} gained {amount} experience!")
        self.events.emit(BattleEvent.EXPERIENCE_GAINED, {"participantId": winner_id, "critterId": recipient.id, "amount": amount})

        new_moves: list[str] = []
        evolution_target: Optional[str] = None
        if result.leveled_up:
            self.add_log(f"{name} grew to level {recipient.level}!")
            self.events.emit(
                BattleEvent.LEVEL_UP,
                {"critterId": recipient.id, "oldLevel": old_level, "newLevel": recipient.level, "statChanges": result.statChanges},
            )
            for entry in self.move_learning.get_moves_learned_between(recipient.speciesId, old_level, recipient.level):
                if recipient.has_move(entry.moveId) or entry.moveId in new_moves:
                    continue
                new_moves.append(entry.moveId)
                self.battle.pendingMoveLearns.append(PendingMoveLearn(critterId=recipient.id, moveId=entry.moveId, level=entry.level))
                self.events.emit(BattleEvent.MOVE_LEARN_AVAILABLE, {"critterId": recipient.id, "moveId": entry.moveId})

            evolution = self.evolution.can_evolve(recipient)
            if evolution is not None and self._pending_evolution(recipient.id) is None:
                evolution_target = evolution.toSpeciesId
                self.battle.pendingEvolutions.append(
                    PendingEvolution(critterId=recipient.id, fromSpeciesId=evolution.fromSpeciesId, toSpeciesId=evolution.toSpeciesId)
                )
                self.events.emit(BattleEvent.EVOLUTION_AVAILABLE, {"critterId": recipient.id, "toSpecies": evolution.toSpeciesId})

        return ExperienceAward(participantId=winner_id, levelUp=result, newMoves=new_moves, evolutionTarget=evolution_target)

    def _pending_evolution(self, critter_id: str) -> Optional[PendingEvolution]:
        for pending in self.battle.pendingEvolutions:
            if pending.critterId == critter_id:
                return pending
        return None

    def _pending_move(self, critter_id: str, move_id: str) -> Optional[PendingMoveLearn]:
        for pending in self.battle.pendingMoveLearns:
            if pending.critterId == critter_id and pending.moveId == move_id:
                return pending
        return None

    def confirm_evolution(self, critter_id: str) -> bool:
        pending = self._pending_evolution(critter_id)
        critter = self.find_critter(critter_id)
        if pending is None or critter is None:
            return False
        if not self.evolution.evolve(critter):
            return False
        self.battle.pendingEvolutions.remove(pending)
        self.add_log(f"{self.species_name(critter)} evolved!")
        return True

    def confirm_move_learn(self, critter_id: str, move_id: str, replace_index: Optional[int] = None) -> bool:
        """Learn a pending move into a free slot, or over the slot at replace_index"""
        pending = self._pending_move(critter_id, move_id)
        critter = self.find_critter(critter_id)
        if pending is None or critter is None:
            return False
        if replace_index is None:
            learned = self.move_learning.learn_move(critter, move_id)
        else:
            learned = self.move_learning.replace_move(critter, move_id, replace_index)
        if not learned:
            return False
        self.battle.pendingMoveLearns.remove(pending)
        self.add_log(f"{self.species_name(critter)} learned {move_id}!")
        return True

    def decline_prompt(self, critter_id: str, move_id: Optional[str] = None) -> bool:
        """Drop a pending move (move_id given) or the pending evolution"""
        pending = self._pending_evolution(critter_id) if move_id is None else self._pending_move(critter_id, move_id)
        if pending is None:
            return False
        if isinstance(pending, PendingEvolution):
            self.battle.pendingEvolutions.remove(pending)
        else:
            self.battle.pendingMoveLearns.remove(pending)
        return True

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def add_log(self, message: str) -> None:
        self.battle.log.append(f"Turn {self.battle.turnCount}: {message}")

    def next_turn(self) -> bool:
        if not self._guard("next_turn"):
            return False
        self.battle.turnCount += 1
        return True

    def restore_pp_after_battle(self) -> None:
        for critter in self.battle.player.party:
            critter.reset_move_pp()
