import logging
from typing import Iterable, Optional

from critter_battle.constants import (
    BOSS_EFFECTIVENESS_WEIGHT,
    BOSS_SCORE_JITTER,
    STAB_MULTIPLIER,
    STATUS_MOVE_SCORE_POWER,
    SWITCH_HP_THRESHOLD,
    TRAINER_SCORE_JITTER,
    TYPE_MUL_NORMAL,
)
from critter_battle.enums import AITier, MoveCategory, Type
from critter_battle.registry import GameData
from critter_battle.schema.critter import Critter
from critter_battle.schema.results import AIDecision
from critter_battle.type_effectiveness import TypeEffectiveness
from critter_battle.utils.rng import SeededState, choice_index, randint

logger = logging.getLogger(__name__)


class AIDecisionMaker:
    """
    Opponent move and switch selection

    - WILD: uniform random among moves with PP left
    - TRAINER: power x effectiveness x STAB x accuracy, plus +/-5 jitter
    - BOSS: effectiveness weighted x1.5, jitter narrowed to +/-2

    Random draws come from the passed RNG carrier (normally the Battle); with
    no carrier the scored tiers are fully deterministic.
    """

    def __init__(self, game_data: GameData):
        self.game_data = game_data

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------

    def get_random_move(self, critter: Critter, state: Optional[SeededState] = None) -> Optional[str]:
        """Any move id of the critter, or None when it knows no moves"""
        if not critter.moves:
            return None
        index = choice_index(state, len(critter.moves)) if state is not None else 0
        return critter.moves[index].moveId

    def decide_wild_move(self, critter: Critter, state: Optional[SeededState] = None) -> AIDecision:
        if not critter.moves:
            return AIDecision(moveId=None)
        usable = critter.usable_moves()
        if not usable:
            return AIDecision(moveId=critter.moves[0].moveId)
        index = choice_index(state, len(usable)) if state is not None else 0
        return AIDecision(moveId=usable[index].moveId)

    def decide_trainer_move(self, critter: Critter, defender_types: Iterable[Type], state: Optional[SeededState] = None) -> AIDecision:
        return self._decide_scored(critter, list(defender_types), state, effectiveness_weight=1.0, jitter=TRAINER_SCORE_JITTER)

    def decide_boss_move(self, critter: Critter, defender_types: Iterable[Type], state: Optional[SeededState] = None) -> AIDecision:
        return self._decide_scored(critter, list(defender_types), state, effectiveness_weight=BOSS_EFFECTIVENESS_WEIGHT, jitter=BOSS_SCORE_JITTER)

    def score_move(self, critter: Critter, move_id: str, defender_types: list[Type], effectiveness_weight: float = 1.0) -> Optional[float]:
        """Jitter-free heuristic score, None for moves missing from the catalog"""
        move = self.game_data.moves.get(move_id)
        if move is None:
            return None
        power = move.power if move.power > 0 else STATUS_MOVE_SCORE_POWER
        score = float(power)
        score *= TypeEffectiveness.effectiveness(move.type, defender_types) * effectiveness_weight
        if move.type in critter.types:
            score *= STAB_MULTIPLIER
        score *= move.accuracy / 100
        return score

    def _decide_scored(
        self,
        critter: Critter,
        defender_types: list[Type],
        state: Optional[SeededState],
        effectiveness_weight: float,
        jitter: int,
    ) -> AIDecision:
        if not critter.moves:
            return AIDecision(moveId=None)
        usable = critter.usable_moves()
        if not usable:
            return AIDecision(moveId=critter.moves[0].moveId)

        best_move_id = usable[0].moveId
        best_score = float("-inf")
        for instance in usable:
            score = self.score_move(critter, instance.moveId, defender_types, effectiveness_weight)
            if score is None:
                logger.warning("AI skipped unknown move %r on critter %s", instance.moveId, critter.id)
                continue
            if state is not None:
                score += randint(state, -jitter, jitter)
            logger.debug("AI score %s=%.2f", instance.moveId, score)
            # strict comparison: ties keep the earlier move slot
            if score > best_score:
                best_score = score
                best_move_id = instance.moveId
        return AIDecision(moveId=best_move_id)

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------

    def decide_trainer_switch(self, current: Critter, incoming_attack_type: Type, party: list[Critter]) -> Optional[AIDecision]:
        """Swap out a critter that is both threatened and below half HP.

        The first non-fainted party member (other than the current one) that
        takes neutral or resisted damage from the incoming type is chosen.
        Returns None when no swap is warranted or no candidate exists.
        """
        effectiveness = TypeEffectiveness.effectiveness(incoming_attack_type, current.types)
        if effectiveness <= TYPE_MUL_NORMAL or current.currentHP >= current.maxHP * SWITCH_HP_THRESHOLD:
            return None
        for index, candidate in enumerate(party):
            if candidate.isFainted or candidate.id == current.id:
                continue
            if TypeEffectiveness.get_resistance(candidate.types, incoming_attack_type) <= TYPE_MUL_NORMAL:
                return AIDecision(action=AIDecision.Action.SWITCH, switchCritterIndex=index)
        return None

    def best_attack_type(self, attacker: Critter, defender: Critter) -> Type:
        """Most threatening damaging move type the attacker knows against the defender"""
        best_type = attacker.types[0]
        best_effectiveness = float("-inf")
        for instance in attacker.moves:
            move = self.game_data.moves.get(instance.moveId)
            if move is None or move.category == MoveCategory.STATUS:
                continue
            effectiveness = TypeEffectiveness.effectiveness(move.type, defender.types)
            if effectiveness > best_effectiveness:
                best_effectiveness = effectiveness
                best_type = move.type
        return best_type

    def decide(
        self,
        tier: AITier,
        critter: Critter,
        defender: Critter,
        party: Optional[list[Critter]] = None,
        state: Optional[SeededState] = None,
    ) -> AIDecision:
        """Full decision for one opponent turn, dispatched on the AI tier"""
        if tier == AITier.WILD:
            return self.decide_wild_move(critter, state)

        if party:
            switch = self.decide_trainer_switch(critter, self.best_attack_type(defender, critter), party)
            if switch is not None:
                logger.debug("AI switching %s out for party slot %s", critter.id, switch.switchCritterIndex)
                return switch

        if tier == AITier.BOSS:
            return self.decide_boss_move(critter, defender.types, state)
        return self.decide_trainer_move(critter, defender.types, state)

