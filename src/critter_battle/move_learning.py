import logging
from typing import Optional

from critter_battle.constants import MAX_MON_MOVES
from critter_battle.enums import BattleEvent
from critter_battle.events import EventBus
from critter_battle.registry import GameData
from critter_battle.schema.critter import Critter
from critter_battle.schema.species_info import LearnsetEntry

logger = logging.getLogger(__name__)


class MoveLearningManager:
    """Learnset queries plus learning/replacing moves on a critter"""

    def __init__(self, game_data: GameData, events: Optional[EventBus] = None):
        self.game_data = game_data
        self.events = events

    def get_learnset(self, species_id: str) -> list[LearnsetEntry]:
        return self.game_data.learnsets.get(species_id)

    def get_learnable_moves(self, species_id: str, level: int) -> list[str]:
        """Move ids the species learns exactly at this level"""
        return _unique(e.moveId for e in self.get_learnset(species_id) if e.level == level)

    def get_learnable_moves_up_to_level(self, species_id: str, level: int) -> list[str]:
        return _unique(e.moveId for e in self.get_learnset(species_id) if e.level <= level)

    def get_moves_learned_between(self, species_id: str, from_level: int, to_level: int) -> list[LearnsetEntry]:
        """Entries with from_level < level <= to_level, in level order"""
        return [e for e in self.get_learnset(species_id) if from_level < e.level <= to_level]

    def has_new_move_to_learn(self, critter: Critter) -> list[LearnsetEntry]:
        """Entries at the critter's current level that it does not know yet"""
        return [e for e in self.get_learnset(critter.speciesId) if e.level == critter.level and not critter.has_move(e.moveId)]

    def learn_move(self, critter: Critter, move_id: str) -> bool:
        """Add a move into a free slot. Full move sets, duplicates and unknown moves are refused."""
        if len(critter.moves) >= MAX_MON_MOVES:
            return False
        if critter.has_move(move_id):
            return False
        instance = self.game_data.moves.create_move_instance(move_id)
        if instance is None:
            logger.warning("Cannot learn unknown move %r", move_id)
            return False
        critter.add_move(instance)
        self._emit(BattleEvent.MOVE_LEARNED, {"critterId": critter.id, "moveId": move_id})
        return True

    def replace_move(self, critter: Critter, move_id: str, index: int) -> bool:
        if index < 0 or index >= len(critter.moves):
            return False
        if critter.has_move(move_id):
            return False
        instance = self.game_data.moves.create_move_instance(move_id)
        if instance is None:
            logger.warning("Cannot learn unknown move %r", move_id)
            return False
        old = critter.moves[index]
        critter.moves[index] = instance
        self._emit(BattleEvent.MOVE_REPLACED, {"critterId": critter.id, "newMoveId": move_id, "oldMoveId": old.moveId})
        return True

    def _emit(self, name: BattleEvent, payload: dict) -> None:
        if self.events is not None:
            self.events.emit(name, payload)


def _unique(move_ids) -> list[str]:
    seen: list[str] = []
    for move_id in move_ids:
        if move_id not in seen:
            seen.append(move_id)
    return seen
