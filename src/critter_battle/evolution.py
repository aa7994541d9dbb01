import logging
from typing import Optional

from critter_battle.enums import BattleEvent
from critter_battle.events import EventBus
from critter_battle.move_learning import MoveLearningManager
from critter_battle.registry import GameData
from critter_battle.schema.critter import Critter
from critter_battle.schema.results import EvolutionInfo

logger = logging.getLogger(__name__)


class EvolutionManager:
    """Level-based evolution checks and in-place transformation of a critter"""

    def __init__(self, game_data: GameData, events: Optional[EventBus] = None):
        self.game_data = game_data
        self.events = events
        self.move_learning = MoveLearningManager(game_data, events)

    def get_evolution_info(self, species_id: str) -> Optional[EvolutionInfo]:
        species = self.game_data.species.get(species_id)
        if species is None or species.evolvesInto is None or species.evolutionLevel is None:
            return None
        return EvolutionInfo(fromSpeciesId=species.id, toSpeciesId=species.evolvesInto, level=species.evolutionLevel)

    def can_evolve(self, critter: Critter) -> Optional[EvolutionInfo]:
        info = self.get_evolution_info(critter.speciesId)
        if info is None or not self.game_data.species.exists(info.toSpeciesId):
            return None
        if critter.level < info.level:
            return None
        return info

    def get_evolution_chain(self, species_id: str) -> list[str]:
        """species_id followed by every later form"""
        chain = [species_id]
        current = self.game_data.species.get(species_id)
        while current is not None and current.evolvesInto and current.evolvesInto not in chain:
            chain.append(current.evolvesInto)
            current = self.game_data.species.get(current.evolvesInto)
        return chain

    def is_fully_evolved(self, species_id: str) -> bool:
        species = self.game_data.species.get(species_id)
        return species is not None and species.evolvesInto is None

    def get_base_form(self, species_id: str) -> Optional[str]:
        line = self.game_data.species.get_evolution_line(species_id)
        return line[0].id if line else None

    def get_final_form(self, species_id: str) -> Optional[str]:
        line = self.game_data.species.get_evolution_line(species_id)
        return line[-1].id if line else None

    def evolve(self, critter: Critter) -> bool:
        """Turn the critter into its next form if it qualifies.

        Species, base stats and types are swapped, stats are recomputed keeping
        the HP ratio, and moves the new form knows by this level fill free slots.
        """
        info = self.can_evolve(critter)
        if info is None:
            return False
        new_species = self.game_data.species.get(info.toSpeciesId)
        if new_species is None:
            return False

        critter.speciesId = new_species.id
        critter.baseStats = new_species.baseStats.model_copy()
        critter.types = list(new_species.types)
        critter.recalculate_stats()

        for move_id in self.move_learning.get_learnable_moves_up_to_level(new_species.id, critter.level):
            if critter.has_move(move_id):
                continue
            instance = self.game_data.moves.create_move_instance(move_id)
            if instance is not None:
                critter.add_move(instance)

        logger.info("Critter %s evolved from %s into %s", critter.id, info.fromSpeciesId, info.toSpeciesId)
        if self.events is not None:
            self.events.emit(
                BattleEvent.EVOLVED,
                {"critterId": critter.id, "fromSpecies": info.fromSpeciesId, "toSpecies": info.toSpeciesId, "level": critter.level},
            )
        return True
