"""
Catalog registries and the GameData context

Each registry turns raw catalog records (module-level literals in
critter_battle.data, or an injected fixture catalog) into frozen schema models.
Registries are plain objects owned by a GameData instance, which is created
once at startup and passed to everything that needs catalog lookups.
"""

import logging
from typing import Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from critter_battle.data.items import ITEMS_DATA
from critter_battle.data.learnsets import LEARNSETS
from critter_battle.data.moves import MOVES_DATA
from critter_battle.data.species import SPECIES_DATA
from critter_battle.data.trainers import TRAINERS_DATA
from critter_battle.enums import ItemEffectKind, ItemKind, MoveCategory, Type
from critter_battle.errors import RegistryError
from critter_battle.schema.critter import MoveInstance
from critter_battle.schema.item_info import ItemInfo
from critter_battle.schema.move_info import MoveInfo
from critter_battle.schema.species_info import LearnsetEntry, SpeciesInfo
from critter_battle.schema.trainer_info import TrainerInfo

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Registry(Generic[ModelT]):
    """Id-keyed, read-only catalog with a case-insensitive name index.

    initialize() is idempotent: the first call wins and later calls, with or
    without a catalog, return the registry unchanged.
    """

    model: type[ModelT]
    label: str = "catalog"

    def __init__(self, catalog: Optional[Iterable[dict | ModelT]] = None):
        self._catalog = catalog
        self._entries: dict[str, ModelT] = {}
        self._by_name: dict[str, ModelT] = {}
        self._initialized = False

    def default_catalog(self) -> Iterable[dict]:
        return []

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self, catalog: Optional[Iterable[dict | ModelT]] = None) -> "Registry[ModelT]":
        if self._initialized:
            return self
        records = catalog if catalog is not None else self._catalog
        if records is None:
            records = self.default_catalog()
        for record in records:
            self._register(self._validate(record))
        self._initialized = True
        logger.debug("%s registry initialized with %d entries", self.label, len(self._entries))
        return self

    def _validate(self, record: dict | ModelT) -> ModelT:
        if isinstance(record, self.model):
            return record
        try:
            return self.model.model_validate(record)
        except ValidationError as exc:
            record_id = record.get("id", "?") if isinstance(record, dict) else "?"
            raise RegistryError(self.label, f"invalid record {record_id!r}: {exc}") from exc

    def _register(self, entry: ModelT) -> None:
        entry_id = entry.id
        if entry_id in self._entries:
            raise RegistryError(self.label, f"duplicate id {entry_id!r}")
        self._entries[entry_id] = entry
        self._by_name.setdefault(entry.name.lower(), entry)

    def _ensure(self) -> None:
        if not self._initialized:
            self.initialize()

    def get(self, entry_id: str) -> Optional[ModelT]:
        self._ensure()
        return self._entries.get(entry_id)

    def get_all(self) -> list[ModelT]:
        self._ensure()
        return list(self._entries.values())

    def get_by_name(self, name: str) -> Optional[ModelT]:
        self._ensure()
        return self._by_name.get(name.lower())

    def exists(self, entry_id: str) -> bool:
        self._ensure()
        return entry_id in self._entries

    def count(self) -> int:
        self._ensure()
        return len(self._entries)

    def ids(self) -> list[str]:
        self._ensure()
        return list(self._entries)


class SpeciesRegistry(Registry[SpeciesInfo]):
    model = SpeciesInfo
    label = "species"

    def default_catalog(self) -> Iterable[dict]:
        return SPECIES_DATA

    def get_by_type(self, critter_type: Type) -> list[SpeciesInfo]:
        return [s for s in self.get_all() if critter_type in s.types]

    def get_evolution_line(self, species_id: str) -> list[SpeciesInfo]:
        """Whole line from base form to final form; empty for unknown ids"""
        species = self.get(species_id)
        if species is None:
            return []
        current = species
        seen = {current.id}
        while current.evolvesFrom:
            previous = self.get(current.evolvesFrom)
            if previous is None or previous.id in seen:
                break
            seen.add(previous.id)
            current = previous
        line = [current]
        while current.evolvesInto:
            following = self.get(current.evolvesInto)
            if following is None or following in line:
                break
            line.append(following)
            current = following
        return line


class MoveRegistry(Registry[MoveInfo]):
    model = MoveInfo
    label = "move"

    def default_catalog(self) -> Iterable[dict]:
        return MOVES_DATA

    def get_by_type(self, move_type: Type) -> list[MoveInfo]:
        return [m for m in self.get_all() if m.type == move_type]

    def get_by_category(self, category: MoveCategory) -> list[MoveInfo]:
        return [m for m in self.get_all() if m.category == category]

    def create_move_instance(self, move_id: str) -> Optional[MoveInstance]:
        """Fresh move slot with full PP, or None for unknown moves"""
        move = self.get(move_id)
        if move is None:
            return None
        return MoveInstance(moveId=move.id, currentPP=move.basePP, maxPP=move.basePP)


class ItemRegistry(Registry[ItemInfo]):
    model = ItemInfo
    label = "item"

    def default_catalog(self) -> Iterable[dict]:
        return ITEMS_DATA

    def _validate(self, record: dict | ItemInfo) -> ItemInfo:
        item = super()._validate(record)
        if item.kind == ItemKind.CAPTURE_ORB and item.catchModifier is None:
            raise RegistryError(self.label, f"capture orb {item.id!r} has no catchModifier")
        return item

    def get_capture_orbs(self) -> list[ItemInfo]:
        return [i for i in self.get_all() if i.kind == ItemKind.CAPTURE_ORB]

    def get_healing_items(self) -> list[ItemInfo]:
        healing = (ItemEffectKind.HEAL, ItemEffectKind.REVIVE, ItemEffectKind.FULL_HEAL)
        return [i for i in self.get_all() if i.effect is not None and i.effect.kind in healing]

    def get_shop_items(self) -> list[ItemInfo]:
        return [i for i in self.get_all() if i.price is not None and i.kind != ItemKind.KEY_ITEM]


class TrainerRegistry(Registry[TrainerInfo]):
    model = TrainerInfo
    label = "trainer"

    def default_catalog(self) -> Iterable[dict]:
        return TRAINERS_DATA


class LearnsetRegistry:
    """Per-species level-up learnsets; unknown species have an empty learnset"""

    label = "learnset"

    def __init__(self, catalog: Optional[dict[str, Iterable[tuple[int, str]]]] = None):
        self._catalog = catalog
        self._learnsets: dict[str, list[LearnsetEntry]] = {}
        self._initialized = False

    def initialize(self) -> "LearnsetRegistry":
        if self._initialized:
            return self
        catalog = self._catalog if self._catalog is not None else LEARNSETS
        for species_id, entries in catalog.items():
            try:
                learnset = [LearnsetEntry(level=level, moveId=move_id) for level, move_id in entries]
            except ValidationError as exc:
                raise RegistryError(self.label, f"invalid learnset for {species_id!r}: {exc}") from exc
            self._learnsets[species_id] = sorted(learnset, key=lambda e: e.level)
        self._initialized = True
        return self

    def get(self, species_id: str) -> list[LearnsetEntry]:
        if not self._initialized:
            self.initialize()
        return list(self._learnsets.get(species_id, []))

    def species_ids(self) -> list[str]:
        if not self._initialized:
            self.initialize()
        return list(self._learnsets)


class GameData:
    """All catalogs of one game, created once and injected into battle services"""

    def __init__(
        self,
        species: SpeciesRegistry,
        moves: MoveRegistry,
        items: ItemRegistry,
        trainers: TrainerRegistry,
        learnsets: LearnsetRegistry,
    ):
        self.species = species
        self.moves = moves
        self.items = items
        self.trainers = trainers
        self.learnsets = learnsets

    @classmethod
    def create(
        cls,
        species: Optional[Iterable[dict | SpeciesInfo]] = None,
        moves: Optional[Iterable[dict | MoveInfo]] = None,
        items: Optional[Iterable[dict | ItemInfo]] = None,
        trainers: Optional[Iterable[dict | TrainerInfo]] = None,
        learnsets: Optional[dict[str, Iterable[tuple[int, str]]]] = None,
    ) -> "GameData":
        """Build, initialize and cross-validate every registry.

        Any catalog left as None uses the built-in data. Raises RegistryError
        when records are invalid or reference ids that do not exist.
        """
        game_data = cls(
            species=SpeciesRegistry(species).initialize(),
            moves=MoveRegistry(moves).initialize(),
            items=ItemRegistry(items).initialize(),
            trainers=TrainerRegistry(trainers).initialize(),
            learnsets=LearnsetRegistry(learnsets).initialize(),
        )
        game_data.validate()
        logger.info(
            "Game data ready: %d species, %d moves, %d items, %d trainers",
            game_data.species.count(),
            game_data.moves.count(),
            game_data.items.count(),
            game_data.trainers.count(),
        )
        return game_data

    def validate(self) -> None:
        for species in self.species.get_all():
            for move_id in species.moves:
                if not self.moves.exists(move_id):
                    raise RegistryError("species", f"{species.id!r} lists unknown move {move_id!r}")
            if species.evolvesInto is not None:
                if not self.species.exists(species.evolvesInto):
                    raise RegistryError("species", f"{species.id!r} evolves into unknown species {species.evolvesInto!r}")
                if species.evolutionLevel is None:
                    raise RegistryError("species", f"{species.id!r} has an evolution target but no evolutionLevel")
            if species.evolvesFrom is not None and not self.species.exists(species.evolvesFrom):
                raise RegistryError("species", f"{species.id!r} evolves from unknown species {species.evolvesFrom!r}")

        for species_id in self.learnsets.species_ids():
            if not self.species.exists(species_id):
                raise RegistryError("learnset", f"learnset for unknown species {species_id!r}")
            for entry in self.learnsets.get(species_id):
                if not self.moves.exists(entry.moveId):
                    raise RegistryError("learnset", f"{species_id!r} learns unknown move {entry.moveId!r}")

        for trainer in self.trainers.get_all():
            for slot in trainer.party:
                if not self.species.exists(slot.speciesId):
                    raise RegistryError("trainer", f"{trainer.id!r} fields unknown species {slot.speciesId!r}")
                for move_id in slot.moveIds or []:
                    if not self.moves.exists(move_id):
                        raise RegistryError("trainer", f"{trainer.id!r} gives unknown move {move_id!r}")
