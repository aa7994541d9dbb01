from typing import Iterable, Optional

from critter_battle.constants import MAX_LEVEL, MAX_MON_MOVES, MIN_LEVEL
from critter_battle.errors import RegistryError
from critter_battle.leveling import total_exp_for_level
from critter_battle.registry import GameData
from critter_battle.schema.critter import Critter, generate_critter_id
from critter_battle.stats import compute_stats
from critter_battle.utils.rng import RngState, rand16


def _seeded_critter_id(seed: int) -> str:
    state = RngState(rng_seed=seed & 0xFFFFFFFF)
    return f"critter_{rand16(state):04x}{rand16(state):04x}{rand16(state):04x}"


def create_critter(
    species_id: str,
    level: int,
    game_data: GameData,
    nickname: Optional[str] = None,
    move_ids: Iterable[str] | None = None,
    seed: Optional[int] = None,
) -> Critter:
    """Build a fresh critter of a species at a level.

    Args:
        species_id: Registered species id. Unknown ids raise RegistryError.
        level: Clamped to 1..100.
        game_data: Catalog context.
        nickname: Optional display name.
        move_ids: Starting moves; defaults to the species base move list. Unknown ids are skipped.
        seed: Makes the generated critter id deterministic.

    Returns:
        A critter at full HP with experience equal to the level's curve total.
    """
    info = game_data.species.get(species_id)
    if info is None:
        raise RegistryError("species", f"unknown species {species_id!r}")

    level = min(max(level, MIN_LEVEL), MAX_LEVEL)
    stats = compute_stats(info.baseStats, level)

    moves = []
    for move_id in list(move_ids if move_ids is not None else info.moves):
        if len(moves) >= MAX_MON_MOVES:
            break
        if any(m.moveId == move_id for m in moves):
            continue
        instance = game_data.moves.create_move_instance(move_id)
        if instance is not None:
            moves.append(instance)

    return Critter(
        id=_seeded_critter_id(seed) if seed is not None else generate_critter_id(),
        speciesId=info.id,
        nickname=nickname,
        level=level,
        experience=total_exp_for_level(level),
        baseStats=info.baseStats.model_copy(),
        types=list(info.types),
        currentStats=stats,
        currentHP=stats.hp,
        maxHP=stats.hp,
        moves=moves,
    )


def create_trainer_party(trainer_id: str, game_data: GameData, seed: Optional[int] = None) -> list[Critter]:
    """Instantiate a trainer's roster; unknown trainers yield an empty party"""
    trainer = game_data.trainers.get(trainer_id)
    if trainer is None:
        return []
    party = []
    for index, slot in enumerate(trainer.party):
        party.append(
            create_critter(
                slot.speciesId,
                slot.level,
                game_data,
                move_ids=slot.moveIds,
                seed=None if seed is None else seed + index,
            )
        )
    return party
