"""
Save-data boundary

Critters and battles cross the persistence boundary as plain dicts produced by
pydantic. Older saves stored critters in a flat legacy shape (numeric
``attackIds`` indexing the species move list, ``currentHp``/``maxHp``,
``currentLevel``, ``currentExp``); normalize_critter_data converts those once,
at load time, so nothing past this module ever sees the legacy shape.
"""

import logging
import math
from typing import Any, Optional

from pydantic import ValidationError

from critter_battle.constants import MAX_LEVEL, MAX_MON_MOVES, MIN_LEVEL
from critter_battle.errors import DataIntegrityError
from critter_battle.leveling import total_exp_for_level
from critter_battle.registry import GameData
from critter_battle.schema.battle_state import Battle
from critter_battle.schema.critter import Critter, generate_critter_id
from critter_battle.schema.species_info import SpeciesInfo
from critter_battle.stats import compute_stats

logger = logging.getLogger(__name__)

LEGACY_CRITTER_KEYS = frozenset({"attackIds", "currentHp", "maxHp", "currentLevel", "currentExp"})


def critter_to_data(critter: Critter) -> dict[str, Any]:
    return critter.model_dump(mode="json")


def critter_from_data(data: dict[str, Any]) -> Critter:
    try:
        return Critter.model_validate(data)
    except ValidationError as e:
        raise DataIntegrityError("critter", str(e)) from e


def battle_to_data(battle: Battle) -> dict[str, Any]:
    return battle.model_dump(mode="json")


def battle_from_data(data: dict[str, Any]) -> Battle:
    try:
        return Battle.model_validate(data)
    except ValidationError as e:
        raise DataIntegrityError("battle", str(e)) from e


def is_legacy_critter_data(raw: dict[str, Any]) -> bool:
    return any(key in raw for key in LEGACY_CRITTER_KEYS)


def _as_int(raw: dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DataIntegrityError("critter", f"{key} must be an integer, got {value!r}") from e


def _resolve_move_id(attack_id: Any, species: SpeciesInfo, game_data: GameData) -> Optional[str]:
    """Legacy attack ids are 1-based positions in the species move list"""
    if isinstance(attack_id, str) and game_data.moves.exists(attack_id):
        return attack_id
    try:
        position = int(attack_id)
    except (TypeError, ValueError):
        return None
    if 1 <= position <= len(species.moves):
        return species.moves[position - 1]
    return None


def normalize_critter_data(raw: dict[str, Any], game_data: GameData) -> dict[str, Any]:
    """Convert a legacy critter record into the current Critter shape.

    Stats are recomputed from the species at the saved level; the saved HP
    fraction is carried over onto the new max HP. Records already in the
    current shape are returned as a shallow copy.

    Raises:
        DataIntegrityError: unknown species or non-numeric legacy fields.
    """
    if not is_legacy_critter_data(raw):
        return dict(raw)

    species_id = raw.get("speciesId") or raw.get("critterId")
    species = game_data.species.get(species_id) if isinstance(species_id, str) else None
    if species is None:
        raise DataIntegrityError("critter", f"unknown species {species_id!r}")

    level = min(max(_as_int(raw, "currentLevel", MIN_LEVEL), MIN_LEVEL), MAX_LEVEL)
    stats = compute_stats(species.baseStats, level)

    legacy_max = _as_int(raw, "maxHp", 0)
    legacy_current = _as_int(raw, "currentHp", legacy_max)
    ratio = min(max(legacy_current / legacy_max, 0.0), 1.0) if legacy_max > 0 else 1.0
    current_hp = min(stats.hp, math.ceil(stats.hp * ratio))

    floor_exp = total_exp_for_level(level)
    if level < MAX_LEVEL:
        experience = min(max(_as_int(raw, "currentExp", floor_exp), floor_exp), total_exp_for_level(level + 1) - 1)
    else:
        experience = floor_exp

    moves = []
    for attack_id in raw.get("attackIds") or []:
        move_id = _resolve_move_id(attack_id, species, game_data)
        if move_id is None:
            logger.warning("Dropping unknown legacy attack id %r on %s", attack_id, species.id)
            continue
        if len(moves) >= MAX_MON_MOVES or any(m["moveId"] == move_id for m in moves):
            continue
        instance = game_data.moves.create_move_instance(move_id)
        if instance is not None:
            moves.append(instance.model_dump())

    name = raw.get("name")
    return {
        "id": raw.get("id") or generate_critter_id(),
        "speciesId": species.id,
        "nickname": name if name and name != species.name else None,
        "level": level,
        "experience": experience,
        "baseStats": species.baseStats.model_dump(),
        "types": [t.value for t in species.types],
        "currentStats": stats.model_dump(),
        "currentHP": current_hp,
        "maxHP": stats.hp,
        "status": None,
        "isFainted": current_hp == 0,
        "moves": moves,
    }


def load_critter(raw: dict[str, Any], game_data: GameData) -> Critter:
    """Normalize then validate a saved critter"""
    return critter_from_data(normalize_critter_data(raw, game_data))
