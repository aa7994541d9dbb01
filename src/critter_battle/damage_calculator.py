"""
Damage calculation

    damage = floor(((2*level/5 + 2) * power * (atk/def) / 100 + 2) / 25 * STAB * eff * random)

with random drawn uniformly from [0.85, 1.0] unless pinned by the caller.
Any damaging hit deals at least 1, immune targets included.
"""

import logging
import math
from typing import Iterable, Optional

from critter_battle.constants import (
    DAMAGE_BASE_DIVISOR,
    DAMAGE_FINAL_DIVISOR,
    DAMAGE_LEVEL_DIVISOR,
    DAMAGE_RANDOM_MAX,
    DAMAGE_RANDOM_MIN,
    MIN_DAMAGE,
    STAB_MULTIPLIER,
    TYPE_MUL_NORMAL,
)
from critter_battle.enums import MoveCategory, Type
from critter_battle.schema.critter import Critter
from critter_battle.schema.move_info import MoveInfo
from critter_battle.schema.results import DamageResult
from critter_battle.schema.stats import Stats
from critter_battle.type_effectiveness import TypeEffectiveness
from critter_battle.utils.rng import SeededState, uniform

logger = logging.getLogger(__name__)


def is_same_type(attacker_types: Iterable[Type], move_type: Type) -> bool:
    """STAB applies when the attacker's own types include the move type"""
    return move_type in list(attacker_types)


def roll_random_factor(state: SeededState) -> float:
    return uniform(state, DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_MAX)


def calculate_damage(
    level: int,
    power: int,
    attack_stat: int,
    defense_stat: int,
    stab: bool,
    type_effectiveness: float,
    random_factor: Optional[float] = None,
    state: Optional[SeededState] = None,
) -> int:
    """
    Compute the damage of one hit.

    Args:
        level: Attacker level
        power: Move base power; 0 means no damage
        attack_stat: Attack (physical) or spAtk (special) of the attacker
        defense_stat: Defense (physical) or spDef (special) of the defender
        stab: Whether the same-type bonus applies
        type_effectiveness: Combined type multiplier against the defender
        random_factor: Pinned random multiplier; drawn from `state` when None
        state: RNG carrier used when random_factor is None

    Returns:
        Damage >= 1 for any move with power; 0 when power is 0
    """
    if power <= 0:
        return 0

    if random_factor is None:
        random_factor = roll_random_factor(state) if state is not None else DAMAGE_RANDOM_MAX

    defense = max(1, defense_stat)
    base = ((2 * level / DAMAGE_LEVEL_DIVISOR + 2) * power * (attack_stat / defense)) / DAMAGE_BASE_DIVISOR + 2
    stab_multiplier = STAB_MULTIPLIER if stab else 1.0
    damage = math.floor(base / DAMAGE_FINAL_DIVISOR * stab_multiplier * type_effectiveness * random_factor)

    logger.debug(
        "damage lvl=%d pow=%d atk=%d def=%d stab=%s eff=%.2f rnd=%.3f -> %d",
        level,
        power,
        attack_stat,
        defense_stat,
        stab,
        type_effectiveness,
        random_factor,
        damage,
    )
    return max(MIN_DAMAGE, damage)


def calculate_move_damage(
    attacker: Critter,
    move: MoveInfo,
    defender_stats: Stats,
    defender_types: Iterable[Type],
    random_factor: Optional[float] = None,
    state: Optional[SeededState] = None,
) -> DamageResult:
    """Resolve a catalog move from an attacker against a defender's stats and types.

    Physical moves use attack/defense, special moves spAtk/spDef. Status moves
    deal no damage and carry no effectiveness flags.
    """
    if move.category == MoveCategory.STATUS:
        return DamageResult(damage=0)

    defender_types = list(defender_types)
    effectiveness = TypeEffectiveness.effectiveness(move.type, defender_types)
    stab = is_same_type(attacker.types, move.type)

    if move.category == MoveCategory.PHYSICAL:
        attack_stat, defense_stat = attacker.currentStats.attack, defender_stats.defense
    else:
        attack_stat, defense_stat = attacker.currentStats.spAtk, defender_stats.spDef

    damage = calculate_damage(attacker.level, move.power, attack_stat, defense_stat, stab, effectiveness, random_factor, state)
    return DamageResult(
        damage=damage,
        effectiveness=effectiveness,
        isSuperEffective=effectiveness > TYPE_MUL_NORMAL,
        isNotVeryEffective=effectiveness < TYPE_MUL_NORMAL,
        isStab=stab,
    )
