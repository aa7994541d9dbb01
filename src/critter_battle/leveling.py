"""
Experience curve and experience rewards

Total experience needed to *reach* level L is L^3, capped at the level-100
total. A critter created at level L starts with exactly L^3 experience.
"""

import logging
import math
from typing import TYPE_CHECKING

from critter_battle.constants import (
    BENCH_EXP_DIVISOR,
    EXP_CURVE_EXPONENT,
    EXP_DIVISOR,
    MAX_LEVEL,
    MAX_TOTAL_EXP,
    MIN_EXP_GAIN,
    MIN_LEVEL,
    TRAINER_EXP_MULTIPLIER,
)
from critter_battle.schema.results import LevelUpResult

if TYPE_CHECKING:
    from critter_battle.schema.critter import Critter

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative values used here"""
    return math.floor(value + 0.5)


def total_exp_for_level(level: int) -> int:
    return min(MAX_TOTAL_EXP, max(level, MIN_LEVEL) ** EXP_CURVE_EXPONENT)


def exp_needed_for_next_level(level: int, experience: int) -> int:
    """Experience still missing before the next level-up (0 at max level)"""
    if level >= MAX_LEVEL:
        return 0
    return max(0, total_exp_for_level(level + 1) - experience)


def level_exp_range(level: int) -> tuple[int, int]:
    """(start, end) total experience of the given level's bar"""
    start = total_exp_for_level(level)
    end = total_exp_for_level(min(level + 1, MAX_LEVEL))
    return start, end


def exp_bar_value(level: int, experience: int) -> float:
    """Fill of the experience bar in [0, 1] for the current level"""
    if level >= MAX_LEVEL:
        return 1.0
    start, end = level_exp_range(level)
    if end <= start:
        return 1.0
    return min(1.0, max(0.0, (experience - start) / (end - start)))


def exp_progress_percent(level: int, experience: int) -> int:
    return round(exp_bar_value(level, experience) * 100)


def exp_needed_to_reach_level(current_experience: int, target_level: int) -> int:
    target = min(max(target_level, MIN_LEVEL), MAX_LEVEL)
    return max(0, total_exp_for_level(target) - current_experience)


def experience_gained_for(base_exp: int, defeated_level: int, was_active_participant: bool, is_wild_opponent: bool) -> int:
    """Experience awarded for defeating a critter.

    Args:
        base_exp: Species experience yield of the defeated critter.
        defeated_level: Level of the defeated critter.
        was_active_participant: Active battlers earn full experience, the bench half.
        is_wild_opponent: Trainer-owned critters are worth half again.

    Returns:
        The experience award, never below 1.
    """
    divisor = 1 if was_active_participant else BENCH_EXP_DIVISOR
    exp = round_half_up(base_exp * defeated_level / EXP_DIVISOR / divisor)
    if not is_wild_opponent:
        exp = round_half_up(exp * TRAINER_EXP_MULTIPLIER)
    return max(MIN_EXP_GAIN, exp)


def apply_experience(critter: "Critter", amount: int) -> LevelUpResult:
    """Add experience to a critter and report what changed"""
    old_level = critter.level
    old_stats = critter.currentStats.model_copy()
    levels = critter.add_experience(amount)
    new_stats = critter.currentStats
    deltas = {name: getattr(new_stats, name) - getattr(old_stats, name) for name in type(new_stats).model_fields}
    if levels:
        logger.info("Critter %s grew from level %d to %d", critter.id, old_level, critter.level)
    return LevelUpResult(
        critterId=critter.id,
        experienceGained=max(0, amount),
        oldLevel=old_level,
        newLevel=critter.level,
        levelsGained=levels,
        statChanges=deltas,
    )
