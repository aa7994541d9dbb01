"""
Capture and flee formulas

    p_catch = min(1, catchRate/255 * orb * statusBonus * (1 - hp/maxHp))
    p_flee  = min(0.9, 0.5 * playerSpeed/opponentSpeed)
"""

from typing import Optional

from critter_battle.constants import (
    CATCH_RATE_MAX,
    CATCH_SHAKE_THRESHOLDS,
    DEFAULT_ORB_MODIFIER,
    FLEE_BASE_CHANCE,
    FLEE_MAX_CHANCE,
    MAX_CATCH_SHAKES,
)
from critter_battle.enums import StatusEffect


def status_catch_bonus(status: Optional[StatusEffect]) -> float:
    if status is None:
        return 1.0
    return status.catch_bonus()


def catch_probability(
    catch_rate: int,
    current_hp: int,
    max_hp: int,
    orb_modifier: float = DEFAULT_ORB_MODIFIER,
    status_bonus: float = 1.0,
) -> float:
    """Probability in [0, 1]; strictly falls as the target's HP ratio rises below the cap"""
    if max_hp <= 0:
        return 0.0
    hp_ratio = min(1.0, max(0.0, current_hp / max_hp))
    rate = min(CATCH_RATE_MAX, max(0, catch_rate)) / CATCH_RATE_MAX
    probability = rate * max(0.0, orb_modifier) * max(0.0, status_bonus) * (1 - hp_ratio)
    return min(1.0, max(0.0, probability))


def is_caught(probability: float, roll: float) -> bool:
    """roll is uniform in [0, 1); a probability of 1 always catches, 0 never does"""
    return roll < probability


def shake_count(roll: float) -> int:
    """Map a uniform roll onto 1..4 orb shakes using CATCH_SHAKE_THRESHOLDS"""
    for index, threshold in enumerate(CATCH_SHAKE_THRESHOLDS):
        if roll <= threshold:
            return index + 1
    return MAX_CATCH_SHAKES


def flee_chance(player_speed: int, opponent_speed: int) -> float:
    if opponent_speed <= 0:
        return FLEE_MAX_CHANCE
    return min(FLEE_MAX_CHANCE, FLEE_BASE_CHANCE * max(0, player_speed) / opponent_speed)
