from critter_battle.constants import (
    DEFAULT_IV,
    DEFAULT_NATURE_MULTIPLIER,
    HP_LEVEL_BONUS,
    MIN_STAT_VALUE,
    STAT_FLAT_BONUS,
)
from critter_battle.schema.stats import Stats


def compute_hp(base_hp: int, level: int, iv: int = DEFAULT_IV) -> int:
    """maxHP = floor((2*base + IV + 100) * level / 100 + 5), minimum 1"""
    hp = ((2 * base_hp + iv + HP_LEVEL_BONUS) * level) // 100 + STAT_FLAT_BONUS
    return max(MIN_STAT_VALUE, hp)


def compute_stat(base: int, level: int, iv: int = DEFAULT_IV, nature_multiplier: float = DEFAULT_NATURE_MULTIPLIER) -> int:
    """stat = floor(((2*base + IV) * level / 100 + 5) * nature), minimum 1"""
    raw = ((2 * base + iv) * level) / 100 + STAT_FLAT_BONUS
    return max(MIN_STAT_VALUE, int(raw * nature_multiplier))


def compute_stats(base_stats: Stats, level: int, iv: int = DEFAULT_IV, nature_multiplier: float = DEFAULT_NATURE_MULTIPLIER) -> Stats:
    """Derive the full stat block for a level from species base stats"""
    return Stats(
        hp=compute_hp(base_stats.hp, level, iv),
        attack=compute_stat(base_stats.attack, level, iv, nature_multiplier),
        defense=compute_stat(base_stats.defense, level, iv, nature_multiplier),
        spAtk=compute_stat(base_stats.spAtk, level, iv, nature_multiplier),
        spDef=compute_stat(base_stats.spDef, level, iv, nature_multiplier),
        speed=compute_stat(base_stats.speed, level, iv, nature_multiplier),
    )
