from enum import Enum


class MoveCategory(str, Enum):
    """Damage category - decides which attacking/defending stats are used"""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"


class MoveEffectKind(str, Enum):
    """Secondary effect attached to a move definition"""

    BURN = "burn"
    PARALYZE = "paralyze"
    SLEEP = "sleep"
    POISON = "poison"
    HEAL = "heal"  # value = percent of the user's max HP
    STAT_BOOST = "stat-boost"
    LOWER_SP_DEF = "lower-spdef"
