from typing import Iterable

from critter_battle.constants import (
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_SUPER_EFFECTIVE,
)
from critter_battle.enums import Type

# Format: [AttackingType, DefendingType, Multiplier] triplets
# Every pair not listed is neutral (x1.0).
TYPE_EFFECTIVENESS_CHART = [
    # Fire
    Type.FIRE,
    Type.FIRE,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.FIRE,
    Type.WATER,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.FIRE,
    Type.GRASS,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.FIRE,
    Type.FAIRY,
    TYPE_MUL_SUPER_EFFECTIVE,
    # Water
    Type.WATER,
    Type.FIRE,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.WATER,
    Type.WATER,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.WATER,
    Type.GRASS,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.WATER,
    Type.GROUND,
    TYPE_MUL_SUPER_EFFECTIVE,
    # Grass
    Type.GRASS,
    Type.FIRE,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.GRASS,
    Type.WATER,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.GRASS,
    Type.GRASS,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.GRASS,
    Type.GROUND,
    TYPE_MUL_SUPER_EFFECTIVE,
    # Electric
    Type.ELECTRIC,
    Type.WATER,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.ELECTRIC,
    Type.GRASS,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.ELECTRIC,
    Type.ELECTRIC,
    TYPE_MUL_NOT_EFFECTIVE,
    # Psychic
    Type.PSYCHIC,
    Type.PSYCHIC,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.PSYCHIC,
    Type.DARK,
    TYPE_MUL_SUPER_EFFECTIVE,
    # Ground
    Type.GROUND,
    Type.FIRE,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.GROUND,
    Type.GRASS,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.GROUND,
    Type.ELECTRIC,
    TYPE_MUL_SUPER_EFFECTIVE,
    # Dark
    Type.DARK,
    Type.PSYCHIC,
    TYPE_MUL_SUPER_EFFECTIVE,
    Type.DARK,
    Type.DARK,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.DARK,
    Type.FAIRY,
    TYPE_MUL_NOT_EFFECTIVE,
    # Fairy
    Type.FAIRY,
    Type.FIRE,
    TYPE_MUL_NOT_EFFECTIVE,
    Type.FAIRY,
    Type.DARK,
    TYPE_MUL_SUPER_EFFECTIVE,
]

_CHART_LOOKUP: dict[tuple[Type, Type], float] = {
    (TYPE_EFFECTIVENESS_CHART[i], TYPE_EFFECTIVENESS_CHART[i + 1]): TYPE_EFFECTIVENESS_CHART[i + 2] for i in range(0, len(TYPE_EFFECTIVENESS_CHART), 3)
}


class TypeEffectiveness:
    """
    Type effectiveness table

    Single-pair lookups come straight from TYPE_EFFECTIVENESS_CHART; effectiveness
    against a multi-typed defender is the product of the per-type multipliers.
    The strength/weakness queries read the same table so UI and combat agree.
    """

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> float:
        """
        Get the multiplier of one attacking type against one defending type.

        Returns:
            TYPE_MUL_NO_EFFECT (0.0), TYPE_MUL_NOT_EFFECTIVE (0.5),
            TYPE_MUL_NORMAL (1.0) or TYPE_MUL_SUPER_EFFECTIVE (2.0)
        """
        return _CHART_LOOKUP.get((attacking_type, defending_type), TYPE_MUL_NORMAL)

    @staticmethod
    def effectiveness(attacking_type: Type, defending_types: Iterable[Type]) -> float:
        """Combined multiplier against every defender type; an empty list is neutral"""
        multiplier = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            multiplier *= TypeEffectiveness.get_effectiveness(attacking_type, defending_type)
        return max(multiplier, TYPE_MUL_NO_EFFECT)

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.effectiveness(attacking_type, defending_types) > TYPE_MUL_NORMAL

    @staticmethod
    def is_not_very_effective(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.effectiveness(attacking_type, defending_types) < TYPE_MUL_NORMAL

    @staticmethod
    def is_immune(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.effectiveness(attacking_type, defending_types) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def get_resistance(defending_types: Iterable[Type], move_type: Type) -> float:
        """Multiplier the defender takes from a move type (<= 1.0 means resisted or neutral)"""
        return TypeEffectiveness.effectiveness(move_type, defending_types)

    @staticmethod
    def all_types() -> list[Type]:
        return list(Type)

    @staticmethod
    def get_strength_against(defending_types: Iterable[Type]) -> list[Type]:
        """Attacking types that hit the whole defender type set super-effectively"""
        defenders = list(defending_types)
        return [t for t in Type if TypeEffectiveness.effectiveness(t, defenders) > TYPE_MUL_NORMAL]

    @staticmethod
    def get_weak_against(attacking_types: Iterable[Type]) -> list[Type]:
        """Defending types that at least one of the attacker's types hits super-effectively"""
        attackers = list(attacking_types)
        return [d for d in Type if any(TypeEffectiveness.get_effectiveness(a, d) > TYPE_MUL_NORMAL for a in attackers)]

    @staticmethod
    def get_effectiveness_description(attacking_type: Type, defending_types: Iterable[Type]) -> str:
        """Battle message for the multiplier, or "" for neutral hits"""
        multiplier = TypeEffectiveness.effectiveness(attacking_type, defending_types)
        if multiplier == TYPE_MUL_NO_EFFECT:
            return MSG_NO_EFFECT
        if multiplier < TYPE_MUL_NORMAL:
            return MSG_NOT_VERY_EFFECTIVE
        if multiplier > TYPE_MUL_NORMAL:
            return MSG_SUPER_EFFECTIVE
        return ""
