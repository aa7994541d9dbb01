from enum import Enum


class StatusEffect(str, Enum):
    """Non-volatile status conditions. A critter carries at most one."""

    BURN = "Burn"
    POISON = "Poison"
    PARALYZE = "Paralyze"
    SLEEP = "Sleep"
    FREEZE = "Freeze"
    CONFUSION = "Confusion"

    def catch_bonus(self) -> float:
        """Capture multiplier granted while the target suffers this status"""
        return STATUS_CATCH_BONUS.get(self, 1.0)


# Sleep/Freeze are the strongest capture aids, the damaging/slowing statuses are weaker.
STATUS_CATCH_BONUS: dict[StatusEffect, float] = {
    StatusEffect.SLEEP: 2.0,
    StatusEffect.FREEZE: 2.0,
    StatusEffect.PARALYZE: 1.5,
    StatusEffect.POISON: 1.5,
    StatusEffect.BURN: 1.5,
}
