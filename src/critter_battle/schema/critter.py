import math
import uuid
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from critter_battle.constants import MAX_LEVEL, MAX_MON_MOVES, MAX_TOTAL_EXP, MAX_TYPES_PER_SPECIES, MIN_LEVEL
from critter_battle.enums import StatusEffect, Type
from critter_battle.leveling import total_exp_for_level
from critter_battle.schema.stats import Stats
from critter_battle.stats import compute_stats


def generate_critter_id() -> str:
    return f"critter_{uuid.uuid4().hex[:12]}"


class MoveInstance(BaseModel):
    """A move slot owned by one critter: catalog id plus its PP counters"""

    moveId: str = Field(min_length=1)
    currentPP: int = Field(ge=0, le=64)
    maxPP: int = Field(ge=1, le=64)

    @model_validator(mode="after")
    def _clamp_pp(self) -> "MoveInstance":
        if self.currentPP > self.maxPP:
            raise ValueError("currentPP cannot exceed maxPP")
        return self


class Critter(BaseModel):
    """
    A leveled, stat-bearing instance of a species

    Invariants kept by every mutator:
    - 0 <= currentHP <= maxHP
    - isFainted is True exactly when currentHP == 0
    - at most one status condition and at most MAX_MON_MOVES moves
    - experience never exceeds the level-100 total
    """

    id: str = Field(default_factory=generate_critter_id)
    speciesId: str
    nickname: Optional[str] = None
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    experience: int = Field(ge=0, le=MAX_TOTAL_EXP)

    # Snapshots copied from the species on creation/evolution
    baseStats: Stats
    types: list[Type] = Field(min_length=1, max_length=MAX_TYPES_PER_SPECIES)

    currentStats: Stats
    currentHP: int = Field(ge=0)
    maxHP: int = Field(ge=1)
    status: Optional[StatusEffect] = None
    isFainted: bool = False
    moves: list[MoveInstance] = Field(default_factory=list, max_length=MAX_MON_MOVES)

    @model_validator(mode="after")
    def _check_hp(self) -> "Critter":
        if self.currentHP > self.maxHP:
            raise ValueError(f"currentHP {self.currentHP} exceeds maxHP {self.maxHP}")
        if self.isFainted != (self.currentHP == 0):
            raise ValueError("isFainted must be true exactly when currentHP is 0")
        return self

    # ------------------------------------------------------------------
    # Stats / leveling
    # ------------------------------------------------------------------

    @property
    def hp_ratio(self) -> float:
        return self.currentHP / self.maxHP

    def display_name(self, species_name: str) -> str:
        return self.nickname or species_name

    def recalculate_stats(self, preserve_hp_ratio: bool = True) -> None:
        """Recompute currentStats from baseStats and level.

        With preserve_hp_ratio the new currentHP is ceil(newMax * oldRatio), so
        a level-up never lowers the HP ratio and a fainted critter stays at 0.
        """
        ratio = self.hp_ratio
        self.currentStats = compute_stats(self.baseStats, self.level)
        self.maxHP = self.currentStats.hp
        if preserve_hp_ratio:
            self.currentHP = min(self.maxHP, math.ceil(self.maxHP * ratio))
        else:
            self.currentHP = self.maxHP
        self.isFainted = self.currentHP == 0

    def add_experience(self, amount: int) -> list[int]:
        """Add experience and run the level-up loop.

        Args:
            amount: Experience to add; negative amounts are ignored.

        Returns:
            Every level reached during this call, in order.
        """
        levels: list[int] = []
        if amount <= 0:
            return levels
        self.experience = min(MAX_TOTAL_EXP, self.experience + amount)
        while self.level < MAX_LEVEL and self.experience >= total_exp_for_level(self.level + 1):
            self.level += 1
            levels.append(self.level)
            self.recalculate_stats()
        return levels

    # ------------------------------------------------------------------
    # HP and status
    # ------------------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Subtract HP, clamped at 0. Returns the HP actually removed."""
        dealt = min(self.currentHP, max(0, amount))
        self.currentHP -= dealt
        if self.currentHP == 0:
            self.isFainted = True
        return dealt

    def restore_hp(self, amount: int) -> int:
        """Heal a non-fainted critter up to maxHP. Returns the HP actually restored."""
        if self.isFainted or amount <= 0:
            return 0
        restored = min(self.maxHP - self.currentHP, amount)
        self.currentHP += restored
        return restored

    def heal(self) -> None:
        """Full restore: HP to max, status cleared, fainted flag cleared"""
        self.currentHP = self.maxHP
        self.status = None
        self.isFainted = False

    def revive(self, percent: float) -> bool:
        if not self.isFainted:
            return False
        self.currentHP = max(1, min(self.maxHP, math.floor(self.maxHP * percent / 100)))
        self.isFainted = False
        self.status = None
        return True

    def apply_status(self, status: StatusEffect) -> bool:
        """Set a status condition. Fainted critters and stacking are refused."""
        if self.isFainted or self.status is not None:
            return False
        self.status = status
        return True

    def clear_status(self) -> None:
        self.status = None

    # ------------------------------------------------------------------
    # Move slots
    # ------------------------------------------------------------------

    def add_move(self, move: MoveInstance) -> bool:
        if len(self.moves) >= MAX_MON_MOVES or self.has_move(move.moveId):
            return False
        self.moves.append(move)
        return True

    def remove_move(self, move_id: str) -> bool:
        before = len(self.moves)
        self.moves = [m for m in self.moves if m.moveId != move_id]
        return len(self.moves) != before

    def has_move(self, move_id: str) -> bool:
        return any(m.moveId == move_id for m in self.moves)

    def get_move(self, move_id: str) -> Optional[MoveInstance]:
        for move in self.moves:
            if move.moveId == move_id:
                return move
        return None

    def use_move_pp(self, move_id: str) -> bool:
        move = self.get_move(move_id)
        if move is None or move.currentPP <= 0:
            return False
        move.currentPP -= 1
        return True

    def reset_move_pp(self) -> None:
        for move in self.moves:
            move.currentPP = move.maxPP

    def usable_moves(self) -> list[MoveInstance]:
        return [m for m in self.moves if m.currentPP > 0]
