from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from critter_battle.enums import MoveCategory, MoveEffectKind, Type


class SecondaryEffect(BaseModel):
    """Optional rider on a move: applied to the target (or user, for heals) with `chance` percent"""

    model_config = ConfigDict(frozen=True)

    kind: MoveEffectKind
    chance: int = Field(ge=0, le=100, default=100)
    value: float = Field(ge=0, default=0.0)  # heal percent / boost magnitude


class MoveInfo(BaseModel):
    """Immutable move definition"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: Type
    power: int = Field(ge=0, le=255)  # 0 for status moves
    accuracy: int = Field(ge=0, le=100)
    basePP: int = Field(ge=1, le=64)
    category: MoveCategory
    priority: int = Field(ge=-7, le=7, default=0)
    description: str = ""
    effect: Optional[SecondaryEffect] = None

    @property
    def is_status(self) -> bool:
        return self.category == MoveCategory.STATUS
