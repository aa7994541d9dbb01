from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from critter_battle.enums import ItemEffectKind, ItemKind, StatusEffect


class ItemEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ItemEffectKind
    value: int = Field(ge=0, default=0)  # flat HP for heal, percent of max HP for revive
    status: Optional[StatusEffect] = None  # condition removed by cure-status


class ItemInfo(BaseModel):
    """Immutable item record - capture orbs, potions and key items"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    kind: ItemKind
    catchModifier: Optional[float] = Field(None, gt=0)  # capture orbs only
    effect: Optional[ItemEffect] = None
    price: Optional[int] = Field(None, ge=0)  # None = not sold

    @property
    def is_capture_orb(self) -> bool:
        return self.kind == ItemKind.CAPTURE_ORB
