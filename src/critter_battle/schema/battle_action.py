from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field

from critter_battle.constants import MAX_MON_MOVES, PARTY_SIZE


class BattleAction(BaseModel):
    """Player input for one turn of a headless battle session"""

    class ActionType(IntEnum):
        MOVE = 0
        SWITCH = 1
        ITEM = 2
        FLEE = 3

    action_type: ActionType

    # For MOVE
    move_slot: Optional[int] = Field(None, ge=0, lt=MAX_MON_MOVES, description="Which move slot (0-3)")

    # For SWITCH
    party_slot: Optional[int] = Field(None, ge=0, lt=PARTY_SIZE, description="Which party slot to switch to")

    # For ITEM
    item_id: Optional[str] = Field(None, description="Item to use on the active critter or the wild target")

    @classmethod
    def move(cls, slot: int) -> "BattleAction":
        return cls(action_type=cls.ActionType.MOVE, move_slot=slot)

    @classmethod
    def switch(cls, slot: int) -> "BattleAction":
        return cls(action_type=cls.ActionType.SWITCH, party_slot=slot)

    @classmethod
    def item(cls, item_id: str) -> "BattleAction":
        return cls(action_type=cls.ActionType.ITEM, item_id=item_id)

    @classmethod
    def flee(cls) -> "BattleAction":
        return cls(action_type=cls.ActionType.FLEE)
