from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from critter_battle.constants import MAX_LEVEL, MAX_MON_MOVES, MIN_LEVEL, PARTY_SIZE
from critter_battle.enums import AITier


class TrainerCritter(BaseModel):
    """Roster slot of a trainer: species + level, optional fixed moves"""

    model_config = ConfigDict(frozen=True)

    speciesId: str
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    moveIds: Optional[list[str]] = Field(None, max_length=MAX_MON_MOVES)


class TrainerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    title: str = ""
    aiTier: AITier = AITier.TRAINER
    party: list[TrainerCritter] = Field(min_length=1, max_length=PARTY_SIZE)
    reward: int = Field(ge=0, default=0)
