from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from critter_battle.constants import DEFAULT_BASE_EXP, MAX_LEVEL, MAX_TYPES_PER_SPECIES, MIN_LEVEL
from critter_battle.enums import Type
from critter_battle.schema.stats import Stats


class SpeciesInfo(BaseModel):
    """Immutable species record - the template every Critter instance is built from"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    types: list[Type] = Field(min_length=1, max_length=MAX_TYPES_PER_SPECIES)
    baseStats: Stats
    moves: list[str] = Field(default_factory=list)  # base move list, first four become starting moves

    # Evolution chain
    evolvesInto: Optional[str] = None
    evolutionLevel: Optional[int] = Field(None, ge=MIN_LEVEL, le=MAX_LEVEL)
    evolvesFrom: Optional[str] = None

    catchRate: int = Field(ge=0, le=255)
    baseExp: int = Field(ge=1, le=1000, default=DEFAULT_BASE_EXP)

    # Dex descriptors
    dexEntry: str = ""
    height: float = Field(ge=0, default=0.0)  # meters
    weight: float = Field(ge=0, default=0.0)  # kilograms


class LearnsetEntry(BaseModel):
    """One (level, move) pair of a species learnset"""

    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    moveId: str = Field(min_length=1)
