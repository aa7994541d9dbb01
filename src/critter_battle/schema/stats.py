from pydantic import BaseModel, Field


class Stats(BaseModel):
    """Six-stat block shared by species base stats and a critter's derived stats"""

    hp: int = Field(ge=0, le=65535)
    attack: int = Field(ge=0, le=65535)
    defense: int = Field(ge=0, le=65535)
    spAtk: int = Field(ge=0, le=65535)  # special attack
    spDef: int = Field(ge=0, le=65535)  # special defense
    speed: int = Field(ge=0, le=65535)
