from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from critter_battle.enums import BattleEndReason, BattlePhase, BattleStatus


class DamageResult(BaseModel):
    """Outcome of resolving one damaging move against a defender"""

    damage: int = Field(ge=0)
    effectiveness: float = Field(ge=0, default=1.0)
    isSuperEffective: bool = False
    isNotVeryEffective: bool = False
    isStab: bool = False


class AIDecision(BaseModel):
    class Action(str, Enum):
        MOVE = "move"
        SWITCH = "switch"

    action: Action = Action.MOVE
    moveId: Optional[str] = None  # None when the critter has no moves at all
    switchCritterIndex: Optional[int] = Field(None, ge=0)


class LevelUpResult(BaseModel):
    critterId: str
    experienceGained: int = Field(ge=0)
    oldLevel: int
    newLevel: int
    levelsGained: list[int] = Field(default_factory=list)
    statChanges: dict[str, int] = Field(default_factory=dict)

    @property
    def leveled_up(self) -> bool:
        return self.newLevel > self.oldLevel


class ExperienceAward(BaseModel):
    """Experience handed to the winning side's active critter after a knockout"""

    participantId: str
    levelUp: LevelUpResult
    newMoves: list[str] = Field(default_factory=list)  # queued as pending move-learn prompts
    evolutionTarget: Optional[str] = None  # queued as a pending evolution prompt


class EvolutionInfo(BaseModel):
    fromSpeciesId: str
    toSpeciesId: str
    level: int


class TurnReport(BaseModel):
    """What one submitted action produced, returned by BattleSession.submit"""

    accepted: bool
    turn: int = 0
    messages: list[str] = Field(default_factory=list)
    phase: BattlePhase
    battleStatus: BattleStatus = BattleStatus.ACTIVE
    endReason: BattleEndReason = BattleEndReason.NONE
