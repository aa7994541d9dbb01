import uuid
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from critter_battle.constants import MIN_PARTY_SIZE, PARTY_SIZE
from critter_battle.enums import BattleEndReason, BattleStatus
from critter_battle.schema.critter import Critter


def generate_battle_id() -> str:
    return f"battle_{uuid.uuid4().hex[:12]}"


class BattleParticipant(BaseModel):
    """One side of a battle: a named owner and the party it fights with"""

    id: str = Field(min_length=1)
    name: str
    party: list[Critter] = Field(min_length=MIN_PARTY_SIZE, max_length=PARTY_SIZE)
    currentCritterIndex: int = Field(ge=0, default=0)

    @model_validator(mode="after")
    def _check_index(self) -> "BattleParticipant":
        if self.currentCritterIndex >= len(self.party):
            raise ValueError(f"currentCritterIndex {self.currentCritterIndex} outside party of {len(self.party)}")
        return self

    @property
    def active_critter(self) -> Critter:
        return self.party[self.currentCritterIndex]

    def find_critter(self, critter_id: str) -> Optional[Critter]:
        for critter in self.party:
            if critter.id == critter_id:
                return critter
        return None


class PendingMoveLearn(BaseModel):
    """A move the critter may learn after leveling; waits for confirmation"""

    critterId: str
    moveId: str
    level: int


class PendingEvolution(BaseModel):
    critterId: str
    fromSpeciesId: str
    toSpeciesId: str


class Battle(BaseModel):
    """
    Full mutable state of one battle session

    Plain data only (no callbacks or registries), so `model_dump()` is the
    save format and `model_validate()` restores it.
    """

    id: str = Field(default_factory=generate_battle_id)
    player: BattleParticipant
    opponent: BattleParticipant
    turnCount: int = Field(ge=0, default=0)
    isWildEncounter: bool = False
    isTrainerBattle: bool = True
    log: list[str] = Field(default_factory=list)

    # Outcome. battleStatus leaves ACTIVE at most once and never returns.
    battleStatus: BattleStatus = BattleStatus.ACTIVE
    endReason: BattleEndReason = BattleEndReason.NONE

    # RNG
    rng_seed: int = Field(ge=0, le=0xFFFFFFFF, default=0)

    # Prompts queued by experience distribution, applied only on confirmation
    pendingMoveLearns: list[PendingMoveLearn] = Field(default_factory=list)
    pendingEvolutions: list[PendingEvolution] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_kind(self) -> "Battle":
        if self.isWildEncounter and self.isTrainerBattle:
            raise ValueError("a battle is either a wild encounter or a trainer battle")
        return self

    @property
    def is_active(self) -> bool:
        return self.battleStatus == BattleStatus.ACTIVE
