from enum import Enum, IntEnum


class BattleStatus(str, Enum):
    """Battle outcome status. Transitions out of ACTIVE are one-way."""

    ACTIVE = "Active"
    PLAYER_WON = "PlayerWon"
    OPPONENT_WON = "OpponentWon"
    ERROR = "Error"

    def is_terminal(self) -> bool:
        return self is not BattleStatus.ACTIVE


class BattleEndReason(str, Enum):
    """Why a battle stopped issuing turns, independent of who won"""

    NONE = "None"
    KNOCKOUT = "Knockout"
    CAUGHT = "Caught"
    FLED = "Fled"
    ABORTED = "Aborted"


class TurnOrder(str, Enum):
    PLAYER = "player"
    OPPONENT = "opponent"


class AITier(IntEnum):
    """Opponent AI strength, ordered from weakest to strongest"""

    WILD = 0
    TRAINER = 1
    BOSS = 2


class BattlePhase(str, Enum):
    """Battle session phases sequenced by the BattleStateMachine"""

    INTRO = "intro"
    PRE_BATTLE_INFO = "preBattleInfo"
    BRING_OUT_CRITTER = "bringOutCritter"
    PLAYER_INPUT = "playerInput"
    ENEMY_INPUT = "enemyInput"
    BATTLE = "battle"
    POST_ATTACK_CHECK = "postAttackCheck"
    FINISHED = "finished"
    FLEEING = "fleeing"
    GAIN_EXPERIENCE = "gainExperience"
    SWITCH_CRITTER = "switchCritter"
    USED_ITEM = "usedItem"
    CAPTURE_ITEM_USED = "captureItemUsed"
    CAUGHT_CRITTER = "caughtCritter"


class BattleEvent(str, Enum):
    """Outbound notification names. Payloads are plain dicts."""

    STARTED = "battle:started"
    ENDED = "battle:ended"
    VICTORY = "battle:victory"
    DEFEAT = "battle:defeat"
    ERROR = "battle:error"
    DAMAGE_DEALT = "battle:damageDealt"
    FAINTED = "battle:fainted"
    SWITCHED = "battle:switched"
    STATUS_APPLIED = "battle:statusApplied"
    HEALED = "battle:healed"
    MISSED = "battle:missed"
    EXPERIENCE_GAINED = "battle:experienceGained"
    LEVEL_UP = "battle:levelUp"
    CAPTURED = "battle:captured"
    CAPTURE_FAILED = "battle:captureFailed"
    FLED = "battle:fled"
    MOVE_LEARN_AVAILABLE = "battle:moveLearnAvailable"
    EVOLUTION_AVAILABLE = "battle:evolutionAvailable"
    MOVE_LEARNED = "movelearned:success"
    MOVE_REPLACED = "movelearned:replaced"
    EVOLVED = "evolution:completed"
    STATE_EXITING = "battle:state:exiting"
    STATE_ENTERED = "battle:state:entered"

    @staticmethod
    def for_phase(phase: "BattlePhase") -> str:
        """Per-phase notification name, e.g. battle:state:playerInput"""
        return f"battle:state:{phase.value}"
