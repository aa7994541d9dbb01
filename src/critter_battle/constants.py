# =============================================================================
# STAT FORMULA
# =============================================================================
DEFAULT_IV = 31  # Fixed individual value for every stat
DEFAULT_NATURE_MULTIPLIER = 1.0  # Neutral nature
HP_LEVEL_BONUS = 100  # maxHP = floor((2*base + IV + 100) * level / 100 + 5)
STAT_FLAT_BONUS = 5
MIN_STAT_VALUE = 1

# =============================================================================
# LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4
MIN_PARTY_SIZE = 1
PARTY_SIZE = 6
MAX_TYPES_PER_SPECIES = 2
DEFAULT_BASE_EXP = 64  # Experience yield for species that do not declare one

# =============================================================================
# EXPERIENCE
# =============================================================================
EXP_CURVE_EXPONENT = 3  # total exp for level L is L^3
MAX_TOTAL_EXP = MAX_LEVEL**EXP_CURVE_EXPONENT
EXP_DIVISOR = 7
BENCH_EXP_DIVISOR = 2  # Benched party members earn half
TRAINER_EXP_MULTIPLIER = 0.5  # Trainer-owned critters are worth half
MIN_EXP_GAIN = 1

# =============================================================================
# DAMAGE CALCULATION
# =============================================================================
DAMAGE_RANDOM_MIN = 0.85
DAMAGE_RANDOM_MAX = 1.0
STAB_MULTIPLIER = 1.5
MIN_DAMAGE = 1
DAMAGE_LEVEL_DIVISOR = 5
DAMAGE_BASE_DIVISOR = 100
DAMAGE_FINAL_DIVISOR = 25

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0

# =============================================================================
# CAPTURE
# =============================================================================
CATCH_RATE_MAX = 255
DEFAULT_ORB_MODIFIER = 1.0
CATCH_SHAKE_THRESHOLDS = (0.3, 0.6, 0.85, 1.0)
MAX_CATCH_SHAKES = 4

# =============================================================================
# FLEE
# =============================================================================
FLEE_BASE_CHANCE = 0.5
FLEE_MAX_CHANCE = 0.9

# =============================================================================
# AI
# =============================================================================
TRAINER_SCORE_JITTER = 5
BOSS_SCORE_JITTER = 2
BOSS_EFFECTIVENESS_WEIGHT = 1.5
STATUS_MOVE_SCORE_POWER = 1  # Status moves score as if they had power 1
SWITCH_HP_THRESHOLD = 0.5

# =============================================================================
# ACCURACY
# =============================================================================
ACCURACY_ROLL_MAX = 100

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_NO_EFFECT = "It has no effect!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_MISSED = "The attack missed!"
MSG_BROKE_FREE = "The critter broke free!"
MSG_CANT_FLEE_TRAINER = "Can't flee from a trainer battle!"
MSG_FLED = "Got away safely!"
MSG_FLEE_FAILED = "Couldn't escape!"
MSG_NO_PP = "There's no PP left for this move!"
MSG_NO_MOVE_IN_SLOT = "There's no move in that slot!"
MSG_CANT_SWITCH = "That critter can't be sent out!"
MSG_ITEM_NO_EFFECT = "That item can't be used now!"
MSG_CANT_CAPTURE_TRAINER = "You can't capture another trainer's critter!"
MSG_CANT_CAPTURE_FAINTED = "The target has already fainted!"
