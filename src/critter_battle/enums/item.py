from enum import Enum


class ItemKind(str, Enum):
    CAPTURE_ORB = "CaptureOrb"
    POTION = "Potion"
    KEY_ITEM = "KeyItem"


class ItemEffectKind(str, Enum):
    HEAL = "heal"  # value = flat HP restored
    REVIVE = "revive"  # value = percent of max HP restored on revival
    CURE_STATUS = "cure-status"  # status = which condition is cured
    FULL_HEAL = "full-heal"
