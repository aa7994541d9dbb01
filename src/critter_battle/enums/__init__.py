from critter_battle.enums.type import Type
from critter_battle.enums.status import StatusEffect, STATUS_CATCH_BONUS
from critter_battle.enums.move import MoveCategory, MoveEffectKind
from critter_battle.enums.item import ItemKind, ItemEffectKind
from critter_battle.enums.other import AITier, BattleEndReason, BattleEvent, BattlePhase, BattleStatus, TurnOrder
