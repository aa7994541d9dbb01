import logging
from typing import Callable, Optional

from critter_battle.enums import BattleEvent, BattlePhase
from critter_battle.errors import InvalidTransitionError
from critter_battle.events import EventBus

logger = logging.getLogger(__name__)

PhaseHandler = Callable[[], None]

# Legal next phases for every phase. FINISHED is terminal.
PHASE_GRAPH: dict[BattlePhase, frozenset[BattlePhase]] = {
    BattlePhase.INTRO: frozenset({BattlePhase.PRE_BATTLE_INFO}),
    BattlePhase.PRE_BATTLE_INFO: frozenset({BattlePhase.BRING_OUT_CRITTER}),
    BattlePhase.BRING_OUT_CRITTER: frozenset({BattlePhase.PLAYER_INPUT}),
    BattlePhase.PLAYER_INPUT: frozenset(
        {
            BattlePhase.ENEMY_INPUT,
            BattlePhase.SWITCH_CRITTER,
            BattlePhase.USED_ITEM,
            BattlePhase.CAPTURE_ITEM_USED,
            BattlePhase.FLEEING,
        }
    ),
    BattlePhase.ENEMY_INPUT: frozenset({BattlePhase.BATTLE, BattlePhase.PLAYER_INPUT}),
    BattlePhase.BATTLE: frozenset({BattlePhase.POST_ATTACK_CHECK}),
    BattlePhase.POST_ATTACK_CHECK: frozenset(
        {
            BattlePhase.PLAYER_INPUT,
            BattlePhase.FINISHED,
            BattlePhase.SWITCH_CRITTER,
            BattlePhase.GAIN_EXPERIENCE,
            BattlePhase.FLEEING,
        }
    ),
    BattlePhase.SWITCH_CRITTER: frozenset({BattlePhase.ENEMY_INPUT, BattlePhase.PLAYER_INPUT, BattlePhase.FINISHED}),
    BattlePhase.GAIN_EXPERIENCE: frozenset({BattlePhase.BRING_OUT_CRITTER, BattlePhase.PLAYER_INPUT, BattlePhase.FINISHED}),
    BattlePhase.USED_ITEM: frozenset({BattlePhase.ENEMY_INPUT, BattlePhase.FINISHED}),
    BattlePhase.CAPTURE_ITEM_USED: frozenset({BattlePhase.CAUGHT_CRITTER, BattlePhase.ENEMY_INPUT}),
    BattlePhase.CAUGHT_CRITTER: frozenset({BattlePhase.FINISHED}),
    BattlePhase.FLEEING: frozenset({BattlePhase.FINISHED, BattlePhase.ENEMY_INPUT}),
    BattlePhase.FINISHED: frozenset(),
}


class BattleStateMachine:
    """
    Battle phase sequencer

    One transition at a time: a request made while another transition is in
    flight (e.g. from inside a phase handler) is dropped, not queued. Every
    phase starts with a default handler that emits `battle:state:<phase>`;
    register_handler replaces it.
    """

    def __init__(self, events: Optional[EventBus] = None):
        self.events = events if events is not None else EventBus()
        self._current = BattlePhase.INTRO
        self._transitioning = False
        self._handlers: dict[BattlePhase, PhaseHandler] = {}
        for phase in BattlePhase:
            self.register_handler(phase, self._default_handler(phase))

    def _default_handler(self, phase: BattlePhase) -> PhaseHandler:
        def handler() -> None:
            self.events.emit(BattleEvent.for_phase(phase))

        return handler

    def register_handler(self, phase: BattlePhase, handler: PhaseHandler) -> None:
        self._handlers[phase] = handler

    def can_transition(self, phase: BattlePhase) -> bool:
        return phase in PHASE_GRAPH[self._current]

    def transition_to(self, phase: BattlePhase, strict: bool = False) -> bool:
        """Move to `phase`, running its handler.

        Returns False (and changes nothing) while another transition is in
        flight, when already in `phase`, when the current phase is FINISHED,
        or when the phase graph has no such edge. With strict=True the last
        case raises InvalidTransitionError instead.
        """
        if self._transitioning:
            logger.warning("Dropped transition to %s: transition already in flight", phase.value)
            return False
        if phase == self._current:
            return False
        if self._current == BattlePhase.FINISHED:
            logger.warning("Dropped transition to %s: battle already finished", phase.value)
            return False
        if not self.can_transition(phase):
            if strict:
                raise InvalidTransitionError(self._current.value, phase.value)
            logger.warning("Rejected transition %s -> %s", self._current.value, phase.value)
            return False

        self._transitioning = True
        try:
            self.events.emit(BattleEvent.STATE_EXITING, {"from": self._current.value})
            handler = self._handlers.get(phase)
            if handler is not None:
                handler()
            self._current = phase
            self.events.emit(BattleEvent.STATE_ENTERED, {"state": phase.value})
        finally:
            self._transitioning = False
        return True

    @property
    def current_phase(self) -> BattlePhase:
        return self._current

    def is_in_phase(self, phase: BattlePhase) -> bool:
        return self._current == phase

    @property
    def is_transitioning(self) -> bool:
        return self._transitioning

    def reset(self) -> None:
        self._current = BattlePhase.INTRO
        self._transitioning = False
