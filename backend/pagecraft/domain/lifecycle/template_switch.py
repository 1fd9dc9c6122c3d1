from enum import Enum
from typing import Set

from pagecraft.domain.exceptions import IllegalSwitchTransition


class SwitchState(str, Enum):
    START = "start"
    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"
    MAPPED = "mapped"
    APPLIED = "applied"
    REJECTED = "rejected"


# Explicit allowed state transitions
ALLOWED_SWITCH_TRANSITIONS: dict[SwitchState, Set[SwitchState]] = {
    SwitchState.START: {SwitchState.COMPATIBLE, SwitchState.INCOMPATIBLE},
    SwitchState.COMPATIBLE: {SwitchState.APPLIED},
    SwitchState.INCOMPATIBLE: {SwitchState.MAPPED, SwitchState.REJECTED},
    SwitchState.MAPPED: {SwitchState.APPLIED, SwitchState.REJECTED},
    SwitchState.APPLIED: set(),
    SwitchState.REJECTED: set(),
}

TERMINAL_STATES = frozenset({SwitchState.APPLIED, SwitchState.REJECTED})


def assert_switch_transition(*, from_state: SwitchState, to_state: SwitchState) -> None:
    """
    Guards template switch transitions.
    Single source of truth for how a switch request may progress.
    """
    allowed = ALLOWED_SWITCH_TRANSITIONS.get(from_state, set())

    if to_state not in allowed:
        raise IllegalSwitchTransition(
            f"Illegal template switch transition: {from_state.value} → {to_state.value}"
        )


class SwitchTracker:
    """Records the path a single switch request takes."""

    def __init__(self):
        self.state = SwitchState.START
        self.history = [SwitchState.START]

    def advance(self, to_state: SwitchState) -> SwitchState:
        assert_switch_transition(from_state=self.state, to_state=to_state)
        self.state = to_state
        self.history.append(to_state)
        return to_state

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def path(self):
        return [state.value for state in self.history]
