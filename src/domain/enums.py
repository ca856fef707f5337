"""Domain enumerations and state-transition rules."""

import enum


class SelectionState(str, enum.Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"


# State machine: maps current state -> states reachable by a selection.
# PENDING -> PENDING covers re-selecting the pending point (no-op).
SELECTION_TRANSITIONS: dict[SelectionState, set[SelectionState]] = {
    SelectionState.IDLE: {SelectionState.PENDING},
    SelectionState.PENDING: {SelectionState.PENDING, SelectionState.IDLE},
}
