"""hist-fsm - Event-driven finite state machine with undo/redo history."""
from __future__ import annotations

from hist_fsm.history import History
from hist_fsm.machine import StateMachine
from hist_fsm.types import (
    ConfigError,
    FSMError,
    InvalidStateError,
    NoTransitionError,
    StateDefinition,
    StateMachineConfig,
)

__all__ = [
    "ConfigError",
    "FSMError",
    "History",
    "InvalidStateError",
    "NoTransitionError",
    "StateDefinition",
    "StateMachine",
    "StateMachineConfig",
]
