"""StateMachine - event-driven state tracking with undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from hist_fsm.history import History
from hist_fsm.types import (
    InvalidStateError,
    NoTransitionError,
    StateDefinition,
    StateMachineConfig,
)

logger = logging.getLogger(__name__)


class StateMachine:
    """Finite state machine over a fixed transition table.

    Every successful ``change_state`` (directly or via ``trigger``) is
    recorded in a linear history that ``undo``/``redo`` walk. ``reset`` and
    ``clear_history`` each leave the other side untouched: reset
    moves the live state without recording it, and clearing the history
    keeps the live state where it is.
    """

    def __init__(self, config: StateMachineConfig | Mapping[str, Any] | None) -> None:
        if not isinstance(config, StateMachineConfig):
            config = StateMachineConfig.from_dict(config)
        self._initial: str = config.initial
        self._state: str = config.initial
        self._states: Mapping[str, StateDefinition] = config.states
        self._history = History.start(config.initial)

    @property
    def initial(self) -> str:
        return self._initial

    @property
    def states(self) -> Mapping[str, StateDefinition]:
        """Read-only view of the transition table."""
        return self._states

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history.states)

    @property
    def step(self) -> int:
        return self._history.step

    def get_state(self) -> str:
        """Return the active state name."""
        return self._state

    def has_state(self, name: str) -> bool:
        return name in self._states

    def change_state(self, state: str) -> None:
        """Go to *state*, truncating any redo branch.

        Raises InvalidStateError if *state* is not in the table.
        """
        if state not in self._states:
            raise InvalidStateError(state)
        previous = self._state
        self._state = state
        self._history.record(state)
        logger.debug("state %s -> %s (step %d)", previous, state, self._history.step)

    def trigger(self, event: str) -> None:
        """Fire *event* against the current state.

        Raises NoTransitionError if the current state has no such event,
        and InvalidStateError if the event leads to an unknown state.
        """
        defn = self._states.get(self._state)
        if defn is None or event not in defn.transitions:
            raise NoTransitionError(self._state, event)
        previous = self._state
        self.change_state(defn.transitions[event])
        logger.debug("event %r fired from %s", event, previous)

    def events(self) -> list[str]:
        """Event names that can fire from the current state."""
        defn = self._states.get(self._state)
        if defn is None:
            return []
        return list(defn.transitions)

    def reset(self) -> None:
        """Return to the initial state. History is not modified."""
        # TODO: decide whether reset should also clear history.
        logger.debug("reset %s -> %s", self._state, self._initial)
        self._state = self._initial

    def get_states(self, event: str | None = None) -> list[str]:
        """Return all state names, or those with a transition for *event*."""
        if event is None:
            return list(self._states)
        return [
            name for name, defn in self._states.items()
            if event in defn.transitions
        ]

    def can_undo(self) -> bool:
        return not self._history.at_start()

    def can_redo(self) -> bool:
        return not self._history.at_end()

    def undo(self) -> bool:
        """Step back through history. Returns False at the earliest entry."""
        state = self._history.back()
        if state is None:
            return False
        self._state = state
        logger.debug("undo -> %s (step %d)", state, self._history.step)
        return True

    def redo(self) -> bool:
        """Step forward through history. Returns False at the latest entry."""
        state = self._history.forward()
        if state is None:
            return False
        self._state = state
        logger.debug("redo -> %s (step %d)", state, self._history.step)
        return True

    def clear_history(self) -> None:
        """Drop all recorded history. The current state is kept."""
        self._history.clear(self._initial)
        logger.debug("history cleared (current state %s)", self._state)
