"""Definition types and errors for the state machine."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_CONFIG_MESSAGE = "Incomplete or no config specified"


class FSMError(Exception):
    """Base class for state machine errors."""


class ConfigError(FSMError, ValueError):
    """Raised when a machine is built from an incomplete config."""

    def __init__(self, message: str = _CONFIG_MESSAGE) -> None:
        super().__init__(message)


class InvalidStateError(FSMError, KeyError):
    """Raised when changing to a state name the machine does not know."""

    def __init__(self, state: str, message: str = "There is no state with this name") -> None:
        self.state = state
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class NoTransitionError(FSMError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(
        self,
        state: str,
        event: str,
        message: str = "Current state have no this transition",
    ) -> None:
        self.state = state
        self.event = event
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True)
class StateDefinition:
    """Immutable state node.

    Attributes:
        transitions: Mapping of event name -> destination state name.
            Destinations are resolved only when the event fires.
    """

    transitions: Mapping[str, str] = field(default_factory=dict)
    # Transition maps are read-only proxies, so definitions are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, Mapping):
            raise ConfigError(
                f"transitions must be a mapping, got {type(self.transitions).__name__}"
            )
        object.__setattr__(
            self, "transitions", MappingProxyType(dict(self.transitions))
        )

    @classmethod
    def from_value(cls, value: Any) -> StateDefinition:
        """Build from ``None``, a StateDefinition, or ``{"transitions": {...}}``."""
        if isinstance(value, StateDefinition):
            return value
        if value is None:
            return cls()
        if not isinstance(value, Mapping):
            raise ConfigError(
                f"state definition must be a mapping, got {type(value).__name__}"
            )
        transitions = value.get("transitions")
        if transitions is None:
            return cls()
        return cls(transitions=transitions)


@dataclass(frozen=True)
class StateMachineConfig:
    """Construction input for StateMachine.

    ``initial`` is not required to name a key of ``states``.
    """

    initial: str
    states: Mapping[str, StateDefinition]
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.initial or not self.states:
            raise ConfigError()
        if not isinstance(self.states, Mapping):
            raise ConfigError(
                f"states must be a mapping, got {type(self.states).__name__}"
            )
        copied = {
            name: StateDefinition.from_value(defn)
            for name, defn in self.states.items()
        }
        object.__setattr__(self, "states", MappingProxyType(copied))

    @classmethod
    def from_dict(cls, data: Any) -> StateMachineConfig:
        """Build from ``{"initial": str, "states": {name: {"transitions": {...}}}}``."""
        if not data or not isinstance(data, Mapping):
            raise ConfigError()
        initial = data.get("initial")
        states = data.get("states")
        if not initial or not states:
            raise ConfigError()
        return cls(initial=initial, states=states)
