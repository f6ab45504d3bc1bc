"""Linear undo/redo log of visited states."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class History:
    """Visited state names plus a cursor.

    ``states[0]`` is always the initial state and
    ``0 <= step < len(states)`` holds after every operation.
    """

    step: int
    states: list[str]

    def __post_init__(self) -> None:
        if not self.states:
            raise ValueError("History states must be non-empty")
        if not 0 <= self.step < len(self.states):
            raise ValueError(
                f"step must be in [0, {len(self.states) - 1}], got {self.step}"
            )

    @classmethod
    def start(cls, initial: str) -> History:
        return cls(step=0, states=[initial])

    def current(self) -> str:
        return self.states[self.step]

    def at_start(self) -> bool:
        return self.step == 0

    def at_end(self) -> bool:
        return self.step == len(self.states) - 1

    def record(self, state: str) -> None:
        """Append *state* after the cursor, discarding any redo branch."""
        if not self.at_end():
            del self.states[self.step + 1:]
        self.step += 1
        self.states.append(state)

    def back(self) -> str | None:
        """Move the cursor one entry back. Returns None at the start."""
        if self.at_start():
            return None
        self.step -= 1
        return self.states[self.step]

    def forward(self) -> str | None:
        """Move the cursor one entry forward. Returns None at the end."""
        if self.at_end():
            return None
        self.step += 1
        return self.states[self.step]

    def clear(self, initial: str) -> None:
        self.step = 0
        self.states = [initial]
