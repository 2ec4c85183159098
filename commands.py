# Input intents from the host, drained by PongGame.update once per frame

from collections import deque
from dataclasses import dataclass

UP = "up"
DOWN = "down"
DIRECTION_KEYS = (UP, DOWN)


@dataclass(frozen=True)
class MoveTo:
    y: float  # Court-relative pointer y; the paddle is centred on it


@dataclass(frozen=True)
class KeyDown:
    key: str


@dataclass(frozen=True)
class KeyUp:
    key: str


@dataclass(frozen=True)
class TogglePause:
    pass


class CommandQueue:
    def __init__(self):
        self._pending = deque()

    def push(self, command):
        if command is not None:
            self._pending.append(command)

    def drain(self):
        # Yields commands in arrival order, including any pushed while draining.
        while self._pending:
            yield self._pending.popleft()

    def __len__(self):
        return len(self._pending)
