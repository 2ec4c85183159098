import os
import random

# Headless SDL so pygame surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from pong import PongGame  # noqa: E402


class RecordingSurface:
    # Records every primitive call instead of drawing
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, rect, color, radius=0):
        self.calls.append(("fill_rect", tuple(rect), color, radius))

    def fill_circle(self, center, radius, color):
        self.calls.append(("fill_circle", tuple(center), radius, color))

    def text(self, text_str, pos, color, size=None, centered=False):
        self.calls.append(("text", text_str, tuple(pos), color))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def game():
    return PongGame(rng=random.Random(1234))


@pytest.fixture
def recording_surface():
    return RecordingSurface()
