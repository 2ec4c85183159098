from commands import TogglePause
from loop import FrameLoop


class StubGame:
    def __init__(self):
        self.paused = False
        self.dts = []

    def update(self, dt):
        self.dts.append(dt)


class CountingRenderer:
    def __init__(self):
        self.frames = 0

    def draw(self, game):
        self.frames += 1


def test_dt_is_delta_between_timestamps():
    game = StubGame()
    renderer = CountingRenderer()
    frame_loop = FrameLoop(game, renderer)
    for timestamp in (1000, 1016, 1033, 1050):
        assert frame_loop.frame(timestamp)
    assert game.dts == [0, 16, 17, 17]
    assert renderer.frames == 4


def test_update_runs_before_render():
    order = []

    class Game(StubGame):
        def update(self, dt):
            order.append("update")

    class Renderer:
        def draw(self, game):
            order.append("draw")

    FrameLoop(Game(), Renderer()).frame(0)
    assert order == ["update", "draw"]


def test_paused_game_stops_requesting_frames(game):
    frame_loop = FrameLoop(game, CountingRenderer())
    assert frame_loop.frame(1000)
    game.commands.push(TogglePause())
    assert not frame_loop.frame(1016)


def test_resume_skips_paused_interval():
    game = StubGame()
    frame_loop = FrameLoop(game, CountingRenderer())
    frame_loop.frame(1000)
    game.paused = True
    assert not frame_loop.frame(1016)
    game.paused = False
    frame_loop.resume(9000)
    assert frame_loop.frame(9016)
    assert game.dts[-1] == 16


def test_resume_through_command_queue(game):
    frame_loop = FrameLoop(game, CountingRenderer())
    game.commands.push(TogglePause())
    assert not frame_loop.frame(0)
    position = game.ball.pos.copy()
    frame_loop.resume(5000)
    game.commands.push(TogglePause())
    assert frame_loop.frame(5016)
    assert game.ball.pos != position
