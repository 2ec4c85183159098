import logging

logger = logging.getLogger(__name__)


class FrameLoop:
    # One update+render pass per callback; frame() returns False once paused.
    def __init__(self, game, renderer):
        self.game = game
        self.renderer = renderer
        self.last_time = None
        self.frame_count = 0

    def frame(self, timestamp):
        # The first frame has no predecessor, so it gets no elapsed time.
        dt = 0 if self.last_time is None else timestamp - self.last_time
        self.last_time = timestamp
        self.game.update(dt)
        self.renderer.draw(self.game)
        self.frame_count += 1
        return not self.game.paused

    def resume(self, timestamp):
        # The next frame measures dt from here, not from before the pause.
        self.last_time = timestamp
        logger.debug(
            "Loop re-armed at %d ms after %d frames", timestamp, self.frame_count
        )
