import logging
import math
import random

from pygame.math import Vector2

import config
from agent import TrackingAgent
from collision import ball_hits_paddle, clamp
from commands import (
    DIRECTION_KEYS,
    DOWN,
    UP,
    CommandQueue,
    KeyDown,
    KeyUp,
    MoveTo,
    TogglePause,
)

logger = logging.getLogger(__name__)

SERVE_DIRECTIONS = {"left": -1, "right": 1}


class Paddle:
    def __init__(self, x, y, width, height, speed):
        self.x = x
        self.y = y  # Top edge
        self.width = width
        self.height = height
        self.speed = speed
        self.dy = 0  # Vertical intent: -1 up, 0 still, 1 down

    @property
    def center_y(self):
        return self.y + self.height / 2

    @property
    def right(self):
        return self.x + self.width

    def move_by(self, delta, court_height):
        self.y = clamp(self.y + delta, 0, court_height - self.height)

    def center_on(self, y, court_height):
        self.y = clamp(y - self.height / 2, 0, court_height - self.height)


class Ball:
    def __init__(self, x, y, radius, speed):
        self.pos = Vector2(x, y)
        self.radius = radius
        self.speed = speed  # Scalar magnitude of vel
        self.vel = Vector2(0, 0)


class Score:
    def __init__(self):
        self.player = 0
        self.computer = 0


class PongGame:
    # All mutation happens in update(); input is queued on self.commands.
    def __init__(
        self,
        width=config.SCREEN_WIDTH,
        height=config.SCREEN_HEIGHT,
        rng=None,
        agent=None,
        player_display=None,
        computer_display=None,
        scale_motion_by_dt=config.SCALE_MOTION_BY_DT,
    ):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.agent = agent or TrackingAgent()
        self.player_display = player_display
        self.computer_display = computer_display
        self.scale_motion_by_dt = scale_motion_by_dt

        paddle_top = (height - config.PADDLE_HEIGHT) / 2
        self.player = Paddle(
            config.PADDLE_INSET,
            paddle_top,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            config.PLAYER_PADDLE_SPEED,
        )
        self.computer = Paddle(
            width - config.PADDLE_INSET - config.PADDLE_WIDTH,
            paddle_top,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            config.AI_PADDLE_SPEED,
        )
        self.ball = Ball(
            width / 2, height / 2, config.BALL_RADIUS, config.BALL_BASE_SPEED
        )
        self.score = Score()
        self.keys = {key: False for key in DIRECTION_KEYS}
        self.commands = CommandQueue()
        self.paused = False

        self.reset_ball()
        self._show_scores()

    def reset_ball(self, direction=None):
        # Serves from the center at base speed. direction is "left", "right"
        # or None for a coin flip.
        if direction is None:
            sign = -1 if self.rng.random() < 0.5 else 1
        elif direction in SERVE_DIRECTIONS:
            sign = SERVE_DIRECTIONS[direction]
        else:
            raise ValueError(f"Unknown serve direction: {direction!r}")

        angle = self.rng.uniform(-config.SERVE_ANGLE_RANGE, config.SERVE_ANGLE_RANGE)
        self.ball.pos.update(self.width / 2, self.height / 2)
        self.ball.speed = config.BALL_BASE_SPEED
        self.ball.vel.update(
            sign * self.ball.speed * math.cos(angle),
            self.ball.speed * math.sin(angle),
        )
        logger.debug(
            "Serve %s at %.1f deg", "left" if sign < 0 else "right", math.degrees(angle)
        )

    def apply_command(self, command):
        if isinstance(command, MoveTo):
            # Pointer positioning bypasses paddle speed
            self.player.center_on(command.y, self.height)
        elif isinstance(command, (KeyDown, KeyUp)):
            if command.key in self.keys:
                self.keys[command.key] = isinstance(command, KeyDown)
        elif isinstance(command, TogglePause):
            self.paused = not self.paused
            logger.info("Game %s", "paused" if self.paused else "resumed")
        else:
            logger.debug("Ignoring unknown command %r", command)

    def process_commands(self):
        for command in self.commands.drain():
            self.apply_command(command)

    def _motion_scale(self, dt):
        if not self.scale_motion_by_dt or not dt:
            return 1.0
        return dt / config.REFERENCE_FRAME_MS

    def move_player(self, scale=1.0):
        self.player.dy = int(self.keys[DOWN]) - int(self.keys[UP])
        step = self.player.speed * scale
        if self.keys[UP]:
            self.player.move_by(-step, self.height)
        if self.keys[DOWN]:
            self.player.move_by(step, self.height)

    def handle_wall_bounce(self):
        # Top and bottom walls are perfectly elastic.
        ball = self.ball
        if ball.pos.y - ball.radius <= 0:
            ball.pos.y = ball.radius
            ball.vel.y *= -1
            return True
        if ball.pos.y + ball.radius >= self.height:
            ball.pos.y = self.height - ball.radius
            ball.vel.y *= -1
            return True
        return False

    def handle_paddle_bounce(self, paddle):
        # Hit position maps linearly onto the outgoing angle: center is flat,
        # the edges give +/- MAX_BOUNCE_ANGLE.
        ball = self.ball
        relative_intersect = clamp(
            (ball.pos.y - paddle.center_y) / (paddle.height / 2), -1.0, 1.0
        )
        bounce_angle = relative_intersect * config.MAX_BOUNCE_ANGLE

        ball.speed = min(
            ball.speed * config.BALL_SPEED_INCREMENT_FACTOR, config.BALL_MAX_SPEED
        )

        direction = 1 if paddle is self.player else -1
        ball.vel.update(
            direction * ball.speed * math.cos(bounce_angle),
            ball.speed * math.sin(bounce_angle),
        )

        # Move the ball clear of the paddle so it is not detected again next frame
        if paddle is self.player:
            ball.pos.x = paddle.right + ball.radius + config.BOUNCE_NUDGE
        else:
            ball.pos.x = paddle.x - ball.radius - config.BOUNCE_NUDGE
        logger.debug(
            "Bounce off %s paddle, speed %.2f",
            "player" if direction > 0 else "computer",
            ball.speed,
        )

    def handle_paddle_collisions(self):
        # Only the paddle the ball is travelling toward is tested; a ball
        # moving away from a paddle it still overlaps is left alone.
        if self.ball.vel.x < 0 and ball_hits_paddle(self.ball, self.player):
            self.handle_paddle_bounce(self.player)
            return self.player
        if self.ball.vel.x > 0 and ball_hits_paddle(self.ball, self.computer):
            self.handle_paddle_bounce(self.computer)
            return self.computer
        return None

    def handle_scoring(self):
        ball = self.ball
        if ball.pos.x + ball.radius < 0:
            self.score.computer += 1
            if self.computer_display is not None:
                self.computer_display.show(self.score.computer)
            logger.info(
                "Computer scores (%d-%d)", self.score.player, self.score.computer
            )
            self.reset_ball("right")  # Serve toward the scorer
            return "computer"
        if ball.pos.x - ball.radius > self.width:
            self.score.player += 1
            if self.player_display is not None:
                self.player_display.show(self.score.player)
            logger.info(
                "Player scores (%d-%d)", self.score.player, self.score.computer
            )
            self.reset_ball("left")
            return "player"
        return None

    def _show_scores(self):
        if self.player_display is not None:
            self.player_display.show(self.score.player)
        if self.computer_display is not None:
            self.computer_display.show(self.score.computer)

    def update(self, dt=0):
        # One frame: input, ball, walls, paddles, scoring, then AI.
        self.process_commands()
        if self.paused:
            return None

        scale = self._motion_scale(dt)
        self.move_player(scale)

        self.ball.pos += self.ball.vel * scale
        self.handle_wall_bounce()
        self.handle_paddle_collisions()
        scorer = self.handle_scoring()

        self.agent.move(self.computer, self.ball.pos.y, self.height, scale)
        return scorer
