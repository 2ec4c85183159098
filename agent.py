import config


class TrackingAgent:
    def __init__(self, deadzone=config.AI_DEADZONE):
        self.deadzone = deadzone  # Offsets within this band are ignored

    def choose_action(self, ball_y, paddle):
        # Returns -1 (up), 0 (stay) or 1 (down). Follows the ball's current
        # height only: no prediction, no reaction delay.
        offset = ball_y - paddle.center_y
        if abs(offset) <= self.deadzone:
            return 0
        return 1 if offset > 0 else -1

    def move(self, paddle, ball_y, court_height, scale=1.0):
        action = self.choose_action(ball_y, paddle)
        if action != 0:
            paddle.move_by(action * paddle.speed * scale, court_height)
        return action
