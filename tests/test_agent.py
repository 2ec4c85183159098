import pytest

from agent import TrackingAgent
from pong import Paddle

COURT_HEIGHT = 600


@pytest.fixture
def paddle():
    # Center at y=300
    return Paddle(874, 245, 12, 110, 5)


@pytest.mark.parametrize("ball_y", [294, 300, 306])
def test_stays_still_inside_deadzone(paddle, ball_y):
    agent = TrackingAgent()
    assert agent.move(paddle, ball_y, COURT_HEIGHT) == 0
    assert paddle.y == 245


def test_moves_down_by_fixed_speed(paddle):
    agent = TrackingAgent()
    assert agent.move(paddle, 306.5, COURT_HEIGHT) == 1
    assert paddle.y == 250


def test_moves_up_by_fixed_speed(paddle):
    agent = TrackingAgent()
    assert agent.move(paddle, 100, COURT_HEIGHT) == -1
    assert paddle.y == 240


def test_step_does_not_depend_on_distance(paddle):
    agent = TrackingAgent()
    agent.move(paddle, 590, COURT_HEIGHT)
    assert paddle.y == 250


def test_never_leaves_court(paddle):
    agent = TrackingAgent()
    paddle.y = 2
    agent.move(paddle, 0, COURT_HEIGHT)
    assert paddle.y == 0
    agent.move(paddle, 0, COURT_HEIGHT)
    assert paddle.y == 0

    paddle.y = 488
    agent.move(paddle, 600, COURT_HEIGHT)
    assert paddle.y == COURT_HEIGHT - paddle.height


def test_custom_deadzone(paddle):
    agent = TrackingAgent(deadzone=20)
    assert agent.choose_action(315, paddle) == 0
    assert agent.choose_action(321, paddle) == 1


def test_scaled_move(paddle):
    agent = TrackingAgent()
    agent.move(paddle, 400, COURT_HEIGHT, scale=2.0)
    assert paddle.y == 255
