"""
Long randomised runs: every reachable state stays inside the field.
"""

import random
from dataclasses import replace

import pytest
from mini_arcade_core.backend.keys import Key

from paddle_sim.constants import FIELD_HEIGHT, FIELD_WIDTH
from paddle_sim.session import GameSession
from paddle_sim.simulation import CollisionMode, initial_state

KEYS = [Key.W, Key.S, Key.UP, Key.DOWN]


def assert_in_bounds(state):
    for paddle in (state.left_paddle, state.right_paddle):
        assert 0.0 <= paddle.y <= FIELD_HEIGHT - paddle.height
    ball = state.ball
    assert 0.0 <= ball.x <= FIELD_WIDTH - ball.width
    assert 0.0 <= ball.y <= FIELD_HEIGHT - ball.height


@pytest.mark.parametrize("mode", list(CollisionMode))
@pytest.mark.parametrize(
    "velocity", [(1.0, 1.0), (-2.0, 1.0), (0.7, -1.3), (3.0, 2.5)]
)
def test_random_play_stays_in_bounds(mode, velocity):
    rng = random.Random(1234)
    start = initial_state()
    vx, vy = velocity
    start = replace(start, ball=replace(start.ball, vx=vx, vy=vy))
    session = GameSession(start, collision_mode=mode)

    for _ in range(3000):
        if rng.random() < 0.2:
            session.on_key(rng.choice(KEYS), rng.random() < 0.5)
        session.tick()
        assert_in_bounds(session.state)
        assert abs(session.state.ball.vx) == abs(vx)
        assert abs(session.state.ball.vy) == abs(vy)
