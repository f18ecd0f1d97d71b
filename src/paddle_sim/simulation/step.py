"""
The simulation step: paddle motion, ball motion and collision resolution.

Every function here is pure. ``advance`` builds the next
:class:`SimulationState` from the current one without touching it.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from mini_arcade_core.utils import logger

from paddle_sim.constants import PADDLE_SPEED
from paddle_sim.entities import Ball, Paddle
from paddle_sim.geometry import (
    clamp_x,
    clamp_y,
    touches_horizontal_wall,
    touches_vertical_wall,
)
from paddle_sim.simulation.models import SimulationState


class CollisionMode(Enum):
    """
    How the ball is tested against paddle faces.

    - EXACT: the ball's facing edge must equal the paddle face before the
      move. Only reliable while the ball moves a whole divisor of the paddle
      coordinate grid per tick; faster or fractional motion can step over the
      face and pass through the paddle.
    - CROSSING: the ball's facing edge must reach or pass the paddle face
      during the move; on a hit the ball is placed flush against the face.
      Changes the outcome of boundary ticks compared to EXACT, so it is
      opt-in.
    """

    EXACT = "exact"
    CROSSING = "crossing"


def paddle_delta(up: bool, down: bool) -> float:
    """
    Signed vertical direction for a paddle: -1 up, +1 down, 0 idle.
    Up wins when both are held.
    """
    if up:
        return -1.0
    if down:
        return 1.0
    return 0.0


def move_paddle(paddle: Paddle, up: bool, down: bool) -> Paddle:
    """Move a paddle one tick vertically, clamped into the field."""
    y = paddle.y + paddle_delta(up, down) * PADDLE_SPEED
    return replace(paddle, y=clamp_y(y, paddle.height))


def _hits_left_paddle(
    ball: Ball, paddle: Paddle, mode: CollisionMode
) -> bool:
    if not paddle.spans(ball.y, ball.height):
        return False
    if mode is CollisionMode.EXACT:
        return ball.x == paddle.right
    return ball.x + ball.vx <= paddle.right <= ball.x


def _hits_right_paddle(
    ball: Ball, paddle: Paddle, mode: CollisionMode
) -> bool:
    if not paddle.spans(ball.y, ball.height):
        return False
    if mode is CollisionMode.EXACT:
        return ball.right == paddle.x
    return ball.right <= paddle.x <= ball.right + ball.vx


def resolve_horizontal(
    ball: Ball,
    left: Paddle,
    right: Paddle,
    mode: CollisionMode = CollisionMode.EXACT,
) -> tuple[float, float]:
    """
    Resolve the ball's horizontal axis for one tick. Paddle tests use the
    ball's position before the move; the wall test uses the unclamped
    tentative position.

    :param ball: Ball before the move.
    :type ball: Ball

    :param left: Left paddle.
    :type left: Paddle

    :param right: Right paddle.
    :type right: Paddle

    :param mode: Paddle collision model.
    :type mode: CollisionMode

    :return: New x (clamped into the field) and new vx.
    :rtype: tuple[float, float]
    """
    tentative = ball.x + ball.vx
    x = clamp_x(tentative, ball.width)

    if _hits_left_paddle(ball, left, mode):
        logger.debug(f"Ball hit left paddle at y={ball.y}")
        if mode is CollisionMode.CROSSING:
            x = clamp_x(left.right, ball.width)
        return x, abs(ball.vx)

    if _hits_right_paddle(ball, right, mode):
        logger.debug(f"Ball hit right paddle at y={ball.y}")
        if mode is CollisionMode.CROSSING:
            x = clamp_x(right.x - ball.width, ball.width)
        return x, -abs(ball.vx)

    if touches_horizontal_wall(tentative, ball.width):
        return x, -ball.vx

    return x, ball.vx


def resolve_vertical(ball: Ball) -> tuple[float, float]:
    """New y (clamped into the field) and new vy for one tick."""
    tentative = ball.y + ball.vy
    y = clamp_y(tentative, ball.height)

    if touches_vertical_wall(tentative, ball.height):
        return y, -ball.vy

    return y, ball.vy


def move_ball(
    ball: Ball,
    left: Paddle,
    right: Paddle,
    mode: CollisionMode = CollisionMode.EXACT,
) -> Ball:
    """Move the ball one tick and bounce it off walls and paddles."""
    x, vx = resolve_horizontal(ball, left, right, mode)
    y, vy = resolve_vertical(ball)
    return replace(ball, x=x, y=y, vx=vx, vy=vy)


def advance(
    state: SimulationState,
    tick_duration: float | None = None,
    *,
    collision_mode: CollisionMode = CollisionMode.EXACT,
) -> SimulationState:
    """
    Produce the state one tick later.

    Paddles move by their held controls; the ball moves by its velocity and
    is tested against the paddles as they were before this tick. Speeds never
    change, only the signs of the ball's velocity.

    :param state: Current state. Not modified.
    :type state: SimulationState

    :param tick_duration: Elapsed time of the tick, in milliseconds.
        Velocities are per tick, so this does not scale motion.
    :type tick_duration: float, optional

    :param collision_mode: Paddle collision model.
    :type collision_mode: CollisionMode

    :return: The next state.
    :rtype: SimulationState
    """
    # Justification: part of the tick signature, motion is per tick
    # pylint: disable=unused-argument
    controls = state.controls

    left = move_paddle(
        state.left_paddle, controls.move_up_left, controls.move_down_left
    )
    right = move_paddle(
        state.right_paddle, controls.move_up_right, controls.move_down_right
    )
    ball = move_ball(
        state.ball, state.left_paddle, state.right_paddle, collision_mode
    )

    return replace(state, left_paddle=left, right_paddle=right, ball=ball)
