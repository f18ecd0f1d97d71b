"""
Simulation state model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from paddle_sim.constants import (
    BALL_SIZE,
    BALL_VELOCITY,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    PADDLE_MARGIN,
    PADDLE_SIZE,
)
from paddle_sim.controls import Controls
from paddle_sim.entities import Ball, Paddle
from paddle_sim.geometry import Rect


@dataclass(frozen=True)
class RenderSnapshot:
    """
    Read-only view handed to the renderer, in field units.

    :ivar left_paddle (Rect): Left paddle rectangle.
    :ivar right_paddle (Rect): Right paddle rectangle.
    :ivar ball (Rect): Ball rectangle.
    """

    left_paddle: Rect
    right_paddle: Rect
    ball: Rect


@dataclass(frozen=True)
class SimulationState:
    """
    Everything one tick reads and produces.

    :ivar left_paddle (Paddle): Left paddle.
    :ivar right_paddle (Paddle): Right paddle.
    :ivar ball (Ball): The ball.
    :ivar controls (Controls): Directional flags used by the next tick.
    """

    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    controls: Controls = field(default_factory=Controls)

    def snapshot(self) -> RenderSnapshot:
        """Rectangles for the renderer."""
        return RenderSnapshot(
            left_paddle=self.left_paddle.rect,
            right_paddle=self.right_paddle.rect,
            ball=self.ball.rect,
        )


def initial_state() -> SimulationState:
    """
    Session start state: paddles centred vertically near their walls, ball
    centred and heading down-right, nothing held.
    """
    pad_w, pad_h = PADDLE_SIZE
    ball_w, ball_h = BALL_SIZE
    vx, vy = BALL_VELOCITY
    paddle_y = FIELD_HEIGHT / 2 - pad_h / 2

    return SimulationState(
        left_paddle=Paddle(
            x=PADDLE_MARGIN, y=paddle_y, width=pad_w, height=pad_h
        ),
        right_paddle=Paddle(
            x=FIELD_WIDTH - PADDLE_MARGIN - pad_w,
            y=paddle_y,
            width=pad_w,
            height=pad_h,
        ),
        ball=Ball(
            x=FIELD_WIDTH / 2 - ball_w / 2,
            y=FIELD_HEIGHT / 2 - ball_h / 2,
            vx=vx,
            vy=vy,
            width=ball_w,
            height=ball_h,
        ),
    )
