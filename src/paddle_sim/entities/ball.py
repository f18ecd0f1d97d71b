"""
Ball entity for Paddle Sim.
"""

from __future__ import annotations

from dataclasses import dataclass

from paddle_sim.geometry import Rect


@dataclass(frozen=True)
class Ball:
    """
    Ball entity.

    :ivar x (float): Left edge of the ball.
    :ivar y (float): Top edge of the ball.
    :ivar vx (float): Horizontal velocity, in field units per tick.
    :ivar vy (float): Vertical velocity, in field units per tick.
    :ivar width (float): Width of the ball.
    :ivar height (float): Height of the ball.
    """

    x: float
    y: float
    vx: float
    vy: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge of the ball."""
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        """Drawable rectangle for the ball."""
        return Rect(self.x, self.y, self.width, self.height)
