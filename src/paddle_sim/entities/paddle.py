"""
Paddle entity for Paddle Sim.
"""

from __future__ import annotations

from dataclasses import dataclass

from paddle_sim.geometry import Rect


@dataclass(frozen=True)
class Paddle:
    """
    Paddle entity. ``x`` never changes for the paddle's lifetime; ``y`` is
    kept within ``[0, FIELD_HEIGHT - height]`` by the simulation.

    :ivar x (float): Left edge of the paddle.
    :ivar y (float): Top edge of the paddle.
    :ivar width (float): Width of the paddle.
    :ivar height (float): Height of the paddle.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge of the paddle."""
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        """Drawable rectangle for the paddle."""
        return Rect(self.x, self.y, self.width, self.height)

    def spans(self, y: float, height: float) -> bool:
        """
        Whether a box at ``y`` with ``height`` overlaps this paddle
        vertically (strict on both ends).

        :param y: Top edge of the other box.
        :type y: float

        :param height: Height of the other box.
        :type height: float

        :return: True if the vertical spans overlap.
        :rtype: bool
        """
        return self.y - height < y < self.y + self.height
