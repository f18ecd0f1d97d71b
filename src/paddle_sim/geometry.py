"""
Field geometry: rectangles and clamping into the playfield bounds.
"""

from __future__ import annotations

from typing import NamedTuple

from paddle_sim.constants import FIELD_HEIGHT, FIELD_WIDTH


class Rect(NamedTuple):
    """
    Axis-aligned rectangle in field units.

    :ivar x (float): Left edge.
    :ivar y (float): Top edge.
    :ivar width (float): Width.
    :ivar height (float): Height.
    """

    x: float
    y: float
    width: float
    height: float


def clamp(low: float, high: float, value: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def clamp_x(x: float, width: float) -> float:
    """Clamp the left edge of a ``width``-wide box into the field."""
    return clamp(0.0, FIELD_WIDTH - width, x)


def clamp_y(y: float, height: float) -> float:
    """Clamp the top edge of a ``height``-tall box into the field."""
    return clamp(0.0, FIELD_HEIGHT - height, y)


def touches_horizontal_wall(x: float, width: float) -> bool:
    """Whether an (unclamped) left edge touches or passes a side wall."""
    return x <= 0.0 or x >= FIELD_WIDTH - width


def touches_vertical_wall(y: float, height: float) -> bool:
    """Whether an (unclamped) top edge touches or passes the top/bottom."""
    return y <= 0.0 or y >= FIELD_HEIGHT - height


def field_to_screen(
    rect: Rect, viewport: tuple[float, float]
) -> tuple[int, int, int, int]:
    """
    Scale a field-unit rectangle to integer screen pixels.

    :param rect: Rectangle in field units.
    :type rect: Rect

    :param viewport: Screen size (width, height) in pixels.
    :type viewport: tuple[float, float]

    :return: (x, y, width, height) in pixels.
    :rtype: tuple[int, int, int, int]
    """
    vw, vh = viewport
    sx = vw / FIELD_WIDTH
    sy = vh / FIELD_HEIGHT
    return (
        int(rect.x * sx),
        int(rect.y * sy),
        int(rect.width * sx),
        int(rect.height * sy),
    )
