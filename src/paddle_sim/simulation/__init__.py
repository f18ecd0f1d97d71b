"""
Simulation package for Paddle Sim: state model and the per-tick step.
"""

from __future__ import annotations

from .models import RenderSnapshot, SimulationState, initial_state
from .step import (
    CollisionMode,
    advance,
    move_ball,
    move_paddle,
    paddle_delta,
    resolve_horizontal,
    resolve_vertical,
)

__all__ = [
    "CollisionMode",
    "RenderSnapshot",
    "SimulationState",
    "advance",
    "initial_state",
    "move_ball",
    "move_paddle",
    "paddle_delta",
    "resolve_horizontal",
    "resolve_vertical",
]
