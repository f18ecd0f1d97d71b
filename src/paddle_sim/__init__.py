"""
Paddle Sim: a fixed-tick, two-paddle ball game.
"""

from __future__ import annotations

from .controls import Control, Controls, InputTracker, KeyBindings
from .session import GameSession
from .simulation import (
    CollisionMode,
    RenderSnapshot,
    SimulationState,
    advance,
    initial_state,
)

__all__ = [
    "CollisionMode",
    "Control",
    "Controls",
    "GameSession",
    "InputTracker",
    "KeyBindings",
    "RenderSnapshot",
    "SimulationState",
    "advance",
    "initial_state",
]
