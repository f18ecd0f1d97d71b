"""
Entities package for Paddle Sim.
This package contains the paddle and ball definitions used by the simulation.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle

__all__ = [
    "Ball",
    "Paddle",
]
