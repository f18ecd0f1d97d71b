"""
Shared fixtures for the Paddle Sim tests.
"""

from __future__ import annotations

import pytest

from paddle_sim.controls import Controls
from paddle_sim.entities import Ball, Paddle
from paddle_sim.simulation import SimulationState


def build_state(
    *,
    left: Paddle | None = None,
    right: Paddle | None = None,
    ball: Ball | None = None,
    controls: Controls | None = None,
) -> SimulationState:
    """State with default paddles at x=5 / x=93 and a still, centred ball."""
    return SimulationState(
        left_paddle=left or Paddle(x=5.0, y=45.0, width=2.0, height=10.0),
        right_paddle=right or Paddle(x=93.0, y=45.0, width=2.0, height=10.0),
        ball=ball
        or Ball(x=49.0, y=49.0, vx=0.0, vy=0.0, width=2.0, height=2.0),
        controls=controls or Controls(),
    )


@pytest.fixture
def make_state():
    return build_state
