"""
Constants for Paddle Sim.

Field values are in field units (the field is 100x100); window values are
in pixels and only used by the scene.
"""

from __future__ import annotations

# Field
FIELD_WIDTH = 100.0
FIELD_HEIGHT = 100.0

# Simulation timer, in milliseconds
TICK_INTERVAL_MS = 15.0

# Paddles
PADDLE_SIZE = (2.0, 10.0)
PADDLE_MARGIN = 5.0  # distance between a paddle and its side wall
PADDLE_SPEED = 1.0  # field units per tick

# Ball
BALL_SIZE = (2.0, 2.0)
BALL_VELOCITY = (1.0, 1.0)  # field units per tick

# Window
WINDOW_SIZE = (800, 800)
FPS = 60

# Colors
BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
DIM = (200, 200, 200)
