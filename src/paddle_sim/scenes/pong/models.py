"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from paddle_sim.session import GameSession


@dataclass
class PaddleWorld(BaseWorld):
    """
    Scene world: the game session plus what the engine adapter needs.

    :ivar viewport (tuple[float, float]): Viewport size (width, height).
    :ivar session (GameSession): The running game session.
    :ivar keys_held (FrozenSet[Hashable]): Keys held on the previous frame.
    """

    viewport: tuple[float, float]
    session: GameSession
    keys_held: FrozenSet[Hashable] = field(default_factory=frozenset)


@dataclass(frozen=True)
class PaddleIntent(BaseIntent):
    """
    Player intent for one frame.

    :ivar keys_down (FrozenSet[Hashable]): Keys held this frame.
    :ivar quit (bool): Whether to leave the game.
    """

    keys_down: FrozenSet[Hashable]
    quit: bool = False


@dataclass
class PaddleTickContext(BaseTickContext[PaddleWorld, PaddleIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last frame, in seconds.

    :ivar world (PaddleWorld): Current world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PaddleIntent]): Player intent for this frame.
    :ivar packet (Optional[RenderPacket]): Render packet for this frame.
    """
