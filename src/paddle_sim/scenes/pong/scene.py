"""
Two-paddle scene using mini-arcade-core.

Adapts the engine's per-frame input and delta time to the game session's
key transitions and fixed ticks, and draws the session snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import BaseRenderSystem
from mini_arcade_core.utils import logger

from paddle_sim.constants import DIM, WHITE
from paddle_sim.geometry import Rect, field_to_screen
from paddle_sim.scenes.pong.models import (
    PaddleIntent,
    PaddleTickContext,
    PaddleWorld,
)
from paddle_sim.session import GameSession


@dataclass
class KeyTransitionSystem:
    """
    Turn the frame's held-key set into key-down/key-up transitions for the
    session.
    """

    name: str = "paddle_key_transitions"
    order: int = 10

    def step(self, ctx: PaddleTickContext):
        """Diff held keys against the previous frame and forward changes."""
        down = frozenset(ctx.input_frame.keys_down)
        ctx.intent = PaddleIntent(
            keys_down=down,
            quit=Key.ESCAPE in ctx.input_frame.keys_pressed,
        )

        world = ctx.world
        for key in world.keys_held - down:
            world.session.on_key(key, False)
        for key in down - world.keys_held:
            world.session.on_key(key, True)
        world.keys_held = down

        if ctx.intent.quit:
            logger.info("Quit requested")
            ctx.commands.push(QuitCommand())


@dataclass
class FixedTickSystem:
    """
    Run the session's fixed-interval ticks covered by this frame.
    """

    name: str = "paddle_fixed_tick"
    order: int = 20

    def step(self, ctx: PaddleTickContext):
        """Feed the frame's elapsed time to the session."""
        ctx.world.session.elapse(ctx.dt * 1000.0)


class DrawCenterLine(Drawable[PaddleTickContext]):
    """
    Drawable to render the center dashed line.
    """

    def draw(self, backend: Backend, ctx: PaddleTickContext):
        vw, vh = ctx.world.viewport

        x = int(vw / 2) - 2  # center line X (2px thickness)
        dash_w = 4
        dash_h = 16
        gap = 12

        y = 0
        while y < vh:
            backend.render.draw_rect(x, int(y), dash_w, dash_h, color=DIM)
            y += dash_h + gap


class DrawRect(Drawable[PaddleTickContext]):
    """
    Drawable to render one field-unit rectangle scaled to the viewport.
    """

    def __init__(self, rect: Rect):
        self.rect = rect

    def draw(self, backend: Backend, ctx: PaddleTickContext):
        x, y, w, h = field_to_screen(self.rect, ctx.world.viewport)
        backend.render.draw_rect(x, y, w, h, color=WHITE)


@dataclass
class PaddleRenderSystem(BaseRenderSystem):
    """
    Render the latest session snapshot.
    """

    name: str = "paddle_render"
    order: int = 100

    def step(self, ctx: PaddleTickContext):
        """Render the world."""
        snap = ctx.world.session.snapshot()

        ctx.draw_ops = [
            DrawCall(drawable=DrawCenterLine(), ctx=ctx),
            DrawCall(drawable=DrawRect(snap.left_paddle), ctx=ctx),
            DrawCall(drawable=DrawRect(snap.right_paddle), ctx=ctx),
            DrawCall(drawable=DrawRect(snap.ball), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PaddleScene(SimScene[PaddleTickContext, PaddleWorld]):
    """
    The game scene: one session, two paddles, one ball.
    """

    tick_context_type = PaddleTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        self.world = PaddleWorld(viewport=(vw, vh), session=GameSession())
        logger.info(f"Entered pong scene ({vw}x{vh})")

        self.systems.extend(
            [
                KeyTransitionSystem(),
                FixedTickSystem(),
                PaddleRenderSystem(),
            ]
        )
