"""
Main application for Paddle Sim.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    BackendSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from paddle_sim.constants import BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Paddle Sim.

    - Auto-discovers scenes from the `paddle_sim.scenes` package.
    - Sets up the game window with specified dimensions and background color.
    - Runs the game with the initial scene set to "pong".
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "paddle_sim.scenes", "mini_arcade_core.scenes"
    )

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Paddle Sim",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="pong",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Paddle Sim...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
