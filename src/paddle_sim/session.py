"""
Game session: owns the mutable simulation state and feeds it key
transitions and fixed-interval ticks.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Hashable

from mini_arcade_core.utils import logger

from paddle_sim.constants import TICK_INTERVAL_MS
from paddle_sim.controls import InputTracker, KeyBindings
from paddle_sim.simulation import (
    CollisionMode,
    RenderSnapshot,
    SimulationState,
    advance,
    initial_state,
)


class GameSession:
    """
    Single-threaded session driver.

    Key transitions apply to the controls immediately; each tick copies the
    controls into the state and runs one :func:`advance`. Anything applied
    before a tick is seen by that tick.
    """

    def __init__(
        self,
        state: SimulationState | None = None,
        *,
        bindings: KeyBindings | None = None,
        tick_interval_ms: float = TICK_INTERVAL_MS,
        collision_mode: CollisionMode = CollisionMode.EXACT,
    ):
        """
        :param state: Starting state; defaults to :func:`initial_state`.
        :type state: SimulationState, optional

        :param bindings: Key bindings for the input tracker.
        :type bindings: KeyBindings, optional

        :param tick_interval_ms: Fixed tick interval in milliseconds.
        :type tick_interval_ms: float

        :param collision_mode: Paddle collision model for every tick.
        :type collision_mode: CollisionMode

        :raises ValueError: If ``tick_interval_ms`` is not positive.
        """
        if tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {tick_interval_ms}"
            )

        self._state = state or initial_state()
        self.tracker = InputTracker(bindings, self._state.controls.copy())
        self.tick_interval_ms = tick_interval_ms
        self.collision_mode = collision_mode
        self.ticks = 0
        self._pending_ms = 0.0

        logger.info(
            f"Game session started (tick={tick_interval_ms}ms, "
            f"collisions={collision_mode.value})"
        )

    @property
    def state(self) -> SimulationState:
        """Latest simulation state."""
        return self._state

    def on_key(self, key: Hashable, is_down: bool):
        """Apply a key-down (``is_down=True``) or key-up transition."""
        self.tracker.on_key_transition(key, is_down)

    def release_all(self):
        """Drop every held control."""
        self.tracker.release_all()

    def tick(self) -> SimulationState:
        """Run exactly one simulation step."""
        current = replace(self._state, controls=self.tracker.controls.copy())
        self._state = advance(
            current,
            self.tick_interval_ms,
            collision_mode=self.collision_mode,
        )
        self.ticks += 1
        return self._state

    def elapse(self, elapsed_ms: float) -> int:
        """
        Account for elapsed time and run one tick per full interval. The
        remainder carries over to the next call.

        :param elapsed_ms: Time since the previous call, in milliseconds.
        :type elapsed_ms: float

        :return: Number of ticks run.
        :rtype: int

        :raises ValueError: If ``elapsed_ms`` is negative.
        """
        if elapsed_ms < 0:
            raise ValueError(
                f"elapsed_ms must not be negative, got {elapsed_ms}"
            )

        self._pending_ms += elapsed_ms
        ran = 0
        while self._pending_ms >= self.tick_interval_ms:
            self._pending_ms -= self.tick_interval_ms
            self.tick()
            ran += 1
        return ran

    def snapshot(self) -> RenderSnapshot:
        """Rectangles of the latest state for the renderer."""
        return self._state.snapshot()
