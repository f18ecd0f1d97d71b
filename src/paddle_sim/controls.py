"""
Keyboard controls for Paddle Sim: the four directional flags and the tracker
that keeps them in sync with key transitions.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Hashable, Mapping

from mini_arcade_core.backend.keys import Key
from mini_arcade_core.utils import logger


class Control(Enum):
    """Directional controls, one per direction per side."""

    MOVE_UP_LEFT = "move_up_left"
    MOVE_DOWN_LEFT = "move_down_left"
    MOVE_UP_RIGHT = "move_up_right"
    MOVE_DOWN_RIGHT = "move_down_right"


@dataclass
class Controls:
    """
    Currently held directional keys.

    :ivar move_up_left (bool): Left paddle up.
    :ivar move_down_left (bool): Left paddle down.
    :ivar move_up_right (bool): Right paddle up.
    :ivar move_down_right (bool): Right paddle down.
    """

    move_up_left: bool = False
    move_down_left: bool = False
    move_up_right: bool = False
    move_down_right: bool = False

    def is_set(self, control: Control) -> bool:
        """Whether ``control`` is currently held."""
        return getattr(self, control.value)

    def set(self, control: Control, value: bool):
        """Set a single flag in place."""
        setattr(self, control.value, value)

    def copy(self) -> Controls:
        """Detached copy, unaffected by later key transitions."""
        return replace(self)


def _default_bindings() -> dict[Hashable, Control]:
    # left paddle: W/S, right paddle: UP/DOWN
    return {
        Key.W: Control.MOVE_UP_LEFT,
        Key.S: Control.MOVE_DOWN_LEFT,
        Key.UP: Control.MOVE_UP_RIGHT,
        Key.DOWN: Control.MOVE_DOWN_RIGHT,
    }


@dataclass(frozen=True)
class KeyBindings:
    """
    Key to control mapping. Every control must be bound to exactly one key.

    :ivar keys (Mapping[Hashable, Control]): Key identifier to control.
    """

    keys: Mapping[Hashable, Control] = field(default_factory=_default_bindings)

    def __post_init__(self):
        counts = Counter(self.keys.values())
        missing = [c.name for c in Control if counts[c] == 0]
        doubled = [c.name for c in Control if counts[c] > 1]
        if missing:
            raise ValueError(f"Unbound controls: {', '.join(missing)}")
        if doubled:
            raise ValueError(
                f"Controls bound to more than one key: {', '.join(doubled)}"
            )

    def control_for(self, key: Hashable) -> Control | None:
        """Control bound to ``key``, or None if the key is not bound."""
        return self.keys.get(key)


class InputTracker:
    """
    Keeps a shared :class:`Controls` record in sync with key-down/key-up
    transitions. Unbound keys are ignored.
    """

    def __init__(
        self,
        bindings: KeyBindings | None = None,
        controls: Controls | None = None,
    ):
        """
        :param bindings: Key bindings to recognise.
        :type bindings: KeyBindings, optional

        :param controls: Record to mutate; a fresh one is created if omitted.
        :type controls: Controls, optional
        """
        self.bindings = bindings or KeyBindings()
        self.controls = controls if controls is not None else Controls()

    def on_key_transition(self, key: Hashable, is_down: bool) -> Controls:
        """
        Apply one key transition.

        :param key: Key identifier carried by the event.
        :type key: Hashable

        :param is_down: True for key-down, False for key-up.
        :type is_down: bool

        :return: The (possibly updated) shared controls record.
        :rtype: Controls
        """
        control = self.bindings.control_for(key)
        if control is None:
            logger.debug(f"Ignoring unbound key {key!r}")
            return self.controls

        self.controls.set(control, is_down)
        return self.controls

    def release_all(self) -> Controls:
        """Clear every flag, e.g. when the window loses focus."""
        for control in Control:
            self.controls.set(control, False)
        return self.controls
