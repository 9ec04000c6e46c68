"""Joystick, mouse and keyboard state gathered from the event queue."""

from __future__ import annotations

import enum
import functools
import logging
from collections.abc import Callable
from typing import Any

import pygame

from spritequest.vector import Vector2D

log = logging.getLogger(__name__)

JOYSTICK_DEAD_ZONE = 10000
_AXIS_MAX = 32767

_MOUSE_BUTTONS = {1: 0, 2: 1, 3: 2}


class MouseButton(enum.IntEnum):
    """Index of a mouse button in the handler's button states."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class InputHandler:
    """Tracks the state of joysticks, mouse and keyboard from input events."""

    def __init__(self, on_quit: Callable[[], Any] | None = None) -> None:
        self.on_quit = on_quit
        self.joysticks_initialised = False
        self.mouse_position = Vector2D(0, 0)
        self._joysticks: list[Any] = []
        self._slots: dict[int, int] = {}
        self._stick_values: list[tuple[Vector2D, Vector2D]] = []
        self._button_states: list[list[bool]] = []
        self._mouse_buttons = [False, False, False]
        self._pressed_keys: set[int] = set()

    def initialise_joysticks(self) -> None:
        """Open every connected joystick and start tracking its state."""
        if not pygame.joystick.get_init():
            pygame.joystick.init()
        count = pygame.joystick.get_count()
        if count <= 0:
            log.info("No joystick detected!")
            self.joysticks_initialised = False
            return
        for index in range(count):
            joystick = pygame.joystick.Joystick(index)
            joystick.init()
            self._joysticks.append(joystick)
            self.attach_joystick(joystick.get_instance_id(), joystick.get_numbuttons())
        self.joysticks_initialised = True
        log.info("Initialised %d joystick(s)", len(self._stick_values))

    def attach_joystick(self, joystick_id: int, button_count: int) -> int:
        """Start tracking a joystick whose events carry ``joystick_id``; return its slot."""
        slot = len(self._stick_values)
        self._slots[joystick_id] = slot
        self._stick_values.append((Vector2D(0, 0), Vector2D(0, 0)))
        self._button_states.append([False] * button_count)
        self.joysticks_initialised = True
        return slot

    def update(self) -> None:
        """Drain the event queue and apply every event."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one input event to the tracked state."""
        kind = event.type
        if kind == pygame.QUIT:
            if self.on_quit is not None:
                self.on_quit()
        elif kind == pygame.JOYAXISMOTION:
            self._on_axis_move(event)
        elif kind == pygame.JOYBUTTONDOWN:
            log.debug("Button: %d pressed", event.button)
            self._button_states[self._slot(event)][event.button] = True
        elif kind == pygame.JOYBUTTONUP:
            self._button_states[self._slot(event)][event.button] = False
        elif kind == pygame.MOUSEMOTION:
            self.mouse_position.x, self.mouse_position.y = event.pos
        elif kind == pygame.MOUSEBUTTONDOWN:
            self._set_mouse_button(event.button, True)
        elif kind == pygame.MOUSEBUTTONUP:
            self._set_mouse_button(event.button, False)
        elif kind == pygame.KEYDOWN:
            self._pressed_keys.add(event.key)
        elif kind == pygame.KEYUP:
            self._pressed_keys.discard(event.key)

    def clean(self) -> None:
        """Close every joystick that was opened."""
        if self.joysticks_initialised:
            for joystick in self._joysticks:
                joystick.quit()
        self._joysticks.clear()

    def xvalue(self, joy: int, stick: int) -> int:
        """Left/right direction of a stick (1 = left stick, 2 = right stick)."""
        if not self._stick_values:
            return 0
        left, right = self._stick_values[joy]
        if stick == 1:
            return int(left.x)
        if stick == 2:
            return int(right.x)
        return 0

    def yvalue(self, joy: int, stick: int) -> int:
        """Up/down direction of a stick (1 = left stick, 2 = right stick)."""
        if not self._stick_values:
            return 0
        left, right = self._stick_values[joy]
        if stick == 1:
            return int(left.y)
        if stick == 2:
            return int(right.y)
        return 0

    def button_state(self, joy: int, button: int) -> bool:
        """Whether a joystick button is held; buttons the joystick lacks are never held."""
        buttons = self._button_states[joy]
        return 0 <= button < len(buttons) and buttons[button]

    def mouse_button_state(self, button: int) -> bool:
        """Whether a mouse button (see :class:`MouseButton`) is held."""
        return self._mouse_buttons[button]

    def is_key_down(self, key: int) -> bool:
        """Whether a key is currently held."""
        return key in self._pressed_keys

    def _slot(self, event: pygame.event.Event) -> int:
        joystick_id = getattr(event, "instance_id", None)
        if joystick_id is None:
            joystick_id = event.joy
        return self._slots[joystick_id]

    def _on_axis_move(self, event: pygame.event.Event) -> None:
        left, right = self._stick_values[self._slot(event)]
        raw = event.value * _AXIS_MAX
        if raw > JOYSTICK_DEAD_ZONE:
            direction = 1
        elif raw < -JOYSTICK_DEAD_ZONE:
            direction = -1
        else:
            direction = 0
        if event.axis == 0:
            left.x = direction
        elif event.axis == 1:
            left.y = direction
        elif event.axis == 3:
            right.x = direction
        elif event.axis == 4:
            right.y = direction

    def _set_mouse_button(self, button: int, pressed: bool) -> None:
        index = _MOUSE_BUTTONS.get(button)
        if index is not None:
            self._mouse_buttons[index] = pressed


@functools.lru_cache(maxsize=None)
def input_handler() -> InputHandler:
    """Return the shared input handler."""
    return InputHandler()