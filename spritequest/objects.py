"""Game objects: animated sprites, the input-driven player, enemies and menu buttons."""

from __future__ import annotations

import abc
import enum
from collections.abc import Callable
from dataclasses import dataclass

import pygame

from spritequest.input import InputHandler, MouseButton
from spritequest.input import input_handler as shared_input_handler
from spritequest.textures import TextureManager, texture_manager
from spritequest.vector import Vector2D

ANIMATION_FRAMES = 6
FRAME_DURATION_MS = 100
MOUSE_FOLLOW_DIVISOR = 100
KEY_SPEED = 2


@dataclass(frozen=True)
class LoaderParams:
    """Where an object starts, how large it is and which texture it shows."""

    x: int
    y: int
    width: int
    height: int
    texture_id: str


class GameObject(abc.ABC):
    """Anything that can be drawn, updated once per frame and cleaned up."""

    @abc.abstractmethod
    def draw(self, target: pygame.Surface) -> None:
        """Draw the object onto ``target``."""

    @abc.abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abc.abstractmethod
    def clean(self) -> None:
        """Release whatever the object holds."""


class SpriteObject(GameObject):
    """A game object drawn from one frame of a sprite sheet, moving with a velocity."""

    def __init__(self, params: LoaderParams, textures: TextureManager | None = None) -> None:
        self.textures = textures if textures is not None else texture_manager()
        self.position = Vector2D(params.x, params.y)
        self.velocity = Vector2D(0, 0)
        self.acceleration = Vector2D(0, 0)
        self.width = params.width
        self.height = params.height
        self.texture_id = params.texture_id
        self.current_row = 1
        self.current_frame = 1

    def draw(self, target: pygame.Surface) -> None:
        """Draw the current frame at the current position."""
        self.textures.draw_frame(
            self.texture_id,
            int(self.position.x),
            int(self.position.y),
            self.width,
            self.height,
            self.current_row,
            self.current_frame,
            target,
        )

    def update(self) -> None:
        """Apply acceleration to velocity, then velocity to position."""
        self.velocity += self.acceleration
        self.position += self.velocity

    def clean(self) -> None:
        """Nothing to release."""


class Player(SpriteObject):
    """The sprite steered by joystick, mouse and arrow keys."""

    def __init__(
        self,
        params: LoaderParams,
        textures: TextureManager | None = None,
        input_handler: InputHandler | None = None,
        ticks: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(params, textures)
        self.input = input_handler if input_handler is not None else shared_input_handler()
        self.ticks = ticks if ticks is not None else pygame.time.get_ticks

    def update(self) -> None:
        """Read input into velocity, step the animation and move."""
        self.velocity = Vector2D(0, 0)
        self.handle_input()
        self.current_frame = (self.ticks() // FRAME_DURATION_MS) % ANIMATION_FRAMES
        super().update()

    def handle_input(self) -> None:
        """Set the velocity from the current input state."""
        handler = self.input
        if handler.joysticks_initialised:
            for stick in (1, 2):
                x = handler.xvalue(0, stick)
                if x:
                    self.velocity.x = x
                y = handler.yvalue(0, stick)
                if y:
                    self.velocity.y = y
            if handler.button_state(0, 9):
                self.velocity.x = 1
            if handler.button_state(0, 10):
                self.velocity.x = 1
        if handler.mouse_button_state(MouseButton.LEFT):
            self.velocity.x = 1
        # Following the mouse replaces whatever was set above.
        self.velocity = (handler.mouse_position - self.position) / MOUSE_FOLLOW_DIVISOR
        if handler.is_key_down(pygame.K_RIGHT):
            self.velocity.x = KEY_SPEED
        if handler.is_key_down(pygame.K_LEFT):
            self.velocity.x = -KEY_SPEED
        if handler.is_key_down(pygame.K_UP):
            self.velocity.y = -KEY_SPEED
        if handler.is_key_down(pygame.K_DOWN):
            self.velocity.y = KEY_SPEED


class Enemy(SpriteObject):
    """A sprite that drifts one pixel right and down every frame."""

    def update(self) -> None:
        """Move diagonally by one pixel."""
        self.position.x += 1
        self.position.y += 1


class ButtonState(enum.IntEnum):
    """Which frame of a button's sprite sheet is shown."""

    MOUSE_OUT = 0
    MOUSE_OVER = 1
    CLICKED = 2


class MenuButton(SpriteObject):
    """A button that highlights under the mouse and shows when it is clicked."""

    def __init__(
        self,
        params: LoaderParams,
        textures: TextureManager | None = None,
        input_handler: InputHandler | None = None,
    ) -> None:
        super().__init__(params, textures)
        self.input = input_handler if input_handler is not None else shared_input_handler()
        self.current_frame = ButtonState.MOUSE_OUT

    def update(self) -> None:
        """Choose the frame from the mouse position and the left button."""
        mouse = self.input.mouse_position
        inside = (
            self.position.x < mouse.x < self.position.x + self.width
            and self.position.y < mouse.y < self.position.y + self.height
        )
        if not inside:
            self.current_frame = ButtonState.MOUSE_OUT
        elif self.input.mouse_button_state(MouseButton.LEFT):
            self.current_frame = ButtonState.CLICKED
        else:
            self.current_frame = ButtonState.MOUSE_OVER