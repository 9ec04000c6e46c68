"""Game states and the stack-based machine that switches between them."""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from typing import ClassVar

import pygame

from spritequest.input import InputHandler
from spritequest.input import input_handler as shared_input_handler
from spritequest.objects import GameObject, LoaderParams, MenuButton
from spritequest.textures import TextureError, TextureManager, texture_manager

log = logging.getLogger(__name__)


class GameState(abc.ABC):
    """One screen of the game, such as the menu or the play field."""

    state_id: ClassVar[str] = ""

    @abc.abstractmethod
    def update(self) -> None:
        """Advance the state by one frame."""

    @abc.abstractmethod
    def render(self, target: pygame.Surface) -> None:
        """Draw the state onto ``target``."""

    @abc.abstractmethod
    def on_enter(self) -> bool:
        """Prepare the state; return whether that succeeded."""

    @abc.abstractmethod
    def on_exit(self) -> bool:
        """Tear the state down; return whether it may be removed."""


class GameStateMachine:
    """A stack of game states in which only the top one is updated and drawn."""

    def __init__(self) -> None:
        self._states: list[GameState] = []

    @property
    def current(self) -> GameState | None:
        """The state on top of the stack, if any."""
        return self._states[-1] if self._states else None

    def __len__(self) -> int:
        return len(self._states)

    def push_state(self, state: GameState) -> None:
        """Put a state on top of the stack and enter it."""
        self._states.append(state)
        state.on_enter()

    def pop_state(self) -> None:
        """Remove the top state if it agrees to exit."""
        if self._states and self._states[-1].on_exit():
            self._states.pop()

    def change_state(self, state: GameState) -> None:
        """Replace the top state with ``state`` unless it is already showing."""
        if self._states:
            if self._states[-1].state_id == state.state_id:
                return
            if self._states[-1].on_exit():
                self._states.pop()
        self.push_state(state)

    def update(self) -> None:
        """Update the top state."""
        if self._states:
            self._states[-1].update()

    def render(self, target: pygame.Surface) -> None:
        """Draw the top state."""
        if self._states:
            self._states[-1].render(target)


class MenuState(GameState):
    """The main menu with a play and an exit button."""

    state_id: ClassVar[str] = "MENU"

    def __init__(
        self,
        textures: TextureManager | None = None,
        input_handler: InputHandler | None = None,
        asset_dir: str | Path = "assets",
    ) -> None:
        self.textures = textures if textures is not None else texture_manager()
        self.input = input_handler if input_handler is not None else shared_input_handler()
        self.asset_dir = Path(asset_dir)
        self.game_objects: list[GameObject] = []

    def update(self) -> None:
        """Update every button."""
        for game_object in self.game_objects:
            game_object.update()

    def render(self, target: pygame.Surface) -> None:
        """Draw every button."""
        for game_object in self.game_objects:
            game_object.draw(target)

    def on_enter(self) -> bool:
        """Load the button images and create the buttons."""
        try:
            self.textures.load(str(self.asset_dir / "button.png"), "playbutton")
            self.textures.load(str(self.asset_dir / "exit.png"), "exitbutton")
        except TextureError as exc:
            log.error("%s", exc)
            return False
        self.game_objects.append(
            MenuButton(LoaderParams(100, 100, 400, 100, "playbutton"), self.textures, self.input)
        )
        self.game_objects.append(
            MenuButton(LoaderParams(100, 300, 400, 100, "exitbutton"), self.textures, self.input)
        )
        log.info("entering MenuState")
        return True

    def on_exit(self) -> bool:
        """Clean up the buttons and forget their images."""
        for game_object in self.game_objects:
            game_object.clean()
        self.game_objects.clear()
        self.textures.remove("playbutton")
        self.textures.remove("exitbutton")
        log.info("exiting MenuState")
        return True


class PlayState(GameState):
    """The play field."""

    state_id: ClassVar[str] = "PLAY"

    def update(self) -> None:
        """Nothing happens yet in play."""

    def render(self, target: pygame.Surface) -> None:
        """Nothing is drawn yet in play."""

    def on_enter(self) -> bool:
        log.info("entering PlayState")
        return True

    def on_exit(self) -> bool:
        log.info("exiting PlayState")
        return True