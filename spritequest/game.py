"""The game object that owns the window, the input and the state machine."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import pygame

from spritequest.input import InputHandler
from spritequest.states import GameStateMachine, MenuState, PlayState
from spritequest.textures import TextureManager

log = logging.getLogger(__name__)

FPS = 60
DELAY_TIME = int(1000.0 / FPS)
CLEAR_COLOUR = (0, 0, 0)


class GameInitError(Exception):
    """Raised when the window or the display cannot be set up."""


class Game:
    """Runs one window: gathers input, updates and draws the current state."""

    def __init__(self, asset_dir: str | Path = "assets") -> None:
        self.asset_dir = Path(asset_dir)
        self.screen: pygame.Surface | None = None
        self.running = False
        self.width = 0
        self.height = 0
        self.textures = TextureManager()
        self.input = InputHandler(on_quit=self.quit)
        self.state_machine = GameStateMachine()

    def init(
        self,
        title: str,
        xpos: int,
        ypos: int,
        width: int,
        height: int,
        fullscreen: bool = False,
    ) -> None:
        """Open the window, set up input and enter the menu."""
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{xpos},{ypos}"
        pygame.init()
        flags = pygame.FULLSCREEN if fullscreen else 0
        try:
            self.screen = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            raise GameInitError(f"window init fail: {exc}") from exc
        log.info("window creation success")
        pygame.display.set_caption(title)
        self.width = width
        self.height = height

        self.input.initialise_joysticks()
        log.info("init success")
        self.running = True

        self.state_machine.change_state(
            MenuState(self.textures, self.input, self.asset_dir)
        )

    def render(self) -> None:
        """Clear the window, draw the current state and show the result."""
        if self.screen is None:
            raise RuntimeError("the game has not been initialised")
        self.screen.fill(CLEAR_COLOUR)
        self.state_machine.render(self.screen)
        pygame.display.flip()

    def update(self) -> None:
        """Advance the current state by one frame."""
        self.state_machine.update()

    def handle_events(self) -> None:
        """Process pending input; Enter switches to play."""
        self.input.update()
        if self.input.is_key_down(pygame.K_RETURN):
            self.state_machine.change_state(PlayState())

    def clean(self) -> None:
        """Release input devices and shut the display down."""
        log.info("cleaning game")
        self.input.clean()
        self.screen = None
        pygame.quit()

    def quit(self) -> None:
        """Stop the game loop after the current frame."""
        self.running = False


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed."""
    parser = argparse.ArgumentParser(description="Run the sprite game.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    log.info("game init attempt...")
    game = Game(args.assets)
    try:
        game.init("Chapter 1", 100, 100, 640, 480, False)
    except GameInitError as exc:
        print(f"game init failure - {exc}")
        return 1
    log.info("game init success!")

    while game.running:
        frame_start = pygame.time.get_ticks()
        game.handle_events()
        game.update()
        game.render()
        frame_time = pygame.time.get_ticks() - frame_start
        if frame_time < DELAY_TIME:
            pygame.time.delay(DELAY_TIME - frame_time)

    log.info("game closing...")
    game.clean()
    return 0