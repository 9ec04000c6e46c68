"""A dialog box that types its text out one character at a time."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

import pygame

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
DIALOG_BOX_HEIGHT = 100
CHAR_DELAY_MS = 50
BORDER = 20
PADDING = 10
BOX_COLOUR = (0, 0, 0)
TEXT_COLOUR = (255, 255, 255)
BACKGROUND_COLOUR = (100, 149, 237)
FONT_PATH = "assets/fonts/monogram.ttf"
FONT_SIZE = 24
FULL_TEXT = "Hey there! Welcome to our world. It's full of wonders and adventures!"


@dataclass
class Typewriter:
    """Reveals one more character each time the delay has passed."""

    text_length: int
    chars_shown: int = 1
    last_char_time: int = 0
    delay: int = CHAR_DELAY_MS

    def advance(self, now: int) -> int:
        """Reveal the next character if it is due at time ``now``; return the count shown."""
        if self.chars_shown < self.text_length and now - self.last_char_time > self.delay:
            self.chars_shown += 1
            self.last_char_time = now
        return self.chars_shown


def wrap_text_to_fit(text: str, max_width: int, measure: Callable[[str], int]) -> str:
    """Break ``text`` into lines whose measured width stays within ``max_width``.

    A word wider than ``max_width`` on its own still gets a line of its own.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if measure(candidate) > max_width:
            if line:
                lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return "\n".join(lines)


def visible_lines(text: str, chars_to_show: int) -> list[str]:
    """Return the lines of the first ``chars_to_show`` characters of ``text``."""
    if chars_to_show < 0:
        raise ValueError("chars_to_show must not be negative")
    return text[:chars_to_show].splitlines()


def render_dialog_box(
    target: pygame.Surface, font: pygame.font.Font, text: str, chars_to_show: int
) -> pygame.Rect:
    """Draw the box and the visible part of ``text`` onto ``target``; return the box."""
    box = pygame.Rect(
        BORDER,
        SCREEN_HEIGHT - DIALOG_BOX_HEIGHT - BORDER,
        SCREEN_WIDTH - 2 * BORDER,
        DIALOG_BOX_HEIGHT,
    )
    target.fill(BOX_COLOUR, box)
    line_height = font.get_height()
    y = box.y + PADDING
    for line in visible_lines(text, chars_to_show):
        if not line:
            continue
        try:
            rendered = font.render(line, True, TEXT_COLOUR)
        except pygame.error:
            continue
        target.blit(rendered, (box.x + PADDING, y))
        y += line_height
    return box


def main(argv: list[str] | None = None) -> int:
    """Show the typing dialog until the window is closed."""
    parser = argparse.ArgumentParser(description="Show a typing dialog box.")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font file")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Dialog Example")
        font = pygame.font.Font(args.font, FONT_SIZE)
    except (pygame.error, OSError) as exc:
        print(f"Init failed! {exc}", file=sys.stderr)
        pygame.quit()
        return 1

    wrapped = wrap_text_to_fit(
        FULL_TEXT, SCREEN_WIDTH - 2 * BORDER - BORDER, lambda s: font.size(s)[0]
    )
    typewriter = Typewriter(len(FULL_TEXT), last_char_time=pygame.time.get_ticks())

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        typewriter.advance(pygame.time.get_ticks())
        screen.fill(BACKGROUND_COLOUR)
        render_dialog_box(screen, font, wrapped, typewriter.chars_shown)
        pygame.display.flip()

    pygame.quit()
    return 0