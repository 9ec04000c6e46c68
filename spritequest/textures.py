"""Loading images by id and drawing them, whole or frame by frame."""

from __future__ import annotations

import enum
import functools

import pygame


class TextureError(Exception):
    """Raised when an image cannot be loaded as a texture."""


class Flip(enum.IntFlag):
    """How a texture is mirrored when it is drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class TextureManager:
    """Holds loaded images keyed by id and copies regions of them onto surfaces."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def load(self, file_name: str, texture_id: str) -> None:
        """Load an image file and store it under ``texture_id``."""
        try:
            surface = pygame.image.load(str(file_name))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"cannot load {file_name!r}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures[texture_id] = surface

    def draw(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        target: pygame.Surface,
        flip: Flip = Flip.NONE,
    ) -> pygame.Rect:
        """Draw the top-left ``width`` x ``height`` region of a texture at (x, y)."""
        source = pygame.Rect(0, 0, width, height)
        return self._copy(texture_id, source, x, y, target, flip)

    def draw_frame(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        row: int,
        frame: int,
        target: pygame.Surface,
        flip: Flip = Flip.NONE,
    ) -> pygame.Rect:
        """Draw one frame of a sprite sheet; rows count from 1, frames from 0."""
        source = pygame.Rect(width * frame, height * (row - 1), width, height)
        return self._copy(texture_id, source, x, y, target, flip)

    def clear(self) -> None:
        """Forget every texture."""
        self._textures.clear()

    def remove(self, texture_id: str) -> None:
        """Forget one texture; unknown ids are ignored."""
        self._textures.pop(texture_id, None)

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def _copy(
        self,
        texture_id: str,
        source: pygame.Rect,
        x: int,
        y: int,
        target: pygame.Surface,
        flip: Flip,
    ) -> pygame.Rect:
        try:
            texture = self._textures[texture_id]
        except KeyError:
            raise KeyError(f"no texture loaded as {texture_id!r}") from None
        destination = pygame.Rect(x, y, source.width, source.height)
        region = source.clip(texture.get_rect())
        if region.width == 0 or region.height == 0:
            return destination
        if flip:
            image = pygame.transform.flip(
                texture.subsurface(region),
                bool(flip & Flip.HORIZONTAL),
                bool(flip & Flip.VERTICAL),
            )
            target.blit(image, (x, y))
        else:
            target.blit(texture, (x, y), region)
        return destination


@functools.lru_cache(maxsize=None)
def texture_manager() -> TextureManager:
    """Return the shared texture manager."""
    return TextureManager()