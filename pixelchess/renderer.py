"""Drawing primitives on top of a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import pygame

ColorLike = Union[pygame.Color, Tuple[int, int, int], Tuple[int, int, int, int]]
RectLike = Union[pygame.Rect, Tuple[int, int, int, int]]


@dataclass
class FRect:
    """A rectangle with float position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def __mul__(self, scale: float) -> FRect:
        if isinstance(scale, FRect):
            return NotImplemented
        return FRect(self.x * scale, self.y * scale, self.w * scale, self.h * scale)

    __rmul__ = __mul__

    def to_rect(self) -> pygame.Rect:
        """Nearest integer pixel rectangle."""
        return pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))


class Renderer:
    """Draws rectangles, textures and text onto a target surface with alpha blending."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._color = pygame.Color(0, 0, 0, 255)

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(self._color)

    def set_rendering_color(self, color: ColorLike) -> None:
        """Set the color used by the rectangle and clear operations."""
        self._color = pygame.Color(color)

    def clear(self) -> None:
        """Fill the whole target with the current color."""
        self._surface.fill(self._color)

    def _draw_rect(self, rect: FRect, width: int) -> None:
        area = rect.to_rect()
        if area.w <= 0 or area.h <= 0:
            return
        layer = pygame.Surface(area.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, self._color, layer.get_rect(), width)
        self._surface.blit(layer, area.topleft)

    def render_rect(self, rect: FRect) -> None:
        """Draw the outline of a rectangle."""
        self._draw_rect(rect, 1)

    def render_rect_filled(self, rect: FRect) -> None:
        """Draw a filled rectangle."""
        self._draw_rect(rect, 0)

    def render_texture(
        self,
        texture: Optional[pygame.Surface],
        src_rect: RectLike,
        dst_rect: FRect,
        angle: float = 0,
    ) -> None:
        """Copy part of a texture, scaled to the destination and rotated clockwise by angle."""
        if texture is None:
            return
        source = pygame.Rect(src_rect).clip(texture.get_rect())
        destination = dst_rect.to_rect()
        if source.w <= 0 or source.h <= 0 or destination.w <= 0 or destination.h <= 0:
            return
        image = pygame.transform.scale(texture.subsurface(source), destination.size)
        if angle:
            image = pygame.transform.rotate(image, -angle)
            destination = image.get_rect(center=destination.center)
        self._surface.blit(image, destination.topleft)

    def render_text(
        self,
        font: pygame.font.Font,
        text: str,
        color: ColorLike,
        x: float,
        y: float,
        centered: bool = True,
    ) -> None:
        """Draw text at (x, y), centred on that point unless centered is False."""
        try:
            text_surface = font.render(text, True, color)
        except pygame.error as exc:
            raise RuntimeError(f"Failed to create text surface: {exc}") from exc

        left, top = int(x), int(y)
        if centered:
            left -= text_surface.get_width() // 2
            top -= text_surface.get_height() // 2
        self._surface.blit(text_surface, (left, top))