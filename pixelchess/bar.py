"""Progress bars: drawing and the component tying drawing to bar logic."""

from __future__ import annotations

from dataclasses import replace

from pixelchess.bar_logic import BarLogic
from pixelchess.renderer import ColorLike, FRect, Renderer
from pixelchess.vec2 import Vec2


class BarRenderer:
    """Draws a bar outline with a fill proportional to progress."""

    def __init__(self, background_rect: FRect) -> None:
        self._background = replace(background_rect)
        self._fill = replace(background_rect)

    @property
    def background_rect(self) -> FRect:
        return replace(self._background)

    @property
    def fill_rect(self) -> FRect:
        return replace(self._fill)

    def update_visual(self, progress: float) -> None:
        """Resize the fill to the given progress, clamped to [0, 1]."""
        self._fill.w = self._background.w * min(max(progress, 0.0), 1.0)

    def render(self, renderer: Renderer, bg_color: ColorLike, fill_color: ColorLike) -> None:
        renderer.set_rendering_color(bg_color)
        renderer.render_rect(self._background)
        renderer.set_rendering_color(fill_color)
        renderer.render_rect_filled(self._fill)

    def set_position(self, pos: Vec2) -> None:
        self._background.x = self._fill.x = pos.x
        self._background.y = self._fill.y = pos.y


class BarComponent:
    """A bar whose logic drives its drawing."""

    def __init__(self, logic: BarLogic, renderer: BarRenderer) -> None:
        self.logic = logic
        self.bar_renderer = renderer

    def update(self, dt: float) -> None:
        self.logic.update(dt)
        self.bar_renderer.update_visual(self.logic.progress)

    def render(self, renderer: Renderer, bg_color: ColorLike, fill_color: ColorLike) -> None:
        self.bar_renderer.render(renderer, bg_color, fill_color)

    def set_position(self, pos: Vec2) -> None:
        self.bar_renderer.set_position(pos)

    def reset(self) -> None:
        self.logic.reset()

    @property
    def did_finish(self) -> bool:
        return self.logic.did_finish

    @property
    def is_full(self) -> bool:
        return self.logic.is_full

    @property
    def is_empty(self) -> bool:
        return self.logic.is_empty