"""Loads fonts once and hands them out by id."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import pygame

logger = logging.getLogger(__name__)

FontLoader = Callable[[str, int], Any]


def _load_pygame_font(file_path: str, font_size: int) -> pygame.font.Font:
    return pygame.font.Font(file_path, font_size)


class TextManager:
    """Cache of loaded fonts keyed by id."""

    def __init__(self, loader: Optional[FontLoader] = None) -> None:
        self._loader: FontLoader = loader or _load_pygame_font
        self._fonts: Dict[str, Any] = {}

    def get_font(self, font_id: str) -> Optional[Any]:
        return self._fonts.get(font_id)

    def load_font(self, file_path: str, font_size: int, custom_id: str = "") -> Optional[Any]:
        """Load a font under custom_id (or its path) unless already loaded; None on failure."""
        font_id = custom_id or file_path
        if font_id not in self._fonts:
            try:
                font = self._loader(file_path, font_size)
            except (OSError, pygame.error) as exc:
                logger.error("Failed to load font: %s (%s)", file_path, exc)
                return None
            logger.info(
                "[FONT] Font loaded successfully {path='%s', id='%s'}", file_path, font_id
            )
            self._fonts[font_id] = font
        return self._fonts[font_id]

    def remove_font(self, font_id: str) -> None:
        """Forget a font, warning if it was never loaded."""
        if self._fonts.pop(font_id, None) is None:
            logger.warning("[FONT WARNING] Trying to remove unexpected font: %s", font_id)
        else:
            logger.info("[FONT] Removed font: %s", font_id)

    def clear(self) -> None:
        self._fonts.clear()

    def __contains__(self, font_id: object) -> bool:
        return font_id in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)