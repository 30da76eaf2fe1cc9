"""Loads image textures once and hands them out by id."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import pygame

logger = logging.getLogger(__name__)

TextureLoader = Callable[[str], Any]


class TextureManager:
    """Cache of loaded textures keyed by id."""

    def __init__(self, loader: Optional[TextureLoader] = None) -> None:
        self._loader: TextureLoader = loader or pygame.image.load
        self._textures: Dict[str, Any] = {}

    def load_texture(self, file_path: str, texture_id: str) -> Optional[Any]:
        """Load the texture under the id unless already loaded; None on failure."""
        if texture_id not in self._textures:
            try:
                texture = self._loader(file_path)
            except (OSError, pygame.error) as exc:
                logger.error("Failed to load texture: %s. Error: %s", file_path, exc)
                return None
            logger.info("[TEXTURE] Loading new texture: %s", file_path)
            self._textures[texture_id] = texture
        return self._textures[texture_id]

    def get_texture(self, texture_id: str) -> Optional[Any]:
        return self._textures.get(texture_id)

    def remove_texture(self, texture_id: str) -> None:
        self._textures.pop(texture_id, None)

    def clear(self) -> None:
        self._textures.clear()

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)