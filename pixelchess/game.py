"""The application window, its main loop and the command entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from pixelchess.chess_game import TITLE, ChessGame
from pixelchess.definitions import SCREEN_SIZE
from pixelchess.renderer import Renderer
from pixelchess.text_manager import TextManager
from pixelchess.texture_manager import TextureManager

logger = logging.getLogger(__name__)

TARGET_FPS = 60
FRAME_DELAY = 1000 // TARGET_FPS

MIXER_FREQUENCY = 44100
MIXER_FORMAT = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 2048


def _init_subsystems() -> None:
    try:
        pygame.display.init()
    except pygame.error as exc:
        logger.error("Failed to init SDL: %s", exc)
        raise RuntimeError("Failed to init SDL") from exc

    if not pygame.image.get_extended():
        logger.error("Failed to init SDL image: PNG support is unavailable")
        raise RuntimeError("Failed to init Image SDL")

    try:
        pygame.font.init()
    except pygame.error as exc:
        logger.error("Failed to init SDL TTF: %s", exc)
        raise RuntimeError("Failed to init SDL TTF") from exc

    try:
        pygame.mixer.init(MIXER_FREQUENCY, MIXER_FORMAT, MIXER_CHANNELS, MIXER_BUFFER)
    except pygame.error as exc:
        logger.error("SDL_mixer could not initialize! SDL_mixer Error: %s", exc)


def _quit_subsystems() -> None:
    pygame.mixer.quit()
    pygame.font.quit()
    pygame.display.quit()


class Game:
    """Owns the window and drives the chess scene frame by frame."""

    def __init__(self) -> None:
        _init_subsystems()
        try:
            pygame.display.set_caption(TITLE)
            surface = pygame.display.set_mode((int(SCREEN_SIZE.x), int(SCREEN_SIZE.y)))
        except pygame.error as exc:
            _quit_subsystems()
            raise RuntimeError(f"Error creating the game: {exc}") from exc

        self._is_running = False
        self._renderer = Renderer(surface)
        self._texture_manager = TextureManager()
        self._text_manager = TextManager()
        self.chess_game = ChessGame(self._text_manager, self._texture_manager)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release loaded assets and shut pygame's subsystems down."""
        self._is_running = False
        self._texture_manager.clear()
        self._text_manager.clear()
        _quit_subsystems()

    @property
    def is_running(self) -> bool:
        return self._is_running

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        self._is_running = True
        while self._is_running:
            frame_start = pygame.time.get_ticks()
            self.handle_events()
            self.render()
            frame_duration = pygame.time.get_ticks() - frame_start
            if frame_duration < FRAME_DELAY:
                pygame.time.delay(FRAME_DELAY - frame_duration)

    def shutdown(self) -> None:
        """Stop the main loop after the current frame."""
        self._is_running = False

    def handle_events(self) -> None:
        """Dispatch pending window events to the chess scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.shutdown()
                return
            if event.type == pygame.MOUSEBUTTONUP:
                x, y = event.pos
                self.chess_game.on_click(float(x), float(y))
            if event.type == pygame.KEYUP:
                self.chess_game.on_key_up(event.key)

    def render(self) -> None:
        """Draw one frame and show it."""
        self._renderer.clear()
        self.chess_game.render(self._renderer)
        self._renderer.set_rendering_color((0, 0, 0, 255))
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the chess window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="pixelchess", description="Play a game of chess.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    with Game() as game:
        game.run()
    return 0