"""Tracks whose turn it is."""

from __future__ import annotations

import logging

from pixelchess.definitions import NEXT_TURN
from pixelchess.player import Player, PlayerType

logger = logging.getLogger(__name__)


class TurnManager:
    """Holds both players and alternates the active one."""

    def __init__(self) -> None:
        self.player_one = Player("Black", PlayerType.ONE)
        self.player_two = Player("Gray", PlayerType.TWO)
        self.current_turn = PlayerType.ONE

    def set_current_turn_to_player_one(self) -> None:
        self.current_turn = PlayerType.ONE

    def next_turn(self) -> None:
        """Hand the turn to the other player."""
        self.current_turn = PlayerType.TWO if self.is_player_one_turn else PlayerType.ONE
        logger.info(NEXT_TURN, self.active_player)

    @property
    def active_player(self) -> Player:
        return self.player_one if self.is_player_one_turn else self.player_two

    @property
    def opponent_player(self) -> Player:
        return self.player_two if self.is_player_one_turn else self.player_one

    @property
    def is_player_one_turn(self) -> bool:
        return self.current_turn is PlayerType.ONE