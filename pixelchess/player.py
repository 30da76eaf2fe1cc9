"""Chess players."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlayerType(Enum):
    """Which side a player is on; the value is its display label."""

    ONE = "Player One"
    TWO = "Player Two"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Player:
    """A player; two players are equal when they are on the same side."""

    name: str
    type: PlayerType

    @property
    def is_player_one(self) -> bool:
        return self.type is PlayerType.ONE

    @property
    def direction(self) -> int:
        """Row direction this player's pawns advance in."""
        return 1 if self.is_player_one else -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def __str__(self) -> str:
        return f"{self.type} {self.name}"