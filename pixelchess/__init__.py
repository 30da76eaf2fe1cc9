"""A two-player pixel-art chess game with a perspective board, on pygame."""

__version__ = "0.1.0"