"""Progress bar values that fill up or drain over time."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BarLogic(ABC):
    """A value clamped to [0, max] with a progress ratio."""

    def __init__(self, max_value: float, initial_value: float) -> None:
        self.max_value = max_value
        self._value = initial_value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = min(max(value, 0), self.max_value)

    def set_value(self, value: float) -> None:
        """Set the value, clamped to [0, max]."""
        self.value = value

    @property
    def progress(self) -> float:
        return self._value / self.max_value

    @property
    def is_full(self) -> bool:
        return self._value >= self.max_value

    @property
    def is_empty(self) -> bool:
        return self._value <= 0

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance the bar by delta."""

    @abstractmethod
    def reset(self) -> None:
        """Return the bar to its starting value."""

    @property
    @abstractmethod
    def did_finish(self) -> bool:
        """Whether the bar reached its end."""


class IncreasingBarLogic(BarLogic):
    """Starts empty and fills up."""

    def __init__(self, max_value: float) -> None:
        super().__init__(max_value, 0)

    def update(self, delta: float) -> None:
        self.set_value(self.value + delta)

    def reset(self) -> None:
        self.set_value(0)

    @property
    def did_finish(self) -> bool:
        return self.value >= self.max_value


class DecreasingBarLogic(BarLogic):
    """Starts full and drains."""

    def __init__(self, max_value: float) -> None:
        super().__init__(max_value, max_value)

    def update(self, delta: float) -> None:
        self.set_value(self.value - delta)

    def reset(self) -> None:
        self.set_value(self.max_value)

    @property
    def did_finish(self) -> bool:
        return self.value <= 0