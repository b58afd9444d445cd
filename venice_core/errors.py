from __future__ import annotations


class VeniceError(Exception):
    """Base class for rule violations reported by the game flow layer."""


class IllegalPlacement(VeniceError, ValueError):
    """A placement that breaks the board rules or the turn rules."""

    def __init__(self, x: int, y: int, reason: str):
        super().__init__(f'Illegal placement at ({x},{y}): {reason}')
        self.x = x
        self.y = y
        self.reason = reason


class IllegalAction(VeniceError, RuntimeError):
    """An action that is not allowed in the current phase of the game."""
