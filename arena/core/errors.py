"""Exceptions raised by the decision core."""

from __future__ import annotations


class ArenaError(Exception):
    """Base class for all errors raised by the arena package."""


class TurnOrderError(ArenaError):
    """A hero was added after monster threat derivation had started."""


class ProtocolError(ArenaError, ValueError):
    """A line of game input could not be parsed."""


class NoActiveMatchError(ArenaError):
    """A turn was submitted before any match was started."""
