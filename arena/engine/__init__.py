"""Engine layer: action emission, decision entry point, line protocol."""

from arena.engine.actions import ActionEmitter, Command
from arena.engine.brain import Brain
from arena.engine.protocol import GameLoop

__all__ = ["ActionEmitter", "Brain", "Command", "GameLoop"]
