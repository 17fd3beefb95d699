"""Arena control bot: geometry kernel, threat model and turn state."""

__version__ = "0.1.0"
