"""A pygame sprite game with a button menu, state machine, input handling and a typewriter dialog."""

__version__ = "0.1.0"