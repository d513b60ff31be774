"""
Exceptions raised for unrecoverable setup and input problems.

Illegal moves are not errors: the board reports them through return values
and strategies simply ask again.
"""


class GameError(Exception):
    """Base class for errors that end a session."""


class ConfigError(GameError, ValueError):
    """Setup values that cannot describe a playable game."""


class InputError(GameError, ValueError):
    """Malformed console input (non-numeric tokens, wrong arity, EOF)."""
