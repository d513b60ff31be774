"""ntictactoe package.

Board, move strategies, and turn controller for n×n tic-tac-toe with any mix
of human and random-bot players, plus a console CLI and batch simulation.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .config import GameConfig, PlayerSpec, build_config
from .errors import ConfigError, GameError, InputError
from .game import GameController, GameResult, GameState, new_game
from .players import Player, create_player
from .strategies import HumanStrategy, RandomBotStrategy

__all__ = [
    "Board",
    "GameConfig",
    "PlayerSpec",
    "build_config",
    "GameController",
    "GameResult",
    "GameState",
    "new_game",
    "Player",
    "create_player",
    "HumanStrategy",
    "RandomBotStrategy",
    "GameError",
    "ConfigError",
    "InputError",
]
