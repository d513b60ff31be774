"""
Turn sequencing: players move in order until someone completes a line or
the board fills up.

States: IN_PROGRESS -> WON(player) | DRAW. Both outcomes are terminal; a new
game needs a fresh Board and GameController.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .board import Board
from .config import GameConfig
from .errors import GameError
from .players import Player, create_player
from .strategies import InputSource, OutputSink

logger = logging.getLogger(__name__)

MAX_REJECTED_MOVES = 100


class GameState(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    state: GameState
    winner: Optional[Player]
    turns: int

    @property
    def message(self) -> str:
        if self.state is GameState.WON and self.winner is not None:
            return f"Player {self.winner.number} wins!"
        if self.state is GameState.DRAW:
            return "It's a draw!"
        return "Game in progress"


class _SilentSink:
    def show(self, text: str) -> None:
        pass


class GameController:
    def __init__(self, board: Board, players: List[Player], sink: Optional[OutputSink] = None):
        if not players:
            raise ValueError("A game needs at least one player")
        self._board = board
        self._players = list(players)
        self._sink = sink if sink is not None else _SilentSink()
        self._index = 0
        self._state = GameState.IN_PROGRESS
        self._winner: Optional[Player] = None
        self._turns = 0

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Player:
        return self._players[self._index]

    @property
    def turns(self) -> int:
        return self._turns

    @property
    def is_over(self) -> bool:
        return self._state is not GameState.IN_PROGRESS

    def result(self) -> GameResult:
        return GameResult(state=self._state, winner=self._winner, turns=self._turns)

    def step(self) -> GameState:
        """Resolve one full turn. No-op once the game is over."""
        if self.is_over:
            return self._state
        if self._board.is_full():
            self._finish_draw()
            return self._state

        player = self.current_player
        self._sink.show(f"Player {player.number}'s Turn ({player.mark})")
        rejected = 0
        while True:
            row, col = player.produce_move(self._board)
            if self._board.place(row, col, player.mark):
                break
            rejected += 1
            if rejected >= MAX_REJECTED_MOVES:
                raise GameError(
                    f"Player {player.number} proposed {rejected} illegal moves in a row"
                )
            logger.warning(
                "player %d proposed illegal move (%d, %d); asking again", player.number, row, col
            )
        self._turns += 1
        logger.debug("turn %d: player %d placed %s at (%d, %d)",
                     self._turns, player.number, player.mark, row, col)
        self._sink.show(self._board.render())

        if self._board.check_winner(player.mark):
            self._state = GameState.WON
            self._winner = player
            logger.debug("player %d wins after %d turns", player.number, self._turns)
            self._sink.show(self.result().message)
            return self._state

        self._index = (self._index + 1) % len(self._players)
        if self._board.is_full():
            self._finish_draw()
        return self._state

    def play(self) -> GameResult:
        while not self.is_over:
            self.step()
        return self.result()

    def _finish_draw(self) -> None:
        self._state = GameState.DRAW
        logger.debug("draw after %d turns", self._turns)
        self._sink.show(self.result().message)


def build_players(
    config: GameConfig,
    source: Optional[InputSource] = None,
    sink: Optional[OutputSink] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Player]:
    if rng is None:
        rng = np.random.default_rng()
    return [
        create_player(spec.number, spec.mark, spec.is_bot, source=source, sink=sink, rng=rng)
        for spec in config.players
    ]


def new_game(
    config: GameConfig,
    source: Optional[InputSource] = None,
    sink: Optional[OutputSink] = None,
    rng: Optional[np.random.Generator] = None,
) -> GameController:
    board = Board(config.board_size)
    players = build_players(config, source=source, sink=sink, rng=rng)
    return GameController(board, players, sink=sink)
