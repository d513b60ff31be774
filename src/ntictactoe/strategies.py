"""
Move strategies: given a board and a mark, decide where to play.

Strategies never write to the board. The game controller applies the
returned coordinates, so Board.place stays the only mutation path.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

import numpy as np

from .board import Board

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


class InputSource(Protocol):
    def request_coordinates(self) -> Move: ...


class OutputSink(Protocol):
    def show(self, text: str) -> None: ...


class MoveStrategy(Protocol):
    is_bot: bool

    def produce_move(self, board: Board, mark: str) -> Move: ...


class HumanStrategy:
    is_bot = False

    def __init__(self, source: InputSource, sink: OutputSink):
        self._source = source
        self._sink = sink

    def produce_move(self, board: Board, mark: str) -> Move:
        # InputError from the source propagates: malformed tokens are fatal.
        while True:
            row, col = self._source.request_coordinates()
            if board.is_valid_move(row, col):
                return row, col
            logger.debug("illegal human move (%d, %d) for %s", row, col, mark)
            self._sink.show("Invalid move. Try again.")


class RandomBotStrategy:
    """Uniform rejection sampling over all n×n cells until an empty one is hit."""

    is_bot = True

    def __init__(self, rng: Optional[np.random.Generator] = None, sink: Optional[OutputSink] = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._sink = sink

    def produce_move(self, board: Board, mark: str) -> Move:
        if board.is_full():
            raise ValueError("RandomBotStrategy invoked on a full board")
        n = board.size
        attempts = 0
        while True:
            attempts += 1
            row = int(self._rng.integers(0, n))
            col = int(self._rng.integers(0, n))
            if board.is_valid_move(row, col):
                break
        logger.debug("bot %s sampled (%d, %d) after %d attempt(s)", mark, row, col, attempts)
        if self._sink is not None:
            self._sink.show(f"Bot chose: {row + 1} {col + 1}")
        return row, col
