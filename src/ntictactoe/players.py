"""
Players and the factory that picks a strategy from the is_bot flag.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .board import Board
from .strategies import HumanStrategy, InputSource, Move, MoveStrategy, OutputSink, RandomBotStrategy


@dataclass(frozen=True)
class Player:
    number: int
    mark: str
    strategy: MoveStrategy

    @property
    def is_bot(self) -> bool:
        return self.strategy.is_bot

    def produce_move(self, board: Board) -> Move:
        return self.strategy.produce_move(board, self.mark)


def create_player(
    number: int,
    mark: str,
    is_bot: bool,
    source: Optional[InputSource] = None,
    sink: Optional[OutputSink] = None,
    rng: Optional[np.random.Generator] = None,
) -> Player:
    if is_bot:
        return Player(number, mark, RandomBotStrategy(rng=rng, sink=sink))
    if source is None or sink is None:
        raise ValueError(f"Human player {number} needs an input source and an output sink")
    return Player(number, mark, HumanStrategy(source, sink))
