"""
Board state for n×n tic-tac-toe: legality, placement, win/draw checks, rendering.
Notes:
- Cells hold either EMPTY or a player's mark (an opaque string).
- A written cell is never overwritten; place() refuses instead of raising.
- A win is a full row, a full column, or either diagonal of one mark.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

EMPTY = " "


class Board:
    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Board size must be >= 1, got {size}")
        self._size = size
        self._grid: List[List[str]] = [[EMPTY for _ in range(size)] for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def cell(self, row: int, col: int) -> str:
        return self._grid[row][col]

    def rows(self) -> List[Tuple[str, ...]]:
        return [tuple(r) for r in self._grid]

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self._size)
            for c in range(self._size)
            if self._grid[r][c] == EMPTY
        ]

    def occupied_count(self) -> int:
        return sum(1 for row in self._grid for v in row if v != EMPTY)

    def is_full(self) -> bool:
        return all(v != EMPTY for row in self._grid for v in row)

    def is_valid_move(self, row: int, col: int) -> bool:
        return (
            0 <= row < self._size
            and 0 <= col < self._size
            and self._grid[row][col] == EMPTY
        )

    def place(self, row: int, col: int, mark: str) -> bool:
        """Write `mark` at (row, col). Returns False and leaves the grid untouched on an illegal move."""
        if mark == EMPTY or not mark:
            logger.debug("rejected blank mark at (%d, %d)", row, col)
            return False
        if not self.is_valid_move(row, col):
            logger.debug("rejected %s at (%d, %d)", mark, row, col)
            return False
        self._grid[row][col] = mark
        return True

    def check_winner(self, mark: str) -> bool:
        if mark == EMPTY or not mark:
            return False
        return self._check_rows(mark) or self._check_columns(mark) or self._check_diagonals(mark)

    def _check_rows(self, mark: str) -> bool:
        return any(all(v == mark for v in row) for row in self._grid)

    def _check_columns(self, mark: str) -> bool:
        n = self._size
        return any(all(self._grid[r][c] == mark for r in range(n)) for c in range(n))

    def _check_diagonals(self, mark: str) -> bool:
        n = self._size
        if all(self._grid[i][i] == mark for i in range(n)):
            return True
        return all(self._grid[i][n - 1 - i] == mark for i in range(n))

    def render(self) -> str:
        return "\n".join("".join(f"| {v} " for v in row) + "|" for row in self._grid)

    def __str__(self) -> str:
        return self.render()
