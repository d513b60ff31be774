"""
Game setup: the validated configuration record consumed by the game core.

Environment-first defaults (TTT_BOARD_SIZE, TTT_SEED) are used by the CLI
when the corresponding flags are omitted.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import ConfigError

DEFAULT_MARKS = ["X", "O", "A", "B", "C", "D", "E", "F", "G", "H"]


@dataclass(frozen=True)
class PlayerSpec:
    number: int
    mark: str
    is_bot: bool


@dataclass(frozen=True)
class GameConfig:
    board_size: int
    players: List[PlayerSpec] = field(default_factory=list)

    @property
    def bot_count(self) -> int:
        return sum(1 for p in self.players if p.is_bot)


def validate_counts(board_size: int, player_count: int, bot_count: int) -> None:
    if board_size < 1:
        raise ConfigError(f"Board size must be a positive integer, got {board_size}")
    if player_count < 1:
        raise ConfigError(f"Player count must be at least 1, got {player_count}")
    if bot_count < 0:
        raise ConfigError(f"Bot count cannot be negative, got {bot_count}")
    if bot_count > player_count:
        raise ConfigError(
            f"Bot count ({bot_count}) cannot exceed player count ({player_count})"
        )


def validate_marks(marks: Sequence[str], player_count: int) -> None:
    if len(marks) != player_count:
        raise ConfigError(f"Expected {player_count} marks, got {len(marks)}")
    for i, m in enumerate(marks, start=1):
        if not m or any(ch.isspace() for ch in m):
            raise ConfigError(f"Mark for player {i} must be non-empty without whitespace: {m!r}")
    if len(set(marks)) != len(marks):
        raise ConfigError(f"Marks must be distinct, got {list(marks)}")


def build_config(board_size: int, player_count: int, bot_count: int, marks: Sequence[str]) -> GameConfig:
    """Validate setup values; players numbered <= bot_count are bots."""
    validate_counts(board_size, player_count, bot_count)
    validate_marks(marks, player_count)
    players = [
        PlayerSpec(number=i, mark=marks[i - 1], is_bot=i <= bot_count)
        for i in range(1, player_count + 1)
    ]
    return GameConfig(board_size=board_size, players=players)


def default_marks(player_count: int) -> List[str]:
    if player_count > len(DEFAULT_MARKS):
        raise ConfigError(
            f"No default marks for {player_count} players; pass --marks explicitly"
        )
    return DEFAULT_MARKS[:player_count]


def parse_marks(raw: str) -> List[str]:
    return [m.strip() for m in raw.split(",")]


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def env_board_size() -> Optional[int]:
    return _env_int("TTT_BOARD_SIZE")


def env_seed() -> Optional[int]:
    return _env_int("TTT_SEED")
