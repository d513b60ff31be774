from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from .config import (
    build_config,
    env_board_size,
    env_seed,
    parse_marks,
    validate_counts,
)
from .console import ConsoleIO
from .errors import GameError
from .game import new_game
from .simulate import SimulationArgs, run_simulation
from .tracking import maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="n×n tic-tac-toe for humans and random bots")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for bot moves (default: $TTT_SEED or random)"
    )

    p_play = sub.add_parser("play", help="Play an interactive game (omitted values are prompted)")
    p_play.add_argument("--size", type=int, default=None, help="Board size n (default: $TTT_BOARD_SIZE or prompt)")
    p_play.add_argument("--players", type=int, default=None, help="Number of players")
    p_play.add_argument("--bots", type=int, default=None, help="Number of bots (players 1..bots are bots)")
    p_play.add_argument("--marks", type=str, default=None, help='Comma-separated marks, e.g. "X,O"')

    p_sim = sub.add_parser("simulate", help="Run bot-only games and summarize the outcomes")
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    p_sim.add_argument("--size", type=int, default=None, help="Board size n (default: $TTT_BOARD_SIZE or 3)")
    p_sim.add_argument("--players", type=int, default=2, help="Number of bot players (default: 2)")
    p_sim.add_argument("--marks", type=str, default=None, help='Comma-separated marks, e.g. "X,O"')
    p_sim.add_argument("--out", type=Path, default=None, help="Directory for per-game results (optional)")
    p_sim.add_argument(
        "--format",
        choices=["csv", "parquet", "both"],
        default="csv",
        help="Export format: csv (default), parquet, both",
    )
    p_sim.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_sim.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs/artifacts (for mlflow local backend)",
    )
    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "pandas", "pyarrow", "mlflow"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _resolve_seed(ns: argparse.Namespace) -> Optional[int]:
    return ns.seed if ns.seed is not None else env_seed()


def _run_play(ns: argparse.Namespace, io: ConsoleIO) -> int:
    size = ns.size if ns.size is not None else env_board_size()
    if size is None:
        size = io.read_int("Enter board size (n): ")
    player_count = ns.players if ns.players is not None else io.read_int("Enter number of players (n-1): ")
    bot_count = ns.bots if ns.bots is not None else io.read_int("Enter number of bots: ")
    # Reject bad counts before asking for marks
    validate_counts(size, player_count, bot_count)

    if ns.marks is not None:
        marks: List[str] = parse_marks(ns.marks)
    else:
        marks = [io.read_token(f"Enter symbol for Player {i}: ") for i in range(1, player_count + 1)]
    config = build_config(size, player_count, bot_count, marks)
    logging.debug("config=%s", config)

    seed = _resolve_seed(ns)
    game = new_game(config, source=io, sink=io, rng=np.random.default_rng(seed))
    result = game.play()
    logging.debug("outcome=%s turns=%d", result.state.value, result.turns)
    return 0


def _run_simulate(ns: argparse.Namespace, argv: Optional[List[str]]) -> int:
    size = ns.size if ns.size is not None else env_board_size()
    if size is None:
        size = 3
    args = SimulationArgs(
        games=ns.games,
        board_size=size,
        player_count=ns.players,
        marks=parse_marks(ns.marks) if ns.marks is not None else None,
        seed=_resolve_seed(ns),
        out=ns.out,
        format=ns.format,
    )
    if args.games < 1:
        logging.error("--games must be at least 1: %s", args.games)
        return 2
    if ns.verbose:
        logging.info("cli_argv=%s", argv)
    with maybe_mlflow_run(ns.tracking == "mlflow", run_name="simulate", log_dir=ns.log_dir):
        summary = run_simulation(args)
    logging.info(
        "games=%d draws=%d wins=%s mean_turns=%.2f max_turns=%d",
        summary.games,
        summary.draws,
        summary.wins,
        summary.mean_turns,
        summary.max_turns,
    )
    if args.out is not None:
        logging.info("Exported results to: %s", args.out)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ntictactoe"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    try:
        if ns.cmd == "play":
            return _run_play(ns, ConsoleIO())
        if ns.cmd == "simulate":
            return _run_simulate(ns, argv)
    except GameError as e:
        logging.error("%s", e)
        return 2
    except RuntimeError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
