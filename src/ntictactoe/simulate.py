"""
Bot-only batch simulation and results export.

Runs K games where every player uses RandomBotStrategy, aggregates the
outcomes, and optionally writes per-game rows (CSV and/or Parquet) plus a
manifest.json next to them.
"""
from __future__ import annotations

import csv
import importlib.util
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from .config import build_config, default_marks
from .game import GameState, new_game
from .tracking import log_artifact, log_metrics, log_params

RESULTS_VERSION = "1.0.0"


@dataclass
class SimulationArgs:
    games: int = 100
    board_size: int = 3
    player_count: int = 2
    marks: Optional[List[str]] = None
    seed: Optional[int] = None
    out: Optional[Path] = None
    format: str = "csv"  # one of: "csv", "parquet", "both"


@dataclass
class SimulationSummary:
    games: int
    draws: int
    wins: Dict[int, int] = field(default_factory=dict)
    mean_turns: float = 0.0
    max_turns: int = 0
    rows: List[Dict[str, Any]] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "games": self.games,
            "draws": self.draws,
            "wins": {str(k): v for k, v in sorted(self.wins.items())},
            "mean_turns": self.mean_turns,
            "max_turns": self.max_turns,
        }


def run_simulation(args: SimulationArgs) -> SimulationSummary:
    if args.games < 1:
        raise ValueError(f"games must be >= 1, got {args.games}")
    fmt = (args.format or "csv").lower()
    if fmt not in {"csv", "parquet", "both"}:
        raise ValueError(f"Unknown export format: {args.format}")

    marks = args.marks if args.marks is not None else default_marks(args.player_count)
    config = build_config(args.board_size, args.player_count, args.player_count, marks)
    rng = np.random.default_rng(args.seed)

    logging.info("Simulating %d game(s) on a %dx%d board with %d bots…",
                 args.games, args.board_size, args.board_size, args.player_count)
    rows: List[Dict[str, Any]] = []
    for g in range(args.games):
        result = new_game(config, rng=rng).play()
        rows.append({
            "game": g,
            "outcome": result.state.value,
            "winner": result.winner.number if result.winner is not None else 0,
            "winner_mark": result.winner.mark if result.winner is not None else "",
            "turns": result.turns,
        })

    winners = np.array([r["winner"] for r in rows], dtype=int)
    turns = np.array([r["turns"] for r in rows], dtype=int)
    counts = np.bincount(winners, minlength=args.player_count + 1)
    summary = SimulationSummary(
        games=len(rows),
        draws=sum(1 for r in rows if r["outcome"] == GameState.DRAW.value),
        wins={p.number: int(counts[p.number]) for p in config.players},
        mean_turns=float(turns.mean()),
        max_turns=int(turns.max()),
        rows=rows,
    )
    log_params({
        "games": args.games,
        "board_size": args.board_size,
        "player_count": args.player_count,
        "seed": args.seed,
    })
    metrics: Dict[str, float] = {"draws": float(summary.draws), "mean_turns": summary.mean_turns}
    metrics.update({f"wins_player_{k}": float(v) for k, v in summary.wins.items()})
    log_metrics(metrics)

    if args.out is not None:
        export_results(args, summary, fmt)
    return summary


def _write_csv(path: Path, rows: List[Dict[str, Any]]) -> None:
    fnames = ["game", "outcome", "winner", "winner_mark", "turns"]
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fnames)
        w.writeheader()
        for r in sorted(rows, key=lambda r: r["game"]):
            w.writerow(r)


def export_results(args: SimulationArgs, summary: SimulationSummary, fmt: str) -> Path:
    if args.out is None:
        raise ValueError("export_results requires args.out")
    out = args.out
    results_csv = out / "results.csv"
    results_parquet = out / "results.parquet"

    have_parquet = (
        importlib.util.find_spec("pandas") is not None
        and importlib.util.find_spec("pyarrow") is not None
    )
    msg = (
        "Parquet dependencies not available (install pandas and pyarrow). "
        "Use pip install .[parquet] to enable parquet support."
    )
    if fmt == "parquet" and not have_parquet:
        # Strict: only parquet was requested; fail before writing anything
        raise RuntimeError(msg)

    out.mkdir(parents=True, exist_ok=True)
    wrote_csv = False
    wrote_parquet = False
    if fmt in {"csv", "both"}:
        _write_csv(results_csv, summary.rows)
        wrote_csv = True
        logging.info("Wrote %s (%d rows)", results_csv, len(summary.rows))

    if fmt in {"parquet", "both"}:
        if have_parquet:
            try:
                import pandas as pd  # type: ignore
                df = pd.DataFrame(summary.rows).sort_values("game")
                df.to_parquet(results_parquet, index=False)
                wrote_parquet = True
                logging.info("Wrote %s", results_parquet)
            except Exception as e:
                logging.warning(
                    "Failed to write Parquet file: %s: %s", type(e).__name__, e
                )
                results_parquet.unlink(missing_ok=True)
        else:
            logging.warning("%s Proceeding with CSV only; manifest will record parquet_written=false.", msg)

    manifest = {
        "results_version": RESULTS_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "args": {
            "games": args.games,
            "board_size": args.board_size,
            "player_count": args.player_count,
            "marks": args.marks,
            "seed": args.seed,
            "format": fmt,
        },
        "summary": summary.as_dict(),
        "files": {
            "results_csv": str(results_csv) if wrote_csv else None,
            "results_parquet": str(results_parquet) if wrote_parquet else None,
        },
        "parquet_written": wrote_parquet,
    }
    manifest_path = out / "manifest.json"
    manifest_path.write_text(json.dumps(manifest, indent=2))
    logging.info("Wrote manifest.json")

    log_artifact(manifest_path)
    if wrote_csv:
        log_artifact(results_csv)
    if wrote_parquet:
        log_artifact(results_parquet)
    return out
