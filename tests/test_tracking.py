import logging
import sys
from pathlib import Path

from ntictactoe import cli
from ntictactoe.simulate import SimulationArgs, run_simulation
from ntictactoe.tracking import log_metrics, log_params, maybe_mlflow_run


def test_disabled_tracking_is_a_noop(tmp_path: Path):
    with maybe_mlflow_run(False, run_name="simulate", log_dir=tmp_path) as ctx:
        assert ctx is None
        summary = run_simulation(SimulationArgs(games=2, seed=0))
    assert summary.games == 2
    assert not (tmp_path / "mlruns").exists()


def test_logging_helpers_soft_fail_outside_a_run():
    log_params({"games": 1})
    log_metrics({"draws": 0.0})


def test_cli_tracking_soft_fails_without_mlflow(tmp_path: Path, monkeypatch, caplog):
    monkeypatch.delenv("TTT_BOARD_SIZE", raising=False)
    # None in sys.modules makes `import mlflow` raise ImportError
    monkeypatch.setitem(sys.modules, "mlflow", None)
    caplog.set_level(logging.INFO)
    rc = cli.main([
        "--seed", "4", "simulate", "--games", "3", "--tracking", "mlflow",
        "--log-dir", str(tmp_path / "runs"),
    ])
    assert rc == 0
    assert any("Tracking disabled" in r.getMessage() for r in caplog.records)
    assert not (tmp_path / "runs" / "mlruns").exists()


def test_enabled_tracking_without_mlflow_still_runs_body(monkeypatch, caplog):
    monkeypatch.setitem(sys.modules, "mlflow", None)
    ran = []
    with maybe_mlflow_run(True, run_name="simulate"):
        ran.append(True)
    assert ran == [True]
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_cli_logs_summary_once(monkeypatch, caplog):
    monkeypatch.delenv("TTT_BOARD_SIZE", raising=False)
    monkeypatch.setitem(sys.modules, "mlflow", None)
    caplog.set_level(logging.INFO)
    assert cli.main(["--seed", "1", "simulate", "--games", "2"]) == 0
    summaries = [r for r in caplog.records if "mean_turns=" in r.getMessage()]
    assert len(summaries) == 1
