"""
Experiment tracking for simulation runs (optional MLflow backend).

MLflow is only imported when tracking is requested, so it stays an
optional extra. All helpers soft-fail when it is missing.
"""
from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional


@contextmanager
def maybe_mlflow_run(enabled: bool, run_name: str, log_dir: Optional[Path] = None) -> Iterator[None]:
    with ExitStack() as stack:
        if enabled:
            try:
                import mlflow  # type: ignore

                if log_dir is not None:
                    mlflow.set_tracking_uri((log_dir / "mlruns").resolve().as_uri())
                stack.enter_context(mlflow.start_run(run_name=run_name))
            except Exception as e:
                logging.warning("Tracking disabled: %s: %s", type(e).__name__, e)
        yield None


def log_params(params: Dict[str, object]) -> None:
    try:
        import mlflow  # type: ignore

        if mlflow.active_run() is not None:
            mlflow.log_params(params)
    except Exception:
        pass


def log_metrics(metrics: Dict[str, float]) -> None:
    try:
        import mlflow  # type: ignore

        if mlflow.active_run() is not None:
            mlflow.log_metrics(metrics)
    except Exception:
        pass


def log_artifact(path: Path, artifact_path: Optional[str] = None) -> None:
    try:
        import mlflow  # type: ignore

        if mlflow.active_run() is not None:
            mlflow.log_artifact(str(path), artifact_path=artifact_path)
    except Exception:
        pass
