from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from .matrix import Matrix
from .metrics import summarize

PREDICTION_KEYS = [
    "step",
    "pred/mean", "pred/min", "pred/max",
    "err/mae", "err/mse", "err/max_abs",
]


class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_prediction_logger(logger: Logger) -> Callable[[int, Matrix, Matrix], Dict[str, float]]:
    """
    Returns a function(step, prediction, error) -> scalars that summarises one
    forward pass and writes it as a single row. Decouples runners from the log format.
    """
    def _on_prediction(step: int, prediction: Matrix, error: Matrix) -> Dict[str, float]:
        p = summarize(prediction)
        e = summarize(error)
        scalars = {
            "pred/mean": p["mean"],
            "pred/min": p["min"],
            "pred/max": p["max"],
            "err/mae": e["mae"],
            "err/mse": e["mse"],
            "err/max_abs": max(abs(e["min"]), abs(e["max"])),
        }
        logger.log(int(step), scalars)
        logger.flush()
        return scalars
    return _on_prediction
