from __future__ import annotations
from typing import Dict
import numpy as np

from .matrix import Matrix


def summarize(m: Matrix) -> Dict[str, float]:
    """mean / min / max / mean-abs / mean-square over every cell."""
    a = m.to_numpy()
    return {
        "mean": float(a.mean()),
        "min": float(a.min()),
        "max": float(a.max()),
        "mae": float(np.abs(a).mean()),
        "mse": float((a * a).mean()),
    }

