from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union
import numpy as np

ScalarFn = Callable[[float], float]


@dataclass(frozen=True)
class Activation:
    """Elementwise nonlinearity plus its derivative (kept for a future training step)."""
    name: str
    fn: ScalarFn
    derivative: ScalarFn


def _tanh_grad(x):
    t = np.tanh(x)
    return 1.0 - t * t


def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


def _sigmoid_grad(x):
    s = _sigmoid(x)
    return s * (1.0 - s)


def _identity(x):
    return x


def _one(x):
    return 1.0


TANH = Activation("tanh", np.tanh, _tanh_grad)
SIGMOID = Activation("sigmoid", _sigmoid, _sigmoid_grad)
IDENTITY = Activation("identity", _identity, _one)

ACTIVATIONS: Dict[str, Activation] = {a.name: a for a in (TANH, SIGMOID, IDENTITY)}


def get_activation(key: Union[str, Activation]) -> Activation:
    if isinstance(key, Activation):
        return key
    try:
        return ACTIVATIONS[key]
    except KeyError:
        raise ValueError(f"unknown activation: {key!r} (expected one of {sorted(ACTIVATIONS)})") from None


# --- costs: applied elementwise to (target - prediction) ---

def half_squared(e):
    return 0.5 * e * e


COSTS: Dict[str, Optional[ScalarFn]] = {
    "difference": None,       # raw target - prediction
    "half_squared": half_squared,
}


def get_cost(key: Union[str, ScalarFn, None]) -> Optional[ScalarFn]:
    """Resolve a cost name or callable. `None` means the raw difference."""
    if key is None or callable(key):
        return key
    try:
        return COSTS[key]
    except KeyError:
        raise ValueError(f"unknown cost: {key!r} (expected one of {sorted(COSTS)})") from None
