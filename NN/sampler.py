from __future__ import annotations
import math
from typing import Any, Dict, Optional
import numpy as np


class NormalSampler:
    """Box-Muller transform over a seeded uniform generator.

    Each sample consumes two uniform draws; the cosine companion is discarded.
    Callable with no arguments so it can be handed to `Matrix.fill`.
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0, seed: Optional[int] = None) -> None:
        self.mu = float(mu)
        self.sigma = float(sigma)
        self._rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        # (0, 1]: keeps log() finite
        return 1.0 - float(self._rng.random())

    def sample(self, mu: Optional[float] = None, sigma: Optional[float] = None) -> float:
        mu = self.mu if mu is None else mu
        sigma = self.sigma if sigma is None else sigma
        u1 = self.uniform()
        u2 = self.uniform()
        z = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)
        return mu + sigma * z

    def __call__(self) -> float:
        return self.sample()

    # --- lightweight checkpoint (generator state only) ---
    def get_state(self) -> Dict[str, Any]:
        return {
            "mu": self.mu,
            "sigma": self.sigma,
            "rng_state": self._rng.bit_generator.state,
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        self.mu = float(state["mu"])
        self.sigma = float(state["sigma"])
        self._rng.bit_generator.state = state["rng_state"]
