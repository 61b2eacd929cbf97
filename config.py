# config.py
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    # topology
    n_hiddens: int = 3
    hidden_width: int = 3

    # layers
    activation: str = "tanh"
    output_activation: Optional[str] = None   # None = same as hidden layers
    cost: str = "difference"                  # "difference" | "half_squared"

    # weight init (Box-Muller sampler)
    seed: Optional[int] = None
    mu: float = 0.0
    sigma: float = 1.0

    # logging
    log_dir: Optional[str] = None

    def with_(self, **kwargs) -> "NetworkConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
