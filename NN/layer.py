from __future__ import annotations
from typing import Optional, Tuple, Union

from .functions import TANH, Activation, get_activation
from .matrix import Matrix


def forward_step(activation: Matrix, layer: "Layer") -> Matrix:
    """One fold step: activate(activation @ layer.weights). Pure, no caching."""
    return activation.matmul(layer.weights).map(layer.activation.fn)


class Layer:
    """Weights feeding into a layer (fan_in x nodes) and that layer's activation.

    `weighted_input` / `activated_output` hold the last pass to finish. Both come
    from one cached pair, so they always belong to the same pass.
    """

    def __init__(self, weights: Matrix, activation: Union[str, Activation] = TANH):
        self.weights = weights
        self.activation = get_activation(activation)
        self._cache: Optional[Tuple[Matrix, Matrix]] = None

    @property
    def fan_in(self) -> int:
        return self.weights.rows

    @property
    def nodes(self) -> int:
        # nodes in a layer == columns of the weights feeding it
        return self.weights.columns

    @property
    def weighted_input(self) -> Optional[Matrix]:
        cache = self._cache
        return cache[0] if cache is not None else None

    @property
    def activated_output(self) -> Optional[Matrix]:
        cache = self._cache
        return cache[1] if cache is not None else None

    def step(self, inputs: Matrix) -> Tuple[Matrix, Matrix]:
        """(weighted_input, activated_output) for `inputs`, without caching."""
        z = inputs.matmul(self.weights)
        return z, z.map(self.activation.fn)

    def record(self, z: Matrix, a: Matrix) -> None:
        self._cache = (z, a)

    def forward(self, inputs: Matrix) -> Matrix:
        z, a = self.step(inputs)
        self.record(z, a)
        return a

    def with_weights(self, weights: Matrix) -> "Layer":
        if weights.size != self.weights.size:
            raise ValueError(f"replacement weights {weights.size} != layer shape {self.weights.size}")
        return Layer(weights, self.activation)

    def __repr__(self) -> str:
        return f"Layer({self.fan_in} → {self.nodes}, {self.activation.name})"
