from __future__ import annotations
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .errors import DimensionMismatchError
from .functions import Activation, ScalarFn, get_activation, get_cost
from .layer import Layer
from .matrix import Matrix, Table
from .sampler import NormalSampler


@dataclass(frozen=True)
class _State:
    layers: Tuple[Layer, ...]
    inputs: Optional[Matrix] = None
    outputs: Optional[Matrix] = None


@dataclass(frozen=True)
class _Trace:
    layers: Tuple[Layer, ...]
    values: Tuple[Matrix, ...]   # inputs, then each layer's activated output


class Network:
    """Fixed-topology feed-forward network: inputs -> n_hiddens x hidden_width -> outputs.

    Call `init(inputs, outputs)` before `predict()` / `error()`. `init` validates
    everything first and then publishes the new weights and data in one swap, so a
    rejected call leaves the previous state untouched.

    Concurrent forward passes are safe and return correct results. Each layer's
    cache and `activations()` describe the last pass to finish; layer caches of
    different layers may come from different concurrent passes, `activations()` never does.
    """

    def __init__(
        self,
        n_inputs: int,
        n_outputs: int,
        n_hiddens: int = 3,
        hidden_width: int = 3,
        *,
        activation: Union[str, Activation] = "tanh",
        output_activation: Union[str, Activation, None] = None,
        cost: Union[str, ScalarFn, None] = "difference",
        sampler: Optional[NormalSampler] = None,
    ):
        if n_inputs < 1 or n_outputs < 1 or hidden_width < 1:
            raise ValueError("n_inputs, n_outputs and hidden_width must be >= 1")
        if n_hiddens < 0:
            raise ValueError("n_hiddens must be >= 0")

        self.n_inputs = int(n_inputs)
        self.n_outputs = int(n_outputs)
        self.n_hiddens = int(n_hiddens)
        self.hidden_width = int(hidden_width)
        self.cost = get_cost(cost)
        self.sampler = sampler or NormalSampler()

        self.layer_widths: Tuple[int, ...] = (
            (self.n_inputs,) + (self.hidden_width,) * self.n_hiddens + (self.n_outputs,)
        )

        hidden_act = get_activation(activation)
        out_act = get_activation(output_activation) if output_activation is not None else hidden_act
        last = len(self.layer_widths) - 2
        layers = tuple(
            Layer(Matrix(inp, out), out_act if idx == last else hidden_act)
            for idx, (inp, out) in enumerate(zip(self.layer_widths, self.layer_widths[1:]))
        )

        self._state = _State(layers=layers)
        self._init_lock = threading.Lock()
        self._trace: Optional[_Trace] = None

    @classmethod
    def from_config(cls, n_inputs: int, n_outputs: int, cfg) -> "Network":
        return cls(
            n_inputs,
            n_outputs,
            n_hiddens=cfg.n_hiddens,
            hidden_width=cfg.hidden_width,
            activation=cfg.activation,
            output_activation=cfg.output_activation,
            cost=cfg.cost,
            sampler=NormalSampler(mu=cfg.mu, sigma=cfg.sigma, seed=cfg.seed),
        )

    # ---------- Read access ----------
    @property
    def is_ready(self) -> bool:
        return self._state.inputs is not None

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._state.layers

    @property
    def weights(self) -> List[Matrix]:
        return [layer.weights for layer in self._state.layers]

    @property
    def inputs(self) -> Optional[Matrix]:
        return self._state.inputs

    @property
    def outputs(self) -> Optional[Matrix]:
        return self._state.outputs

    # ---------- Init ----------
    def init(self, inputs: Table, outputs: Table) -> None:
        """Bind training data (one example per row) and re-initialise all weights."""
        input_m = Matrix.from_rows(inputs)
        output_m = Matrix.from_rows(outputs)
        if output_m.columns != self.n_outputs:
            raise DimensionMismatchError(
                f"output data has {output_m.columns} columns, network has {self.n_outputs} outputs"
            )
        if input_m.columns != self.n_inputs:
            raise DimensionMismatchError(
                f"input data has {input_m.columns} columns, network has {self.n_inputs} inputs"
            )

        with self._init_lock:
            layers = self._initial_layers(None)
            self._state = _State(layers=layers, inputs=input_m, outputs=output_m)

    def init_weights(self, value: Union[float, Callable[[], float], None] = None) -> None:
        """Re-draw weights without touching bound data.

        None samples from the network's NormalSampler and applies fan-in scaling;
        a constant or a zero-argument generator fills the weights as-is.
        """
        with self._init_lock:
            layers = self._initial_layers(value)
            state = self._state
            self._state = _State(layers=layers, inputs=state.inputs, outputs=state.outputs)

    def _initial_layers(self, value) -> Tuple[Layer, ...]:
        current = self._state.layers
        if value is not None:
            return tuple(layer.with_weights(layer.weights.fill(value)) for layer in current)
        sampled = [layer.weights.fill(self.sampler) for layer in current]
        return tuple(
            layer.with_weights(w)
            for layer, w in zip(current, self._xavierize(sampled))
        )

    def _xavierize(self, weights: List[Matrix]) -> List[Matrix]:
        # divide by the raw fan-in (layer width feeding the weights), no sqrt
        return [w.divide(width) for w, width in zip(weights, self.layer_widths)]

    # ---------- Inference ----------
    def forward_prop(self, inputs: Optional[Table] = None) -> Matrix:
        """Fold the input through every layer in order, caching per-layer values."""
        state = self._state
        if inputs is None:
            if state.inputs is None:
                raise RuntimeError("Network.init() must be called first")
            a = state.inputs
        else:
            a = Matrix.from_rows(inputs)
        return self._run(state, a)

    def _run(self, state: _State, a: Matrix) -> Matrix:
        first = a
        steps = []
        for layer in state.layers:
            z, a_next = layer.step(a)
            steps.append((z, a_next))
            a = a_next
        # publish only once the whole pass is done
        for layer, (z, a_out) in zip(state.layers, steps):
            layer.record(z, a_out)
        values = (first, *(out for _, out in steps))
        self._trace = _Trace(state.layers, values)
        return a

    def predict(self) -> Matrix:
        return self.forward_prop()

    def error(self) -> Matrix:
        """outputs - predict(), with the configured cost applied elementwise."""
        state = self._state
        if state.outputs is None:
            raise RuntimeError("Network.init() must be called first")
        diff = state.outputs.subtract(self._run(state, state.inputs))
        return diff if self.cost is None else diff.map(self.cost)

    def activations(self) -> List[Matrix]:
        """
        Per-layer activations from the last forward pass to finish:
        [inputs, layer1_out, ..., output]. All entries come from the same pass.
        Empty before any pass and after weights are re-drawn.
        """
        trace = self._trace
        if trace is None or trace.layers is not self._state.layers:
            return []
        return list(trace.values)

    # ---------- Display ----------
    def to_display_string(self) -> str:
        return "\n".join(layer.weights.to_display_string() for layer in self._state.layers)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        widths = " → ".join(str(w) for w in self.layer_widths)
        return f"Network({widths}, ready={self.is_ready})"
