# runners/run_xor.py
from __future__ import annotations
import argparse
from typing import Optional, Sequence

from config import NetworkConfig
from NN.logging import CSVLogger, PREDICTION_KEYS, make_prediction_logger
from NN.matrix import Matrix
from NN.metrics import summarize
from NN.network import Network

XOR_INPUTS = [
    [0.0, 0.0],
    [0.0, 1.0],
    [1.0, 0.0],
    [1.0, 1.0],
]
XOR_OUTPUTS = [
    [0.0],
    [1.0],
    [1.0],
    [0.0],
]


def run_xor(cfg: NetworkConfig, *, restarts: int = 1, show_weights: bool = False,
            log_csv: Optional[str] = None) -> Network:
    """
    Build a 2-input / 1-output network on the XOR table, initialise it `restarts`
    times and keep the initialisation with the lowest mean absolute error.
    Prints estimates and error for the kept network and returns it.
    """
    net = Network.from_config(2, 1, cfg)
    logger = CSVLogger(log_csv, fieldnames=PREDICTION_KEYS) if log_csv else None
    on_prediction = make_prediction_logger(logger) if logger else None
    maes: list[float] = []

    best_mae, best_state = float("inf"), None
    try:
        for trial in range(max(1, restarts)):
            sampler_state = net.sampler.get_state()
            net.init(XOR_INPUTS, XOR_OUTPUTS)
            prediction, error = net.predict(), net.error()
            mae = summarize(error)["mae"]
            maes.append(mae)
            if on_prediction is not None:
                on_prediction(trial, prediction, error)
            if restarts > 1:
                print(f"[xor] restart {trial}: mae={mae:.4f}")
            if mae < best_mae:
                best_mae, best_state = mae, sampler_state
    finally:
        if logger is not None:
            logger.close()

    if restarts > 1:
        # replay the best draw
        net.sampler.set_state(best_state)
        net.init(XOR_INPUTS, XOR_OUTPUTS)
        s = summarize(Matrix.from_rows([maes]))
        print(f"[xor] restarts={restarts} mae mean={s['mean']:.4f} min={s['min']:.4f} max={s['max']:.4f}")

    print(f"[xor] {net!r}")
    if show_weights:
        print("\nWeights:\n" + str(net))
    print("\nEstimates:\n" + net.predict().to_display_string())
    print("\nError:\n" + net.error().to_display_string())
    return net


def parse_args(argv: Optional[Sequence[str]] = None):
    p = argparse.ArgumentParser(description="Forward pass of a tanh network on the XOR table")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--hiddens", type=int, default=3)
    p.add_argument("--hidden-width", type=int, default=3)
    p.add_argument("--cost", choices=["difference", "half_squared"], default="difference")
    p.add_argument("--restarts", type=int, default=1)
    p.add_argument("--show-weights", action="store_true")
    p.add_argument("--log-csv", type=str, default=None)
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    cfg = NetworkConfig().with_(
        seed=args.seed,
        n_hiddens=args.hiddens,
        hidden_width=args.hidden_width,
        cost=args.cost,
    )
    run_xor(cfg, restarts=args.restarts, show_weights=args.show_weights, log_csv=args.log_csv)


if __name__ == "__main__":
    main()
