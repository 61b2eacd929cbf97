# tests/test_run_xor.py
import csv

from config import NetworkConfig
from NN.matrix import Matrix
from runners.run_xor import XOR_INPUTS, XOR_OUTPUTS, main, run_xor


def test_run_xor_prints_estimates_and_error(capsys):
    net = run_xor(NetworkConfig().with_(seed=1))
    out = capsys.readouterr().out
    assert "Estimates:" in out
    assert "Error:" in out
    assert net.predict().size == (4, 1)
    assert net.error() == Matrix.from_rows(XOR_OUTPUTS) - net.predict()


def test_restarts_keep_lowest_error_and_log_each(tmp_path, capsys):
    path = tmp_path / "xor.csv"
    net = run_xor(NetworkConfig().with_(seed=4), restarts=5, log_csv=str(path))
    out = capsys.readouterr().out
    assert out.count("[xor] restart") == 5

    rows = list(csv.DictReader(path.open()))
    assert len(rows) == 5
    best = min(float(r["err/mae"]) for r in rows)
    final_mae = sum(abs(v) for row in net.error().tolist() for v in row) / 4
    assert abs(final_mae - best) < 1e-12


def test_main_cli_flags(capsys):
    main(["--seed", "0", "--hiddens", "1", "--hidden-width", "2", "--show-weights"])
    out = capsys.readouterr().out
    assert "Weights:" in out
    assert "2 → 2 → 1" in out


def test_inputs_match_demo_table():
    assert XOR_INPUTS == [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


def test_restart_summary_line(capsys):
    run_xor(NetworkConfig().with_(seed=2), restarts=3)
    out = capsys.readouterr().out
    assert "[xor] restarts=3 mae mean=" in out
