# tests/conftest.py
import os
import sys

# Ensure project root is importable (so NN.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

XOR_INPUTS = [[0, 0], [0, 1], [1, 0], [1, 1]]
XOR_OUTPUTS = [[0], [1], [1], [0]]


@pytest.fixture
def xor_data():
    return XOR_INPUTS, XOR_OUTPUTS


@pytest.fixture
def matrix_factory():
    from NN.matrix import Matrix
    def make(rows=None, cols=None, data=None):
        # data wins; otherwise a deterministic 1..n fill
        if data is not None:
            return Matrix.from_rows(data)
        return Matrix.from_rows([[float(r * cols + c + 1) for c in range(cols)] for r in range(rows)])
    return make


@pytest.fixture
def network_factory():
    from NN.network import Network
    from NN.sampler import NormalSampler
    def make(n_inputs=2, n_outputs=1, seed=7, **kwargs):
        kwargs.setdefault("sampler", NormalSampler(seed=seed))
        return Network(n_inputs, n_outputs, **kwargs)
    return make
