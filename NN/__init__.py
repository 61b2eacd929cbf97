from .errors import SynapseError, ShapeMismatchError, DimensionMismatchError, MalformedInputError
from .matrix import Matrix
from .sampler import NormalSampler
from .functions import Activation, ACTIVATIONS, COSTS, get_activation, get_cost
from .layer import Layer, forward_step
from .network import Network

__all__ = [
    "SynapseError", "ShapeMismatchError", "DimensionMismatchError", "MalformedInputError",
    "Matrix", "NormalSampler",
    "Activation", "ACTIVATIONS", "COSTS", "get_activation", "get_cost",
    "Layer", "forward_step", "Network",
]
