from __future__ import annotations


class SynapseError(ValueError):
    """Base class for shape and data errors raised by the NN package."""


class ShapeMismatchError(SynapseError):
    """Operand shapes are incompatible (elementwise ops, matmul, error())."""


class DimensionMismatchError(SynapseError):
    """Training data does not match the network's input/output widths."""


class MalformedInputError(SynapseError):
    """A table could not be wrapped as a rectangular numeric matrix."""
