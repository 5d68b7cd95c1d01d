"""Tensor errors - raised on every failed validation."""


class TensorError(ValueError):
    """Base class for invalid tensor input."""


class SizeMismatchError(TensorError):
    """Element count does not match the product of the shape."""


class InvalidShapeError(TensorError):
    """Shape has a negative extent or nested data is ragged."""


class DimensionCountMismatchError(TensorError):
    """Operands have a different number of dimensions."""


class ShapeMismatchError(TensorError):
    """Operands have the same rank but different extents."""


class DimensionOutOfRangeError(TensorError):
    """Requested dimension is outside [0, rank)."""


class IndexOutOfRangeError(TensorError):
    """Requested index is outside [0, shape[dim])."""


class UnsupportedRankError(TensorError):
    """Operation is not defined for the tensor's rank."""
