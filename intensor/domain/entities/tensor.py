"""Tensor entity - immutable dense integer tensor."""
import math
import operator
from dataclasses import dataclass
from typing import Any, Sequence

from intensor.domain.entities.errors import (
    DimensionCountMismatchError,
    DimensionOutOfRangeError,
    IndexOutOfRangeError,
    InvalidShapeError,
    ShapeMismatchError,
    SizeMismatchError,
    UnsupportedRankError,
)

SUPPORTED_SELECT_RANKS = (1, 2)


def _as_int_tuple(values: Sequence[int], what: str) -> tuple[int, ...]:
    """
    Copy a sequence into a tuple of plain ints.

    Anything supporting `__index__` (NumPy integer scalars included) is
    converted to int. A tuple that already holds only ints is returned as is.

    Raises
    ------
    TypeError
        If an entry is not an integer (bools are rejected too).
    """
    result = tuple(values)
    if all(type(value) is int for value in result):
        return result

    converted = []
    for value in result:
        if isinstance(value, bool):
            raise TypeError(f"{what} must be int, got {type(value).__name__}")
        try:
            converted.append(operator.index(value))
        except TypeError:
            raise TypeError(f"{what} must be int, got {type(value).__name__}") from None
    return tuple(converted)


def _check_shape(shape: Sequence[int]) -> tuple[int, ...]:
    shape = _as_int_tuple(shape, "shape extent")
    for extent in shape:
        if extent < 0:
            raise InvalidShapeError(f"shape extents must be non-negative, got {list(shape)}")
    return shape


def _flatten_nested(values: Any, shape: list[int], depth: int, out: list[Any]) -> None:
    if depth == len(shape):
        if isinstance(values, (list, tuple)):
            raise InvalidShapeError("ragged nested sequence")
        out.append(values)
        return
    if not isinstance(values, (list, tuple)) or len(values) != shape[depth]:
        raise InvalidShapeError("ragged nested sequence")
    for value in values:
        _flatten_nested(value, shape, depth + 1, out)


def _nest(data: tuple[int, ...], shape: tuple[int, ...]) -> list:
    if len(shape) == 1:
        return list(data)
    step = math.prod(shape[1:])
    return [_nest(data[i * step:(i + 1) * step], shape[1:]) for i in range(shape[0])]


@dataclass(frozen=True)
class Tensor:
    """
    Dense integer tensor stored as a flat row-major buffer plus a shape.

    The element count always equals the product of the shape; an empty
    shape is a scalar holding exactly one element. Instances never change
    after construction, every operation returns a new Tensor.

    Attributes
    ----------
    data : tuple[int, ...]
        Flattened elements in row-major order.
    shape : tuple[int, ...]
        Extent of each dimension.
    """

    data: tuple[int, ...]
    shape: tuple[int, ...]

    def __post_init__(self):
        """
        Freeze the inputs into tuples and enforce the size invariant.

        Raises
        ------
        TypeError
            If an element or extent is not an int.
        InvalidShapeError
            If an extent is negative.
        SizeMismatchError
            If the element count differs from the product of the shape.
        """
        data = _as_int_tuple(self.data, "tensor element")
        shape = _check_shape(self.shape)
        expected = math.prod(shape)
        if len(data) != expected:
            raise SizeMismatchError(
                f"data size does not match shape: {len(data)} elements for shape {list(shape)}"
            )
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "shape", shape)

    @classmethod
    def from_nested(cls, values: Any) -> "Tensor":
        """
        Build a tensor from nested lists, inferring the shape.

        Parameters
        ----------
        values : Any
            A bare int (scalar) or arbitrarily nested lists/tuples of ints.

        Returns
        -------
        Tensor
            Tensor whose `tolist()` equals `values`.

        Raises
        ------
        InvalidShapeError
            If sibling lists have different lengths or depths.
        """
        shape: list[int] = []
        level = values
        while isinstance(level, (list, tuple)):
            shape.append(len(level))
            if not level:
                break
            level = level[0]

        data: list[Any] = []
        _flatten_nested(values, shape, 0, data)
        return cls(data, shape)

    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def ndim(self) -> int:
        return self.rank

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def strides(self) -> tuple[int, ...]:
        """Row-major element stride of each dimension."""
        strides = []
        step = 1
        for extent in reversed(self.shape):
            strides.append(step)
            step *= extent
        return tuple(reversed(strides))

    def flatten(self) -> list[int]:
        return list(self.data)

    def tolist(self) -> Any:
        """Return the elements as nested lists, or a bare int for a scalar."""
        if not self.shape:
            return self.data[0]
        return _nest(self.data, self.shape)

    def reshape(self, new_shape: Sequence[int]) -> "Tensor":
        """
        Reinterpret the elements under a new shape.

        The returned tensor shares this tensor's data tuple; nothing is copied.

        Parameters
        ----------
        new_shape : Sequence[int]
            Target shape; its product must equal `self.size`.

        Returns
        -------
        Tensor
            Tensor with the same elements in the same order.

        Raises
        ------
        SizeMismatchError
            If the product of `new_shape` differs from the element count.
        InvalidShapeError
            If `new_shape` has a negative extent.
        """
        new_shape = _check_shape(new_shape)
        if math.prod(new_shape) != self.size:
            raise SizeMismatchError(
                f"new shape size mismatch with data size: shape {list(new_shape)} "
                f"for {self.size} elements"
            )
        return Tensor(self.data, new_shape)

    def hadamard_product(self, other: "Tensor") -> "Tensor":
        """
        Multiply two tensors of identical shape element by element.

        Parameters
        ----------
        other : Tensor
            Right operand.

        Returns
        -------
        Tensor
            Tensor of the common shape holding the pairwise products.

        Raises
        ------
        DimensionCountMismatchError
            If the operands have a different rank.
        ShapeMismatchError
            If the operands have the same rank but different extents.
        """
        if not isinstance(other, Tensor):
            raise TypeError(f"expected Tensor, got {type(other).__name__}")
        if self.rank != other.rank:
            raise DimensionCountMismatchError(
                f"tensors must have the same number of dimensions: {self.rank} != {other.rank}"
            )
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"tensors must have the same shape: {list(self.shape)} != {list(other.shape)}"
            )
        # Equal shapes flatten in the same order, so positions line up.
        return Tensor([a * b for a, b in zip(self.data, other.data)], self.shape)

    def __mul__(self, other: Any) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.hadamard_product(other)

    def index_select(self, dim: int, indices: Sequence[int]) -> "Tensor":
        """
        Gather slices along `dim` in the order given by `indices`.

        Every other axis is kept in full. Indices may repeat, in which case
        the slice is repeated.

        Parameters
        ----------
        dim : int
            Axis to select along.
        indices : Sequence[int]
            Positions along `dim`, each in `[0, shape[dim])`. NumPy integer
            arrays are accepted.

        Returns
        -------
        Tensor
            Tensor shaped like this one except `shape[dim] == len(indices)`.

        Raises
        ------
        DimensionOutOfRangeError
            If `dim` is outside `[0, rank)`.
        IndexOutOfRangeError
            If an index is outside `[0, shape[dim])`.
        UnsupportedRankError
            If the tensor rank is not 1 or 2.
        """
        (dim,) = _as_int_tuple((dim,), "dim")
        if dim < 0 or dim >= self.rank:
            raise DimensionOutOfRangeError(f"dimension out of range: {dim} for rank {self.rank}")

        indices = _as_int_tuple(indices, "index")
        extent = self.shape[dim]
        for index in indices:
            if index < 0 or index >= extent:
                raise IndexOutOfRangeError(
                    f"index out of range: {index} for dimension {dim} of size {extent}"
                )

        if self.rank not in SUPPORTED_SELECT_RANKS:
            raise UnsupportedRankError(f"unsupported tensor rank: {self.rank}")

        new_shape = self.shape[:dim] + (len(indices),) + self.shape[dim + 1:]
        outer = math.prod(self.shape[:dim])
        inner = self.strides[dim]

        data = [0] * (outer * len(indices) * inner)
        position = 0
        for block in range(outer):
            base = block * extent
            for index in indices:
                start = (base + index) * inner
                data[position:position + inner] = self.data[start:start + inner]
                position += inner

        return Tensor(data, new_shape)
