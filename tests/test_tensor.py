"""Tests for the Tensor entity: construction, reshape and Hadamard product."""
import dataclasses

import numpy as np
import pytest

from intensor.domain.entities.errors import (
    DimensionCountMismatchError,
    InvalidShapeError,
    ShapeMismatchError,
    SizeMismatchError,
    TensorError,
)
from intensor.domain.entities.tensor import Tensor


class TestConstruction:
    """Tests for building a Tensor from data and shape."""

    def test_vector(self):
        """A 4-element vector keeps its data and shape."""
        tensor = Tensor([1, 2, 3, 4], [4])
        assert tensor.data == (1, 2, 3, 4)
        assert tensor.shape == (4,)
        assert tensor.flatten() == [1, 2, 3, 4]

    def test_matrix_properties(self, rectangular):
        """Rank, size and strides are derived from the shape."""
        assert rectangular.rank == 2
        assert rectangular.ndim == 2
        assert rectangular.size == 6
        assert rectangular.strides == (3, 1)

    def test_strides_rank_three(self):
        """Strides are the product of the extents after each dimension."""
        tensor = Tensor(list(range(24)), [2, 3, 4])
        assert tensor.strides == (12, 4, 1)

    def test_scalar_has_one_element(self):
        """An empty shape is a scalar with exactly one element."""
        tensor = Tensor([7], [])
        assert tensor.rank == 0
        assert tensor.size == 1
        assert tensor.strides == ()
        assert tensor.tolist() == 7

    def test_scalar_without_element_is_rejected(self):
        """An empty shape with no data does not match."""
        with pytest.raises(SizeMismatchError):
            Tensor([], [])

    def test_zero_extent(self):
        """A zero extent holds no elements."""
        tensor = Tensor([], [2, 0])
        assert tensor.size == 0
        assert tensor.tolist() == [[], []]

    def test_size_mismatch(self):
        """Too few elements for the shape raises SizeMismatchError."""
        with pytest.raises(SizeMismatchError, match="data size does not match shape"):
            Tensor([1, 2, 3], [2, 2])

    def test_errors_are_value_errors(self):
        """Tensor errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            Tensor([1, 2, 3], [4])
        assert issubclass(SizeMismatchError, TensorError)

    def test_negative_extent_is_rejected(self):
        """Negative extents are rejected even when the product matches."""
        with pytest.raises(InvalidShapeError):
            Tensor([1, 2, 3, 4], [-2, -2])

    @pytest.mark.parametrize("data", [[1.0, 2.0], [True, False], ["1", "2"]])
    def test_non_integer_elements_are_rejected(self, data):
        """Only int elements are accepted."""
        with pytest.raises(TypeError):
            Tensor(data, [2])

    def test_input_is_copied(self):
        """Mutating the caller's list does not affect the tensor."""
        data = [1, 2, 3, 4]
        shape = [2, 2]
        tensor = Tensor(data, shape)
        data.append(5)
        shape[0] = 3
        assert tensor.data == (1, 2, 3, 4)
        assert tensor.shape == (2, 2)

    def test_tensor_is_immutable(self, matrix):
        """Fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            matrix.data = (0, 0, 0, 0)

    def test_equality(self):
        """Tensors with equal data and shape are equal."""
        assert Tensor([1, 2], [2]) == Tensor((1, 2), (2,))
        assert Tensor([1, 2], [2]) != Tensor([1, 2], [1, 2])


class TestNested:
    """Tests for from_nested and tolist."""

    def test_from_nested_matrix(self):
        """Shape is inferred from the nesting."""
        tensor = Tensor.from_nested([[1, 2], [3, 4]])
        assert tensor.shape == (2, 2)
        assert tensor.data == (1, 2, 3, 4)

    def test_from_nested_scalar(self):
        """A bare int becomes a scalar."""
        tensor = Tensor.from_nested(5)
        assert tensor.shape == ()
        assert tensor.data == (5,)

    def test_from_nested_empty_rows(self):
        """Empty inner lists give a zero extent."""
        assert Tensor.from_nested([[], []]).shape == (2, 0)

    @pytest.mark.parametrize("values", [[[1], [2, 3]], [1, [2]], [[1], [[2]]]])
    def test_from_nested_ragged(self, values):
        """Ragged nesting raises InvalidShapeError."""
        with pytest.raises(InvalidShapeError, match="ragged"):
            Tensor.from_nested(values)

    def test_tolist_rank_three(self):
        """tolist nests in row-major order."""
        tensor = Tensor(list(range(8)), [2, 2, 2])
        assert tensor.tolist() == [[[0, 1], [2, 3]], [[4, 5], [6, 7]]]
        assert Tensor.from_nested(tensor.tolist()) == tensor


class TestReshape:
    """Tests for Tensor.reshape."""

    def test_reshape_matrix_to_column(self, matrix):
        """[[1, 2], [3, 4]] reshaped to [4, 1] keeps the element order."""
        reshaped = matrix.reshape([4, 1])
        assert reshaped.data == (1, 2, 3, 4)
        assert reshaped.shape == (4, 1)

    def test_reshape_shares_data(self, matrix):
        """The reshaped tensor aliases the original data tuple."""
        assert matrix.reshape([4]).data is matrix.data

    def test_reshape_leaves_original_untouched(self, matrix):
        """Reshape returns a new tensor."""
        matrix.reshape([1, 4])
        assert matrix.shape == (2, 2)

    @pytest.mark.parametrize("shape", [[6], [3, 2], [1, 6, 1], [1, 1, 2, 3]])
    def test_reshape_preserves_content(self, rectangular, shape):
        """Any shape with the same product keeps the flattened content."""
        reshaped = rectangular.reshape(shape)
        assert reshaped.flatten() == rectangular.flatten()
        assert reshaped.shape == tuple(shape)

    def test_reshape_scalar(self):
        """A scalar reshapes to any all-ones shape and back."""
        scalar = Tensor([9], [])
        assert scalar.reshape([1, 1]).reshape([]) == scalar

    def test_reshape_size_mismatch(self, matrix):
        """A shape with a different product raises SizeMismatchError."""
        with pytest.raises(SizeMismatchError, match="new shape size mismatch"):
            matrix.reshape([3])

    def test_reshape_negative_extent(self, matrix):
        """Negative extents are rejected."""
        with pytest.raises(InvalidShapeError):
            matrix.reshape([-1, -4])


class TestHadamardProduct:
    """Tests for Tensor.hadamard_product."""

    def test_elementwise_product(self, matrix):
        """[1, 2, 3, 4] * [2, 0, 1, 2] gives [2, 0, 3, 8]."""
        other = Tensor([2, 0, 1, 2], [2, 2])
        result = matrix.hadamard_product(other)
        assert result.data == (2, 0, 3, 8)
        assert result.shape == (2, 2)

    def test_commutative(self, rectangular):
        """Operand order does not matter."""
        other = Tensor([-1, 0, 2, 5, 3, -4], [2, 3])
        assert rectangular.hadamard_product(other) == other.hadamard_product(rectangular)

    def test_each_position(self, rectangular):
        """Each output element is the product of the inputs at that position."""
        other = Tensor([6, 5, 4, 3, 2, 1], [2, 3])
        result = rectangular.hadamard_product(other)
        for i in range(rectangular.size):
            assert result.data[i] == rectangular.data[i] * other.data[i]

    def test_mul_operator(self, matrix):
        """The * operator computes the Hadamard product."""
        assert (matrix * matrix).data == (1, 4, 9, 16)

    def test_mul_by_int_is_unsupported(self, matrix):
        """There is no broadcasting of plain ints."""
        with pytest.raises(TypeError):
            matrix * 2

    def test_empty_tensors(self):
        """Zero-size operands give a zero-size result."""
        result = Tensor([], [0, 3]).hadamard_product(Tensor([], [0, 3]))
        assert result.shape == (0, 3)
        assert result.data == ()

    def test_dimension_count_mismatch(self, vector, matrix):
        """Different ranks raise DimensionCountMismatchError."""
        with pytest.raises(DimensionCountMismatchError, match="same number of dimensions"):
            matrix.hadamard_product(vector)

    def test_shape_mismatch(self, rectangular):
        """Same rank with different extents raises ShapeMismatchError."""
        transposed_shape = Tensor([1, 2, 3, 4, 5, 6], [3, 2])
        with pytest.raises(ShapeMismatchError, match="same shape"):
            rectangular.hadamard_product(transposed_shape)

    def test_non_tensor_operand(self, matrix):
        """Passing something that is not a Tensor raises TypeError."""
        with pytest.raises(TypeError):
            matrix.hadamard_product([1, 2, 3, 4])


class TestNumpyScalars:
    """NumPy integer scalars are converted to plain ints."""

    def test_numpy_elements_and_shape(self):
        tensor = Tensor(np.array([1, 2, 3, 4]), (np.int64(2), np.int32(2)))
        assert tensor.data == (1, 2, 3, 4)
        assert tensor.shape == (2, 2)
        assert all(type(value) is int for value in tensor.data + tensor.shape)
