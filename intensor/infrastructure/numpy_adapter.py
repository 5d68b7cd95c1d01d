import numpy as np

from intensor.domain.entities.tensor import Tensor


class NumpyTensorAdapter:
    """
    Adapter between the domain Tensor and numpy.ndarray.

    This adapter handles:
    - Conversion of a Tensor to an int64 array of the same shape
    - Conversion of an integer array (any layout) to a Tensor

    This keeps the domain layer independent of NumPy.
    """

    @staticmethod
    def to_numpy(tensor: Tensor) -> np.ndarray:
        """
        Convert a Tensor to a NumPy array.

        Parameters
        ----------
        tensor : Tensor
            Tensor to convert.

        Returns
        -------
        np.ndarray
            Freshly allocated int64 array with `tensor.shape`.
        """
        return np.array(tensor.data, dtype=np.int64).reshape(tensor.shape)

    @staticmethod
    def from_numpy(array: np.ndarray) -> Tensor:
        """
        Convert a NumPy integer array to a Tensor.

        Non-contiguous or Fortran-ordered arrays are read in logical
        row-major order.

        Parameters
        ----------
        array : np.ndarray
            Array with a signed or unsigned integer dtype.

        Returns
        -------
        Tensor
            Tensor with the array's shape and elements.

        Raises
        ------
        TypeError
            If the array dtype is not an integer type.
        """
        array = np.asarray(array)
        if not np.issubdtype(array.dtype, np.integer):
            raise TypeError(f"expected an integer array, got dtype {array.dtype}")
        # tolist() yields Python ints, which the Tensor requires
        return Tensor(array.ravel(order="C").tolist(), array.shape)
