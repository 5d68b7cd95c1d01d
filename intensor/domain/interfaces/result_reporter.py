"""
Result Reporter Interface.

This module defines the abstract interface for reporting the outcome of
tensor operations run by a demonstration. Implementations can print to the
console, stay silent, or record results for later inspection.
"""
from abc import ABC, abstractmethod

from intensor.domain.entities.errors import TensorError
from intensor.domain.entities.tensor import Tensor


class ResultReporter(ABC):
    """
    Abstract interface for reporting operation outcomes.

    The lifecycle follows:
    1. on_start() - called once before the first operation
    2. For each operation: on_result() or on_error()
    3. on_finish() - called once after the last operation
    """

    @abstractmethod
    def on_start(self, total: int) -> None:
        """
        Called before any operation runs.

        Parameters
        ----------
        total : int
            Number of operations that will be reported.
        """
        pass

    @abstractmethod
    def on_result(self, expression: str, tensor: Tensor) -> None:
        """
        Called when an operation succeeds.

        Parameters
        ----------
        expression : str
            Human-readable form of the operation, e.g. "IndexSelect(..., 0, [0])".
        tensor : Tensor
            Tensor returned by the operation.
        """
        pass

    @abstractmethod
    def on_error(self, expression: str, error: TensorError) -> None:
        """
        Called when an operation rejects its input.

        Parameters
        ----------
        expression : str
            Human-readable form of the operation.
        error : TensorError
            The validation error raised by the operation.
        """
        pass

    @abstractmethod
    def on_finish(self, succeeded: int, failed: int) -> None:
        """Called after the last operation."""
        pass
