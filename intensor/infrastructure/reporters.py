"""
Reporter implementations for demonstration runs.

This module provides:
- ConsoleReporter, which prints one line per operation
- SilentReporter, which discards everything
"""
from intensor.domain.entities.errors import TensorError
from intensor.domain.entities.tensor import Tensor
from intensor.domain.interfaces.result_reporter import ResultReporter


class ConsoleReporter(ResultReporter):
    """
    Reporter that prints outcomes to stdout.

    Successful operations print as "<expression> -> <nested list>", rejected
    ones as "Error: <message>".

    Attributes
    ----------
    show_shape : bool
        Whether to append the result shape to each successful line.
    """

    def __init__(self, show_shape: bool = False) -> None:
        self.show_shape = show_shape

    def on_start(self, total: int) -> None:
        pass

    def on_result(self, expression: str, tensor: Tensor) -> None:
        line = f"{expression} -> {tensor.tolist()}"
        if self.show_shape:
            line += f" shape={list(tensor.shape)}"
        print(line)

    def on_error(self, expression: str, error: TensorError) -> None:
        print(f"Error: {error}")

    def on_finish(self, succeeded: int, failed: int) -> None:
        print(f"{succeeded} succeeded, {failed} failed")


class SilentReporter(ResultReporter):
    """Reporter that produces no output."""

    def on_start(self, total: int) -> None:
        pass

    def on_result(self, expression: str, tensor: Tensor) -> None:
        pass

    def on_error(self, expression: str, error: TensorError) -> None:
        pass

    def on_finish(self, succeeded: int, failed: int) -> None:
        pass
