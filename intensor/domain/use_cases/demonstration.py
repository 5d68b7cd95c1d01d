"""
Demonstration Use-Case.

Runs a fixed list of tensor operations (index selections, reshapes and
Hadamard products) against named tensors and reports each outcome.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterator

from intensor.domain.entities.errors import TensorError
from intensor.domain.entities.tensor import Tensor
from intensor.domain.interfaces.result_reporter import ResultReporter

logger = logging.getLogger(__name__)


@dataclass
class DemonstrationResult:
    """Outcome of a single operation."""

    expression: str
    tensor: Tensor | None = None
    error: TensorError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class Demonstration:
    """
    Orchestrates a list of tensor operations using dependency injection.

    Operations run in a fixed order: all index selections, then all
    reshapes, then all Hadamard products. A rejected operation is reported
    and the run continues with the next one.
    """

    def __init__(
        self,
        tensors: dict[str, Tensor],
        reporter: ResultReporter,
        selections: list[tuple[str, int, list[int]]] | None = None,
        reshapes: list[tuple[str, list[int]]] | None = None,
        products: list[tuple[str, str]] | None = None,
    ) -> None:
        """
        Parameters
        ----------
        tensors : dict[str, Tensor]
            Operands, keyed by the names the operations refer to.
        reporter : ResultReporter
            Receives every outcome.
        selections : list[tuple[str, int, list[int]]] | None
            (tensor name, dim, indices) for each index selection.
        reshapes : list[tuple[str, list[int]]] | None
            (tensor name, new shape) for each reshape.
        products : list[tuple[str, str]] | None
            (left name, right name) for each Hadamard product.
        """
        self.tensors = tensors
        self.reporter = reporter
        self.selections = selections or []
        self.reshapes = reshapes or []
        self.products = products or []

    def _operations(self) -> Iterator[tuple[str, Callable[[], Tensor]]]:
        for name, dim, indices in self.selections:
            tensor = self.tensors[name]
            yield (
                f"IndexSelect({tensor.tolist()}, {dim}, {list(indices)})",
                partial(tensor.index_select, dim, indices),
            )
        for name, shape in self.reshapes:
            tensor = self.tensors[name]
            yield (
                f"Reshape({tensor.tolist()}, {list(shape)})",
                partial(tensor.reshape, shape),
            )
        for left_name, right_name in self.products:
            left = self.tensors[left_name]
            right = self.tensors[right_name]
            yield (
                f"HadamardProduct({left.tolist()}, {right.tolist()})",
                partial(left.hadamard_product, right),
            )

    def run(self) -> list[DemonstrationResult]:
        """
        Run every configured operation in order.

        Returns
        -------
        list[DemonstrationResult]
            One result per operation, in execution order.
        """
        operations = list(self._operations())
        logger.info(f"Running {len(operations)} tensor operations")
        self.reporter.on_start(len(operations))

        results: list[DemonstrationResult] = []
        for expression, operation in operations:
            try:
                tensor = operation()
            except TensorError as error:
                logger.warning(f"{expression} failed: {error}")
                self.reporter.on_error(expression, error)
                results.append(DemonstrationResult(expression=expression, error=error))
                continue

            self.reporter.on_result(expression, tensor)
            results.append(DemonstrationResult(expression=expression, tensor=tensor))

        succeeded = sum(1 for result in results if result.succeeded)
        failed = len(results) - succeeded
        self.reporter.on_finish(succeeded, failed)
        logger.info(f"Demonstration completed: {succeeded} succeeded, {failed} failed")
        return results
