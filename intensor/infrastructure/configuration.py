import os
import tomllib
from dataclasses import dataclass, field

from intensor.domain.entities.tensor import Tensor


def _check_int(value, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")


def _check_int_list(values, field_name: str) -> None:
    if not isinstance(values, list):
        raise ValueError(f"{field_name} must be a list of integers, got {values!r}")
    for value in values:
        _check_int(value, f"{field_name} entry")


@dataclass
class TensorConfiguration:
    """A named tensor definition."""

    name: str
    data: list[int]
    shape: list[int]

    def __post_init__(self):
        _check_int_list(self.data, f"tensors.{self.name}.data")
        _check_int_list(self.shape, f"tensors.{self.name}.shape")


@dataclass
class SelectionConfiguration:
    """An index selection on a named tensor."""

    tensor: str
    dim: int
    indices: list[int]

    def __post_init__(self):
        """
        Reject non-integer values before any operation runs.

        Raises
        ------
        ValueError
            If `dim` or an entry of `indices` is not an integer.
        """
        _check_int(self.dim, "selections.dim")
        _check_int_list(self.indices, "selections.indices")


@dataclass
class ReshapeConfiguration:
    """A reshape of a named tensor."""

    tensor: str
    shape: list[int]

    def __post_init__(self):
        _check_int_list(self.shape, "reshapes.shape")


@dataclass
class ProductConfiguration:
    """A Hadamard product of two named tensors."""

    left: str
    right: str


@dataclass
class DemoConfiguration:
    """Configuration for a demonstration run."""

    tensors: list[TensorConfiguration]
    selections: list[SelectionConfiguration] = field(default_factory=list)
    reshapes: list[ReshapeConfiguration] = field(default_factory=list)
    products: list[ProductConfiguration] = field(default_factory=list)

    def __post_init__(self):
        """
        Check that every operation refers to a defined tensor.

        Raises
        ------
        ValueError
            If a tensor name is defined twice or an operation names an
            undefined tensor.
        """
        names = [tensor.name for tensor in self.tensors]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate tensor names: {duplicates}")

        referenced = [selection.tensor for selection in self.selections]
        referenced += [reshape.tensor for reshape in self.reshapes]
        for product in self.products:
            referenced += [product.left, product.right]

        unknown = sorted(set(referenced) - set(names))
        if unknown:
            raise ValueError(f"Unknown tensor names: {unknown}. Defined: {names}")

    def build_tensors(self) -> dict[str, Tensor]:
        """
        Construct every configured tensor.

        Returns
        -------
        dict[str, Tensor]
            Tensors keyed by name.

        Raises
        ------
        TensorError
            If a definition violates the size invariant.
        """
        return {tensor.name: Tensor(tensor.data, tensor.shape) for tensor in self.tensors}

    @classmethod
    def default(cls) -> "DemoConfiguration":
        """Built-in examples: a vector and a 2x2 matrix put through every operation."""
        return cls(
            tensors=[
                TensorConfiguration(name="vector", data=[1, 2, 3, 4], shape=[4]),
                TensorConfiguration(name="matrix", data=[1, 2, 3, 4], shape=[2, 2]),
                TensorConfiguration(name="weights", data=[2, 0, 1, 2], shape=[2, 2]),
            ],
            selections=[
                SelectionConfiguration(tensor="vector", dim=0, indices=[0, 0, 2]),
                SelectionConfiguration(tensor="matrix", dim=0, indices=[0]),
                SelectionConfiguration(tensor="matrix", dim=0, indices=[0, 0]),
                SelectionConfiguration(tensor="matrix", dim=0, indices=[0, 0, 1, 1]),
                SelectionConfiguration(tensor="matrix", dim=1, indices=[0]),
                SelectionConfiguration(tensor="matrix", dim=1, indices=[0, 0]),
                SelectionConfiguration(tensor="matrix", dim=1, indices=[0, 0, 1, 1]),
            ],
            reshapes=[ReshapeConfiguration(tensor="matrix", shape=[4, 1])],
            products=[ProductConfiguration(left="matrix", right="weights")],
        )

    @classmethod
    def load(cls, config_path: str) -> "DemoConfiguration":
        """
        Load demonstration configuration from a TOML file.

        The file should contain a [demo] table with [[demo.tensors]] entries
        and any of [[demo.selections]], [[demo.reshapes]], [[demo.products]].

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file.

        Returns
        -------
        DemoConfiguration
            Instance populated from the "demo" table.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        ValueError
            If an entry holds a non-integer dim, index, shape or data value,
            or refers to an undefined tensor.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        demo_data = data.get("demo", {})
        return cls(
            tensors=[TensorConfiguration(**entry) for entry in demo_data.get("tensors", [])],
            selections=[SelectionConfiguration(**entry) for entry in demo_data.get("selections", [])],
            reshapes=[ReshapeConfiguration(**entry) for entry in demo_data.get("reshapes", [])],
            products=[ProductConfiguration(**entry) for entry in demo_data.get("products", [])],
        )
