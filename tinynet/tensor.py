"""Row-major float tensor and the matrix operations built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import prod
from numbers import Real
from operator import mul


class Tensor:
    """A flat list of floats viewed through a shape, stored row-major."""

    __slots__ = ("data", "shape")

    def __init__(self, shape: Iterable[int] | None = None, fill_value: float = 0.0) -> None:
        if shape is None:
            self.shape: tuple[int, ...] = ()
            self.data: list[float] = []
        else:
            self.shape = tuple(int(dim) for dim in shape)
            self.data = [float(fill_value)] * prod(self.shape)

    @classmethod
    def _build(cls, shape: tuple[int, ...], data: list[float]) -> Tensor:
        result = cls.__new__(cls)
        result.shape = shape
        result.data = data
        return result

    def size(self) -> int:
        """Number of stored elements."""
        return len(self.data)

    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    def empty(self) -> bool:
        """True when the tensor holds no elements."""
        return not self.data

    def _offset(self, index: int | tuple[int, int]) -> int:
        if isinstance(index, tuple):
            row, col = index
            return row * self.shape[1] + col
        return index

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        return self.data[self._offset(index)]

    def __setitem__(self, index: int | tuple[int, int], value: float) -> None:
        self.data[self._offset(index)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tensor(shape={self.shape}, data={self.data})"

    def __add__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("Shape mismatch for element-wise addition")
        return Tensor._build(self.shape, [a + b for a, b in zip(self.data, other.data)])

    def __mul__(self, other: object) -> Tensor:
        if isinstance(other, Tensor):
            if self.shape != other.shape:
                raise ValueError("Shape mismatch for element-wise multiplication")
            return Tensor._build(self.shape, list(map(mul, self.data, other.data)))
        if isinstance(other, Real):
            scale = float(other)
            return Tensor._build(self.shape, [value * scale for value in self.data])
        return NotImplemented

    def __rmul__(self, other: object) -> Tensor:
        if isinstance(other, Real):
            return self * other
        return NotImplemented


def _rows(t: Tensor) -> Iterator[list[float]]:
    if t.ndim() != 2:
        raise ValueError("Operation requires a 2D tensor")
    rows, cols = t.shape
    if cols == 0:
        return ([] for _ in range(rows))
    return (t.data[start:start + cols] for start in range(0, rows * cols, cols))


def matmul(a: Tensor, b: Tensor) -> Tensor:
    """Matrix product of two 2D tensors."""
    if a.ndim() != 2 or b.ndim() != 2:
        raise ValueError("matmul requires 2D tensors")
    if a.shape[1] != b.shape[0]:
        raise ValueError("Dimension mismatch")
    if b.shape[0]:
        columns = list(zip(*_rows(b)))
    else:
        columns = [()] * b.shape[1]
    data = [sum(map(mul, row, column), 0.0) for row in _rows(a) for column in columns]
    return Tensor._build((a.shape[0], b.shape[1]), data)


def transpose(a: Tensor) -> Tensor:
    """Swap the two axes of a 2D tensor."""
    if a.ndim() != 2:
        raise ValueError("Transpose requires a 2D tensor")
    rows, cols = a.shape
    data = [value for column in zip(*_rows(a)) for value in column]
    return Tensor._build((cols, rows), data)


def add_bias(z: Tensor, bias: Tensor) -> None:
    """Add ``bias`` to every row of the 2D tensor ``z`` in place."""
    if z.ndim() != 2 or not bias.shape or z.shape[1] != bias.shape[0]:
        raise ValueError("Bias dimension mismatch")
    z.data[:] = [value + b for row in _rows(z) for value, b in zip(row, bias.data)]