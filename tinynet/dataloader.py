"""Mini-batching and shuffling of paired input/target tensors."""

from __future__ import annotations

from collections.abc import Iterator

from tinynet.rng import global_rng
from tinynet.tensor import Tensor


def _gather(source: Tensor, rows: list[int]) -> Tensor:
    cols = source.shape[1]
    batch = Tensor((len(rows), cols))
    batch.data = [value for r in rows for value in source.data[r * cols:(r + 1) * cols]]
    return batch


class DataLoader:
    """Serves row-aligned batches of ``x`` and ``y`` in a shufflable order."""

    def __init__(self, x: Tensor, y: Tensor, batch_size: int) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.x = x
        self.y = y
        self.batch_size = batch_size
        self.indices = list(range(x.shape[0]))

    def shuffle(self) -> None:
        """Randomly permute the row order using the shared generator."""
        global_rng().shuffle(self.indices)

    def n_batches(self) -> int:
        """Number of batches, the last one possibly short."""
        return -(-self.x.shape[0] // self.batch_size)

    def get_batch(self, batch_idx: int) -> tuple[Tensor, Tensor]:
        """Return the inputs and targets of batch ``batch_idx``."""
        if not 0 <= batch_idx < self.n_batches():
            raise IndexError(f"batch index {batch_idx} out of range")
        start = batch_idx * self.batch_size
        rows = self.indices[start:start + self.batch_size]
        return _gather(self.x, rows), _gather(self.y, rows)

    def __iter__(self) -> Iterator[tuple[Tensor, Tensor]]:
        return (self.get_batch(b) for b in range(self.n_batches()))