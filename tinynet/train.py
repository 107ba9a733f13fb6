"""Command-line training of a small MNIST classifier."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from tinynet.csvdata import load_csv
from tinynet.dataloader import DataLoader
from tinynet.dense import DenseLayer
from tinynet.loss import mse_backward, mse_forward
from tinynet.network import Network
from tinynet.relu import relu
from tinynet.rng import set_seed
from tinynet.sgd import SGD
from tinynet.tensor import Tensor

DEFAULT_DATA = "data/mnist_train.csv"
PIXELS = 784
CLASSES = 10
MNIST_COLUMNS = PIXELS + 1


def prepare_mnist(raw: Tensor) -> tuple[Tensor, Tensor]:
    """Split label-first MNIST rows into scaled pixels and one-hot targets."""
    if raw.ndim() != 2 or raw.shape[1] != MNIST_COLUMNS:
        raise ValueError(f"expected {MNIST_COLUMNS} columns, got shape {raw.shape}")
    rows, cols = raw.shape
    x = Tensor((rows, PIXELS))
    y = Tensor((rows, CLASSES))
    pixels: list[float] = []
    for i, start in enumerate(range(0, rows * cols, cols)):
        row = raw.data[start:start + cols]
        label = int(row[0])
        if not 0 <= label < CLASSES:
            raise ValueError(f"label {label} out of range in row {i}")
        y[i, label] = 1.0
        pixels.extend(value / 255.0 for value in row[1:])
    x.data = pixels
    return x, y


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tinynet", description="Train an MNIST classifier.")
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA, help="training CSV file")
    parser.add_argument("--epochs", type=int, default=10)
    parser.add_argument("--batch-size", type=int, default=32)
    parser.add_argument("--learning-rate", type=float, default=0.01)
    parser.add_argument("--seed", type=int, default=42)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Train the network and print the mean loss of every epoch."""
    args = _parse_args(argv)
    set_seed(args.seed)

    try:
        raw = load_csv(args.data)
    except OSError:
        raw = Tensor((0, 0))
    rows, cols = raw.shape
    if rows == 0 or cols != MNIST_COLUMNS:
        print(
            f"Failed to load {args.data} (got {rows} rows, {cols} cols). Run from project root.",
            file=sys.stderr,
        )
        return 1
    try:
        x, y = prepare_mnist(raw)
    except ValueError as error:
        print(f"Failed to load {args.data}: {error}", file=sys.stderr)
        return 1

    net = Network()
    net.add(DenseLayer(PIXELS, 128), relu)
    net.add(DenseLayer(128, CLASSES))

    optimizer = SGD(args.learning_rate)
    loader = DataLoader(x, y, args.batch_size)

    for epoch in range(1, args.epochs + 1):
        loader.shuffle()
        epoch_loss = 0.0
        for batch_x, batch_y in loader:
            result = net.forward(batch_x)
            epoch_loss += mse_forward(result.prediction, batch_y)
            d_loss = mse_backward(result.prediction, batch_y)
            optimizer.step(net, net.backward(d_loss, result.cache))
        epoch_loss /= loader.n_batches()
        print(f"Epoch {epoch} loss: {epoch_loss:g}", flush=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())