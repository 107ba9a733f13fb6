"""Plain stochastic gradient descent."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tinynet.dense import Gradients
from tinynet.network import Network
from tinynet.tensor import Tensor


def _descend(params: Tensor, grad: Tensor, rate: float) -> None:
    params.data[:] = [p - rate * g for p, g in zip(params.data, grad.data, strict=True)]


@dataclass
class SGD:
    """Updates parameters in place by ``param -= learning_rate * grad``."""

    learning_rate: float

    def step(self, net: Network, grads: Sequence[Gradients]) -> None:
        """Apply one update to every layer of ``net``."""
        for stage, layer_grads in zip(net.stages, grads, strict=True):
            _descend(stage.layer.weights, layer_grads.d_weights, self.learning_rate)
            _descend(stage.layer.biases, layer_grads.d_biases, self.learning_rate)