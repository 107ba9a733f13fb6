"""Sequential network of dense layers with optional activations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from tinynet.dense import DenseLayer, Gradients
from tinynet.relu import relu_backward
from tinynet.tensor import Tensor

Activation = Callable[[Tensor], Tensor]


@dataclass
class ForwardCache:
    """Tensors recorded during the forward pass for use in backward."""

    inputs: list[Tensor] = field(default_factory=list)
    zs: list[Tensor] = field(default_factory=list)


@dataclass
class ForwardResult:
    """Network output together with the cache that produced it."""

    prediction: Tensor
    cache: ForwardCache


@dataclass
class Stage:
    """A dense layer followed by an optional activation."""

    layer: DenseLayer
    activation: Activation | None = None


class Network:
    """An ordered list of stages evaluated one after another."""

    def __init__(self) -> None:
        self.stages: list[Stage] = []

    def add(self, layer: DenseLayer, activation: Activation | None = None) -> None:
        """Append a layer, optionally followed by an activation."""
        self.stages.append(Stage(layer, activation))

    def forward(self, x: Tensor) -> ForwardResult:
        """Run the batch through every stage, recording inputs and pre-activations."""
        cache = ForwardCache()
        for stage in self.stages:
            cache.inputs.append(x)
            z = stage.layer.forward(x)
            cache.zs.append(z)
            x = stage.activation(z) if stage.activation is not None else z
        return ForwardResult(x, cache)

    def backward(self, d_loss: Tensor, cache: ForwardCache) -> list[Gradients]:
        """Propagate the loss gradient back through every stage."""
        grads: list[Gradients] = []
        d = d_loss
        for stage, x, z in zip(
            reversed(self.stages), reversed(cache.inputs), reversed(cache.zs), strict=True
        ):
            if stage.activation is not None:
                d = relu_backward(d, z)
            layer_grads = stage.layer.backward(d, x)
            grads.append(layer_grads)
            d = layer_grads.d_input
        grads.reverse()
        return grads