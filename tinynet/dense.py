"""Fully connected layer with Xavier-uniform initialisation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinynet.rng import global_rng
from tinynet.tensor import Tensor, add_bias, matmul, transpose


@dataclass
class Gradients:
    """Gradients produced by one dense layer's backward pass."""

    d_weights: Tensor
    d_biases: Tensor
    d_input: Tensor


class DenseLayer:
    """Affine map ``x @ W + b`` holding its weights and biases."""

    def __init__(self, in_features: int, out_features: int) -> None:
        self.weights = Tensor((in_features, out_features))
        self.biases = Tensor((out_features,), 0.0)
        count = self.weights.size()
        if count:
            limit = math.sqrt(6.0 / (in_features + out_features))
            rng = global_rng()
            self.weights.data = [rng.uniform(-limit, limit) for _ in range(count)]

    def forward(self, x: Tensor) -> Tensor:
        """Return the pre-activation output for a batch of inputs."""
        z = matmul(x, self.weights)
        add_bias(z, self.biases)
        return z

    def backward(self, d_out: Tensor, input_cache: Tensor) -> Gradients:
        """Compute gradients for the weights, biases and the layer input."""
        _, cols = d_out.shape
        d_biases = Tensor((cols,))
        d_biases.data = [sum(d_out.data[j::cols], 0.0) for j in range(cols)]
        return Gradients(
            d_weights=matmul(transpose(input_cache), d_out),
            d_biases=d_biases,
            d_input=matmul(d_out, transpose(self.weights)),
        )