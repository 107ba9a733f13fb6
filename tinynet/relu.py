"""Rectified linear activation and its gradient."""

from tinynet.tensor import Tensor


def relu(x: Tensor) -> Tensor:
    """Element-wise max(0, x)."""
    result = Tensor(x.shape)
    result.data = [max(0.0, value) for value in x.data]
    return result


def relu_backward(d_out: Tensor, input_cache: Tensor) -> Tensor:
    """Pass the upstream gradient through where the cached input was positive."""
    grad = Tensor(d_out.shape)
    grad.data = [
        g if cached > 0.0 else 0.0
        for g, cached in zip(d_out.data, input_cache.data, strict=True)
    ]
    return grad