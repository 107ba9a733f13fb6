"""Mean squared error loss and its gradient."""

import math

from tinynet.tensor import Tensor


def mse_forward(predictions: Tensor, targets: Tensor) -> float:
    """Mean of squared differences between predictions and targets."""
    if predictions.shape != targets.shape:
        raise ValueError("Shape mismatch in mse_forward")
    if predictions.empty():
        return math.nan
    total = sum((p - t) ** 2 for p, t in zip(predictions.data, targets.data))
    return total / predictions.size()


def mse_backward(predictions: Tensor, targets: Tensor) -> Tensor:
    """Gradient of the mean squared error with respect to the predictions."""
    if predictions.shape != targets.shape:
        raise ValueError("Shape mismatch in mse_backward")
    grad = Tensor(predictions.shape)
    if predictions.empty():
        return grad
    scale = 2.0 / predictions.size()
    grad.data = [(p - t) * scale for p, t in zip(predictions.data, targets.data)]
    return grad