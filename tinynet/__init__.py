"""Dense neural network layers, MSE loss, SGD and an MNIST training command."""

__version__ = "0.1.0"