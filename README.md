# tinynet

tinynet is a small library for fully connected neural networks. It is written in
pure Python and needs no third-party packages. It trains with backpropagation,
mean squared error and plain stochastic gradient descent. It also includes a
command that trains a classifier on MNIST digits stored as CSV.

## Installation

```
pip install .
```

## Modules

- `tinynet.tensor`
  - `Tensor(shape, fill_value=0.0)` holds a flat, row-major list of floats (`data`) and a `shape` tuple.
  - It has the methods `size()`, `ndim()` and `empty()`.
  - It supports indexing by flat offset (`t[i]`) or by row and column (`t[row, col]`).
  - It supports element-wise `+` and `*` between tensors of the same shape. A shape mismatch raises `ValueError`.
  - It supports multiplication by a scalar on either side.
  - The module also provides `matmul(a, b)`, `transpose(a)` and `add_bias(z, bias)`. `add_bias` adds the bias to every row of `z` in place.
- `tinynet.dense`
  - `DenseLayer(in_features, out_features)` computes `x · W + b`. The weights start Xavier-uniform, drawn from the shared generator, and the biases start at zero.
  - `backward(d_out, input_cache)` returns a `Gradients` record with the fields `d_weights`, `d_biases` and `d_input`.
- `tinynet.relu` provides `relu(x)` and `relu_backward(d_out, input_cache)`.
- `tinynet.loss` provides `mse_forward(predictions, targets)` and `mse_backward(predictions, targets)`.
  - Both raise `ValueError` when the shapes differ.
  - For empty tensors, the forward function returns `nan`.
- `tinynet.network`
  - `Network` holds an ordered list of `Stage`s. Each stage is a layer followed by an optional activation.
  - `forward(x)` returns a `ForwardResult` with a `prediction` and a `ForwardCache`. The cache records each layer's input and its pre-activation output.
  - `backward(d_loss, cache)` returns one `Gradients` per layer, in layer order.
  - The backward pass applies the ReLU gradient wherever a stage has an activation. Use `relu` as the activation, or no activation.
- `tinynet.sgd.SGD(learning_rate)` provides `step(net, grads)`, which updates every weight and bias in place.
- `tinynet.dataloader.DataLoader(x, y, batch_size)`
  - `shuffle()` randomises the row order using the shared generator.
  - `n_batches()` gives the number of batches.
  - `get_batch(i)` returns one batch as a pair `(x_batch, y_batch)`. The last batch may be short.
  - Iterating over the loader yields every batch in order.
- `tinynet.csvdata.load_csv(path)` reads a numeric CSV file into a `(rows, cols)` tensor.
  - Blank lines are skipped.
  - The first line is skipped as a header when it does not start with a digit or `-`.
- `tinynet.rng`
  - `global_rng()` returns the shared `random.Random` instance.
  - `set_seed(seed)` reseeds it, so that runs can be reproduced.
- `tinynet.train`
  - `prepare_mnist(raw)` splits label-first rows of 785 columns into two tensors. The pixels are scaled to `[0, 1]`, and the targets are one-hot over 10 classes.
  - `main(argv=None)` runs the training command.

## Training on MNIST

Each row of the CSV file holds a label followed by 784 pixel values. To train on the default file `data/mnist_train.csv`, run:

```
tinynet-train
```

The command also accepts these options, with these defaults:

```
tinynet-train [DATA] [--epochs 10] [--batch-size 32] [--learning-rate 0.01] [--seed 42]
```

The network has the layout 784 → 128 (ReLU) → 10. Each epoch shuffles the batches, and after every epoch the command prints the mean loss, for example `Epoch 1 loss: 0.0412`. If the file cannot be read, or it does not have 785 columns, the command prints an error and exits with status 1.

## Using the library

```python
from tinynet.tensor import Tensor
from tinynet.dense import DenseLayer
from tinynet.network import Network
from tinynet.relu import relu
from tinynet.loss import mse_forward, mse_backward
from tinynet.sgd import SGD
from tinynet.rng import set_seed

set_seed(0)
net = Network()
net.add(DenseLayer(2, 4), relu)
net.add(DenseLayer(4, 1))

x = Tensor((1, 2), 0.5)
y = Tensor((1, 1), 1.0)

optimizer = SGD(0.1)
result = net.forward(x)
loss = mse_forward(result.prediction, y)
grads = net.backward(mse_backward(result.prediction, y), result.cache)
optimizer.step(net, grads)
```

## Limitations

tinynet does not do the following:

- It does not save or load trained weights.
- It does not evaluate a model on a test set, and it does not report accuracy.
- It has no activations other than ReLU.
- It has no losses other than mean squared error.

## Tests

```
pip install .[test]
pytest
```