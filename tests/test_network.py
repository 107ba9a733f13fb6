import pytest

from tinynet.dense import DenseLayer
from tinynet.loss import mse_backward, mse_forward
from tinynet.network import Network
from tinynet.relu import relu
from tinynet.rng import set_seed
from tinynet.tensor import Tensor


def _tensor(rows):
    t = Tensor((len(rows), len(rows[0])))
    t.data = [float(v) for row in rows for v in row]
    return t


def _two_layer_net():
    set_seed(11)
    net = Network()
    net.add(DenseLayer(3, 4), relu)
    net.add(DenseLayer(4, 2))
    return net


X = _tensor([[0.5, -1.0, 2.0], [1.5, 0.25, -0.75]])
Y = _tensor([[1.0, 0.0], [0.0, 1.0]])


def test_empty_network_returns_input():
    result = Network().forward(X)
    assert result.prediction == X
    assert result.cache.inputs == []
    assert result.cache.zs == []


def test_add_defaults_to_no_activation():
    net = Network()
    net.add(DenseLayer(2, 2))
    assert net.stages[0].activation is None
    assert len(net.stages) == 1


def test_forward_cache_records_every_stage():
    net = _two_layer_net()
    result = net.forward(X)
    cache = result.cache
    assert len(cache.inputs) == len(cache.zs) == 2
    assert cache.inputs[0] == X
    assert cache.zs[0] == net.stages[0].layer.forward(X)
    assert cache.inputs[1] == relu(cache.zs[0])
    assert result.prediction == cache.zs[1]
    assert result.prediction.shape == (2, 2)


def test_backward_returns_one_gradient_per_stage():
    net = _two_layer_net()
    result = net.forward(X)
    grads = net.backward(mse_backward(result.prediction, Y), result.cache)
    assert len(grads) == 2
    assert grads[0].d_weights.shape == (3, 4)
    assert grads[1].d_weights.shape == (4, 2)
    assert grads[0].d_input.shape == X.shape


def test_dead_relu_blocks_gradient():
    net = _two_layer_net()
    first = net.stages[0].layer
    first.weights.data = [0.0] * first.weights.size()
    first.biases.data = [-1.0] * 4
    result = net.forward(X)
    grads = net.backward(mse_backward(result.prediction, Y), result.cache)
    assert grads[0].d_weights.data == [0.0] * 12
    assert grads[0].d_biases.data == [0.0] * 4


def test_gradients_match_finite_differences():
    net = _two_layer_net()

    def loss():
        return mse_forward(net.forward(X).prediction, Y)

    result = net.forward(X)
    grads = net.backward(mse_backward(result.prediction, Y), result.cache)
    eps = 1e-6
    for stage, stage_grads in zip(net.stages, grads):
        for params, analytic in (
            (stage.layer.weights, stage_grads.d_weights),
            (stage.layer.biases, stage_grads.d_biases),
        ):
            for k, original in enumerate(params.data):
                params.data[k] = original + eps
                up = loss()
                params.data[k] = original - eps
                down = loss()
                params.data[k] = original
                assert (up - down) / (2 * eps) == pytest.approx(analytic.data[k], abs=1e-5)