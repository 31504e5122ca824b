import numpy as np
import pytest

from backprop.activation import Activation, Derivative
from backprop.algorithm import LearningRate
from backprop.layer import Layer
from backprop.matrix import Matrix, ShapeError


def make_layer():
    l = Layer('layer0', 2, 3, Activation('identity'), Derivative('identity'))
    l.W.values[:] = [1., 2., 3., 4., 5., 6.]
    l.b.values[:] = [0.5, 0., -0.5]
    return l


def test_fprop():
    a_out, h_out = make_layer().fprop(Matrix.column([1., 1.]))
    assert a_out == Matrix.column([3.5, 7., 10.5])
    assert h_out == a_out


def test_fprop_wrong_shape():
    with pytest.raises(ShapeError):
        make_layer().fprop(Matrix.column([1., 1., 1.]))


def test_gradients():
    l = make_layer()
    delta = Matrix.column([1., 0., 2.])
    grad_W, grad_b = l.gradients(delta, Matrix.column([3., 4.]))
    assert grad_W == Matrix(3, 2, [3., 4., 0., 0., 6., 8.])
    assert grad_b is delta


def test_update():
    l = make_layer()
    l.update(Matrix.full(3, 2, 1.), Matrix.full(3, 1, 2.), 0.5)
    assert l.W == Matrix(3, 2, [0.5, 1.5, 2.5, 3.5, 4.5, 5.5])
    assert l.b == Matrix.column([-0.5, -1., -1.5])


def test_initialize():
    l = Layer('layer0', 100, 50)
    l.initialize(np.random.RandomState(0))
    assert l.W.shape == (50, 100)
    assert abs(np.std(l.W.values) - 0.1) < 0.01
    assert np.any(l.b.values != 0.)


def test_learning_rate():
    assert LearningRate(0.05).get() == 0.05
    assert LearningRate(0.).get() == 0.
    assert LearningRate(-1.).get() == -1.
    for const in [float('nan'), float('inf'), -float('inf')]:
        with pytest.raises(ValueError):
            LearningRate(const)
