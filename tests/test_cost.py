import numpy as np
import pytest

from backprop.activation import Activation, Derivative
from backprop.cost import Cost
from backprop.matrix import Matrix, ShapeError


def test_unknown_type():
    with pytest.raises(ValueError):
        Cost('hinge')


def test_quadratic_delta():
    z = Matrix.column([0., 1.])
    output = z.apply_activation(Activation('sigmoid'))
    target = Matrix.column([1., 0.])
    delta = Cost('quadratic').delta(output, target, z, Derivative('sigmoid'))

    s = 1. / (1. + np.exp(-np.array([0., 1.])))
    expected = (s - [1., 0.]) * s * (1. - s)
    np.testing.assert_allclose(delta.values, expected)


def test_cross_entropy_delta_skips_derivative():
    output = Matrix.column([0.25, 0.75])
    target = Matrix.column([1., 0.])
    z = Matrix.column([5., 5.])
    delta = Cost('cross_entropy').delta(output, target, z, Derivative('sigmoid'))
    assert delta == Matrix.column([-0.75, 0.75])


def test_delta_does_not_modify_inputs():
    output = Matrix.column([0.5, 0.5])
    target = Matrix.column([1., 0.])
    Cost('quadratic').delta(output, target, Matrix.column([0., 0.]),
                            Derivative('sigmoid'))
    assert output == Matrix.column([0.5, 0.5])


def test_eval():
    output = Matrix.column([0.5, 0.25])
    target = Matrix.column([1., 0.])
    assert Cost('quadratic').eval(output, target) == 0.5 * (0.25 + 0.0625)
    np.testing.assert_allclose(Cost('cross_entropy').eval(output, target),
                               -(np.log(0.5) + np.log(0.75)))


def test_cross_entropy_eval_at_saturation():
    output = Matrix.column([1., 0.])
    target = Matrix.column([1., 0.])
    assert Cost('cross_entropy').eval(output, target) == 0.


def test_shape_mismatch():
    with pytest.raises(ShapeError):
        Cost('quadratic').eval(Matrix.column([1.]), Matrix.column([1., 0.]))
    with pytest.raises(ShapeError):
        Cost('cross_entropy').delta(Matrix.column([1.]), Matrix.column([1., 0.]),
                                    Matrix.column([0.]), Derivative('sigmoid'))
