"""
Neural network layer class
"""

import logging
import numpy as np

from .matrix import (Matrix, ShapeError, add, dot, subtract, scale,
                     apply_activation, multiply_transpose_b)

logger = logging.getLogger(__name__)


class Layer(object):
    """A fully-connected layer of a feedforward neural network.

    Includes the weight matrix and the bias vector along with the
    activation/derivative pair applied to the layer's output.
    In the current implementation, this class is always instantiated by
    `Network.__init__`.

    Attributes:
        __name__: string
            Name of the layer such as `layer3`.
        n_in: int
            Number of input units to the layer (the fan-in).
        n_out: int
            Number of output units of the layer.
        activation: Activation or None
            Set by `Network.activate`.
        derivative: Derivative or None
            Set by `Network.activate`.

    Non-input attributes:
        W: Matrix
            Weight matrix of size `n_out` times `n_in`.
        b: Matrix
            Bias column vector of size `n_out`.

    Methods:
        __init__, initialize, fprop, gradients, update
    """

    def __init__(self, name, n_in, n_out, activation=None, derivative=None):
        """
        Neural network layer initializer. Parameters start at zero.
        """

        # Attributes
        self.__name__   = name
        self.n_in       = n_in
        self.n_out      = n_out
        self.activation = activation
        self.derivative = derivative

        # Parameters, populated by `initialize`
        self.W = Matrix(n_out, n_in)
        self.b = Matrix(n_out, 1)

    def initialize(self, rng):
        """Draws biases from N(0, 1) and weights from N(0, 1) / sqrt(n_in).

        Args:
            rng: numpy.random.RandomState
                Random number generator owned by the network.
        """
        self.b.values[:] = rng.normal(size=self.n_out)
        self.W.values[:] = rng.normal(size=self.n_out * self.n_in) / \
            np.sqrt(self.n_in)

    def fprop(self, h_in):
        """
        Forward propagation of incoming units through the current layer.
        Includes a linear transformation and an activation.

        Args:
            h_in: Matrix
                An `n_in` by 1 column vector of activations from the
                immediate downstream.
        Returns:
            a_out, h_out: Matrix
                The pre-activation sum `W . h_in + b` and its activation,
                both `n_out` by 1.
        """
        if h_in.shape != (self.n_in, 1):
            raise ShapeError('Layer.fprop: {} expected {}, got {}'.\
                format(self.__name__, (self.n_in, 1), h_in.shape))

        a_out = dot(self.W, h_in)
        add(a_out, self.b, out=a_out)
        h_out = apply_activation(a_out, self.activation)

        logger.debug('%s: %s -> %s', self.__name__, h_in.shape, h_out.shape)
        return a_out, h_out

    def gradients(self, delta, h_in):
        """Parameter gradients for one example.

        Args:
            delta: Matrix
                Gradient of the cost w.r.t. this layer's pre-activation sum,
                `n_out` by 1.
            h_in: Matrix
                The activation this layer received, `n_in` by 1.
        Returns:
            grad_W, grad_b: Matrix
                `delta . h_in^T` (shaped like `W`) and `delta` itself.
        """
        return multiply_transpose_b(delta, h_in), delta

    def update(self, grad_W, grad_b, lr):
        """Subtracts `lr` times the gradients from `W` and `b`, in place.

        The gradient matrices are scaled in place as well.
        """
        subtract(self.W, scale(grad_W, lr, out=grad_W), out=self.W)
        subtract(self.b, scale(grad_b, lr, out=grad_b), out=self.b)

    def __repr__(self):
        return 'Layer({!r}, {}, {}, {!r})'.format(
            self.__name__, self.n_in, self.n_out, self.activation)
