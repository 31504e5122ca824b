"""
Activation functions and their derivatives
"""

import numpy as np
from scipy.special import expit

TYPES = ['identity', 'sigmoid', 'relu', 'leaky_relu', 'smooth_relu', 'tanh']

LEAKY_SLOPE = 0.01


class Activation(object):
    """A class of activation functions for neural networks.

    Attributes:
        type: string
            One of 'identity', 'sigmoid' (default), 'relu', 'leaky_relu',
            'smooth_relu' (softplus), or 'tanh'.
    Methods:
        eval, derivative
    """

    def __init__(self, type='sigmoid'):
        self.type = type
        if self.type not in TYPES:
            raise ValueError('Activation.__init__: ' +
                             'Activation type not recognized: {}'.format(type))

    def eval(self, a):
        """
        Evaluate the activation at value `a` (vectorized).
        """
        if self.type == 'sigmoid':
            return expit(a)
        elif self.type == 'tanh':
            return np.tanh(a)
        elif self.type == 'relu':
            return np.maximum(0., a)
        elif self.type == 'leaky_relu':
            return np.maximum(LEAKY_SLOPE * a, a)
        elif self.type == 'smooth_relu':
            return np.logaddexp(0., a)
        else:  # identity
            return a

    __call__ = eval

    @property
    def derivative(self):
        """The matching `Derivative`."""
        return Derivative(self.type)

    def __eq__(self, other):
        return isinstance(other, Activation) and self.type == other.type

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('Activation', self.type))

    def __repr__(self):
        return 'Activation({!r})'.format(self.type)


class Derivative(object):
    """Derivatives of the activation functions in `Activation`.

    Kept as its own type so that a layer's activation and derivative are
    configured independently.

    Attributes:
        type: string
            Same choices as `Activation.type`.
    Methods:
        grad
    """

    def __init__(self, type='sigmoid'):
        self.type = type
        if self.type not in TYPES:
            raise ValueError('Derivative.__init__: ' +
                             'Activation type not recognized: {}'.format(type))

    def grad(self, a):
        """
        Compute the gradient of the activation at value `a` (vectorized).
        """
        if self.type == 'sigmoid':
            s = expit(a)
            return s * (1. - s)
        elif self.type == 'tanh':
            return 1. - np.tanh(a) ** 2
        elif self.type == 'relu':
            return np.where(np.less(a, 0.), 0., 1.)
        elif self.type == 'leaky_relu':
            return np.where(np.less(a, 0.), LEAKY_SLOPE, 1.)
        elif self.type == 'smooth_relu':
            return expit(a)
        else:  # identity
            return np.ones_like(a, dtype=np.float64)

    __call__ = grad

    def __eq__(self, other):
        return isinstance(other, Derivative) and self.type == other.type

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('Derivative', self.type))

    def __repr__(self):
        return 'Derivative({!r})'.format(self.type)
