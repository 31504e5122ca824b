"""
Cost functions
"""

import numpy as np

from .matrix import ShapeError, subtract, hadamard_product, apply_derivative

TYPES = ['quadratic', 'cross_entropy']


class Cost(object):
    """A class of cost functions for the output layer.

    Attributes:
        type: string
            Either 'quadratic' (default) or 'cross_entropy'.
            The cross-entropy error signal `output - target` is the exact
            gradient only for a sigmoid output layer.
    Methods:
        delta, eval
    """

    def __init__(self, type='quadratic'):
        self.type = type
        if self.type not in TYPES:
            raise ValueError('Cost.__init__: ' +
                             'Cost type not recognized: {}'.format(type))

    def delta(self, output, target, z, derivative):
        """Output-layer error signal (gradient w.r.t. the pre-activation sum).

        Args:
            output: Matrix
                Activation of the output layer, a column vector.
            target: Matrix
                Expected output, same shape as `output`.
            z: Matrix
                Pre-activation sum of the output layer.
            derivative: Derivative
                Derivative of the output layer's activation.
        Returns:
            delta: Matrix
                A new matrix shaped like `output`.
        """
        error = subtract(output, target)
        if self.type == 'quadratic':
            return hadamard_product(error, apply_derivative(z, derivative),
                                    out=error)
        else:  # cross_entropy
            return error

    def eval(self, output, target):
        """
        Cost of a single `output` against `target` (a float).
        """
        if output.shape != target.shape:
            raise ShapeError('Cost.eval: expected {}, got {}'.\
                format(output.shape, target.shape))
        a, y = output.values, target.values
        if self.type == 'quadratic':
            return 0.5 * float(np.sum((a - y) ** 2))
        else:  # cross_entropy
            with np.errstate(divide='ignore', invalid='ignore'):
                terms = y * np.log(a) + (1. - y) * np.log(1. - a)
            return -float(np.sum(np.nan_to_num(terms)))

    def __eq__(self, other):
        return isinstance(other, Cost) and self.type == other.type

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('Cost', self.type))

    def __repr__(self):
        return 'Cost({!r})'.format(self.type)
