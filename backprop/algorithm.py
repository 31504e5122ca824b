"""
Training algorithms and related classes
"""

import numpy as np


class LearningRate(object):
    """Learning rate class.

    The rate multiplies the gradient summed over a batch as is; it is not
    divided by the batch size. Any finite value is accepted: zero leaves the
    parameters unchanged and a negative rate ascends the cost.

    Attributes:
        const: float
            Constant learning rate.
        epoch: int
            Current epoch number, updated from `Network.train`.
    """
    def __init__(self, const, epoch=0):
        if not np.isfinite(const):
            raise ValueError('LearningRate.__init__: ' +
                             'learning rate must be finite, got {}'.format(const))
        self.const = float(const)
        self.epoch = epoch

    def get(self):
        return self.const

    def __repr__(self):
        return 'LearningRate({})'.format(self.const)
