"""
Dense feedforward neural networks trained by backpropagation
"""

from .matrix import Matrix, ShapeError
from .activation import Activation, Derivative
from .cost import Cost
from .algorithm import LearningRate
from .layer import Layer
from .nn import Network, ConfigurationError, State

__version__ = '0.1.0'
