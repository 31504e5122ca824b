"""
Feedforward neural network models
"""

import enum
import logging
import time

import numpy as np

from .activation import Activation, Derivative
from .algorithm import LearningRate
from .cost import Cost
from .layer import Layer
from .matrix import Matrix, ShapeError, add, hadamard_product, \
    apply_derivative, multiply_transpose_a
from .utils import shuffle, generate_batches

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a network is misconfigured or used in the wrong state."""
    pass


class State(enum.Enum):
    UNCONFIGURED  = 'unconfigured'   # no activations yet
    UNINITIALIZED = 'uninitialized'  # activations set, parameters all zero
    READY         = 'ready'


class Network(object):
    """A neural network class.

    Fully-connected feedforward neural networks trained by mini-batch
    stochastic gradient descent, one example at a time.

    Attributes:
        sizes: list of ints
            A list of integers that contain the number of neurons per layer.
            For example, `[784, 16, 16, 10]` indicates a two-hidden-layer NN
            with 784-dimensional inputs, 16 hidden neurons in each of the
            two hidden layers, and a 10-dimensional output.
        cost: string or Cost
            Either 'quadratic' (default) or 'cross_entropy', or
            the corresponding instance of the `Cost` class.
        activation: string, Activation, list of either, or None
            If given, passed on to `activate`.
        seed: int or None
            Random seed for initialization and shuffling.

    Non-input Attributes:
        layers: list of `Layer`s
            `len(sizes) - 1` layers. Layer `i` holds the weights `W[i]` of
            size `sizes[i+1]` by `sizes[i]` and the biases `b[i]` of size
            `sizes[i+1]` by 1.
        rng: numpy.random.RandomState
            Random number generator using `seed`.
        state: State
            UNCONFIGURED until `activate`, UNINITIALIZED until `initialize`,
            READY afterwards.
        epoch: int
            Number of epochs trained so far.
        training_time: list of (int, float)
            Seconds spent on each epoch.

    Methods:
        __init__, activate, initialize, forward, backpropagate, train,
        predict, compute_error, compute_cost
    """

    def __init__(self, sizes, cost='quadratic', activation=None, seed=None):
        """
        Neural network model initializer.
        """
        sizes = list(sizes)
        if len(sizes) < 2:
            raise ConfigurationError('Network.__init__: ' +
                                     'need at least two layer sizes, got {}'.format(sizes))
        for n in sizes:
            if not isinstance(n, (int, np.integer)) or n < 1:
                raise ConfigurationError('Network.__init__: ' +
                                         'layer sizes must be positive ints, got {}'.format(sizes))

        # Attributes
        self.sizes = [int(n) for n in sizes]
        self.cost  = cost if isinstance(cost, Cost) else Cost(cost)
        self.seed  = seed
        self.rng   = np.random.RandomState(seed)
        self.state = State.UNCONFIGURED

        # Initialize a list of layers
        self.layers = []
        for i, (n_in, n_out) in enumerate(zip(self.sizes[:-1], self.sizes[1:])):
            self.layers.append(Layer('layer{}'.format(i), n_in, n_out))

        # Training updates
        self.epoch = 0
        self.training_time = []

        if activation is not None:
            self.activate(activation)

    @property
    def weights(self):
        return [l.W for l in self.layers]

    @property
    def biases(self):
        return [l.b for l in self.layers]

    @property
    def activations(self):
        return [l.activation for l in self.layers]

    @property
    def derivatives(self):
        return [l.derivative for l in self.layers]

    def activate(self, activations, derivatives=None):
        """Sets the activation/derivative pair of every layer.

        Args:
            activations: string, Activation, or list of either
                One entry per layer, or a single entry used for all layers.
            derivatives: string, Derivative, list of either, or None
                Same layout as `activations`. Defaults to the derivative
                matching each activation.
        Raises:
            ConfigurationError: The number of entries does not match the
                number of layers, or the cost is cross-entropy and the output
                layer is not a sigmoid.
        """
        activations = self._per_layer('activations', activations, Activation)
        if derivatives is None:
            derivatives = [a.derivative for a in activations]
        else:
            derivatives = self._per_layer('derivatives', derivatives, Derivative)

        if self.cost.type == 'cross_entropy' and \
           activations[-1].type != 'sigmoid':
            raise ConfigurationError('Network.activate: cross-entropy cost ' +
                                     'requires a sigmoid output layer, got {!r}'.\
                                     format(activations[-1].type))

        for l, a, d in zip(self.layers, activations, derivatives):
            l.activation = a
            l.derivative = d

        if self.state == State.UNCONFIGURED:
            self.state = State.UNINITIALIZED
        logger.info('Activated %s with %s', self.sizes,
                    [a.type for a in activations])
        return self

    def _per_layer(self, what, values, cls):
        if isinstance(values, (str, cls)):
            values = [values] * len(self.layers)
        values = [v if isinstance(v, cls) else cls(v) for v in values]
        if len(values) != len(self.layers):
            raise ConfigurationError('Network.activate: expected {} {}, got {}'.\
                format(len(self.layers), what, len(values)))
        return values

    def initialize(self):
        """
        Draws new weights and biases for every layer from `self.rng`.
        """
        if self.state == State.UNCONFIGURED:
            raise ConfigurationError('Network.initialize: ' +
                                     'call `activate` first')
        for l in self.layers:
            l.initialize(self.rng)
        self.state = State.READY
        logger.info('Initialized the weights and biases of %s', self.sizes)
        return self

    def _check_ready(self, op):
        if self.state != State.READY:
            raise ConfigurationError('Network.{}: network is {}, expected {}'.\
                format(op, self.state.value, State.READY.value))

    def forward(self, x):
        """Output of the network for one input.

        Args:
            x: Matrix
                Input column vector of size `sizes[0]` by 1.
        Returns:
            h: Matrix
                Output column vector of size `sizes[-1]` by 1.
        """
        self._check_ready('forward')
        h = x
        for l in self.layers:
            _, h = l.fprop(h)
        return h

    def backpropagate(self, x, y):
        """Gradients of the cost w.r.t. every weight and bias for one example.

        Args:
            x: Matrix
                Input column vector of size `sizes[0]` by 1.
            y: Matrix
                Target column vector of size `sizes[-1]` by 1.
        Returns:
            grad_W, grad_b: list of Matrix
                One gradient per layer, shaped like `weights[i]` and
                `biases[i]` respectively.
        """
        self._check_ready('backpropagate')
        if y.shape != (self.sizes[-1], 1):
            raise ShapeError('Network.backpropagate: target expected {}, got {}'.\
                format((self.sizes[-1], 1), y.shape))

        # Forward propagation, keeping every sum and activation
        # (first h is the input; last h is the output)
        a, h = [], [x]
        for l in self.layers:
            a_out, h_out = l.fprop(h[-1])
            a.append(a_out)
            h.append(h_out)

        L = len(self.layers)
        grad_W, grad_b = [None] * L, [None] * L

        # Output layer
        delta = self.cost.delta(h[-1], y, a[-1], self.layers[-1].derivative)
        grad_W[-1], grad_b[-1] = self.layers[-1].gradients(delta, h[-2])

        # Hidden layers, from the top down
        for i in range(L - 2, -1, -1):
            delta = multiply_transpose_a(self.layers[i + 1].W, delta)
            hadamard_product(delta,
                             apply_derivative(a[i], self.layers[i].derivative),
                             out=delta)
            grad_W[i], grad_b[i] = self.layers[i].gradients(delta, h[i])

        return grad_W, grad_b

    def train(self, X, y, epochs=1, batch_size=32, learning_rate=0.05,
              timer=time.perf_counter):
        """Train the neural network with data.

        `X` and `y` are shuffled in place at the start of every epoch.

        Args:
            X: list of Matrix
                Input column vectors of size `sizes[0]` by 1.
            y: list of Matrix
                Target column vectors (one-hot for classification) of size
                `sizes[-1]` by 1, paired with `X`.
            epochs: int
                Number of passes over the data.
            batch_size: int
                Number of examples whose gradients are summed before each
                update. The last batch of an epoch may be smaller.
            learning_rate: float or LearningRate
                Multiplier applied to the summed gradient of a batch.
            timer: function() -> float
                Clock in seconds. Defaults to `time.perf_counter`.
        Returns:
            total: float
                Seconds spent training, summed over epochs.
        """
        self._check_ready('train')
        if len(X) != len(y):
            raise ValueError('Network.train: {} inputs but {} targets'.\
                format(len(X), len(y)))
        if epochs < 0:
            raise ValueError('Network.train: negative epoch count {}'.format(epochs))
        if batch_size < 1:
            raise ValueError('Network.train: ' +
                             'batch size must be positive, got {}'.format(batch_size))
        if not isinstance(learning_rate, LearningRate):
            learning_rate = LearningRate(learning_rate)

        # Gradient sums over the current batch
        sum_W = [Matrix(*l.W.shape) for l in self.layers]
        sum_b = [Matrix(*l.b.shape) for l in self.layers]

        total = 0.
        for _ in range(epochs):
            start = timer()
            shuffle(X, y, self.rng)
            lr = learning_rate.get()

            for batch in generate_batches(len(X), batch_size):
                for i in batch:
                    grad_W, grad_b = self.backpropagate(X[i], y[i])
                    for j in range(len(self.layers)):
                        add(sum_W[j], grad_W[j], out=sum_W[j])
                        add(sum_b[j], grad_b[j], out=sum_b[j])

                for l, gW, gb in zip(self.layers, sum_W, sum_b):
                    l.update(gW, gb, lr)
                    gW.clear()
                    gb.clear()

            elapsed = timer() - start
            total += elapsed
            self.epoch += 1
            learning_rate.epoch = self.epoch
            self.training_time.append((self.epoch, elapsed))
            logger.info('Epoch %d done in %.3f sec (%d examples)',
                        self.epoch, elapsed, len(X))

        return total

    def predict(self, x):
        """
        Predicted class of one input: the row of the largest output.
        """
        return self.forward(x).argmax()[0]

    def compute_error(self, X, labels):
        """Computes the error rate on inputs `X` and integer `labels`.

        Returns:
            err: float
                Fraction of inputs whose predicted class is wrong.
        """
        if len(X) != len(labels):
            raise ValueError('Network.compute_error: {} inputs but {} labels'.\
                format(len(X), len(labels)))
        if not X:
            return 0.
        wrong = sum(self.predict(x) != int(l) for x, l in zip(X, labels))
        return wrong / len(X)

    def compute_cost(self, X, y):
        """
        Mean cost over inputs `X` and targets `y`.
        """
        if len(X) != len(y):
            raise ValueError('Network.compute_cost: {} inputs but {} targets'.\
                format(len(X), len(y)))
        if not X:
            return 0.
        return sum(self.cost.eval(self.forward(x), t) for x, t in zip(X, y)) / len(X)

    def __repr__(self):
        return 'Network({}, cost={!r}, state={})'.format(
            self.sizes, self.cost.type, self.state.value)
