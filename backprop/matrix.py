"""
Dense matrices
"""

import operator

import numpy as np


class ShapeError(ValueError):
    """Raised when operand or destination shapes are incompatible."""
    pass


def _dimension(n):
    """Checks that a row or column count is an integer."""
    try:
        return operator.index(n)
    except TypeError:
        raise ShapeError('Matrix.__init__: dimension must be an integer, ' +
                         'got {!r}'.format(n))


class Matrix(object):
    """A dense, row-major matrix of double-precision values.

    The shape is fixed at construction. Every arithmetic operation is
    available in an allocating form and in a form that writes into a
    caller-supplied destination `out` of the right shape.

    Attributes:
        rows: int
            Number of rows.
        cols: int
            Number of columns.
        values: numpy.ndarray
            Flat `float64` buffer of length `rows * cols` in row-major
            order. Row and column vectors returned by `transpose` share
            this buffer with the original.

    Methods:
        get, set, clear, fill, transpose, add, subtract, scale,
        hadamard_product, hadamard_division, dot, multiply_transpose_a,
        multiply_transpose_b, apply, apply_activation, apply_derivative,
        argmax, to_array
    """

    def __init__(self, rows, cols, values=None):
        """
        Matrix initializer. Zero-filled unless `values` is given, in which
        case they are copied.
        """
        self.rows = _dimension(rows)
        self.cols = _dimension(cols)
        if self.rows < 0 or self.cols < 0:
            raise ShapeError('Matrix.__init__: negative shape ({}, {})'.\
                format(rows, cols))

        if values is None:
            self.values = np.zeros(self.rows * self.cols)
        else:
            self.values = np.array(values, dtype=np.float64).ravel()
            if self.values.size != self.rows * self.cols:
                raise ShapeError('Matrix.__init__: expected {} values, got {}'.\
                    format(self.rows * self.cols, self.values.size))

    @classmethod
    def _wrap(cls, rows, cols, buffer):
        """Builds a matrix around `buffer` without copying it."""
        m = cls.__new__(cls)
        m.rows, m.cols, m.values = rows, cols, buffer
        return m

    # Constructors

    @classmethod
    def zeros(cls, rows, cols):
        return cls(rows, cols)

    @classmethod
    def full(cls, rows, cols, value):
        m = cls(rows, cols)
        m.fill(value)
        return m

    @classmethod
    def identity(cls, size):
        return cls(size, size, np.eye(size))

    @classmethod
    def from_array(cls, a):
        """Copies a 2D array (or nested list) into a new matrix."""
        a = np.asarray(a, dtype=np.float64)
        if a.ndim != 2:
            raise ShapeError('Matrix.from_array: expected a 2D array, ' +
                             'got {} dimension(s)'.format(a.ndim))
        return cls(a.shape[0], a.shape[1], a)

    @classmethod
    def column(cls, values):
        """Copies a flat sequence into a new column vector."""
        values = np.asarray(values, dtype=np.float64).ravel()
        return cls(values.size, 1, values)

    # Attributes

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def size(self):
        return self.rows * self.cols

    @property
    def grid(self):
        """A `(rows, cols)` view of `values` (no copy)."""
        return self.values.reshape(self.rows, self.cols)

    def to_array(self):
        return self.grid.copy()

    # Element access

    def within_range(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row, col):
        if not self.within_range(row, col):
            raise IndexError('Matrix.get: ({}, {}) out of bounds for shape {}'.\
                format(row, col, self.shape))
        return float(self.values[row * self.cols + col])

    def set(self, row, col, value):
        if not self.within_range(row, col):
            raise IndexError('Matrix.set: ({}, {}) out of bounds for shape {}'.\
                format(row, col, self.shape))
        self.values[row * self.cols + col] = value

    def clear(self):
        self.values.fill(0.)

    def fill(self, value):
        self.values.fill(value)

    # Arithmetic (each delegates to the module-level function)

    def transpose(self, out=None):
        return transpose(self, out)

    def add(self, other, out=None):
        return add(self, other, out)

    def subtract(self, other, out=None):
        return subtract(self, other, out)

    def scale(self, scalar, out=None):
        return scale(self, scalar, out)

    def hadamard_product(self, other, out=None):
        return hadamard_product(self, other, out)

    def hadamard_division(self, other, out=None):
        return hadamard_division(self, other, out)

    def dot(self, other, out=None):
        return dot(self, other, out)

    def multiply_transpose_a(self, other, out=None):
        return multiply_transpose_a(self, other, out)

    def multiply_transpose_b(self, other, out=None):
        return multiply_transpose_b(self, other, out)

    def apply(self, f, out=None):
        return apply(self, f, out)

    def apply_activation(self, activation, out=None):
        return apply_activation(self, activation, out)

    def apply_derivative(self, derivative, out=None):
        return apply_derivative(self, derivative, out)

    def argmax(self):
        return argmax(self)

    # Operators

    def __add__(self, other):
        return add(self, other)

    def __iadd__(self, other):
        return add(self, other, self)

    def __sub__(self, other):
        return subtract(self, other)

    def __isub__(self, other):
        return subtract(self, other, self)

    def __mul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return scale(self, scalar)

    __rmul__ = __mul__

    def __imul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return scale(self, scalar, self)

    def __matmul__(self, other):
        return dot(self, other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                bool(np.all(self.values == other.values)))

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __repr__(self):
        return 'Matrix({}, {}, {})'.format(self.rows, self.cols,
                                           self.values.tolist())

    def __str__(self):
        return ',\n'.join('{' + ', '.join(repr(float(v)) for v in row) + '}'
                          for row in self.grid)


def _check_shape(op, shape, m):
    if m.shape != shape:
        raise ShapeError('Matrix.{}: expected {}, got {}'.format(op, shape, m.shape))


def _destination(op, shape, out):
    """Returns `out` after checking its shape, or a new zero matrix."""
    if out is None:
        return Matrix(shape[0], shape[1])
    _check_shape(op, shape, out)
    return out


def transpose(m, out=None):
    """Transposes `m`.

    Without `out`, row and column vectors are transposed by reinterpreting
    the shared buffer; general matrices are copied. With `out`, the
    transposed values are always written into `out`.
    """
    if out is None and (m.rows == 1 or m.cols == 1):
        return Matrix._wrap(m.cols, m.rows, m.values)
    out = _destination('transpose', (m.cols, m.rows), out)
    out.grid[...] = m.grid.T.copy()
    return out


def add(a, b, out=None):
    _check_shape('add', a.shape, b)
    out = _destination('add', a.shape, out)
    np.add(a.values, b.values, out=out.values)
    return out


def subtract(a, b, out=None):
    _check_shape('subtract', a.shape, b)
    out = _destination('subtract', a.shape, out)
    np.subtract(a.values, b.values, out=out.values)
    return out


def scale(m, scalar, out=None):
    out = _destination('scale', m.shape, out)
    np.multiply(m.values, scalar, out=out.values)
    return out


def hadamard_product(a, b, out=None):
    _check_shape('hadamard_product', a.shape, b)
    out = _destination('hadamard_product', a.shape, out)
    np.multiply(a.values, b.values, out=out.values)
    return out


def hadamard_division(a, b, out=None):
    """Elementwise `a / b`. Zero divisors give inf or nan, as in IEEE-754."""
    _check_shape('hadamard_division', a.shape, b)
    out = _destination('hadamard_division', a.shape, out)
    with np.errstate(divide='ignore', invalid='ignore'):
        np.divide(a.values, b.values, out=out.values)
    return out


def _accumulate(op, shape, lhs_columns, rhs_rows, out):
    """Sums the outer products `lhs_columns[k] x rhs_rows[k]` for k = 0, 1, ...

    Every entry starts at 0.0 and receives its products in increasing `k`,
    which is the order of the textbook triple loop.
    """
    total = np.zeros(shape)
    for lhs, rhs in zip(lhs_columns, rhs_rows):
        total += lhs[:, None] * rhs[None, :]
    out = _destination(op, shape, out)
    out.grid[...] = total
    return out


def dot(a, b, out=None):
    """Matrix product `a . b`; requires `a.cols == b.rows`."""
    if a.cols != b.rows:
        raise ShapeError('Matrix.dot: expected ({}, *) right operand, got {}'.\
            format(a.cols, b.shape))
    return _accumulate('dot', (a.rows, b.cols), a.grid.T, b.grid, out)


def multiply_transpose_a(a, b, out=None):
    """`a^T . b` without forming `a^T`; requires `a.rows == b.rows`."""
    if a.rows != b.rows:
        raise ShapeError('Matrix.multiply_transpose_a: ' +
                         'expected ({}, *) right operand, got {}'.\
                         format(a.rows, b.shape))
    return _accumulate('multiply_transpose_a', (a.cols, b.cols),
                       a.grid, b.grid, out)


def multiply_transpose_b(a, b, out=None):
    """`a . b^T` without forming `b^T`; requires `a.cols == b.cols`."""
    if a.cols != b.cols:
        raise ShapeError('Matrix.multiply_transpose_b: ' +
                         'expected (*, {}) right operand, got {}'.\
                         format(a.cols, b.shape))
    return _accumulate('multiply_transpose_b', (a.rows, b.rows),
                       a.grid.T, b.grid.T, out)


def apply(m, f, out=None):
    """Maps a scalar function `f` over every entry of `m`."""
    out = _destination('apply', m.shape, out)
    out.values[:] = np.fromiter((f(v) for v in m.values.tolist()),
                                dtype=np.float64, count=m.size)
    return out


def apply_activation(m, activation, out=None):
    """Applies `activation.eval` elementwise (vectorized)."""
    out = _destination('apply_activation', m.shape, out)
    out.values[:] = activation.eval(m.values)
    return out


def apply_derivative(m, derivative, out=None):
    """Applies `derivative.grad` elementwise (vectorized)."""
    out = _destination('apply_derivative', m.shape, out)
    out.values[:] = derivative.grad(m.values)
    return out


def argmax(m):
    """(row, col) of the largest entry; the first one in row-major order wins."""
    if m.size == 0:
        raise ShapeError('Matrix.argmax: empty {}x{} matrix'.format(m.rows, m.cols))
    best, index = -np.inf, (0, 0)
    for k, v in enumerate(m.values.tolist()):
        if v > best:
            best, index = v, divmod(k, m.cols)
    return index
