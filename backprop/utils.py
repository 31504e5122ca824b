"""
Utility functions
"""

import numpy as np
from sklearn.datasets import load_digits as _sklearn_digits
from sklearn.model_selection import train_test_split

from .matrix import Matrix


def load_digits():
    """Loads the handwritten digits bundled with scikit-learn.

    Returns:
        images, labels: numpy.ndarray
            `images` is an `n` by 8 by 8 array of grayscale values in
            `0, ..., 16`; `labels` is an `n`-vector of digits `0, ..., 9`.
    """
    digits = _sklearn_digits()
    return digits.images, digits.target.astype(int)


def split_data(images, labels, test_size=0.2, seed=None):
    """A stratified wrapper around `sklearn.model_selection.train_test_split`.

    Returns:
        images_train, images_test, labels_train, labels_test: numpy.ndarray
    """
    return train_test_split(images, labels, test_size=test_size,
                            random_state=seed, stratify=labels)


def images_to_inputs(images, scale=255.):
    """Flattens images into column-vector inputs.

    Args:
        images: numpy.ndarray
            Either an `n` by `d` array of flat images or an `n` by `h` by `w`
            array of 2D images (flattened in row-major order).
        scale: float
            Every value is divided by `scale` (255 for 8-bit pixels,
            16 for the scikit-learn digits).
    Returns:
        inputs: list of Matrix
            `n` column vectors of length `d` (or `h * w`).
    """
    images = np.asarray(images, dtype=np.float64)
    flat = images.reshape(images.shape[0], -1) / scale
    return [Matrix.column(row) for row in flat]


def one_hot(label, n_classes):
    """A column vector with 1.0 at row `label` and 0.0 elsewhere."""
    if not 0 <= label < n_classes:
        raise ValueError('utils.one_hot: label {} out of range for {} classes'.\
            format(label, n_classes))
    y = Matrix(n_classes, 1)
    y.set(int(label), 0, 1.)
    return y


def labels_to_targets(labels, n_classes=None):
    """Transforms a categorical outcome vector to one-hot targets.

    Args:
        labels: sequence of ints
            Entries are one of `0`, `1`, ..., `c-1`.
        n_classes: int
            Number of categorical outcomes. Defaults to `max(labels)+1`.
    Returns:
        targets: list of Matrix
            One-hot column vectors of length `n_classes`.
    """
    labels = [int(l) for l in labels]
    if n_classes is None:
        n_classes = max(labels) + 1
    return [one_hot(l, n_classes) for l in labels]


def shuffle(a, b, rng):
    """Jointly shuffles two lists in place (Fisher-Yates).

    The same permutation is applied to both lists, so `a[i]` and `b[i]`
    stay paired.

    Args:
        a, b: list
            Lists of equal length.
        rng: numpy.random.RandomState
            Source of the permutation.
    """
    if len(a) != len(b):
        raise ValueError('utils.shuffle: lengths differ ({} vs {})'.\
            format(len(a), len(b)))
    for i in range(len(a) - 1, 0, -1):
        j = rng.randint(i + 1)
        a[i], a[j] = a[j], a[i]
        b[i], b[j] = b[j], b[i]


def generate_batches(n, batch_size):
    """A generator for batches of consecutive indices.

    Args:
        n: int
            Total number of data points.
        batch_size: int
            Number of data points per batch. The last batch holds the
            remainder.

    Returns:
        A generator that each time yields a `range` of indices for a batch.
    """
    if batch_size < 1:
        raise ValueError('utils.generate_batches: ' +
                         'batch size must be positive, got {}'.format(batch_size))
    for start in range(0, n, batch_size):
        yield range(start, min(start + batch_size, n))
