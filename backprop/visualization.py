"""
Visualization tools (handwritten digits)
"""

import numpy as np
import matplotlib.pyplot as plt

MAX_IMAGES = 400


def print_image(X, output_shape=None, title='', labels=None):
    """Draws a grid of square grayscale digit images.

    Args:
        X: list of Matrix or numpy.ndarray
            Either `n` column-vector inputs of length `d**2`, or an `n` by
            `d**2` array whose rows are `d` by `d` images flattened in
            row-major order.
        output_shape: tuple of ints (rows, cols)
            Grid layout with `rows * cols == n`. Defaults to a single row.
        title: string
            Figure title.
        labels: list
            Optional caption for each image, e.g. its predicted digit.
    Returns:
        fig: matplotlib.figure.Figure
    """
    if isinstance(X, list):
        X = np.array([x.values for x in X])
    n, pixels = X.shape
    if n > MAX_IMAGES:
        raise ValueError('print_image: at most {} images, got {}'.\
            format(MAX_IMAGES, n))
    d = int(np.round(np.sqrt(pixels)))
    if d * d != pixels:
        raise ValueError('print_image: {} pixels do not make a square image'.\
            format(pixels))
    rows, cols = (1, n) if output_shape is None else output_shape
    if rows * cols != n:
        raise ValueError('print_image: {} images do not fit shape {}'.\
            format(n, output_shape))
    if labels is not None and len(labels) != n:
        raise ValueError('print_image: {} images but {} labels'.\
            format(n, len(labels)))

    fig, axes = plt.subplots(rows, cols, figsize=(cols, rows), squeeze=False)
    for i, ax in enumerate(axes.ravel()):
        ax.matshow(X[i].reshape(d, d), cmap='gray_r')
        ax.axis('off')
        if labels is not None:
            ax.set_title(str(labels[i]), fontsize=8)
    fig.subplots_adjust(wspace=0.1, hspace=0.4 if labels is not None else 0.)
    fig.suptitle(title)
    return fig


def plot_learning_curve(history, title='Learning Curve', ylabel='Error'):
    """Plots per-epoch values such as training and test error.

    Args:
        history: dict of string -> list of (int, float)
            Each entry is a labelled series of `(epoch, value)` pairs.
    Returns:
        fig: matplotlib.figure.Figure
    """
    fig, ax = plt.subplots()
    for label, series in sorted(history.items()):
        if not series:
            continue
        epochs, values = zip(*series)
        ax.plot(epochs, values, marker='o', label=label)
    ax.set_title(title)
    ax.set_xlabel('Epochs')
    ax.set_ylabel(ylabel)
    ax.legend()
    return fig
