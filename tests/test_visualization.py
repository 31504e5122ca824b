import numpy as np
import pytest

from backprop.matrix import Matrix
from backprop.visualization import print_image, plot_learning_curve


def test_print_image_from_inputs():
    X = [Matrix.column(np.linspace(0., 1., 16)) for _ in range(6)]
    fig = print_image(X, output_shape=(2, 3), title='digits')
    assert len(fig.axes) == 6


def test_print_image_from_array():
    fig = print_image(np.zeros((4, 64)))
    assert len(fig.axes) == 4


def test_print_image_errors():
    with pytest.raises(ValueError):
        print_image(np.zeros((2, 10)))
    with pytest.raises(ValueError):
        print_image(np.zeros((4, 16)), output_shape=(3, 2))
    with pytest.raises(ValueError):
        print_image(np.zeros((401, 4)))


def test_print_image_with_labels():
    X = [Matrix.column(np.linspace(0., 1., 64)) for _ in range(4)]
    fig = print_image(X, output_shape=(2, 2), labels=[3, 1, 4, 1])
    assert [ax.get_title() for ax in fig.axes] == ['3', '1', '4', '1']
    with pytest.raises(ValueError):
        print_image(X, labels=[3, 1])


def test_plot_learning_curve():
    history = {'training': [(1, 0.5), (2, 0.3)], 'test': [(1, 0.6), (2, 0.4)]}
    fig = plot_learning_curve(history)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    assert ax.get_xlabel() == 'Epochs'
