import numpy as np
import pytest

from backprop.matrix import Matrix
from backprop.utils import (load_digits, split_data, images_to_inputs,
                            one_hot, labels_to_targets, shuffle,
                            generate_batches)


def test_one_hot():
    y = one_hot(2, 4)
    assert y == Matrix.column([0., 0., 1., 0.])
    with pytest.raises(ValueError):
        one_hot(4, 4)
    with pytest.raises(ValueError):
        one_hot(-1, 4)


def test_labels_to_targets():
    targets = labels_to_targets(np.array([0, 2, 1]))
    assert [t.shape for t in targets] == [(3, 1)] * 3
    assert [t.argmax()[0] for t in targets] == [0, 2, 1]
    assert all(sum(t.values) == 1. for t in targets)
    assert labels_to_targets([1], 10)[0].rows == 10


def test_images_to_inputs():
    images = np.arange(2 * 2 * 3).reshape(2, 2, 3)
    inputs = images_to_inputs(images, scale=10.)
    assert len(inputs) == 2
    assert inputs[0].shape == (6, 1)
    np.testing.assert_allclose(inputs[1].values, np.arange(6, 12) / 10.)

    flat = images_to_inputs(np.ones((3, 4)))
    assert [x.shape for x in flat] == [(4, 1)] * 3
    assert flat[0].values[0] == 1. / 255.


def test_shuffle_keeps_pairs():
    rng = np.random.RandomState(0)
    a = list(range(20))
    b = [10 * i for i in a]
    shuffle(a, b, rng)
    assert sorted(a) == list(range(20))
    assert a != list(range(20))
    assert all(y == 10 * x for x, y in zip(a, b))


def test_shuffle_is_uniform_over_small_permutations():
    rng = np.random.RandomState(1)
    counts = {}
    for _ in range(6000):
        a, b = [0, 1, 2], ['a', 'b', 'c']
        shuffle(a, b, rng)
        counts[tuple(a)] = counts.get(tuple(a), 0) + 1
    assert len(counts) == 6
    assert all(800 < c < 1200 for c in counts.values())


def test_shuffle_length_mismatch():
    with pytest.raises(ValueError):
        shuffle([1, 2], [1], np.random.RandomState(0))


def test_generate_batches():
    assert [list(b) for b in generate_batches(7, 3)] == [[0, 1, 2], [3, 4, 5], [6]]
    assert [list(b) for b in generate_batches(4, 10)] == [[0, 1, 2, 3]]
    assert list(generate_batches(0, 3)) == []
    with pytest.raises(ValueError):
        list(generate_batches(5, 0))


def test_load_and_split_digits():
    images, labels = load_digits()
    assert images.shape[1:] == (8, 8)
    assert images.shape[0] == labels.shape[0]
    assert set(labels) == set(range(10))

    train_images, test_images, train_labels, test_labels = \
        split_data(images, labels, test_size=0.25, seed=0)
    assert len(train_images) + len(test_images) == len(images)
    assert len(train_labels) == len(train_images)
    assert abs(len(test_images) - 0.25 * len(images)) <= 1
