"""
Handwritten digit recognition with a feedforward network
"""

import argparse
import logging

from .nn import Network
from .utils import load_digits, split_data, images_to_inputs, \
    labels_to_targets

N_CLASSES = 10
PIXEL_SCALE = 16.  # scikit-learn digits are in 0, ..., 16
N_SHOWN = 10


def get_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Train a feedforward network on handwritten digits')
    parser.add_argument('--hidden', type=int, nargs='*', default=[16, 16],
                        help='Sizes of the hidden layers')
    parser.add_argument('--activation', nargs='+', default=None,
                        help='One activation per layer, or one for all layers. ' +
                             'Defaults to tanh hidden layers and a sigmoid output')
    parser.add_argument('--cost', choices=['quadratic', 'cross_entropy'],
                        default='quadratic', help='Cost function')
    parser.add_argument('--epochs', '-e', type=int, default=5,
                        help='Number of training epochs')
    parser.add_argument('--batch-size', '-b', type=int, default=32,
                        help='Batch size')
    parser.add_argument('--learning-rate', '-lr', type=float, default=0.05,
                        help='Learning rate')
    parser.add_argument('--test-size', type=float, default=0.2,
                        help='Fraction of the data held out for testing')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the split, initialization and shuffling')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save the learning curve to this path')
    parser.add_argument('--show-digits', type=str, default=None,
                        help='Save the first test digits, captioned with their ' +
                             'predicted labels, to this path')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not report training updates to stdout')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log library messages at INFO level')
    return parser.parse_args(argv)


def run(args):
    """Trains and tests a network as configured by `args`.

    Returns:
        nn, history: Network, dict
            The trained network and the per-epoch training/test errors.
    """
    verbose = not args.quiet

    images, labels = load_digits()
    images_train, images_test, labels_train, labels_test = \
        split_data(images, labels, args.test_size, args.seed)

    X_train = images_to_inputs(images_train, PIXEL_SCALE)
    y_train = labels_to_targets(labels_train, N_CLASSES)
    X_test  = images_to_inputs(images_test, PIXEL_SCALE)

    sizes = [X_train[0].rows] + list(args.hidden) + [N_CLASSES]
    activation = args.activation
    if activation is None:
        activation = ['tanh'] * len(args.hidden) + ['sigmoid']
    elif len(activation) == 1:
        activation = activation[0]

    nn = Network(sizes, cost=args.cost, activation=activation, seed=args.seed)
    nn.initialize()

    # `train` shuffles in place; errors are measured on the shuffled pairs
    history = {'training': [], 'test': []}
    total = 0.

    if verbose:
        print('|-------|-----------|-------------|-------------|')
        print('| Epoch |   Time    |  Training   |    Test     |')
        print('|   #   |   (sec)   |    Error    |    Error    |')
        print('|-------|-----------|-------------|-------------|')

    for t in range(args.epochs):
        elapsed = nn.train(X_train, y_train, 1, args.batch_size,
                           args.learning_rate)
        total += elapsed
        train_labels = [y.argmax()[0] for y in y_train]
        training_error = nn.compute_error(X_train, train_labels)
        test_error     = nn.compute_error(X_test, labels_test)
        history['training'].append((nn.epoch, training_error))
        history['test'].append((nn.epoch, test_error))
        if verbose:
            print('|  {:3d}  | {:8.3f}  |   {:.5f}   |   {:.5f}   |'.\
                format(nn.epoch, elapsed, training_error, test_error))

    accuracy = 100. * (1. - nn.compute_error(X_test, labels_test))
    if verbose:
        print('|-------|-----------|-------------|-------------|')
        print('Accuracy: {:.2f}%'.format(accuracy))
        if total > 0:
            print('Efficiency: {:.2f}% per sec'.format(accuracy / total))

    if args.plot is not None:
        from .visualization import plot_learning_curve
        fig = plot_learning_curve(history)
        fig.savefig(args.plot)

    if args.show_digits is not None:
        from .visualization import print_image
        shown = X_test[:N_SHOWN]
        predicted = [nn.predict(x) for x in shown]
        shape = (2, N_SHOWN // 2) if len(shown) == N_SHOWN else None
        fig = print_image(shown, output_shape=shape,
                          title='Predicted labels', labels=predicted)
        fig.savefig(args.show_digits)

    return nn, history


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    run(args)
    return 0


if __name__ == '__main__':
    main()
