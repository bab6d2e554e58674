from lambdasheet.pipeline import Sequence
from lambdasheet.util import is_iterable


def seq(*args):
    """
    Primary entrypoint for the lambdasheet package. Wraps its arguments in a lazy Sequence.

    >>> seq([1, 2, 3])
    [1, 2, 3]

    >>> seq(1, 2, 3)
    [1, 2, 3]

    >>> seq(iter([1, 2, 3])).map(lambda x: x * 2)
    [2, 4, 6]

    :param args: a single list or iterable, or several values
    :return: Sequence wrapping the arguments
    """
    if len(args) == 0:
        raise TypeError("seq() takes at least 1 argument ({0} given)".format(len(args)))
    if len(args) > 1:
        return Sequence(list(args))
    if isinstance(args[0], list) or is_iterable(args[0]):
        return Sequence(args[0])
    return Sequence([args[0]])
