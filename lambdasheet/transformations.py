"""
Named transformations applied lazily by a Lineage. Each *_t factory returns a Transformation whose
function takes an iterable and returns an iterable.
"""
from collections import namedtuple
from functools import partial
from itertools import islice

from lambdasheet.util import identity


Transformation = namedtuple("Transformation", ["name", "function"])


def name(function):
    """
    Retrieve a pretty name for the function
    :param function: function to get name from
    :return: pretty name
    """
    if hasattr(function, "__name__"):
        return function.__name__
    return str(function)


def map_t(func):
    return Transformation("map({0})".format(name(func)), partial(map, func))


def filter_t(func):
    return Transformation("filter({0})".format(name(func)), partial(filter, func))


def peek_t(func):
    def peek(sequence):
        for element in sequence:
            func(element)
            yield element

    return Transformation("peek({0})".format(name(func)), peek)


def take_t(n):
    return Transformation("take({0})".format(n), lambda sequence: islice(sequence, 0, n))


def drop_t(n):
    return Transformation("drop({0})".format(n), lambda sequence: islice(sequence, n, None))


def slice_t(start, until):
    return Transformation(
        "slice({0}, {1})".format(start, until),
        lambda sequence: islice(sequence, start, until),
    )


def sorted_t(key=None, reverse=False):
    # sorted() is stable, equal elements keep their relative order
    return Transformation(
        "sorted", lambda sequence: sorted(sequence, key=key, reverse=reverse)
    )


def distinct_by_t(func):
    """
    Keeps the first element seen for each value of func(element), in encounter order
    """

    def distinct_by(sequence):
        seen = set()
        for element in sequence:
            key = func(element)
            if key not in seen:
                seen.add(key)
                yield element

    return Transformation("distinct_by({0})".format(name(func)), distinct_by)


def distinct_t():
    transformation = distinct_by_t(identity)
    return transformation._replace(name="distinct")
