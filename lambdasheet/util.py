import collections.abc
import dateparser
from functools import reduce
from datetime import datetime, timezone

from lambdasheet.errors import NullArgumentError


def identity(arg):
    """
    Function which returns the argument. Used as a default lambda function.

    >>> obj = object()
    >>> obj is identity(obj)
    True

    :param arg: object to take identity of
    :return: return arg
    """
    return arg


def is_iterable(val):
    """
    Check if val is not a list, but is a collections.Iterable type. This is used to determine
    when list() should be called on val

    >>> l = [1, 2]
    >>> is_iterable(l)
    False
    >>> is_iterable(iter(l))
    True

    :param val: value to check
    :return: True if it is not a list, but is a collections.Iterable
    """
    if isinstance(val, list):
        return False
    return isinstance(val, collections.abc.Iterable)


def compose(*functions):
    """
    Compose all the function arguments together, applied right to left
    :param functions: Functions to compose
    :return: Single composed function
    """
    return reduce(lambda f, g: lambda x: f(g(x)), functions, identity)


def require_non_null(obj, message=None):
    """
    Returns obj unchanged, raising NullArgumentError if it is None

    >>> require_non_null("a")
    'a'

    :param obj: value to check
    :param message: optional error message
    :return: obj
    """
    if obj is None:
        raise NullArgumentError(message or "argument must not be None")
    return obj


class Time(object):
    @classmethod
    def now(cls):
        return datetime.now(timezone.utc)

    @classmethod
    def millis(cls, dt=None):
        dt = dt or Time.now()
        return int(dt.timestamp() * 1000)

    @classmethod
    def pdate(cls, dstring, from_past=True):
        _prefer = 'past' if from_past else 'future'
        dt = dateparser.parse(dstring, settings={'PREFER_DATES_FROM': _prefer, 'TIMEZONE': 'UTC', 'RETURN_AS_TIMEZONE_AWARE': True})
        if dt is None:
            raise ValueError("could not parse date: {0!r}".format(dstring))
        return dt

    @classmethod
    def pmillis(cls, dstring, from_past=True):
        return Time.millis(Time.pdate(dstring, from_past=from_past))


now = Time.now
now_millis = Time.millis
parse_date = Time.pdate
parse_millis = Time.pmillis
