"""
The pipeline module contains the transformations and actions API of lambdasheet
"""
import collections.abc
from functools import reduce

from lambdasheet import transformations
from lambdasheet.lineage import Lineage
from lambdasheet.logger import get_logger
from lambdasheet.option import Option
from lambdasheet.util import identity

logger = get_logger()


class Sequence(object):
    """
    Sequence is a wrapper around any iterable object. Transformations (map, filter, take, ...) are
    recorded in a Lineage and return a new Sequence; nothing runs until an action (to_list, count,
    find_first, ...) or iteration forces evaluation. The base sequence is never mutated, so the
    same Sequence can be evaluated any number of times.
    """

    def __init__(self, sequence, transform=None, lineage=None):
        """
        Takes a Sequence, list, tuple, or iterable collection and wraps it around a Sequence
        object. One-shot iterators are materialized into a list so that re-evaluation sees the
        same elements.

        :param sequence: list or iterable to wrap
        :param transform: transformation to add to the lineage
        :param lineage: lineage to start from
        :return: Sequence wrapping sequence
        """
        if isinstance(sequence, Sequence):
            self._base_sequence = sequence._base_sequence
            self._lineage = Lineage(prior_lineage=sequence._lineage)
        elif isinstance(sequence, collections.abc.Iterator):
            self._base_sequence = list(sequence)
            self._lineage = Lineage(prior_lineage=lineage)
        elif isinstance(sequence, collections.abc.Iterable):
            self._base_sequence = sequence
            self._lineage = Lineage(prior_lineage=lineage)
        else:
            raise TypeError("Given sequence must be an iterable value")
        if transform is not None:
            self._lineage.apply(transform)

    def __iter__(self):
        return self._evaluate()

    def __eq__(self, other):
        if isinstance(other, Sequence):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return repr(self.to_list())

    def __str__(self):
        return str(self.to_list())

    def _evaluate(self):
        logger.d("evaluating %s", self._lineage)
        return self._lineage.evaluate(self._base_sequence)

    def _transform(self, transform):
        return Sequence(self._base_sequence, transform=transform, lineage=self._lineage)

    @property
    def lineage(self):
        return self._lineage

    # Transformations

    def map(self, func):
        """
        Maps f onto the elements of the sequence.

        >>> Sequence(["a", "b"]).map(str.upper)
        ['A', 'B']

        :param func: function to map with
        :return: sequence with func mapped onto it
        """
        return self._transform(transformations.map_t(func))

    def filter(self, func):
        """
        Filters sequence to include only elements where func is True.

        >>> Sequence([-1, 1, -2, 2]).filter(lambda x: x > 0)
        [1, 2]

        :param func: function to filter on
        :return: filtered sequence
        """
        return self._transform(transformations.filter_t(func))

    def peek(self, func):
        """
        Calls func on each element as it flows through the pipeline, passing elements on unchanged
        """
        return self._transform(transformations.peek_t(func))

    def take(self, n):
        """
        Take the first n elements of the sequence.

        >>> Sequence([1, 2, 3, 4]).take(2)
        [1, 2]

        :param n: number of elements to take
        :return: first n elements of sequence
        """
        if n < 0:
            raise ValueError("take() requires n >= 0, got {0}".format(n))
        return self._transform(transformations.take_t(n))

    limit = take

    def drop(self, n):
        """
        Drop the first n elements of the sequence.

        >>> Sequence([1, 2, 3, 4, 5]).drop(2)
        [3, 4, 5]

        :param n: number of elements to drop
        :return: sequence without first n elements
        """
        if n < 0:
            raise ValueError("drop() requires n >= 0, got {0}".format(n))
        return self._transform(transformations.drop_t(n))

    def slice(self, start, until):
        """
        Takes a slice of the sequence starting at start and until but not including until.

        >>> Sequence([1, 2, 3, 4]).slice(1, 2)
        [2]

        :param start: starting index
        :param until: ending index
        :return: slice including start until but not including until
        """
        if start < 0 or until < start:
            raise ValueError(
                "slice() requires 0 <= start <= until, got ({0}, {1})".format(start, until)
            )
        return self._transform(transformations.slice_t(start, until))

    def sorted(self, key=None, reverse=False):
        """
        Uses python sort and its passed arguments to sort the input. Sorting is stable.

        >>> Sequence([2, 1, 4, 3]).sorted()
        [1, 2, 3, 4]

        :param key: sort using key function
        :param reverse: return list reversed or not
        :return: sorted sequence
        """
        return self._transform(transformations.sorted_t(key=key, reverse=reverse))

    def distinct(self):
        """
        Returns sequence of distinct elements in order of first occurrence. Elements must be
        hashable.

        >>> Sequence([1, 1, 2, 3, 3, 3, 4]).distinct()
        [1, 2, 3, 4]

        :return: sequence of distinct elements
        """
        return self._transform(transformations.distinct_t())

    def distinct_by(self, func):
        """
        Returns sequence of elements who are distinct by the passed function. The first element
        seen for each key is kept.

        >>> Sequence(["apple", "avocado", "banana"]).distinct_by(lambda s: s[0])
        ['apple', 'banana']

        :param func: function to use for determining distinctness
        :return: elements distinct by func
        """
        return self._transform(transformations.distinct_by_t(func))

    # Actions

    def for_each(self, func):
        """
        Executes func on each element of the sequence.

        :param func: function to execute
        """
        for element in self:
            func(element)

    def to_list(self):
        """
        Converts sequence to a newly built list.

        :return: list of elements in sequence
        """
        return list(self._evaluate())

    def to_tuple(self):
        """
        Converts sequence to a tuple, sized exactly to the number of elements.

        :return: tuple of elements in sequence
        """
        return tuple(self._evaluate())

    def count(self, func=None):
        """
        Counts the number of elements in the sequence, or those which satisfy the predicate func.

        >>> Sequence([-1, -2, 1, 2]).count(lambda x: x > 0)
        2

        :param func: optional predicate to count elements with
        :return: count of elements
        """
        if func is None:
            return sum(1 for _ in self)
        return sum(1 for element in self if func(element))

    def len(self):
        """
        Number of elements in the sequence. There is no __len__, so list(sequence) evaluates the
        pipeline once.

        >>> Sequence([1, 2, 3]).filter(lambda x: x > 1).len()
        2

        :return: number of elements
        """
        return self.count()

    size = len

    def exists(self, func):
        """
        Returns True if an element in the sequence makes func evaluate to True. Stops at the first
        match.

        >>> Sequence([1, 2, 3, 4]).exists(lambda x: x == 2)
        True

        :param func: existence check function
        :return: True if any element satisfies func
        """
        return any(func(element) for element in self)

    any_match = exists

    def for_all(self, func):
        """
        Returns True if all elements in sequence make func evaluate to True.

        :param func: function to check truth value of all elements with
        :return: True if all elements make func evaluate to True
        """
        return all(func(element) for element in self)

    def find_first(self):
        """
        Returns an Option holding the first element, or an empty Option if the sequence is empty.

        >>> Sequence(["a", "b"]).find_first().get()
        'a'

        :return: Option of the first element
        """
        for element in self:
            return Option.of(element)
        return Option.empty()

    def find(self, func):
        """
        Returns an Option holding the first element where func is True.

        :param func: function to find with
        :return: Option of first element matching func
        """
        return self.filter(func).find_first()

    def reduce(self, func, *initial):
        """
        Reduce sequence of elements using func. API mirrors functools.reduce

        >>> Sequence([1, 2, 3]).reduce(lambda x, y: x + y)
        6

        :param func: two parameter, associative reduce function
        :param initial: single optional argument acting as initial value
        :return: reduced value using func
        """
        if len(initial) > 1:
            raise ValueError("reduce takes exactly one optional parameter for initial value")
        if len(initial) == 0:
            return reduce(func, self)
        return reduce(func, self, initial[0])

    def sum(self, projection=None):
        """
        Takes sum of elements in sequence, 0 for an empty sequence.

        >>> Sequence([1, 2, 3, 4]).sum()
        10

        :param projection: function to project on the sequence before taking the sum
        :return: sum of elements in sequence
        """
        projection = projection or identity
        return sum(projection(element) for element in self)

    def average(self, projection=None):
        """
        Takes the average of elements in the sequence, as an Option which is empty when there are
        no elements.

        >>> Sequence([1, 2]).average().get()
        1.5

        :param projection: function to project on the sequence before taking the average
        :return: Option of the average of elements in the sequence
        """
        values = self.map(projection or identity).to_list()
        if not values:
            return Option.empty()
        return Option.of(sum(values) / len(values))
