from lambdasheet.errors import NoSuchElementError
from lambdasheet.util import require_non_null


class Option(object):
    """
    Container which either holds exactly one non-None value or is empty. Used as the result of
    lookups such as Sequence.find_first so that "no match" is a value rather than None.

    >>> Option.of("a").get()
    'a'
    >>> Option.empty().or_else("b")
    'b'
    """

    __slots__ = ("_value",)
    _EMPTY = None

    def __init__(self, value=None):
        self._value = value

    @classmethod
    def of(cls, value):
        """
        Wraps value, raising NullArgumentError if it is None
        :param value: value to wrap
        :return: present Option
        """
        return cls(require_non_null(value, "Option.of() requires a value"))

    @classmethod
    def of_nullable(cls, value):
        if value is None:
            return cls.empty()
        return cls(value)

    @classmethod
    def empty(cls):
        if cls._EMPTY is None:
            cls._EMPTY = cls()
        return cls._EMPTY

    def is_present(self):
        return self._value is not None

    def is_empty(self):
        return self._value is None

    def get(self):
        """
        Unwraps the value, raising NoSuchElementError if the Option is empty
        """
        if self._value is None:
            raise NoSuchElementError("No value present")
        return self._value

    def or_else(self, other):
        return other if self._value is None else self._value

    def or_else_get(self, supplier):
        return supplier() if self._value is None else self._value

    def map(self, func):
        if self._value is None:
            return self
        return Option.of_nullable(func(self._value))

    def filter(self, predicate):
        if self._value is None or predicate(self._value):
            return self
        return Option.empty()

    def if_present(self, consumer):
        if self._value is not None:
            consumer(self._value)

    def __bool__(self):
        return self._value is not None

    def __eq__(self, other):
        if not isinstance(other, Option):
            return False
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        if self._value is None:
            return "Option.empty"
        return "Option[{0!r}]".format(self._value)
