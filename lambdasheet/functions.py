"""
Single-method capability shapes. ActionListener and Comparator are abstract classes whose instances
are callable, so a subclass instance, a lambda, or a nested def can be used interchangeably
wherever one of them is expected.
"""
from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Callable, TypeVar

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")

Predicate = Callable[[T], bool]
Consumer = Callable[[T], None]
Function = Callable[[T], R]
Supplier = Callable[[], T]
BiFunction = Callable[[T, U], R]
UnaryOperator = Callable[[T], T]


class ActionListener(ABC):
    @abstractmethod
    def action_performed(self, event):
        pass

    def __call__(self, event):
        return self.action_performed(event)


class Comparator(ABC):
    @abstractmethod
    def compare(self, o1, o2) -> int:
        pass

    def __call__(self, o1, o2):
        return self.compare(o1, o2)

    def as_key(self):
        return as_key(self)


def as_key(comparator):
    """
    Turns any two-argument comparison callable into a key for sorted(), min() or max()
    :param comparator: callable returning a negative, zero or positive int
    :return: key function
    """
    return cmp_to_key(comparator)
