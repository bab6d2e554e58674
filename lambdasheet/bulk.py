"""
Bulk operations applied in place over mutable collections.
"""


def for_each(iterable, action):
    """
    Applies action to every element in iteration order. An exception raised by action stops the
    loop and propagates to the caller.

    :param iterable: elements to act on
    :param action: single argument callable
    """
    for element in iterable:
        action(element)


def remove_if(items, predicate):
    """
    Removes every element of the list items for which predicate is True, in a single pass.
    Retained elements keep their relative order.

    >>> numbers = [1, 2, 3, 4]
    >>> remove_if(numbers, lambda n: n % 2 == 0)
    True
    >>> numbers
    [1, 3]

    :param items: list to mutate
    :param predicate: single argument callable
    :return: True if any element was removed
    """
    retained = [element for element in items if not predicate(element)]
    removed = len(retained) != len(items)
    items[:] = retained
    return removed
