"""
comparators.py - Basic comparator building blocks.

A comparator takes two values and returns a negative, zero, or
positive int. Only the sign is meaningful.
"""

from typing import Any, Callable, TypeVar

from dyna_sort.errors import ComparatorError

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def compare_values(a: Any, b: Any) -> int:
    """
    Compare two mutually orderable values.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    if a < b:
        return -1
    elif a > b:
        return 1
    else:
        return 0


def compare_by(key: Callable[[T], Any]) -> Comparator[T]:
    """
    Build a comparator that orders items by key(item).

    Example:
        create_sorter(compare_by(lambda user: user.name))
    """
    if not callable(key):
        raise ComparatorError("key must be callable", value=key)

    def compare(a: T, b: T) -> int:
        return compare_values(key(a), key(b))

    return compare
