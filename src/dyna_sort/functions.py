"""
functions.py - Comparator composition and sorting helpers.

Sorting delegates to Python's built-in Timsort, which is stable.
sort_by() relies on that: items that compare equal keep their input
order.
"""

import logging
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any, TypeVar

from dyna_sort.comparators import Comparator
from dyna_sort.errors import ComparatorError
from dyna_sort.sorter import Sorter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sort_by(*comparators: Comparator[T]) -> Comparator[T]:
    """
    Combine comparators into one, in priority order.

    Each comparator is consulted in turn and the first non-zero
    result wins. With no comparators, or when all return zero,
    the combined comparator returns 0.

    Args:
        *comparators: Plain comparators or Sorters

    Returns:
        Combined comparator
    """
    for comparator in comparators:
        if not callable(comparator):
            raise ComparatorError("sort_by() arguments must be callable", value=comparator)

    def compare(a: T, b: T) -> int:
        for comparator in comparators:
            result = comparator(a, b)
            if result != 0:
                return result
        return 0

    return compare


def sort_array(sequence: Iterable[T], comparator: Comparator[T]) -> list[T]:
    """
    Return a new sorted list; the input is left untouched.

    Args:
        sequence: Items to sort
        comparator: Comparator or Sorter

    Returns:
        New list with the same items in stable sorted order
    """
    result = sorted(sequence, key=cmp_to_key(comparator))
    _log_sort("sort_array", len(result), comparator)
    return result


def sort_in_place(items: list[T], comparator: Comparator[T]) -> None:
    """Stable in-place sort of a list using a comparator or Sorter."""
    items.sort(key=cmp_to_key(comparator))
    _log_sort("sort_in_place", len(items), comparator)


def is_sorter(value: Any) -> bool:
    """True if value is a Sorter (including DateSorters and derivations)."""
    return isinstance(value, Sorter)


def _log_sort(event: str, item_count: int, comparator: Comparator[Any]) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Sorted {item_count} items",
            extra={
                "event": event,
                "item_count": item_count,
                "comparator": repr(comparator),
            },
        )
