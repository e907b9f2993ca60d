"""
sorter.py - Immutable, chainable comparator wrapper.

A Sorter is itself a comparator: call it with two values and it
returns a signed int. Ordering is decided by two rules, first
non-zero result wins:

1. Null rule (only when options.nulls is "first" or "last")
2. Base rule (the wrapped comparator, negated when descending)

Every option change returns a new Sorter. Instances are never
mutated and can be shared freely.
"""

from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Generic, TypeVar

from dyna_sort.comparators import Comparator
from dyna_sort.config import NULLS_FIRST, NULLS_LAST
from dyna_sort.errors import ComparatorError
from dyna_sort.options import SorterOptions, coerce_options

T = TypeVar("T")

SorterT = TypeVar("SorterT", bound="Sorter")


class Sorter(Generic[T]):
    """
    Comparator plus options.

    Use create_sorter() rather than instantiating directly.
    """

    __slots__ = ("_comparator", "_options")

    def __init__(self, comparator: Comparator[T], options: SorterOptions) -> None:
        if not callable(comparator):
            raise ComparatorError("comparator must be callable", value=comparator)
        self._comparator = comparator
        self._options = options

    def __call__(self, a: T | None, b: T | None) -> int:
        nulls = self._options.nulls
        if nulls is not None and (a is None or b is None):
            if a is None and b is None:
                return 0
            # a is the null side when a is None
            first = -1 if a is None else 1
            return first if nulls == NULLS_FIRST else -first

        result = self._comparator(a, b)
        return result if self._options.ascending else -result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ascending={self._options.ascending}, "
            f"nulls={self._options.nulls!r})"
        )

    @property
    def options(self) -> SorterOptions:
        return self._options

    @property
    def comparator(self) -> Comparator[T]:
        """The base comparator, without direction or null handling."""
        return self._comparator

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key wrapper for sorted(..., key=sorter.key) and list.sort."""
        return cmp_to_key(self)

    def _derive(self: SorterT, options: SorterOptions) -> SorterT:
        """Create a sibling over the same base comparator. Subclasses override."""
        return type(self)(self._comparator, options)

    def apply_options(
        self: SorterT, patch: Mapping[str, Any] | None = None, **changes: Any
    ) -> SorterT:
        """
        Return a new sorter with options merged over ours.

        Args:
            patch: Partial options mapping, e.g. {"nulls": "last"}
            **changes: Same as patch, keyword style; wins over patch

        Raises:
            ValidationError: If an option name or value is invalid
        """
        merged = dict(patch or {})
        merged.update(changes)
        return self._derive(self._options.merge(merged))

    def ascending(self: SorterT, ascending: bool = True) -> SorterT:
        return self.apply_options(ascending=bool(ascending))

    def descending(self: SorterT) -> SorterT:
        return self.ascending(False)

    def nulls_first(self: SorterT, nulls_first: bool = True) -> SorterT:
        return self.apply_options(nulls=NULLS_FIRST if nulls_first else NULLS_LAST)

    def nulls_last(self: SorterT) -> SorterT:
        return self.nulls_first(False)


def create_sorter(
    comparator: Comparator[T],
    options: SorterOptions | Mapping[str, Any] | None = None,
    **changes: Any,
) -> Sorter[T]:
    """
    Wrap a comparator into a Sorter.

    The comparator must order non-null values ascending; direction is
    handled by the ascending option only.

    Args:
        comparator: Two-argument comparator
        options: SorterOptions or a partial mapping of option fields
        **changes: Option fields as keywords, e.g. nulls="last"

    Returns:
        New Sorter

    Raises:
        ComparatorError: If comparator is not callable
        ValidationError: If an option is invalid
    """
    return Sorter(comparator, coerce_options(options, changes))
