"""
date_sorter.py - Sorter specialization for date-bearing items.

The base order is newest first, so newest_first() and oldest_first()
map onto ascending(True) and ascending(False).

None items count as the oldest possible time and are never passed to
the extractor. Each side is checked on its own, so comparisons are
symmetric.
"""

import calendar
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, TypeVar

from dyna_sort.errors import ComparatorError
from dyna_sort.options import SorterOptions, coerce_options
from dyna_sort.sorter import Sorter

T = TypeVar("T")

DateLike = datetime | date | int | float

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DateSorterT = TypeVar("DateSorterT", bound="DateSorter")


def to_timestamp(value: DateLike) -> float:
    """
    Convert a date-like value to epoch seconds.

    Naive datetimes and dates are read as UTC. Going through local
    time would overflow at datetime.min and datetime.max.

    Raises:
        ComparatorError: If value is not a datetime, date, or number
    """
    # datetime subclasses date, so check it first
    if isinstance(value, datetime):
        if value.utcoffset() is not None:
            return (value - _EPOCH).total_seconds()
        return calendar.timegm(value.timetuple()) + value.microsecond / 1e6
    if isinstance(value, date):
        return float(calendar.timegm(value.timetuple()))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ComparatorError(
        "date sorter needs a datetime, date, or epoch number", value=value
    )


class DateSorter(Sorter[T]):
    """Sorter over items from which a date can be extracted."""

    __slots__ = ("_extract_date",)

    def __init__(
        self, extract_date: Callable[[T], DateLike], options: SorterOptions
    ) -> None:
        if not callable(extract_date):
            raise ComparatorError("extract_date must be callable", value=extract_date)
        self._extract_date = extract_date
        super().__init__(self._compare_newest_first, options)

    def _time_of(self, item: T | None) -> float:
        if item is None:
            return -math.inf
        return to_timestamp(self._extract_date(item))

    def _compare_newest_first(self, a: T | None, b: T | None) -> int:
        a_time = self._time_of(a)
        b_time = self._time_of(b)
        # -inf == -inf, so two None items compare equal
        return (b_time > a_time) - (b_time < a_time)

    @property
    def extract_date(self) -> Callable[[T], DateLike]:
        return self._extract_date

    def _derive(self: DateSorterT, options: SorterOptions) -> DateSorterT:
        return type(self)(self._extract_date, options)

    def newest_first(self: DateSorterT, newest_first: bool = True) -> DateSorterT:
        return self.apply_options(ascending=bool(newest_first))

    def oldest_first(self: DateSorterT) -> DateSorterT:
        return self.newest_first(False)


def create_date_sorter(
    extract_date: Callable[[T], DateLike],
    options: SorterOptions | Mapping[str, Any] | None = None,
    **changes: Any,
) -> DateSorter[T]:
    """
    Build a DateSorter that orders items by extract_date(item).

    Args:
        extract_date: Returns a datetime, date, or epoch number for an item
        options: SorterOptions or a partial mapping of option fields
        **changes: Option fields as keywords

    Returns:
        New DateSorter, newest first unless ascending=False
    """
    return DateSorter(extract_date, coerce_options(options, changes))


def _identity(value: DateLike) -> DateLike:
    return value


# Ready-made sorter for lists of raw dates
date_sorter: DateSorter[DateLike] = create_date_sorter(_identity)
