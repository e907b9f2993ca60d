"""
test_date_sorter.py - Tests for DateSorter and the ready-made date_sorter.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

import pytest

from dyna_sort import (
    ComparatorError,
    DateSorter,
    create_date_sorter,
    date_sorter,
    sort_array,
)


@dataclass(frozen=True)
class Item:
    created_at: datetime


class TestCreateDateSorter:
    """Tests for date sorters over items with an extractor."""

    def test_sorts_items_newest_first(self, dates, shuffle):
        oldest, middle, newest = (Item(d) for d in dates)
        sorter = create_date_sorter(lambda item: item.created_at)

        result = sort_array(shuffle([newest, oldest, middle]), sorter.newest_first())

        assert result == [newest, middle, oldest]

    def test_extractor_not_called_for_none(self, dates):
        calls = []

        def extract(item):
            calls.append(item)
            return item.created_at

        sorter = create_date_sorter(extract).nulls_last()
        sort_array([None, Item(dates[0]), None], sorter)

        assert None not in calls

    def test_none_is_oldest_without_null_handling(self, dates):
        """None counts as the earliest time on either side."""
        sorter = create_date_sorter(lambda item: item.created_at)
        items = [None, Item(dates[1]), Item(dates[0])]

        assert sort_array(items, sorter) == [Item(dates[1]), Item(dates[0]), None]
        assert sort_array(items, sorter.oldest_first()) == [None, Item(dates[0]), Item(dates[1])]

    def test_none_comparison_is_symmetric(self, dates):
        assert date_sorter(None, dates[0]) == -date_sorter(dates[0], None)
        assert date_sorter(None, None) == 0

    def test_initial_options(self, dates, shuffle):
        sorter = create_date_sorter(lambda d: d, ascending=False)
        assert sort_array(shuffle(list(dates)), sorter) == list(dates)

    def test_non_callable_extractor(self):
        with pytest.raises(ComparatorError):
            create_date_sorter(None)

    def test_unsupported_date_value(self):
        sorter = create_date_sorter(lambda item: item)
        with pytest.raises(TypeError):
            sorter("2020-01-01", "2021-01-01")


class TestDateSorter:
    """Tests for the ready-made date_sorter."""

    @pytest.fixture
    def expected(self, dates):
        oldest, middle, newest = dates
        return {
            "newest": [newest, middle, oldest],
            "oldest": [oldest, middle, newest],
        }

    def test_newest_first_by_default(self, dates, shuffle, expected):
        assert sort_array(shuffle(list(dates)), date_sorter) == expected["newest"]

    def test_newest_first(self, dates, shuffle, expected):
        assert sort_array(shuffle(list(dates)), date_sorter.newest_first()) == expected["newest"]
        assert sort_array(shuffle(list(dates)), date_sorter.newest_first(True)) == expected["newest"]

    def test_newest_first_false_is_oldest_first(self, dates, shuffle, expected):
        assert sort_array(shuffle(list(dates)), date_sorter.newest_first(False)) == expected["oldest"]

    def test_oldest_first(self, dates, shuffle, expected):
        assert sort_array(shuffle(list(dates)), date_sorter.oldest_first()) == expected["oldest"]

    def test_direction_can_be_changed(self, dates, shuffle, expected):
        assert sort_array(shuffle(list(dates)), date_sorter.oldest_first().newest_first()) == expected["newest"]
        assert sort_array(shuffle(list(dates)), date_sorter.newest_first().oldest_first()) == expected["oldest"]

    @pytest.mark.parametrize(
        "derive, nulls_at_start, order",
        [
            (lambda s: s.newest_first().nulls_first(), True, "newest"),
            (lambda s: s.nulls_first().newest_first(), True, "newest"),
            (lambda s: s.newest_first().nulls_last(), False, "newest"),
            (lambda s: s.nulls_last().newest_first(), False, "newest"),
            (lambda s: s.oldest_first().nulls_first(), True, "oldest"),
            (lambda s: s.nulls_first().oldest_first(), True, "oldest"),
            (lambda s: s.oldest_first().nulls_last(), False, "oldest"),
            (lambda s: s.nulls_last().oldest_first(), False, "oldest"),
        ],
    )
    def test_direction_combines_with_null_placement(
        self, dates, shuffle, expected, derive, nulls_at_start, order
    ):
        with_nulls = [None, None, None, *dates]
        result = sort_array(shuffle(with_nulls), derive(date_sorter))

        nulls = [None, None, None]
        if nulls_at_start:
            assert result == nulls + expected[order]
        else:
            assert result == expected[order] + nulls

    def test_derivations_stay_date_sorters(self):
        derived = date_sorter.nulls_first().descending().apply_options(nulls="last")

        assert isinstance(derived, DateSorter)
        assert derived.extract_date is date_sorter.extract_date
        assert date_sorter.options.nulls is None

    def test_accepts_dates_and_epoch_numbers(self):
        assert sort_array([date(2020, 1, 1), date(2021, 6, 1)], date_sorter) == [
            date(2021, 6, 1),
            date(2020, 1, 1),
        ]
        assert sort_array([10, 30.5, 20], date_sorter) == [30.5, 20, 10]

    def test_handles_extremes_of_date_range(self, shuffle):
        """datetime.min/max and date.min sort without overflowing."""
        values = [datetime.max, datetime(2020, 1, 1), date.min, datetime.min]

        result = sort_array(shuffle(values), date_sorter.oldest_first())

        # date.min and datetime.min are the same instant, so they tie
        assert {type(v) for v in result[:2]} == {date, datetime}
        assert result[2:] == [datetime(2020, 1, 1), datetime.max]
        assert sort_array([datetime.min, datetime(2020, 1, 1)], date_sorter) == [
            datetime(2020, 1, 1),
            datetime.min,
        ]

    def test_aware_datetimes_compare_by_instant(self):
        utc_noon = datetime(2020, 1, 1, 12, tzinfo=timezone.utc)
        # 11:00 UTC, one hour earlier
        plus_two = datetime(2020, 1, 1, 13, tzinfo=timezone(timedelta(hours=2)))

        assert sort_array([plus_two, utc_noon], date_sorter) == [utc_noon, plus_two]
        utc_max = datetime.max.replace(tzinfo=timezone.utc)
        assert sort_array([utc_noon, utc_max], date_sorter) == [utc_max, utc_noon]


class TestDirectionFlags:
    """Direction flags accept any truthy or falsy value."""

    def test_newest_first_coerces_flag(self, dates):
        assert date_sorter.newest_first(0).options.ascending is False
        assert date_sorter.newest_first(1).options.ascending is True
        assert sort_array(list(dates), date_sorter.newest_first(0)) == list(dates)
