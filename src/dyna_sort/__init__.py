"""
dyna_sort - Composable, immutable comparators.

Wrap a two-argument comparator into a chainable Sorter that can flip
direction and place None values first or last, then combine sorters
into multi-key orderings.
"""

from dyna_sort.comparators import Comparator, compare_by, compare_values
from dyna_sort.date_sorter import DateSorter, create_date_sorter, date_sorter
from dyna_sort.errors import ComparatorError, SortError, ValidationError
from dyna_sort.functions import is_sorter, sort_array, sort_by, sort_in_place
from dyna_sort.logs import JSONFormatter, configure_logging
from dyna_sort.options import SorterOptions
from dyna_sort.sorter import Sorter, create_sorter

__version__ = "0.1.0"
__all__ = [
    # Core
    "Comparator",
    "Sorter",
    "SorterOptions",
    "create_sorter",
    # Dates
    "DateSorter",
    "create_date_sorter",
    "date_sorter",
    # Composition
    "sort_by",
    "sort_array",
    "sort_in_place",
    "is_sorter",
    "compare_values",
    "compare_by",
    # Errors
    "SortError",
    "ValidationError",
    "ComparatorError",
    # Logging
    "JSONFormatter",
    "configure_logging",
]

# Library logging stays silent unless the application configures it
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
