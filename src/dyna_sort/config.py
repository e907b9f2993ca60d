"""
config.py - Configuration constants for dyna_sort.

All configuration is immutable and defined at module level.
No mutable global state is permitted.
"""

from typing import Final

# Sorters order ascending unless told otherwise
DEFAULT_ASCENDING: Final[bool] = True

# Null placement modes; None (or False) disables null handling
NULLS_FIRST: Final[str] = "first"
NULLS_LAST: Final[str] = "last"
NULLS_MODES: Final[frozenset[str]] = frozenset({NULLS_FIRST, NULLS_LAST})

# Option names accepted by Sorter.apply_options
SORTER_OPTION_FIELDS: Final[frozenset[str]] = frozenset({"ascending", "nulls"})
