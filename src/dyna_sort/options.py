"""
options.py - Immutable sorter options.

Every option change produces a new SorterOptions record.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from dyna_sort.config import DEFAULT_ASCENDING, NULLS_MODES, SORTER_OPTION_FIELDS
from dyna_sort.errors import ValidationError


@dataclass(frozen=True, slots=True)
class SorterOptions:
    """
    Options that control how a Sorter orders values.

    Fields:
    - ascending: keep the base comparator's order (True) or invert it
    - nulls: "first", "last", or None to leave None values to the
      base comparator
    """
    ascending: bool = DEFAULT_ASCENDING
    nulls: str | None = None

    def __post_init__(self) -> None:
        """Validate options after initialization."""
        if not isinstance(self.ascending, bool):
            raise ValidationError(
                f"ascending must be a bool, got {type(self.ascending).__name__}",
                field="ascending",
                value=self.ascending,
            )
        if self.nulls is False:
            object.__setattr__(self, "nulls", None)
        elif self.nulls is not None and (
            not isinstance(self.nulls, str) or self.nulls not in NULLS_MODES
        ):
            raise ValidationError(
                f"nulls must be one of {sorted(NULLS_MODES)} or None, got {self.nulls!r}",
                field="nulls",
                value=self.nulls,
            )

    @property
    def handles_nulls(self) -> bool:
        return self.nulls is not None

    def merge(self, patch: Mapping[str, Any] | None = None) -> "SorterOptions":
        """
        Return new options with the fields in patch overriding ours.

        Raises:
            ValidationError: If patch names an unknown option or holds
                an invalid value
        """
        if not patch:
            return self
        unknown = set(patch) - SORTER_OPTION_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown sorter option(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        return replace(self, **patch)

    def to_dict(self) -> dict[str, Any]:
        return {"ascending": self.ascending, "nulls": self.nulls}


DEFAULT_OPTIONS = SorterOptions()


def coerce_options(
    options: "SorterOptions | Mapping[str, Any] | None",
    changes: Mapping[str, Any] | None = None,
) -> SorterOptions:
    """Build SorterOptions from a record, a partial mapping, or nothing."""
    if isinstance(options, SorterOptions):
        base = options
    else:
        base = DEFAULT_OPTIONS.merge(options)
    return base.merge(changes)
