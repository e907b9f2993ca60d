"""
errors.py - Domain-specific exceptions for dyna_sort.

All exceptions inherit from SortError for unified handling.
Each one also inherits the builtin that matches its failure mode,
so callers catching TypeError/ValueError keep working.
"""

from typing import Any


class SortError(Exception):
    """Base exception for all dyna_sort errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class ValidationError(SortError, ValueError):
    """
    Raised when sorter options fail validation.

    This includes unknown option names and values outside
    the allowed set (e.g. nulls="middle").
    """

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = repr(value)[:100]
        super().__init__(message, context=context)
        self.field = field
        self.value = value


class ComparatorError(SortError, TypeError):
    """
    Raised when something that must be callable is not,
    or when a value cannot be ordered by the sorter using it.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        context = {}
        if value is not None:
            context["value_type"] = type(value).__name__
        super().__init__(message, context=context)
        self.value = value
