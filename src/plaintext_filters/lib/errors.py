"""Filter error taxonomy surfaced to the host template engine."""

from __future__ import annotations


class FilterError(Exception):
    """Base class for every failure raised while applying a filter."""

    def __init__(self, message: str, *, filter_name: str | None = None) -> None:
        super().__init__(message)
        self.filter_name = filter_name

    def __str__(self) -> str:
        message = super().__str__()
        if self.filter_name is None:
            return message
        return f"Filter `{self.filter_name}`: {message}"


class InvalidArgument(FilterError, ValueError):
    """A filter argument is missing, not an integer, negative, or unknown."""


class TypeMismatch(FilterError, TypeError):
    """The piped value does not have the shape the filter expects."""
