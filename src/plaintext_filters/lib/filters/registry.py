"""Filter registry shared by the Jinja2 installer and the CLI surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from plaintext_filters.lib.filters.codec import coerce_filter_args

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT")

ValueKind = Literal["text", "sequence"]


class FilterName(StrEnum):
    LEFT_ALIGN = "left_align"
    CENTER = "center"
    RIGHT_ALIGN = "right_align"
    SLICE = "slice"


@dataclass(frozen=True, slots=True)
class FilterSpec(Generic[ArgsT]):
    """Single source of truth for one filter exposed to templates and the CLI."""

    name: FilterName
    handler: Callable[[object, ArgsT], object]
    args_type: type[ArgsT]
    value_kind: ValueKind
    description: str

    def invoke(self, value: object, *args: object, **kwargs: object) -> object:
        """Validate raw template arguments, then apply the filter to ``value``."""

        typed_args = coerce_filter_args(self.name, self.args_type, args, kwargs)
        return self.handler(value, typed_args)


_REGISTRY: dict[FilterName, FilterSpec[Any]] = {}
_bootstrapped = False


def register_filter(spec: FilterSpec[ArgsT]) -> FilterSpec[ArgsT]:
    """Register a filter and guard against duplicates."""

    if spec.name in _REGISTRY:
        raise ValueError(
            f"Duplicate filter name '{spec.name}': already registered by "
            f"{_REGISTRY[spec.name].handler}"
        )
    _REGISTRY[spec.name] = spec
    return spec


def get_all_filters() -> list[FilterSpec[Any]]:
    """Return all registered filters sorted by name."""

    _ensure_bootstrapped()
    return [_REGISTRY[name] for name in sorted(_REGISTRY)]


def get_filter(name: str) -> FilterSpec[Any]:
    """Fetch one filter spec by name; raises KeyError for unknown filters."""

    _ensure_bootstrapped()
    try:
        return _REGISTRY[FilterName(name)]
    except ValueError:
        raise KeyError(f"Unknown filter '{name}'") from None


def _bootstrap_filter_modules() -> None:
    # Imported lazily so filter modules can self-register via `register_filter(...)`.
    import plaintext_filters.lib.filters.alignment as alignment_filters
    import plaintext_filters.lib.filters.slicing as slicing_filters

    _ = (alignment_filters, slicing_filters)


def _ensure_bootstrapped() -> None:
    global _bootstrapped
    if _bootstrapped:
        return
    # Only mark bootstrapped after a successful import sequence so failures retry.
    _bootstrap_filter_modules()
    _bootstrapped = True
    logger.debug(
        "Filter registry bootstrapped: %s.",
        ", ".join(name.value for name in sorted(_REGISTRY)),
    )
