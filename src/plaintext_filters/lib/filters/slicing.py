"""Sequence slicing filter used to bound template loops."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from plaintext_filters.lib.align import slice_end
from plaintext_filters.lib.filters.codec import coerce_sequence_value
from plaintext_filters.lib.filters.registry import FilterName, FilterSpec, register_filter


@dataclass(frozen=True, slots=True)
class SliceArgs:
    end: int


def slice_filter(value: object, args: SliceArgs) -> Sequence[Any]:
    items = coerce_sequence_value(FilterName.SLICE, value, args.end)
    return slice_end(items, args.end)


register_filter(
    FilterSpec(
        name=FilterName.SLICE,
        handler=slice_filter,
        args_type=SliceArgs,
        value_kind="sequence",
        description="Keep the first `end` items of a sequence.",
    )
)
