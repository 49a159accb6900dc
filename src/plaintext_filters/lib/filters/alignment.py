"""Fixed-width alignment filters: left_align, center, right_align."""

from __future__ import annotations

from dataclasses import dataclass

from plaintext_filters.lib.align import Alignment, align_text
from plaintext_filters.lib.filters.codec import coerce_text_value
from plaintext_filters.lib.filters.registry import FilterName, FilterSpec, register_filter


@dataclass(frozen=True, slots=True)
class AlignArgs:
    length: int


def left_align(value: object, args: AlignArgs) -> str:
    text = coerce_text_value(FilterName.LEFT_ALIGN, value)
    return align_text(text, args.length, Alignment.LEFT)


def center(value: object, args: AlignArgs) -> str:
    text = coerce_text_value(FilterName.CENTER, value)
    return align_text(text, args.length, Alignment.CENTER)


def right_align(value: object, args: AlignArgs) -> str:
    text = coerce_text_value(FilterName.RIGHT_ALIGN, value)
    return align_text(text, args.length, Alignment.RIGHT)


register_filter(
    FilterSpec(
        name=FilterName.LEFT_ALIGN,
        handler=left_align,
        args_type=AlignArgs,
        value_kind="text",
        description="Pad or truncate the value to `length` characters, left-aligned.",
    )
)

register_filter(
    FilterSpec(
        name=FilterName.CENTER,
        handler=center,
        args_type=AlignArgs,
        value_kind="text",
        description=(
            "Pad or truncate the value to `length` characters, centered "
            "(odd padding goes right)."
        ),
    )
)

register_filter(
    FilterSpec(
        name=FilterName.RIGHT_ALIGN,
        handler=right_align,
        args_type=AlignArgs,
        value_kind="text",
        description="Pad or truncate the value to `length` characters, right-aligned.",
    )
)
