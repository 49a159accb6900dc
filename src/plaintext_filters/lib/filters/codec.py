"""Argument and value coercion shared by every filter surface."""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable, Mapping, Sequence
from dataclasses import MISSING, fields, is_dataclass
from itertools import islice
from typing import Any, TypeVar, cast, get_type_hints

from plaintext_filters.lib.errors import InvalidArgument, TypeMismatch

ArgsT = TypeVar("ArgsT")


def _coerce_count(*, filter_name: str, arg_name: str, value: object) -> int:
    # bool is an int subclass, but `length=true` is never a width.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"argument `{arg_name}` must be a non-negative integer, got "
            f"{type(value).__name__} ({value!r})",
            filter_name=filter_name,
        )
    if value < 0:
        raise InvalidArgument(
            f"argument `{arg_name}` must be non-negative, got {value}",
            filter_name=filter_name,
        )
    return value


def coerce_filter_args(
    filter_name: str,
    args_type: type[ArgsT],
    positional: Sequence[object] = (),
    named: Mapping[str, object] | None = None,
) -> ArgsT:
    """Validate raw filter arguments into the typed argument dataclass."""

    if not is_dataclass(args_type):
        raise TypeError(f"Filter arguments must be a dataclass, got {args_type!r}")
    if positional:
        raise InvalidArgument(
            "accepts named arguments only, got "
            f"{len(positional)} positional argument(s)",
            filter_name=filter_name,
        )

    data = dict(named or {})
    hints = get_type_hints(args_type)
    known = {field.name for field in fields(args_type)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgument(
            f"unexpected argument(s): {', '.join(unknown)}",
            filter_name=filter_name,
        )

    kwargs: dict[str, object] = {}
    for field in fields(args_type):
        if field.name not in data:
            if field.default is not MISSING:
                kwargs[field.name] = field.default
                continue
            raise InvalidArgument(
                f"expected an argument called `{field.name}`",
                filter_name=filter_name,
            )
        value = data[field.name]
        if hints.get(field.name) is int:
            value = _coerce_count(filter_name=filter_name, arg_name=field.name, value=value)
        kwargs[field.name] = value

    return cast("ArgsT", args_type(**kwargs))


def coerce_text_value(filter_name: str, value: object) -> str:
    """Render a scalar template value as text; containers are rejected."""

    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, Mapping | Iterable | AsyncIterable):
        raise TypeMismatch(
            f"was called on an incorrect value: got {type(value).__name__} "
            f"({value!r}) but expected a text or number",
            filter_name=filter_name,
        )
    return str(value)


def coerce_sequence_value(filter_name: str, value: object, end: int) -> Sequence[Any]:
    """Take at most ``end`` leading items from a sequence-like value."""

    if isinstance(value, str | bytes | bytearray | Mapping) or not isinstance(
        value, Iterable
    ):
        raise TypeMismatch(
            f"was called on an incorrect value: got {type(value).__name__} "
            f"({value!r}) but expected a sequence",
            filter_name=filter_name,
        )
    if isinstance(value, Sequence):
        return value
    # Generators from chained filters are consumed only as far as needed.
    return list(islice(cast("Iterable[Any]", value), end))
