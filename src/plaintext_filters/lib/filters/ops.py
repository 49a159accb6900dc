"""Describe and apply registered filters outside a template."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, get_type_hints

from plaintext_filters.lib.filters.registry import FilterSpec, get_all_filters, get_filter
from plaintext_filters.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class FilterInfo:
    name: str
    arguments: tuple[str, ...]
    value_kind: str
    description: str


@dataclass(frozen=True, slots=True)
class FilterListOutput:
    filters: tuple[FilterInfo, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        from plaintext_filters.cli.format_helpers import tabular

        rows = [["FILTER", "ARGUMENTS", "VALUE", "DESCRIPTION"]]
        rows.extend(
            [info.name, ", ".join(info.arguments), info.value_kind, info.description]
            for info in self.filters
        )
        return tabular(rows, width=(ctx or FormatContext()).width)


@dataclass(frozen=True, slots=True)
class FilterApplyInput:
    filter_name: str
    value: object
    arguments: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FilterApplyOutput:
    filter_name: str
    result: object

    def format_text(self, ctx: FormatContext | None = None) -> str:
        if isinstance(self.result, str):
            return self.result
        return json.dumps(self.result, default=str)


def _describe_arguments(spec: FilterSpec[Any]) -> tuple[str, ...]:
    hints = get_type_hints(spec.args_type)
    return tuple(
        f"{arg.name}: {getattr(hints.get(arg.name), '__name__', 'object')}"
        for arg in fields(spec.args_type)
    )


def filters_list_sync() -> FilterListOutput:
    return FilterListOutput(
        filters=tuple(
            FilterInfo(
                name=spec.name.value,
                arguments=_describe_arguments(spec),
                value_kind=spec.value_kind,
                description=spec.description,
            )
            for spec in get_all_filters()
        )
    )


def filter_apply_sync(payload: FilterApplyInput) -> FilterApplyOutput:
    spec = get_filter(payload.filter_name)
    result = spec.invoke(payload.value, **dict(payload.arguments))
    if isinstance(result, Sequence) and not isinstance(result, str):
        result = list(result)
    return FilterApplyOutput(filter_name=spec.name.value, result=result)
