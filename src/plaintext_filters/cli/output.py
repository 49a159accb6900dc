"""CLI output formatting utilities."""

from __future__ import annotations

import json
import shutil
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Literal

from plaintext_filters.lib.formatting import FormatContext, TextFormattable

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def _to_json(value: Any, *, indent: int | None = None) -> str:
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    return json.dumps(value, sort_keys=True, indent=indent, default=str)


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(_to_json(value))
        return
    if isinstance(value, TextFormattable):
        ctx = FormatContext(width=shutil.get_terminal_size().columns)
        print(value.format_text(ctx))
    else:
        print(_to_json(value, indent=2))
