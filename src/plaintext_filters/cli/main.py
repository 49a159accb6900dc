"""Cyclopts CLI entry point for plaintext-filters."""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from plaintext_filters import __version__
from plaintext_filters.cli.output import OutputConfig
from plaintext_filters.cli.output import emit as emit_output
from plaintext_filters.lib.errors import FilterError
from plaintext_filters.lib.filters.ops import (
    FilterApplyInput,
    filter_apply_sync,
    filters_list_sync,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    verbosity = 0
    cleaned: list[str] = []

    # Global flags precede the command; later tokens belong to it (e.g. a VALUE of "-v").
    for index, arg in enumerate(argv):
        if arg == "--" or not arg.startswith("-"):
            cleaned.extend(argv[index:])
            break
        if arg == "--json":
            json_mode = True
            continue
        if arg == "--no-json":
            json_mode = False
            continue
        if arg in {"-v", "--verbose"}:
            verbosity += 1
            continue
        if arg == "-vv":
            verbosity += 2
            continue
        cleaned.append(arg)

    return cleaned, GlobalOptions(
        output=OutputConfig(format="json" if json_mode else "text"),
        verbosity=verbosity,
    )


def _parse_literal(raw: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_assignments(assignments: Sequence[str]) -> dict[str, object]:
    """Parse ``NAME=VALUE`` tokens; values are JSON literals or plain strings.

    >>> parse_assignments(["length=20", "label=total"])
    {'length': 20, 'label': 'total'}
    """

    parsed: dict[str, object] = {}
    for assignment in assignments:
        name, sep, raw_value = assignment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE argument, got {assignment!r}")
        if name in parsed:
            raise ValueError(f"Argument '{name}' given more than once")
        parsed[name] = _parse_literal(raw_value)
    return parsed


app = App(
    name="plaintext-filters",
    help="Fixed-width alignment filters for plaintext and Markdown templates.",
    version=__version__,
    help_formatter="plain",
)


@app.command(name="list")
def list_filters() -> None:
    """List registered template filters and their arguments."""

    emit(filters_list_sync())


@app.command(name="apply")
def apply_filter(
    filter_name: str,
    value: str,
    /,
    *arguments: str,
    json_value: Annotated[
        bool,
        Parameter(name="--json-value", help="Parse VALUE as JSON (e.g. a list for `slice`)."),
    ] = False,
) -> None:
    """Apply one filter to VALUE with NAME=VALUE arguments, e.g. `center Charly length=20`."""

    payload = FilterApplyInput(
        filter_name=filter_name,
        value=json.loads(value) if json_value else value,
        arguments=parse_assignments(arguments),
    )
    emit(filter_apply_sync(payload))


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `plaintext-filters` and `python -m plaintext_filters`."""

    from plaintext_filters.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so structlog output goes to stderr, not stdout.
    configure_logging(json_mode=options.output.format == "json", verbosity=options.verbosity)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (FilterError, KeyError, ValueError) as exc:
            logger.debug("command failed", exc_info=True)
            print(f"error: {_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
