"""Jinja2 integration: install registered filters into an environment."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, Undefined

from plaintext_filters.lib.filters.registry import FilterSpec, get_all_filters, get_filter
from plaintext_filters.lib.settings import FiltersConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


def _resolve_undefined(value: object) -> object:
    if isinstance(value, Undefined):
        # Lenient undefined renders as "", StrictUndefined raises here.
        return str(value)
    return value


def _collect_limit(spec: FilterSpec[Any], kwargs: dict[str, object]) -> int | None:
    end = kwargs.get("end")
    if spec.value_kind != "sequence" or isinstance(end, bool) or not isinstance(end, int):
        return None
    return max(end, 0)


async def _collect(items: AsyncIterable[object], limit: int | None) -> list[object]:
    collected: list[object] = []
    if limit == 0:
        return collected
    async for item in items:
        collected.append(item)
        if limit is not None and len(collected) >= limit:
            break
    return collected


def _template_filter(spec: FilterSpec[Any], *, is_async: bool) -> Callable[..., object]:
    def _apply(value: object, *args: object, **kwargs: object) -> object:
        return spec.invoke(_resolve_undefined(value), *args, **kwargs)

    async def _apply_async(value: object, *args: object, **kwargs: object) -> object:
        value = _resolve_undefined(value)
        # Async environments hand chained filter output over as async generators.
        if spec.value_kind == "sequence" and isinstance(value, AsyncIterable):
            value = await _collect(value, _collect_limit(spec, kwargs))
        return spec.invoke(value, *args, **kwargs)

    handler = _apply_async if is_async else _apply
    handler.__name__ = spec.name.value
    handler.__doc__ = spec.description
    return handler


def install_filters(env: Environment, names: Iterable[str] | None = None) -> Environment:
    """Register plaintext filters on ``env``, replacing same-named built-ins.

    ``center`` and ``slice`` shadow Jinja2's own filters of the same name in
    that environment. Environments created with ``enable_async=True`` get
    awaitable filters that accept async iterables for ``slice``.
    """

    specs = get_all_filters() if names is None else [get_filter(name) for name in names]
    for spec in specs:
        env.filters[spec.name.value] = _template_filter(spec, is_async=env.is_async)
    logger.debug(
        "Installed template filters: %s.",
        ", ".join(spec.name.value for spec in specs),
    )
    return env


def create_environment(config: FiltersConfig | None = None) -> Environment:
    """Build a plaintext-oriented Jinja2 environment with the filters installed."""

    resolved = config or FiltersConfig()
    options = resolved.environment
    env = Environment(
        autoescape=False,
        keep_trailing_newline=options.keep_trailing_newline,
        trim_blocks=options.trim_blocks,
        lstrip_blocks=options.lstrip_blocks,
        undefined=StrictUndefined if options.strict_undefined else Undefined,
    )
    return install_filters(env, resolved.enabled)
