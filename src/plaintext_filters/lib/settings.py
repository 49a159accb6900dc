"""TOML-backed configuration for the Jinja2 environments we build."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import cast

from plaintext_filters.lib.filters.registry import FilterName

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnvironmentConfig:
    """Jinja2 environment switches applied by `create_environment`."""

    strict_undefined: bool = True
    keep_trailing_newline: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False


@dataclass(frozen=True, slots=True)
class FiltersConfig:
    """Resolved configuration for plaintext-filters."""

    environment: EnvironmentConfig = EnvironmentConfig()
    # None installs every registered filter.
    enabled: tuple[FilterName, ...] | None = None


_ENV_OVERRIDE_MAP: dict[str, str] = {
    "PLAINTEXT_FILTERS_STRICT_UNDEFINED": "strict_undefined",
    "PLAINTEXT_FILTERS_KEEP_TRAILING_NEWLINE": "keep_trailing_newline",
    "PLAINTEXT_FILTERS_TRIM_BLOCKS": "trim_blocks",
    "PLAINTEXT_FILTERS_LSTRIP_BLOCKS": "lstrip_blocks",
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})
_ENVIRONMENT_KEYS = frozenset(field.name for field in fields(EnvironmentConfig))
_FILTERS_KEYS = frozenset({"enabled"})


def _require_table(raw_value: object, source: str) -> dict[str, object]:
    if not isinstance(raw_value, dict):
        raise ValueError(f"Invalid value for '{source}': expected table.")
    return cast("dict[str, object]", raw_value)


def _coerce_environment_config(*, raw_value: object, source: str) -> EnvironmentConfig:
    table = _require_table(raw_value, source)
    values: dict[str, bool] = {}
    for key, value in table.items():
        if key not in _ENVIRONMENT_KEYS:
            logger.warning("Ignoring unknown plaintext-filters config key '%s.%s'.", source, key)
            continue
        if not isinstance(value, bool):
            raise ValueError(
                f"Invalid value for '{source}.{key}': expected bool, got "
                f"{type(value).__name__} ({value!r})."
            )
        values[key] = value
    return EnvironmentConfig(**values)


def _coerce_enabled(*, raw_value: object, source: str) -> tuple[FilterName, ...]:
    if not isinstance(raw_value, list):
        raise ValueError(
            f"Invalid value for '{source}': expected array[str], got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )

    parsed: list[FilterName] = []
    for item in cast("list[object]", raw_value):
        if not isinstance(item, str):
            raise ValueError(
                f"Invalid value for '{source}': expected array[str], got "
                f"{type(item).__name__} ({item!r})."
            )
        normalized = item.strip()
        try:
            name = FilterName(normalized)
        except ValueError:
            raise ValueError(
                f"Invalid value for '{source}': unknown filter {item!r}; expected one of "
                f"{sorted(member.value for member in FilterName)}."
            ) from None
        if name not in parsed:
            parsed.append(name)
    return tuple(parsed)


def _coerce_env_bool(*, raw_value: str, env_name: str) -> bool:
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    raise ValueError(
        f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
    )


def _apply_toml_payload(config: FiltersConfig, payload: dict[str, object]) -> FiltersConfig:
    for key, raw_value in payload.items():
        if key == "environment":
            config = replace(
                config,
                environment=_coerce_environment_config(raw_value=raw_value, source=key),
            )
            continue
        if key == "filters":
            table = _require_table(raw_value, key)
            for section_key, section_value in table.items():
                if section_key not in _FILTERS_KEYS:
                    logger.warning(
                        "Ignoring unknown plaintext-filters config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                config = replace(
                    config,
                    enabled=_coerce_enabled(
                        raw_value=section_value,
                        source=f"{key}.{section_key}",
                    ),
                )
            continue
        logger.warning("Ignoring unknown plaintext-filters config key '%s'.", key)
    return config


def _apply_env_overrides(config: FiltersConfig) -> FiltersConfig:
    overrides: dict[str, bool] = {}
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        overrides[field_name] = _coerce_env_bool(raw_value=raw_value, env_name=env_name)
    if not overrides:
        return config
    return replace(config, environment=replace(config.environment, **overrides))


def load_config(path: Path | None = None) -> FiltersConfig:
    """Load a plaintext-filters TOML file and apply environment overrides."""

    config = FiltersConfig()
    if path is not None and path.is_file():
        payload = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
        config = _apply_toml_payload(config, payload)

    return _apply_env_overrides(config)
