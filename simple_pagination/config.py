"""
Configuration handling for the Paginator.

A Paginator can be built from a plain mapping. Entries are checked one by one
with Pydantic type adapters; anything unknown or of the wrong type is dropped
so that a partially valid mapping still produces a usable Paginator.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import StrictInt, ValidationError
from pydantic.type_adapter import TypeAdapter

from ._logging import logger

_CALLBACK_ADAPTER: TypeAdapter[Callable[..., Any]] = TypeAdapter(Callable[..., Any])
_INT_ADAPTER: TypeAdapter[int] = TypeAdapter(StrictInt)

# Recognized configuration keys and the adapter validating each value
CONFIG_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "item_total_callback": _CALLBACK_ADAPTER,
    "slice_callback": _CALLBACK_ADAPTER,
    "items_per_page": _INT_ADAPTER,
    "pages_in_range": _INT_ADAPTER,
}

CONFIG_KEYS: tuple[str, ...] = tuple(CONFIG_ADAPTERS)


def filter_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """
    Returns the accepted subset of a configuration mapping.

    Args:
        config: Mapping of configuration keys to values

    Returns:
        A new dict holding only recognized keys whose values passed validation
    """
    accepted: dict[str, Any] = {}

    for key, value in config.items():
        adapter = CONFIG_ADAPTERS.get(key)
        if adapter is None:
            logger.debug(
                "Ignoring unknown configuration key",
                extra={"operation": "configure", "config_key": key},
            )
            continue

        try:
            accepted[key] = adapter.validate_python(value, strict=True)
        except ValidationError as e:
            logger.debug(
                "Ignoring invalid configuration value",
                extra={
                    "operation": "configure",
                    "config_key": key,
                    "value_type": type(value).__name__,
                    "error_count": e.error_count(),
                },
            )

    return accepted
