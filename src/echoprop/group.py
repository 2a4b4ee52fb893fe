"""Batch creation of echo properties from a name -> initial value mapping."""

from __future__ import annotations

import warnings
from typing import Any, Mapping

from echoprop.config import EchoConfig, resolve_config
from echoprop.prop import EchoProp, create_echo_prop


def create_echo_props(
    target: object,
    mapping: Mapping[str, Any],
    config: EchoConfig | None = None,
    **options: Any,
) -> list[EchoProp]:
    """Create one echo property per mapping entry, in mapping order.

    All properties share the same configuration but nothing else: each has
    its own value, history and subscribers.

    Usage:
        props = create_echo_props(player, {"score": 0, "health": 100})
        getattr(player, "health$").subscribe(print)
    """
    config = resolve_config(config, options)
    return [
        create_echo_prop(target, name, initial_value, config)
        for name, initial_value in mapping.items()
    ]


def create_reactive_properties(*args: Any, **kwargs: Any) -> list[EchoProp]:
    """Deprecated alias of create_echo_props."""
    warnings.warn(
        "create_reactive_properties is deprecated, use create_echo_props",
        DeprecationWarning,
        stacklevel=2,
    )
    return create_echo_props(*args, **kwargs)
