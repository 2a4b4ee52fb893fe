"""Configuration for echo properties.

EchoConfig collects the per-property options in one defaulted, immutable
record. It is validated once at construction, so the property itself never
re-checks its options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Validator = Callable[[Any, Any], bool]


class ConfigurationError(ValueError):
    """Raised when options are invalid or a target cannot be instrumented."""


@dataclass(frozen=True)
class EchoConfig:
    """Options shared by create_echo_prop and create_echo_props.

    add_as_observable_to_target: also expose ``name + "$"`` on the target.
    replay_count: how many accepted values late subscribers receive.
    validate: ``(new_value, old_value) -> bool``; falsy rejects the write.
    log: warn through the ``echoprop.prop`` logger on rejected writes.
    use_existing_value_as_initial: adopt the target's own attribute when no
        initial value is given.
    """

    add_as_observable_to_target: bool = True
    replay_count: int = 1
    validate: Validator | None = None
    log: bool = False
    use_existing_value_as_initial: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.replay_count, bool) or not isinstance(self.replay_count, int):
            raise ConfigurationError(
                f"replay_count must be an int, got {type(self.replay_count).__name__}"
            )
        if self.replay_count < 0:
            raise ConfigurationError(f"replay_count must be >= 0, got {self.replay_count}")
        if self.validate is not None and not callable(self.validate):
            raise ConfigurationError("validate must be callable or None")


def resolve_config(config: EchoConfig | None, options: dict[str, Any]) -> EchoConfig:
    """Return config, or build one from keyword options. Not both."""
    if config is None:
        return EchoConfig(**options)
    if options:
        raise TypeError(
            f"pass either config or keyword options, not both (got {sorted(options)})"
        )
    return config
