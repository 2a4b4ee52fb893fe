"""Echo properties — one observable attribute on a plain object.

create_echo_prop() takes over ``target.<name>``: reads return the last
accepted value, writes go through an optional validator and, when accepted,
are pushed to subscribers. A bounded history is replayed to late
subscribers. With add_as_observable_to_target, ``target.<name>$`` exposes a
read-only StreamView of the same values (read it with getattr, ``$`` is not
valid in a Python identifier).

Delivery is synchronous and not reentrancy-guarded: a subscriber that writes
the property from its callback runs that write to completion, notifying
everyone, before the outer write reaches the remaining subscribers. Those
later subscribers therefore see the inner value before the outer one.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Callable, Generic, TypeVar

from echoprop import _binding
from echoprop.config import ConfigurationError, EchoConfig, resolve_config
from echoprop.stream import Disposer, ReplayStream, StreamView

logger = logging.getLogger("echoprop.prop")

T = TypeVar("T")

OBSERVABLE_SUFFIX = "$"


class EchoProp(Generic[T]):
    """Handle for one echo property. Owns the value, history and subscribers."""

    __slots__ = ("_name", "_value", "_stream", "_validate", "_log")

    def __init__(self, name: str, initial_value: T | None, config: EchoConfig) -> None:
        self._name = name
        self._value = initial_value
        self._stream: ReplayStream[T] = ReplayStream(config.replay_count)
        self._validate = config.validate
        self._log = config.log
        # Seeding bypasses the validator.
        if initial_value is not None:
            self._stream.emit(initial_value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def completed(self) -> bool:
        return self._stream.completed

    def set(self, new_value: T) -> None:
        """Validate and, if accepted, store and broadcast new_value."""
        if self._validate is not None and not self._validate(new_value, self._value):
            if self._log:
                self._report_rejection()
            return
        self._value = new_value
        self._stream.emit(new_value)

    def _report_rejection(self) -> None:
        # A rejected write returns normally even when a log handler fails.
        try:
            logger.warning(
                "Validation failed for property '%s'. Keeping previous value.",
                self._name,
            )
        except Exception:
            pass

    def subscribe(
        self,
        on_next: Callable[[T], None],
        on_complete: Callable[[], None] | None = None,
    ) -> Disposer:
        """Replay history oldest-first, then follow live writes.

        Returns a function that ends the subscription.
        """
        return self._stream.subscribe(on_next, on_complete)

    def as_observable(self) -> StreamView[T]:
        return self._stream.as_view()

    def complete(self) -> None:
        """End the stream. The attribute keeps working but stops notifying."""
        if not self._stream.completed:
            logger.debug("Completing echo property '%s'", self._name)
        self._stream.complete()

    def __repr__(self) -> str:
        state = ", completed" if self.completed else ""
        return f"EchoProp({self._name!r}, {self._value!r}{state})"


def create_echo_prop(
    target: object,
    name: str,
    initial_value: Any = None,
    config: EchoConfig | None = None,
    **options: Any,
) -> EchoProp:
    """Turn ``target.<name>`` into an echo property and return its handle.

    Options are the EchoConfig fields, given either as keywords or as a
    prepared ``config``. If initial_value is None and the target already has
    its own ``name`` attribute, that value is adopted (unless
    use_existing_value_as_initial is False). A non-None initial value is the
    first history entry and is never validated.

    Raises ConfigurationError for invalid options or a target whose
    attributes cannot be redirected.

    Usage:
        class Player:
            pass

        player = Player()
        score = create_echo_prop(player, "score", 0)
        seen = []
        score.subscribe(seen.append)   # seen == [0]
        player.score = 10              # seen == [0, 10]
    """
    config = resolve_config(config, options)
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"property name must be a non-empty string, got {name!r}")

    if initial_value is None and config.use_existing_value_as_initial:
        existing = _binding.own_value(target, name)
        if existing is not _binding.MISSING:
            initial_value = existing

    prop: EchoProp = EchoProp(name, initial_value, config)
    _binding.install_accessor(target, name, lambda: prop.value, prop.set)
    if config.add_as_observable_to_target:
        _binding.install_readonly(target, name + OBSERVABLE_SUFFIX, prop.as_observable())

    logger.debug(
        "Created echo property '%s' on %s (replay=%d)",
        name,
        _binding.original_class(target).__qualname__,
        config.replay_count,
    )
    return prop


def create_reactive_property(*args: Any, **kwargs: Any) -> EchoProp:
    """Deprecated alias of create_echo_prop."""
    warnings.warn(
        "create_reactive_property is deprecated, use create_echo_prop",
        DeprecationWarning,
        stacklevel=2,
    )
    return create_echo_prop(*args, **kwargs)
