"""Accessor installation — how a plain attribute becomes an echo property.

Descriptors only work on classes, so each instrumented target is moved to a
private subclass of its own class, created once per target. Properties for
the target live on that subclass; other instances of the original class are
untouched. The subclass declares empty __slots__ so its layout matches the
original and __class__ assignment is accepted.
"""

from __future__ import annotations

import inspect
import types
from typing import Any, Callable

from echoprop.config import ConfigurationError

# Set on every per-target subclass; value is the original class.
_ORIGIN_ATTR = "__echoprop_origin__"

MISSING = object()


def is_instrumented(target: object) -> bool:
    return _ORIGIN_ATTR in type(target).__dict__


def original_class(target: object) -> type:
    """The class the target had before instrumentation."""
    return type(target).__dict__.get(_ORIGIN_ATTR, type(target))


def own_value(target: object, name: str) -> Any:
    """The target's own attribute ``name`` (instance dict or slot), or MISSING."""
    try:
        value = vars(target).get(name, MISSING)
    except TypeError:
        value = MISSING  # no __dict__
    if value is not MISSING:
        return value

    slot = inspect.getattr_static(type(target), name, None)
    if isinstance(slot, types.MemberDescriptorType):
        try:
            return slot.__get__(target, type(target))
        except AttributeError:
            return MISSING  # empty slot
    return MISSING


def _instrumented_class(target: object) -> type:
    cls = type(target)
    if _ORIGIN_ATTR in cls.__dict__:
        return cls

    params = getattr(cls, "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise ConfigurationError(
            f"cannot instrument frozen dataclass {cls.__qualname__}"
        )

    namespace = {
        "__slots__": (),
        "__module__": cls.__module__,
        "__qualname__": cls.__qualname__,
        _ORIGIN_ATTR: cls,
    }
    try:
        sub = type(cls.__name__, (cls,), namespace)
        target.__class__ = sub
    except (TypeError, AttributeError) as exc:
        raise ConfigurationError(
            f"cannot install accessors on {cls.__qualname__} instance: {exc}"
        ) from exc
    return sub


def _drop_instance_value(target: object, name: str) -> None:
    # The data descriptor shadows any instance value; drop the stale copy.
    try:
        vars(target).pop(name, None)
    except TypeError:
        pass  # no __dict__


def install_accessor(
    target: object,
    name: str,
    fget: Callable[[], Any],
    fset: Callable[[Any], None],
) -> None:
    """Route ``target.name`` reads to fget and writes to fset."""
    cls = _instrumented_class(target)
    setattr(
        cls,
        name,
        property(lambda _self: fget(), lambda _self, value: fset(value)),
    )
    _drop_instance_value(target, name)


def install_readonly(target: object, name: str, value: Any) -> None:
    """Expose a fixed value as ``target.<name>``. Assignment raises AttributeError."""
    cls = _instrumented_class(target)
    setattr(cls, name, property(lambda _self: value))
    _drop_instance_value(target, name)
