"""Search accessors – generated getter, setter and boolean query per option.

Generated accessors live on a per-class *accessor layer*: a bare class that
:class:`~searchlight.search.base.SearchMeta` places directly after the search
class in its MRO. Anything written on the search class itself therefore
shadows the generated accessor, and ``super().<option>`` from an override
still reaches it.
"""
from __future__ import annotations

import inspect
from typing import Any

from searchlight.search.predicates import boolean_coerce

ACCESSORS_ATTR = "_accessors"
LAYER_OWNER_ATTR = "__accessors_for__"
BOOLEAN_PREFIX = "is_"
VALUES_ATTR = "_option_values"


def new_accessor_layer(name: str, module: str | None) -> type:
    """Create the empty accessor layer for a search class called *name*."""
    return type(f"SearchlightAccessors({name})", (), {"__module__": module})


def boolean_name(option: str) -> str:
    return f"{BOOLEAN_PREFIX}{option}"


def _option_property(option: str) -> property:
    def getter(self: Any) -> Any:
        return getattr(self, VALUES_ATTR).get(option)

    def setter(self: Any, value: Any) -> None:
        getattr(self, VALUES_ATTR)[option] = value

    getter.__name__ = setter.__name__ = option
    return property(getter, setter, doc=f"Raw value of the ``{option}`` option.")


def _boolean_property(option: str) -> property:
    def query(self: Any) -> bool:
        return boolean_coerce(option_value(self, option))

    query.__name__ = boolean_name(option)
    return property(query, doc=f"``{option}`` coerced to a boolean.")


def install_accessors(layer: type, option: str) -> bool:
    """Add the accessor triple for *option* to *layer*.

    Returns ``False`` (and leaves the layer untouched) when the option's
    accessors are already there.
    """
    if option in vars(layer):
        return False
    setattr(layer, option, _option_property(option))
    setattr(layer, boolean_name(option), _boolean_property(option))
    return True


def write_option(search: Any, option: str, value: Any) -> None:
    """Assign *value* through the option's setter.

    A user-defined property with a setter (or any data descriptor) on the
    class is honoured. When the option name is shadowed by something that
    cannot be assigned, such as a plain method or a read-only property, the
    raw value is stored where the generated getter would read it.
    """
    descriptor = inspect.getattr_static(type(search), option, None)
    if isinstance(descriptor, property):
        writable = descriptor.fset is not None
    else:
        writable = hasattr(type(descriptor), "__set__")
    if writable:
        setattr(search, option, value)
    else:
        getattr(search, VALUES_ATTR)[option] = value


def option_value(search: Any, option: str) -> Any:
    """Read *option* the way the search class exposes it.

    Goes through the getter when the name resolves to a data descriptor
    (the generated property or a user property). A plain method shadowing
    the getter is not a value, so the stored raw value is returned instead.
    """
    descriptor = inspect.getattr_static(type(search), option, None)
    if hasattr(type(descriptor), "__set__"):
        return getattr(search, option)
    return getattr(search, VALUES_ATTR).get(option)


__all__ = [
    "ACCESSORS_ATTR",
    "LAYER_OWNER_ATTR",
    "boolean_name",
    "install_accessors",
    "new_accessor_layer",
    "option_value",
    "write_option",
]
