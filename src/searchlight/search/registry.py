"""Search registry – per-class declared options and target binding.

Every :class:`~searchlight.search.base.Search` subclass owns exactly one
:class:`OptionRegistry`. Registries never copy their ancestors' state: option
sets and target bindings are resolved by walking the owning class's MRO on
each call, so a later ``search_on`` on a parent is visible to children that
never bound a target of their own.
"""
from __future__ import annotations

import keyword
import sys
from typing import Any, Iterator

from searchlight.config import get_settings
from searchlight.errors import InvalidOptionName, MissingSearchTarget
from searchlight.observability.logging import get_logger

logger = get_logger(__name__)

REGISTRY_ATTR = "_registry"
_GUESS_SUFFIX = "Search"


class _Unbound:
    def __repr__(self) -> str:
        return "<unbound>"


UNBOUND: Any = _Unbound()


class OptionRegistry:
    """Declared option names and search target of one search class."""

    def __init__(self, owner: type) -> None:
        self.owner = owner
        self._options: dict[str, None] = {}
        self._target: Any = UNBOUND

    def _lineage(self) -> Iterator[OptionRegistry]:
        """Yield registries from the owner up through its ancestors (MRO order)."""
        for klass in self.owner.__mro__:
            registry = vars(klass).get(REGISTRY_ATTR)
            if isinstance(registry, OptionRegistry):
                yield registry

    # Options ----------------------------------------------------------
    def declare_option(self, name: str) -> bool:
        """Add *name* to this class's options; return ``False`` if already known."""
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidOptionName(name)
        if self.is_declared(name):
            return False
        self._options[name] = None
        return True

    def own_options(self) -> tuple[str, ...]:
        return tuple(self._options)

    def declared_options(self) -> tuple[str, ...]:
        """Ancestors' options first, then this class's, each name once."""
        ordered: dict[str, None] = {}
        for registry in reversed(list(self._lineage())):
            ordered.update(registry._options)
        return tuple(ordered)

    def is_declared(self, name: str) -> bool:
        return any(name in registry._options for registry in self._lineage())

    # Target -----------------------------------------------------------
    def bind_target(self, target: Any) -> None:
        self._target = target

    def has_target(self) -> bool:
        return any(registry._target is not UNBOUND for registry in self._lineage())

    def resolve_target(self) -> Any:
        """Return the nearest bound target.

        Raises:
            MissingSearchTarget: when nothing in the ancestry is bound and
                the target cannot be guessed from the class name.
        """
        for registry in self._lineage():
            if registry._target is not UNBOUND:
                return registry._target
        if get_settings().guess_search_target:
            guessed = self._guess_target()
            if guessed is not UNBOUND:
                return guessed
        raise MissingSearchTarget(self.owner)

    def _guess_target(self) -> Any:
        # AccountSearch -> Account, looked up in the module defining the class
        name = self.owner.__name__
        if not name.endswith(_GUESS_SUFFIX) or name == _GUESS_SUFFIX:
            return UNBOUND
        target_name = name[: -len(_GUESS_SUFFIX)]
        module = sys.modules.get(self.owner.__module__)
        guessed = getattr(module, target_name, UNBOUND)
        if guessed is not UNBOUND:
            logger.debug("search.target_guessed", search_class=name, target=target_name)
        return guessed

    def __repr__(self) -> str:
        return (
            f"OptionRegistry(owner={self.owner.__qualname__}, "
            f"options={self.declared_options()!r}, target={self._target!r})"
        )


__all__ = ["OptionRegistry", "REGISTRY_ATTR", "UNBOUND"]
