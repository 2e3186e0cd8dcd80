"""Search – declarative search objects.

Example::

    class AccountSearch(Search, target=Account, options=("paid_amount", "business_name")):

        def search_paid_amount(self):
            self.query = self.query.where(Account.paid_amount >= self.paid_amount)

        def search_business_name(self):
            self.query = self.query.where(Account.business_name.ilike(f"%{self.business_name}%"))

    search = AccountSearch(paid_amount=50, business_name="")
    search.results()   # only search_paid_amount ran

Options can also be declared and targets bound after the class exists, with
:meth:`Search.searches` and :meth:`Search.search_on`.
"""
from __future__ import annotations

import threading
from typing import Any, Mapping

from searchlight.errors import InvalidOptionName
from searchlight.errors.search import SEARCH_METHOD_PREFIX
from searchlight.search.accessors import (
    ACCESSORS_ATTR,
    LAYER_OWNER_ATTR,
    VALUES_ATTR,
    install_accessors,
    new_accessor_layer,
    option_value,
)
from searchlight.search.predicates import is_blank
from searchlight.search.registry import REGISTRY_ATTR, UNBOUND, OptionRegistry
from searchlight.search.runner import SearchRunner
from searchlight.search.validation import assign_options

_UNSET: Any = object()


class SearchMeta(type):
    """Gives every search class its own registry and accessor layer.

    Accepts two class keywords: ``target`` (same as :meth:`Search.search_on`)
    and ``options`` (an iterable of names, same as :meth:`Search.searches`).
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        target: Any = UNBOUND,
        options: tuple[str, ...] | list[str] = (),
        **kwargs: Any,
    ) -> SearchMeta:
        layer = new_accessor_layer(name, namespace.get("__module__"))
        cls = super().__new__(mcs, name, (layer, *bases), namespace, **kwargs)
        setattr(layer, LAYER_OWNER_ATTR, cls)
        setattr(cls, ACCESSORS_ATTR, layer)
        setattr(cls, REGISTRY_ATTR, OptionRegistry(cls))
        if target is not UNBOUND:
            cls.search_on(target)
        if options:
            cls.searches(*options)
        return cls

    def __init__(cls, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any) -> None:
        kwargs.pop("target", None)
        kwargs.pop("options", None)
        super().__init__(name, bases, namespace, **kwargs)


class Search(metaclass=SearchMeta):
    """Base class for search objects.

    Subclasses declare options, bind a target and define one
    ``search_<option>`` method per option. Instances are built from raw
    option values (typically request parameters) and build their query on
    the first :meth:`results` call.
    """

    _registry: OptionRegistry
    _accessors: type
    runner: SearchRunner = SearchRunner()

    def __init__(self, raw_options: Mapping[Any, Any] | None = None, /, **options: Any) -> None:
        setattr(self, VALUES_ATTR, {})
        self._query: Any = _UNSET
        self._result: Any = None
        self._has_run = False
        self._lock = threading.RLock()
        assign_options(self, {**(raw_options or {}), **options})

    # Declaration --------------------------------------------------------
    @classmethod
    def searches(cls, *names: str) -> None:
        """Declare options; redeclaring a known name is a no-op."""
        for name in names:
            if name in RESERVED_OPTION_NAMES:
                raise InvalidOptionName(name, reason="reserved by Search")
            if isinstance(name, str) and name.startswith("_"):
                raise InvalidOptionName(name, reason="must not start with an underscore")
            if cls._registry.declare_option(name):
                install_accessors(cls._accessors, name)
                cls._option_declared(name)

    @classmethod
    def search_on(cls, target: Any) -> None:
        """Bind *target* for this class and every subclass that doesn't bind its own."""
        cls._registry.bind_target(target)

    @classmethod
    def search_target(cls) -> Any:
        return cls._registry.resolve_target()

    @classmethod
    def declared_options(cls) -> tuple[str, ...]:
        return cls._registry.declared_options()

    @classmethod
    def _option_declared(cls, name: str) -> None:
        """Hook called once per newly declared option (adapters generate methods here)."""

    # Query --------------------------------------------------------------
    def base_query(self, target: Any) -> Any:
        """Return the unfiltered query for *target*; the target itself by default."""
        return target

    @property
    def query(self) -> Any:
        """The running query, seeded from :meth:`base_query` on first access."""
        if self._query is _UNSET:
            self._query = self.base_query(type(self).search_target())
        return self._query

    @query.setter
    def query(self, value: Any) -> None:
        self._query = value

    def results(self) -> Any:
        """Return the built query, running the search methods on the first call only."""
        with self._lock:
            if not self._has_run:
                self._result = self._run()
                self._has_run = True
        return self._result

    def _run(self) -> Any:
        held = self._query
        try:
            return self.runner.run(self)
        except BaseException:
            self._query = held
            raise

    def _search_methods(self) -> list[str]:
        return self.runner.search_methods(self)

    @property
    def has_run(self) -> bool:
        return self._has_run

    # Options ------------------------------------------------------------
    @property
    def options(self) -> dict[str, Any]:
        """Declared options carrying a non-blank value, read through their getters."""
        values = {}
        for name in type(self).declared_options():
            value = option_value(self, name)
            if not is_blank(value):
                values[name] = value
        return values

    @property
    def raw_options(self) -> dict[str, Any]:
        """Every stored option value, blank or not."""
        return dict(getattr(self, VALUES_ATTR))

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(options={sorted(self.options)!r}, has_run={self._has_run})"


RESERVED_OPTION_NAMES = frozenset(
    {name for name in dir(Search) if not name.startswith("_")}
    | {name[len(SEARCH_METHOD_PREFIX):] for name in dir(Search) if name.startswith(SEARCH_METHOD_PREFIX)}
)


__all__ = ["RESERVED_OPTION_NAMES", "Search", "SearchMeta"]
