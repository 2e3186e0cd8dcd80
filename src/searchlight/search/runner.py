"""Search runner – invoke ``search_<option>`` methods against the target query."""
from __future__ import annotations

from typing import Any

from searchlight.errors.search import SEARCH_METHOD_PREFIX
from searchlight.observability.logging import get_logger
from searchlight.search.accessors import option_value
from searchlight.search.predicates import is_blank

logger = get_logger(__name__)


def search_method_name(option: str) -> str:
    return f"{SEARCH_METHOD_PREFIX}{option}"


class SearchRunner:
    """Builds a search's query by calling its option methods once each.

    Only methods named after a declared option are considered, in the order
    the options were declared, and a method is skipped when its option value
    :func:`~searchlight.search.predicates.is_blank`.
    """

    def search_methods(self, search: Any) -> list[str]:
        """Names of the search methods defined for *search*'s declared options."""
        search_class = type(search)
        names: list[str] = []
        for option in search_class.declared_options():
            name = search_method_name(option)
            if callable(getattr(search_class, name, None)) and name not in names:
                names.append(name)
        return names

    def run(self, search: Any) -> Any:
        """Narrow ``search.query`` with every eligible search method and return it.

        A method may assign ``self.query`` itself or return the narrowed
        query; a non-``None`` return value replaces the held query.
        """
        log = logger.bind(search_class=type(search).__qualname__)
        query = search.query
        log.debug("search.run_started", query_type=type(query).__qualname__)

        invoked: list[str] = []
        for name in self.search_methods(search):
            option = name[len(SEARCH_METHOD_PREFIX):]
            if is_blank(option_value(search, option)):
                log.debug("search.method_skipped", option=option)
                continue
            narrowed = getattr(search, name)()
            if narrowed is not None:
                search.query = narrowed
            invoked.append(option)
            log.debug("search.method_invoked", option=option)

        log.debug("search.run_finished", invoked=invoked)
        return search.query


__all__ = ["SearchRunner", "search_method_name"]
