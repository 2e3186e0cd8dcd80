"""Search validation – mass-assign raw options onto a search instance."""
from __future__ import annotations

from typing import Any, Mapping

from searchlight.errors import UndefinedOption
from searchlight.observability.logging import get_logger
from searchlight.search.accessors import write_option

logger = get_logger(__name__)


def assign_options(search: Any, raw_options: Mapping[Any, Any] | None) -> None:
    """Assign each supplied option in order, failing on the first unknown key.

    Keys are compared as strings. Values are never inspected here; blank
    values are stored like any other and only matter when the search runs.

    Raises:
        UndefinedOption: for the first key the search class never declared.
    """
    search_class = type(search)
    declared = frozenset(search_class.declared_options())
    assigned: list[str] = []
    for key, value in (raw_options or {}).items():
        option = str(key)
        if option not in declared:
            logger.warning(
                "search.option_rejected",
                search_class=search_class.__qualname__,
                option=option,
            )
            raise UndefinedOption(option)
        write_option(search, option, value)
        assigned.append(option)
    logger.debug(
        "search.options_assigned",
        search_class=search_class.__qualname__,
        options=assigned,
    )


__all__ = ["assign_options"]
