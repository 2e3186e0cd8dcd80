"""SQLAlchemy adapter – SqlAlchemySearch.

Binds searches to mapped classes (or ready-made ``Select`` statements) and
generates a filtering ``search_<option>`` method for every declared option
that names a mapped column. Generated methods live on the accessor layer, so
a hand-written ``search_<option>`` on the class always wins.
"""
from __future__ import annotations

import inspect
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper

from searchlight.observability.logging import get_logger
from searchlight.search import Search
from searchlight.search.accessors import option_value
from searchlight.search.runner import search_method_name

logger = get_logger(__name__)

_MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


def mapper_for(target: Any) -> Mapper[Any] | None:
    """Return the mapper behind a mapped class or a single-entity ``Select``."""
    if isinstance(target, Select):
        descriptions = target.column_descriptions
        if not descriptions:
            return None
        target = descriptions[0].get("entity")
        if target is None:
            return None
    info = sa_inspect(target, raiseerr=False)
    return info if isinstance(info, Mapper) else None


def _column_search(option: str) -> Any:
    def search_column(self: SqlAlchemySearch) -> Any:
        mapper = mapper_for(type(self).search_target())
        column = getattr(mapper.class_, option)
        value = option_value(self, option)
        if isinstance(value, _MULTI_VALUE_TYPES):
            return self.query.where(column.in_(list(value)))
        return self.query.where(column == value)

    search_column.__name__ = search_method_name(option)
    search_column.__column_search__ = True  # type: ignore[attr-defined]
    return search_column


def _is_column_search(attr: Any) -> bool:
    return getattr(attr, "__column_search__", False) is True


class SqlAlchemySearch(Search):
    """Search whose target is a SQLAlchemy mapped class.

    Example::

        class AccountSearch(SqlAlchemySearch, target=Account, options=("kind", "min_paid")):
            def search_min_paid(self):
                return self.query.where(Account.paid_amount >= self.min_paid)

        session.scalars(AccountSearch(kind=["gold", "silver"], min_paid=10).results())

    ``kind`` is a column, so ``search_kind`` is generated (``IN`` for
    list-like values, equality otherwise).
    """

    def base_query(self, target: Any) -> Any:
        if isinstance(target, Select):
            return target
        if mapper_for(target) is not None:
            return select(target)
        return target

    @classmethod
    def search_on(cls, target: Any) -> None:
        super().search_on(target)
        for option in cls.declared_options():
            cls._generate_column_search(option)

    @classmethod
    def _option_declared(cls, name: str) -> None:
        if cls._registry.has_target():
            cls._generate_column_search(name)

    @classmethod
    def _generate_column_search(cls, option: str) -> None:
        mapper = mapper_for(cls.search_target())
        if mapper is None or option not in mapper.column_attrs.keys():
            return
        name = search_method_name(option)
        existing = inspect.getattr_static(cls, name, None)
        if callable(existing) and not _is_column_search(existing):
            return
        setattr(cls._accessors, name, _column_search(option))
        logger.debug(
            "search.column_search_generated",
            search_class=cls.__qualname__,
            option=option,
            entity=mapper.class_.__name__,
        )


__all__ = ["SqlAlchemySearch", "mapper_for"]
