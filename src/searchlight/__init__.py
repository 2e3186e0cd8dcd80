"""
searchlight – declarative search objects.

Import path convention::

    from searchlight import Search, UndefinedOption
    from searchlight.search import is_blank, boolean_coerce
    from searchlight.adapters.sqlalchemy import SqlAlchemySearch
"""

from searchlight.errors import MissingSearchTarget, SearchlightError, UndefinedOption
from searchlight.search import Search, boolean_coerce, is_blank

__version__ = "0.1.0"
__all__ = [
    "MissingSearchTarget",
    "Search",
    "SearchlightError",
    "UndefinedOption",
    "__version__",
    "boolean_coerce",
    "is_blank",
]
