"""Search – declarative search objects and their building blocks."""
from searchlight.search.base import RESERVED_OPTION_NAMES, Search, SearchMeta
from searchlight.search.predicates import boolean_coerce, is_blank
from searchlight.search.registry import OptionRegistry
from searchlight.search.runner import SearchRunner
from searchlight.search.validation import assign_options

__all__ = [
    "OptionRegistry",
    "RESERVED_OPTION_NAMES",
    "Search",
    "SearchMeta",
    "SearchRunner",
    "assign_options",
    "boolean_coerce",
    "is_blank",
]
