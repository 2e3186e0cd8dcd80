"""Searchlight error hierarchy — public re-export surface.

Hierarchy::

    SearchlightError
    ├── UndefinedOption              (search.py)
    ├── InvalidOptionName            (search.py)
    └── ConfigError                  (config.py)
        ├── MissingSearchTarget
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from searchlight.errors.base import SearchlightError
from searchlight.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    MissingSearchTarget,
)
from searchlight.errors.search import InvalidOptionName, UndefinedOption

__all__ = [
    "ConfigError",
    "InvalidOptionName",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "MissingSearchTarget",
    "SearchlightError",
    "UndefinedOption",
]
