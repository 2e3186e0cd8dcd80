"""Search errors — option declaration and construction failures."""

from __future__ import annotations

from typing import Any

from searchlight.errors.base import SearchlightError

SEARCH_METHOD_PREFIX = "search_"


class UndefinedOption(SearchlightError):
    """A search was constructed with an option its class never declared.

    When the rejected key looks like a search method name (``search_foo``)
    the message suggests the bare option name instead.
    """

    default_code = "undefined_option"

    def __init__(self, option: str, **kwargs: Any) -> None:
        self.option = option
        self.suggestion: str | None = None
        message = f"No known option called '{option}'."
        if option.startswith(SEARCH_METHOD_PREFIX):
            self.suggestion = option[len(SEARCH_METHOD_PREFIX):]
            message = f"{message} Did you just mean '{self.suggestion}'?"
        kwargs.setdefault("detail", {"option": option, "suggestion": self.suggestion})
        super().__init__(message, **kwargs)


class InvalidOptionName(SearchlightError):
    """A declared option name is unusable as an attribute of a search."""

    default_code = "invalid_option_name"

    def __init__(self, name: object, reason: str = "not an identifier", **kwargs: Any) -> None:
        super().__init__(f"Invalid option name {name!r}: {reason}", **kwargs)
        self.name = name
        self.reason = reason


__all__ = ["InvalidOptionName", "SEARCH_METHOD_PREFIX", "UndefinedOption"]
