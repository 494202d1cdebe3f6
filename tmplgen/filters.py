"""Named text filters that templates can apply to values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from . import casing

__all__ = ["FilterError", "filter_names", "apply_filter"]


class FilterError(ValueError):
    """A filter could not be applied."""


_CASE_FILTERS: dict[str, Callable[[str], str]] = {
    "kebab_case": casing.to_kebab_case,
    "lower_camel_case": casing.to_lower_camel_case,
    "pascal_case": casing.to_pascal_case,
    "shouty_kebab_case": casing.to_shouty_kebab_case,
    "shouty_snake_case": casing.to_shouty_snake_case,
    "snake_case": casing.to_snake_case,
    "title_case": casing.to_title_case,
    "upper_camel_case": casing.to_upper_camel_case,
}


def filter_names() -> tuple[str, ...]:
    """Names of all available filters."""
    return tuple(_CASE_FILTERS)


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise FilterError("String expected")


def apply_filter(name: str, value: Any, *args: Any, **kwargs: Any) -> str:
    """Apply the filter called ``name`` to a scalar ``value``."""
    try:
        func = _CASE_FILTERS[name]
    except KeyError:
        raise FilterError(f"Unknown filter `{name}`") from None
    if args:
        raise FilterError(
            "Invalid number of positional arguments: "
            "expected at most 0 positional arguments"
        )
    if kwargs:
        raise FilterError(f"Unexpected named argument `{next(iter(kwargs))}`")
    return func(_scalar_text(value))