"""Word splitting and case conversion for identifiers and free text."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, auto

__all__ = [
    "to_kebab_case",
    "to_lower_camel_case",
    "to_pascal_case",
    "to_shouty_kebab_case",
    "to_shouty_snake_case",
    "to_snake_case",
    "to_title_case",
    "to_upper_camel_case",
]


class _Mode(Enum):
    BOUNDARY = auto()
    LOWER = auto()
    UPPER = auto()


def _split_chunk(chunk: str) -> Iterator[str]:
    """Split an alphanumeric run at case transitions."""
    start = 0
    mode = _Mode.BOUNDARY
    for i, (current, following) in enumerate(zip(chunk, chunk[1:])):
        if current.islower():
            next_mode = _Mode.LOWER
        elif current.isupper():
            next_mode = _Mode.UPPER
        else:
            next_mode = mode

        if next_mode is _Mode.LOWER and following.isupper():
            yield chunk[start : i + 1]
            start = i + 1
            mode = _Mode.BOUNDARY
        elif mode is _Mode.UPPER and current.isupper() and following.islower():
            yield chunk[start:i]
            start = i
            mode = _Mode.BOUNDARY
        else:
            mode = next_mode
    if chunk:
        yield chunk[start:]


def _words(text: str) -> list[str]:
    chunks: list[str] = []
    current: list[str] = []
    for char in text:
        if char.isalnum():
            current.append(char)
        else:
            chunks.append("".join(current))
            current = []
    chunks.append("".join(current))
    return [word for chunk in chunks for word in _split_chunk(chunk) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join(text: str, transform: Callable[[str], str], separator: str) -> str:
    return separator.join(transform(word) for word in _words(text))


def to_kebab_case(text: str) -> str:
    """Lower-case words joined by hyphens."""
    return _join(text, str.lower, "-")


def to_snake_case(text: str) -> str:
    """Lower-case words joined by underscores."""
    return _join(text, str.lower, "_")


def to_shouty_kebab_case(text: str) -> str:
    """Upper-case words joined by hyphens."""
    return _join(text, str.upper, "-")


def to_shouty_snake_case(text: str) -> str:
    """Upper-case words joined by underscores."""
    return _join(text, str.upper, "_")


def to_upper_camel_case(text: str) -> str:
    """Capitalized words joined without separator."""
    return _join(text, _capitalize, "")


def to_pascal_case(text: str) -> str:
    """Same as upper camel case."""
    return to_upper_camel_case(text)


def to_lower_camel_case(text: str) -> str:
    """Like upper camel case, but the first word is all lower case."""
    words = _words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize(word) for word in rest)


def to_title_case(text: str) -> str:
    """Capitalized words joined by spaces."""
    return _join(text, _capitalize, " ")