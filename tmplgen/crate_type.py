"""Kind of crate a generated project is."""

from __future__ import annotations

from enum import Enum

__all__ = ["CrateType", "crate_type_for"]


class CrateType(Enum):
    """Binary or library crate."""

    BIN = "bin"
    LIB = "lib"

    def __str__(self) -> str:
        return self.value


def crate_type_for(lib: bool) -> CrateType:
    """Library when ``lib`` is set, binary otherwise."""
    return CrateType.LIB if lib else CrateType.BIN