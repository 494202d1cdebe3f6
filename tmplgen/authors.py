"""Discovery of the author name and e-mail, and the host's OS/arch tag."""

from __future__ import annotations

import os
import platform
import subprocess
import sys
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Authors", "AuthorError", "get_authors", "get_os_arch"]

_NAME_PRIMARY = ("CARGO_NAME", "GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME")
_NAME_FALLBACK = ("USER", "USERNAME", "NAME")
_EMAIL_PRIMARY = ("CARGO_EMAIL", "GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL")
_EMAIL_FALLBACK = ("EMAIL",)

_OS_NAMES = {"darwin": "macos", "win32": "windows", "cygwin": "windows"}
_ARCH_NAMES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i686": "x86",
}


class AuthorError(RuntimeError):
    """The current user could not be determined."""


@dataclass(frozen=True)
class Authors:
    """The author line and the plain user name."""

    author: str
    username: str


def _first_env(names: Iterable[str]) -> str | None:
    return next(
        (value for name in names if (value := os.environ.get(name)) is not None),
        None,
    )


def _git_config(key: str) -> str | None:
    """Look ``key`` up in the git configuration seen from the current directory."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return result.stdout.rstrip("\n")


def _discover(primary: Iterable[str], key: str, fallback: Iterable[str]) -> str | None:
    value = _first_env(primary)
    if value is None:
        value = _git_config(key)
    if value is None:
        value = _first_env(fallback)
    return value


def _discover_author() -> tuple[str, str | None]:
    name = _discover(_NAME_PRIMARY, "user.name", _NAME_FALLBACK)
    if name is None:
        username_var = "USERNAME" if sys.platform == "win32" else "USER"
        raise AuthorError(
            f"could not determine the current user, please set ${username_var}"
        )
    email = _discover(_EMAIL_PRIMARY, "user.email", _EMAIL_FALLBACK)
    if email is not None:
        email = email.strip()
        # Angle brackets are added when needed, so drop any that are already there.
        if email.startswith("<") and email.endswith(">"):
            email = email[1:-1]
    return name.strip(), email


def get_authors() -> Authors:
    """Find the author from the environment and the git configuration."""
    name, email = _discover_author()
    if email is not None:
        return Authors(author=f"{name} <{email}>", username=name)
    return Authors(author=name, username=name)


def get_os_arch() -> str:
    """The host as ``<os>-<arch>``, e.g. ``linux-x86_64``."""
    os_name = _OS_NAMES.get(sys.platform)
    if os_name is None:
        os_name = platform.system().lower() or sys.platform
    machine = platform.machine().lower()
    arch = _ARCH_NAMES.get(machine, machine)
    return f"{os_name}-{arch}"