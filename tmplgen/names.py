"""Project name, crate name and project directory derived from user input."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from .casing import to_kebab_case, to_snake_case
from .user_input import UserParsedInput

__all__ = [
    "ProjectNameError",
    "ProjectDirError",
    "crate_name",
    "project_name",
    "project_name_input",
    "project_dir",
]

log = logging.getLogger(__name__)

_PROJECT_NAME_ENV = "CARGO_GENERATE_VALUE_PROJECT_NAME"


class ProjectNameError(ValueError):
    """No project name could be determined."""


class ProjectDirError(FileExistsError):
    """The project directory cannot be used."""


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _ask_name() -> str:
    return input("Project Name: ").strip()


def crate_name(project_name_input: str) -> str:
    """The crate name: the project name in snake case."""
    return to_snake_case(project_name_input)


def project_name(project_name_input: str, user_input: UserParsedInput) -> str:
    """The project name, kebab-cased unless ``force`` is set."""
    if user_input.force:
        return project_name_input
    return to_kebab_case(project_name_input)


def project_name_input(
    variables: Mapping[str, Any],
    user_input: UserParsedInput,
    prompt: Callable[[], str] | None = None,
) -> str:
    """Find the raw project name.

    A ``project-name`` template variable wins, then the name the user gave,
    then the environment, and finally ``prompt`` unless running silently.
    """
    if "project-name" in variables:
        name = _scalar_text(variables["project-name"])
        if user_input.name is not None and user_input.name != name:
            log.warning(
                "Project name changed by template, from `%s` to `%s`...",
                user_input.name,
                name,
            )
        return name
    if user_input.name is not None:
        return user_input.name
    env_name = os.environ.get(_PROJECT_NAME_ENV)
    if env_name is not None:
        return env_name
    if user_input.silent:
        raise ProjectNameError(
            "Project Name Error: Option `--silent` provided, but project name "
            "was not set. Please use `--name`."
        )
    return (prompt or _ask_name)()


def project_dir(project_name_input: str, user_input: UserParsedInput) -> Path:
    """The directory to generate into; it must not exist unless ``init`` is set."""
    base_path = user_input.destination
    if user_input.init:
        return base_path

    name = user_input.name if user_input.name is not None else project_name_input
    if user_input.force:
        dir_name = name
    else:
        dir_name = to_kebab_case(name)
        if dir_name != name:
            log.warning("Renaming project called `%s` to `%s`...", name, dir_name)

    path = base_path / dir_name
    if path.exists():
        raise ProjectDirError("Target directory already exists, aborting!")
    return path