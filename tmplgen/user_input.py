"""Where a template comes from, and the settings a user gave for generating."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from .crate_type import CrateType

__all__ = [
    "TemplateValues",
    "TemplateLocation",
    "GitUserInput",
    "UserParsedInput",
    "abbreviated_git_url_to_full_remote",
    "abbreviated_github",
    "local_path",
    "resolve_template_location",
    "location_message",
]

log = logging.getLogger(__name__)

TemplateValues = dict[str, Any]

_ORG_REPO = re.compile(r"[a-zA-Z0-9_.-]+/[a-zA-Z0-9_%-]+")

_ABBREVIATIONS = {
    "gl:": "https://gitlab.com/{}.git",
    "bb:": "https://bitbucket.org/{}.git",
    "gh:": "https://github.com/{}.git",
}


@dataclass(frozen=True)
class GitUserInput:
    """A template to be cloned with git."""

    url: str
    branch: str | None = None
    tag: str | None = None
    identity: Path | None = None
    force_init: bool = False


TemplateLocation = Union[GitUserInput, Path]


@dataclass
class UserParsedInput:
    """Settings for one generation run, after parsing user input."""

    template_location: TemplateLocation
    destination: Path = field(default_factory=Path.cwd)
    name: str | None = None
    subfolder: str | None = None
    template_values: TemplateValues = field(default_factory=dict)
    vcs: str = "git"
    init: bool = False
    overwrite: bool = False
    crate_type: CrateType = CrateType.BIN
    allow_commands: bool = False
    silent: bool = False
    force: bool = False
    test: bool = False
    force_git_init: bool = False


def _is_abbreviated_github(fav: str) -> bool:
    return _ORG_REPO.fullmatch(fav) is not None


def abbreviated_git_url_to_full_remote(git: str) -> str | None:
    """Expand ``gh:``, ``gl:`` and ``bb:`` shorthands into full git URLs."""
    if len(git) < 3:
        return None
    prefix = git[:3]
    template = _ABBREVIATIONS.get(prefix)
    if template is not None:
        return template.format(git[3:])
    if _is_abbreviated_github(prefix):
        return f"https://github.com/{prefix}.git"
    return None


def abbreviated_github(fav: str) -> str | None:
    """Map ``org/repo`` to its GitHub URL."""
    return f"https://github.com/{fav}.git" if _is_abbreviated_github(fav) else None


def local_path(fav: str) -> Path | None:
    """The path named by ``fav`` if it is an existing directory."""
    path = Path(fav)
    return path if path.is_dir() else None


def location_message(location: TemplateLocation) -> str:
    """Short description of a template location for the user."""
    if isinstance(location, GitUserInput):
        return f"git repository: {location.url}"
    return f"local path: {location}"


def resolve_template_location(
    fav: str,
    branch: str | None = None,
    tag: str | None = None,
    identity: Path | None = None,
    force_init: bool = False,
) -> TemplateLocation:
    """Guess the template location for a name that is not a configured favorite.

    Tried in order: a git shorthand, an existing local directory, an
    ``org/repo`` GitHub name, and finally the text as a git URL.
    """

    def git(url: str) -> GitUserInput:
        return GitUserInput(url, branch, tag, identity, force_init)

    shorthand_url = abbreviated_git_url_to_full_remote(fav)
    path = local_path(fav) if shorthand_url is None else None
    github_url = (
        abbreviated_github(fav) if shorthand_url is None and path is None else None
    )

    if shorthand_url is not None:
        location = git(shorthand_url)
    elif path is not None:
        location = path
    elif github_url is not None:
        location = git(github_url)
    else:
        location = git(fav)

    log.warning(
        "Favorite `%s` not found in config, using it as a %s",
        fav,
        location_message(location),
    )
    return location