"""Template values supplied through files, the environment and definitions."""

from __future__ import annotations

import logging
import os
import re
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path

from .user_input import TemplateValues

__all__ = [
    "TemplateValuesError",
    "read_template_values_file",
    "read_template_values_from_definitions",
    "load_env_template_values",
    "load_args_template_values",
    "load_env_and_args_template_values",
]

log = logging.getLogger(__name__)

_VALUES_FILE_ENV = "CARGO_GENERATE_TEMPLATE_VALUES_FILE"
_VALUE_PREFIX = "CARGO_GENERATE_VALUE_"
_KEY_VALUE = re.compile(r"([a-zA-Z]+[a-zA-Z0-9\-_]*)\s*=\s*(.+)")


class TemplateValuesError(ValueError):
    """Template values could not be read or parsed."""


def read_template_values_file(path: str | os.PathLike[str]) -> TemplateValues:
    """Read the ``[values]`` table of a TOML file."""
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise TemplateValuesError(f'Values File Error: "{path}": {err}') from err
    try:
        document = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as err:
        raise TemplateValuesError(f'Values File Error: "{path}": {err}') from err
    values = document.get("values")
    if not isinstance(values, dict):
        raise TemplateValuesError(
            f'Values File Error: "{path}": missing table `values`'
        )
    return dict(values)


def read_template_values_from_definitions(definitions: Iterable[str]) -> TemplateValues:
    """Parse ``key=value`` definitions; values are kept as strings."""
    values: TemplateValues = {}
    for definition in definitions:
        match = _KEY_VALUE.fullmatch(definition)
        if match is None:
            raise TemplateValuesError(f"Failed to parse value: {definition}")
        key, value = match.groups()
        log.info("%s => '%s'", key, value)
        values[key] = value
    return values


def load_env_template_values(environ: Mapping[str, str] | None = None) -> TemplateValues:
    """Values from the values file named in the environment and from prefixed variables."""
    env = os.environ if environ is None else environ
    values_file = env.get(_VALUES_FILE_ENV)
    values = read_template_values_file(values_file) if values_file is not None else {}
    values.update(
        (key[len(_VALUE_PREFIX):].lower(), value)
        for key, value in env.items()
        if key.startswith(_VALUE_PREFIX)
    )
    return values


def load_args_template_values(
    template_values_file: str | os.PathLike[str] | None = None,
    definitions: Iterable[str] = (),
) -> TemplateValues:
    """Values from a values file given as argument, overridden by definitions."""
    values = (
        read_template_values_file(template_values_file)
        if template_values_file is not None
        else {}
    )
    values.update(read_template_values_from_definitions(definitions))
    return values


def load_env_and_args_template_values(
    template_values_file: str | os.PathLike[str] | None = None,
    definitions: Iterable[str] = (),
    environ: Mapping[str, str] | None = None,
) -> TemplateValues:
    """Environment values, overridden by values given as arguments."""
    values = load_env_template_values(environ)
    values.update(load_args_template_values(template_values_file, definitions))
    return values