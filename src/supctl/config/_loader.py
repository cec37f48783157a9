# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Assemble client settings from TOML, the environment, and overrides."""

import copy
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from supctl.exceptions import ClientConfigError, ConfigLoadError

from ._models import ClientConfig

CONFIG_TABLE = "supctl"
ENV_PREFIX = "SUPCTL_"

_NULL_VALUES = frozenset({"", "none", "null"})

type Settings = dict[str, Any]  # pyright: ignore[reportExplicitAny]


def read_config_file(path: Path) -> Settings:
    """Parse a TOML settings file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ConfigLoadError: If the content is not valid TOML. Line and column
            are filled in when the interpreter reports them.
    """
    try:
        with path.open("rb") as stream:
            return tomllib.load(stream)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def merge_settings(lower: Mapping[str, Any], higher: Mapping[str, Any]) -> Settings:  # pyright: ignore[reportExplicitAny]
    """Overlay ``higher`` on ``lower`` and return a new mapping.

    Tables present on both sides are merged key by key; any other value from
    ``higher`` replaces the one in ``lower``. Neither argument is mutated.
    """
    merged: Settings = copy.deepcopy(dict(lower))
    for key, value in higher.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def settings_from_env(prefix: str = ENV_PREFIX) -> Settings:
    """Collect settings from ``<prefix>*`` environment variables.

    A double underscore separates nesting levels, so
    ``SUPCTL_LOGGING__LEVEL=debug`` becomes ``{"logging": {"level": "debug"}}``.
    Only names whose first level is a ClientConfig field are read; the
    logging switches ``SUPCTL_DEBUG`` and ``SUPCTL_LOG_LEVEL`` are not.

    Values are returned as strings for pydantic to coerce. ``none``,
    ``null`` and the empty string become None.
    """
    settings: Settings = {}
    for name, raw in os.environ.items():
        if not name.startswith(prefix) or name == prefix:
            continue
        keys = name.removeprefix(prefix).lower().split("__")
        if keys[0] not in ClientConfig.model_fields:
            continue
        value = None if raw.strip().lower() in _NULL_VALUES else raw
        _assign(settings, keys, value)
    return settings


def _assign(settings: Settings, keys: list[str], value: object) -> None:
    *parents, leaf = keys
    table = settings
    for key in parents:
        child = table.get(key)
        if not isinstance(child, dict):
            child = table[key] = {}
        table = child
    table[leaf] = value


def load_config(
    path: Path | None = None,
    *,
    env_prefix: str = ENV_PREFIX,
    overrides: Mapping[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> ClientConfig:
    """Load client configuration from a file, the environment, and overrides.

    Sources are merged from lowest to highest precedence: model defaults,
    the TOML file, environment variables, then explicit overrides. When the
    file has a ``[supctl]`` table only that table is used, which lets the
    settings live in ``pyproject.toml``; otherwise the whole file is read.

    Raises:
        ConfigLoadError: If the file is missing or is not valid TOML.
        ClientConfigError: If the merged values fail validation.
    """
    settings: Settings = {}

    if path is not None:
        try:
            document = read_config_file(path)
        except FileNotFoundError as e:
            msg = f"Configuration file not found: {path}"
            raise ConfigLoadError(msg, path=path) from e
        table = document.get(CONFIG_TABLE)
        settings = table if isinstance(table, dict) else document

    settings = merge_settings(settings, settings_from_env(env_prefix))
    if overrides:
        settings = merge_settings(settings, overrides)

    try:
        return ClientConfig.model_validate(settings)
    except ValidationError as e:
        msg = f"Invalid client configuration: {e}"
        raise ClientConfigError(msg) from e
