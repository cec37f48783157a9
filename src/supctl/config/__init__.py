"""Client configuration.

Settings are plain Pydantic models; ``load_config`` assembles them from a
TOML file, ``SUPCTL_*`` environment variables, and explicit overrides.
"""

from ._loader import (
    CONFIG_TABLE,
    ENV_PREFIX,
    load_config,
    merge_settings,
    read_config_file,
    settings_from_env,
)
from ._models import ClientConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "CONFIG_TABLE",
    "ENV_PREFIX",
    "ClientConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "load_config",
    "merge_settings",
    "read_config_file",
    "settings_from_env",
]
