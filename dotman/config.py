"""Loading of the dotman configuration file."""

from __future__ import annotations

import functools
import os
import tomllib
from pathlib import Path
from typing import Any

from dotman.value import StringValue

CONFIG_NAME = "dotman.conf"
DEFAULT_SEARCH_PATHS = ("$HOME/.config/dotman", "/etc/dotman", ".")


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is invalid."""


class BaseValues:
    """The settings dotman understands."""

    def __init__(self, store: dict[str, Any]) -> None:
        self.giturl = StringValue("giturl", "", True, store)

    def validate(self) -> None:
        if not self.giturl.is_valid():
            raise ConfigError("giturl is required")

    def __str__(self) -> str:
        return f"{{Giturl: {self.giturl}}}"


class Config:
    """The configuration from the first search path that holds it."""

    def __init__(self, search_paths=DEFAULT_SEARCH_PATHS, name: str = CONFIG_NAME) -> None:
        self.search_paths = tuple(search_paths)
        self.name = name
        self.settings: dict[str, Any] = {}
        self.values: BaseValues | None = None

    def _find_file(self) -> Path:
        for directory in self.search_paths:
            base = Path(os.path.expandvars(os.fspath(directory)))
            for path in (base / f"{self.name}.toml", base / self.name):
                if path.is_file():
                    return path
        raise FileNotFoundError(f'Config File "{self.name}" Not Found')

    def load(self) -> None:
        """Find, parse and validate the configuration file."""
        try:
            data = tomllib.loads(self._find_file().read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"[Config] error reading config file:\n{exc}") from exc
        self.settings.clear()
        self.settings.update({key.lower(): item for key, item in data.items()})
        values = BaseValues(self.settings)
        try:
            values.validate()
        except ConfigError as exc:
            raise ConfigError(
                "[Config] error parsing config:\n"
                f"[BaseValues] error validating config:\n{exc}"
            ) from exc
        self.values = values

    def __str__(self) -> str:
        return f"{{Values: {self.values}}}"


@functools.cache
def _load_once() -> tuple[Config, ConfigError | None]:
    config = Config()
    try:
        config.load()
    except ConfigError as exc:
        return config, exc
    return config, None


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    config, error = _load_once()
    if error is not None:
        raise error
    return config