"""TOML files that record saved and ignored packages."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w


class MetafileError(Exception):
    """Raised when a metafile cannot be read or written."""


class TomlFileHandler:
    """Reads and writes one content object to a TOML file."""

    def __init__(self, path, content) -> None:
        self.path = Path(path)
        self.content = content

    def read(self) -> None:
        """Load the file into the content; a missing file counts as empty."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raw = b""
        except OSError as exc:
            raise MetafileError(f"[TomlFileHandler] failed to read toml file:\n{exc}") from exc
        try:
            self.content.update_from(tomllib.loads(raw.decode("utf-8")))
        except ValueError as exc:
            raise MetafileError(f"[TomlFileHandler] failed to unmarshal toml file:\n{exc}") from exc

    def write(self) -> None:
        try:
            text = tomli_w.dumps(self.content.to_dict())
        except (TypeError, ValueError) as exc:
            raise MetafileError(f"[TomlFileHandler] failed to marshal toml file:\n{exc}") from exc
        self.path.write_text(text, encoding="utf-8")


@dataclass
class PackagesContent:
    """The saved and ignored package lists."""

    saved: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"Saved": list(self.saved), "Ignored": list(self.ignored)}

    def update_from(self, data) -> None:
        """Replace the lists present in data; key case is ignored."""
        for key, item in data.items():
            name = key.lower()
            if name not in ("saved", "ignored"):
                continue
            if not isinstance(item, list) or not all(isinstance(x, str) for x in item):
                raise ValueError(f"{key}: expected an array of strings")
            setattr(self, name, list(item))


def _add(items: list[str], pkg: str) -> None:
    if pkg not in items:
        items.append(pkg)


def _discard(items: list[str], pkg: str) -> None:
    if pkg in items:
        items.remove(pkg)


class PackagesMetafile:
    """The package metafile at a path, loaded on creation."""

    def __init__(self, path) -> None:
        self._handler = TomlFileHandler(path, PackagesContent())
        self._handler.read()

    @property
    def content(self) -> PackagesContent:
        return self._handler.content

    def to_saved(self, pkg: str) -> None:
        _add(self.content.saved, pkg)
        _discard(self.content.ignored, pkg)

    def to_saved_index(self, pkg: str, index: int) -> None:
        saved = self.content.saved
        _discard(saved, pkg)
        saved.insert(max(0, min(index, len(saved))), pkg)

    def to_ignored(self, pkg: str) -> None:
        _add(self.content.ignored, pkg)
        _discard(self.content.saved, pkg)

    def save(self) -> None:
        self._handler.write()