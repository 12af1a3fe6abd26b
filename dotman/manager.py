"""Keeping the installed packages in line with the saved package lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Protocol

from dotman.bashcmd import CommandError
from dotman.metafile import PackagesMetafile


class ManagerError(Exception):
    """A failed package operation; completed lists what was done before it."""

    def __init__(self, message: str, completed: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.completed = list(completed)


class Commands(Protocol):
    """The package-tool operations a manager relies on."""

    def installed(self) -> list[str]: ...

    def find_package(self, pkg: str) -> bool: ...

    def install(self, pkg: str, no_confirm: bool) -> None: ...

    def uninstall(self, pkg: str) -> None: ...


@contextmanager
def _reraise(message: str, *errors: type[Exception], completed=()) -> Iterator[None]:
    try:
        yield
    except errors as exc:
        raise ManagerError(f"[PackagesManager] {message}:\n{exc}", completed) from exc


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


class PackagesManager:
    """Compares a package metafile with what a package tool reports."""

    def __init__(self, metafile: PackagesMetafile, commands: Commands) -> None:
        self.metafile = metafile
        self.commands = commands

    @property
    def saved(self) -> list[str]:
        return self.metafile.content.saved

    @property
    def ignored(self) -> list[str]:
        return self.metafile.content.ignored

    def installed(self, filter_ignored: bool) -> list[str]:
        with _reraise("failed to get installed packages", CommandError):
            installed = list(self.commands.installed())
        if filter_ignored:
            installed = [pkg for pkg in installed if pkg not in self.ignored]
        return installed

    def surplus(self, filter_ignored: bool) -> list[str]:
        """Installed packages that are not saved."""
        with _reraise("failed to get surplus packages", ManagerError):
            installed = self.installed(filter_ignored)
        return _unique(pkg for pkg in installed if pkg not in self.saved)

    def uninstalled(self) -> list[str]:
        """Saved packages that are not installed."""
        with _reraise("failed to get uninstalled packages", ManagerError):
            installed = set(self.installed(True))
        return _unique(pkg for pkg in self.saved if pkg not in installed)

    def _check_package(self, pkg: str) -> bool:
        with _reraise("failed to check if package is installed", CommandError):
            return self.is_package(pkg)

    def to_saved(self, pkg: str) -> None:
        if not self._check_package(pkg):
            raise ManagerError(f"[PackagesManager] '{pkg}' is not a valid package")
        self.metafile.to_saved(pkg)

    def to_saved_index(self, pkg: str, index: int) -> None:
        if pkg not in self.saved:
            raise ManagerError(f"'{pkg}' is not in the list of saved packages")
        self.metafile.to_saved_index(pkg, index)

    def to_ignored(self, pkg: str, force: bool) -> None:
        if not force and not self._check_package(pkg):
            raise ManagerError(f"'{pkg}' is not a valid package")
        self.metafile.to_ignored(pkg)

    def remove_from_metafile(self, pkg: str) -> bool:
        """Drop a package from both lists; report whether it was in either."""
        found = False
        for items in (self.ignored, self.saved):
            if pkg in items:
                items.remove(pkg)
                found = True
        return found

    def is_package(self, pkg: str) -> bool:
        return self.commands.find_package(pkg)

    def install_missing(self, packages_to_install: Iterable[str] | None, no_confirm: bool) -> list[str]:
        """Install missing saved packages (all, or the chosen ones) and return them."""
        with _reraise("failed to get uninstalled packages", ManagerError):
            uninstalled = self.uninstalled()
        if packages_to_install is not None:
            chosen = list(packages_to_install)
            for pkg in chosen:
                if pkg not in uninstalled:
                    raise ManagerError(f"'{pkg}' is not in the list of available packages")
            uninstalled = _unique(chosen)
        result: list[str] = []
        for pkg in uninstalled:
            with _reraise("failed to install package", CommandError, completed=result):
                self.commands.install(pkg, no_confirm)
            result.append(pkg)
        return result

    def uninstall_surplus(self) -> list[str]:
        """Remove every installed package that is neither saved nor ignored."""
        with _reraise("failed to get surplus packages", ManagerError):
            surplus = self.surplus(True)
        result: list[str] = []
        for pkg in surplus:
            with _reraise("failed to uninstall package", CommandError, completed=result):
                self.commands.uninstall(pkg)
            result.append(pkg)
        return result

    def save_metafile(self) -> None:
        self.metafile.save()