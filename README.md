# dotman

A comprehensive environment manager.

- Keep a list of the system packages you want on every machine, and of the ones you want to ignore
- See which saved packages are missing and which installed packages are surplus
- Keep those lists in a plain TOML file you can commit alongside your dotfiles

## Installation

```
pip install .
```

## Command line

Print the version:

```
dotman version
```

Show the available commands:

```
dotman --help
```

Run with no command, `dotman` prints the same help.

## Configuration

`dotman.config.Config` looks in `$HOME/.config/dotman`, then `/etc/dotman`,
then the current directory, for a TOML file named `dotman.conf.toml` or
`dotman.conf`. The first one found is used. Keys are matched without regard
to case, and the file must set a non-empty `giturl`:

```toml
giturl = "git@example.com:me/dotfiles.git"
```

`Config(search_paths, name)` can be pointed at other directories or another
file name; `load()` reads and validates the file. `dotman.config.get_config()`
loads the default configuration once and returns the same `Config` on every
later call. A missing or malformed file, or an empty `giturl`, raises
`ConfigError`.

Settings are exposed through `dotman.value.StringValue`, which returns its
fallback when the stored value is empty, trims values passed to `set`, and
refuses an empty value when it is required.

## Package lists

A package metafile is a TOML file with two lists:

```toml
Saved = ["git", "neovim"]
Ignored = ["linux-firmware"]
```

`dotman.metafile.PackagesMetafile(path)` reads such a file on creation (a
missing file is treated as empty) and exposes the lists as
`content.saved` and `content.ignored`:

- `to_saved(pkg)` – add to the saved list and drop from the ignored list
- `to_ignored(pkg)` – add to the ignored list and drop from the saved list
- `to_saved_index(pkg, index)` – move a package to a position in the saved list
- `save()` – write the file back

Read and write failures raise `MetafileError`.

## Managing packages

`dotman.manager.PackagesManager(metafile, commands)` combines a metafile with
an object that follows the `dotman.manager.Commands` protocol: `installed()`,
`find_package(pkg)`, `install(pkg, no_confirm)` and `uninstall(pkg)`.

- `installed(filter_ignored)` – packages currently on the system, optionally without ignored ones
- `surplus(filter_ignored)` – installed but not saved
- `uninstalled()` – saved but not installed
- `to_saved(pkg)`, `to_ignored(pkg, force)`, `to_saved_index(pkg, index)` – check the package and update the metafile
- `remove_from_metafile(pkg)` – drop a package from both lists
- `install_missing(packages_to_install, no_confirm)` – install the given missing packages, or all of them when `None` is passed
- `uninstall_surplus()` – remove installed packages that are neither saved nor ignored
- `save_metafile()` – write the metafile

Failures raise `ManagerError`; its `completed` attribute lists the packages
that were installed or removed before the failure.

`dotman.bashcmd.BashCmd` runs external commands: `execute` streams their
output in colour through an `IOWriter`, `execute_output` returns the combined
output, and both raise `CommandError` when a command cannot start or exits
with a non-zero status.

## What it does not do

The package ships no `Commands` implementation for any particular package
tool; you supply one, for example built on `BashCmd`. The command line offers
only `version`: listing, saving, ignoring, installing and removing packages
are available from Python, not as commands. Nothing is done with `giturl`
beyond reading and validating it, so dotfiles are not synced, backed up or
restored.

## Running the tests

```
pip install ".[test]"
pytest
```