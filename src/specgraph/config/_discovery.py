"""Locating the project and its configuration files."""

from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName

PROJECT_MARKER = ".specgraph"
PROJECT_CONFIG_FILE = "specgraph.toml"
LOCAL_CONFIG_FILE = "specgraph.local.toml"


def find_project_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above ``start`` holding ``.specgraph/``.

    ``start`` defaults to the working directory. Returns None when no
    ancestor has the marker.
    """
    here = (start or Path.cwd()).resolve()
    return next(
        (path for path in (here, *here.parents) if (path / PROJECT_MARKER).is_dir()), None
    )


def get_user_config_path() -> Path:
    r"""Per-user config file, whether or not it exists.

    ``~/.config/specgraph/config.toml`` on Linux,
    ``~/Library/Application Support/specgraph/config.toml`` on macOS and
    ``%APPDATA%\specgraph\config.toml`` on Windows.
    """
    return platformdirs.user_config_path("specgraph") / "config.toml"


def _file_source(name: ConfigSourceName, path: Path) -> ConfigSource:
    try:
        exists = path.is_file()
    except OSError:
        exists = False
    return ConfigSource(name=name, path=path, exists=exists, values={})


def discover_sources(
    project_root: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """List configuration sources, highest precedence first.

    File sources are listed whether or not the file exists, with ``exists``
    telling which. Their values are read later by ``Config.load``. Project
    and local files are omitted when there is no project root.

    Args:
        project_root: Directory holding ``.specgraph/``. Found with
            ``find_project_root`` when None.
        include_env: List the environment as a source.
        include_cli: List command-line overrides as a source.
        cli_overrides: Values for the CLI source.

    Examples:
        >>> [s.name.value for s in discover_sources(Path("/repo"), include_env=False)]
        ['local', 'project', 'user', 'default']
    """
    sources: list[ConfigSource] = []
    if include_cli:
        overrides = cli_overrides or {}
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI, path=None, exists=bool(overrides), values=overrides
            )
        )
    if include_env:
        sources.append(ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={}))

    root = project_root or find_project_root()
    if root is not None:
        marker = root / PROJECT_MARKER
        sources.append(_file_source(ConfigSourceName.LOCAL, marker / LOCAL_CONFIG_FILE))
        sources.append(_file_source(ConfigSourceName.PROJECT, marker / PROJECT_CONFIG_FILE))

    sources.append(_file_source(ConfigSourceName.USER, get_user_config_path()))
    sources.append(
        ConfigSource(name=ConfigSourceName.DEFAULT, path=None, exists=True, values=DEFAULT_CONFIG)
    )
    return sources
