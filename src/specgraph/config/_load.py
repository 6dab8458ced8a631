"""Loading configuration for the CLI without crashing on bad files."""

import os
import sys
from pathlib import Path

from specgraph.exceptions import ConfigError

from ._models import Config

STRICT_CONFIG_ENV = "SPECGRAPH_STRICT_CONFIG"


def _fall_back(reason: str, *, strict: bool) -> tuple[Config, str]:
    if strict:
        print(f"Error: {reason}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {reason}; using default configuration", file=sys.stderr)  # noqa: T201
    return Config.from_dict({}), reason


def safe_load_config(
    *,
    config_path: Path | None = None,
    project_root: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration, falling back to defaults on failure.

    A broken or invalid file prints a warning to stderr and yields the
    default configuration, so spec commands keep working. With
    ``SPECGRAPH_STRICT_CONFIG=1`` the process exits with status 1 instead.
    A ``--config`` file that does not exist always exits.

    Args:
        config_path: ``--config``; replaces file discovery when given.
        project_root: ``--project-root``.
        cli_overrides: Values from global options such as ``--log-level``.

    Returns:
        The configuration and the failure reason, or None on success.
    """
    strict = os.environ.get(STRICT_CONFIG_ENV, "0") == "1"

    if config_path is not None and not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        if config_path is not None:
            return Config.from_file(config_path), None
        return (
            Config.load(
                project_root=project_root,
                include_cli=cli_overrides is not None,
                cli_overrides=cli_overrides,
            ),
            None,
        )
    except ConfigError as e:
        return _fall_back(f"Failed to load config: {e}", strict=strict)
    except OSError as e:
        return _fall_back(f"Failed to read config: {e}", strict=strict)
