from pathlib import Path

from specgraph.config._discovery import PROJECT_MARKER, find_project_root


def get_project_root(start: Path | None = None) -> Path:
    """Get the project root, falling back to the working directory."""
    root = find_project_root(start)
    return root if root is not None else (start or Path.cwd()).resolve()


def get_specgraph_dir(project_root: Path | None = None) -> Path:
    """Get the path to the .specgraph/ directory of the project."""
    return (project_root or get_project_root()) / PROJECT_MARKER


def get_specgraph_log_dir(project_root: Path | None = None) -> Path:
    """Get the path to the logs/ directory inside .specgraph/."""
    return get_specgraph_dir(project_root) / "logs"


def get_specgraph_cli_log_file(project_root: Path | None = None) -> Path:
    """Get the path to the CLI log file inside .specgraph/logs/."""
    return get_specgraph_log_dir(project_root) / "cli.log"


def get_specs_dir(specs_dir: str, project_root: Path | None = None) -> Path:
    """Resolve the configured specs directory against the project root.

    Args:
        specs_dir: Configured directory, absolute or relative to the root.
        project_root: Project root; discovered when not given.

    Returns:
        Absolute path to the specs directory (may not exist yet).
    """
    path = Path(specs_dir).expanduser()
    if path.is_absolute():
        return path
    return (project_root or get_project_root()) / path
