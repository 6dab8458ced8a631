"""Shared test fixtures for specgraph tests."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

import pytest
import yaml
from rich.console import Console

from specgraph.cli._commands._context import CLIContext


@dataclass(frozen=True, slots=True)
class SpecProject:
    """Paths for a specgraph test project."""

    root: Path
    specgraph_dir: Path
    specs_dir: Path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's environment and user config out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SPECGRAPH_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "specgraph.config._discovery.get_user_config_path",
        lambda: Path("/nonexistent-specgraph-user/config.toml"),
    )
    yield
    CLIContext.reset()


@pytest.fixture
def spec_project(tmp_path: Path) -> SpecProject:
    """Create a project with a .specgraph/ marker and an empty specs/ folder.

    Structure:
        tmp_path/
            project/
                .specgraph/
                specs/
    """
    root = tmp_path / "project"
    specgraph_dir = root / ".specgraph"
    specgraph_dir.mkdir(parents=True)
    specs_dir = root / "specs"
    specs_dir.mkdir()
    return SpecProject(root=root, specgraph_dir=specgraph_dir, specs_dir=specs_dir)


# ---------------------------------------------------------------------------
# Helper functions for creating test specs
# ---------------------------------------------------------------------------


def write_spec(
    specs_dir: Path,
    name: str,
    *,
    depends_on: Sequence[str] | str | None = None,
    status: str | None = "planned",
    body: str = "",
    extra: dict[str, object] | None = None,
    archived: bool = False,
) -> Path:
    """Create a spec folder with a README.md.

    Args:
        specs_dir: The specs directory.
        name: Folder name, which is also the spec identifier.
        depends_on: Value written to the depends_on field, if any.
        status: Value of the status field, omitted when None.
        body: Markdown body. Defaults to a title line.
        extra: Additional frontmatter fields.
        archived: Create the spec under specs/archived/.

    Returns:
        Path to the created README.md.
    """
    frontmatter: dict[str, object] = {}
    if status is not None:
        frontmatter["status"] = status
    if depends_on is not None:
        frontmatter["depends_on"] = depends_on if isinstance(depends_on, str) else list(depends_on)
    if extra:
        frontmatter.update(extra)

    spec_dir = specs_dir / "archived" / name if archived else specs_dir / name
    spec_dir.mkdir(parents=True, exist_ok=True)
    path = spec_dir / "README.md"
    header = yaml.safe_dump(frontmatter, sort_keys=False) if frontmatter else ""
    path.write_text(f"---\n{header}---\n\n{body or f'# {name}'}\n", encoding="utf-8")
    return path


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
