from collections.abc import Callable, Iterator

import pytest
from rich.console import Console

from specgraph.cli import CLIContext, create_app
from specgraph.config import Config
from tests.conftest import SpecProject


@pytest.fixture(autouse=True)
def cli_context(spec_project: SpecProject) -> Iterator[CLIContext]:
    """Point commands at the test project with default configuration."""
    ctx = CLIContext(config=Config.from_dict({}), project_root=spec_project.root)
    CLIContext.set_current(ctx)
    yield ctx
    CLIContext.reset()


@pytest.fixture
def specgraph_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI and suppresses SystemExit.
    Use specgraph_cli_with_exit_code when you need to check the exit code.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        try:
            app(args)
        except SystemExit:
            pass

    return _run


@pytest.fixture
def specgraph_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
