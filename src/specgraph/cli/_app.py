"""The ``specgraph`` command-line application."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from specgraph.config import LogLevel, safe_load_config
from specgraph.utils import create_cli_logger

from ._commands import register_commands
from ._commands._context import CLIContext

APP_NAME = "specgraph"
APP_HELP = "Keep a folder of specifications consistent: dependencies, cycles, and numbering."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Build the application.

    Global options are handled by a meta app, which loads configuration,
    opens the log file and installs the ``CLIContext`` before dispatching
    the remaining tokens. Tests pass their own consoles to capture help and
    parse errors.
    """
    app = App(
        name=APP_NAME,
        help=APP_HELP,
        help_on_error=True,
        console=console or Console(),
        error_console=error_console or Console(stderr=True),
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Use only this config file")
        ] = None,
        project_root: Annotated[
            Path | None, Parameter(name="--project-root", help="Directory holding .specgraph/")
        ] = None,
        log_level: Annotated[
            LogLevel | None, Parameter(name="--log-level", help="Override logging.level")
        ] = None,
    ) -> None:
        """Run a specgraph command.

        Args:
            tokens: The command and its arguments.
            verbose: Enable verbose output.
            quiet: Suppress non-essential output.
            no_color: Disable colored output.
            config: Read configuration from this file only.
            project_root: Project directory; found by searching upward otherwise.
            log_level: Log level for this invocation.
        """
        overrides = None if log_level is None else {"logging": {"level": log_level.value}}
        loaded, config_error = safe_load_config(
            config_path=config, project_root=project_root, cli_overrides=overrides
        )
        logging_config = loaded.logging

        CLIContext.set_current(
            CLIContext(
                config=loaded,
                verbose=verbose,
                quiet=quiet,
                no_color=no_color,
                project_root=project_root,
                config_error=config_error,
                logger=create_cli_logger(
                    level=logging_config.level.value,
                    log_format=logging_config.format.value,  # type: ignore[arg-type]
                    log_file=logging_config.file,
                    project_root=project_root,
                ),
            )
        )
        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Entry point of the ``specgraph`` script."""
    create_app()()
