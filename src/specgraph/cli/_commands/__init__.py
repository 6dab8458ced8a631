"""Specgraph CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import app as config_app
from ._context import CLIContext, OutputFormat
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    format_table,
    format_toml,
    format_yaml,
    get_error_console,
)
from ._spec import app as spec_app

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "config_app",
    "exit_with_error",
    "format_json",
    "format_table",
    "format_toml",
    "format_yaml",
    "get_error_console",
    "register_commands",
    "spec_app",
]


def register_commands(app: "App") -> None:
    app.command(config_app)
    app.command(spec_app)
