# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportExplicitAny=false, reportAny=false
# ruff: noqa: D415, A002
"""Read commands for viewing specgraph configuration."""

from typing import Annotated

from cyclopts import Parameter

from specgraph.cli._commands._context import CLIContext, OutputFormat
from specgraph.cli._commands._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    format_toml,
    format_yaml,
)

from ._app import app


def _filter_to_section(data: FormattableData, section: str) -> FormattableData | None:
    """Filter config data to a specific section.

    Args:
        data: The full configuration dictionary.
        section: The section name (e.g., "logging", "spec").

    Returns:
        The section dict, or None if not found.
    """
    if section in data and isinstance(data[section], dict):
        return {section: data[section]}
    return None


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)"),
    ] = OutputFormat.TOML,
    section: Annotated[
        str | None,
        Parameter(name=["--section"], help="Show specific section only (e.g., logging, spec)"),
    ] = None,
    no_defaults: Annotated[
        bool,
        Parameter(name="--no-defaults", negative="", help="Exclude default values"),
    ] = False,
) -> None:
    """Show the effective configuration

    Args:
        format: Output format.
        section: Only show this top-level section.
        no_defaults: Only show values that differ from the defaults.
    """
    ctx = CLIContext.get_current()
    data = ctx.config.to_dict(include_defaults=not no_defaults)

    if section is not None:
        filtered = _filter_to_section(data, section)
        if filtered is None:
            exit_with_error(f"Unknown section: {section}", ExitCode.NOT_FOUND)
        data = filtered

    if format == OutputFormat.JSON:
        print(format_json(data))
    elif format == OutputFormat.YAML:
        print(format_yaml(data), end="")
    else:
        print(format_toml(data), end="")
