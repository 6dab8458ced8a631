# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportExplicitAny=false, reportAny=false
# ruff: noqa: D415
"""Validate command for specgraph configuration files."""

from typing import Annotated

from cyclopts import Parameter

from specgraph.cli._commands._context import CLIContext, OutputFormat
from specgraph.cli._commands._shared import ExitCode, format_json, format_table
from specgraph.config import (
    ConfigSource,
    ConfigSourceName,
    ValidationIssue,
    discover_sources,
    read_toml_file,
    validate_source,
)
from specgraph.exceptions import ConfigLoadError

from ._app import app

# File-backed sources that can be validated
VALIDATABLE_SOURCES = (
    ConfigSourceName.PROJECT,
    ConfigSourceName.LOCAL,
    ConfigSourceName.USER,
)


def _issue_to_row(issue: ValidationIssue) -> list[str]:
    return [
        issue.source or "",
        issue.severity,
        issue.key,
        issue.message,
    ]


@app.command(name="validate")
def _validate(
    *,
    strict: Annotated[
        bool,
        Parameter(name=["--strict"], negative="", help="Treat unknown keys as errors"),
    ] = False,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Validate configuration files

    Checks the user, project, and local configuration files that exist.

    Args:
        strict: Treat unknown keys as errors.
        format_: Output format.
    """
    ctx = CLIContext.get_current()
    files = [
        (source.name, source.path)
        for source in discover_sources(ctx.project_root, include_env=False)
        if source.name in VALIDATABLE_SOURCES and source.exists and source.path is not None
    ]

    issues: list[ValidationIssue] = []
    for name, path in files:
        try:
            values = read_toml_file(path)
        except ConfigLoadError as e:
            issues.append(
                ValidationIssue(
                    key="",
                    message=f"Failed to parse file: {e}",
                    expected=None,
                    actual=None,
                    source=name.value,
                    severity="error",
                )
            )
            continue

        loaded = ConfigSource(name=name, path=path, exists=True, values=values)
        issues.extend(validate_source(loaded, strict=strict))

    if format_ == OutputFormat.JSON:
        data = {
            "valid": not issues,
            "sources": [str(path) for _, path in files],
            "issues": [
                {
                    "source": issue.source,
                    "severity": issue.severity,
                    "key": issue.key,
                    "message": issue.message,
                }
                for issue in issues
            ],
        }
        print(format_json(data))
    elif issues:
        rows = [_issue_to_row(issue) for issue in issues]
        print(format_table(["Source", "Severity", "Key", "Message"], rows))
    else:
        print(f"Configuration is valid ({len(files)} file(s) checked)")

    raise SystemExit(ExitCode.VALIDATION_ERROR if issues else ExitCode.SUCCESS)
