"""Helper functions for spec commands."""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from specgraph.cli._commands._context import CLIContext, OutputFormat
from specgraph.cli._commands._shared import (
    format_json,
    format_toml,
    format_yaml,
    get_error_console,
)
from specgraph.spec import CheckMode, ConflictReport, SpecManager, render_conflict_report

from ._output import SpecData

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "get_error_console",
    "get_spec_manager",
    "output_result",
    "print_preflight_warning",
    "split_references",
]


def get_spec_manager() -> SpecManager:
    """Get a SpecManager configured from the current CLIContext.

    The specs directory comes from the ``[spec]`` configuration section and
    is resolved against ``--project-root`` when given, otherwise against the
    discovered project root.

    Returns:
        A configured SpecManager instance.
    """
    ctx = CLIContext.get_current()
    return SpecManager.from_config(
        ctx.config.spec,
        project_root=ctx.project_root,
        logger=ctx.logger,
    )


def split_references(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma-separated spec references.

    ``--depends-on 001,002 --depends-on 003`` yields ``["001", "002", "003"]``.
    """
    if not values:
        return []
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


def output_result(
    data: SpecData,
    output_format: OutputFormat,
    table: Callable[[], str],
) -> str:
    """Dispatch output formatting based on format enum.

    Args:
        data: The structured result, echoed as-is for machine formats.
        output_format: The output format to use.
        table: Renderer for the human-readable formats.

    Returns:
        Formatted string representation.
    """
    if output_format == OutputFormat.JSON:
        return format_json(data)
    if output_format == OutputFormat.YAML:
        return format_yaml(data)
    if output_format == OutputFormat.TOML:
        return format_toml(data)
    return table()


def print_preflight_warning(
    report: ConflictReport | None,
    *,
    digits: int,
    console: "Console",
) -> None:
    """Print the quiet conflict warning collected before a mutation."""
    if report is None:
        return
    warning = render_conflict_report(report, CheckMode.QUIET, digits=digits)
    if warning:
        console.print(f"[yellow]{warning}[/yellow]", highlight=False)
