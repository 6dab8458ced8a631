# pyright: reportAny=false
"""Output formatters for spec commands."""

from typing import Any

from specgraph.cli._commands._shared import format_table
from specgraph.spec import (
    DependencyView,
    DepsMode,
    LinkResult,
    UnlinkResult,
    ValidationSummary,
)

# Type alias for spec data - uses Any to match library signatures
type SpecData = dict[str, Any]  # pyright: ignore[reportExplicitAny]

_ARROW = " → "


def format_link_result(result: LinkResult) -> str:
    """Format a link result as status lines."""
    if not result.changed:
        return "Dependencies already exist, no changes made"

    lines = [f"Added dependencies to {result.spec_id}: {', '.join(result.added)}"]
    if result.skipped:
        lines.append(f"Already linked: {', '.join(result.skipped)}")
    lines.extend(f"Warning: {cycle.message}" for cycle in result.cycles)
    return "\n".join(lines)


def format_unlink_result(result: UnlinkResult) -> str:
    """Format an unlink result as status lines."""
    lines: list[str] = []
    if result.changed:
        lines.append(f"Removed dependencies from {result.spec_id}: {', '.join(result.removed)}")
    else:
        lines.append("No matching dependencies, no changes made")
    if result.not_found:
        lines.append(f"Not linked: {', '.join(result.not_found)}")
    return "\n".join(lines)


def format_validation_table(summary: ValidationSummary) -> str:
    """Format validation findings as a table followed by a totals line.

    Args:
        summary: The validation summary.

    Returns:
        Markdown table of findings, or a one-line pass message.
    """
    total = len(summary.reports)
    if summary.error_count == 0 and summary.warning_count == 0:
        return f"All {total} spec(s) passed validation"

    headers = ["Spec", "Severity", "Category", "Line", "Message"]
    rows: list[list[str]] = []
    for report in summary.reports:
        for finding in report.findings:
            message = finding.message
            if finding.suggestion:
                message = f"{message} ({finding.suggestion})"
            rows.append(
                [
                    report.spec_id or "",
                    finding.severity.value,
                    finding.category,
                    "" if finding.line is None else str(finding.line),
                    message,
                ]
            )

    totals = (
        f"Validated {total} spec(s): "
        f"{summary.error_count} error(s), {summary.warning_count} warning(s)"
    )
    return f"{format_table(headers, rows)}\n{totals}"


def format_dependency_view(view: DependencyView) -> str:
    """Format a dependency view as a table of relationships.

    Complete mode lists direct edges; the transitive modes list everything
    reachable within the depth limit.
    """
    depends_label = "depends on" if view.mode is DepsMode.COMPLETE else "upstream"
    required_label = "required by" if view.mode is DepsMode.COMPLETE else "downstream"

    rows = [[depends_label, spec_id] for spec_id in view.depends_on]
    rows.extend([required_label, spec_id] for spec_id in view.required_by)
    rows.extend(["missing", reference] for reference in view.missing)

    title = f"Dependencies for {view.spec_id} ({view.mode.value}"
    title += ")" if view.mode is DepsMode.COMPLETE else f", depth {view.depth})"

    lines = [title, ""]
    if rows:
        lines.append(format_table(["Relationship", "Spec"], rows))
    else:
        lines.append("No dependencies or relationships")
    for cycle in view.cycles:
        lines.append(f"Warning: Circular dependency: {_ARROW.join(cycle)}")
    return "\n".join(lines)
