# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, FBT002, PLR0913
"""Commands for checking and maintaining spec relationships.

``link`` and ``unlink`` edit the ``depends_on`` list in a spec's frontmatter,
``check`` reports sequence number collisions, ``validate`` runs every
validator over the corpus, and ``deps`` shows the relationship graph around
one spec.
"""

from typing import Annotated

from cyclopts import Parameter

from specgraph.cli._commands._context import CLIContext, OutputFormat
from specgraph.cli._commands._shared import exit_with_error
from specgraph.exceptions import SpecError
from specgraph.spec import CheckMode, DepsMode, render_conflict_report

from ._app import app
from ._errors import EXIT_SUCCESS, EXIT_VALIDATION_ERROR, exit_code_for_exception
from ._helpers import (
    get_error_console,
    get_spec_manager,
    output_result,
    print_preflight_warning,
    split_references,
)
from ._output import (
    format_dependency_view,
    format_link_result,
    format_unlink_result,
    format_validation_table,
)

__all__ = ["check", "deps", "link", "unlink", "validate"]


@app.command(name="link")
def link(
    spec: str,
    /,
    *,
    depends_on: Annotated[
        list[str] | None,
        Parameter(
            name=["--depends-on", "-d"],
            help="Specs to depend on (repeatable, or comma-separated)",
        ),
    ] = None,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Add dependencies to a specification

    Args:
        spec: Spec to update (name, number, or name without number).
        depends_on: Specs it should depend on.
        format_: Output format.
    """
    console = get_error_console()

    try:
        manager = get_spec_manager()
        result = manager.link(spec, split_references(depends_on))
    except (SpecError, ValueError, OSError) as e:
        exit_with_error(str(e), exit_code_for_exception(e), console=console)

    digits = manager.config.sequence_digits
    print_preflight_warning(result.conflicts, digits=digits, console=console)
    for cycle in result.cycles:
        console.print(f"[yellow]Warning:[/yellow] {cycle.message}", highlight=False)

    print(output_result(result.to_dict(), format_, lambda: format_link_result(result)))


@app.command(name="unlink")
def unlink(
    spec: str,
    /,
    *,
    depends_on: Annotated[
        list[str] | None,
        Parameter(
            name=["--depends-on", "-d"],
            help="Dependencies to remove (repeatable, or comma-separated)",
        ),
    ] = None,
    all_: Annotated[
        bool,
        Parameter(name=["--all"], negative="", help="Remove every dependency"),
    ] = False,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Remove dependencies from a specification

    Args:
        spec: Spec to update.
        depends_on: Dependencies to remove.
        all_: Remove every declared dependency.
        format_: Output format.
    """
    console = get_error_console()

    try:
        manager = get_spec_manager()
        result = manager.unlink(spec, split_references(depends_on), remove_all=all_)
    except (SpecError, ValueError, OSError) as e:
        exit_with_error(str(e), exit_code_for_exception(e), console=console)

    digits = manager.config.sequence_digits
    print_preflight_warning(result.conflicts, digits=digits, console=console)

    print(output_result(result.to_dict(), format_, lambda: format_unlink_result(result)))


@app.command(name="check")
def check(
    *,
    quiet: Annotated[
        bool,
        Parameter(name=["--quiet", "-q"], negative="", help="Only print a warning line"),
    ] = False,
    silent: Annotated[
        bool,
        Parameter(name=["--silent"], negative="", help="Print nothing, exit code only"),
    ] = False,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Check for sequence number conflicts

    Exits with 2 when two or more specs share a sequence number.

    Args:
        quiet: Print a single warning line instead of the full report.
        silent: Print nothing.
        format_: Output format.
    """
    console = get_error_console()

    try:
        manager = get_spec_manager()
        report = manager.check()
    except (SpecError, OSError) as e:
        exit_with_error(str(e), exit_code_for_exception(e), console=console)

    if silent:
        mode = CheckMode.SILENT
    elif quiet or CLIContext.get_current().quiet:
        mode = CheckMode.QUIET
    else:
        mode = CheckMode.FULL

    digits = manager.config.sequence_digits
    output = (
        ""
        if mode is CheckMode.SILENT
        else output_result(
            report.to_dict(), format_, lambda: render_conflict_report(report, mode, digits=digits)
        )
    )

    if output:
        print(output)

    raise SystemExit(EXIT_VALIDATION_ERROR if report.conflicts else EXIT_SUCCESS)


@app.command(name="validate")
def validate(
    spec: str | None = None,
    /,
    *,
    no_cross_references: Annotated[
        bool,
        Parameter(
            name=["--no-cross-references"],
            negative="",
            help="Skip comparing prose dependency mentions with frontmatter",
        ),
    ] = False,
    no_dependencies: Annotated[
        bool,
        Parameter(
            name=["--no-dependencies"],
            negative="",
            help="Skip dependency and sequence checks",
        ),
    ] = False,
    strict: Annotated[
        bool,
        Parameter(name=["--strict"], negative="", help="Treat warnings as errors"),
    ] = False,
    warnings_only: Annotated[
        bool,
        Parameter(
            name=["--warnings-only"],
            negative="",
            help="Report errors without failing the exit code",
        ),
    ] = False,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Validate specifications

    Validates every spec, or only SPEC when given. Exits with 2 when any
    spec has errors, or warnings under --strict.

    Args:
        spec: Spec to validate. All specs when omitted.
        no_cross_references: Skip the prose cross-check.
        no_dependencies: Skip dependency and sequence checks.
        strict: Treat warnings as errors.
        warnings_only: Never fail because of findings.
        format_: Output format.
    """
    console = get_error_console()

    try:
        manager = get_spec_manager()
        summary = manager.validate(
            spec,
            check_cross_references=False if no_cross_references else None,
            check_dependencies=not no_dependencies,
            strict=strict,
        )
    except (SpecError, OSError) as e:
        exit_with_error(str(e), exit_code_for_exception(e), console=console)

    print(output_result(summary.to_dict(), format_, lambda: format_validation_table(summary)))

    failed = summary.error_count > 0 or (strict and summary.warning_count > 0)
    if failed and not warnings_only:
        raise SystemExit(EXIT_VALIDATION_ERROR)
    raise SystemExit(EXIT_SUCCESS)


@app.command(name="deps")
def deps(
    spec: str,
    /,
    *,
    mode: Annotated[
        DepsMode,
        Parameter(name=["--mode", "-m"], help="Traversal mode"),
    ] = DepsMode.COMPLETE,
    depth: Annotated[
        int,
        Parameter(name=["--depth"], help="Maximum depth for transitive modes"),
    ] = 3,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Show dependencies of a specification

    Args:
        spec: Spec to inspect.
        mode: complete, upstream, downstream, or impact.
        depth: Maximum depth for the transitive modes.
        format_: Output format.
    """
    console = get_error_console()

    try:
        manager = get_spec_manager()
        view = manager.deps(spec, mode, depth)
    except (SpecError, ValueError, OSError) as e:
        exit_with_error(str(e), exit_code_for_exception(e), console=console)

    print(output_result(view.to_dict(), format_, lambda: format_dependency_view(view)))
