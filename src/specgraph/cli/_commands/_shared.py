# pyright: reportExplicitAny=false
"""Output formatting and exit helpers used by every command group."""

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Never

if TYPE_CHECKING:
    from rich.console import Console

# Structured command output, as produced by the result types' to_dict().
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "format_table",
    "format_toml",
    "format_yaml",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Process exit codes shared by all commands."""

    SUCCESS = 0
    NOT_FOUND = 1
    VALIDATION_ERROR = 2
    CANCELLED = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    import orjson

    return orjson.dumps(data, option=orjson.OPT_INDENT_2 if indent else 0).decode("utf-8")


def format_yaml(data: FormattableData) -> str:
    """Render ``data`` as block-style YAML, keeping key order."""
    import yaml

    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def format_toml(data: FormattableData) -> str:
    import tomli_w

    return tomli_w.dumps(data)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Render rows as a Markdown table with one space of cell padding."""
    from pytablewriter import MarkdownTableWriter

    return MarkdownTableWriter(headers=headers, value_matrix=rows, margin=1).dumps()


def get_error_console() -> "Console":
    """Console bound to stderr, for errors and warnings."""
    from rich.console import Console

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: int = ExitCode.INTERNAL_ERROR,
    *,
    console: "Console | None" = None,
) -> Never:
    """Print ``Error: <message>`` to stderr and exit.

    The message is escaped, so brackets in spec names or paths print
    literally.

    Raises:
        SystemExit: Always, with ``code``.
    """
    from rich.markup import escape

    (console or get_error_console()).print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)
