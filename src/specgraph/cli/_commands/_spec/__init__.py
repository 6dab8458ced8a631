# pyright: reportUnusedImport=false
"""Commands for specification relationship management."""

# Import porcelain commands to register them with the app
from . import _porcelain  # noqa: F401
from ._app import app
from ._errors import exit_code_for_exception
from ._helpers import get_spec_manager, split_references
from ._output import (
    SpecData,
    format_dependency_view,
    format_link_result,
    format_unlink_result,
    format_validation_table,
)

__all__ = [
    "SpecData",
    "app",
    "exit_code_for_exception",
    "format_dependency_view",
    "format_link_result",
    "format_unlink_result",
    "format_validation_table",
    "get_spec_manager",
    "split_references",
]
