"""Shared utilities for specgraph."""

from ._logging import create_cli_logger, create_null_logger
from ._paths import (
    get_project_root,
    get_specgraph_cli_log_file,
    get_specgraph_dir,
    get_specgraph_log_dir,
    get_specs_dir,
)

__all__ = [
    "create_cli_logger",
    "create_null_logger",
    "get_project_root",
    "get_specgraph_cli_log_file",
    "get_specgraph_dir",
    "get_specgraph_log_dir",
    "get_specs_dir",
]
