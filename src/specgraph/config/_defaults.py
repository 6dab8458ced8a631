"""Default configuration values.

DEFAULT_CONFIG is a plain dict for type compatibility with deep_merge. The
merge functions create copies, so the original is never mutated.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "spec": {
        "specs_dir": "specs",
        "default_file": "README.md",
        "sequence_digits": 3,
        "auto_check": True,
        "check_cross_references": True,
        "include_archived": True,
        "required_fields": [],
        "required_sections": [],
        "check_heading_hierarchy": False,
        "warn_lines": 300,
        "max_lines": 400,
    },
}
