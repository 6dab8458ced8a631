"""Exceptions raised by specgraph.

Everything derives from ``SpecgraphError``. Configuration problems raise
``ConfigError`` subclasses; problems with the spec corpus raise ``SpecError``
subclasses, which the CLI maps onto exit codes.
"""

from pathlib import Path
from typing import Any


class SpecgraphError(Exception):
    """Root of the specgraph exception hierarchy."""


class ConfigError(SpecgraphError):
    """A configuration source could not be used."""


class ConfigLoadError(ConfigError):
    """A configuration file exists but is not valid TOML.

    Attributes:
        path: The offending file.
        line: 1-based line of the syntax error, when known.
        column: 1-based column of the syntax error, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """A configuration value is out of range or of the wrong type.

    Attributes:
        key: Dotted key, e.g. ``spec.sequence_digits``.
        value: The rejected value.
        expected: The violated constraint or pydantic's message.
        source: Source the value came from, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Spec Corpus
# =============================================================================


class SpecError(SpecgraphError):
    """A spec operation failed."""


class SpecIOError(SpecError):
    """A spec document could not be read or written.

    Attributes:
        path: The document.
        operation: ``"read"`` or ``"write"``.
        cause: The ``OSError`` or serialization error behind it.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path = path
        self.operation: str = operation
        self.cause: Exception | None = cause


class SpecParseError(SpecError):
    """A spec document's frontmatter is not a YAML mapping.

    Attributes:
        path: The document.
        line: Line of the YAML error, when known.
        content_type: What was being parsed, e.g. ``"frontmatter"``.
        cause: The underlying YAML error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        content_type: str,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path = path
        self.content_type: str = content_type
        self.line: int | None = line
        self.cause: Exception | None = cause


class SpecNotFoundError(SpecError, KeyError):
    """A spec reference matched no spec in the corpus.

    Attributes:
        spec_id: The reference as typed.
    """

    def __init__(self, message: str, *, spec_id: str | None = None) -> None:
        super().__init__(message)
        self.spec_id: str | None = spec_id

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0]) if self.args else ""


class SpecValidationError(SpecError, ValueError):
    """A requested change was rejected before anything was written.

    Attributes:
        spec_id: Spec the change targeted, if resolved.
        field: Field or option at fault, e.g. ``depends_on`` or ``depth``.
        value: The rejected value.
    """

    def __init__(
        self,
        message: str,
        *,
        spec_id: str | None = None,
        field: str | None = None,
        value: Any = None,  # pyright: ignore[reportAny,reportExplicitAny]
    ) -> None:
        super().__init__(message)
        self.spec_id: str | None = spec_id
        self.field: str | None = field
        self.value: Any = value  # pyright: ignore[reportExplicitAny]


class SelfReferenceError(SpecValidationError):
    """A spec was asked to depend on itself."""

    def __init__(self, message: str, *, spec_id: str | None = None) -> None:
        super().__init__(message, spec_id=spec_id, field="depends_on", value=spec_id)
