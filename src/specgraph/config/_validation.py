# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownParameterType=false, reportUnknownVariableType=false
"""Checking configuration mappings against the section models.

Lenient checks ignore unknown keys, matching how configuration is loaded.
Strict checks, used by ``config validate --strict``, report them.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import ErrorDetails

from specgraph.config._models._common import ConfigSource
from specgraph.config._models._logging import LoggingConfig
from specgraph.config._models._spec import SpecConfiguration
from specgraph.exceptions import ConfigValidationError


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A problem with one configuration key.

    Attributes:
        key: Dotted key, e.g. ``"spec.sequence_digits"``.
        message: What is wrong, as pydantic phrased it.
        expected: Constraint that was violated, when pydantic reports one.
        actual: The offending value.
        source: Name of the source the value came from, if known.
        severity: ``"error"`` or ``"warning"``.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    source: str | None
    severity: Literal["error", "warning"]


class ConfigSchema(BaseModel):
    """Root schema; unknown sections and keys are ignored."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    spec: SpecConfiguration = SpecConfiguration()


class _StrictLogging(LoggingConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class _StrictSpec(SpecConfiguration):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ConfigSchemaStrict(BaseModel):
    """Root schema that rejects unknown sections and keys."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    logging: _StrictLogging = _StrictLogging()
    spec: _StrictSpec = _StrictSpec()


def _schema(*, strict: bool) -> type[BaseModel]:
    return ConfigSchemaStrict if strict else ConfigSchema


def _expected(error: ErrorDetails) -> str | None:
    ctx = error.get("ctx") or {}
    if "expected" in ctx:
        return str(ctx["expected"])
    bounds = [f"{name} {ctx[name]}" for name in ("ge", "le") if name in ctx]
    if bounds:
        return ", ".join(bounds)
    if "pattern" in ctx:
        return f"pattern: {ctx['pattern']}"
    return None


def _issues(
    values: dict[str, Any], *, strict: bool, source: str | None
) -> Iterator[ValidationIssue]:
    try:
        _ = _schema(strict=strict).model_validate(values)
    except ValidationError as e:
        for error in e.errors():
            yield ValidationIssue(
                key=".".join(str(part) for part in error.get("loc", ())),
                message=str(error.get("msg", "Validation error")),
                expected=_expected(error),
                actual=error.get("input"),
                source=source,
                severity="error",
            )


def validate_config(config: dict[str, Any], *, strict: bool = False) -> list[ValidationIssue]:
    """Validate a merged configuration mapping.

    Returns:
        Every issue found; empty when the mapping is valid.
    """
    return list(_issues(config, strict=strict, source=None))


def validate_source(source: ConfigSource, *, strict: bool = False) -> list[ValidationIssue]:
    """Validate the values of one source on their own.

    Issues are tagged with the source name. Missing or empty sources are
    always valid.
    """
    if not source.exists or not source.values:
        return []
    return list(_issues(source.values, strict=strict, source=source.name.value))


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise for the first error-severity issue, if any.

    Args:
        issues: Issues from ``validate_config`` or ``validate_source``.
        source: Source to name in the exception; defaults to the issue's own.

    Raises:
        ConfigValidationError: If any issue is an error.
    """
    issue = next((issue for issue in issues if issue.severity == "error"), None)
    if issue is None:
        return
    msg = f"Invalid configuration value for '{issue.key}'"
    raise ConfigValidationError(
        msg,
        key=issue.key,
        value=issue.actual,
        expected=issue.expected or issue.message,
        source=source or issue.source,
    )


def get_config_schema(*, strict: bool = False) -> dict[str, Any]:
    """Return the JSON Schema of the configuration file format.

    Examples:
        >>> "spec" in get_config_schema()["properties"]
        True
    """
    return _schema(strict=strict).model_json_schema()
