# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""The merged configuration object handed to commands."""

from pathlib import Path
from typing import Any, ClassVar, Self, TypeVar, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from specgraph.config._defaults import DEFAULT_CONFIG
from specgraph.config._loader import copy_value, deep_merge, parse_env_vars, read_toml_file
from specgraph.config._models._common import ConfigSource, ConfigSourceName
from specgraph.config._models._logging import LoggingConfig
from specgraph.config._models._spec import SpecConfiguration

T = TypeVar("T")


class Config(BaseModel):
    """Typed, read-only view over the merged configuration.

    The ``logging`` and ``spec`` sections are validated models. The raw
    merged mapping is kept alongside them so unknown keys survive for
    ``get`` and ``config show``. Build instances with ``from_dict``,
    ``from_file`` or ``load``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    spec: SpecConfiguration = Field(default_factory=SpecConfiguration)

    _data: dict[str, Any] = PrivateAttr(default_factory=lambda: copy_value(DEFAULT_CONFIG))
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def _from_merged(
        cls,
        merged: dict[str, Any],
        sources: tuple[ConfigSource, ...] = (),
        *,
        source: str | None = None,
    ) -> Self:
        from specgraph.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        raise_if_validation_errors(validate_config(merged), source=source)

        config = cls(
            logging=LoggingConfig.model_validate(merged.get("logging", {})),
            spec=SpecConfiguration.model_validate(merged.get("spec", {})),
        )
        config._data = merged
        config._sources = sources
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Layer ``data`` over the defaults.

        Raises:
            ConfigValidationError: If a value is out of range or of the wrong type.
        """
        return cls._from_merged(deep_merge(DEFAULT_CONFIG, data))

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Layer a single TOML file over the defaults.

        Used for ``--config``, which replaces discovery entirely.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file is not valid TOML.
            ConfigValidationError: If a value is invalid.
        """
        values = read_toml_file(path)
        loaded = ConfigSource(name=ConfigSourceName.PROJECT, path=path, exists=True, values=values)
        return cls._from_merged(
            deep_merge(DEFAULT_CONFIG, values), (loaded,), source=str(path)
        )

    @classmethod
    def load(
        cls,
        *,
        project_root: Path | None = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Discover every source and merge them.

        Precedence, lowest first: defaults, user file, project file, local
        file, ``SPECGRAPH_*`` environment variables, CLI overrides.

        Args:
            project_root: Directory holding ``.specgraph/``. Searched upward
                from the working directory when None.
            include_env: Read ``SPECGRAPH_*`` environment variables.
            include_cli: Apply ``cli_overrides``.
            cli_overrides: Nested overrides from command-line options.

        Raises:
            ConfigLoadError: If a config file is not valid TOML.
            ConfigValidationError: If the merged result is invalid.
        """
        from specgraph.config._discovery import discover_sources  # noqa: PLC0415

        discovered = discover_sources(
            project_root=project_root,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded: list[ConfigSource] = []
        for source in reversed(discovered):
            values = _read_source(source)
            loaded.append(
                ConfigSource(
                    name=source.name, path=source.path, exists=source.exists, values=values
                )
            )
            merged = deep_merge(merged, values)

        return cls._from_merged(merged, tuple(reversed(loaded)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Sources that were consulted, highest precedence first."""
        return list(self._sources)

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by dotted key, e.g. ``"spec.sequence_digits"``.

        Examples:
            >>> config.get("logging.level")
            'info'
            >>> config.get("spec.colour", "none")
            'none'
        """
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def to_dict(self, *, include_defaults: bool = True) -> dict[str, Any]:
        """Return a copy of the merged values.

        With ``include_defaults=False`` only values that differ from the
        built-in defaults are kept.
        """
        if include_defaults:
            return copy_value(self._data)
        return _without_defaults(self._data, DEFAULT_CONFIG)

    def to_toml(self, *, include_defaults: bool = False) -> str:
        return tomli_w.dumps(self.to_dict(include_defaults=include_defaults))


def _read_source(source: ConfigSource) -> dict[str, Any]:
    match source.name:
        case ConfigSourceName.DEFAULT | ConfigSourceName.CLI:
            return source.values
        case ConfigSourceName.ENV:
            return parse_env_vars()
        case _ if source.exists and source.path is not None:
            return read_toml_file(source.path)
        case _:
            return {}


def _without_defaults(data: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    changed: dict[str, Any] = {}
    for key, value in data.items():
        default = defaults.get(key)
        if isinstance(value, dict) and isinstance(default, dict):
            nested = _without_defaults(value, default)
            if nested:
                changed[key] = nested
        elif key not in defaults or value != default:
            changed[key] = copy_value(value)
    return changed
