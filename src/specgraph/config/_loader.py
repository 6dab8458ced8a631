# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Reading configuration layers and combining them."""

import os
import tomllib
from pathlib import Path
from typing import Any

import orjson

from specgraph.exceptions import ConfigLoadError

ENV_PREFIX = "SPECGRAPH_"
ENV_KEY_SEPARATOR = "__"


def read_toml_file(path: Path) -> dict[str, Any]:
    """Parse one TOML configuration file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        # lineno/colno only exist on Python 3.14+
        raise ConfigLoadError(
            msg, path=path, line=getattr(e, "lineno", None), column=getattr(e, "colno", None)
        ) from e


def copy_value(value: Any) -> Any:
    """Copy nested dicts and lists so callers cannot mutate shared state."""
    match value:
        case dict():
            return {key: copy_value(item) for key, item in value.items()}
        case list():
            return [copy_value(item) for item in value]
        case _:
            return value


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``override`` layered over ``base``.

    Tables merge key by key; every other value, lists included, is replaced
    whole. Keys keep the order of ``base`` with new keys appended. Neither
    argument is modified.
    """
    merged = copy_value(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy_value(value)
    return merged


def set_nested_key(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Assign ``value`` at a dotted path, creating tables along the way.

    Example:
        >>> data = {}
        >>> set_nested_key(data, "logging.level", "debug")
        >>> data
        {'logging': {'level': 'debug'}}
    """
    *parents, leaf = key_path.split(".")
    table = data
    for part in parents:
        child = table.get(part)
        if not isinstance(child, dict):
            child = table[part] = {}
        table = child
    table[leaf] = value


def parse_string_value(value: str) -> Any:
    """Interpret an environment variable value.

    ``true``/``false`` become booleans, numerals become ints or floats, and
    bracketed JSON becomes a list or dict. Anything else stays a string.

    Examples:
        >>> parse_string_value("42")
        42
        >>> parse_string_value('["owner"]')
        ['owner']
        >>> parse_string_value("v1.2")
        'v1.2'
    """
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"

    number = float if "." in value else int
    try:
        return number(value)
    except ValueError:
        pass

    if value[:1] + value[-1:] in {"[]", "{}"}:
        try:
            return orjson.loads(value)
        except orjson.JSONDecodeError:
            pass

    return value


def parse_env_vars(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect ``<prefix><SECTION>__<KEY>`` environment variables.

    ``SPECGRAPH_SPEC__SEQUENCE_DIGITS=4`` becomes
    ``{"spec": {"sequence_digits": 4}}``. Variables without a section
    separator, such as ``SPECGRAPH_DEBUG``, are process switches and are
    skipped.
    """
    values: dict[str, Any] = {}
    for name, raw in os.environ.items():
        if not name.startswith(prefix):
            continue
        key = name.removeprefix(prefix)
        if ENV_KEY_SEPARATOR not in key:
            continue
        dotted = key.replace(ENV_KEY_SEPARATOR, ".").lower()
        set_nested_key(values, dotted, parse_string_value(raw))
    return values
