"""Configuration models.

This module provides Pydantic models for specgraph configuration sections
and the main Config container class.
"""

from specgraph.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from specgraph.config._models._config import Config
from specgraph.config._models._logging import LoggingConfig
from specgraph.config._models._spec import SpecConfiguration

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SpecConfiguration",
]
