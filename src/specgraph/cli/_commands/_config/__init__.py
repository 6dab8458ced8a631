"""Config command app for inspecting specgraph configuration."""

# Import command modules to register commands with the app
from . import _read as _read, _validate as _validate
from ._app import app

__all__ = ["app"]
