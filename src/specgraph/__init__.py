"""Specgraph: integrity engine for a corpus of dependent specifications."""

__version__ = "0.1.0"
