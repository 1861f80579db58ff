"""Forgiving INI reading with lookup queries, a streaming parser and a small demo."""

__version__ = "1.0.0"
__all__ = ["parser", "demo"]