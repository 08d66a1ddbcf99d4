"""Typed JSON values with strict UTF-8 strings, copying, equality and merging."""

__version__ = "0.1.0"
__all__ = ["utf", "strconv", "scalars", "containers"]