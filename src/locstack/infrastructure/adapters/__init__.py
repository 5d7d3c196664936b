"""Adapters for the hosting shell."""

from .local_shell import LocalShellAdapter

__all__ = ["LocalShellAdapter"]
