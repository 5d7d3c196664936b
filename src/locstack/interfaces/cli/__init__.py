"""Command line interface."""

from .main import cli, create_main_cli, main

__all__ = ["cli", "create_main_cli", "main"]
