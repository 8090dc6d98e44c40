"""CLI commands for slugsmith."""

from . import (
    generate,
    fetch,
    lists,
    config_cmd,
)

__all__ = [
    "generate",
    "fetch",
    "lists",
    "config_cmd",
]
