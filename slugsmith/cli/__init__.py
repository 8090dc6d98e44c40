"""Command-line interface for slugsmith."""

from .app import app

__all__ = ["app"]


def main() -> None:
    app()
