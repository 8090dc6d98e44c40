"""CLI utilities for dual-mode output (human-friendly + machine-readable).

This module provides utilities for CLI commands to support both:
- Human mode (default): Rich formatting for messages, names printed verbatim
- Machine mode (--json): Structured JSON output for scripts

Example:
    from ..utils import Output, ExitCode

    @app.command()
    def my_command():
        out = Output(console=console, json_mode=get_json_mode())
        out.success("Saved word list", path="names.txt", count=500)
        raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..errors import (
    DataSourceError,
    EmptyWordListError,
    InvalidArgumentError,
    SlugsmithError,
)


class ExitCode:
    """Standardized exit codes for CLI commands.

    Scripts can check $? and know exactly what failed:
        0 = Success
        1 = Invalid request (fix the arguments)
        3 = Word lists missing or unreadable (run `slugsmith fetch`)
        4 = A required word list is empty
        5 = Fetching word lists failed
    """

    SUCCESS = 0
    INVALID_ARGUMENT = 1
    DATA_NOT_FOUND = 3
    EMPTY_WORD_LIST = 4
    FETCH_ERROR = 5


def exit_code_for(exc: SlugsmithError, *, fetching: bool = False) -> int:
    """Map an error to its exit code."""
    if isinstance(exc, InvalidArgumentError):
        return ExitCode.INVALID_ARGUMENT
    if isinstance(exc, EmptyWordListError):
        return ExitCode.EMPTY_WORD_LIST
    if isinstance(exc, DataSourceError):
        return ExitCode.FETCH_ERROR if fetching else ExitCode.DATA_NOT_FOUND
    return ExitCode.INVALID_ARGUMENT


class Output(BaseModel):
    """Dual-mode output handler for CLI commands.

    In human mode: Uses Rich for terminal output.
    In JSON mode: Collects structured data and outputs JSON at the end.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    def success(self, message: str, **data: Any) -> None:
        """Output a success message with optional data."""
        if self.json_mode:
            self._data.update(data)
        else:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        """Output a warning message."""
        if self.json_mode:
            warning_obj: dict[str, Any] = {"message": message}
            if suggestion:
                warning_obj["suggestion"] = suggestion
            self._data["warnings"].append(warning_obj)
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {escape(suggestion)}[/dim]")

    def error(
        self,
        message: str,
        *,
        category: str | None = None,
        suggestion: str | None = None,
        exit_code: int = ExitCode.INVALID_ARGUMENT,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if category:
                error_obj["category"] = category
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {escape(message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {escape(suggestion)}[/dim]")

    def lines(self, key: str, items: list[str]) -> None:
        """Output items one per line, verbatim (no Rich markup or wrapping)."""
        if self.json_mode:
            self._data[key] = list(items)
        else:
            for item in items:
                self.console.print(
                    item, markup=False, highlight=False, soft_wrap=True
                )

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
    ) -> None:
        """Output a formatted table."""
        key = data_key or title.lower().replace(" ", "_")

        if self.json_mode:
            self._data[key] = [dict(zip(columns, row)) for row in rows]
        else:
            table = Table(title=title, show_header=True, header_style="bold")
            for i, col in enumerate(columns):
                table.add_column(col, justify="right" if i > 0 else "left")
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        """Set arbitrary data in JSON output."""
        self._data[key] = value

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        """
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))

        return self._exit_code


def setup_logging(console: Console, verbose: bool = False, debug: bool = False):
    """Route slugsmith logs through Rich on the given (stderr) console."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logging.getLogger("slugsmith").setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
