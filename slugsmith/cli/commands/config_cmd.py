"""Config command for viewing and managing slugsmith configuration."""

import typer
from rich.markup import escape

from ..app import app, console
from ...config import (
    INT_FIELDS,
    SlugsmithConfig,
    get_config,
    reset_config,
    coerce_field,
    CONFIG_FILE,
)
from ...names import NameRequest, validate_request
from ...wordlists import coerce_size


VALID_KEYS = {
    "generate.words_per_name",
    "generate.separator",
    "generate.number_of_names",
    "generate.pascal_case",
    "generate.size",
    "wordlists.directory",
    "wordlists.source_url",
    "wordlists.timeout",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. generate.separator, wordlists.source_url)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify slugsmith configuration.

    Examples:
        slugsmith config show
        slugsmith config set generate.separator _
        slugsmith config set generate.pascal_case true
        slugsmith config set wordlists.source_url "https://example.org/{size}/{category}.txt"
        slugsmith config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] slugsmith config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {escape(action)}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Slugsmith Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Generate[/bold cyan] (defaults for `slugsmith generate`)")
    console.print(f"  words_per_name  = {config.generate.words_per_name}")
    console.print(f"  separator       = {escape(repr(config.generate.separator))}")
    console.print(f"  number_of_names = {config.generate.number_of_names}")
    console.print(f"  pascal_case     = {config.generate.pascal_case}")
    console.print(f"  size            = {escape(config.generate.size)}")

    console.print()
    console.print("[bold cyan]Word lists[/bold cyan]")
    console.print(f"  directory  = {escape(config.wordlists.directory)}")
    source = escape(config.wordlists.source_url) or "[dim](not set)[/dim]"
    console.print(f"  source_url = {source}")
    console.print(f"  timeout    = {config.wordlists.timeout}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {escape(key)}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    # Env overrides stay out of the saved file
    config = SlugsmithConfig.load(env=False)

    zone, field_name = key.split(".", 1)
    target = getattr(config, zone)
    try:
        if field_name == "size":
            value = coerce_size(value).value
        coerced = coerce_field(field_name, value)
        if field_name in INT_FIELDS:
            validate_request(NameRequest(**{field_name: coerced}))
        setattr(target, field_name, coerced)
    except ValueError:
        console.print(f"[red]Invalid value for {key}:[/red] {escape(value)}")
        raise typer.Exit(1)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {escape(value)}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
