"""Fetch command: download word lists into local storage."""

from pathlib import Path

import typer

from ...config import get_config
from ...errors import SlugsmithError
from ...wordlists import WordListStore, coerce_size, fetch_word_lists
from ..app import app, console, get_json_mode
from ..utils import Output, exit_code_for


@app.command("fetch")
def fetch_command(
    size: str | None = typer.Option(
        None, "--size", help="Size tier to download: small, medium or large"
    ),
    category: list[str] | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Category to download (repeatable; default: names, adjectives, adverbs)",
    ),
    words_dir: Path | None = typer.Option(
        None, "--words-dir", help="Directory to store word lists (default from config)"
    ),
    source_url: str | None = typer.Option(
        None,
        "--source-url",
        help="URL template with {category} and {size} placeholders",
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="HTTP timeout in seconds"
    ),
):
    """
    Download word lists and save them as one-word-per-line files.

    Files are written to <words-dir>/<size>/<category>.txt, replacing any
    existing list for that category and size.

    EXIT CODES:
        0 = Success
        1 = Invalid arguments
        5 = Download or write failed

    Examples:
        slugsmith fetch --size medium --source-url "https://example.org/{size}/{category}.txt"
        slugsmith fetch -c names --size large
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    store = WordListStore(words_dir if words_dir is not None else config.words_dir)

    try:
        tier = coerce_size(size or config.generate.size)
        written = fetch_word_lists(
            store,
            tier,
            source_url=source_url if source_url is not None else config.wordlists.source_url,
            categories=category or None,
            timeout=timeout if timeout is not None else config.wordlists.timeout,
        )
    except SlugsmithError as exc:
        out.error(
            str(exc),
            suggestion="Check --source-url and network access",
            exit_code=exit_code_for(exc, fetching=True),
        )
        raise typer.Exit(out.finish())

    rows = [[cat.value, str(path)] for cat, path in written.items()]
    out.table(
        f"Saved {tier.value} word lists",
        ["Category", "Path"],
        rows,
        data_key="saved",
    )
    out.success(
        f"Fetched {len(written)} word list(s) into {store.directory}",
        size=tier.value,
        directory=str(store.directory),
    )
    raise typer.Exit(out.finish())
