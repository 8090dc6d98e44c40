"""Lists command: show which word lists are available locally."""

from pathlib import Path

import typer

from ...config import get_config
from ...errors import SlugsmithError
from ...wordlists import WordListStore, bundled_store
from ..app import app, console, get_json_mode
from ..utils import Output, exit_code_for


def _rows(store: WordListStore, source: str) -> list[list[str]]:
    rows = []
    for size, categories in store.available().items():
        for category in categories:
            count = len(store.load(category, size))
            rows.append([source, size.value, category.value, str(count)])
    return rows


@app.command("lists")
def lists_command(
    words_dir: Path | None = typer.Option(
        None, "--words-dir", help="Word-list directory (default from config)"
    ),
):
    """Show the word lists available on disk and bundled with slugsmith."""
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    store = WordListStore(words_dir if words_dir is not None else config.words_dir)
    try:
        rows = _rows(store, str(store.directory)) + _rows(bundled_store(), "bundled")
    except SlugsmithError as exc:
        out.error(
            str(exc),
            suggestion="Re-run `slugsmith fetch` to replace the broken list",
            exit_code=exit_code_for(exc),
        )
        raise typer.Exit(out.finish())

    if not rows:
        out.warning(
            "No word lists found",
            suggestion="Run `slugsmith fetch` to download some",
        )
    else:
        out.table(
            "Word lists",
            ["Source", "Size", "Category", "Words"],
            rows,
            data_key="lists",
        )
    raise typer.Exit(out.finish())
