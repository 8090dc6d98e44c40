"""Generate command: print random names."""

import random
from pathlib import Path

import typer

from ...config import get_config
from ...errors import DataSourceError, EmptyWordListError, SlugsmithError
from ...names import NameRequest, validate_request
from ...wordlists import coerce_size, resolve_store
from ..app import app, console, get_json_mode
from ..utils import Output, exit_code_for


@app.command("generate")
def generate_command(
    words_per_name: int | None = typer.Option(
        None, "--words-per-name", "-w", help="Words per name (default from config: 3)"
    ),
    separator: str | None = typer.Option(
        None, "--separator", "-s", help="String placed between words (default '-')"
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", help="Number of names to generate (default 1)"
    ),
    pascal_case: bool | None = typer.Option(
        None,
        "--pascal-case/--no-pascal-case",
        help="Uppercase the first letter of every word (default from config)",
    ),
    size: str | None = typer.Option(
        None, "--size", help="Word-list size tier: small, medium or large"
    ),
    words_dir: Path | None = typer.Option(
        None, "--words-dir", help="Word-list directory (default from config)"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducible names"
    ),
):
    """
    Generate random names like "very-quick-fox".

    A name with N words uses one name, one adjective and N-2 adverbs:
    [adverb ...] adjective name.

    EXIT CODES:
        0 = Success
        1 = Invalid arguments
        3 = Word lists not found (run `slugsmith fetch`)
        4 = A required word list is empty

    Examples:
        slugsmith generate
        slugsmith generate -w 2 -n 5
        slugsmith generate --pascal-case -s "" --seed 7
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    request = NameRequest(
        words_per_name=(
            words_per_name
            if words_per_name is not None
            else config.generate.words_per_name
        ),
        separator=separator if separator is not None else config.generate.separator,
        number_of_names=count if count is not None else config.generate.number_of_names,
        pascal_case=(
            pascal_case if pascal_case is not None else config.generate.pascal_case
        ),
    )

    try:
        validate_request(request)
        tier = coerce_size(size or config.generate.size)
        store = resolve_store(
            words_dir if words_dir is not None else config.words_dir,
            tier,
            explicit=words_dir is not None,
        )
        word_lists = store.load_all(tier)
        names = word_lists.generate(request, rng=random.Random(seed))
    except SlugsmithError as exc:
        suggestion = None
        category = None
        if isinstance(exc, EmptyWordListError):
            category = exc.category
            suggestion = f"Add words to the {exc.category} list or lower --words-per-name"
        elif isinstance(exc, DataSourceError):
            suggestion = "Run `slugsmith fetch` or pass --words-dir"
        out.error(
            str(exc),
            category=category,
            suggestion=suggestion,
            exit_code=exit_code_for(exc),
        )
        raise typer.Exit(out.finish())

    out.lines("names", names)
    out.set_data("request", {
        "words_per_name": request.words_per_name,
        "separator": request.separator,
        "number_of_names": request.number_of_names,
        "pascal_case": request.pascal_case,
        "size": tier.value,
    })
    out.set_data("source", str(store.directory))
    raise typer.Exit(out.finish())
