"""Download word lists from a remote source into a WordListStore.

This is a one-shot setup step; the generator never talks to the network.
The source is a URL template with ``{category}`` and ``{size}`` placeholders,
e.g. ``https://example.org/wordlists/{size}/{category}.txt``. The response body
uses the same line-delimited format as the local files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import httpx

from ..errors import DataSourceError
from .store import (
    SizeTier,
    WordCategory,
    WordListStore,
    coerce_category,
    coerce_size,
    parse_word_list,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def build_source_url(
    template: str,
    category: str | WordCategory,
    size: str | SizeTier,
) -> str:
    """Fill ``{category}`` and ``{size}`` into the source URL template.

    Raises:
        DataSourceError: If the template is empty or has unknown placeholders
    """
    if not template or not template.strip():
        raise DataSourceError(
            "No word-list source configured. Pass --source-url or run "
            "`slugsmith config set wordlists.source_url <template>` "
            "with {category} and {size} placeholders"
        )
    category = coerce_category(category)
    size = coerce_size(size)
    try:
        return template.strip().format(category=category.value, size=size.value)
    except (KeyError, IndexError, ValueError) as exc:
        raise DataSourceError(
            f"Invalid source URL template {template!r}: {exc}"
        ) from exc


def fetch_word_list(
    category: str | WordCategory,
    size: str | SizeTier,
    *,
    source_url: str,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[str]:
    """Fetch and parse one remote word list.

    Raises:
        DataSourceError: On transport errors, non-2xx responses or an empty list
    """
    url = build_source_url(source_url, category, size)
    logger.info("Fetching %s", url)

    try:
        if client is None:
            response = httpx.get(url, follow_redirects=True, timeout=timeout)
        else:
            response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DataSourceError(
            f"Fetching {url} failed with HTTP {exc.response.status_code}",
            url=url,
        ) from exc
    except httpx.HTTPError as exc:
        raise DataSourceError(f"Fetching {url} failed: {exc}", url=url) from exc

    words = parse_word_list(response.text)
    if not words:
        raise DataSourceError(f"Source {url} returned no words", url=url)
    return words


def fetch_word_lists(
    store: WordListStore,
    size: str | SizeTier,
    *,
    source_url: str,
    categories: Iterable[str | WordCategory] | None = None,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[WordCategory, Path]:
    """Fetch each category for ``size`` and save it into ``store``.

    Categories are processed in order; a failure stops the run and leaves the
    already-saved categories in place.

    Returns:
        Mapping of category to the written file path
    """
    size = coerce_size(size)
    wanted = (
        [coerce_category(c) for c in categories]
        if categories
        else list(WordCategory)
    )

    owns_client = client is None
    if client is None:
        client = httpx.Client(follow_redirects=True, timeout=timeout)

    written: dict[WordCategory, Path] = {}
    try:
        for category in wanted:
            words = fetch_word_list(
                category, size, source_url=source_url, client=client
            )
            path = store.save(category, size, words)
            logger.info(
                "Saved %d %s (%s) to %s", len(words), category.value, size.value, path
            )
            written[category] = path
    finally:
        if owns_client:
            client.close()

    return written
