"""Local word-list storage.

Word lists are plain UTF-8 text files, one word per line, laid out as
``<directory>/<size>/<category>.txt``. The package bundles the ``small`` tier
under ``data/`` so names can be generated before anything is fetched.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from ..errors import DataSourceError, InvalidArgumentError
from ..names import WordLists

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class WordCategory(str, Enum):
    NAMES = "names"
    ADJECTIVES = "adjectives"
    ADVERBS = "adverbs"


class SizeTier(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def coerce_category(value: str | WordCategory) -> WordCategory:
    """Parse a category name, raising InvalidArgumentError for unknown values."""
    try:
        return WordCategory(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in WordCategory)
        raise InvalidArgumentError(
            f"Unknown word category {value!r}. Expected one of: {valid}"
        ) from None


def coerce_size(value: str | SizeTier) -> SizeTier:
    """Parse a size tier name, raising InvalidArgumentError for unknown values."""
    try:
        return SizeTier(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in SizeTier)
        raise InvalidArgumentError(
            f"Unknown size tier {value!r}. Expected one of: {valid}"
        ) from None


def parse_word_list(text: str) -> list[str]:
    """Split file content into words: one per non-blank line, whitespace trimmed."""
    words = []
    for line in text.splitlines():
        word = line.strip()
        if word:
            words.append(word)
    return words


def format_word_list(words: Iterable[str]) -> str:
    return "".join(f"{w}\n" for w in words)


def word_list_path(
    directory: Path | str,
    category: str | WordCategory,
    size: str | SizeTier,
) -> Path:
    category = coerce_category(category)
    size = coerce_size(size)
    return Path(directory) / size.value / f"{category.value}.txt"


class WordListStore:
    """Reads and writes word-list files under a single root directory."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory).expanduser()

    def __repr__(self) -> str:
        return f"WordListStore({str(self.directory)!r})"

    def path_for(self, category: str | WordCategory, size: str | SizeTier) -> Path:
        return word_list_path(self.directory, category, size)

    def has(self, category: str | WordCategory, size: str | SizeTier) -> bool:
        return self.path_for(category, size).is_file()

    def has_tier(self, size: str | SizeTier) -> bool:
        """True when every category exists for ``size``."""
        return all(self.has(category, size) for category in WordCategory)

    def load(self, category: str | WordCategory, size: str | SizeTier) -> list[str]:
        """Load one word list.

        Raises:
            DataSourceError: If the file is missing or cannot be read/decoded
        """
        path = self.path_for(category, size)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DataSourceError(
                f"Word list not found: {path}", path=path
            ) from None
        except (OSError, UnicodeDecodeError) as exc:
            raise DataSourceError(
                f"Failed to read word list {path}: {exc}", path=path
            ) from exc

        words = parse_word_list(text)
        logger.debug("Loaded %d words from %s", len(words), path)
        return words

    def load_all(self, size: str | SizeTier) -> WordLists:
        """Load names, adjectives and adverbs for one size tier."""
        return WordLists.from_sequences(
            names=self.load(WordCategory.NAMES, size),
            adjectives=self.load(WordCategory.ADJECTIVES, size),
            adverbs=self.load(WordCategory.ADVERBS, size),
        )

    def save(
        self,
        category: str | WordCategory,
        size: str | SizeTier,
        words: Iterable[str],
    ) -> Path:
        """Write a word list, replacing any existing file atomically."""
        path = self.path_for(category, size)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                    f.write(format_word_list(words))
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise DataSourceError(
                f"Failed to write word list {path}: {exc}", path=path
            ) from exc
        return path

    def available(self) -> dict[SizeTier, list[WordCategory]]:
        """Categories present on disk, keyed by size tier."""
        found: dict[SizeTier, list[WordCategory]] = {}
        for size in SizeTier:
            categories = [c for c in WordCategory if self.has(c, size)]
            if categories:
                found[size] = categories
        return found


def bundled_store() -> WordListStore:
    """Store backed by the word lists shipped with the package."""
    return WordListStore(_DATA_DIR)


def resolve_store(
    directory: Path | str,
    size: str | SizeTier,
    *,
    explicit: bool = False,
) -> WordListStore:
    """Pick the store to load ``size`` from.

    The configured directory wins when it holds the full tier. When the
    directory came from configuration defaults (``explicit=False``) and the
    tier is missing there, the bundled lists are used if they cover it.

    Raises:
        DataSourceError: If no store holds every category for ``size``
    """
    size = coerce_size(size)
    store = WordListStore(directory)
    if store.has_tier(size):
        return store

    if not explicit:
        bundled = bundled_store()
        if bundled.has_tier(size):
            logger.info(
                "No %s word lists in %s, using bundled lists", size.value, store.directory
            )
            return bundled

    missing = [c.value for c in WordCategory if not store.has(c, size)]
    raise DataSourceError(
        f"Missing {size.value} word lists in {store.directory}: {', '.join(missing)}",
        path=store.directory,
    )
