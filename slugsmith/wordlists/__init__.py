"""Word-list storage and acquisition.

- store.py: line-delimited word files on disk, plus the bundled small tier
- fetch.py: one-shot download of remote lists into a store
"""

from .store import (
    SizeTier,
    WordCategory,
    WordListStore,
    bundled_store,
    coerce_category,
    coerce_size,
    format_word_list,
    parse_word_list,
    resolve_store,
    word_list_path,
)
from .fetch import build_source_url, fetch_word_list, fetch_word_lists

__all__ = [
    "SizeTier",
    "WordCategory",
    "WordListStore",
    "bundled_store",
    "coerce_category",
    "coerce_size",
    "format_word_list",
    "parse_word_list",
    "resolve_store",
    "word_list_path",
    "build_source_url",
    "fetch_word_list",
    "fetch_word_lists",
]
