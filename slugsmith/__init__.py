"""Slugsmith: human-readable random names from curated word lists.

Quick use as a package:
    from slugsmith import NameRequest, generate_names

    generate_names(["fox"], ["quick"], ["very"], NameRequest(words_per_name=3))
    # -> ["very-quick-fox"]
"""

__version__ = "0.3.0"

from .errors import (
    SlugsmithError,
    InvalidArgumentError,
    EmptyWordListError,
    DataSourceError,
)
from .names import NameRequest, WordLists, generate_name, generate_names

__all__ = [
    "__version__",
    "SlugsmithError",
    "InvalidArgumentError",
    "EmptyWordListError",
    "DataSourceError",
    "NameRequest",
    "WordLists",
    "generate_name",
    "generate_names",
]
