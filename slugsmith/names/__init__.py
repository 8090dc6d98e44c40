"""Random name assembly.

Builds names like "very-quick-fox" from adverb, adjective and name word
lists. Pure functions with no I/O; word lists come from slugsmith.wordlists.
"""

from .generator import (
    NameRequest,
    WordLists,
    generate_name,
    generate_names,
    pascal_case_word,
    validate_request,
)

__all__ = [
    "NameRequest",
    "WordLists",
    "generate_name",
    "generate_names",
    "pascal_case_word",
    "validate_request",
]
