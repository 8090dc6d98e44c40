"""Error taxonomy for slugsmith.

- InvalidArgumentError: the request itself is bad (fix the arguments)
- EmptyWordListError: a word list needed for the request has no entries
- DataSourceError: word-list files or the remote source could not be used
"""

from pathlib import Path


class SlugsmithError(Exception):
    """Base class for all slugsmith errors."""

    pass


class InvalidArgumentError(SlugsmithError, ValueError):
    """Raised when a name request or CLI argument is out of range."""

    pass


class EmptyWordListError(SlugsmithError):
    """Raised when a word list required by the request is empty."""

    def __init__(self, category: str, words_per_name: int | None = None):
        self.category = category
        self.words_per_name = words_per_name
        if words_per_name is None:
            message = f"Word list '{category}' is empty"
        else:
            message = (
                f"Word list '{category}' is empty but is required "
                f"for {words_per_name} words per name"
            )
        super().__init__(message)


class DataSourceError(SlugsmithError):
    """Raised when word lists cannot be read from disk or fetched remotely."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        url: str | None = None,
    ):
        self.path = path
        self.url = url
        super().__init__(message)
