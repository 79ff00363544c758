"""
Error vocabulary of the eztv scraper.

Every failure a query can report is a subclass of EztvError and carries a
stable ``kind`` string, so callers (and the JSON API) can tell e.g. a
missing show apart from an unsupported operation.

EztvError
├── InvalidArgumentError
├── MissingArgumentError
├── FetchError
├── EmptyResponseError
├── ShowNotFoundError
├── EpisodeNotFoundError   (reserved)
└── UnimplementedError
"""

from typing import Optional


class EztvError(Exception):
    """Base exception for all scraper errors."""

    kind = "error"
    default_message = "eztv scraper error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidArgumentError(EztvError):
    """Raised when a query argument has an unusable value."""

    kind = "invalid_argument"
    default_message = "invalid argument"


class MissingArgumentError(EztvError):
    """Raised when a required query argument is empty."""

    kind = "missing_argument"
    default_message = "missing argument"


class FetchError(EztvError):
    """Raised when a page cannot be retrieved. The transport error is kept as __cause__."""

    kind = "fetch_error"
    default_message = "could not fetch document"

    def __init__(self, message: Optional[str] = None, url: str = ""):
        super().__init__(message)
        self.url = url


class EmptyResponseError(EztvError):
    kind = "empty_response"
    default_message = "empty response from server"


class ShowNotFoundError(EztvError):
    kind = "show_not_found"
    default_message = "show not found"


class EpisodeNotFoundError(EztvError):
    kind = "episode_not_found"
    default_message = "episode not found"


class UnimplementedError(EztvError):
    """Raised by operations the scraper does not support yet."""

    kind = "unimplemented"
    default_message = "not implemented"
