"""Exception types shared across the dashboard package."""

from __future__ import annotations


class AtlasError(RuntimeError):
    """Base class for dashboard errors."""


class AtlasConfigError(AtlasError):
    """Raised when configuration values are missing, malformed or inconsistent."""


class FetchError(AtlasError):
    """Raised when a single data source cannot be fetched or parsed.

    Never escapes the fetcher: it drives the remote -> local -> empty chain.
    """
