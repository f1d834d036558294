"""
Exception types raised inside squadrate.

None of these escape the public resolution entry points: fetch and
extraction errors are caught by the strategy chain, dataset errors by
the dataset loader. They exist so those catch sites can be specific.
"""


class SquadrateError(Exception):
    """Base class for all squadrate errors."""


class DatasetLoadError(SquadrateError):
    """A candidate dataset file is missing, unreadable or has the wrong shape."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FetchError(SquadrateError):
    """A network attempt failed (timeout, connection error, non-2xx status)."""


class ExtractionError(SquadrateError):
    """Fetched content could not be parsed (bad JSON, bad envelope, bad markup)."""
