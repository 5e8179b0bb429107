"""
Exceptions raised while fetching and scanning the tornado table.

The CLI catches `TornadoStatsError` and prints a message; anything else is
an internal fault and propagates.
"""

from typing import Optional


class TornadoStatsError(Exception):
    """Base class for every handled failure."""


class TableNotFound(TornadoStatsError, ValueError):
    """The marker of the first data row never appears in the page."""


class MalformedData(TornadoStatsError, ValueError):
    """The table does not have the expected shape."""


class ParseError(MalformedData):
    """A collected numeral is not a non-negative integer."""


class FetchError(TornadoStatsError, RuntimeError):
    """
    The page could not be fetched.

    `status_code` is set for HTTP errors and left as None for transport
    errors (timeouts, refused connections, ...).
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code

    @property
    def message(self) -> str:
        """Text printed by the CLI in place of the dataset."""
        if self.status_code == 404:
            return "404 - Not Found!"
        return f"Error: {self.reason}"
