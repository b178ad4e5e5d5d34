"""Port interfaces for Tally.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; test doubles live in tests/fakes/.

Driven Ports (core calls out to adapters):
   - RemoteDataPort: Retrieve a text payload from an external source
"""

from abc import ABC, abstractmethod


class FetchError(Exception):
    """Raised when a remote data fetch does not complete successfully.

    The underlying failure (transport error, bad status, ...) is kept
    on ``cause`` for callers that want to inspect it.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class RemoteDataPort(ABC):
    """Port for fetching data from an external collaborator.

    Adapters implementing this port retrieve a payload (e.g. over HTTP)
    and return it as text. Configuration such as endpoint URL and
    credentials is injected at construction time, never read from
    module-level state.

    Implementations must:
    - Raise FetchError for any failure, carrying the underlying cause
    - Never swallow failures; recovery policy belongs to the caller
    """

    @abstractmethod
    async def fetch_data(self, path: str = "") -> str:
        """Fetch a payload from the remote source.

        Args:
            path: Optional resource path relative to the configured
                location. The empty string fetches the configured
                location itself.

        Returns:
            The payload as a string.

        Raises:
            FetchError: If the fetch fails for any reason.
        """


__all__ = ["FetchError", "RemoteDataPort"]
