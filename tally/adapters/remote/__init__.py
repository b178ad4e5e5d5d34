"""Remote data adapters implementing RemoteDataPort.

Implementations:
- HTTP (httpx)
"""

from .http import HTTPRemoteDataAdapter

__all__ = ["HTTPRemoteDataAdapter"]
