"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeRemoteDataPort: Canned fetch outcomes with a call record
"""

from .remote import FakeRemoteDataPort

__all__ = ["FakeRemoteDataPort"]
