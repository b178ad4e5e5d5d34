"""Core domain logic for Tally.

This package contains zero external dependencies and represents
the pure domain of the application. All external integrations are
handled by the adapters package.
"""

from .counter import Counter
from .ports import FetchError, RemoteDataPort
from .validators import is_valid_email, is_valid_phone_number

__all__ = [
    "Counter",
    "FetchError",
    "RemoteDataPort",
    "is_valid_email",
    "is_valid_phone_number",
]
