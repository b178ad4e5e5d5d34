"""External adapters for Tally.

This package contains all external dependencies (HTTP clients, etc.)
and provides implementations of the core port interfaces.

Adapter Organization:

- remote/: Adapters for fetching remote data (HTTP)
"""
