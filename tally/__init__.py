"""Tally: a counter, string validators and a remote data port."""

__version__ = "0.1.0"
