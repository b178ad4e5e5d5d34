"""Integer counter with increment/decrement operations."""


class Counter:
    """A mutable integer cell starting at zero.

    The value is unbounded: Python integers have arbitrary precision,
    so the counter never overflows or saturates and may go negative.

    Not thread-safe. Callers sharing a counter across threads must
    synchronize access themselves.
    """

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        """Current value (read-only)."""
        return self._value

    def increment(self) -> None:
        """Add one to the value."""
        self._value += 1

    def decrement(self) -> None:
        """Subtract one from the value."""
        self._value -= 1

    def current_value(self) -> int:
        """Return the current value without modifying it."""
        return self._value

    def __repr__(self) -> str:
        return f"Counter(value={self._value})"
