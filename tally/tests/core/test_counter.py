"""Unit tests for the Counter state cell."""

import itertools

import pytest

from tally.core.counter import Counter


@pytest.fixture
def counter() -> Counter:
    """Create a fresh counter."""
    return Counter()


class TestCounter:
    """Tests for Counter."""

    def test_starts_at_zero(self, counter: Counter) -> None:
        """A new counter has value 0."""
        assert counter.current_value() == 0
        assert counter.value == 0

    def test_increment(self, counter: Counter) -> None:
        """increment adds one."""
        counter.increment()
        assert counter.current_value() == 1

    def test_decrement(self, counter: Counter) -> None:
        """decrement subtracts one."""
        counter.increment()
        counter.increment()
        counter.decrement()
        assert counter.current_value() == 1

    def test_decrement_below_zero(self, counter: Counter) -> None:
        """The counter is unbounded and may go negative."""
        counter.decrement()
        counter.decrement()
        assert counter.current_value() == -2

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 1000])
    def test_n_increments(self, counter: Counter, n: int) -> None:
        """After n increments from zero the value is n."""
        for _ in range(n):
            counter.increment()
        assert counter.current_value() == n

    @pytest.mark.parametrize(
        "ops",
        [
            "+-",
            "-+",
            "++-+--",
            "---+++",
            "+++++",
            "-----",
            "+-+-+-+",
        ],
    )
    def test_interleaved_operations(self, counter: Counter, ops: str) -> None:
        """Any interleaving of i increments and d decrements yields i - d."""
        for op in ops:
            if op == "+":
                counter.increment()
            else:
                counter.decrement()
        assert counter.current_value() == ops.count("+") - ops.count("-")

    def test_every_ordering_of_same_operations(self) -> None:
        """Order of operations does not affect the final value."""
        for ordering in set(itertools.permutations("+++--")):
            counter = Counter()
            for op in ordering:
                if op == "+":
                    counter.increment()
                else:
                    counter.decrement()
            assert counter.current_value() == 1

    def test_current_value_is_idempotent(self, counter: Counter) -> None:
        """Repeated reads without mutation return the same value."""
        counter.increment()
        counter.increment()
        reads = [counter.current_value() for _ in range(5)]
        assert reads == [2] * 5

    def test_value_is_read_only(self, counter: Counter) -> None:
        """value cannot be assigned directly."""
        with pytest.raises(AttributeError):
            counter.value = 5  # type: ignore[misc]

    def test_large_values_do_not_overflow(self, counter: Counter) -> None:
        """Arbitrary-precision ints mean no wraparound."""
        counter._value = 2**63 - 1
        counter.increment()
        assert counter.current_value() == 2**63

    def test_repr(self, counter: Counter) -> None:
        """repr shows the current value."""
        counter.increment()
        assert repr(counter) == "Counter(value=1)"
