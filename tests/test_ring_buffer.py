"""Unit tests for the fixed-capacity ring buffer used as board history."""

import pytest
from lifeloop.core.history import RingBuffer
from lifeloop.exceptions import ConfigurationError


class TestRingBufferConstruction:
    """Test buffer creation and capacity validation."""

    @pytest.mark.parametrize("capacity", [0, -1, -100])
    def test_non_positive_capacity_rejected(self, capacity):
        """Zero or negative capacity is a configuration error."""
        with pytest.raises(ConfigurationError, match="capacity"):
            RingBuffer(capacity)

    def test_new_buffer_is_empty(self):
        buffer = RingBuffer(5)
        assert len(buffer) == 0
        assert buffer.is_empty()
        assert not buffer.is_full()
        assert buffer.capacity == 5
        assert list(buffer) == []

    def test_unwritten_slots_never_match_digests(self):
        """Empty slots hold None, so no integer digest matches them."""
        buffer = RingBuffer(4)
        assert not buffer.contains(0)
        assert 0 not in buffer

    def test_custom_fill_value(self):
        """A caller-supplied fill value occupies unwritten slots."""
        buffer = RingBuffer(3, fill_value=-1)
        assert buffer.contains(-1)
        buffer.enqueue(7)
        assert buffer.dequeue() == 7
        assert buffer.dequeue() is None


class TestRingBufferFifo:
    """Test FIFO ordering and eviction."""

    def test_dequeue_in_insertion_order(self):
        """Dequeue after k < capacity enqueues returns values in order."""
        buffer = RingBuffer(10)
        for value in [11, 22, 33, 44]:
            buffer.enqueue(value)

        assert [buffer.dequeue() for _ in range(4)] == [11, 22, 33, 44]
        assert buffer.dequeue() is None

    def test_dequeue_empty_returns_none(self):
        assert RingBuffer(3).dequeue() is None

    def test_eviction_drops_oldest(self):
        """capacity + 1 distinct values push out only the first one."""
        capacity = 5
        buffer = RingBuffer(capacity)
        values = [100 + i for i in range(capacity + 1)]
        for value in values:
            buffer.enqueue(value)

        assert not buffer.contains(values[0])
        for value in values[1:]:
            assert buffer.contains(value)
        assert len(buffer) == capacity
        assert buffer.is_full()

    def test_dequeue_after_wraparound(self):
        """Oldest remaining value comes out first after wrapping."""
        buffer = RingBuffer(3)
        for value in [1, 2, 3, 4, 5]:
            buffer.enqueue(value)

        assert list(buffer) == [3, 4, 5]
        assert buffer.dequeue() == 3
        assert buffer.dequeue() == 4
        assert buffer.dequeue() == 5
        assert buffer.dequeue() is None

    def test_interleaved_enqueue_dequeue(self):
        buffer = RingBuffer(2)
        buffer.enqueue("a")
        buffer.enqueue("b")
        assert buffer.dequeue() == "a"
        buffer.enqueue("c")
        buffer.enqueue("d")  # evicts "b"
        assert list(buffer) == ["c", "d"]
        assert buffer.dequeue() == "c"
        assert buffer.dequeue() == "d"
        assert buffer.is_empty()

    def test_dequeued_value_no_longer_contained(self):
        buffer = RingBuffer(4)
        buffer.enqueue(42)
        buffer.enqueue(43)
        buffer.dequeue()

        assert not buffer.contains(42)
        assert buffer.contains(43)

    def test_capacity_one_keeps_latest(self):
        """A single-slot buffer only remembers the newest value."""
        buffer = RingBuffer(1)
        buffer.enqueue(1)
        buffer.enqueue(2)
        assert not buffer.contains(1)
        assert buffer.contains(2)
        assert len(buffer) == 1

    def test_clear(self):
        buffer = RingBuffer(3)
        for value in range(5):
            buffer.enqueue(value)
        buffer.clear()

        assert buffer.is_empty()
        assert not any(buffer.contains(value) for value in range(5))
        buffer.enqueue(9)
        assert list(buffer) == [9]
