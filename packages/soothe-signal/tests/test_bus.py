"""Tests for RedrawBus request batching."""

from soothe_signal import RedrawBus


class Source:
    """Unhashable redraw source."""

    __hash__ = None  # type: ignore[assignment]


def test_flush_delivers_each_source_once():
    bus = RedrawBus()
    received = []
    bus.subscribe(received.append)
    a, b = Source(), Source()
    for _ in range(5):
        bus.request(a)
    bus.request(b)
    assert bus.flush() == 2
    assert received == [a, b]


def test_flush_empties_queue():
    bus = RedrawBus()
    received = []
    bus.subscribe(received.append)
    bus.request(Source())
    bus.flush()
    assert bus.pending() == []
    assert bus.flush() == 0
    assert len(received) == 1


def test_request_during_flush_waits_for_next_flush():
    """A source re-requesting while being delivered lands in the next batch."""
    bus = RedrawBus()
    s = Source()
    received = []

    def handler(source):
        received.append(source)
        if len(received) == 1:
            bus.request(source)

    bus.subscribe(handler)
    bus.request(s)
    bus.flush()
    assert bus.pending() == [s]
    bus.flush()
    assert len(received) == 2


def test_multiple_subscribers():
    bus = RedrawBus()
    first, second = [], []
    bus.subscribe(first.append)
    bus.subscribe(second.append)
    s = Source()
    bus.request(s)
    bus.flush()
    assert first == [s]
    assert second == [s]


def test_unsubscribe():
    bus = RedrawBus()
    received = []
    bus.subscribe(received.append)
    bus.unsubscribe(received.append)
    bus.request(Source())
    bus.flush()
    assert received == []


def test_unsubscribe_unknown_handler_is_noop():
    RedrawBus().unsubscribe(print)


def test_clear_drops_pending():
    bus = RedrawBus()
    received = []
    bus.subscribe(received.append)
    bus.request(Source())
    bus.clear()
    assert bus.flush() == 0
    assert received == []
