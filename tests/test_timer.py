import pytest

from tetris_timer import Scheduler


def test_fires_once_per_interval_and_carries_remainder():
    s = Scheduler()
    fired = []
    s.schedule_repeating(100, lambda: fired.append(1))
    s.advance(250)
    assert len(fired) == 2
    s.advance(50)
    assert len(fired) == 3
    s.advance(99)
    assert len(fired) == 3


def test_cancelled_handle_never_fires():
    s = Scheduler()
    fired = []
    h = s.schedule_repeating(100, lambda: fired.append(1))
    h.cancel()
    h.cancel()
    s.advance(1000)
    assert fired == []
    assert not h.active
    assert s.pending == 0


def test_cancel_from_sibling_callback_in_same_advance():
    s = Scheduler()
    fired = []
    second = None

    def first():
        fired.append("a")
        second.cancel()

    s.schedule_repeating(100, first)
    second = s.schedule_repeating(100, lambda: fired.append("b"))
    s.advance(100)
    assert fired == ["a"]


def test_callback_can_cancel_itself_mid_burst():
    s = Scheduler()
    fired = []
    handle = None

    def cb():
        fired.append(1)
        handle.cancel()

    handle = s.schedule_repeating(10, cb)
    s.advance(100)
    assert fired == [1]


def test_cancel_all():
    s = Scheduler()
    a = s.schedule_repeating(10, lambda: None)
    b = s.schedule_repeating(20, lambda: None)
    assert s.pending == 2
    s.cancel_all()
    assert not a.active and not b.active
    assert s.pending == 0


@pytest.mark.parametrize("interval", [0, -5])
def test_rejects_non_positive_interval(interval):
    with pytest.raises(ValueError):
        Scheduler().schedule_repeating(interval, lambda: None)
