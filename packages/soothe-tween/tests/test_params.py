"""Tests for bounded animated parameters."""

import pytest
from soothe_tween import Param


def test_unbounded_value():
    p = Param("x", 3)
    p.value = -1000.5
    assert p.value == -1000.5


def test_clamps_into_bounds():
    p = Param("progress", 0.5, 0.0, 1.0)
    p.value = 1.7
    assert p.value == 1.0
    p.value = -0.2
    assert p.value == 0.0


def test_initial_value_is_clamped():
    assert Param("progress", 3.0, 0.0, 1.0).value == 1.0


def test_wraps_modulo_range():
    p = Param("angle", 370, 0, 360, wrap=True)
    assert p.value == pytest.approx(10)
    p.value = -90
    assert p.value == pytest.approx(270)
    p.value = 360
    assert p.value == 0


class TestObservers:
    def test_notified_on_change(self):
        p = Param("x", 0.0)
        seen = []
        p.subscribe(lambda param: seen.append(param.value))
        p.value = 1.0
        p.value = 2.0
        assert seen == [1.0, 2.0]

    def test_not_notified_when_value_unchanged(self):
        p = Param("x", 1.0, 0.0, 1.0)
        seen = []
        p.subscribe(seen.append)
        p.value = 1.0
        p.value = 5.0  # clamps to the same value
        assert seen == []

    def test_unsubscribe(self):
        p = Param("x", 0.0)
        seen = []
        p.subscribe(seen.append)
        p.unsubscribe(seen.append)
        p.value = 1.0
        assert seen == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"lo": 1.0, "hi": 0.0},
        {"lo": 0.0, "hi": None, "wrap": True},
        {"lo": 5.0, "hi": 5.0, "wrap": True},
    ],
)
def test_invalid_bounds(kwargs):
    with pytest.raises(ValueError):
        Param("bad", 0.0, **kwargs)
