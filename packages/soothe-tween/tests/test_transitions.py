"""Tests for Animation descriptors and the Transitions driver."""

import pytest
from soothe_tween import Animation, Param, Transitions, progress_at


class TestAnimation:
    def test_presets(self):
        assert Animation.linear(1.0).easing == "linear"
        assert Animation.ease_out(0.5).duration == 0.5

    def test_modifiers_return_new_instances(self):
        base = Animation.linear(1.0)
        looped = base.repeat_forever()
        assert looped.repeats and looped.autoreverses
        assert not base.repeats
        assert not base.repeat_forever(autoreverses=False).autoreverses
        assert base.delayed(0.3).delay == 0.3
        assert base.with_speed(4).pass_duration == pytest.approx(0.25)

    def test_spring_duration_is_settle_time(self):
        anim = Animation.spring(0.3, 0.6)
        assert anim.duration > 0.3
        assert callable(anim.curve())

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"duration": 0},
            {"duration": 1, "speed": 0},
            {"duration": 1, "delay": -1},
            {"duration": 1, "easing": "bouncy"},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Animation(**kwargs)


class TestProgress:
    def test_delay_holds_at_start(self):
        anim = Animation.linear(1.0).delayed(0.5)
        assert progress_at(anim, 0.25) == 0.0
        assert progress_at(anim, 1.0) == pytest.approx(0.5)

    def test_one_shot_clamps_at_end(self):
        assert progress_at(Animation.linear(1.0), 7.0) == 1.0

    def test_repeat_without_reverse_restarts(self):
        anim = Animation.linear(1.0).repeat_forever(autoreverses=False)
        assert progress_at(anim, 1.25) == pytest.approx(0.25)

    def test_autoreverse_plays_backwards_on_odd_passes(self):
        anim = Animation.linear(1.0).repeat_forever()
        assert progress_at(anim, 1.25) == pytest.approx(0.75)
        assert progress_at(anim, 2.25) == pytest.approx(0.25)


class TestTransitions:
    def test_linear_interpolation(self):
        p = Param("x", 0.0)
        driver = Transitions()
        driver.animate(p, 10.0, Animation.linear(1.0))
        values = []
        for _ in range(4):
            driver.advance(0.25)
            values.append(p.value)
        assert values == [2.5, 5.0, 7.5, 10.0]
        assert not driver.active(p)

    def test_delay_writes_nothing(self):
        p = Param("x", 0.0)
        seen = []
        p.subscribe(seen.append)
        driver = Transitions()
        driver.animate(p, 10.0, Animation.linear(1.0).delayed(0.5))
        driver.advance(0.25)
        driver.advance(0.25)
        assert seen == []
        driver.advance(0.5)
        assert p.value == pytest.approx(5.0)

    def test_one_driver_per_param(self):
        """Animating a param again replaces the previous transition."""
        p = Param("x", 0.0)
        driver = Transitions()
        first = driver.animate(p, 10.0, Animation.linear(1.0))
        driver.advance(0.5)
        second = driver.animate(p, 0.0, Animation.linear(1.0))
        assert len(driver) == 1
        assert driver.get(p) is second
        assert second is not first
        assert second.start == pytest.approx(5.0)
        driver.advance(1.0)
        assert p.value == 0.0

    def test_on_done_called_once(self):
        p = Param("x", 0.0)
        driver = Transitions()
        done = []
        driver.animate(p, 1.0, Animation.linear(0.5), on_done=lambda: done.append(1))
        for _ in range(10):
            driver.advance(0.1)
        assert done == [1]

    def test_speed_shortens_pass(self):
        p = Param("x", 0.0)
        driver = Transitions()
        driver.animate(p, 1.0, Animation.linear(1.0).with_speed(2))
        driver.advance(0.5)
        assert p.value == 1.0
        assert not driver.active()

    def test_repeating_never_finishes(self):
        p = Param("x", 0.0)
        driver = Transitions()
        driver.animate(p, 10.0, Animation.linear(1.0).repeat_forever())
        for _ in range(5):
            driver.advance(0.25)
        assert p.value == pytest.approx(7.5)
        for _ in range(40):
            driver.advance(0.25)
        assert driver.active(p)

    def test_set_cancels_and_assigns(self):
        p = Param("x", 0.0)
        driver = Transitions()
        driver.animate(p, 10.0, Animation.linear(1.0))
        driver.set(p, 3.0)
        assert p.value == 3.0
        assert not driver.active(p)
        driver.advance(1.0)
        assert p.value == 3.0

    def test_cancel_all(self):
        a, b = Param("a", 0.0), Param("b", 0.0)
        driver = Transitions()
        driver.animate(a, 1.0, Animation.linear(1.0))
        driver.animate(b, 1.0, Animation.linear(1.0))
        driver.cancel_all()
        driver.advance(1.0)
        assert a.value == 0.0 and b.value == 0.0

    def test_on_done_may_start_next_transition(self):
        p = Param("x", 0.0)
        driver = Transitions()

        def back() -> None:
            driver.animate(p, 0.0, Animation.linear(0.5))

        driver.animate(p, 1.0, Animation.linear(0.5), on_done=back)
        driver.advance(0.5)
        assert driver.active(p)
        driver.advance(0.5)
        assert p.value == 0.0

    def test_cancel_from_on_done_stops_later_transition_this_pass(self):
        a, b = Param("a", 0.0), Param("b", 0.0)
        driver = Transitions()
        driver.animate(a, 1.0, Animation.linear(0.5), on_done=lambda: driver.cancel(b))
        driver.animate(b, 10.0, Animation.linear(1.0))
        driver.advance(0.5)
        assert a.value == 1.0
        assert b.value == 0.0
        assert not driver.active(b)

    def test_cancel_from_observer_stops_later_transition_this_pass(self):
        a, b = Param("a", 0.0), Param("b", 0.0)
        driver = Transitions()
        a.subscribe(lambda param: driver.cancel(b))
        driver.animate(a, 1.0, Animation.linear(1.0))
        driver.animate(b, 10.0, Animation.linear(1.0))
        driver.advance(0.25)
        assert a.value == pytest.approx(0.25)
        assert b.value == 0.0
