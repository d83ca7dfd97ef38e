"""Tests for the Widget base: params, redraw batching, callbacks and lifecycle."""

import logging

import pytest
from soothe import AnimationLoop
from soothe_fsm import COMPLETING, IDLE, RESETTING, RUNNING
from soothe_shapes import rect
from soothe_tween import Animation
from soothe_widgets import Fill, Widget


class Box(Widget):
    """Square whose side follows a param."""

    def __init__(self, interactive: bool = False) -> None:
        super().__init__(None)
        self.interactive = interactive
        self.side = self.param("side", 10.0, 0.0, 100.0)
        self.other = self.param("other", 0.0)
        self.begun = 0

    @property
    def size(self):
        return (100.0, 100.0)

    def begin(self):
        self.begun += 1
        self.transitions.animate(self.side, 100.0, Animation.linear(1.0))
        self.transitions.animate(self.other, 50.0, Animation.linear(1.0))

    def render(self):
        return [Fill(rect(0, 0, self.side.value, self.side.value), (0, 0, 0))]


class TestParams:
    def test_duplicate_param_rejected(self):
        box = Box()
        with pytest.raises(ValueError):
            box.param("side", 1.0)

    def test_values_snapshot(self):
        assert Box().values() == {"side": 10.0, "other": 0.0}

    def test_scene_rerenders_only_when_dirty(self):
        box = Box()
        first = box.scene
        box.scene
        assert box.redraws == 1
        box.side.value = 20.0
        second = box.scene
        assert box.redraws == 2
        assert first != second


class TestRedrawBatching:
    def test_one_redraw_per_tick(self):
        """Two params changing every tick still cost a single render."""
        loop = AnimationLoop(tps=100)
        box = Box()
        loop.mount(box)
        loop.run(10)
        assert box.redraws == 10

    def test_no_redraw_when_nothing_changes(self):
        loop = AnimationLoop(tps=100)
        box = Box(interactive=True)
        loop.mount(box)
        loop.run(5)
        assert box.redraws == 1  # the attach redraw only

    def test_detached_widget_does_not_request(self):
        loop = AnimationLoop(tps=100)
        box = Box()
        loop.mount(box)
        loop.step()
        loop.unmount(box)
        box.side.value = 42.0
        assert loop.redraw_bus.pending() == []


class TestLifecycle:
    def test_passive_widget_starts_on_appear(self):
        loop = AnimationLoop(tps=10)
        box = Box()
        loop.mount(box)
        assert box.state == RUNNING
        assert box.begun == 1

    def test_interactive_widget_waits_for_tap(self):
        loop = AnimationLoop(tps=10)
        box = Box(interactive=True)
        loop.mount(box)
        assert box.state == IDLE
        assert box.tap()
        assert box.state == RUNNING

    def test_tap_outside_is_ignored(self):
        box = Box(interactive=True)
        assert not box.tap((500.0, 500.0))
        assert box.state == IDLE

    def test_passive_widget_ignores_taps(self):
        assert not Box().tap()

    def test_restart_cancels_previous_handles(self):
        box = Box(interactive=True)
        box.start()
        handle = box.timers.schedule("t", 1.0, lambda h: None)
        first = box.transitions.get(box.side)
        box.start()
        assert not handle.valid
        assert box.transitions.get(box.side) is not first
        assert box.lifecycle.cycles == 2

    def test_start_from_completing_passes_through_resetting(self):
        box = Box(interactive=True)
        seen = []
        box.lifecycle.on_transition(lambda old, new: seen.append(new))
        box.start()
        box.complete()
        box.start()
        assert seen == [RUNNING, COMPLETING, RESETTING, RUNNING]

    def test_disappear_stops_everything(self):
        loop = AnimationLoop(tps=10)
        box = Box()
        loop.mount(box)
        loop.unmount(box)
        assert box.state == IDLE
        assert len(box.transitions) == 0

    def test_recycle_loops_back_to_running(self):
        box = Box(interactive=True)
        box.start()
        box.complete()
        box.recycle()
        assert box.state == RUNNING
        assert box.lifecycle.completions == 1


class TestCallbacks:
    def test_dispatch_runs_on_drain(self):
        box = Box()
        calls = []
        box.dispatch(lambda: calls.append(1))
        box.dispatch(None)
        assert calls == []
        box.drain()
        box.drain()
        assert calls == [1]

    def test_callback_runs_after_redraw(self):
        loop = AnimationLoop(tps=10)
        box = Box(interactive=True)
        loop.mount(box)
        loop.step()
        order = []
        box.side.value = 55.0
        box.dispatch(lambda: order.append(("callback", box.redraws)))
        loop.step()
        assert order == [("callback", 2)]

    def test_failing_callback_is_logged_and_isolated(self, caplog):
        box = Box()
        calls = []

        def boom():
            raise RuntimeError("boom")

        box.dispatch(boom)
        box.dispatch(lambda: calls.append(1))
        with caplog.at_level(logging.ERROR, logger="soothe_widgets.base"):
            box.drain()
        assert calls == [1]
        assert "Box callback failed" in caplog.text

    def test_unmount_drops_pending_callbacks(self):
        """Callbacks queued before or after removal never fire on remount."""
        calls = []
        box = Box(interactive=True)
        loop = AnimationLoop(tps=10)
        loop.mount(box)
        box.dispatch(lambda: calls.append("before"))
        loop.unmount(box)
        for _ in range(1000):
            box.dispatch(lambda: calls.append("while removed"))

        other = AnimationLoop(tps=10)
        other.mount(box)
        other.step()
        assert calls == []

        box.dispatch(lambda: calls.append("after"))
        other.step()
        assert calls == ["after"]


def test_repr_names_class():
    assert repr(Box()).startswith("Box(")
