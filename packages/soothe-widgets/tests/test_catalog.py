"""Tests for the showcase catalog."""

import pytest
from soothe import AnimationLoop
from soothe_widgets import CATALOG, Fill, Label, Stroke, Widget, build_widget, names
from soothe_widgets.catalog import get


def test_every_component_listed_once():
    listed = names()
    assert len(listed) == 18
    assert len(set(listed)) == len(listed)
    assert listed[0] == "progress_button"
    assert listed[-1] == "navigation_bar"


def test_titles_present():
    assert all(entry.title for entry in CATALOG)


def test_unknown_component():
    with pytest.raises(KeyError):
        get("spinning_teapot")
    with pytest.raises(KeyError):
        build_widget("spinning_teapot")


def test_builds_fresh_instances():
    assert build_widget("harmony_spinner") is not build_widget("harmony_spinner")


@pytest.mark.parametrize("name", names())
def test_component_runs(name):
    """Every component mounts, animates, takes a tap, and renders scene items."""
    loop = AnimationLoop(tps=60)
    widget = build_widget(name)
    assert isinstance(widget, Widget)
    w, h = widget.size
    assert w > 0 and h > 0
    loop.mount(widget)
    loop.run(30)
    assert widget.tap() == widget.interactive
    loop.run(90)
    assert widget.redraws > 0
    assert all(isinstance(item, (Fill, Stroke, Label)) for item in widget.scene)
    loop.unmount(widget)


def test_all_components_share_one_loop():
    loop = AnimationLoop(tps=60)
    widgets = [entry.build() for entry in CATALOG]
    for widget in widgets:
        loop.mount(widget)
    loop.run(120)
    assert all(widget.redraws > 0 for widget in widgets)


@pytest.mark.parametrize("entry", CATALOG, ids=lambda entry: entry.name)
def test_entry_knows_interactivity_without_building(entry):
    widget = entry.build()
    assert type(widget) is entry.kind
    assert entry.interactive == widget.interactive
