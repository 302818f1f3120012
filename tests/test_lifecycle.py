"""Tests for app_tree.apps.lifecycle."""

from unittest.mock import MagicMock

import pytest

from app_tree import App, ChildAppRegistry, LifecycleController, View

from sample_apps import RecordingApp


@pytest.fixture
def owner():
    owner = App()
    owner.set_view(View(regions=["main"]))
    return owner


@pytest.fixture
def registry(owner):
    return ChildAppRegistry(owner=owner)


@pytest.fixture
def controller(registry, owner):
    return LifecycleController(registry, owner)


class TestStartOptions:

    def test_direct_declaration_gets_region_none(self, registry, controller):
        registry.add("one", App)

        assert controller.start_options("one") == {"region": None}

    def test_region_name_resolves_owner_region(self, owner, registry, controller):
        registry.add("one", {"app_class": App, "region_name": "main"})

        assert controller.start_options("one")["region"] is owner.get_region("main")

    def test_unknown_region_name_gives_none(self, registry, controller):
        registry.add("one", {"app_class": App, "region_name": "missing"})

        assert controller.start_options("one") == {"region": None}

    def test_call_options_can_override_region(self, registry, controller):
        registry.add("one", {"app_class": App, "region_name": "main"})
        region = object()

        assert controller.start_options("one", {"region": region})["region"] is region

    def test_instances_added_directly_have_no_declaration(self, registry, controller):
        registry.add("one", App())

        assert controller.start_options("one", {"x": 1}) == {"region": None, "x": 1}

    def test_fresh_dict_each_call(self, registry, controller):
        registry.add("one", App)

        first = controller.start_options("one")
        first["extra"] = True

        assert controller.start_options("one") == {"region": None}


class TestStart:

    def test_start_invokes_hooks_and_returns_child(self, registry, controller):
        child = registry.add("one", RecordingApp)

        assert controller.start("one", {"foo": "bar"}) is child
        assert child.is_running()
        assert child.calls == [
            ("before:start", {"region": None, "foo": "bar"}),
            ("start", {"region": None, "foo": "bar"}),
        ]

    def test_start_missing_returns_none(self, controller):
        assert controller.start("nope") is None

    def test_start_twice_calls_child_start_twice(self, registry, controller):
        child = registry.add("one", App)
        child.start = MagicMock(return_value=child)

        controller.start("one")
        controller.start("one")

        assert child.start.call_count == 2

    def test_hook_errors_propagate(self, registry, controller):
        class Broken(App):
            def on_start(self, options):
                raise RuntimeError("boom")

        registry.add("one", Broken)

        with pytest.raises(RuntimeError, match="boom"):
            controller.start("one")


class TestStop:

    def test_stop_passes_options_unchanged(self, registry, controller):
        child = registry.add("one", RecordingApp)
        controller.start("one")
        options = {"foo": "bar"}

        assert controller.stop("one", options) is child
        assert not child.is_running()
        assert child.calls[-1] == ("stop", options)
        assert child.calls[-1][1] is options

    def test_stop_without_options(self, registry, controller):
        child = registry.add("one", App)
        child.stop = MagicMock(return_value=child)

        controller.stop("one")

        child.stop.assert_called_once_with(None)

    def test_stop_missing_returns_none(self, controller):
        assert controller.stop("nope") is None
