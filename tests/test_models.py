"""Tests for child app declarations and the app factory."""

import pytest

from app_tree import App, AppDeclaration, ConfigurationError, build_app
from app_tree.apps.models import resolve_app_class


class TestAppDeclaration:

    def test_class_is_direct(self):
        declaration = AppDeclaration.from_value(App)

        assert declaration.app_class is App
        assert declaration.options == {}
        assert declaration.region_name is None
        assert declaration.get_options == ()
        assert not declaration.described

    def test_descriptor_is_described(self):
        declaration = AppDeclaration.from_value({
            "app_class": App,
            "region_name": "main",
            "get_options": ["foo", "bar"],
            "baz_option": True,
        })

        assert declaration.described
        assert declaration.app_class is App
        assert declaration.options == {"baz_option": True}
        assert declaration.region_name == "main"
        assert declaration.get_options == ("foo", "bar")

    def test_single_get_options_key(self):
        declaration = AppDeclaration(app_class=App, get_options="foo")

        assert declaration.get_options == ("foo",)

    def test_declaration_passes_through(self):
        declaration = AppDeclaration(app_class=App)

        assert AppDeclaration.from_value(declaration) is declaration

    def test_class_path_string(self):
        assert AppDeclaration.from_value("app_tree.apps:App").app_class is App
        assert AppDeclaration.from_value("app_tree.apps.App").app_class is App

    def test_descriptor_with_class_path(self):
        declaration = AppDeclaration.from_value({"app_class": "app_tree.apps:App", "x": 1})

        assert declaration.app_class is App
        assert declaration.options == {"x": 1}

    @pytest.mark.parametrize("value", [None, 42, {"baz_option": True}, {"app_class": None}, {"app_class": 3}])
    def test_unusable_values_raise(self, value):
        with pytest.raises(ConfigurationError, match="App build failed. Incorrect configuration."):
            AppDeclaration.from_value(value)

    def test_declaration_is_frozen(self):
        declaration = AppDeclaration(app_class=App)

        with pytest.raises(AttributeError):
            declaration.region_name = "other"


class TestResolveAppClass:

    def test_unknown_module(self):
        with pytest.raises(ConfigurationError, match="Cannot import app class"):
            resolve_app_class("app_tree.no_such_module:App")

    def test_unknown_attribute(self):
        with pytest.raises(ConfigurationError, match="Cannot import app class"):
            resolve_app_class("app_tree.apps:NoSuchApp")

    def test_not_a_path(self):
        with pytest.raises(ConfigurationError, match="Invalid app class path"):
            resolve_app_class("App")

    def test_not_callable(self):
        with pytest.raises(ConfigurationError, match="not callable"):
            resolve_app_class("app_tree.apps.models:RESERVED_KEYS")


class TestBuildApp:

    def test_builds_class_with_options(self):
        app = build_app(App, {"foo": "bar"})

        assert isinstance(app, App)
        assert app.get_option("foo") == "bar"

    def test_builds_descriptor_with_merged_options(self):
        app = build_app(
            {"app_class": App, "declared": "d", "both": "declared"},
            {"both": "call"},
            shared_options={"shared": "s", "both": "shared"},
        )

        assert app.options == {"shared": "s", "declared": "d", "both": "call"}

    def test_callable_factory(self):
        built = []

        def make_app(options):
            app = App(options)
            built.append(app)
            return app

        app = build_app(make_app, {"x": 1})

        assert built == [app]
        assert app.get_option("x") == 1

    def test_none_raises(self):
        with pytest.raises(ConfigurationError):
            build_app(None)

    def test_options_are_a_fresh_dict(self):
        options = {"x": 1}

        app = build_app(App, options)
        app.options["x"] = 2

        assert options == {"x": 1}
