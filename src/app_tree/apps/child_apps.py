"""Child app management for parent apps."""

from typing import Any, Mapping

import structlog

from app_tree.apps.errors import ConfigurationError
from app_tree.apps.factory import build_app
from app_tree.apps.lifecycle import LifecycleController
from app_tree.apps.registry import ChildAppRegistry

logger = structlog.get_logger()


class ChildAppsMixin:
    """Give an app a registry of named child apps.

    Children are declared with `child_apps`, either a mapping of name to
    declaration or a callable taking the construction options and
    returning one. `child_app_options` are shared with every child.
    """

    child_apps: Any = None
    child_app_options: Mapping[str, Any] | None = None

    _child_apps: ChildAppRegistry
    _child_app_lifecycle: LifecycleController

    def _init_child_apps(self, options: Mapping[str, Any]) -> None:
        self._child_apps = ChildAppRegistry(owner=self)
        self._child_app_lifecycle = LifecycleController(self._child_apps, owner=self)

        self.merge_options(options, ["child_apps", "child_app_options"])

        child_apps = self.child_apps
        if child_apps is not None:
            if callable(child_apps):
                child_apps = child_apps(options)
            if not isinstance(child_apps, Mapping):
                raise ConfigurationError()
            self.child_apps = child_apps
            self.add_child_apps(child_apps)

        self.on("start", self._start_child_apps)
        self.on("before:stop", self._stop_child_apps)
        self.on("before:destroy", self._destroy_child_apps)

    def _start_child_apps(self, *args: Any) -> None:
        for name, child_app in self._child_apps.get_all().items():
            if child_app.get_option("start_with_parent"):
                self.start_child_app(name)

    def _stop_child_apps(self, *args: Any) -> None:
        for name, child_app in self._child_apps.get_all().items():
            if child_app.is_running() and child_app.get_option("stop_with_parent"):
                self.stop_child_app(name)

    def _destroy_child_apps(self, *args: Any) -> None:
        for child_app in self._child_apps.get_all().values():
            if not child_app.get_option("prevent_destroy"):
                child_app.destroy()

    def _ensure_app_is_unique(self, app_name: str) -> None:
        self._child_apps.ensure_unique(app_name)

    def build_app(self, app_class: Any, options: Mapping[str, Any] | None = None) -> Any:
        """Build an app with this app's shared child options, without adding it."""
        return build_app(app_class, options, shared_options=self.child_app_options)

    def add_child_apps(self, child_apps: Mapping[str, Any]) -> None:
        """Add every child app in the mapping, in order."""
        for app_name, app_class in child_apps.items():
            self.add_child_app(app_name, app_class)

    def add_child_app(
        self,
        app_name: str,
        app_class: Any = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build and register a child app under `app_name`.

        A child that starts with its parent is started right away when this
        app is already running.
        """
        self._ensure_app_is_intact()
        child_app = self._child_apps.add(app_name, app_class, options)

        if self.is_running() and child_app.get_option("start_with_parent"):
            self.start_child_app(app_name)

        return child_app

    def get_child_apps(self) -> dict[str, Any]:
        return self._child_apps.get_all()

    def get_child_app(self, app_name: str) -> Any | None:
        return self._child_apps.get(app_name)

    def remove_child_app(self, app_name: str, prevent_destroy: bool = False) -> Any | None:
        """Remove a child app and destroy it unless destruction is prevented.

        Returns the removed app, or None if no child has that name.
        """
        child_app = self._child_apps.remove(app_name)
        if child_app is None:
            return None

        if not (prevent_destroy or child_app.get_option("prevent_destroy")):
            child_app.destroy()

        return child_app

    def remove_child_apps(self) -> dict[str, Any]:
        """Remove every child app and return them by name."""
        child_apps = self.get_child_apps()
        for app_name in child_apps:
            self.remove_child_app(app_name)
        return child_apps

    def start_child_app(self, app_name: str, options: Mapping[str, Any] | None = None) -> Any | None:
        self._ensure_app_is_intact()
        return self._child_app_lifecycle.start(app_name, options)

    def stop_child_app(self, app_name: str, options: Mapping[str, Any] | None = None) -> Any | None:
        return self._child_app_lifecycle.stop(app_name, options)
