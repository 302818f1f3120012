"""Base app component with options, lifecycle and regions."""

from typing import Any, Iterable, Mapping

import structlog

from app_tree.apps.child_apps import ChildAppsMixin
from app_tree.apps.errors import AppDestroyedError
from app_tree.apps.events import EventsMixin

logger = structlog.get_logger()


class App(ChildAppsMixin, EventsMixin):
    """A long-lived application component.

    Options given at construction are kept in `options`. Class attributes
    act as defaults for `get_option`, so subclasses can declare
    `start_with_parent = True` or any option of their own.

    Lifecycle events: before:start, start, before:stop, stop,
    before:destroy, destroy. Subclasses hook in with `on_start(options)`
    and friends.
    """

    # Start at the end of construction
    start_after_initialized = False
    # Start when the parent starts, or when added to a running parent
    start_with_parent = False
    # Stop when the parent stops
    stop_with_parent = True
    # Survive parent destruction and removal from the parent
    prevent_destroy = False

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.options: dict[str, Any] = dict(options or {})
        self._name: str | None = None
        self._is_running = False
        self._is_destroyed = False
        self._region: Any = None
        self._view: Any = None

        self._init_child_apps(self.options)
        self.initialize(self.options)

        if self.get_option("start_after_initialized"):
            self.start()

    def initialize(self, options: dict[str, Any]) -> None:
        """Hook for subclasses, called after child apps are added."""
        pass

    def get_option(self, key: str) -> Any:
        """Get an option value, falling back to the attribute of the same name."""
        if key in self.options:
            return self.options[key]
        return getattr(self, key, None)

    def merge_options(self, options: Mapping[str, Any] | None, keys: Iterable[str]) -> None:
        """Copy the listed keys present in `options` onto this app."""
        if not options:
            return
        for key in keys:
            if key in options:
                setattr(self, key, options[key])

    def get_name(self) -> str | None:
        """Name under which a parent registered this app, if any."""
        return self._name

    def is_running(self) -> bool:
        return self._is_running

    def is_destroyed(self) -> bool:
        return self._is_destroyed

    def _ensure_app_is_intact(self) -> None:
        if self._is_destroyed:
            raise AppDestroyedError("App has already been destroyed and cannot be used.")

    def start(self, options: Mapping[str, Any] | None = None) -> "App":
        """Start the app. Starting a running app does nothing."""
        self._ensure_app_is_intact()

        if self._is_running:
            logger.debug("App already running", app=self._name)
            return self

        options = dict(options or {})
        if options.get("region") is not None:
            self.set_region(options["region"])

        self.trigger("before:start", options)
        self._is_running = True
        self.trigger("start", options)
        return self

    def stop(self, options: Mapping[str, Any] | None = None) -> "App":
        """Stop the app. Stopping an app that is not running does nothing."""
        if not self._is_running:
            return self

        self.trigger("before:stop", options)
        self._is_running = False
        self.trigger("stop", options)
        return self

    def destroy(self) -> "App":
        """Stop the app, fire `destroy` and drop every listener."""
        if self._is_destroyed:
            return self

        self.trigger("before:destroy")
        self.stop()

        self._is_destroyed = True
        self.trigger("destroy", self)
        self.off()
        return self

    def set_region(self, region: Any) -> Any:
        self._region = region
        return region

    def get_region(self, name: str | None = None) -> Any:
        """Get this app's own region, or the named region of its view."""
        if name is None:
            return self._region
        if self._view is None:
            return None
        return self._view.get_region(name)

    def set_view(self, view: Any) -> Any:
        self._view = view
        return view

    def get_view(self) -> Any:
        return self._view

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._name} (running={self._is_running})>"
