"""Minimal synchronous event hooks for apps."""

from typing import Any, Callable

Listener = Callable[..., Any]


class EventsMixin:
    """Named event listeners plus `on_<event>` method hooks.

    `trigger("before:start", options)` calls every listener registered for
    ``before:start`` and then ``self.on_before_start(options)`` if the class
    defines it.
    """

    _listeners: dict[str, list[Listener]]

    def _ensure_listeners(self) -> dict[str, list[Listener]]:
        if "_listeners" not in self.__dict__:
            self._listeners = {}
        return self._listeners

    def on(self, event: str, callback: Listener) -> "EventsMixin":
        """Register a listener for an event."""
        self._ensure_listeners().setdefault(event, []).append(callback)
        return self

    def off(self, event: str | None = None, callback: Listener | None = None) -> "EventsMixin":
        """Remove listeners.

        With no arguments every listener is dropped. With only an event name
        every listener for that event is dropped.
        """
        listeners = self._ensure_listeners()

        if event is None:
            listeners.clear()
            return self

        if callback is None:
            listeners.pop(event, None)
            return self

        remaining = [cb for cb in listeners.get(event, []) if cb != callback]
        if remaining:
            listeners[event] = remaining
        else:
            listeners.pop(event, None)
        return self

    def listeners(self, event: str) -> list[Listener]:
        """Get a copy of the listeners registered for an event."""
        return list(self._ensure_listeners().get(event, []))

    def trigger(self, event: str, *args: Any) -> None:
        """Fire an event: listeners first, then the matching `on_*` method."""
        # Copy so listeners may unbind themselves while firing
        for callback in self.listeners(event):
            callback(*args)

        hook = getattr(self, _hook_name(event), None)
        if callable(hook):
            hook(*args)


def _hook_name(event: str) -> str:
    return "on_" + event.replace(":", "_")
