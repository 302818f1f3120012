"""Automatic deregistration of destroyed child apps."""

from typing import Any, Callable

import structlog

logger = structlog.get_logger()


class SelfRemovalBinder:
    """Attach `destroy` listeners that remove a child from its registry."""

    def __init__(self, remove: Callable[[str], Any]):
        self._remove = remove
        self._bound: dict[str, tuple[Any, Callable[..., None]]] = {}

    def bind(self, name: str, app: Any) -> None:
        """Remove `name` from the registry when `app` is destroyed."""
        self.unbind(name)

        def on_destroy(*args: Any) -> None:
            logger.debug("Child app destroyed", app=name)
            self._remove(name)

        app.on("destroy", on_destroy)
        self._bound[name] = (app, on_destroy)

    def unbind(self, name: str) -> None:
        """Detach the listener bound for `name`, if any."""
        bound = self._bound.pop(name, None)
        if bound is None:
            return

        app, on_destroy = bound
        app.off("destroy", on_destroy)
