"""Per-parent registry of named child apps."""

from typing import Any, Iterator, Mapping

import structlog

from app_tree.apps.binder import SelfRemovalBinder
from app_tree.apps.errors import DuplicateNameError
from app_tree.apps.factory import build_app
from app_tree.apps.models import AppDeclaration

logger = structlog.get_logger()


def is_app_instance(value: Any) -> bool:
    """Check whether a value is an already built app rather than a declaration."""
    if isinstance(value, (type, str, dict, AppDeclaration)):
        return False
    return callable(getattr(value, "start", None)) and callable(getattr(value, "on", None))


class ChildAppRegistry:
    """Registry of the child apps owned by one parent app.

    Each parent gets its own registry. Names are unique until removed.
    """

    def __init__(self, owner: Any = None):
        self.owner = owner
        self._apps: dict[str, Any] = {}
        self._declarations: dict[str, AppDeclaration | None] = {}
        self._binder = SelfRemovalBinder(self.remove)

    def _shared_options(self) -> Mapping[str, Any] | None:
        if self.owner is None:
            return None
        return getattr(self.owner, "child_app_options", None)

    def ensure_unique(self, name: str) -> None:
        """Raise DuplicateNameError if `name` is already registered."""
        if name in self._apps:
            raise DuplicateNameError(name)

    def add(self, name: str, app: Any = None, options: Mapping[str, Any] | None = None) -> Any:
        """Build (unless given an instance) and register a child app.

        Uniqueness is checked before anything is constructed.
        """
        self.ensure_unique(name)

        if is_app_instance(app):
            declaration = None
            instance = app
        else:
            declaration = AppDeclaration.from_value(app) if app is not None else None
            instance = build_app(declaration, options, shared_options=self._shared_options())

        instance._name = name
        self._apps[name] = instance
        self._declarations[name] = declaration
        self._binder.bind(name, instance)

        logger.debug("Added child app", app=name, app_class=type(instance).__name__)
        return instance

    def add_many(self, apps: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> None:
        """Add each declaration in the mapping's order."""
        for name, app in apps.items():
            self.add(name, app, options)

    def get(self, name: str) -> Any | None:
        """Get a child app by name, or None if not registered."""
        return self._apps.get(name)

    def get_all(self) -> dict[str, Any]:
        """Get a copy of the name to app mapping."""
        return dict(self._apps)

    def declaration(self, name: str) -> AppDeclaration | None:
        """Get the declaration a child app was built from."""
        return self._declarations.get(name)

    def remove(self, name: str) -> Any | None:
        """Detach a child app and clear its name.

        Returns the detached app, or None if the name was not registered.
        """
        app = self._apps.pop(name, None)
        if app is None:
            return None

        self._declarations.pop(name, None)
        self._binder.unbind(name)
        app._name = None

        logger.debug("Removed child app", app=name)
        return app

    def remove_all(self) -> dict[str, Any]:
        """Remove every child app and return what was removed."""
        removed = self.get_all()
        for name in removed:
            self.remove(name)
        return removed

    def __len__(self) -> int:
        return len(self._apps)

    def __contains__(self, name: object) -> bool:
        return name in self._apps

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._apps))
