"""Child app declaration models."""

import importlib
from dataclasses import dataclass, field
from typing import Any, Callable

from app_tree.apps.errors import ConfigurationError

# Descriptor keys that configure the registry rather than the child itself
RESERVED_KEYS = ("app_class", "region_name", "get_options")


@dataclass(frozen=True)
class AppDeclaration:
    """A resolved child app declaration.

    A bare class resolves to a direct declaration. A descriptor mapping
    resolves to a described one carrying its extra options, the parent
    region it binds to and the parent keys it pulls at start time.
    """

    app_class: Callable[..., Any]
    options: dict[str, Any] = field(default_factory=dict)
    region_name: str | None = None
    get_options: tuple[str, ...] = ()
    described: bool = False

    def __post_init__(self):
        """Ensure get_options is a tuple of key names."""
        if isinstance(self.get_options, str):
            object.__setattr__(self, "get_options", (self.get_options,))
        elif not isinstance(self.get_options, tuple):
            object.__setattr__(self, "get_options", tuple(self.get_options or ()))

    @classmethod
    def from_value(cls, value: Any) -> "AppDeclaration":
        """Resolve a class, class path, descriptor or declaration."""
        if isinstance(value, AppDeclaration):
            return value

        if isinstance(value, dict):
            return cls._from_descriptor(value)

        if isinstance(value, str):
            return cls(app_class=resolve_app_class(value))

        if callable(value):
            return cls(app_class=value)

        raise ConfigurationError()

    @classmethod
    def _from_descriptor(cls, descriptor: dict[str, Any]) -> "AppDeclaration":
        app_class = descriptor.get("app_class")
        if isinstance(app_class, str):
            app_class = resolve_app_class(app_class)

        if not callable(app_class):
            raise ConfigurationError()

        return cls(
            app_class=app_class,
            options={k: v for k, v in descriptor.items() if k not in RESERVED_KEYS},
            region_name=descriptor.get("region_name"),
            get_options=descriptor.get("get_options") or (),
            described=True,
        )


def resolve_app_class(path: str) -> Callable[..., Any]:
    """Import an app class from `package.module:Class` or `package.module.Class`."""
    if ":" in path:
        module_path, _, attr = path.partition(":")
    else:
        module_path, _, attr = path.rpartition(".")

    if not module_path or not attr:
        raise ConfigurationError(f"Invalid app class path: {path!r}")

    try:
        module = importlib.import_module(module_path)
        app_class = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot import app class {path!r}: {e}") from e

    if not callable(app_class):
        raise ConfigurationError(f"App class is not callable: {path!r}")

    return app_class
