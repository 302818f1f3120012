"""Child app construction from declarations."""

from typing import Any, Mapping

import structlog

from app_tree.apps.errors import ConfigurationError
from app_tree.apps.models import AppDeclaration
from app_tree.apps.options import merge_app_options

logger = structlog.get_logger()


def build_app(
    declaration: Any,
    options: Mapping[str, Any] | None = None,
    *,
    shared_options: Mapping[str, Any] | None = None,
) -> Any:
    """Instantiate an app from a class, class path, descriptor or declaration.

    The app class is called with one positional argument, the effective
    options dict. The built app is not registered anywhere.
    """
    if declaration is None:
        raise ConfigurationError()

    resolved = AppDeclaration.from_value(declaration)
    effective = merge_app_options(shared_options, resolved.options, options)

    logger.debug(
        "Building app",
        app_class=getattr(resolved.app_class, "__name__", repr(resolved.app_class)),
        described=resolved.described,
        option_keys=sorted(effective),
    )

    return resolved.app_class(effective)
