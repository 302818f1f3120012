"""Starting and stopping registered child apps by name."""

from typing import Any, Mapping

import structlog

from app_tree.apps.options import merge_app_options
from app_tree.apps.registry import ChildAppRegistry

logger = structlog.get_logger()


class LifecycleController:
    """Start and stop the children of one parent app."""

    def __init__(self, registry: ChildAppRegistry, owner: Any):
        self.registry = registry
        self.owner = owner

    def start_options(self, name: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Build the options a child is started with.

        `region` is always present: the owner's region named by the
        declaration, or None. Keys listed in the declaration's `get_options`
        are read from the owner now. Call options win over both.
        """
        declaration = self.registry.declaration(name)
        region_name = declaration.region_name if declaration else None
        pull_keys = declaration.get_options if declaration else ()

        region = self.owner.get_region(region_name) if region_name else None

        return merge_app_options(
            {"region": region},
            None,
            options,
            owner=self.owner,
            pull_keys=pull_keys,
        )

    def start(self, name: str, options: Mapping[str, Any] | None = None) -> Any | None:
        """Start a child app. Returns the child, or None if not registered."""
        app = self.registry.get(name)
        if app is None:
            logger.debug("Child app not found", app=name, action="start")
            return None

        start_options = self.start_options(name, options)

        logger.info("Starting child app", app=name)
        app.start(start_options)
        return app

    def stop(self, name: str, options: Mapping[str, Any] | None = None) -> Any | None:
        """Stop a child app with `options` passed through unchanged.

        Returns the child, or None if not registered.
        """
        app = self.registry.get(name)
        if app is None:
            logger.debug("Child app not found", app=name, action="stop")
            return None

        logger.info("Stopping child app", app=name)
        app.stop(options)
        return app
