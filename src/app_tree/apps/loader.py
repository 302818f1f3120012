"""Build app trees from YAML manifests."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from app_tree.apps.application import App
from app_tree.apps.models import resolve_app_class

logger = structlog.get_logger()


def load_app_tree(config_path: str | Path) -> App:
    """Load a root app and its declared child apps from a YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Apps config file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f)

    if not config:
        raise ValueError("Empty apps configuration file")

    logger.info("Loading app tree", config_path=str(config_path))
    return build_app_tree(config)


def build_app_tree(config: dict[str, Any]) -> App:
    """Build a root app from a manifest mapping.

    Recognized keys: `app_class` (class or import path, defaults to App),
    `options`, `child_app_options` and `child_apps`. Child declarations may
    name their class by import path and may nest `child_apps` of their own.
    """
    if not isinstance(config, dict):
        raise ValueError("Apps configuration must be a mapping")

    app_class = config.get("app_class") or App
    if isinstance(app_class, str):
        app_class = resolve_app_class(app_class)

    options = dict(config.get("options") or {})

    child_apps = config.get("child_apps")
    if child_apps is not None:
        if not isinstance(child_apps, dict):
            raise ValueError("child_apps must be a mapping of name to declaration")
        options["child_apps"] = child_apps

    child_app_options = config.get("child_app_options")
    if child_app_options is not None:
        if not isinstance(child_app_options, dict):
            raise ValueError("child_app_options must be a mapping")
        options["child_app_options"] = child_app_options

    root = app_class(options)

    logger.info(
        "Loaded app tree",
        app_class=type(root).__name__,
        child_apps=list(root.get_child_apps()),
    )
    return root


def describe_app_tree(app: App) -> dict[str, Any]:
    """Summarize an app and its children as nested dicts."""
    return {
        "name": app.get_name(),
        "app_class": type(app).__name__,
        "running": app.is_running(),
        "child_apps": [describe_app_tree(child) for child in app.get_child_apps().values()],
    }
