"""App tree - hierarchies of named, lifecycle-managed application components."""

from app_tree.apps import (
    App,
    AppDeclaration,
    AppDestroyedError,
    AppTreeError,
    ChildAppRegistry,
    ConfigurationError,
    DuplicateNameError,
    LifecycleController,
    build_app,
    build_app_tree,
    load_app_tree,
    merge_app_options,
)
from app_tree.regions import Region, View

__all__ = [
    "App",
    "AppDeclaration",
    "AppDestroyedError",
    "AppTreeError",
    "ChildAppRegistry",
    "ConfigurationError",
    "DuplicateNameError",
    "LifecycleController",
    "Region",
    "View",
    "build_app",
    "build_app_tree",
    "load_app_tree",
    "merge_app_options",
]
