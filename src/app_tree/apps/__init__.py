"""Apps module - App component, child app registry and lifecycle."""

from app_tree.apps.application import App
from app_tree.apps.errors import (
    AppDestroyedError,
    AppTreeError,
    ConfigurationError,
    DuplicateNameError,
)
from app_tree.apps.factory import build_app
from app_tree.apps.lifecycle import LifecycleController
from app_tree.apps.loader import build_app_tree, load_app_tree
from app_tree.apps.models import AppDeclaration
from app_tree.apps.options import merge_app_options
from app_tree.apps.registry import ChildAppRegistry

__all__ = [
    "App",
    "AppDeclaration",
    "AppDestroyedError",
    "AppTreeError",
    "ChildAppRegistry",
    "ConfigurationError",
    "DuplicateNameError",
    "LifecycleController",
    "build_app",
    "build_app_tree",
    "load_app_tree",
    "merge_app_options",
]
