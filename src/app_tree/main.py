"""App tree runner - Main entry point."""

import sys
import time
from pathlib import Path

import structlog

from app_tree.apps import App, load_app_tree
from app_tree.apps.loader import describe_app_tree
from app_tree.config import Settings, get_settings
from app_tree.utils import setup_logging

logger = structlog.get_logger()


def load_root_app(settings: Settings) -> App:
    """Load the root app from the configured manifest, exiting on failure."""
    config_path = Path(settings.apps_config_path)
    if not config_path.is_absolute():
        # Relative to current working directory
        config_path = Path.cwd() / config_path

    try:
        return load_app_tree(config_path)
    except FileNotFoundError:
        logger.error(
            "Apps configuration file not found",
            config_path=str(config_path),
        )
        sys.exit(1)
    except Exception as e:
        logger.exception("Failed to load apps configuration", error=str(e))
        sys.exit(1)


def run_tree() -> None:
    """Start the app tree and keep it running until it stops or is interrupted."""
    settings = get_settings()

    setup_logging(settings.log_level, settings.log_format)

    root = load_root_app(settings)

    root.start()
    logger.info("App tree started", tree=describe_app_tree(root))

    try:
        while root.is_running():
            time.sleep(settings.poll_interval_seconds)
    finally:
        logger.info("Shutting down app tree...")
        root.destroy()


def main() -> None:
    """Main entry point."""
    try:
        run_tree()
    except KeyboardInterrupt:
        logger.info("App tree stopped by user")
    except Exception as e:
        logger.exception("App tree crashed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
