"""Exceptions raised by the child app registry and app lifecycle."""


class AppTreeError(Exception):
    """Base class for app tree errors."""

    pass


class ConfigurationError(AppTreeError):
    """Raised when a child app declaration cannot be turned into an app."""

    def __init__(self, message: str = "App build failed. Incorrect configuration."):
        super().__init__(message)


class DuplicateNameError(AppTreeError):
    """Raised when a child app name is already registered on a parent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'A child App with name "{name}" has already been added.')


class AppDestroyedError(AppTreeError):
    """Raised when a lifecycle method is called on a destroyed app."""

    pass
