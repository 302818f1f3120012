"""Shared fixtures for the app tree test suite."""

import pytest

from app_tree import App

from sample_apps import FooApp


@pytest.fixture
def my_app():
    return FooApp()


@pytest.fixture
def child_apps():
    return {
        "cA1": App,
        "cA2": App,
        "cA3": App,
    }
