"""Pytest configuration and shared fixtures."""
import pytest

import fluentbuilder.config as config_module


class Point:
    """Target with a zero-argument constructor and setter methods."""

    def __init__(self):
        self.x = 0
        self.y = 0
        self.label = None

    def set_x(self, value):
        self.x = value

    def set_y(self, value):
        self.y = value


class Recorder:
    """Target that records the order in which values arrive."""

    def __init__(self):
        self.events = []

    def record(self, value):
        self.events.append(value)


class NeedsArgs:
    """Target whose constructor requires arguments."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


class ExplodingInit:
    """Target whose constructor raises."""

    def __init__(self):
        raise RuntimeError("boom")


class Counter:
    """Supplier that returns 1, 2, 3, ... on successive calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


@pytest.fixture(autouse=True)
def restore_builder_config():
    """Restore the default builder config after each test."""
    original = config_module._builder_config
    yield
    config_module._builder_config = original


@pytest.fixture
def counter():
    """Provide a fresh counting supplier."""
    return Counter()
