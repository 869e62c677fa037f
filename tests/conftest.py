"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from underbar import ManualTimer, set_default_clock, set_default_timer, set_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment after every test."""
    yield
    set_settings(None)


@pytest.fixture
def manual_timer():
    """ManualTimer installed as the default clock and timer."""
    timer = ManualTimer()
    previous_timer = set_default_timer(timer)
    previous_clock = set_default_clock(timer)
    yield timer
    set_default_timer(previous_timer)
    set_default_clock(previous_clock)


@dataclass
class Person:
    name: str
    age: int | None


@pytest.fixture
def people():
    return [Person("moe", 40), Person("larry", 50), Person("curly", 60)]
