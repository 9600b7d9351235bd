"""
Shared test fixtures for the yamltree test suite.
"""

import pytest

PROFILE_TEXT = """\
name: Alice
age: 30
bio: |
  Line one

  Line three
active: true
"""


@pytest.fixture
def profile_text():
    """Small document exercising scalars and a literal block."""
    return PROFILE_TEXT


@pytest.fixture
def profile_tree():
    """Tree expected from parsing `profile_text`."""
    return {
        "name": "Alice",
        "age": 30,
        "bio": "Line one\n\nLine three",
        "active": True,
    }


@pytest.fixture
def nested_tree():
    """Tree with nested mappings at several depths."""
    return {
        "server": {
            "host": "localhost",
            "port": 8080,
            "tls": {"enabled": False, "cert": "server.pem"},
        },
        "debug": True,
    }
