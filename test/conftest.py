"""
Shared pytest configuration and fixtures for the microconfig tests.
"""

import pytest


@pytest.fixture
def phone_schema():
    """Nested schema with a default and a required leaf."""
    return {
        'phone': {
            'schema': {
                'type': {'default': 'mobile'},
                'number': {'required': True},
            }
        }
    }


@pytest.fixture
def character_defaults():
    """Defaults and required keys for flat configuration tests."""
    return {
        'required': ['class', 'level'],
        'defaults': {'status': 'normal'},
    }


class CallCounter:
    """Zero-argument producer that counts its invocations."""

    def __init__(self, value=42):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


@pytest.fixture
def counter():
    return CallCounter()


@pytest.fixture
def write_config(tmp_path):
    """Write `content` to a file under tmp_path and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write
