"""Pytest configuration and fixtures for Hue CLI tests."""

import pytest
from pathlib import Path

from models.types import Config

BRIDGE_IP = '192.168.1.2'
USERNAME = 'test-user'
BASE_URL = f'http://{BRIDGE_IP}/api'
LIGHTS_URL = f'{BASE_URL}/{USERNAME}/lights'


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(tmp_path):
    """Return a config file location inside a temporary directory."""
    return tmp_path / 'config.json'


@pytest.fixture
def config():
    """Return a paired configuration with one alias."""
    return Config(url=BRIDGE_IP, username=USERNAME, aliases={'desk': 'Lamp 1'})


@pytest.fixture
def lights_payload():
    """Return a v1 light list, keyed by bridge light ID."""
    return {
        '1': {'name': 'Lamp 1', 'state': {'on': True, 'bri': 254}},
        '2': {'name': 'Lamp 2', 'state': {'on': False, 'bri': 0}},
        '3': {'name': 'Plug', 'state': {'on': True}},
    }
