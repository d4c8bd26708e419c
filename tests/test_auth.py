"""Tests for bridge discovery and link button pairing in core/auth.py"""

import json

import pytest
import requests
import responses
from unittest.mock import MagicMock, patch
from core.auth import HUE_DISCOVER_URL, device_type, discover_bridge, discover_bridges, login
from core.config import load_config, save_config
from core.errors import (
    BridgeConnectionError,
    DiscoveryError,
    PairingError,
    RecoverableError,
    UnexpectedResponseError,
)
from models.types import Config
from tests.conftest import BASE_URL

DISCOVERY_PAYLOAD = [
    {'id': 'ecb5fafffe123456', 'internalipaddress': '192.168.1.20', 'port': 443},
    {'id': 'ecb5fafffe654321', 'internalipaddress': '192.168.1.30', 'port': 443},
]


class TestDiscoverBridges:
    """Test the N-UPnP discovery request."""

    @responses.activate
    def test_returns_bridges(self):
        responses.add(responses.GET, HUE_DISCOVER_URL, json=DISCOVERY_PAYLOAD)

        assert discover_bridges() == DISCOVERY_PAYLOAD

    @responses.activate
    def test_non_200_is_recoverable(self):
        responses.add(responses.GET, HUE_DISCOVER_URL, status=429)

        with pytest.raises(DiscoveryError) as exc_info:
            discover_bridges()

        assert isinstance(exc_info.value, RecoverableError)
        assert str(exc_info.value) == f"Failed to contact {HUE_DISCOVER_URL}. Status code: 429"

    @pytest.mark.parametrize('payload', [{'bridges': []}, [{'id': 'x'}], ['192.168.1.20']])
    @responses.activate
    def test_malformed_response(self, payload):
        responses.add(responses.GET, HUE_DISCOVER_URL, json=payload)

        with pytest.raises(UnexpectedResponseError):
            discover_bridges()

    @responses.activate
    def test_unreachable(self):
        responses.add(responses.GET, HUE_DISCOVER_URL, body=requests.exceptions.ConnectionError('dns'))

        with pytest.raises(BridgeConnectionError):
            discover_bridges()


class TestDiscoverBridge:
    """Test that discovery rewrites the config."""

    @responses.activate
    def test_first_bridge_wins_and_resets_config(self, config_path, capsys):
        save_config(Config(url='10.0.0.1', username='old', aliases={'desk': 'Lamp 1'}), config_path)
        responses.add(responses.GET, HUE_DISCOVER_URL, json=DISCOVERY_PAYLOAD)

        result = discover_bridge(config_path)

        assert result == Config(url='192.168.1.20')
        assert load_config(config_path) == Config(url='192.168.1.20')
        assert "Hue bridge is located at 192.168.1.20" in capsys.readouterr().out

    @responses.activate
    def test_empty_list_is_fatal(self, config_path):
        responses.add(responses.GET, HUE_DISCOVER_URL, json=[])

        with pytest.raises(UnexpectedResponseError):
            discover_bridge(config_path)

        assert not config_path.exists()

    @responses.activate
    def test_non_200_leaves_config(self, config_path):
        original = Config(url='10.0.0.1', username='old')
        save_config(original, config_path)
        responses.add(responses.GET, HUE_DISCOVER_URL, status=500)

        with pytest.raises(DiscoveryError):
            discover_bridge(config_path)

        assert load_config(config_path) == original


class TestDeviceType:

    @patch('core.auth.socket.gethostname')
    def test_format(self, mock_hostname):
        mock_hostname.return_value = 'laptop'
        assert device_type() == 'hue-cli#laptop'


@pytest.fixture
def mock_prompt(monkeypatch):
    """Stand in for the operator pressing enter."""
    prompt = MagicMock(return_value='')
    monkeypatch.setattr('core.auth.click.prompt', prompt)
    monkeypatch.setattr('core.auth.device_type', lambda: 'hue-cli#laptop')
    return prompt


class TestLogin:
    """Test link button pairing."""

    @responses.activate
    def test_success_saves_username(self, mock_prompt, config, config_path):
        config.username = ''
        responses.add(responses.POST, BASE_URL, json=[{'success': {'username': 'new-user'}}])

        result = login(config, config_path)

        assert result == Config(url=config.url, username='new-user', aliases={'desk': 'Lamp 1'})
        assert load_config(config_path) == result
        mock_prompt.assert_called_once()
        assert json.loads(responses.calls[0].request.body) == {'devicetype': 'hue-cli#laptop'}

    @responses.activate
    def test_link_button_not_pressed(self, mock_prompt, config, config_path):
        responses.add(responses.POST, BASE_URL, json=[{
            'error': {'type': 101, 'address': '', 'description': 'link button not pressed'}
        }])

        with pytest.raises(PairingError) as exc_info:
            login(config, config_path)

        assert str(exc_info.value) == (
            "Unable to login to the philips hue bridge for the following reason: "
            "link button not pressed"
        )
        assert not config_path.exists()
        # Single attempt, no retry loop
        assert len(responses.calls) == 1

    @responses.activate
    def test_success_without_username_is_unexpected(self, mock_prompt, config, config_path):
        responses.add(responses.POST, BASE_URL, json=[{'success': {'clientkey': 'abc'}}])

        with pytest.raises(UnexpectedResponseError):
            login(config, config_path)

    @responses.activate
    def test_unknown_shape_is_unexpected(self, mock_prompt, config, config_path):
        responses.add(responses.POST, BASE_URL, json={'status': 'ok'})

        with pytest.raises(UnexpectedResponseError):
            login(config, config_path)
