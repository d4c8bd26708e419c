"""HueController class for managing Hue Bridge API interactions.

This module contains the controller that handles all communication with the
Philips Hue Bridge over the v1 HTTP API: connection tests, the light
inventory, pairing requests and light state updates.
"""

from typing import Any

import click
import requests

from core.errors import BridgeConnectionError, UnexpectedResponseError
from models.envelope import Envelope, decode_envelopes
from models.types import Config, Light

HUE_BASE_PATH = '/api'


class HueController:
    """Manages requests to a single Hue Bridge using API v1."""

    def __init__(self, config: Config):
        """Initialise HueController.

        Args:
            config: Loaded configuration providing the bridge URL and username
        """
        self.config = config
        self.base_url = f"http://{config.url}{HUE_BASE_PATH}"
        self.session = requests.Session()

    @property
    def lights_url(self) -> str:
        return f"{self.base_url}/{self.config.username}/lights"

    def _request(self, method: str, url: str, data: dict | None = None) -> requests.Response:
        """Send a request to the bridge.

        No timeout is set; the call blocks until the bridge answers.

        Raises:
            BridgeConnectionError: If the request cannot be sent
        """
        try:
            return self.session.request(method, url, json=data)
        except requests.exceptions.RequestException as e:
            raise BridgeConnectionError(f"Unable to connect to the hue bridge on {url}: {e}") from e

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResponseError(
                f"Unable to read the response from the hue bridge: {response.text!r}"
            ) from e

    def test_connection(self) -> bool:
        """Check that the bridge answers on its API base path."""
        response = self._request('GET', self.base_url)

        if response.status_code == requests.codes.ok:
            click.echo(f"Able to connect to the hue bridge on {self.base_url}")
            return True

        click.echo(f"Issue connecting to the hue bridge {self.base_url}")
        return False

    def get_all_lights(self) -> list[Light]:
        """Get all lights in the order the bridge lists them.

        A non-200 answer is reported on stdout and yields an empty list, so
        callers see the same result as for a bridge without lights.

        Raises:
            UnexpectedResponseError: If the body is not an object of light records
        """
        url = self.lights_url
        response = self._request('GET', url)

        if response.status_code != requests.codes.ok:
            click.echo(f"Failed to contact {url}. Status code: {response.status_code}")
            return []

        payload = self._decode(response)
        if not isinstance(payload, dict):
            raise UnexpectedResponseError(f"Unexpected light list from the hue bridge: {payload!r}")

        lights = []
        for light_id, record in payload.items():
            try:
                lights.append(Light.from_api(record))
            except ValueError as e:
                raise UnexpectedResponseError(f"Failed to parse light {light_id}: {e}") from e
        return lights

    def list_lights(self):
        """Print every light with its on/off state."""
        for light in self.get_all_lights():
            status = "ON" if light.on else "OFF"
            click.echo(f"{light.name}: {status}")

    def create_user(self, devicetype: str) -> list[Envelope]:
        """Ask the bridge for a new username (requires the link button)."""
        response = self._request('POST', self.base_url, {'devicetype': devicetype})
        return decode_envelopes(self._decode(response))

    def set_light_state(self, address: int, body: dict) -> list[Envelope]:
        """Send a state update to the light at the given 1-based address."""
        url = f"{self.lights_url}/{address}/state"
        response = self._request('PUT', url, body)
        return decode_envelopes(self._decode(response))
