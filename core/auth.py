"""
Authentication module for Hue Bridge.

Handles bridge discovery through the Philips N-UPnP service and link button
pairing, which exchanges a physical button press for a bridge username.
"""

import socket
from pathlib import Path

import click
import requests

from core.config import save_config
from core.controller import HueController
from core.errors import (
    BridgeConnectionError,
    DiscoveryError,
    PairingError,
    UnexpectedResponseError,
)
from models.envelope import ErrorEnvelope
from models.types import Config, DiscoveredBridge

HUE_DISCOVER_URL = 'https://discovery.meethue.com/'
APPLICATION_NAME = 'hue-cli'


def discover_bridges() -> list[DiscoveredBridge]:
    """Discover Hue bridges on the network using N-UPnP.

    Uses the Philips discovery service at https://discovery.meethue.com/
    to find bridges on the same network.

    Returns:
        List of bridge dicts with keys: id, internalipaddress, port

    Raises:
        DiscoveryError: If the service answers with a non-200 status
        BridgeConnectionError: If the service cannot be reached
        UnexpectedResponseError: If the body is not a list of bridges
    """
    try:
        response = requests.get(HUE_DISCOVER_URL)
    except requests.exceptions.RequestException as e:
        raise BridgeConnectionError(f"Unable to connect to discover service: {e}") from e

    if response.status_code != requests.codes.ok:
        raise DiscoveryError(
            f"Failed to contact {HUE_DISCOVER_URL}. Status code: {response.status_code}"
        )

    try:
        bridges = response.json()
    except ValueError as e:
        raise UnexpectedResponseError(f"Failed to parse discovery response: {response.text!r}") from e

    if not isinstance(bridges, list) or not all(
        isinstance(b, dict) and isinstance(b.get('internalipaddress'), str) for b in bridges
    ):
        raise UnexpectedResponseError(f"Failed to parse discovery response: {bridges!r}")

    return bridges


def discover_bridge(path: str | Path | None = None) -> Config:
    """Find the bridge and point a fresh config at it.

    The first bridge reported wins. The saved username and aliases are
    dropped since the new bridge may be a different device.

    Args:
        path: Optional config file location

    Returns:
        The newly saved Config
    """
    bridges = discover_bridges()
    if not bridges:
        raise UnexpectedResponseError("Discovery service did not report any hue bridge")

    ip = bridges[0]['internalipaddress']
    click.echo(f"Hue bridge is located at {ip}")

    config = Config(url=ip)
    save_config(config, path)
    return config


def device_type() -> str:
    """Return the devicetype sent when pairing, e.g. ``hue-cli#laptop``."""
    return f"{APPLICATION_NAME}#{socket.gethostname()}"


def login(config: Config, path: str | Path | None = None) -> Config:
    """Create a new API username via link button authentication.

    Requires the user to press the physical link button on the Hue bridge
    before confirming the prompt. There is a single attempt; run the command
    again if the button was not pressed in time.

    Args:
        config: Current configuration (url and aliases are kept)
        path: Optional config file location

    Returns:
        The saved Config holding the new username

    Raises:
        PairingError: If the bridge answers with an error
    """
    devicetype = device_type()
    click.echo(devicetype)

    # Gate on the operator; the entered text is irrelevant
    click.prompt(
        "Press the link button on the hue bridge, then press enter to continue",
        default='',
        show_default=False,
        prompt_suffix=' ',
    )

    envelope = HueController(config).create_user(devicetype)[0]

    if isinstance(envelope, ErrorEnvelope):
        raise PairingError(
            "Unable to login to the philips hue bridge for the following reason: "
            f"{envelope.description}"
        )

    success = envelope.success
    username = success.get('username') if isinstance(success, dict) else None
    if not isinstance(username, str):
        raise UnexpectedResponseError(f"Unable to read the response from the hue bridge: {envelope!r}")

    new_config = Config(url=config.url, username=username, aliases=dict(config.aliases))
    save_config(new_config, path)
    click.secho("✓ Successfully created API username!", fg='green', bold=True)
    return new_config
