"""Type definitions for Hue CLI.

This module provides the persisted configuration dataclass along with the
structures decoded from bridge responses.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict

DEFAULT_URL = "127.0.0.1"


class DiscoveredBridge(TypedDict):
    """Bridge information from N-UPnP discovery."""
    id: str
    internalipaddress: str
    port: int


@dataclass
class Config:
    """Credentials and aliases persisted between invocations."""
    url: str = DEFAULT_URL
    username: str = ""
    aliases: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            'url': self.url,
            'username': self.username,
            'aliases': dict(self.aliases),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a Config from decoded JSON.

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")

        for key in ('url', 'username', 'aliases'):
            if key not in data:
                raise ValueError(f"missing field '{key}'")

        url = data['url']
        username = data['username']
        aliases = data['aliases']

        if not isinstance(url, str):
            raise ValueError("field 'url' must be a string")
        if not isinstance(username, str):
            raise ValueError("field 'username' must be a string")
        if not isinstance(aliases, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in aliases.items()
        ):
            raise ValueError("field 'aliases' must map strings to strings")

        return cls(url=url, username=username, aliases=dict(aliases))


@dataclass(frozen=True)
class Light:
    """A light as reported by the bridge inventory."""
    name: str
    on: bool
    bri: int | None = None

    @classmethod
    def from_api(cls, payload: Any) -> "Light":
        """Parse a single v1 light record.

        Raises:
            ValueError: If the record lacks a name or on-state
        """
        if not isinstance(payload, dict):
            raise ValueError("light record is not an object")

        name = payload.get('name')
        state = payload.get('state')
        if not isinstance(name, str) or not isinstance(state, dict):
            raise ValueError("light record needs 'name' and 'state'")

        on = state.get('on')
        if not isinstance(on, bool):
            raise ValueError(f"light '{name}' has no boolean 'on' state")

        # Minimal variant omits brightness (e.g. on/off plugs)
        bri = state.get('bri')
        if bri is not None and (isinstance(bri, bool) or not isinstance(bri, int)):
            raise ValueError(f"light '{name}' has a non-integer brightness")

        return cls(name=name, on=on, bri=bri)
